"""Tests for the seven-parameter Bursa-Wolf transformation.

Covers the small-angle rotation matrix in both conventions, forward
formula against hand-computed values, exact inverse round trips for single
positions and arrays, coordinate wrappers, and JAX compatibility.
"""

import jax
import jax.numpy as jnp
import numpy as np
import pytest

from datumjax.constants import AS2RAD
from datumjax.coordinates import GeocentricCoordinate
from datumjax.transforms import (
    RigidBodyTransform,
    RotationConvention,
    TransformParameters,
    position_bursa_wolf,
    position_bursa_wolf_inverse,
    rotation_small_angle,
)

# ──────────────────────────────────────────────
# Tolerance constants (float64)
# ──────────────────────────────────────────────

_MAT_TOL = 1e-15
_POS_TOL = 1e-6  # metres
_ROUNDTRIP_TOL = 1e-8  # metres on ~6.4e6 m magnitudes

# Wellington, NZ (approximate geocentric position)
_WELLINGTON = jnp.array([-4780726.0, 436220.0, -4185288.0])

# Typical magnitude parameters (a few cm, a few mas, a few ppb)
_PARAMS = TransformParameters(
    tx=0.0213, ty=-0.0146, tz=0.0301, rx=0.00012, ry=-0.00034, rz=0.00058, ppm=-0.0015
)


class TestRotationSmallAngle:
    def test_identity_for_zero_rotation(self):
        R = rotation_small_angle(0.0, 0.0, 0.0)
        assert jnp.array_equal(R, jnp.eye(3))

    def test_position_vector_layout(self):
        """R = I + skew(w) in the position vector convention."""
        rx, ry, rz = 1e-6, 2e-6, 3e-6
        R = rotation_small_angle(rx, ry, rz)
        expected = jnp.array(
            [
                [1.0, -rz, ry],
                [rz, 1.0, -rx],
                [-ry, rx, 1.0],
            ]
        )
        assert jnp.allclose(R, expected, atol=_MAT_TOL)

    def test_coordinate_frame_is_transpose(self):
        R_pv = rotation_small_angle(1e-6, -2e-6, 3e-6)
        R_cf = rotation_small_angle(
            1e-6, -2e-6, 3e-6, RotationConvention.COORDINATE_FRAME
        )
        assert jnp.array_equal(R_cf, R_pv.T)

    def test_convention_accepts_string(self):
        R = rotation_small_angle(1e-6, 0.0, 0.0, "coordinate_frame")
        assert float(R[1, 2]) == pytest.approx(1e-6)

    def test_invalid_convention_raises(self):
        with pytest.raises(ValueError):
            rotation_small_angle(0.0, 0.0, 0.0, "helmert")


class TestPositionBursaWolf:
    def test_identity_parameters(self):
        out = position_bursa_wolf(_WELLINGTON, TransformParameters())
        assert jnp.array_equal(out, _WELLINGTON)

    def test_translation_only(self):
        params = TransformParameters(tx=1.0, ty=-2.0, tz=3.0)
        out = position_bursa_wolf(jnp.zeros(3), params)
        assert jnp.allclose(out, jnp.array([1.0, -2.0, 3.0]), atol=_POS_TOL)

    def test_scale_only(self):
        """1 ppm on a 6.4e6 m vector is 6.4 m."""
        params = TransformParameters(ppm=1.0)
        x = jnp.array([6.4e6, 0.0, 0.0])
        out = position_bursa_wolf(x, params)
        assert float(out[0]) == pytest.approx(6.4e6 + 6.4, abs=_POS_TOL)

    def test_rotation_about_z(self):
        """A +1 arcsec z rotation moves a point on the x-axis towards +y."""
        params = TransformParameters(rz=1.0)
        x = jnp.array([6.4e6, 0.0, 0.0])
        out = position_bursa_wolf(x, params)
        assert float(out[0]) == pytest.approx(6.4e6, abs=_POS_TOL)
        assert float(out[1]) == pytest.approx(6.4e6 * AS2RAD, abs=_POS_TOL)

    def test_matches_hand_computation(self):
        p = _PARAMS
        x, y, z = (float(v) for v in _WELLINGTON)
        rx, ry, rz = p.rx * AS2RAD, p.ry * AS2RAD, p.rz * AS2RAD
        s = 1.0 + p.ppm * 1e-6
        expected = np.array(
            [
                p.tx + s * (x - rz * y + ry * z),
                p.ty + s * (rz * x + y - rx * z),
                p.tz + s * (-ry * x + rx * y + z),
            ]
        )
        out = position_bursa_wolf(_WELLINGTON, p)
        assert np.allclose(np.asarray(out), expected, rtol=0.0, atol=_POS_TOL)

    def test_coordinate_frame_equals_negated_rotations(self):
        cf = position_bursa_wolf(
            _WELLINGTON, _PARAMS, RotationConvention.COORDINATE_FRAME
        )
        negated = _PARAMS._replace(rx=-_PARAMS.rx, ry=-_PARAMS.ry, rz=-_PARAMS.rz)
        pv = position_bursa_wolf(_WELLINGTON, negated)
        assert jnp.allclose(cf, pv, atol=_POS_TOL)

    def test_accepts_plain_sequence(self):
        out = position_bursa_wolf(jnp.zeros(3), (1.0, 0, 0, 0, 0, 0, 0))
        assert float(out[0]) == pytest.approx(1.0)

    def test_batch_shape(self):
        xs = jnp.stack([_WELLINGTON, 2.0 * _WELLINGTON, -_WELLINGTON])
        out = position_bursa_wolf(xs, _PARAMS)
        assert out.shape == (3, 3)
        for i in range(3):
            single = position_bursa_wolf(xs[i], _PARAMS)
            assert jnp.allclose(out[i], single, atol=_POS_TOL)


class TestPositionBursaWolfInverse:
    @pytest.mark.parametrize(
        "convention",
        [RotationConvention.POSITION_VECTOR, RotationConvention.COORDINATE_FRAME],
    )
    def test_roundtrip(self, convention):
        fwd = position_bursa_wolf(_WELLINGTON, _PARAMS, convention)
        back = position_bursa_wolf_inverse(fwd, _PARAMS, convention)
        assert jnp.allclose(back, _WELLINGTON, rtol=0.0, atol=_ROUNDTRIP_TOL)

    def test_roundtrip_large_parameters(self):
        """Exact inverse holds beyond the small-parameter regime."""
        params = TransformParameters(
            tx=-120.0, ty=80.0, tz=300.0, rx=5.0, ry=-3.0, rz=2.0, ppm=10.0
        )
        fwd = position_bursa_wolf(_WELLINGTON, params)
        back = position_bursa_wolf_inverse(fwd, params)
        assert jnp.allclose(back, _WELLINGTON, rtol=0.0, atol=_ROUNDTRIP_TOL)

    def test_negated_parameters_first_order(self):
        """Negated parameters approximate the inverse to sub-millimetre."""
        fwd = position_bursa_wolf(_WELLINGTON, _PARAMS)
        approx = position_bursa_wolf(fwd, _PARAMS.negated())
        assert jnp.allclose(approx, _WELLINGTON, rtol=0.0, atol=1e-4)


class TestRigidBodyTransform:
    def test_derived_state(self):
        bw = RigidBodyTransform(_PARAMS)
        assert jnp.allclose(bw.translation, jnp.array([0.0213, -0.0146, 0.0301]))
        assert float(bw.scale) == pytest.approx(1.0 - 0.0015e-6, abs=1e-15)
        assert bw.rotation.shape == (3, 3)
        assert bw.params == _PARAMS
        assert bw.convention is RotationConvention.POSITION_VECTOR

    def test_apply_matches_function(self):
        bw = RigidBodyTransform(_PARAMS)
        assert jnp.allclose(
            bw.apply(_WELLINGTON),
            position_bursa_wolf(_WELLINGTON, _PARAMS),
            rtol=0.0,
            atol=1e-9,
        )

    def test_apply_inverse_matches_function(self):
        bw = RigidBodyTransform(_PARAMS, RotationConvention.COORDINATE_FRAME)
        expected = position_bursa_wolf_inverse(
            _WELLINGTON, _PARAMS, RotationConvention.COORDINATE_FRAME
        )
        assert jnp.allclose(bw.apply_inverse(_WELLINGTON), expected, rtol=0.0, atol=1e-9)

    def test_apply_to_returns_new_coordinate(self):
        bw = RigidBodyTransform(TransformParameters(tx=1.0))
        crd = GeocentricCoordinate(10.0, 20.0, 30.0, epoch=2010.5)
        out = bw.apply_to(crd)

        assert out is not crd
        assert crd == GeocentricCoordinate(10.0, 20.0, 30.0, epoch=2010.5)
        assert float(out.x) == pytest.approx(11.0)
        assert float(out.y) == pytest.approx(20.0)
        assert float(out.z) == pytest.approx(30.0)
        assert out.epoch == 2010.5

    def test_apply_inverse_to_roundtrip(self):
        bw = RigidBodyTransform(_PARAMS)
        crd = GeocentricCoordinate.from_xyz(_WELLINGTON, epoch=None)
        back = bw.apply_inverse_to(bw.apply_to(crd))
        assert back.isclose(crd, atol=_ROUNDTRIP_TOL)
        assert back.epoch is None

    def test_array_of_positions(self):
        bw = RigidBodyTransform(_PARAMS)
        xs = jnp.stack([_WELLINGTON, _WELLINGTON + 1000.0])
        back = bw.apply_inverse(bw.apply(xs))
        assert jnp.allclose(back, xs, rtol=0.0, atol=_ROUNDTRIP_TOL)

    def test_wrong_parameter_count_raises(self):
        with pytest.raises(TypeError):
            RigidBodyTransform((1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0))

    def test_non_finite_propagates(self):
        bw = RigidBodyTransform(TransformParameters(tx=float("nan")))
        out = bw.apply(_WELLINGTON)
        assert bool(jnp.isnan(out[0]))
        assert not bool(jnp.isnan(out[1]))

    def test_repr(self):
        assert "RigidBodyTransform" in repr(RigidBodyTransform(_PARAMS))


class TestJAXCompatibility:
    def test_jit(self):
        f = jax.jit(lambda x: position_bursa_wolf(x, _PARAMS))
        assert jnp.allclose(
            f(_WELLINGTON), position_bursa_wolf(_WELLINGTON, _PARAMS), atol=1e-9
        )

    def test_vmap(self):
        xs = jnp.stack([_WELLINGTON, 0.5 * _WELLINGTON])
        out = jax.vmap(lambda x: position_bursa_wolf(x, _PARAMS))(xs)
        assert jnp.allclose(out, position_bursa_wolf(xs, _PARAMS), atol=1e-9)

    def test_grad_wrt_translation(self):
        """d(x')/d(tx) is exactly one."""

        def first_component(tx):
            params = _PARAMS._replace(tx=tx)
            return position_bursa_wolf(_WELLINGTON, params)[0]

        assert float(jax.grad(first_component)(0.0213)) == pytest.approx(1.0)
