"""Seven-parameter Bursa-Wolf (Helmert) similarity transformation.

Transforms geocentric Cartesian positions between two datums related by a
translation ``t``, a small rotation ``w`` and a scale difference ``ds``:

.. math::

    x' = (1 + ds) \\, R(w) \\, x + t

The rotation uses the conventional small-angle approximation rather than a
product of trigonometric rotation matrices.  For the position vector
convention:

.. math::

    R(w) = I + [w]_\\times =
    \\begin{bmatrix}
        1 & -r_z & r_y \\\\
        r_z & 1 & -r_x \\\\
        -r_y & r_x & 1
    \\end{bmatrix}

and its transpose for the coordinate frame convention.  The inverse is the
exact algebraic inverse ``x = R^{-1} (x' - t) / (1 + ds)``, so a forward and
inverse pair reproduces the input to float round-off.

Parameters are given in metres, arc-seconds and parts-per-million; all
positions are in metres.

References:
    1. IOGP Publication 373-7-2, *Geomatics Guidance Note 7, part 2:
       Coordinate Conversions and Transformations including Formulas*,
       2019, Sec. 4.4.3.
"""

from __future__ import annotations

from collections.abc import Sequence

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from datumjax.config import get_dtype
from datumjax.coordinates import GeocentricCoordinate
from datumjax.transforms._types import RotationConvention, TransformParameters
from datumjax.utils import arcsec_to_radians, ppm_to_scale_factor


def rotation_small_angle(
    rx: ArrayLike,
    ry: ArrayLike,
    rz: ArrayLike,
    convention: RotationConvention = RotationConvention.POSITION_VECTOR,
) -> Array:
    """Small-angle rotation matrix for rotations about the X, Y and Z axes.

    Args:
        rx: Rotation about the x-axis in *rad*.
        ry: Rotation about the y-axis in *rad*.
        rz: Rotation about the z-axis in *rad*.
        convention: Sign convention of the rotations.

    Returns:
        jax.Array: 3x3 matrix ``I + skew(w)`` (position vector) or its
            transpose (coordinate frame).

    Example:
        >>> from datumjax.transforms import rotation_small_angle
        >>> R = rotation_small_angle(0.0, 0.0, 1e-6)
        >>> float(R[1, 0])
        1e-06
    """
    R = jnp.array(
        [
            [1.0, -rz, ry],
            [rz, 1.0, -rx],
            [-ry, rx, 1.0],
        ],
        dtype=get_dtype(),
    )
    if RotationConvention(convention) is RotationConvention.COORDINATE_FRAME:
        return R.T
    return R


def _derive(
    params: TransformParameters, convention: RotationConvention
) -> tuple[Array, Array, Array]:
    """Translation vector, rotation matrix and scale factor for *params*."""
    translation = jnp.array([params.tx, params.ty, params.tz], dtype=get_dtype())
    rx, ry, rz = arcsec_to_radians(jnp.array([params.rx, params.ry, params.rz]))
    rotation = rotation_small_angle(rx, ry, rz, convention)
    scale = ppm_to_scale_factor(params.ppm)
    return translation, rotation, scale


def position_bursa_wolf(
    x: ArrayLike,
    params: TransformParameters,
    convention: RotationConvention = RotationConvention.POSITION_VECTOR,
) -> Array:
    """Apply a Bursa-Wolf transformation to geocentric positions.

    Args:
        x: Position ``[x, y, z]`` in *m*, or an array of positions with
            shape ``(N, 3)``.
        params: Transformation parameters.
        convention: Sign convention of the rotation parameters.

    Returns:
        jax.Array: Transformed position(s), same shape as *x*.

    Example:
        >>> import jax.numpy as jnp
        >>> from datumjax.transforms import TransformParameters, position_bursa_wolf
        >>> params = TransformParameters(tx=1.0)
        >>> float(position_bursa_wolf(jnp.zeros(3), params)[0])
        1.0
    """
    x = jnp.asarray(x, dtype=get_dtype())
    t, R, s = _derive(TransformParameters(*params), convention)
    return s * (x @ R.T) + t


def position_bursa_wolf_inverse(
    x: ArrayLike,
    params: TransformParameters,
    convention: RotationConvention = RotationConvention.POSITION_VECTOR,
) -> Array:
    """Invert a Bursa-Wolf transformation of geocentric positions.

    Solves ``x' = s R x + t`` for ``x`` exactly.

    Args:
        x: Transformed position ``[x, y, z]`` in *m*, or shape ``(N, 3)``.
        params: Parameters of the forward transformation.
        convention: Sign convention of the rotation parameters.

    Returns:
        jax.Array: Original position(s), same shape as *x*.
    """
    x = jnp.asarray(x, dtype=get_dtype())
    t, R, s = _derive(TransformParameters(*params), convention)
    return ((x - t) / s) @ jnp.linalg.inv(R).T


class RigidBodyTransform:
    """A fixed seven-parameter similarity transformation.

    The translation vector, rotation matrix, inverse rotation matrix and
    scale factor are derived once at construction, so applying the same
    transform to many positions does not repeat that work.

    Args:
        params: The seven transformation parameters, either a
            :class:`TransformParameters` or any sequence
            ``(tx, ty, tz, rx, ry, rz, ppm)``.
        convention: Sign convention of the rotation parameters.

    Examples:
        ```python
        from datumjax.coordinates import GeocentricCoordinate
        from datumjax.transforms import RigidBodyTransform, TransformParameters
        bw = RigidBodyTransform(TransformParameters(tx=0.1, rz=0.002, ppm=-0.5))
        bw.apply_to(GeocentricCoordinate(-4.7e6, 0.8e6, -4.1e6))
        ```
    """

    __slots__ = (
        "_params",
        "_convention",
        "_translation",
        "_rotation",
        "_rotation_inv",
        "_scale",
    )

    def __init__(
        self,
        params: TransformParameters | Sequence[float],
        convention: RotationConvention = RotationConvention.POSITION_VECTOR,
    ) -> None:
        self._params = TransformParameters(*params)
        self._convention = RotationConvention(convention)
        self._translation, self._rotation, self._scale = _derive(
            self._params, self._convention
        )
        self._rotation_inv = jnp.linalg.inv(self._rotation)

    @property
    def params(self) -> TransformParameters:
        return self._params

    @property
    def convention(self) -> RotationConvention:
        return self._convention

    @property
    def translation(self) -> Array:
        """Translation vector ``[tx, ty, tz]`` in *m*."""
        return self._translation

    @property
    def rotation(self) -> Array:
        """Small-angle rotation matrix (3x3)."""
        return self._rotation

    @property
    def scale(self) -> Array:
        """Scale factor ``1 + ppm * 1e-6``."""
        return self._scale

    def apply(self, x: ArrayLike) -> Array:
        """Transform position(s) of shape ``(3,)`` or ``(N, 3)``."""
        x = jnp.asarray(x, dtype=get_dtype())
        return self._scale * (x @ self._rotation.T) + self._translation

    def apply_inverse(self, x: ArrayLike) -> Array:
        """Inverse-transform position(s) of shape ``(3,)`` or ``(N, 3)``."""
        x = jnp.asarray(x, dtype=get_dtype())
        return ((x - self._translation) / self._scale) @ self._rotation_inv.T

    def apply_to(self, coord: GeocentricCoordinate) -> GeocentricCoordinate:
        """Apply the transformation to a coordinate.

        Args:
            coord: Coordinate to transform.  It is not modified.

        Returns:
            GeocentricCoordinate: Transformed coordinate with the input epoch.
        """
        return coord.with_xyz(self.apply(coord.xyz))

    def apply_inverse_to(self, coord: GeocentricCoordinate) -> GeocentricCoordinate:
        """Apply the inverse transformation to a coordinate.

        Args:
            coord: Coordinate to transform.  It is not modified.

        Returns:
            GeocentricCoordinate: Transformed coordinate with the input epoch.
        """
        return coord.with_xyz(self.apply_inverse(coord.xyz))

    def __repr__(self) -> str:
        return (
            f"RigidBodyTransform({self._params!r}, "
            f"convention={self._convention})"
        )
