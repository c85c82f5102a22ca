"""Time-dependent (14-parameter) Bursa-Wolf datum transformation.

Combines a base seven-parameter transformation, valid at a reference epoch,
with an optional velocity model that corrects each coordinate from its own
observation epoch to that reference epoch.

Forward application corrects for the velocity first and then applies the
base transformation; the inverse reverses both steps in the opposite order.

The ``velocity`` rates are applied over ``t0 - t`` (reference epoch minus
coordinate epoch), so to first order the effective parameters at epoch
``t`` are ``P0 + velocity * (t0 - t)``.  Published 14-parameter sets
(IERS ITRF tables, EPSG method 1053) instead give ``P(t) = P0 + Pdot *
(t - t0)``; their rates are the negation of ``velocity``.  Use
:meth:`TimeDependentBursaWolf.from_published_rates` for such sets.
"""

from __future__ import annotations

from collections.abc import Sequence

from datumjax.coordinates import GeocentricCoordinate
from datumjax.exceptions import UndefinedEpochError
from datumjax.transforms._types import (
    RotationConvention,
    TransformParameters,
    VelocityParameters,
)
from datumjax.transforms.bursa_wolf import RigidBodyTransform
from datumjax.transforms.epoch_transform import CoordinateEpochTransform


class TimeDependentBursaWolf:
    """Base Bursa-Wolf transformation with an optional velocity model.

    Args:
        base: Parameters of the transformation at the reference epoch.
        reference_epoch: Definition epoch of *velocity* (decimal year).
            Required when *velocity* is given.
        velocity: Yearly rates of the seven parameters, or ``None`` for a
            static transformation that ignores coordinate epochs.  The
            rates are applied over ``reference_epoch - epoch``, so they are
            the negation of IERS/EPSG published rates.
        convention: Sign convention shared by the base rotations and the
            rotation rates.

    Examples:
        ```python
        from datumjax.transforms import TimeDependentBursaWolf, TransformParameters
        datum = TimeDependentBursaWolf.from_published_rates(
            TransformParameters(tx=0.0007, ty=0.0012, tz=-0.0261, ppm=0.00212),
            reference_epoch=2000.0,
            rates=(0.0001, 0.0001, -0.0019, 0.0, 0.0, 0.0, 0.00011),
        )
        ```
    """

    __slots__ = ("_base", "_epoch_transform")

    def __init__(
        self,
        base: TransformParameters | Sequence[float],
        reference_epoch: float | None = None,
        velocity: VelocityParameters | Sequence[float] | None = None,
        convention: RotationConvention = RotationConvention.POSITION_VECTOR,
    ) -> None:
        self._base = RigidBodyTransform(base, convention)
        if velocity is None:
            self._epoch_transform = None
        else:
            if reference_epoch is None:
                raise ValueError("reference_epoch is required when velocity is given")
            self._epoch_transform = CoordinateEpochTransform(
                reference_epoch, velocity, convention
            )

    @classmethod
    def from_published_rates(
        cls,
        base: TransformParameters | Sequence[float],
        reference_epoch: float,
        rates: VelocityParameters | Sequence[float],
        convention: RotationConvention = RotationConvention.POSITION_VECTOR,
    ) -> TimeDependentBursaWolf:
        """Construct from a published 14-parameter set.

        Published sets give the parameters at epoch ``t`` as
        ``P(t) = base + rates * (t - reference_epoch)``.

        Args:
            base: Parameters at the reference epoch.
            reference_epoch: Epoch at which *base* applies (decimal year).
            rates: Published yearly rates ``(tx, ty, tz, rx, ry, rz, ppm)``
                in m/yr, arcsec/yr and ppm/yr.
            convention: Sign convention of the rotations and their rates.

        Returns:
            TimeDependentBursaWolf: Transformation whose parameters follow
                the published model to first order.
        """
        if len(rates) != 7:
            raise ValueError(f"Expected 7 velocity parameters, got {len(rates)}")
        velocity = VelocityParameters(*(float(r) for r in rates)).negated()
        return cls(base, reference_epoch, velocity, convention)

    @property
    def base_transform(self) -> RigidBodyTransform:
        return self._base

    @property
    def epoch_transform(self) -> CoordinateEpochTransform | None:
        return self._epoch_transform

    @property
    def ref_epoch(self) -> float | None:
        """Reference epoch of the velocity model, or ``None`` if static."""
        if self._epoch_transform is None:
            return None
        return self._epoch_transform.ref_epoch

    def apply_to(self, coord: GeocentricCoordinate) -> GeocentricCoordinate:
        """Transform a coordinate from the source to the target datum.

        Raises:
            UndefinedEpochError: If a velocity model is present and *coord*
                has no epoch.
        """
        if self._epoch_transform is not None:
            coord = self._epoch_transform.apply_to(coord)
        return self._base.apply_to(coord)

    def apply_inverse_to(self, coord: GeocentricCoordinate) -> GeocentricCoordinate:
        """Transform a coordinate from the target back to the source datum.

        Raises:
            UndefinedEpochError: If a velocity model is present and *coord*
                has no epoch.
        """
        if self._epoch_transform is not None and not coord.has_epoch():
            raise UndefinedEpochError(coord)
        coord = self._base.apply_inverse_to(coord)
        if self._epoch_transform is not None:
            coord = self._epoch_transform.apply_inverse_to(coord)
        return coord

    def __repr__(self) -> str:
        return (
            f"TimeDependentBursaWolf({self._base.params!r}, "
            f"epoch_transform={self._epoch_transform!r})"
        )
