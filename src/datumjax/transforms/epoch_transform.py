"""Velocity-aware Bursa-Wolf transformation driven by coordinate epochs.

:class:`CoordinateEpochTransform` corrects a geocentric coordinate for the
drift between two datums accumulated between the coordinate's observation
epoch and the reference epoch of a velocity model.  It is the epoch
correction layer used in conjunction with a base seven-parameter
transformation (see :class:`~datumjax.transforms.datum.TimeDependentBursaWolf`).

Interval conventions, in years:

- forward (:meth:`~CoordinateEpochTransform.apply_to`):
  ``reference_epoch - coordinate_epoch``.  The velocity propagated over
  this interval brings the coordinate back to the reference epoch.
- inverse (:meth:`~CoordinateEpochTransform.apply_inverse_to`):
  ``coordinate_epoch - reference_epoch``.  The forward drift is removed, so
  ``apply_inverse_to(apply_to(c))`` reproduces ``c``.

Both directions share one cached transform per epoch: the cache is keyed
on the forward interval, and the inverse direction uses the exact inverse
of that transform.
"""

from __future__ import annotations

from collections.abc import Sequence

from datumjax.coordinates import GeocentricCoordinate
from datumjax.exceptions import UndefinedEpochError
from datumjax.transforms._cache import EpochTransformCache
from datumjax.transforms._types import RotationConvention, VelocityParameters


class CoordinateEpochTransform:
    """Bursa-Wolf velocity parameters propagated to each coordinate's epoch.

    Args:
        reference_epoch: Decimal year at which the velocity offset is zero.
        velocity: Yearly parameter rates, either a
            :class:`VelocityParameters` or any sequence
            ``(tx, ty, tz, rx, ry, rz, ppm)`` in m/yr, arcsec/yr and ppm/yr.
        convention: Sign convention of the rotation rates.

    Each instance owns a single-slot cache of the transform built for the
    most recent interval.  Calling one instance from several threads at once
    is not safe; use one instance per worker or guard it with a lock.

    Examples:
        ```python
        from datumjax.coordinates import GeocentricCoordinate
        from datumjax.transforms import CoordinateEpochTransform
        bwv = CoordinateEpochTransform(2000.0, (0.001, 0, 0, 0, 0, 0, 0))
        bwv.apply_to(GeocentricCoordinate(0.0, 0.0, 0.0, epoch=1990.0))
        ```
    """

    __slots__ = ("_ref_epoch", "_velocity", "_cache")

    def __init__(
        self,
        reference_epoch: float,
        velocity: VelocityParameters | Sequence[float],
        convention: RotationConvention = RotationConvention.POSITION_VECTOR,
    ) -> None:
        if len(velocity) != 7:
            raise ValueError(
                f"Expected 7 velocity parameters, got {len(velocity)}"
            )
        self._ref_epoch = float(reference_epoch)
        self._velocity = VelocityParameters(*(float(v) for v in velocity))
        self._cache = EpochTransformCache(convention)

    @classmethod
    def from_rates(
        cls,
        reference_epoch: float,
        vtx: float,
        vty: float,
        vtz: float,
        vrx: float,
        vry: float,
        vrz: float,
        vppm: float,
        convention: RotationConvention = RotationConvention.POSITION_VECTOR,
    ) -> CoordinateEpochTransform:
        """Construct from the reference epoch and seven individual rates.

        Args:
            reference_epoch: Definition epoch of the velocity parameters.
            vtx: X translation rate [m/yr].
            vty: Y translation rate [m/yr].
            vtz: Z translation rate [m/yr].
            vrx: X rotation rate [arcsec/yr].
            vry: Y rotation rate [arcsec/yr].
            vrz: Z rotation rate [arcsec/yr].
            vppm: Scale rate [ppm/yr].
            convention: Sign convention of the rotation rates.

        Returns:
            CoordinateEpochTransform: New transform.
        """
        return cls(
            reference_epoch,
            VelocityParameters(vtx, vty, vtz, vrx, vry, vrz, vppm),
            convention,
        )

    @property
    def ref_epoch(self) -> float:
        """Definition epoch of the velocity parameters (decimal year)."""
        return self._ref_epoch

    @property
    def velocity(self) -> VelocityParameters:
        return self._velocity

    @property
    def convention(self) -> RotationConvention:
        return self._cache.convention

    @property
    def cached_interval(self) -> float | None:
        """Forward interval of the cached transform, or ``None`` if none built."""
        return self._cache.interval

    def elapsed_interval(
        self, coord: GeocentricCoordinate, inverse: bool = False
    ) -> float:
        """Signed interval in years between *coord* and the reference epoch.

        Args:
            coord: Coordinate with a defined epoch.
            inverse: Return the inverse-direction interval
                ``epoch - ref_epoch`` instead of ``ref_epoch - epoch``.

        Returns:
            float: Elapsed interval in years.

        Raises:
            UndefinedEpochError: If *coord* has no epoch.
        """
        if not coord.has_epoch():
            raise UndefinedEpochError(coord)
        epoch = float(coord.epoch)
        if inverse:
            return epoch - self._ref_epoch
        return self._ref_epoch - epoch

    def apply_to(self, coord: GeocentricCoordinate) -> GeocentricCoordinate:
        """Correct a coordinate from its own epoch to the reference epoch.

        Args:
            coord: Coordinate to transform.  It is not modified.

        Returns:
            GeocentricCoordinate: Transformed coordinate carrying the input
                epoch.  When the epoch equals the reference epoch an
                unchanged copy is returned and no transform is built.

        Raises:
            UndefinedEpochError: If *coord* has no epoch.  The cache is left
                untouched.
        """
        interval = self.elapsed_interval(coord)
        if interval == 0.0:
            return coord._replace()
        return self._cache.get_or_build(interval, self._velocity).apply_to(coord)

    def apply_inverse_to(self, coord: GeocentricCoordinate) -> GeocentricCoordinate:
        """Remove the drift that :meth:`apply_to` corrects for.

        The inverse interval is ``epoch - ref_epoch``.  The transform used is
        the exact inverse of the forward transform for ``ref_epoch - epoch``,
        so the cache is keyed on that forward interval and
        :attr:`cached_interval` holds it afterwards.  For a reference epoch of
        2000.0 and a coordinate at 1990.0, :attr:`cached_interval` is
        ``10.0`` after either call.

        Args:
            coord: Coordinate to transform.  It is not modified.

        Returns:
            GeocentricCoordinate: Transformed coordinate carrying the input
                epoch.  When the epoch equals the reference epoch an
                unchanged copy is returned and no transform is built.

        Raises:
            UndefinedEpochError: If *coord* has no epoch.  The cache is left
                untouched.
        """
        interval = self.elapsed_interval(coord, inverse=True)
        if interval == 0.0:
            return coord._replace()
        transform = self._cache.get_or_build(-interval, self._velocity)
        return transform.apply_inverse_to(coord)

    def __repr__(self) -> str:
        return (
            f"CoordinateEpochTransform({self._ref_epoch!r}, {self._velocity!r}, "
            f"convention={self.convention})"
        )
