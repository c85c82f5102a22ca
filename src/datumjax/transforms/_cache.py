"""Single-slot memo of the transform built for the most recent interval.

Real workloads convert many coordinates observed at one epoch, so the
propagated :class:`~datumjax.transforms.bursa_wolf.RigidBodyTransform` is
kept for the last interval requested and rebuilt only when the interval
changes.  From the caller's side :meth:`EpochTransformCache.get_or_build`
is a memoised pure function of ``(interval, velocity)``; the slot is private
state of the owning transform, not shared global state.

The check-and-replace is not atomic.  Concurrent use of one cache from
several threads must be serialised by the caller.
"""

from __future__ import annotations

import logging

from datumjax.transforms._types import RotationConvention, VelocityParameters
from datumjax.transforms.bursa_wolf import RigidBodyTransform
from datumjax.transforms.velocity import propagate_velocity

logger = logging.getLogger(__name__)


class EpochTransformCache:
    """Holds at most one ``(interval, RigidBodyTransform)`` pair.

    Args:
        convention: Rotation convention of every transform built.
    """

    __slots__ = ("_convention", "_entry")

    def __init__(
        self, convention: RotationConvention = RotationConvention.POSITION_VECTOR
    ) -> None:
        self._convention = RotationConvention(convention)
        self._entry: tuple[float, RigidBodyTransform] | None = None

    @property
    def convention(self) -> RotationConvention:
        return self._convention

    @property
    def interval(self) -> float | None:
        """Interval of the cached transform in years, or ``None`` if empty."""
        return None if self._entry is None else self._entry[0]

    @property
    def transform(self) -> RigidBodyTransform | None:
        """The cached transform, or ``None`` if empty."""
        return None if self._entry is None else self._entry[1]

    def get_or_build(
        self, interval: float, velocity: VelocityParameters
    ) -> RigidBodyTransform:
        """Return the transform for *interval*, building it on a miss.

        A hit requires the stored interval to equal *interval* exactly.  On
        a miss the velocity is propagated, a new transform is built and it
        replaces whatever was cached.

        Args:
            interval: Signed elapsed time in years.
            velocity: Yearly parameter rates.

        Returns:
            RigidBodyTransform: Transform for the propagated parameters.
        """
        if self._entry is not None and self._entry[0] == interval:
            return self._entry[1]

        logger.debug("Building velocity transform for interval %r years", interval)
        transform = RigidBodyTransform(
            propagate_velocity(velocity, interval), self._convention
        )
        self._entry = (interval, transform)
        return transform

    def clear(self) -> None:
        """Drop the cached entry."""
        self._entry = None
