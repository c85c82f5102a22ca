"""Type definitions for geocentric coordinates.

:class:`GeocentricCoordinate` is a :class:`~typing.NamedTuple`, which JAX
treats as a pytree automatically.  Transformations never modify a
coordinate in place; they return a new instance carrying the input epoch.
"""

from __future__ import annotations

import math
from typing import NamedTuple

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from datumjax.config import get_dtype, get_position_eq_tolerance


class GeocentricCoordinate(NamedTuple):
    """Earth-centred Cartesian position with an optional observation epoch.

    Attributes:
        x: X component [m].
        y: Y component [m].
        z: Z component [m].
        epoch: Observation epoch as a decimal year (e.g. ``2011.25``), or
            ``None`` when the epoch is unknown.  NaN is treated the same as
            ``None``.
    """

    x: ArrayLike
    y: ArrayLike
    z: ArrayLike
    epoch: float | None = None

    @classmethod
    def from_xyz(
        cls, xyz: ArrayLike, epoch: float | None = None
    ) -> GeocentricCoordinate:
        """Build a coordinate from a length-3 position array.

        Args:
            xyz: Position ``[x, y, z]`` in *m*.
            epoch: Observation epoch as a decimal year, or ``None``.

        Returns:
            GeocentricCoordinate: New coordinate.
        """
        xyz = jnp.asarray(xyz, dtype=get_dtype())
        if xyz.shape != (3,):
            raise ValueError(f"Expected a position of shape (3,), got {xyz.shape}")
        return cls(xyz[0], xyz[1], xyz[2], epoch)

    @property
    def xyz(self) -> Array:
        """Position ``[x, y, z]`` as a JAX array in *m*."""
        return jnp.array([self.x, self.y, self.z], dtype=get_dtype())

    def with_xyz(self, xyz: ArrayLike) -> GeocentricCoordinate:
        """Return a new coordinate at *xyz* carrying this coordinate's epoch."""
        return GeocentricCoordinate.from_xyz(xyz, self.epoch)

    def has_epoch(self) -> bool:
        """Return ``True`` if the observation epoch is defined."""
        if self.epoch is None:
            return False
        return not math.isnan(float(self.epoch))

    def isclose(self, other: GeocentricCoordinate, atol: float | None = None) -> bool:
        """Compare positions within *atol* metres, ignoring epochs.

        Args:
            other: Coordinate to compare against.
            atol: Absolute tolerance in *m*.  Defaults to
                :func:`~datumjax.config.get_position_eq_tolerance`.

        Returns:
            bool: ``True`` if every component agrees within *atol*.
        """
        if atol is None:
            atol = get_position_eq_tolerance()
        return bool(jnp.allclose(self.xyz, other.xyz, rtol=0.0, atol=atol))
