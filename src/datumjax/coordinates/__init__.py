"""Coordinate types.

This sub-module provides the geocentric coordinate record consumed and
produced by every datum transformation:

- **Geocentric**: Earth-centred Cartesian ``[x, y, z]`` in metres with an
  optional observation epoch (decimal year)
"""

from ._types import GeocentricCoordinate

__all__ = [
    "GeocentricCoordinate",
]
