"""Apply a transformation to many coordinates, collecting per-coordinate errors.

A coordinate without an epoch should not abort the conversion of a whole
list.  :func:`apply_batch` runs each coordinate independently and returns a
:class:`TransformResult` for every input, in order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import NamedTuple, Protocol

from datumjax.coordinates import GeocentricCoordinate
from datumjax.exceptions import DatumTransformError

logger = logging.getLogger(__name__)


class CoordinateTransform(Protocol):
    """Anything that transforms a :class:`GeocentricCoordinate` both ways."""

    def apply_to(self, coord: GeocentricCoordinate) -> GeocentricCoordinate: ...

    def apply_inverse_to(self, coord: GeocentricCoordinate) -> GeocentricCoordinate: ...


class TransformResult(NamedTuple):
    """Outcome of transforming one coordinate.

    Exactly one of the two fields is set.

    Attributes:
        coordinate: Transformed coordinate, or ``None`` on failure.
        error: The error raised for this coordinate, or ``None`` on success.
    """

    coordinate: GeocentricCoordinate | None
    error: DatumTransformError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def apply_batch(
    transform: CoordinateTransform,
    coordinates: Iterable[GeocentricCoordinate],
    inverse: bool = False,
) -> list[TransformResult]:
    """Transform each coordinate independently.

    Errors derived from :class:`~datumjax.exceptions.DatumTransformError` are
    captured in the corresponding result and logged; any other exception
    propagates.

    Args:
        transform: Object with ``apply_to`` and ``apply_inverse_to`` methods.
        coordinates: Coordinates to transform.
        inverse: Use ``apply_inverse_to`` instead of ``apply_to``.

    Returns:
        list[TransformResult]: One result per input coordinate, in order.
    """
    apply = transform.apply_inverse_to if inverse else transform.apply_to

    results = []
    for index, coord in enumerate(coordinates):
        try:
            results.append(TransformResult(apply(coord)))
        except DatumTransformError as err:
            logger.warning("Coordinate %d not transformed: %s", index, err)
            results.append(TransformResult(None, err))
    return results
