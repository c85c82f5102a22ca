"""Exceptions raised by datumjax transformations."""

from __future__ import annotations

from typing import Any


class DatumTransformError(Exception):
    """Base class for errors raised while transforming a coordinate."""


class UndefinedEpochError(DatumTransformError, ValueError):
    """A time-dependent transformation was given a coordinate without an epoch.

    Attributes:
        coordinate: The coordinate that was rejected.
    """

    def __init__(self, coordinate: Any = None) -> None:
        self.coordinate = coordinate
        super().__init__(
            "Cannot apply velocity model - coordinate epoch not defined"
        )
