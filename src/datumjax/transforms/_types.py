"""Type definitions for Bursa-Wolf datum transformations.

Provides the parameter records shared by all transformation components:

- :class:`TransformParameters`: the seven parameters of a similarity
  transform at one instant.
- :class:`VelocityParameters`: the yearly rate of change of those seven
  parameters.
- :class:`RotationConvention`: how the sign of the rotation parameters is
  interpreted.

Both parameter records are :class:`~typing.NamedTuple` instances, so they
are immutable and JAX treats them as pytrees.  Field names are shared
between the two so a velocity can be scaled field by field.
"""

from __future__ import annotations

import enum
from typing import NamedTuple


class RotationConvention(enum.Enum):
    """Sign convention of the rotation parameters.

    Resolved at trace time (Python value), not at runtime.

    Attributes:
        POSITION_VECTOR: The rotations turn the position vector; the
            small-angle matrix is ``I + skew(w)``.  Used by the IERS and
            ISO 19111 (EPSG method 1033/1053).
        COORDINATE_FRAME: The rotations turn the coordinate axes; the
            small-angle matrix is ``I - skew(w)``, the transpose of the
            position vector matrix (EPSG method 1032/1056).
    """

    POSITION_VECTOR = "position_vector"
    COORDINATE_FRAME = "coordinate_frame"


class TransformParameters(NamedTuple):
    """Seven-parameter similarity (Bursa-Wolf) transformation.

    Attributes:
        tx: Translation along X [m].
        ty: Translation along Y [m].
        tz: Translation along Z [m].
        rx: Rotation about X [arcsec].
        ry: Rotation about Y [arcsec].
        rz: Rotation about Z [arcsec].
        ppm: Scale difference [ppm]; the scale factor is ``1 + ppm * 1e-6``.
    """

    tx: float = 0.0
    ty: float = 0.0
    tz: float = 0.0
    rx: float = 0.0
    ry: float = 0.0
    rz: float = 0.0
    ppm: float = 0.0

    def is_identity(self) -> bool:
        """Return ``True`` if every parameter is exactly zero."""
        return all(value == 0.0 for value in self)

    def negated(self) -> TransformParameters:
        """Return the parameters with every sign flipped.

        Applying the negated parameters forward is a first-order
        approximation of the inverse transformation.
        """
        return TransformParameters(*(-value for value in self))


class VelocityParameters(NamedTuple):
    """Yearly rates of change of the seven Bursa-Wolf parameters.

    Attributes:
        tx: Translation rate along X [m/yr].
        ty: Translation rate along Y [m/yr].
        tz: Translation rate along Z [m/yr].
        rx: Rotation rate about X [arcsec/yr].
        ry: Rotation rate about Y [arcsec/yr].
        rz: Rotation rate about Z [arcsec/yr].
        ppm: Scale rate [ppm/yr].
    """

    tx: float = 0.0
    ty: float = 0.0
    tz: float = 0.0
    rx: float = 0.0
    ry: float = 0.0
    rz: float = 0.0
    ppm: float = 0.0

    def negated(self) -> VelocityParameters:
        """Return the rates with every sign flipped.

        Converts between rates that give the parameters as
        ``P0 + rate * (t - t0)`` and rates that give them as
        ``P0 + rate * (t0 - t)``.
        """
        return VelocityParameters(*(-value for value in self))
