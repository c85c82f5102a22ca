"""Bursa-Wolf datum transformations.

This sub-module provides the seven-parameter similarity transformation
between geocentric datums and its time-dependent, velocity-augmented form:

- **Bursa-Wolf**: fixed translation, small-angle rotation and scale
  (:class:`RigidBodyTransform`)
- **Velocity**: yearly parameter rates propagated to an elapsed interval
  (:func:`propagate_velocity`)
- **Epoch transform**: velocity model applied at each coordinate's own
  epoch, with a single-slot cache of the propagated transform
  (:class:`CoordinateEpochTransform`)
- **Datum**: base transformation combined with a velocity model
  (:class:`TimeDependentBursaWolf`)

Typical usage::

    from datumjax.coordinates import GeocentricCoordinate
    from datumjax.transforms import CoordinateEpochTransform
    bwv = CoordinateEpochTransform(2000.0, (0.001, 0, 0, 0, 0, 0, 0))
    bwv.apply_to(GeocentricCoordinate(0.0, 0.0, 0.0, epoch=1990.0))
"""

from ._cache import EpochTransformCache
from ._types import RotationConvention, TransformParameters, VelocityParameters
from .batch import TransformResult, apply_batch
from .bursa_wolf import (
    RigidBodyTransform,
    position_bursa_wolf,
    position_bursa_wolf_inverse,
    rotation_small_angle,
)
from .datum import TimeDependentBursaWolf
from .epoch_transform import CoordinateEpochTransform
from .velocity import propagate_velocity

__all__ = [
    "RotationConvention",
    "TransformParameters",
    "VelocityParameters",
    "rotation_small_angle",
    "position_bursa_wolf",
    "position_bursa_wolf_inverse",
    "RigidBodyTransform",
    "propagate_velocity",
    "EpochTransformCache",
    "CoordinateEpochTransform",
    "TimeDependentBursaWolf",
    "TransformResult",
    "apply_batch",
]
