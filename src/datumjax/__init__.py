"""
datumjax is a small library for time-dependent Bursa-Wolf datum transformations of geocentric coordinates, implemented in JAX.

Importing the package selects float64 as the working dtype and therefore
calls ``jax.config.update("jax_enable_x64", True)``, which applies to every
JAX computation in the process.  Set ``DATUMJAX_DTYPE=float32`` before import
to keep JAX in 32-bit mode.  A later :func:`datumjax.set_dtype` call changes
the datumjax dtype but does not switch 64-bit mode back off.
"""

from .constants import (
    AS2RAD,
    RAD2AS,
    PPM2RATIO,
    JD_MJD_OFFSET,
    MJD2000,
)

from .config import set_dtype, get_dtype, get_position_eq_tolerance
from .exceptions import DatumTransformError, UndefinedEpochError

from .coordinates import GeocentricCoordinate

from .transforms import (
    RotationConvention,
    TransformParameters,
    VelocityParameters,
    rotation_small_angle,
    position_bursa_wolf,
    position_bursa_wolf_inverse,
    RigidBodyTransform,
    propagate_velocity,
    EpochTransformCache,
    CoordinateEpochTransform,
    TimeDependentBursaWolf,
    TransformResult,
    apply_batch,
)

from .time import (
    decimal_year,
    mjd_to_decimal_year,
    decimal_year_to_mjd,
    jd_to_decimal_year,
    decimal_year_to_jd,
    datetime_to_decimal_year,
)

__all__ = [
    # Constants
    "AS2RAD",
    "RAD2AS",
    "PPM2RATIO",
    "JD_MJD_OFFSET",
    "MJD2000",
    # Config
    "set_dtype",
    "get_dtype",
    "get_position_eq_tolerance",
    # Exceptions
    "DatumTransformError",
    "UndefinedEpochError",
    # Coordinates
    "GeocentricCoordinate",
    # Transforms
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
    # Time
    "decimal_year",
    "mjd_to_decimal_year",
    "decimal_year_to_mjd",
    "jd_to_decimal_year",
    "decimal_year_to_jd",
    "datetime_to_decimal_year",
]
