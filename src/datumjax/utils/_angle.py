"""Angle and unit conversion helpers.

Datum transformation parameters are published with rotations in
arc-seconds and scale in parts-per-million.  These helpers convert them to
the radians and ratios used internally.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from datumjax.config import get_dtype
from datumjax.constants import AS2RAD, PPM2RATIO, RAD2AS


def arcsec_to_radians(angle: ArrayLike) -> Array:
    """Convert an angle from arc-seconds to radians.

    Args:
        angle (ArrayLike): Angle in arc-seconds.

    Returns:
        Angle in radians.
    """
    return jnp.asarray(angle, dtype=get_dtype()) * AS2RAD


def radians_to_arcsec(angle: ArrayLike) -> Array:
    """Convert an angle from radians to arc-seconds.

    Args:
        angle (ArrayLike): Angle in radians.

    Returns:
        Angle in arc-seconds.
    """
    return jnp.asarray(angle, dtype=get_dtype()) * RAD2AS


def ppm_to_scale_factor(ppm: ArrayLike) -> Array:
    """Convert a scale difference in parts-per-million to a multiplicative factor.

    Args:
        ppm (ArrayLike): Scale difference in ppm.

    Returns:
        Scale factor ``1 + ppm * 1e-6``.
    """
    return 1.0 + jnp.asarray(ppm, dtype=get_dtype()) * PPM2RATIO
