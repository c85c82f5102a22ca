"""Shared utility functions for datumjax.

Provides unit conversion helpers for datum transformation parameters.
"""

from datumjax.utils._angle import (
    arcsec_to_radians,
    ppm_to_scale_factor,
    radians_to_arcsec,
)

__all__ = [
    "arcsec_to_radians",
    "ppm_to_scale_factor",
    "radians_to_arcsec",
]
