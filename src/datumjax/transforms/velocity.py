"""Propagation of Bursa-Wolf velocity parameters to an elapsed interval.

A velocity model describes the slow relative motion of two datums (for
example tectonic plate drift) as yearly rates of the seven Bursa-Wolf
parameters.  Over a signed interval of ``dt`` years the instantaneous
offset parameters are simply ``rate * dt``.  The offset is always applied
on top of a separately supplied base transformation.
"""

from __future__ import annotations

from datumjax.transforms._types import TransformParameters, VelocityParameters


def propagate_velocity(
    velocity: VelocityParameters, interval: float
) -> TransformParameters:
    """Scale velocity parameters by an elapsed interval.

    Args:
        velocity: Yearly parameter rates.
        interval: Signed elapsed time in years.  The sign sets the direction
            of the drift correction and is preserved.

    Returns:
        TransformParameters: Offset parameters for the interval.  A zero
            interval gives all-zero (identity) parameters.

    Example:
        >>> from datumjax.transforms import VelocityParameters, propagate_velocity
        >>> propagate_velocity(VelocityParameters(tx=0.001), 10.0).tx
        0.01
    """
    return TransformParameters(*(rate * interval for rate in velocity))
