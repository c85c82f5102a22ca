# /// script
# requires-python = ">=3.10"
# dependencies = ["datumjax"]
#
# [tool.uv.sources]
# datumjax = { path = ".." }
# ///
"""Correct a list of survey marks for datum drift with a velocity model.

Builds a time-dependent Bursa-Wolf transformation from published rates
with a reference epoch of 2000.0, converts a handful of geocentric marks
observed at different epochs, and reports the per-mark shift.  One mark is deliberately missing its epoch
to show how failures are reported without stopping the batch.

Usage:
    uv run examples/epoch_drift.py
"""

import logging
from datetime import datetime, timezone

import jax.numpy as jnp

from datumjax import (
    GeocentricCoordinate,
    TimeDependentBursaWolf,
    TransformParameters,
    VelocityParameters,
    apply_batch,
    datetime_to_decimal_year,
)

BASE = TransformParameters(tx=0.0007, ty=0.0012, tz=-0.0261, ppm=0.00212)
RATES = VelocityParameters(tx=0.0001, ty=0.0001, tz=-0.0019, ppm=0.00011)


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    datum = TimeDependentBursaWolf.from_published_rates(BASE, 2000.0, RATES)

    marks = [
        GeocentricCoordinate(-4780726.0, 436220.0, -4185288.0, epoch=1995.0),
        GeocentricCoordinate(-4780726.0, 436220.0, -4185288.0, epoch=2011.25),
        GeocentricCoordinate(
            -5089466.0, 599417.0, -3804025.0,
            epoch=datetime_to_decimal_year(datetime(2016, 11, 14, tzinfo=timezone.utc)),
        ),
        GeocentricCoordinate(-5089466.0, 599417.0, -3804025.0),
    ]

    for mark, result in zip(marks, apply_batch(datum, marks)):
        if not result.ok:
            print(f"epoch={mark.epoch}: skipped ({result.error})")
            continue
        shift = result.coordinate.xyz - mark.xyz
        print(
            f"epoch={mark.epoch:9.4f}: shift "
            f"[{float(shift[0]):+.4f}, {float(shift[1]):+.4f}, {float(shift[2]):+.4f}] m "
            f"(|d| = {float(jnp.linalg.norm(shift)):.4f} m)"
        )


if __name__ == "__main__":
    main()
