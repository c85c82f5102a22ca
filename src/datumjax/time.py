"""Epoch conversions for time-dependent datum transformations.

Velocity models and coordinate epochs are expressed as decimal years
(e.g. ``2011.25``).  This module converts calendar dates, Julian Dates,
Modified Julian Dates and :class:`~datetime.datetime` objects to and from
that form.  A decimal year is the calendar year plus the elapsed fraction of
that year, so leap years are 366 days long.

The calendar and Julian Date functions are JAX-traceable.
"""

from __future__ import annotations

from datetime import datetime, timezone

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike

from .config import get_dtype
from .constants import JD_MJD_OFFSET


def caldate_to_mjd(
    year: ArrayLike,
    month: ArrayLike,
    day: ArrayLike,
    hour: ArrayLike = 0,
    minute: ArrayLike = 0,
    second: ArrayLike = 0.0,
) -> jax.Array:
    """Convert a calendar date to Modified Julian Date. Algorithm is only valid from year 1583 onward.

    Args:
        year (ArrayLike): Year of the calendar date.
        month (ArrayLike): Month of the calendar date.
        day (ArrayLike): Day of the calendar date.
        hour (ArrayLike): Hour of the calendar date. Default: ``0``
        minute (ArrayLike): Minute of the calendar date. Default: ``0``
        second (ArrayLike): Second of the calendar date. Default: ``0.0``

    Returns:
        Modified Julian Date.

    References:

        1. Montenbruck, O., & Gill, E. (2012). *Satellite Orbits: Models, Methods and Applications*. Springer Science & Business Media.
    """

    is_jan_or_feb = month <= 2
    year = jnp.where(is_jan_or_feb, year - 1, year)
    month = jnp.where(is_jan_or_feb, month + 12, month)

    B = jnp.floor(year / 400) - jnp.floor(year / 100) + jnp.floor(year / 4)

    mjd = 365 * year - 679004 + B + jnp.floor(30.6001 * (month + 1)) + day

    frac_day = (hour + (minute + second / 60.0) / 60.0) / 24.0

    return get_dtype()(jnp.floor(mjd).astype(jnp.int32)) + frac_day


def jd_to_mjd(jd: ArrayLike) -> jax.Array:
    """Convert Julian Date to Modified Julian Date."""

    return jd - JD_MJD_OFFSET


def mjd_to_jd(mjd: ArrayLike) -> jax.Array:
    """Convert Modified Julian Date to Julian Date."""

    return mjd + JD_MJD_OFFSET


def jd_to_caldate(
    jd: ArrayLike,
) -> tuple[jax.Array, jax.Array, jax.Array, jax.Array, jax.Array, jax.Array]:
    """Convert Julian Date to calendar date.

    Uses the algorithm from Montenbruck & Gill for Gregorian calendar dates.

    Args:
        jd (ArrayLike): Julian Date.

    Returns:
        tuple[jax.Array, ...]: (year, month, day, hour, minute, second) where
            year/month/day/hour/minute are int32 and second is configurable float dtype.

    References:

        1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and
           Applications*, 2012, p. 322.
    """
    jd_shifted = jd + 0.5
    z = jnp.floor(jd_shifted).astype(jnp.int32)
    f = jd_shifted - z

    # Julian/Gregorian calendar switchover at JD 2299161.
    # Scaled integer form of (z - 1867216.25)/36524.25
    alpha = (100 * z - 186721625) // 3652425
    a_gregorian = z + 1 + alpha - alpha // 4
    a = jnp.where(z < 2299161, z, a_gregorian)

    b = a + 1524
    c = (100 * b - 12210) // 36525
    d = (36525 * c) // 100
    e = ((b - d) * 10000) // 306001

    day_with_frac = b - d - (306001 * e) // 10000 + f
    day = jnp.floor(day_with_frac).astype(jnp.int32)
    frac_of_day = day_with_frac - day

    month = jnp.where(e < 14, e - 1, e - 13)
    year = jnp.where(month > 2, c - 4716, c - 4715)

    # Integer milliseconds avoid truncation artifacts in the time of day
    total_ms = jnp.round(frac_of_day * 86400000.0).astype(jnp.int32)
    hour = total_ms // 3600000
    total_ms = total_ms - hour * 3600000
    minute = total_ms // 60000
    total_ms = total_ms - minute * 60000
    second = get_dtype()(total_ms) / 1000.0

    return year, month, day, hour, minute, second


def mjd_to_caldate(
    mjd: ArrayLike,
) -> tuple[jax.Array, jax.Array, jax.Array, jax.Array, jax.Array, jax.Array]:
    """Convert Modified Julian Date to calendar date.

    Args:
        mjd (ArrayLike): Modified Julian Date.

    Returns:
        tuple[jax.Array, ...]: (year, month, day, hour, minute, second).
    """
    return jd_to_caldate(mjd + JD_MJD_OFFSET)


def _year_bounds_mjd(year: ArrayLike) -> tuple[jax.Array, jax.Array]:
    """MJD of 1 January of *year* and of the following year."""
    return caldate_to_mjd(year, 1, 1), caldate_to_mjd(year + 1, 1, 1)


def decimal_year(
    year: ArrayLike,
    month: ArrayLike,
    day: ArrayLike,
    hour: ArrayLike = 0,
    minute: ArrayLike = 0,
    second: ArrayLike = 0.0,
) -> jax.Array:
    """Convert a calendar date to a decimal year.

    Args:
        year (ArrayLike): Year of the calendar date.
        month (ArrayLike): Month of the calendar date.
        day (ArrayLike): Day of the calendar date.
        hour (ArrayLike): Hour of the calendar date. Default: ``0``
        minute (ArrayLike): Minute of the calendar date. Default: ``0``
        second (ArrayLike): Second of the calendar date. Default: ``0.0``

    Returns:
        Decimal year, e.g. ``2001.5`` for 2001-07-02 12:00.

    Example:
        >>> from datumjax.time import decimal_year
        >>> float(decimal_year(2000, 1, 1))
        2000.0
    """
    mjd = caldate_to_mjd(year, month, day, hour, minute, second)
    start, end = _year_bounds_mjd(year)
    return get_dtype()(year) + (mjd - start) / (end - start)


def mjd_to_decimal_year(mjd: ArrayLike) -> jax.Array:
    """Convert a Modified Julian Date to a decimal year.

    Args:
        mjd (ArrayLike): Modified Julian Date.

    Returns:
        Decimal year.
    """
    mjd = jnp.asarray(mjd, dtype=get_dtype())
    year = mjd_to_caldate(mjd)[0]
    start, end = _year_bounds_mjd(year)
    return get_dtype()(year) + (mjd - start) / (end - start)


def decimal_year_to_mjd(epoch: ArrayLike) -> jax.Array:
    """Convert a decimal year to a Modified Julian Date.

    Args:
        epoch (ArrayLike): Decimal year.

    Returns:
        Modified Julian Date.
    """
    epoch = jnp.asarray(epoch, dtype=get_dtype())
    year = jnp.floor(epoch)
    start, end = _year_bounds_mjd(year)
    return start + (epoch - year) * (end - start)


def jd_to_decimal_year(jd: ArrayLike) -> jax.Array:
    """Convert a Julian Date to a decimal year.

    Args:
        jd (ArrayLike): Julian Date.

    Returns:
        Decimal year.

    Example:
        >>> from datumjax.time import jd_to_decimal_year
        >>> float(jd_to_decimal_year(2451544.5))
        2000.0
    """
    return mjd_to_decimal_year(jd_to_mjd(jnp.asarray(jd, dtype=get_dtype())))


def decimal_year_to_jd(epoch: ArrayLike) -> jax.Array:
    """Convert a decimal year to a Julian Date."""

    return mjd_to_jd(decimal_year_to_mjd(epoch))


def datetime_to_decimal_year(dt: datetime) -> float:
    """Convert a :class:`~datetime.datetime` to a decimal year.

    Timezone-aware datetimes are normalised to UTC; naive datetimes are
    taken to already be in UTC.

    Args:
        dt: Date and time to convert.

    Returns:
        float: Decimal year.
    """
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)

    second = dt.second + dt.microsecond / 1e6
    return float(
        decimal_year(dt.year, dt.month, dt.day, dt.hour, dt.minute, second)
    )
