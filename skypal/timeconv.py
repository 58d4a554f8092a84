"""Calendar dates, epochs and sexagesimal conversions."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = [
    "Sexagesimal",
    "CalendarDate",
    "FieldRangeError",
    "calendar_to_mjd",
    "mjd_to_calendar",
    "dms_to_radians",
    "hms_to_days",
    "hms_to_radians",
    "days_to_hms",
    "radians_to_dms",
    "radians_to_hms",
    "besselian_epoch",
    "besselian_epoch_to_mjd",
    "julian_epoch",
    "julian_epoch_to_mjd",
]

MJD_ZERO = 2400000.5
_J2000 = 2451545.0
_DAYS_PER_JULIAN_YEAR = 365.25
_DAYS_PER_TROPICAL_YEAR = 365.242198781
_SECONDS_PER_DAY = 86400.0
_ARCSEC_TO_RAD = math.pi / (180.0 * 3600.0)
_SEC_TO_RAD = math.tau / _SECONDS_PER_DAY
_EARLIEST_YEAR = -4799
_EARLIEST_JD = -68569.5
_LATEST_JD = 1e9
_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class FieldRangeError(ValueError):
    """A date, time or angle field lies outside its permitted range.

    ``field`` names the offending field.  Where a result could still be
    formed from the fields given, it is kept in ``value``; otherwise
    ``value`` is None.
    """

    def __init__(self, field: str, message: str, value: float | None = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


@dataclass(frozen=True)
class Sexagesimal:
    """A signed quantity split into units, minutes, seconds and fraction.

    ``units`` are hours or degrees; ``fraction`` is the fractional part of
    the seconds as an integer in units of the requested decimal places.
    """

    sign: str
    units: int
    minutes: int
    seconds: int
    fraction: int


@dataclass(frozen=True)
class CalendarDate:
    """A Gregorian calendar date with the fraction of the day."""

    year: int
    month: int
    day: int
    fraction: float


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating towards zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _nint(x: float) -> float:
    """Nearest whole number, halves rounded away from zero."""
    return math.copysign(math.floor(abs(x) + 0.5), x)


def _aint(x: float) -> float:
    """Whole part, truncated towards zero."""
    return float(math.trunc(x))


def calendar_to_mjd(year: int, month: int, day: int) -> float:
    """Modified Julian Date at 0h of a Gregorian calendar date.

    Raises FieldRangeError for a year before -4799 or a month outside
    1-12.  A day outside the month also raises, with the MJD computed
    regardless kept in the exception's ``value``.
    """
    if year < _EARLIEST_YEAR:
        raise FieldRangeError("year", f"year {year} is before {_EARLIEST_YEAR}")
    if not 1 <= month <= 12:
        raise FieldRangeError("month", f"month {month} is outside 1-12")
    leap = month == 2 and year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)
    my = _tdiv(month - 14, 12)
    iypmy = year + my
    mjd = float(
        _tdiv(1461 * (iypmy + 4800), 4)
        + _tdiv(367 * (month - 2 - 12 * my), 12)
        - _tdiv(3 * _tdiv(iypmy + 4900, 100), 4)
        + day
        - 2432076
    )
    if not 1 <= day <= _MONTH_LENGTHS[month - 1] + leap:
        raise FieldRangeError("day", f"day {day} is outside month {month}", mjd)
    return mjd


def mjd_to_calendar(mjd: float) -> CalendarDate:
    """Gregorian year, month, day and fraction of day for an MJD."""
    dj1, dj2 = MJD_ZERO, mjd
    dj = dj1 + dj2
    if dj < _EARLIEST_JD or dj > _LATEST_JD:
        raise FieldRangeError("date", f"MJD {mjd} is outside the supported range")

    d1, d2 = (dj1, dj2) if abs(dj1) >= abs(dj2) else (dj2, dj1)
    d2 -= 0.5
    f1 = math.fmod(d1, 1.0)
    f2 = math.fmod(d2, 1.0)
    f = math.fmod(f1 + f2, 1.0)
    if f < 0.0:
        f += 1.0
    d = _nint(d1 - f1) + _nint(d2 - f2) + _nint(f1 + f2 - f)
    jd = int(_nint(d)) + 1

    el = jd + 68569
    n = _tdiv(4 * el, 146097)
    el -= _tdiv(146097 * n + 3, 4)
    i = _tdiv(4000 * (el + 1), 1461001)
    el -= _tdiv(1461 * i, 4) - 31
    k = _tdiv(80 * el, 2447)
    day = el - _tdiv(2447 * k, 80)
    el = _tdiv(k, 11)
    month = k + 2 - 12 * el
    year = 100 * (n - 49) + i + el
    return CalendarDate(year, month, day, f)


def _check_fields(names: tuple[str, str, str], major: int, top: int,
                  minutes: int, seconds: float, value: float) -> None:
    if not 0 <= major <= top:
        raise FieldRangeError(names[0], f"{names[0]} {major} is outside 0-{top}", value)
    if not 0 <= minutes <= 59:
        raise FieldRangeError(names[1], f"{names[1]} {minutes} is outside 0-59", value)
    if not 0.0 <= seconds < 60.0:
        raise FieldRangeError(names[2], f"{names[2]} {seconds} is outside 0-59.999...", value)


def dms_to_radians(degrees: int, arcmin: int, arcsec: float) -> float:
    """Convert degrees, arcminutes and arcseconds to radians.

    The sign is taken to be positive.  Out-of-range fields raise
    FieldRangeError carrying the computed angle in ``value``.
    """
    rad = (60.0 * (60.0 * abs(degrees) + abs(arcmin)) + abs(arcsec)) * _ARCSEC_TO_RAD
    _check_fields(("degrees", "arcmin", "arcsec"), degrees, 359, arcmin, arcsec, rad)
    return rad


def hms_to_days(hours: int, minutes: int, seconds: float) -> float:
    """Convert hours, minutes and seconds to days."""
    days = (60.0 * (60.0 * abs(hours) + abs(minutes)) + abs(seconds)) / _SECONDS_PER_DAY
    _check_fields(("hours", "minutes", "seconds"), hours, 23, minutes, seconds, days)
    return days


def hms_to_radians(hours: int, minutes: int, seconds: float) -> float:
    """Convert hours, minutes and seconds to radians."""
    rad = (60.0 * (60.0 * abs(hours) + abs(minutes)) + abs(seconds)) * _SEC_TO_RAD
    _check_fields(("hours", "minutes", "seconds"), hours, 23, minutes, seconds, rad)
    return rad


def days_to_hms(ndp: int, days: float) -> Sexagesimal:
    """Split an interval in days into hours, minutes, seconds and fraction.

    ``ndp`` is the number of decimal places of seconds; negative values
    round to 10s, 1m, 10m, 1h and so on.
    """
    sign = "+" if days >= 0.0 else "-"
    a = _SECONDS_PER_DAY * abs(days)

    if ndp < 0:
        rs = float(math.prod(6 if n in (2, 4) else 10 for n in range(1, -ndp + 1)))
        a = rs * _nint(a / rs)

    rs = float(10 ** max(ndp, 0))
    rm = rs * 60.0
    rh = rm * 60.0

    a = _nint(rs * a)
    ah = _aint(a / rh)
    a -= ah * rh
    am = _aint(a / rm)
    a -= am * rm
    sec = _aint(a / rs)
    af = a - sec * rs
    return Sexagesimal(sign, int(ah), int(am), int(sec), int(af))


def radians_to_dms(ndp: int, angle: float) -> Sexagesimal:
    """Split an angle in radians into degrees, arcminutes, arcseconds and fraction."""
    return days_to_hms(ndp, angle * 15.0 / math.tau)


def radians_to_hms(ndp: int, angle: float) -> Sexagesimal:
    """Split an angle in radians into hours, minutes, seconds and fraction."""
    return days_to_hms(ndp, angle / math.tau)


def besselian_epoch(mjd: float) -> float:
    """Besselian epoch of a Modified Julian Date."""
    d1900 = 36524.68648
    return 1900.0 + ((MJD_ZERO - _J2000) + (mjd + d1900)) / _DAYS_PER_TROPICAL_YEAR


def besselian_epoch_to_mjd(epb: float) -> float:
    """Modified Julian Date of a Besselian epoch."""
    return 15019.81352 + (epb - 1900.0) * _DAYS_PER_TROPICAL_YEAR


def julian_epoch(mjd: float) -> float:
    """Julian epoch of a Modified Julian Date."""
    return 2000.0 + ((MJD_ZERO - _J2000) + mjd) / _DAYS_PER_JULIAN_YEAR


def julian_epoch_to_mjd(epj: float) -> float:
    """Modified Julian Date of a Julian epoch."""
    return 51544.5 + (epj - 2000.0) * _DAYS_PER_JULIAN_YEAR