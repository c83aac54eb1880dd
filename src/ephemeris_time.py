"""
Time Conversion Module for the Ephemeris

This module provides the time scales the position pipeline runs on:
- Calendar date (Gregorian or Julian) to Julian Day and back
- Julian centuries and Julian years relative to J2000.0
- Mean, apparent and local sidereal time

All functions are pure. Julian Days are plain floats.
"""

import math
import logging
from typing import NamedTuple

from ephemeris_angle import Angle, DomainError, DEG_TO_RAD, horner

logger = logging.getLogger(__name__)

# ============================================================================
# Constants
# ============================================================================

J2000 = 2451545.0  # JD for 2000-01-01 12:00 TT
JULIAN_CENTURY = 36525.0  # days
JULIAN_YEAR = 365.25  # days
GREGORIAN_SWITCH_JD = 2299161  # 1582-10-15, first day of the Gregorian calendar


class CalendarDate(NamedTuple):
    """Calendar date with time of day split into hours, minutes and seconds"""
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: float


# ============================================================================
# Calendar <-> Julian Day
# ============================================================================

def _calendar_to_jd(year: int, month: int, day: float, gregorian: bool) -> float:
    if not 1 <= month <= 12:
        raise DomainError(f"month out of range: {month}")
    y, m = year, month
    if m <= 2:
        y -= 1
        m += 12
    b = 0
    if gregorian:
        a = math.floor(y / 100)
        b = 2 - a + math.floor(a / 4)
    jd = (math.floor(36525 * (y + 4716) / 100) + math.floor(306 * (m + 1) / 10)
          + b + day - 1524.5)
    if jd < 0:
        raise DomainError(f"date {year}-{month}-{day} precedes Julian Day 0")
    return jd


def calendar_gregorian_to_jd(year: int, month: int, day: float) -> float:
    """
    Convert a proleptic Gregorian calendar date to a Julian Day.

    Args:
        year: Year (astronomical numbering, negative years allowed)
        month: Month (1-12)
        day: Day of month with the time of day as a fraction

    Returns:
        Julian Day

    Raises:
        DomainError: For a bad month or a date before JD 0
    """
    return _calendar_to_jd(year, month, day, True)


def calendar_julian_to_jd(year: int, month: int, day: float) -> float:
    """
    Convert a Julian calendar date to a Julian Day.

    Args:
        year: Year (astronomical numbering)
        month: Month (1-12)
        day: Day of month with the time of day as a fraction

    Returns:
        Julian Day
    """
    return _calendar_to_jd(year, month, day, False)


def julian_date(year: int, month: int, day: int,
                hour: float = 0.0, minute: float = 0.0, second: float = 0.0) -> float:
    """
    Calculate Julian Date for a Gregorian date and UT time of day.

    Args:
        year: Year
        month: Month (1-12)
        day: Day of month
        hour: Hour (0-23)
        minute: Minute (0-59)
        second: Second (0-59)

    Returns:
        Julian Date
    """
    fraction = (hour + minute / 60.0 + second / 3600.0) / 24.0
    return calendar_gregorian_to_jd(year, month, day + fraction)


def jd_to_calendar(jd: float) -> CalendarDate:
    """
    Convert a Julian Day to a calendar date.

    Dates from JD 2299161 on are Gregorian, earlier dates are Julian.
    Seconds are rounded to the millisecond.

    Args:
        jd: Julian Day (>= 0)

    Returns:
        CalendarDate

    Raises:
        DomainError: If jd is negative
    """
    if jd < 0:
        raise DomainError(f"Julian Day must not be negative: {jd}")

    z = int(math.floor(jd + 0.5))
    f = jd + 0.5 - z

    a = z
    if z >= GREGORIAN_SWITCH_JD:
        alpha = (z * 100 - 186721625) // 3652425
        a = z + 1 + alpha - alpha // 4
    b = a + 1524
    c = (b * 100 - 12210) // 36525
    d = (36525 * c) // 100
    e = ((b - d) * 10000) // 306001

    day = b - d - (306001 * e) // 10000
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715

    seconds_of_day = min(round(f * 86400.0, 3), 86399.999)
    hour = int(seconds_of_day // 3600)
    minute = int((seconds_of_day - hour * 3600) // 60)
    second = round(seconds_of_day - hour * 3600 - minute * 60, 3)

    return CalendarDate(year, month, day, hour, minute, second)


# ============================================================================
# Epoch Scaling
# ============================================================================

def julian_centuries(jd: float) -> float:
    """Julian centuries since J2000.0, the time argument of every series"""
    return (jd - J2000) / JULIAN_CENTURY


def julian_year_to_jde(julian_year: float) -> float:
    """Convert a Julian epoch such as 2000.0 to a Julian Ephemeris Day"""
    return J2000 + JULIAN_YEAR * (julian_year - 2000.0)


def jde_to_julian_year(jde: float) -> float:
    """Convert a Julian Ephemeris Day to a Julian epoch"""
    return 2000.0 + (jde - J2000) / JULIAN_YEAR


# ============================================================================
# Sidereal Time
# ============================================================================

def mean_sidereal_time(jd: float) -> Angle:
    """
    Greenwich mean sidereal time (Meeus 12.4).

    Args:
        jd: Julian Day (UT)

    Returns:
        Sidereal time as an Angle in [0, 2π)
    """
    d = jd - J2000
    t = d / JULIAN_CENTURY
    theta = (280.46061837 + 360.98564736629 * d
             + horner(t, 0.0, 0.0, 0.000387933, -1.0 / 38710000.0))
    return Angle(theta * DEG_TO_RAD).normalize()


def apparent_sidereal_time(jd: float, nutation_in_longitude: Angle, obliquity: Angle) -> Angle:
    """
    Greenwich apparent sidereal time.

    Args:
        jd: Julian Day (UT)
        nutation_in_longitude: Δψ at jd
        obliquity: True obliquity of the ecliptic at jd

    Returns:
        Sidereal time as an Angle in [0, 2π)
    """
    equation_of_equinoxes = nutation_in_longitude.rad * obliquity.cos()
    return Angle(mean_sidereal_time(jd).rad + equation_of_equinoxes).normalize()


def local_sidereal_time(jd: float, longitude: Angle, nutation_in_longitude: Angle,
                        obliquity: Angle) -> Angle:
    """
    Local apparent sidereal time.

    Args:
        jd: Julian Day (UT)
        longitude: Observer longitude (west positive)
        nutation_in_longitude: Δψ at jd
        obliquity: True obliquity of the ecliptic at jd

    Returns:
        Local sidereal time as an Angle in [0, 2π)
    """
    gast = apparent_sidereal_time(jd, nutation_in_longitude, obliquity)
    lst = (gast - longitude).normalize()
    logger.debug(f"JD {jd:.6f}: GAST {gast.hours:.6f}h, LST {lst.hours:.6f}h")
    return lst
