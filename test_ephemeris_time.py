#!/usr/bin/env python3
"""
Test script for ephemeris_time.py functions
Tests Julian Day conversion in both calendars and sidereal time
"""

import sys
import os

import pytest

# Add src directory to path to import ephemeris_time
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from ephemeris_angle import Angle, DomainError
from ephemeris_frames import mean_obliquity, nutation
from ephemeris_time import (
    calendar_gregorian_to_jd,
    calendar_julian_to_jd,
    julian_date,
    jd_to_calendar,
    julian_year_to_jde,
    jde_to_julian_year,
    local_sidereal_time,
    mean_sidereal_time,
    apparent_sidereal_time,
)


def compare_values(name, val1, val2, tolerance=0.01, unit=""):
    """Compare two values and report differences"""
    diff = abs(val1 - val2)
    status = "OK" if diff <= tolerance else "MISMATCH"
    print(f"  {name:30s}: {val1:.6f} vs {val2:.6f} {unit} (diff: {diff:.6f}) - {status}")
    return diff <= tolerance


GREGORIAN_DATES = [
    # (year, month, day, expected JD)
    (1957, 10, 4.81, 2436116.31),
    (2000, 1, 1.5, 2451545.0),
    (1999, 1, 1.0, 2451179.5),
    (1987, 1, 27.0, 2446822.5),
    (1987, 6, 19.5, 2446966.0),
    (1988, 1, 27.0, 2447187.5),
    (1988, 6, 19.5, 2447332.0),
    (1900, 1, 1.0, 2415020.5),
    (1600, 1, 1.0, 2305447.5),
    (1600, 12, 31.0, 2305812.5),
]


@pytest.mark.parametrize("year, month, day, expected", GREGORIAN_DATES)
def test_gregorian_to_jd(year, month, day, expected):
    jd = calendar_gregorian_to_jd(year, month, day)
    assert compare_values(f"JD {year}-{month}-{day}", jd, expected, tolerance=1e-6)


def test_julian_calendar_to_jd():
    assert compare_values("JD 333-1-27.5 (Julian)",
                          calendar_julian_to_jd(333, 1, 27.5), 1842713.0, tolerance=1e-6)
    assert compare_values("JD -1000-7-12.5 (Julian)",
                          calendar_julian_to_jd(-1000, 7, 12.5), 1356001.0, tolerance=1e-6)


def test_julian_date_from_time_of_day():
    jd = julian_date(1957, 10, 4, 19, 26, 24)
    assert compare_values("JD 1957-10-04 19:26:24", jd, 2436116.31, tolerance=1e-6)


@pytest.mark.parametrize("jd, expected", [
    (2436116.31, (1957, 10, 4, 19, 26, 24.0)),
    (1842713.0, (333, 1, 27, 12, 0, 0.0)),
    (1507900.13, (-584, 5, 28, 15, 7, 12.0)),
])
def test_jd_to_calendar(jd, expected):
    date = jd_to_calendar(jd)
    print(f"  JD {jd} -> {date}")
    assert tuple(date[:5]) == expected[:5]
    assert compare_values("second", date.second, expected[5], tolerance=0.01)


def test_calendar_round_trip():
    for year, month, day, _ in GREGORIAN_DATES:
        date = jd_to_calendar(calendar_gregorian_to_jd(year, month, day))
        fraction = (date.hour + date.minute / 60.0 + date.second / 3600.0) / 24.0
        assert (date.year, date.month) == (year, month)
        assert compare_values(f"day {year}-{month}", date.day + fraction, day, tolerance=1e-6)


@pytest.mark.parametrize("year, month, day", [
    (333, 1, 27.5),
    (-1000, 7, 12.5),
    (-584, 5, 28.63),
    (1582, 10, 4.25),
])
def test_julian_calendar_round_trip(year, month, day):
    date = jd_to_calendar(calendar_julian_to_jd(year, month, day))
    fraction = (date.hour + date.minute / 60.0 + date.second / 3600.0) / 24.0
    assert (date.year, date.month) == (year, month)
    assert compare_values(f"day {year}-{month}", date.day + fraction, day, tolerance=1e-6)


@pytest.mark.parametrize("jd", [
    # Julian calendar
    0.0, 1000.25, 1356001.0, 1507900.13, 1842713.0, 2299159.75,
    # Gregorian calendar
    2299161.0, 2305447.5, 2415020.5, 2436116.31, 2451545.0, 2462088.69, 2816787.875,
])
def test_jd_round_trip(jd):
    date = jd_to_calendar(jd)
    day = date.day + (date.hour + date.minute / 60.0 + date.second / 3600.0) / 24.0
    if jd + 0.5 >= 2299161:
        back = calendar_gregorian_to_jd(date.year, date.month, day)
    else:
        back = calendar_julian_to_jd(date.year, date.month, day)
    # seconds are kept to the millisecond
    assert compare_values(f"JD {jd}", back, jd, tolerance=1e-8)


def test_day_interval():
    # Halley's comet perihelia, 1910-04-20 and 1986-02-09
    days = calendar_gregorian_to_jd(1986, 2, 9) - calendar_gregorian_to_jd(1910, 4, 20)
    assert days == 27689


def test_invalid_dates():
    with pytest.raises(DomainError):
        jd_to_calendar(-1.0)
    with pytest.raises(DomainError):
        calendar_gregorian_to_jd(2022, 13, 1.0)
    with pytest.raises(DomainError):
        calendar_julian_to_jd(-4800, 1, 1.0)


def test_julian_year():
    assert julian_year_to_jde(2000.0) == 2451545.0
    assert compare_values("J2050 round trip", jde_to_julian_year(julian_year_to_jde(2050.0)),
                          2050.0, tolerance=1e-9)


def test_mean_sidereal_time():
    # Meeus example 12.a: 1987-04-10 0h UT
    gmst = mean_sidereal_time(2446895.5)
    expected = Angle.from_hms(13, 10, 46.3668)
    assert compare_values("GMST 1987-04-10 0h", gmst.hours, expected.hours,
                          tolerance=1e-6, unit="h")


def test_apparent_sidereal_time():
    # Meeus example 12.a: apparent 13h10m46.1351s
    jd = 2446895.5
    delta_psi, delta_eps = nutation(jd)
    gast = apparent_sidereal_time(jd, delta_psi, mean_obliquity(jd) + delta_eps)
    expected = Angle.from_hms(13, 10, 46.1351)
    assert compare_values("GAST 1987-04-10 0h", gast.hours * 3600, expected.hours * 3600,
                          tolerance=0.01, unit="s")


@pytest.mark.parametrize("year, month, day, longitude, expected", [
    (1951, 3, 5.677083, 74.283333, 79696.0),
    (1979, 5, 20.826389, 76.141667, 23814.5076),
])
def test_local_sidereal_time(year, month, day, longitude, expected):
    jd = calendar_gregorian_to_jd(year, month, day)
    delta_psi, delta_eps = nutation(jd)
    lst = local_sidereal_time(jd, Angle.from_degrees(longitude), delta_psi,
                              mean_obliquity(jd) + delta_eps)
    assert compare_values(f"LST {year}-{month}-{day}", lst.hours * 3600, expected,
                          tolerance=1.0, unit="s")


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
