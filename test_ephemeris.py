#!/usr/bin/env python3
"""
Test script for ephemeris.py
Tests topocentric longitudes of the planets for Woonsocket, RI on
2022-01-19 20:22:38 UT, the Sun and Moon paths, error handling,
sunrise/sunset and the command line
"""

import sys
import os

import pytest

# Add src directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from ephemeris import (
    Config, Ephemeris, BodyRegistry, PositionSource, DEFAULT_EPHEMERIS,
    topocentric_longitude, longitude_difference, main
)
from ephemeris_angle import Angle, DomainError
from ephemeris_data import Body, DataUnavailable, InvalidBodyIdentifier, SeriesDataProvider
from ephemeris_frames import EquatorialCoordinate, ProperMotion
from ephemeris_parallax import ObserverLocation
from ephemeris_solar import solar_apparent_longitude
from ephemeris_time import calendar_gregorian_to_jd, julian_centuries


def compare_values(name, val1, val2, tolerance=0.01, unit=""):
    """Compare two values and report differences"""
    diff = abs(val1 - val2)
    status = "OK" if diff <= tolerance else "MISMATCH"
    print(f"  {name:30s}: {val1:.4f} vs {val2:.4f} {unit} (diff: {diff:.6f}) - {status}")
    return diff <= tolerance


# Woonsocket, RI
YEAR, MONTH, DAY = 2022, 1, 19.849056
LATITUDE = Angle.from_degrees(42.0)
LONGITUDE = Angle.from_degrees(71.516667)  # west positive
HEIGHT = 56.0832

ARC_MINUTE = 1.0 / 60


def _longitude(body, ephemeris=DEFAULT_EPHEMERIS, source=None):
    return ephemeris.topocentric_longitude(YEAR, MONTH, DAY, LATITUDE, LONGITUDE, HEIGHT,
                                           body, source)


# ============================================================================
# Planet Longitudes
# ============================================================================

@pytest.mark.parametrize("body, expected, tolerance", [
    ("saturn", 314.0401, ARC_MINUTE),
    ("venus", 282.945, ARC_MINUTE),
    # reduced VSOP87B tables
    ("mars", 266.607, ARC_MINUTE),
    ("jupiter", 334.4736, ARC_MINUTE),
    # orbital elements
    ("mercury", 307.5887, ARC_MINUTE),
])
def test_planet_longitudes(body, expected, tolerance):
    lon = topocentric_longitude(YEAR, MONTH, DAY, LATITUDE, LONGITUDE, HEIGHT, body)
    assert 0.0 <= lon.rad < 2 * 3.141592653589793
    assert compare_values(body, lon.deg, expected, tolerance=tolerance, unit="°")


def test_repeated_calls_are_identical():
    first = topocentric_longitude(YEAR, MONTH, DAY, LATITUDE, LONGITUDE, HEIGHT, "saturn")
    second = topocentric_longitude(YEAR, MONTH, DAY, LATITUDE, LONGITUDE, HEIGHT, Body.SATURN)
    third = topocentric_longitude(YEAR, MONTH, DAY, LATITUDE, LONGITUDE, HEIGHT, 5)
    assert first == second == third


def test_separate_ephemerides_agree():
    other = Ephemeris(BodyRegistry.load(SeriesDataProvider()))
    assert _longitude(Body.VENUS, other) == _longitude(Body.VENUS)


def test_keplerian_venus_is_close_to_series():
    series = _longitude(Body.VENUS)
    kepler = _longitude(Body.VENUS, source=PositionSource.KEPLERIAN)
    assert compare_values("venus series vs Keplerian", longitude_difference(series, kepler),
                          0.0, tolerance=0.25, unit="°")


# ============================================================================
# Sun and Moon
# ============================================================================

@pytest.mark.parametrize("body, expected", [
    ("sun", 299.7343),
    ("moon", 141.3216027),
])
def test_sun_and_moon_longitudes(body, expected):
    # 2022-01-19 20:23:00 UT
    day = 19 + (20 + 23 / 60) / 24
    lon = topocentric_longitude(YEAR, MONTH, day, LATITUDE, LONGITUDE, HEIGHT, body)
    assert compare_values(body, lon.deg, expected, tolerance=ARC_MINUTE, unit="°")


def test_sun_longitude():
    jd = calendar_gregorian_to_jd(YEAR, MONTH, DAY)
    lon = _longitude(Body.SUN)
    apparent = solar_apparent_longitude(julian_centuries(jd))
    # only the solar parallax of 8.8″ separates the two
    assert compare_values("sun", longitude_difference(lon, apparent), 0.0, tolerance=0.005,
                          unit="°")


def test_moon_longitude():
    jd = calendar_gregorian_to_jd(YEAR, MONTH, DAY)
    topocentric = _longitude(Body.MOON)
    geocentric = DEFAULT_EPHEMERIS.geocentric_position(Body.MOON, jd)
    difference = longitude_difference(topocentric, geocentric.longitude)
    print(f"  moon parallax in longitude: {difference:.4f}°")
    assert difference < 1.1
    assert geocentric.distance > 350000.0


# ============================================================================
# Errors
# ============================================================================

@pytest.mark.parametrize("body", ["nibiru", 99, -1, True, 3.0, None])
def test_invalid_body(body):
    with pytest.raises(InvalidBodyIdentifier):
        topocentric_longitude(1, 2, 3.0, Angle(0.0), Angle(0.0), 0.0, body)


def test_series_source_without_table():
    with pytest.raises(DataUnavailable):
        _longitude(Body.MERCURY, source=PositionSource.SERIES)


def test_keplerian_source_without_elements():
    with pytest.raises(DataUnavailable):
        _longitude(Body.SATURN, source=PositionSource.KEPLERIAN)


def test_registry_without_body():
    ephemeris = Ephemeris(BodyRegistry.load(bodies=[Body.EARTH, Body.VENUS]))
    assert len(ephemeris.registry) == 2
    with pytest.raises(DataUnavailable):
        _longitude(Body.SATURN, ephemeris)


def test_registry_is_read_only():
    registry = BodyRegistry.load()
    with pytest.raises(TypeError):
        registry[Body.MERCURY] = registry[Body.VENUS]
    assert set(registry) == set(Config.SERIES_BODIES)


def test_earth_has_no_geocentric_position():
    with pytest.raises(DomainError):
        _longitude(Body.EARTH)


def test_invalid_date():
    with pytest.raises(DomainError):
        topocentric_longitude(2022, 14, 1.0, LATITUDE, LONGITUDE, HEIGHT, "saturn")


# ============================================================================
# Other Operations
# ============================================================================

def test_obliquity_and_sidereal_time():
    jd = calendar_gregorian_to_jd(YEAR, MONTH, DAY)
    eps, lst = DEFAULT_EPHEMERIS.obliquity_and_sidereal_time(
        jd, ObserverLocation(LATITUDE, LONGITUDE, HEIGHT))
    assert 23.43 < eps.deg < 23.44
    assert 0.0 <= lst.hours < 24.0


@pytest.mark.parametrize("latitude, longitude, rise, set_", [
    (42.0028761, 71.5147839, (11, 45, 22), (22, 15, 8)),
    (-42.00287, 71.514784, (10, 4, 0), (23, 56, 0)),
])
def test_sunrise_sunset(latitude, longitude, rise, set_):
    location = ObserverLocation.from_degrees(latitude, longitude)
    got_rise, got_set = DEFAULT_EPHEMERIS.sunrise_sunset(2022, 2, 11, location)
    for name, got, (h, m, s) in (("sunrise", got_rise, rise), ("sunset", got_set, set_)):
        expected = calendar_gregorian_to_jd(2022, 2, 11 + (h + m / 60 + s / 3600) / 24)
        assert compare_values(name, got * 1440, expected * 1440, tolerance=3.0, unit="min")


def test_polar_night_has_no_sunrise():
    location = ObserverLocation.from_degrees(85.0, 0.0)
    with pytest.raises(DomainError):
        DEFAULT_EPHEMERIS.sunrise_sunset(2022, 1, 1, location)


def test_stellar_longitude_and_moon_phase():
    jd = 2459606.340277778
    algol = EquatorialCoordinate(Angle.from_hms(3, 8, 10.131),
                                 Angle.from_sexagesimal(False, 40, 57, 20.43))
    lon = DEFAULT_EPHEMERIS.stellar_longitude(jd, algol, ProperMotion.from_catalog(0.0031, -0.0009))
    assert compare_values("Algol", lon.deg, 56.466667, tolerance=ARC_MINUTE, unit="°")
    assert compare_values("moon phase", DEFAULT_EPHEMERIS.moon_phase(jd), 286.0, tolerance=1.0)


def test_ascending_node():
    node = DEFAULT_EPHEMERIS.ascending_node(2460053.5)
    assert compare_values("node", node.deg, 34.016667, tolerance=ARC_MINUTE, unit="°")


@pytest.mark.parametrize("a, b, expected", [
    (359.0, 1.0, 2.0),
    (10.0, 200.0, 170.0),
    (-10.0, 10.0, 20.0),
    (90.0, 90.0, 0.0),
])
def test_longitude_difference(a, b, expected):
    diff = longitude_difference(Angle.from_degrees(a), Angle.from_degrees(b))
    assert compare_values(f"{a} - {b}", diff, expected, tolerance=1e-9, unit="°")


# ============================================================================
# Command Line
# ============================================================================

def test_main_prints_longitude(capsys):
    status = main(["saturn", "2022", "1", "19.849056"])
    out = capsys.readouterr().out
    assert status == 0
    assert out.startswith("saturn: ")
    assert compare_values("cli saturn", float(out.split()[1]), 314.0401, tolerance=ARC_MINUTE)


def test_main_rejects_unknown_body():
    assert main(["nibiru", "2022", "1", "19.849056"]) == 1


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
