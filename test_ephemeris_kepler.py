#!/usr/bin/env python3
"""
Test script for ephemeris_kepler.py
Tests the day number, the Kepler solve and the Mercury position from
mean orbital elements (Schlyter, 1990-04-19 0h UT)
"""

import sys
import os
import math

import pytest

# Add src directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from ephemeris_data import Body, DataUnavailable, InvalidBodyIdentifier
from ephemeris_kepler import (
    EPOCH_JD, day_number, eccentric_anomaly, heliocentric_mercury, heliocentric_venus,
    heliocentric_position
)
from ephemeris_time import calendar_gregorian_to_jd


def compare_values(name, val1, val2, tolerance=0.01, unit=""):
    """Compare two values and report differences"""
    diff = abs(val1 - val2)
    status = "OK" if diff <= tolerance else "MISMATCH"
    print(f"  {name:30s}: {val1:.6f} vs {val2:.6f} {unit} (diff: {diff:.6f}) - {status}")
    return diff <= tolerance


MERCURY_JD = calendar_gregorian_to_jd(1990, 4, 19)


def test_day_number():
    assert day_number(1990, 4, 19) == -3543
    assert day_number(2000, 1, 1) == 1
    assert compare_values("day number with hours", day_number(1990, 4, 19, 12.0), -3542.5,
                          tolerance=1e-12)


def test_day_number_matches_julian_day():
    assert MERCURY_JD - EPOCH_JD == day_number(1990, 4, 19)


def test_eccentric_anomaly():
    assert eccentric_anomaly(0.0, 1.2) == 1.2
    e, m = 0.1, 0.8
    ea = eccentric_anomaly(e, m)
    assert compare_values("Kepler residual", ea - e * math.sin(ea), m, tolerance=1e-6,
                          unit="rad")


def test_mercury_position():
    pos = heliocentric_mercury(MERCURY_JD)
    assert compare_values("L", pos.longitude.deg, 170.5709, tolerance=1e-4, unit="°")
    assert compare_values("B", pos.latitude.deg, 5.9255, tolerance=1e-4, unit="°")
    assert compare_values("R", pos.radius, 0.374862, tolerance=1e-6, unit="AU")


def test_dispatch_by_body():
    assert heliocentric_position("mercury", MERCURY_JD) == heliocentric_mercury(MERCURY_JD)
    assert heliocentric_position(Body.VENUS, MERCURY_JD) == heliocentric_venus(MERCURY_JD)


def test_venus_radius_is_plausible():
    pos = heliocentric_venus(MERCURY_JD)
    assert 0.718 < pos.radius < 0.729


def test_missing_elements():
    with pytest.raises(DataUnavailable):
        heliocentric_position(Body.SATURN, MERCURY_JD)
    with pytest.raises(InvalidBodyIdentifier):
        heliocentric_position("vulcan", MERCURY_JD)


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
