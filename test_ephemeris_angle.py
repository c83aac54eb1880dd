#!/usr/bin/env python3
"""
Test script for ephemeris_angle.py
Tests angle construction, normalization, arithmetic and formatting
"""

import sys
import os
import math

import pytest

# Add src directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from ephemeris_angle import Angle, DomainError, EphemerisError, horner, pmod, reverse_sum


def compare_values(name, val1, val2, tolerance=1e-9, unit=""):
    """Compare two values and report differences"""
    diff = abs(val1 - val2)
    status = "OK" if diff <= tolerance else "MISMATCH"
    print(f"  {name:30s}: {val1:.9f} vs {val2:.9f} {unit} (diff: {diff:.2e}) - {status}")
    return diff <= tolerance


@pytest.mark.parametrize("degrees", [-720.5, -360.0, -0.25, 0.0, 45.0, 359.999, 360.0, 1000.0])
def test_normalize_range_and_idempotence(degrees):
    angle = Angle.from_degrees(degrees).normalize()
    assert 0.0 <= angle.rad < 2 * math.pi
    assert angle.normalize() == angle


def test_normalize_value():
    assert compare_values("-90 deg", Angle.from_degrees(-90.0).normalize().deg, 270.0)
    assert compare_values("725 deg", Angle.from_degrees(725.0).normalize().deg, 5.0)


def test_pmod_tiny_negative():
    assert pmod(-1e-18, 2 * math.pi) < 2 * math.pi
    assert pmod(-1.0, 360.0) == 359.0


def test_sexagesimal_construction():
    angle = Angle.from_sexagesimal(False, 23, 26, 27.407)
    assert compare_values("23°26′27.407″", angle.deg, 23 + 26 / 60 + 27.407 / 3600)
    negative = Angle.from_sexagesimal(True, 0, 30)
    assert compare_values("-0°30′", negative.deg, -0.5)
    ra = Angle.from_hms(2, 44, 11.986)
    assert compare_values("2h44m11.986s", ra.hours, 2 + 44 / 60 + 11.986 / 3600)


def test_to_sexagesimal():
    sign, degrees, minutes, seconds = Angle.from_degrees(-2.08482).to_sexagesimal()
    assert (sign, degrees, minutes) == (-1, 2, 5)
    assert compare_values("seconds", seconds, 5.352, tolerance=1e-6)
    assert str(Angle.from_sexagesimal(False, 181, 48, 5.0)) == "181°48′5.000″"


def test_arithmetic():
    a = Angle.from_degrees(30.0)
    b = Angle.from_degrees(45.0)
    assert compare_values("sum", (a + b).deg, 75.0)
    assert compare_values("difference", (a - b).deg, -15.0)
    assert compare_values("negation", (-a).deg, -30.0)
    assert compare_values("scalar product", (2 * a).deg, 60.0)
    assert compare_values("scalar quotient", (b / 3).deg, 15.0)
    assert compare_values("ratio", b / a, 1.5)
    assert abs(-a) == a


def test_division_by_zero():
    with pytest.raises(DomainError):
        Angle.from_degrees(10.0) / 0
    with pytest.raises(DomainError):
        Angle.from_degrees(10.0) / Angle(0.0)


def test_trigonometry():
    s, c = Angle.from_degrees(30.0).sincos()
    assert compare_values("sin 30", s, 0.5)
    assert compare_values("cos 30", c, math.sqrt(3) / 2)
    assert compare_values("tan 45", Angle.from_degrees(45.0).tan(), 1.0)


def test_domain_error_is_value_error():
    assert issubclass(DomainError, EphemerisError)
    assert issubclass(DomainError, ValueError)


def test_helpers():
    assert horner(2.0, 1.0, 2.0, 3.0) == 1.0 + 2.0 * 2.0 + 3.0 * 4.0
    assert horner(5.0) == 0.0
    assert reverse_sum([1.0, 2.0, 3.0]) == 6.0


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
