#!/usr/bin/env python3
"""
Test script for ephemeris_series.py and ephemeris_geocentric.py
Tests series evaluation, the bundled tables and the geocentric assembly
of Venus (Meeus example 33.a)
"""

import sys
import os

import numpy as np
import pytest

# Add src directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from ephemeris_angle import Angle
from ephemeris_data import Body, DataUnavailable, InvalidBodyIdentifier, SeriesDataProvider
from ephemeris_frames import nutation
from ephemeris_geocentric import geocentric_position, light_time
from ephemeris_series import (
    SeriesTable, EQUINOX_OF_DATE, make_blocks,
    evaluate_block, evaluate_coordinate, heliocentric_position, heliocentric_position_j2000
)


def compare_values(name, val1, val2, tolerance=0.01, unit=""):
    """Compare two values and report differences"""
    diff = abs(val1 - val2)
    status = "OK" if diff <= tolerance else "MISMATCH"
    print(f"  {name:30s}: {val1:.6f} vs {val2:.6f} {unit} (diff: {diff:.6f}) - {status}")
    return diff <= tolerance


VENUS_JDE = 2448976.5  # 1992-12-20 0h TD


def _source(table):
    def position(jde):
        return heliocentric_position(table, jde)
    return position


# ============================================================================
# Series Evaluation
# ============================================================================

def test_evaluate_block():
    block = make_blocks([[[2.0, 0.0, 0.0], [1.0, np.pi, 0.0]]])[0]
    assert compare_values("block sum", evaluate_block(block, 0.3), 1.0, tolerance=1e-12)
    assert evaluate_block(make_blocks([[]])[0], 0.3) == 0.0


def test_evaluate_coordinate_powers():
    blocks = make_blocks([[[1.0, 0.0, 0.0]], [[2.0, 0.0, 0.0]], [[3.0, 0.0, 0.0]]])
    tau = 0.5
    expected = 1.0 + 2.0 * tau + 3.0 * tau * tau
    assert compare_values("Horner over τ", evaluate_coordinate(blocks, tau), expected,
                          tolerance=1e-12)
    assert compare_values("scaled", evaluate_coordinate(blocks, tau, 1e-8), expected * 1e-8,
                          tolerance=1e-20)


def test_blocks_are_read_only():
    block = make_blocks([[[1.0, 0.0, 0.0]]])[0]
    with pytest.raises(ValueError):
        block[0, 0] = 5.0


def test_table_validation():
    too_many = make_blocks([[[1.0, 0.0, 0.0]]] * 7)
    with pytest.raises(ValueError):
        SeriesTable("bad", too_many, (), ())
    with pytest.raises(ValueError):
        SeriesTable("bad", (), (), (), equinox="B1950")


def test_equinox_of_date_is_not_precessed():
    table = SeriesDataProvider().load(Body.VENUS)
    assert table.equinox == EQUINOX_OF_DATE
    assert heliocentric_position(table, VENUS_JDE) == heliocentric_position_j2000(table, VENUS_JDE)


# ============================================================================
# Bundled Tables
# ============================================================================

def test_venus_heliocentric():
    # Meeus example 32.a
    table = SeriesDataProvider().load(Body.VENUS)
    pos = heliocentric_position(table, VENUS_JDE)
    assert compare_values("L", pos.longitude.deg, 26.11428, tolerance=1e-4, unit="°")
    assert compare_values("B", pos.latitude.deg, -2.62070, tolerance=1e-4, unit="°")
    assert compare_values("R", pos.radius, 0.724603, tolerance=1e-6, unit="AU")


def test_earth_heliocentric():
    # Meeus example 25.b: 1992-10-13 0h TD
    table = SeriesDataProvider().load("earth")
    pos = heliocentric_position(table, 2448908.5)
    assert compare_values("L", pos.longitude.deg, 19.907372, tolerance=1e-5, unit="°")
    assert compare_values("B", pos.latitude.arcsec, -0.644, tolerance=0.05, unit="″")
    assert compare_values("R", pos.radius, 0.99760775, tolerance=1e-7, unit="AU")


def test_provider_errors():
    provider = SeriesDataProvider()
    for body in (Body.MERCURY, Body.SUN, Body.MOON):
        with pytest.raises(DataUnavailable):
            provider.load(body)
    with pytest.raises(InvalidBodyIdentifier):
        provider.load("pluto")
    assert Body.SATURN in provider.available()


# ============================================================================
# Geocentric Assembly
# ============================================================================

def test_light_time():
    assert compare_values("τ(1 AU)", light_time(1.0), 0.0057755183, tolerance=1e-12, unit="d")


def test_venus_geocentric():
    provider = SeriesDataProvider()
    venus = _source(provider.load(Body.VENUS))
    earth = _source(provider.load(Body.EARTH))
    delta_psi, _ = nutation(VENUS_JDE)
    pos = geocentric_position(venus, earth, VENUS_JDE, delta_psi)
    assert compare_values("λ", pos.longitude.deg,
                          Angle.from_sexagesimal(False, 313, 4, 52.838).deg,
                          tolerance=0.001, unit="°")
    assert compare_values("β", pos.latitude.deg,
                          Angle.from_sexagesimal(True, 2, 5, 5.36).deg,
                          tolerance=0.001, unit="°")
    assert compare_values("Δ", pos.distance, 0.910948, tolerance=1e-5, unit="AU")


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
