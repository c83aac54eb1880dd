"""
Periodic Series Module for the Ephemeris

Evaluates VSOP87-style periodic-term series into heliocentric ecliptic
longitude, latitude and radius vector (Meeus chapter 32).

A series table holds, for each of L, B and R, up to six blocks of
(amplitude, phase, frequency) rows. Block n is multiplied by τ^n where
τ is Julian millennia since J2000.0.
"""

import logging
from dataclasses import dataclass
from typing import NamedTuple, Sequence, Tuple

import numpy as np

from ephemeris_angle import Angle, TWO_PI, horner, pmod, reverse_sum
from ephemeris_time import julian_centuries, jde_to_julian_year
from ephemeris_frames import EclipticCoordinate, precess_ecliptic

logger = logging.getLogger(__name__)

MAX_BLOCKS = 6
EQUINOX_J2000 = "J2000"
EQUINOX_OF_DATE = "date"

Block = np.ndarray


class HeliocentricPosition(NamedTuple):
    longitude: Angle
    latitude: Angle
    radius: float  # AU


def make_blocks(rows: Sequence[Sequence[Sequence[float]]]) -> Tuple[Block, ...]:
    """
    Freeze nested (amplitude, phase, frequency) rows into read-only arrays.

    Args:
        rows: One sequence of terms per power of time

    Returns:
        Tuple of arrays of shape (n, 3)
    """
    blocks = []
    for terms in rows:
        block = np.array(terms, dtype=float).reshape(-1, 3)
        block.flags.writeable = False
        blocks.append(block)
    return tuple(blocks)


@dataclass(frozen=True)
class SeriesTable:
    """
    Periodic terms of one body.

    Attributes:
        name: Body name, for messages
        longitude: Blocks of L terms
        latitude: Blocks of B terms
        radius: Blocks of R terms
        equinox: EQUINOX_J2000 for VSOP87B style tables, EQUINOX_OF_DATE
            for VSOP87D style tables that are already referred to the
            equinox of date
        scale: Factor applied to every amplitude (1e-8 for tables printed
            in units of 10^-8 radian or AU)
    """
    name: str
    longitude: Tuple[Block, ...]
    latitude: Tuple[Block, ...]
    radius: Tuple[Block, ...]
    equinox: str = EQUINOX_J2000
    scale: float = 1.0

    def __post_init__(self):
        for label, blocks in (("L", self.longitude), ("B", self.latitude), ("R", self.radius)):
            if len(blocks) > MAX_BLOCKS:
                raise ValueError(f"{self.name}: {label} has {len(blocks)} blocks, "
                                 f"at most {MAX_BLOCKS} allowed")
        if self.equinox not in (EQUINOX_J2000, EQUINOX_OF_DATE):
            raise ValueError(f"{self.name}: unknown equinox {self.equinox!r}")


def evaluate_block(block: Block, tau: float) -> float:
    """Sum amplitude * cos(phase + frequency * τ), smallest term first"""
    if len(block) == 0:
        return 0.0
    terms = block[:, 0] * np.cos(block[:, 1] + block[:, 2] * tau)
    return reverse_sum(terms)


def evaluate_coordinate(blocks: Sequence[Block], tau: float, scale: float = 1.0) -> float:
    """
    Evaluate one coordinate of a series.

    Args:
        blocks: Blocks of terms, block n multiplying τ^n
        tau: Julian millennia since J2000.0
        scale: Amplitude scale factor

    Returns:
        Coordinate value (radians or AU)
    """
    sums = [evaluate_block(block, tau) for block in blocks]
    return horner(tau, *sums) * scale


def heliocentric_position_j2000(table: SeriesTable, jde: float) -> HeliocentricPosition:
    """
    Heliocentric position in the table's own frame.

    For VSOP87B tables this is the dynamical ecliptic and equinox of J2000.0.

    Args:
        table: Series table of the body
        jde: Julian Ephemeris Day

    Returns:
        HeliocentricPosition with longitude in [0, 2π)
    """
    tau = julian_centuries(jde) * 0.1
    lon = evaluate_coordinate(table.longitude, tau, table.scale)
    lat = evaluate_coordinate(table.latitude, tau, table.scale)
    rad = evaluate_coordinate(table.radius, tau, table.scale)
    return HeliocentricPosition(Angle(pmod(lon, TWO_PI)), Angle(lat), rad)


def heliocentric_position(table: SeriesTable, jde: float) -> HeliocentricPosition:
    """
    Heliocentric position referred to the ecliptic and equinox of date.

    Tables on J2000.0 are precessed to the date, tables of date are
    returned as evaluated.

    Args:
        table: Series table of the body
        jde: Julian Ephemeris Day

    Returns:
        HeliocentricPosition of date
    """
    pos = heliocentric_position_j2000(table, jde)
    if table.equinox == EQUINOX_OF_DATE:
        return pos
    ecl = precess_ecliptic(EclipticCoordinate(pos.longitude, pos.latitude),
                           2000.0, jde_to_julian_year(jde))
    return HeliocentricPosition(ecl.longitude, ecl.latitude, pos.radius)
