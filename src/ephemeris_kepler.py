"""
Keplerian Fallback Module for the Ephemeris

Low-precision heliocentric positions from mean orbital elements that vary
linearly with time, after Paul Schlyter's "How to compute planetary
positions". Elements are given for Mercury and Venus only.

The eccentric anomaly is taken from one Newton refinement of a second-order
starting value. It is not iterated to a tolerance.
"""

import math
import logging
from dataclasses import dataclass
from typing import Union

from ephemeris_angle import Angle, TWO_PI, pmod
from ephemeris_data import Body, DataUnavailable
from ephemeris_series import HeliocentricPosition

logger = logging.getLogger(__name__)

EPOCH_JD = 2451543.5  # 1999-12-31 0h, day number zero


@dataclass(frozen=True)
class OrbitalElements:
    """
    Mean elements at the epoch and their daily rates.

    Angles are in radians, the semi-major axis in AU.
    """
    node: float
    node_rate: float
    inclination: float
    inclination_rate: float
    perihelion: float  # argument of perihelion
    perihelion_rate: float
    semi_major_axis: float
    eccentricity: float
    eccentricity_rate: float
    mean_anomaly: float
    mean_anomaly_rate: float


MERCURY_ELEMENTS = OrbitalElements(
    node=0.8435403168, node_rate=5.66511185916e-7,
    inclination=0.122255078, inclination_rate=8.7266e-10,
    perihelion=0.5083114367, perihelion_rate=1.77053181e-7,
    semi_major_axis=0.387098,
    eccentricity=0.205635, eccentricity_rate=5.59e-10,
    mean_anomaly=2.9436059939, mean_anomaly_rate=0.0714247100147306,
)

VENUS_ELEMENTS = OrbitalElements(
    node=1.338316725, node_rate=4.30380740248e-7,
    inclination=0.0592469468, inclination_rate=4.79965544e-10,
    perihelion=0.95802868, perihelion_rate=2.41508189915e-7,
    semi_major_axis=0.723330,
    eccentricity=0.006773, eccentricity_rate=-1.302e-9,
    mean_anomaly=0.8378487981, mean_anomaly_rate=0.0279624474614262,
)

ELEMENTS = {
    Body.MERCURY: MERCURY_ELEMENTS,
    Body.VENUS: VENUS_ELEMENTS,
}


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero"""
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def day_number(year: int, month: int, day: int, hour: float = 0.0) -> float:
    """
    Days since 1999-12-31 0h UT using the integer formula of the elements.

    Args:
        year: Year
        month: Month (1-12)
        day: Day of month
        hour: UT hours

    Returns:
        Day number, e.g. -3543 for 1990-04-19 0h
    """
    d = (367 * year - _trunc_div(7 * (year + _trunc_div(month + 9, 12)), 4)
         + _trunc_div(275 * month, 9) + day - 730530)
    return d + hour / 24.0


def eccentric_anomaly(e: float, mean_anomaly: float) -> float:
    """
    Solve Kepler's equation with a single Newton step.

    Args:
        e: Eccentricity
        mean_anomaly: Mean anomaly in radians, reduced to one revolution

    Returns:
        Eccentric anomaly in radians
    """
    e0 = mean_anomaly + e * math.sin(mean_anomaly) * (1.0 + e * math.cos(mean_anomaly))
    return e0 - (e0 - e * math.sin(e0) - mean_anomaly) / (1.0 - e * math.cos(e0))


def position_from_elements(elements: OrbitalElements, jde: float) -> HeliocentricPosition:
    """
    Heliocentric ecliptic position from mean elements.

    Args:
        elements: Orbital elements of the body
        jde: Julian Ephemeris Day

    Returns:
        HeliocentricPosition with longitude in [0, 2π)
    """
    d = jde - EPOCH_JD
    node = elements.node + elements.node_rate * d
    incl = elements.inclination + elements.inclination_rate * d
    peri = elements.perihelion + elements.perihelion_rate * d
    a = elements.semi_major_axis
    e = elements.eccentricity + elements.eccentricity_rate * d
    m = pmod(elements.mean_anomaly + elements.mean_anomaly_rate * d, TWO_PI)

    ea = eccentric_anomaly(e, m)
    x = a * (math.cos(ea) - e)
    y = a * math.sqrt(1.0 - e * e) * math.sin(ea)
    r = math.hypot(x, y)
    v = pmod(math.atan2(y, x), TWO_PI)

    s_node, c_node = math.sin(node), math.cos(node)
    s_vw, c_vw = math.sin(v + peri), math.cos(v + peri)
    c_incl = math.cos(incl)
    xe = r * (c_node * c_vw - s_node * s_vw * c_incl)
    ye = r * (s_node * c_vw + c_node * s_vw * c_incl)
    ze = r * s_vw * math.sin(incl)

    lon = pmod(math.atan2(ye, xe), TWO_PI)
    lat = math.atan2(ze, math.hypot(xe, ye))
    return HeliocentricPosition(Angle(lon), Angle(lat), math.sqrt(xe * xe + ye * ye + ze * ze))


def heliocentric_mercury(jde: float) -> HeliocentricPosition:
    return position_from_elements(MERCURY_ELEMENTS, jde)


def heliocentric_venus(jde: float) -> HeliocentricPosition:
    return position_from_elements(VENUS_ELEMENTS, jde)


def heliocentric_position(body: Union[Body, int, str], jde: float) -> HeliocentricPosition:
    """
    Keplerian heliocentric position of a body.

    Raises:
        InvalidBodyIdentifier: If body is not a known body
        DataUnavailable: If no elements exist for the body
    """
    body = Body.parse(body)
    try:
        elements = ELEMENTS[body]
    except KeyError as exc:
        raise DataUnavailable(f"No orbital elements for {body.name.lower()}") from exc
    return position_from_elements(elements, jde)
