"""
Lunar Position Module for the Ephemeris

Geocentric position of the Moon from the truncated ELP-2000/82 theory
(Meeus chapter 47), the mean and true ascending node of the lunar orbit,
and the moon phase as the Moon-Sun elongation in whole degrees.
"""

import math
import logging
from typing import NamedTuple

import numpy as np

from ephemeris_angle import Angle, DEG_TO_RAD, TWO_PI, horner, pmod, reverse_sum
from ephemeris_time import julian_centuries
from ephemeris_solar import solar_apparent_longitude

logger = logging.getLogger(__name__)

MEAN_DISTANCE_KM = 385000.56


class LunarPosition(NamedTuple):
    longitude: Angle
    latitude: Angle
    distance: float  # km


# Meeus table 47.A: multipliers of D, M, M', F, then Σl (1e-6 deg) and Σr (1e-3 km)
LONGITUDE_DISTANCE_TERMS = np.array([
    [0, 0, 1, 0, 6288774, -20905355],
    [2, 0, -1, 0, 1274027, -3699111],
    [2, 0, 0, 0, 658314, -2955968],
    [0, 0, 2, 0, 213618, -569925],
    [0, 1, 0, 0, -185116, 48888],
    [0, 0, 0, 2, -114332, -3149],
    [2, 0, -2, 0, 58793, 246158],
    [2, -1, -1, 0, 57066, -152138],
    [2, 0, 1, 0, 53322, -170733],
    [2, -1, 0, 0, 45758, -204586],
    [0, 1, -1, 0, -40923, -129620],
    [1, 0, 0, 0, -34720, 108743],
    [0, 1, 1, 0, -30383, 104755],
    [2, 0, 0, -2, 15327, 10321],
    [0, 0, 1, 2, -12528, 0],
    [0, 0, 1, -2, 10980, 79661],
    [4, 0, -1, 0, 10675, -34782],
    [0, 0, 3, 0, 10034, -23210],
    [4, 0, -2, 0, 8548, -21636],
    [2, 1, -1, 0, -7888, 24208],
    [2, 1, 0, 0, -6766, 30824],
    [1, 0, -1, 0, -5163, -8379],
    [1, 1, 0, 0, 4987, -16675],
    [2, -1, 1, 0, 4036, -12831],
    [2, 0, 2, 0, 3994, -10445],
    [4, 0, 0, 0, 3861, -11650],
    [2, 0, -3, 0, 3665, 14403],
    [0, 1, -2, 0, -2689, -7003],
    [2, 0, -1, 2, -2602, 0],
    [2, -1, -2, 0, 2390, 10056],
    [1, 0, 1, 0, -2348, 6322],
    [2, -2, 0, 0, 2236, -9884],
    [0, 1, 2, 0, -2120, 5751],
    [0, 2, 0, 0, -2069, 0],
    [2, -2, -1, 0, 2048, -4950],
    [2, 0, 1, -2, -1773, 4130],
    [2, 0, 0, 2, -1595, 0],
    [4, -1, -1, 0, 1215, -3958],
    [0, 0, 2, 2, -1110, 0],
    [3, 0, -1, 0, -892, 3258],
    [2, 1, 1, 0, -810, 2616],
    [4, -1, -2, 0, 759, -1897],
    [0, 2, -1, 0, -713, -2117],
    [2, 2, -1, 0, -700, 2354],
    [2, 1, -2, 0, 691, 0],
    [2, -1, 0, -2, 596, 0],
    [4, 0, 1, 0, 549, -1423],
    [0, 0, 4, 0, 537, -1117],
    [4, -1, 0, 0, 520, -1571],
    [1, 0, -2, 0, -487, -1739],
    [2, 1, 0, -2, -399, 0],
    [0, 0, 2, -2, -381, -4421],
    [1, 1, 1, 0, 351, 0],
    [3, 0, -2, 0, -340, 0],
    [4, 0, -3, 0, 330, 0],
    [2, -1, 2, 0, 327, 0],
    [0, 2, 1, 0, -323, 1165],
    [1, 1, -1, 0, 299, 0],
    [2, 0, 3, 0, 294, 0],
    [2, 0, -1, -2, 0, 8752],
], dtype=float)
LONGITUDE_DISTANCE_TERMS.flags.writeable = False

# Meeus table 47.B: multipliers of D, M, M', F, then Σb (1e-6 deg)
LATITUDE_TERMS = np.array([
    [0, 0, 0, 1, 5128122],
    [0, 0, 1, 1, 280602],
    [0, 0, 1, -1, 277693],
    [2, 0, 0, -1, 173237],
    [2, 0, -1, 1, 55413],
    [2, 0, -1, -1, 46271],
    [2, 0, 0, 1, 32573],
    [0, 0, 2, 1, 17198],
    [2, 0, 1, -1, 9266],
    [0, 0, 2, -1, 8822],
    [2, -1, 0, -1, 8216],
    [2, 0, -2, -1, 4324],
    [2, 0, 1, 1, 4200],
    [2, 1, 0, -1, -3359],
    [2, -1, -1, 1, 2463],
    [2, -1, 0, 1, 2211],
    [2, -1, -1, -1, 2065],
    [0, 1, -1, -1, -1870],
    [4, 0, -1, -1, 1828],
    [0, 1, 0, 1, -1794],
    [0, 0, 0, 3, -1749],
    [0, 1, -1, 1, -1565],
    [1, 0, 0, 1, -1491],
    [0, 1, 1, 1, -1475],
    [0, 1, 1, -1, -1410],
    [0, 1, 0, -1, -1344],
    [1, 0, 0, -1, -1335],
    [0, 0, 3, 1, 1107],
    [4, 0, 0, -1, 1021],
    [4, 0, -1, 1, 833],
    [0, 0, 1, -3, 777],
    [4, 0, -2, 1, 671],
    [2, 0, 0, -3, 607],
    [2, 0, 2, -1, 596],
    [2, -1, 1, -1, 491],
    [2, 0, -2, 1, -451],
    [0, 0, 3, -1, 439],
    [2, 0, 2, 1, 422],
    [2, 0, -3, -1, 421],
    [2, 1, -1, 1, -366],
    [2, 1, 0, 1, -351],
    [4, 0, 0, 1, 331],
    [2, -1, 1, 1, 315],
    [2, -2, 0, -1, 302],
    [0, 0, 1, 3, -283],
    [2, 1, 1, -1, -229],
    [1, 1, 0, -1, 223],
    [1, 1, 0, 1, 223],
    [0, 1, -2, -1, -220],
    [2, 1, -1, -1, -220],
    [1, 0, 1, 1, -185],
    [2, -1, -2, -1, 181],
    [0, 1, 2, 1, -177],
    [4, 0, -2, -1, 176],
    [4, -1, -1, -1, 166],
    [1, 0, 1, -1, -164],
    [4, 0, 1, -1, 132],
    [1, 0, -1, -1, -119],
    [4, -1, 0, -1, 115],
    [2, -2, 0, 1, 107],
], dtype=float)
LATITUDE_TERMS.flags.writeable = False


# Chapront periodic terms for the true node: multipliers of D, M, M', F, then deg
NODE_TERMS = np.array([
    [2, 0, 0, -2, -1.4979],
    [0, 1, 0, 0, -0.1500],
    [2, 0, 0, 0, -0.1226],
    [0, 0, 0, 2, 0.1176],
    [0, 0, 2, -2, -0.0801],
    [2, -1, 0, -2, -0.0616],
    [2, 0, -1, 0, 0.0490],
    [0, 0, 1, -2, 0.0409],
    [0, 0, 1, 0, 0.0327],
    [2, 1, 0, -2, 0.0324],
    [4, 0, 0, -4, 0.0196],
    [2, 0, -1, -2, 0.0180],
    [2, 0, -2, 0, 0.0150],
    [2, 0, 1, -2, -0.0150],
    [2, -1, 0, 0, -0.0078],
    [2, 0, 1, 0, -0.0045],
    [0, 0, 1, 2, 0.0044],
    [1, 0, -1, 0, -0.0042],
    [0, 1, 0, -2, -0.0031],
    [2, -1, -1, 0, 0.0031],
    [2, 0, 0, -4, 0.0029],
    [0, 1, 0, 2, 0.0028],
], dtype=float)
NODE_TERMS.flags.writeable = False


def _fundamental_arguments(t: float) -> np.ndarray:
    """D, M, M', F in radians (Meeus 47.2 - 47.5)"""
    d = horner(t, 297.8501921, 445267.1114034, -0.0018819, 1.0 / 545868, -1.0 / 113065000)
    m = horner(t, 357.5291092, 35999.0502909, -0.0001536, 1.0 / 24490000)
    mp = horner(t, 134.9633964, 477198.8675055, 0.0087414, 1.0 / 69699, -1.0 / 14712000)
    f = horner(t, 93.2720950, 483202.0175233, -0.0036539, -1.0 / 3526000, 1.0 / 863310000)
    return np.array([d, m, mp, f]) * DEG_TO_RAD


def _eccentricity_factors(m_multipliers: np.ndarray, e: float) -> np.ndarray:
    """E for terms in ±M, E² for terms in ±2M, 1 otherwise"""
    return np.power(e, np.abs(m_multipliers))


def moon_position(jde: float) -> LunarPosition:
    """
    Geocentric ecliptic position of the Moon, referred to the mean equinox of date.

    Nutation is not included.

    Args:
        jde: Julian Ephemeris Day

    Returns:
        LunarPosition with longitude in [0, 2π) and distance in km
    """
    t = julian_centuries(jde)
    mean_lon = horner(t, 218.3164477, 481267.88123421, -0.0015786,
                      1.0 / 538841, -1.0 / 65194000) * DEG_TO_RAD
    fundamentals = _fundamental_arguments(t)
    f_rad = fundamentals[3]
    mp_rad = fundamentals[2]

    a1 = (119.75 + 131.849 * t) * DEG_TO_RAD
    a2 = (53.09 + 479264.290 * t) * DEG_TO_RAD
    a3 = (313.45 + 481266.484 * t) * DEG_TO_RAD
    e = horner(t, 1.0, -0.002516, -0.0000074)

    lr = LONGITUDE_DISTANCE_TERMS
    args = lr[:, :4] @ fundamentals
    factors = _eccentricity_factors(lr[:, 1], e)
    sum_l = reverse_sum(lr[:, 4] * factors * np.sin(args))
    sum_r = reverse_sum(lr[:, 5] * factors * np.cos(args))

    b = LATITUDE_TERMS
    args = b[:, :4] @ fundamentals
    sum_b = reverse_sum(b[:, 4] * _eccentricity_factors(b[:, 1], e) * np.sin(args))

    sum_l += 3958 * math.sin(a1) + 1962 * math.sin(mean_lon - f_rad) + 318 * math.sin(a2)
    sum_b += (-2235 * math.sin(mean_lon) + 382 * math.sin(a3)
              + 175 * math.sin(a1 - f_rad) + 175 * math.sin(a1 + f_rad)
              + 127 * math.sin(mean_lon - mp_rad) - 115 * math.sin(mean_lon + mp_rad))

    lon = pmod(mean_lon + sum_l * 1e-6 * DEG_TO_RAD, TWO_PI)
    return LunarPosition(Angle(lon), Angle(sum_b * 1e-6 * DEG_TO_RAD),
                         MEAN_DISTANCE_KM + sum_r * 1e-3)


def moon_phase(jd: float) -> float:
    """
    Moon phase as the elongation of the Moon from the Sun.

    Args:
        jd: Julian Day

    Returns:
        Elongation in whole degrees, 0 at new moon and 180 at full moon
    """
    sun = solar_apparent_longitude(julian_centuries(jd))
    moon = moon_position(jd).longitude
    diff = moon.deg - sun.deg
    rounded = math.copysign(math.floor(abs(diff) + 0.5), diff)
    return float(rounded % 360.0)


def mean_ascending_node(jde: float) -> Angle:
    """
    Longitude of the mean ascending node of the lunar orbit (Meeus 47.7).

    Args:
        jde: Julian Ephemeris Day

    Returns:
        Longitude in [0, 2π), referred to the mean equinox of date
    """
    omega = horner(julian_centuries(jde), 125.0445479, -1934.1362891, 0.0020754,
                   1.0 / 467441, -1.0 / 60616000)
    return Angle(pmod(omega * DEG_TO_RAD, TWO_PI))


def true_ascending_node(jd: float) -> Angle:
    """
    Longitude of the instantaneous (osculating) ascending node of the lunar orbit.

    The mean node plus the Chapront periodic terms. This is where the Moon's
    current path crosses the ecliptic, not the last place the Moon had zero
    latitude.

    Args:
        jd: Julian Day

    Returns:
        Longitude in [0, 2π)
    """
    args = NODE_TERMS[:, :4] @ _fundamental_arguments(julian_centuries(jd))
    adjust = reverse_sum(NODE_TERMS[:, 4] * np.sin(args))
    node = mean_ascending_node(jd).rad + adjust * DEG_TO_RAD
    logger.debug(f"Lunar node at JD {jd}: mean + {adjust:.4f} deg")
    return Angle(pmod(node, TWO_PI))
