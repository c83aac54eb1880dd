"""
Solar Module for the Ephemeris

Low-precision solar coordinates (Meeus chapter 25) used by the aberration
corrections, the Sun's own position and the moon phase, plus a sunrise and
sunset estimate based on the sunrise equation.
"""

import math
import logging
from typing import Tuple

from ephemeris_angle import Angle, DomainError, DEG_TO_RAD, RAD_TO_DEG, TWO_PI, horner, pmod
from ephemeris_time import J2000

logger = logging.getLogger(__name__)


def solar_mean_anomaly(t: float) -> Angle:
    """
    Mean anomaly of the Sun, not reduced to one revolution.

    Args:
        t: Julian centuries since J2000.0

    Returns:
        Mean anomaly
    """
    return Angle.from_degrees(horner(t, 357.52911, 35999.05029, -0.0001537))


def solar_true(t: float) -> Tuple[Angle, Angle]:
    """
    True geometric longitude and true anomaly of the Sun.

    Args:
        t: Julian centuries since J2000.0

    Returns:
        Tuple of (true longitude, true anomaly), both in [0, 2π)
    """
    l0 = horner(t, 280.46646, 36000.76983, 0.0003032) * DEG_TO_RAD
    m = solar_mean_anomaly(t).rad
    c = ((1.914602 - 0.004817 * t - 0.000014 * t * t) * math.sin(m)
         + (0.019993 - 0.000101 * t) * math.sin(2 * m)
         + 0.000289 * math.sin(3 * m)) * DEG_TO_RAD
    return Angle(pmod(l0 + c, TWO_PI)), Angle(pmod(m + c, TWO_PI))


def earth_eccentricity(t: float) -> float:
    """Eccentricity of the Earth's orbit at t Julian centuries from J2000.0"""
    return horner(t, 0.016708634, -0.000042037, -0.0000001267)


def solar_apparent_longitude(t: float) -> Angle:
    """
    Apparent longitude of the Sun, corrected for nutation and aberration.

    Args:
        t: Julian centuries since J2000.0

    Returns:
        Apparent longitude in [0, 2π)
    """
    omega = (125.04 - 1934.136 * t) * DEG_TO_RAD
    s, _ = solar_true(t)
    lon = s.rad - (0.00569 + 0.00478 * math.sin(omega)) * DEG_TO_RAD
    return Angle(pmod(lon, TWO_PI))


def sunrise_sunset(jd: float, latitude: Angle, longitude: Angle) -> Tuple[float, float]:
    """
    Estimate sunrise and sunset with the sunrise equation.

    The estimate is good to a few minutes.

    Args:
        jd: Julian Day of the date of interest
        latitude: Observer latitude
        longitude: Observer longitude (west positive)

    Returns:
        Tuple of (sunrise JD, sunset JD) in UT

    Raises:
        DomainError: If the Sun stays above or below the horizon all day
    """
    day_number = math.ceil(jd - J2000 + 0.0008)
    mean_solar_time = day_number + longitude.rad / TWO_PI

    m = pmod(0.01720196999454 * mean_solar_time + 6.2400599667, TWO_PI)
    center = 1.9148 * math.sin(m) + 0.02 * math.sin(2 * m) + 0.0003 * math.sin(3 * m)
    ecliptic_lon = pmod(m * RAD_TO_DEG + center + 180.0 + 102.9372, 360.0) * DEG_TO_RAD

    transit = J2000 + mean_solar_time + 0.0053 * math.sin(m) - 0.0069 * math.sin(2 * ecliptic_lon)
    declination = math.asin(math.sin(ecliptic_lon) * 0.39778850739795)

    sin_lat, cos_lat = latitude.sincos()
    cos_hour_angle = ((-0.014485726138606 - sin_lat * math.sin(declination))
                      / (cos_lat * math.cos(declination)))
    if abs(cos_hour_angle) > 1.0:
        raise DomainError(f"no sunrise or sunset at latitude {latitude.deg:.4f} on JD {jd}")

    half_day = math.acos(cos_hour_angle) / TWO_PI
    logger.debug(f"Solar transit at JD {transit:.5f}, half day {half_day * 24:.3f}h")
    return transit - half_day, transit + half_day
