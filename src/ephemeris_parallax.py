"""
Parallax Module for the Ephemeris

This module provides the observer side of the pipeline:
- ObserverLocation (geodetic latitude, west-positive longitude, height)
- The parallax constants ρ sin φ′ and ρ cos φ′ of the IAU 1976 ellipsoid
- Equatorial horizontal parallax for planets and for the Moon
- Geocentric to topocentric ecliptic coordinates (Meeus 40.6, 40.7)
"""

import math
import logging
from dataclasses import dataclass
from typing import Tuple

from ephemeris_angle import Angle, DomainError, ARCSEC_TO_RAD, TWO_PI, pmod

logger = logging.getLogger(__name__)

# ============================================================================
# Constants
# ============================================================================

EARTH_EQUATORIAL_RADIUS_KM = 6378.14
EARTH_FLATTENING = 1.0 / 298.257
SOLAR_PARALLAX = 8.794 * ARCSEC_TO_RAD  # horizontal parallax at 1 AU


@dataclass(frozen=True)
class ObserverLocation:
    """Observer position on the Earth"""
    latitude: Angle  # geodetic, north positive
    longitude: Angle  # west positive
    height: float = 0.0  # meters above sea level

    @classmethod
    def from_degrees(cls, latitude: float, longitude: float, height: float = 0.0) -> "ObserverLocation":
        """
        Args:
            latitude: Degrees, north positive
            longitude: Degrees, west positive
            height: Meters above sea level
        """
        return cls(Angle.from_degrees(latitude), Angle.from_degrees(longitude), height)


# ============================================================================
# Parallax Functions
# ============================================================================

def parallax_constants(latitude: Angle, height: float) -> Tuple[float, float]:
    """
    Geocentric position of the observer (Meeus chapter 11).

    Args:
        latitude: Geodetic latitude
        height: Height above sea level in meters

    Returns:
        Tuple of (ρ sin φ′, ρ cos φ′) in units of the equatorial radius
    """
    boa = 1.0 - EARTH_FLATTENING
    u = math.atan(boa * latitude.tan())
    s, c = latitude.sincos()
    hoa = height * 1e-3 / EARTH_EQUATORIAL_RADIUS_KM
    return math.sin(u) * boa + hoa * s, math.cos(u) + hoa * c


def horizontal_parallax(distance_au: float) -> Angle:
    """Equatorial horizontal parallax of a body distance_au from the Earth"""
    if distance_au <= 0:
        raise DomainError(f"distance must be positive: {distance_au}")
    return Angle(SOLAR_PARALLAX / distance_au)


def lunar_horizontal_parallax(distance_km: float) -> Angle:
    """Equatorial horizontal parallax of the Moon distance_km from the Earth"""
    if distance_km <= EARTH_EQUATORIAL_RADIUS_KM:
        raise DomainError(f"distance inside the Earth: {distance_km} km")
    return Angle(math.asin(EARTH_EQUATORIAL_RADIUS_KM / distance_km))


def _topocentric_components(longitude: Angle, latitude: Angle, location: ObserverLocation,
                            obliquity: Angle, sidereal_time: Angle, parallax: Angle):
    s, c = parallax_constants(location.latitude, location.height)
    s_lon, c_lon = longitude.sincos()
    s_lat, c_lat = latitude.sincos()
    s_eps, c_eps = obliquity.sincos()
    s_theta, c_theta = sidereal_time.sincos()
    s_pi = parallax.sin()
    n = c_lon * c_lat - c * s_pi * c_theta
    y = s_lon * c_lat - s_pi * (s * s_eps + c * c_eps * s_theta)
    return s, c, s_lat, s_eps, c_eps, s_theta, s_pi, n, y


def topocentric_longitude(longitude: Angle, latitude: Angle, location: ObserverLocation,
                          obliquity: Angle, sidereal_time: Angle, parallax: Angle) -> Angle:
    """
    Topocentric ecliptic longitude (Meeus 40.6).

    Args:
        longitude: Geocentric ecliptic longitude
        latitude: Geocentric ecliptic latitude
        location: Observer location
        obliquity: Obliquity of the ecliptic
        sidereal_time: Local sidereal time
        parallax: Equatorial horizontal parallax of the body

    Returns:
        Topocentric longitude in [0, 2π)
    """
    *_, n, y = _topocentric_components(longitude, latitude, location, obliquity,
                                       sidereal_time, parallax)
    lon = pmod(math.atan2(y, n), TWO_PI)
    return Angle(lon)


def topocentric_ecliptic(longitude: Angle, latitude: Angle, location: ObserverLocation,
                         obliquity: Angle, sidereal_time: Angle,
                         parallax: Angle) -> Tuple[Angle, Angle]:
    """
    Topocentric ecliptic longitude and latitude (Meeus 40.6, 40.7).

    Args are as for topocentric_longitude.

    Returns:
        Tuple of (longitude in [0, 2π), latitude)
    """
    s, c, s_lat, s_eps, c_eps, s_theta, s_pi, n, y = _topocentric_components(
        longitude, latitude, location, obliquity, sidereal_time, parallax)
    lon = pmod(math.atan2(y, n), TWO_PI)
    if n == 0.0:
        raise DomainError("topocentric latitude undefined for this geometry")
    lat = math.atan(math.cos(lon) * (s_lat - s_pi * (s * c_eps - c * s_eps * s_theta)) / n)
    return Angle(lon), Angle(lat)
