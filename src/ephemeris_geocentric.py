"""
Geocentric Assembly Module for the Ephemeris

Combines heliocentric positions of the Earth and of a body into the
apparent geocentric ecliptic position of the body (Meeus chapter 33):
one light-time pass, then aberration, FK5 conversion and nutation in
longitude. Also provides the apparent positions of the Sun and the Moon.

Heliocentric sources are plain callables taking a JDE and returning a
HeliocentricPosition, so the series evaluator and the Keplerian fallback
plug in the same way.
"""

import math
import logging
from typing import Callable, NamedTuple, Tuple

from ephemeris_angle import Angle, TWO_PI, pmod
from ephemeris_time import julian_centuries
from ephemeris_series import HeliocentricPosition
from ephemeris_frames import ecliptic_aberration, to_fk5
from ephemeris_solar import solar_apparent_longitude
from ephemeris_moon import moon_position

logger = logging.getLogger(__name__)

LIGHT_TIME_DAYS_PER_AU = 0.0057755183

HeliocentricSource = Callable[[float], HeliocentricPosition]


class GeocentricPosition(NamedTuple):
    longitude: Angle
    latitude: Angle
    distance: float  # AU, or km for the Moon


def light_time(distance_au: float) -> float:
    """Light travel time in days over distance_au"""
    return distance_au * LIGHT_TIME_DAYS_PER_AU


def _rectangular(pos: HeliocentricPosition) -> Tuple[float, float, float]:
    s_lat, c_lat = pos.latitude.sincos()
    s_lon, c_lon = pos.longitude.sincos()
    return (pos.radius * c_lat * c_lon,
            pos.radius * c_lat * s_lon,
            pos.radius * s_lat)


def _difference(body: HeliocentricPosition, earth: Tuple[float, float, float]):
    bx, by, bz = _rectangular(body)
    ex, ey, ez = earth
    x, y, z = bx - ex, by - ey, bz - ez
    return x, y, z, math.sqrt(x * x + y * y + z * z)


def geocentric_position(body: HeliocentricSource, earth: HeliocentricSource, jde: float,
                        nutation_in_longitude: Angle) -> GeocentricPosition:
    """
    Apparent geocentric ecliptic position of a body.

    The body is re-evaluated once at jde minus the light time. The Earth is
    taken at jde only.

    Args:
        body: Heliocentric source of the body
        earth: Heliocentric source of the Earth
        jde: Julian Ephemeris Day
        nutation_in_longitude: Δψ at jde

    Returns:
        GeocentricPosition with longitude in [0, 2π) and distance in AU
    """
    earth_xyz = _rectangular(earth(jde))
    _, _, _, delta = _difference(body(jde), earth_xyz)

    tau = light_time(delta)
    x, y, z, delta = _difference(body(jde - tau), earth_xyz)

    lon = Angle(math.atan2(y, x))
    lat = Angle(math.atan2(z, math.hypot(x, y)))

    d_lon, d_lat = ecliptic_aberration(lon, lat, jde)
    lon, lat = to_fk5(lon + d_lon, lat + d_lat, jde)
    lon = (lon + nutation_in_longitude).normalize()

    logger.debug(f"Geocentric at JDE {jde:.5f}: λ {lon.deg:.6f}, β {lat.deg:.6f}, "
                 f"Δ {delta:.6f} AU, light time {tau:.6f} d")
    return GeocentricPosition(lon, lat, delta)


def sun_geocentric_position(jde: float) -> GeocentricPosition:
    """Apparent position of the Sun: apparent longitude, zero latitude, 1 AU"""
    return GeocentricPosition(solar_apparent_longitude(julian_centuries(jde)), Angle(0.0), 1.0)


def moon_geocentric_position(jde: float, nutation_in_longitude: Angle) -> GeocentricPosition:
    """
    Apparent position of the Moon.

    Args:
        jde: Julian Ephemeris Day
        nutation_in_longitude: Δψ at jde

    Returns:
        GeocentricPosition with distance in km
    """
    pos = moon_position(jde)
    d_lon, d_lat = ecliptic_aberration(pos.longitude, pos.latitude, jde)
    lon = Angle(pmod(pos.longitude.rad + d_lon.rad + nutation_in_longitude.rad, TWO_PI))
    return GeocentricPosition(lon, pos.latitude + d_lat, pos.distance)
