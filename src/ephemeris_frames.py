"""
Frame Correction Module for the Ephemeris

This module provides the reference-frame corrections of the position
pipeline:
- Ecliptic <-> equatorial coordinate conversion
- Nutation in longitude and obliquity, mean and true obliquity
- Precession in equatorial and ecliptic form, with proper motion
- Annual aberration for ecliptic and equatorial coordinates
- Conversion of VSOP87 dynamical coordinates to the FK5 frame
- Apparent place of a catalog star

Every function is stateless. Angles are ephemeris_angle.Angle values.
"""

import math
import logging
from typing import NamedTuple, Optional, Tuple

import numpy as np

from ephemeris_angle import (
    Angle, DomainError, ARCSEC_TO_RAD, DEG_TO_RAD, HOURS_TO_RAD, TWO_PI, horner, pmod,
    reverse_sum
)
from ephemeris_time import julian_centuries, julian_year_to_jde, jde_to_julian_year
from ephemeris_solar import solar_true, earth_eccentricity

logger = logging.getLogger(__name__)

# ============================================================================
# Constants
# ============================================================================

SMALL_ANGLE = 10.0 / 60.0 * DEG_TO_RAD  # 10 arcminutes
COS_SMALL_ANGLE = math.cos(SMALL_ANGLE)
KAPPA = 20.49552 * ARCSEC_TO_RAD  # constant of aberration


# ============================================================================
# Coordinate Types
# ============================================================================

class EclipticCoordinate(NamedTuple):
    longitude: Angle
    latitude: Angle


class EquatorialCoordinate(NamedTuple):
    ra: Angle
    dec: Angle


class ProperMotion(NamedTuple):
    """Annual proper motion; ra is an angle of right ascension per Julian year"""
    ra: Angle
    dec: Angle

    @classmethod
    def from_catalog(cls, ra_seconds: float, dec_arcseconds: float) -> "ProperMotion":
        """
        Build from catalog units.

        Args:
            ra_seconds: Seconds of time per year in right ascension
            dec_arcseconds: Arcseconds per year in declination
        """
        return cls(Angle(ra_seconds / 3600.0 * HOURS_TO_RAD),
                   Angle.from_arcseconds(dec_arcseconds))


# ============================================================================
# Coordinate Transformation Functions
# ============================================================================

def ecliptic_to_equatorial(coord: EclipticCoordinate, obliquity: Angle) -> EquatorialCoordinate:
    """
    Convert ecliptic to equatorial coordinates (Meeus 13.3, 13.4).

    Args:
        coord: Ecliptic longitude and latitude
        obliquity: Obliquity of the ecliptic

    Returns:
        Right ascension in [0, 2π) and declination
    """
    s_eps, c_eps = obliquity.sincos()
    s_lon, c_lon = coord.longitude.sincos()
    s_lat, c_lat = coord.latitude.sincos()
    ra = math.atan2(s_lon * c_eps - coord.latitude.tan() * s_eps, c_lon)
    dec = math.asin(s_lat * c_eps + c_lat * s_eps * s_lon)
    return EquatorialCoordinate(Angle(pmod(ra, TWO_PI)), Angle(dec))


def equatorial_to_ecliptic(coord: EquatorialCoordinate, obliquity: Angle) -> EclipticCoordinate:
    """
    Convert equatorial to ecliptic coordinates (Meeus 13.1, 13.2).

    Args:
        coord: Right ascension and declination
        obliquity: Obliquity of the ecliptic

    Returns:
        Ecliptic longitude in [0, 2π) and latitude
    """
    s_eps, c_eps = obliquity.sincos()
    s_ra, c_ra = coord.ra.sincos()
    s_dec, c_dec = coord.dec.sincos()
    lon = math.atan2(s_ra * c_eps + coord.dec.tan() * s_eps, c_ra)
    lat = math.asin(s_dec * c_eps - c_dec * s_eps * s_ra)
    return EclipticCoordinate(Angle(pmod(lon, TWO_PI)), Angle(lat))


# ============================================================================
# Nutation and Obliquity
# ============================================================================

# Meeus table 22.A. Columns: multipliers of D, M, M', F, Ω, then the
# longitude coefficients (s0, s1) and obliquity coefficients (c0, c1) in
# units of 0.0001 arcsecond.
NUTATION_TERMS = np.array([
    [0, 0, 0, 0, 1, -171996, -174.2, 92025, 8.9],
    [-2, 0, 0, 2, 2, -13187, -1.6, 5736, -3.1],
    [0, 0, 0, 2, 2, -2274, -0.2, 977, -0.5],
    [0, 0, 0, 0, 2, 2062, 0.2, -895, 0.5],
    [0, 1, 0, 0, 0, 1426, -3.4, 54, -0.1],
    [0, 0, 1, 0, 0, 712, 0.1, -7, 0],
    [-2, 1, 0, 2, 2, -517, 1.2, 224, -0.6],
    [0, 0, 0, 2, 1, -386, -0.4, 200, 0],
    [0, 0, 1, 2, 2, -301, 0, 129, -0.1],
    [-2, -1, 0, 2, 2, 217, -0.5, -95, 0.3],
    [-2, 0, 1, 0, 0, -158, 0, 0, 0],
    [-2, 0, 0, 2, 1, 129, 0.1, -70, 0],
    [0, 0, -1, 2, 2, 123, 0, -53, 0],
    [2, 0, 0, 0, 0, 63, 0, 0, 0],
    [0, 0, 1, 0, 1, 63, 0.1, -33, 0],
    [2, 0, -1, 2, 2, -59, 0, 26, 0],
    [0, 0, -1, 0, 1, -58, -0.1, 32, 0],
    [0, 0, 1, 2, 1, -51, 0, 27, 0],
    [-2, 0, 2, 0, 0, 48, 0, 0, 0],
    [0, 0, -2, 2, 1, 46, 0, -24, 0],
    [2, 0, 0, 2, 2, -38, 0, 16, 0],
    [0, 0, 2, 2, 2, -31, 0, 13, 0],
    [0, 0, 2, 0, 0, 29, 0, 0, 0],
    [-2, 0, 1, 2, 2, 29, 0, -12, 0],
    [0, 0, 0, 2, 0, 26, 0, 0, 0],
    [-2, 0, 0, 2, 0, -22, 0, 0, 0],
    [0, 0, -1, 2, 1, 21, 0, -10, 0],
    [0, 2, 0, 0, 0, 17, -0.1, 0, 0],
    [2, 0, -1, 0, 1, 16, 0, -8, 0],
    [-2, 2, 0, 2, 2, -16, 0.1, 7, 0],
    [0, 1, 0, 0, 1, -15, 0, 9, 0],
    [-2, 0, 1, 0, 1, -13, 0, 7, 0],
    [0, -1, 0, 0, 1, -12, 0, 6, 0],
    [0, 0, 2, -2, 0, 11, 0, 0, 0],
    [2, 0, -1, 2, 1, -10, 0, 5, 0],
    [2, 0, 1, 2, 2, -8, 0, 3, 0],
    [0, 1, 0, 2, 2, 7, 0, -3, 0],
    [-2, 1, 1, 0, 0, -7, 0, 0, 0],
    [0, -1, 0, 2, 2, -7, 0, 3, 0],
    [2, 0, 0, 2, 1, -7, 0, 3, 0],
    [2, 0, 1, 0, 0, 6, 0, 0, 0],
    [-2, 0, 2, 2, 2, 6, 0, -3, 0],
    [-2, 0, 1, 2, 1, 6, 0, -3, 0],
    [2, 0, -2, 0, 1, -6, 0, 3, 0],
    [2, 0, 0, 0, 1, -6, 0, 3, 0],
    [0, -1, 1, 0, 0, 5, 0, 0, 0],
    [-2, -1, 0, 2, 1, -5, 0, 3, 0],
    [-2, 0, 0, 0, 1, -5, 0, 3, 0],
    [0, 0, 2, 2, 1, -5, 0, 3, 0],
    [-2, 0, 2, 0, 1, 4, 0, 0, 0],
    [-2, 1, 0, 2, 1, 4, 0, 0, 0],
    [0, 0, 1, -2, 0, 4, 0, 0, 0],
    [-1, 0, 1, 0, 0, -4, 0, 0, 0],
    [-2, 1, 0, 0, 0, -4, 0, 0, 0],
    [1, 0, 0, 0, 0, -4, 0, 0, 0],
    [0, 0, 1, 2, 0, 3, 0, 0, 0],
    [0, 0, -2, 2, 2, -3, 0, 0, 0],
    [-1, -1, 1, 0, 0, -3, 0, 0, 0],
    [0, 1, 1, 0, 0, -3, 0, 0, 0],
    [0, -1, 1, 2, 2, -3, 0, 0, 0],
    [2, -1, -1, 2, 2, -3, 0, 0, 0],
    [0, 0, 3, 2, 2, -3, 0, 0, 0],
    [2, -1, 0, 2, 2, -3, 0, 0, 0],
], dtype=float)
NUTATION_TERMS.flags.writeable = False


def nutation(jde: float) -> Tuple[Angle, Angle]:
    """
    Nutation in longitude and in obliquity (Meeus chapter 22).

    Args:
        jde: Julian Ephemeris Day

    Returns:
        Tuple of (Δψ, Δε)
    """
    t = julian_centuries(jde)
    fundamentals = np.array([
        horner(t, 297.85036, 445267.11148, -0.0019142, 1.0 / 189474),   # D
        horner(t, 357.52772, 35999.050340, -0.0001603, -1.0 / 300000),  # M
        horner(t, 134.96298, 477198.867398, 0.0086972, 1.0 / 5620),     # M'
        horner(t, 93.27191, 483202.017538, -0.0036825, 1.0 / 327270),   # F
        horner(t, 125.04452, -1934.136261, 0.0020708, 1.0 / 450000),    # Ω
    ]) * DEG_TO_RAD

    args = NUTATION_TERMS[:, :5] @ fundamentals
    s0, s1, c0, c1 = NUTATION_TERMS[:, 5:].T
    delta_psi = reverse_sum(np.sin(args) * (s0 + s1 * t))
    delta_eps = reverse_sum(np.cos(args) * (c0 + c1 * t))
    return (Angle.from_arcseconds(delta_psi * 0.0001),
            Angle.from_arcseconds(delta_eps * 0.0001))


def mean_obliquity(jde: float) -> Angle:
    """Mean obliquity of the ecliptic, IAU formula (Meeus 22.2)"""
    t = julian_centuries(jde)
    return Angle.from_arcseconds(horner(t, 84381.448, -46.815, -0.00059, 0.001813))


def true_obliquity(jde: float) -> Angle:
    """Mean obliquity plus nutation in obliquity"""
    _, delta_eps = nutation(jde)
    return mean_obliquity(jde) + delta_eps


def nutation_in_ra(jde: float) -> Angle:
    """Nutation in right ascension, the equation of the equinoxes"""
    delta_psi, delta_eps = nutation(jde)
    eps = mean_obliquity(jde) + delta_eps
    return Angle(delta_psi.rad * eps.cos())


def equatorial_nutation(ra: Angle, dec: Angle, jd: float) -> Tuple[Angle, Angle]:
    """
    Nutation corrections to equatorial coordinates (Meeus 23.1).

    Args:
        ra: Right ascension
        dec: Declination
        jd: Julian Day

    Returns:
        Tuple of (Δα1, Δδ1)
    """
    eps = mean_obliquity(jd)
    s_eps, c_eps = eps.sincos()
    delta_psi, delta_eps = nutation(jd)
    s_ra, c_ra = ra.sincos()
    t_dec = dec.tan()
    d_ra = (c_eps + s_eps * s_ra * t_dec) * delta_psi.rad - c_ra * t_dec * delta_eps.rad
    d_dec = delta_psi.rad * s_eps * c_ra + delta_eps.rad * s_ra
    return Angle(d_ra), Angle(d_dec)


# ============================================================================
# Precession
# ============================================================================

_S = ARCSEC_TO_RAD

_ZETA_T = (2306.2181 * _S, 1.39656 * _S, -0.000139 * _S)
_Z_T = (2306.2181 * _S, 1.39656 * _S, -0.000139 * _S)
_THETA_T = (2004.3109 * _S, -0.8533 * _S, -0.000217 * _S)

_ZETA_SMALL_T = (2306.2181 * _S, 0.30188 * _S, 0.017998 * _S)
_Z_SMALL_T = (2306.2181 * _S, 1.09468 * _S, 0.018203 * _S)
_THETA_SMALL_T = (2004.3109 * _S, -0.42665 * _S, -0.041833 * _S)

_ETA_T = (47.0029 * _S, -0.06603 * _S, 0.000598 * _S)
_PI_T = (174.876384 * DEG_TO_RAD, 3289.4789 * _S, 0.60622 * _S)
_P_T = (5029.0966 * _S, 2.22226 * _S, -0.000042 * _S)

_ETA_SMALL_T = (47.0029 * _S, -0.03302 * _S, 0.000060 * _S)
_PI_SMALL_T = (174.876384 * DEG_TO_RAD, -869.8089 * _S, 0.03536 * _S)
_P_SMALL_T = (5029.0966 * _S, 1.11113 * _S, -0.000006 * _S)


def _latitude_from_components(a: float, b: float, c: float) -> float:
    """
    Recover a latitude from the rotated unit vector.

    Near the pole (|c| >= cos 10′) asin loses precision, so the latitude is
    taken from the arccosine of the equatorial component instead.
    """
    if abs(c) < COS_SMALL_ANGLE:
        return math.asin(c)
    lat = math.acos(min(1.0, math.hypot(a, b)))
    return -lat if c < 0 else lat


class EquatorialPrecessor:
    """
    Precesses equatorial coordinates between two Julian epochs (Meeus 21.2-21.4).

    The rotation angles depend only on the epochs and are computed once.
    """

    def __init__(self, epoch_from: float, epoch_to: float):
        zeta_c, z_c, theta_c = _ZETA_SMALL_T, _Z_SMALL_T, _THETA_SMALL_T
        if epoch_from != 2000.0:
            big_t = (epoch_from - 2000.0) * 0.01
            zeta_c = (horner(big_t, *_ZETA_T), 0.30188 * _S - 0.000344 * _S * big_t, 0.017998 * _S)
            z_c = (horner(big_t, *_Z_T), 1.09468 * _S + 0.000066 * _S * big_t, 0.018203 * _S)
            theta_c = (horner(big_t, *_THETA_T), -0.42665 * _S - 0.000217 * _S * big_t,
                       -0.041833 * _S)
        t = (epoch_to - epoch_from) * 0.01
        self.zeta = horner(t, *zeta_c) * t
        self.z = horner(t, *z_c) * t
        theta = horner(t, *theta_c) * t
        self._sin_theta = math.sin(theta)
        self._cos_theta = math.cos(theta)

    def precess(self, coord: EquatorialCoordinate) -> EquatorialCoordinate:
        s_dec, c_dec = coord.dec.sincos()
        s_az, c_az = math.sin(coord.ra.rad + self.zeta), math.cos(coord.ra.rad + self.zeta)
        a = c_dec * s_az
        b = self._cos_theta * c_dec * c_az - self._sin_theta * s_dec
        c = self._sin_theta * c_dec * c_az + self._cos_theta * s_dec
        ra = math.atan2(a, b) + self.z
        return EquatorialCoordinate(Angle(pmod(ra, TWO_PI)),
                                    Angle(_latitude_from_components(a, b, c)))


class EclipticPrecessor:
    """Precesses ecliptic coordinates between two Julian epochs (Meeus 21.5-21.7)"""

    def __init__(self, epoch_from: float, epoch_to: float):
        eta_c, pi_c, p_c = _ETA_SMALL_T, _PI_SMALL_T, _P_SMALL_T
        if epoch_from != 2000.0:
            big_t = (epoch_from - 2000.0) * 0.01
            eta_c = (horner(big_t, *_ETA_T), -0.03302 * _S + 0.000598 * _S * big_t, 0.000060 * _S)
            pi_c = (horner(big_t, *_PI_T), -869.8089 * _S - 0.50491 * _S * big_t, 0.03536 * _S)
            p_c = (horner(big_t, *_P_T), 1.11113 * _S - 0.000042 * _S * big_t, -0.000006 * _S)
        t = (epoch_to - epoch_from) * 0.01
        # π is an angle of the ecliptic node, not a rate, so it is not scaled by t
        self.pi = horner(t, *pi_c)
        self.p = horner(t, *p_c) * t
        eta = horner(t, *eta_c) * t
        self._sin_eta = math.sin(eta)
        self._cos_eta = math.cos(eta)

    def precess(self, coord: EclipticCoordinate) -> EclipticCoordinate:
        s_lat, c_lat = coord.latitude.sincos()
        s_d, c_d = math.sin(self.pi - coord.longitude.rad), math.cos(self.pi - coord.longitude.rad)
        a = self._cos_eta * c_lat * s_d - self._sin_eta * s_lat
        b = c_lat * c_d
        c = self._cos_eta * s_lat + self._sin_eta * c_lat * s_d
        lon = self.p + self.pi - math.atan2(a, b)
        return EclipticCoordinate(Angle(pmod(lon, TWO_PI)),
                                  Angle(_latitude_from_components(a, b, c)))


def precess_equatorial(coord: EquatorialCoordinate, epoch_from: float, epoch_to: float,
                       proper_motion: Optional[ProperMotion] = None) -> EquatorialCoordinate:
    """
    Precess equatorial coordinates, applying proper motion first.

    Args:
        coord: Position at epoch_from
        epoch_from: Julian epoch of the input, e.g. 2000.0
        epoch_to: Julian epoch of the result
        proper_motion: Annual proper motion, if any

    Returns:
        Position at epoch_to
    """
    if proper_motion is not None:
        t = epoch_to - epoch_from
        coord = EquatorialCoordinate(coord.ra + proper_motion.ra * t,
                                     coord.dec + proper_motion.dec * t)
    return EquatorialPrecessor(epoch_from, epoch_to).precess(coord)


def _proper_motion_to_ecliptic(proper_motion: ProperMotion, epoch: float,
                               coord: EclipticCoordinate) -> Tuple[float, float]:
    eps = mean_obliquity(julian_year_to_jde(epoch))
    s_eps, c_eps = eps.sincos()
    eq = ecliptic_to_equatorial(coord, eps)
    s_ra, c_ra = eq.ra.sincos()
    s_dec, c_dec = eq.dec.sincos()
    c_lat = coord.latitude.cos()
    m_ra, m_dec = proper_motion.ra.rad, proper_motion.dec.rad
    m_lon = (m_dec * s_eps * c_ra + m_ra * c_dec * (c_eps * c_dec + s_eps * s_dec * s_ra)) / (c_lat * c_lat)
    m_lat = (m_dec * (c_eps * c_dec + s_eps * s_dec * s_ra) - m_ra * s_eps * c_ra * c_dec) / c_lat
    return m_lon, m_lat


def precess_ecliptic(coord: EclipticCoordinate, epoch_from: float, epoch_to: float,
                     proper_motion: Optional[ProperMotion] = None) -> EclipticCoordinate:
    """
    Precess ecliptic coordinates, applying proper motion first.

    Args:
        coord: Position at epoch_from
        epoch_from: Julian epoch of the input
        epoch_to: Julian epoch of the result
        proper_motion: Equatorial annual proper motion, if any

    Returns:
        Position at epoch_to
    """
    if proper_motion is not None and (proper_motion.ra.rad != 0.0 or proper_motion.dec.rad != 0.0):
        m_lon, m_lat = _proper_motion_to_ecliptic(proper_motion, epoch_from, coord)
        t = epoch_to - epoch_from
        coord = EclipticCoordinate(Angle(coord.longitude.rad + m_lon * t),
                                   Angle(coord.latitude.rad + m_lat * t))
    return EclipticPrecessor(epoch_from, epoch_to).precess(coord)


# ============================================================================
# Aberration
# ============================================================================

def perihelion_longitude(t: float) -> Angle:
    """Longitude of the perihelion of the Earth's orbit"""
    return Angle.from_degrees(horner(t, 102.93735, 1.71946, 0.00046))


def ecliptic_aberration(longitude: Angle, latitude: Angle, jde: float) -> Tuple[Angle, Angle]:
    """
    Annual aberration in ecliptic coordinates (Meeus 23.2).

    Args:
        longitude: Geocentric ecliptic longitude
        latitude: Geocentric ecliptic latitude
        jde: Julian Ephemeris Day

    Returns:
        Tuple of (Δλ, Δβ)
    """
    t = julian_centuries(jde)
    sun, _ = solar_true(t)
    e = earth_eccentricity(t)
    pi = perihelion_longitude(t)
    s_lat, c_lat = latitude.sincos()
    if c_lat == 0.0:
        raise DomainError("ecliptic aberration undefined at the ecliptic pole")
    s_sl, c_sl = math.sin(sun.rad - longitude.rad), math.cos(sun.rad - longitude.rad)
    s_pl, c_pl = math.sin(pi.rad - longitude.rad), math.cos(pi.rad - longitude.rad)
    d_lon = KAPPA * (e * c_pl - c_sl) / c_lat
    d_lat = -KAPPA * s_lat * (s_sl - e * s_pl)
    return Angle(d_lon), Angle(d_lat)


def equatorial_aberration(ra: Angle, dec: Angle, jd: float) -> Tuple[Angle, Angle]:
    """
    Annual aberration in equatorial coordinates (Meeus 23.3).

    Args:
        ra: Right ascension
        dec: Declination
        jd: Julian Day

    Returns:
        Tuple of (Δα2, Δδ2)
    """
    eps = mean_obliquity(jd)
    t = julian_centuries(jd)
    sun, _ = solar_true(t)
    e = earth_eccentricity(t)
    pi = perihelion_longitude(t)
    s_ra, c_ra = ra.sincos()
    s_dec, c_dec = dec.sincos()
    if c_dec == 0.0:
        raise DomainError("equatorial aberration undefined at the celestial pole")
    s_sun, c_sun = sun.sincos()
    s_pi, c_pi = pi.sincos()
    c_eps = eps.cos()
    t_eps = eps.tan()
    q1 = c_ra * c_eps
    d_ra = KAPPA * (e * (q1 * c_pi + s_ra * s_pi) - (q1 * c_sun + s_ra * s_sun)) / c_dec
    q2 = c_eps * (t_eps * c_dec - s_ra * s_dec)
    q3 = c_ra * s_dec
    d_dec = KAPPA * (e * (c_pi * q2 + s_pi * q3) - (c_sun * q2 + s_sun * q3))
    return Angle(d_ra), Angle(d_dec)


# ============================================================================
# FK5 and Apparent Place
# ============================================================================

def to_fk5(longitude: Angle, latitude: Angle, jde: float) -> Tuple[Angle, Angle]:
    """
    Convert VSOP87 dynamical-frame coordinates to FK5 (Meeus 32.3).

    Args:
        longitude: Ecliptic longitude in the VSOP87 frame
        latitude: Ecliptic latitude in the VSOP87 frame
        jde: Julian Ephemeris Day

    Returns:
        Tuple of (longitude, latitude) in FK5
    """
    t = julian_centuries(jde)
    lp = longitude.rad - (1.397 * t + 0.00031 * t * t) * DEG_TO_RAD
    s_lp, c_lp = math.sin(lp), math.cos(lp)
    d_lon = Angle.from_arcseconds(-0.09033 + 0.03916 * (c_lp + s_lp) * latitude.tan())
    d_lat = Angle.from_arcseconds(0.03916 * (c_lp - s_lp))
    return longitude + d_lon, latitude + d_lat


def apparent_position(coord: EquatorialCoordinate, epoch_from: float, epoch_to: float,
                      proper_motion: Optional[ProperMotion] = None) -> EquatorialCoordinate:
    """
    Apparent place of a star: proper motion, precession, nutation, aberration.

    Args:
        coord: Catalog position at epoch_from
        epoch_from: Julian epoch of the catalog
        epoch_to: Julian epoch of observation
        proper_motion: Annual proper motion, if any

    Returns:
        Apparent right ascension and declination at epoch_to
    """
    mean = precess_equatorial(coord, epoch_from, epoch_to, proper_motion)
    jd = julian_year_to_jde(epoch_to)
    d_ra1, d_dec1 = equatorial_nutation(mean.ra, mean.dec, jd)
    d_ra2, d_dec2 = equatorial_aberration(mean.ra, mean.dec, jd)
    return EquatorialCoordinate((mean.ra + d_ra1 + d_ra2).normalize(),
                                mean.dec + d_dec1 + d_dec2)


def stellar_longitude(jd: float, coord: EquatorialCoordinate,
                      proper_motion: Optional[ProperMotion] = None) -> Angle:
    """
    Apparent ecliptic longitude of a J2000.0 catalog star.

    Args:
        jd: Julian Day of observation
        coord: J2000.0 catalog position
        proper_motion: Annual proper motion, if any

    Returns:
        Apparent ecliptic longitude in [0, 2π)
    """
    apparent = apparent_position(coord, 2000.0, jde_to_julian_year(jd), proper_motion)
    ecl = equatorial_to_ecliptic(apparent, true_obliquity(jd))
    logger.debug(f"Star at JD {jd:.5f}: apparent RA {apparent.ra.hours:.6f}h, "
                 f"longitude {ecl.longitude.deg:.6f}")
    return ecl.longitude
