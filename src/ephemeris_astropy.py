"""
Ephemeris Cross-Check Module using Astropy

This module reimplements a subset of the ephemeris on the astropy package,
so the closed-form code can be compared against an independent library:
- Gregorian calendar <-> Julian Day
- Greenwich mean sidereal time (IAU 1982, the Meeus 12.4 expression)
- FK5 precession between equinoxes
- Apparent geocentric ecliptic longitude of a body (true equinox of date)

Times are taken in UT1 or TT directly so that no Earth orientation tables
are needed.
"""

import logging
import warnings
from datetime import datetime, timedelta
from typing import Union

# Suppress astropy warnings for cleaner output
warnings.filterwarnings('ignore', category=UserWarning)

from astropy import units as u
from astropy.time import Time
from astropy.coordinates import (
    SkyCoord, FK5, GeocentricTrueEcliptic,
    get_body, solar_system_ephemeris
)

from ephemeris_angle import Angle
from ephemeris_data import Body
from ephemeris_frames import EquatorialCoordinate
from ephemeris_time import CalendarDate, julian_year_to_jde

logger = logging.getLogger(__name__)

# Built-in planetary theories, no kernel download
solar_system_ephemeris.set('builtin')


# ============================================================================
# Time Conversion Functions
# ============================================================================

def calendar_to_jd(year: int, month: int, fractional_day: float) -> float:
    """
    Julian Day of a Gregorian date using astropy.

    Args:
        year: Year (1-9999)
        month: Month (1-12)
        fractional_day: Day of month with UT time of day as a fraction

    Returns:
        Julian Day
    """
    day = int(fractional_day)
    dt = datetime(year, month, day) + timedelta(days=fractional_day - day)
    return Time(dt, scale='ut1').jd


def jd_to_calendar(jd: float) -> CalendarDate:
    """
    Gregorian calendar date of a Julian Day using astropy.

    Args:
        jd: Julian Day

    Returns:
        CalendarDate with seconds to the microsecond
    """
    dt = Time(jd, format='jd', scale='ut1').datetime
    return CalendarDate(dt.year, dt.month, dt.day, dt.hour, dt.minute,
                        dt.second + dt.microsecond * 1e-6)


def mean_sidereal_time(jd: float) -> Angle:
    """
    Greenwich mean sidereal time using astropy.

    Args:
        jd: Julian Date (UT1)

    Returns:
        Sidereal time in [0, 2π)
    """
    t = Time(jd, format='jd', scale='ut1')
    return Angle(t.sidereal_time('mean', 'greenwich', model='IAU1982').rad).normalize()


# ============================================================================
# Coordinate Functions
# ============================================================================

def precess_equatorial(coord: EquatorialCoordinate, epoch_from: float,
                       epoch_to: float) -> EquatorialCoordinate:
    """
    Precess FK5 coordinates between equinoxes using astropy.

    Args:
        coord: Right ascension and declination at epoch_from
        epoch_from: Julian year of the initial equinox
        epoch_to: Julian year of the target equinox

    Returns:
        EquatorialCoordinate at epoch_to
    """
    t_from = Time(julian_year_to_jde(epoch_from), format='jd', scale='tt')
    t_to = Time(julian_year_to_jde(epoch_to), format='jd', scale='tt')

    coord_from = SkyCoord(ra=coord.ra.rad * u.rad, dec=coord.dec.rad * u.rad,
                          frame=FK5(equinox=t_from))
    coord_to = coord_from.transform_to(FK5(equinox=t_to))

    return EquatorialCoordinate(Angle(coord_to.ra.rad), Angle(coord_to.dec.rad))


def geocentric_longitude(body: Union[Body, int, str], jde: float) -> Angle:
    """
    Apparent geocentric ecliptic longitude of a body using astropy.

    Args:
        body: Body identifier
        jde: Julian Ephemeris Day

    Returns:
        Longitude on the true ecliptic and equinox of date, in [0, 2π)
    """
    body = Body.parse(body)
    t = Time(jde, format='jd', scale='tt')
    with solar_system_ephemeris.set('builtin'):
        position = get_body(body.name.lower(), t)
    ecliptic = position.transform_to(GeocentricTrueEcliptic(equinox=t))
    lon = Angle(ecliptic.lon.rad).normalize()
    logger.debug(f"astropy {body.name.lower()} at JDE {jde:.5f}: λ {lon.deg:.6f}")
    return lon
