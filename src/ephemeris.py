"""
Topocentric Ephemeris Module

This module sequences the ephemeris components into the operations callers
use: the topocentric ecliptic longitude of a body for a date and an
observer, and the related geocentric positions, obliquity and sidereal
time, stellar longitudes, moon phase and sunrise/sunset.

Julian Days are used as Julian Ephemeris Days; ΔT is neglected.

Python Version: 3.7+
"""

import sys
import logging
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

from ephemeris_angle import Angle, DomainError, EphemerisError
from ephemeris_time import calendar_gregorian_to_jd, local_sidereal_time
from ephemeris_data import Body, DataUnavailable, SeriesDataProvider
from ephemeris_series import HeliocentricPosition, SeriesTable, heliocentric_position
from ephemeris_kepler import ELEMENTS, heliocentric_position as keplerian_position
from ephemeris_frames import (
    EquatorialCoordinate, ProperMotion, mean_obliquity, nutation,
    stellar_longitude as apparent_stellar_longitude
)
from ephemeris_geocentric import (
    GeocentricPosition, HeliocentricSource, geocentric_position,
    moon_geocentric_position, sun_geocentric_position
)
from ephemeris_parallax import (
    ObserverLocation, horizontal_parallax, lunar_horizontal_parallax,
    topocentric_longitude as parallax_corrected_longitude
)
from ephemeris_moon import moon_phase, true_ascending_node
from ephemeris_solar import sunrise_sunset

logger = logging.getLogger(__name__)

BodyId = Union[Body, int, str]


# ============================================================================
# Constants and Configuration
# ============================================================================

class PositionSource(Enum):
    """Heliocentric model used for a planet"""
    SERIES = "series"
    KEPLERIAN = "keplerian"


class Config:
    """Configuration constants for the ephemeris"""

    # Heliocentric model per planet. The Sun and the Moon have their own paths.
    BODY_SOURCES = {
        Body.MERCURY: PositionSource.KEPLERIAN,
        Body.VENUS: PositionSource.SERIES,
        Body.MARS: PositionSource.SERIES,
        Body.JUPITER: PositionSource.SERIES,
        Body.SATURN: PositionSource.SERIES,
    }

    # Bodies whose series tables are loaded into the registry
    SERIES_BODIES = (Body.EARTH, Body.VENUS, Body.MARS, Body.JUPITER, Body.SATURN)

    # Default site for the command line (Woonsocket, RI)
    DEFAULT_LATITUDE = 42.0  # degrees
    DEFAULT_LONGITUDE = 71.516667  # degrees, west positive
    DEFAULT_HEIGHT = 56.0832  # meters

    # Logging
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


# ============================================================================
# Body Registry
# ============================================================================

class BodyRegistry(Mapping):
    """
    Immutable mapping of bodies to their series tables.

    Built once, then shared read-only by any number of Ephemeris instances
    and threads.
    """

    def __init__(self, tables: Mapping[Body, SeriesTable]):
        self._tables = MappingProxyType(dict(tables))

    @classmethod
    def load(cls, provider: Optional[SeriesDataProvider] = None,
             bodies: Iterable[BodyId] = Config.SERIES_BODIES) -> "BodyRegistry":
        """
        Load the tables of the given bodies from a data provider.

        Raises:
            InvalidBodyIdentifier: For an unknown body
            DataUnavailable: If the provider has no table for a body
        """
        provider = provider or SeriesDataProvider()
        tables: Dict[Body, SeriesTable] = {}
        for body in bodies:
            body = Body.parse(body)
            tables[body] = provider.load(body)
        logger.info(f"Loaded series tables for {', '.join(b.name.lower() for b in tables)}")
        return cls(tables)

    def table(self, body: Body) -> SeriesTable:
        """
        Raises:
            DataUnavailable: If the registry holds no table for the body
        """
        try:
            return self._tables[body]
        except KeyError as exc:
            raise DataUnavailable(f"No series table registered for {body.name.lower()}") from exc

    def __getitem__(self, body: Body) -> SeriesTable:
        return self._tables[body]

    def __iter__(self) -> Iterator[Body]:
        return iter(self._tables)

    def __len__(self) -> int:
        return len(self._tables)


# ============================================================================
# Ephemeris
# ============================================================================

class Ephemeris:
    """
    Position pipeline over an injected body registry.

    Every method is a pure function of its arguments and the registry.
    """

    def __init__(self, registry: BodyRegistry, config: Optional[Config] = None):
        self.registry = registry
        self.config = config or Config()

    def heliocentric_source(self, body: BodyId,
                            source: Optional[PositionSource] = None) -> HeliocentricSource:
        """
        Return the heliocentric model of a planet as a callable of JDE.

        Args:
            body: Planet or the Earth
            source: Model to use, overriding Config.BODY_SOURCES

        Raises:
            InvalidBodyIdentifier: For an unknown body
            DataUnavailable: If the chosen model has no data for the body
        """
        body = Body.parse(body)
        if body in (Body.SUN, Body.MOON):
            raise DataUnavailable(f"No heliocentric model for {body.name.lower()}")
        if source is None:
            source = self.config.BODY_SOURCES.get(body, PositionSource.SERIES)

        if source is PositionSource.KEPLERIAN:
            if body not in ELEMENTS:
                raise DataUnavailable(f"No orbital elements for {body.name.lower()}")

            def position(jde: float) -> HeliocentricPosition:
                return keplerian_position(body, jde)
            return position

        table = self.registry.table(body)

        def position(jde: float) -> HeliocentricPosition:
            return heliocentric_position(table, jde)
        return position

    def geocentric_position(self, body: BodyId, jde: float,
                            nutation_in_longitude: Optional[Angle] = None,
                            source: Optional[PositionSource] = None) -> GeocentricPosition:
        """
        Apparent geocentric ecliptic position of a body.

        Args:
            body: Body identifier
            jde: Julian Ephemeris Day
            nutation_in_longitude: Δψ at jde, computed if not given
            source: Heliocentric model override for planets

        Returns:
            GeocentricPosition (distance in km for the Moon, AU otherwise)
        """
        body = Body.parse(body)
        if body is Body.EARTH:
            raise DomainError("the Earth has no geocentric position")
        if body is Body.SUN:
            return sun_geocentric_position(jde)
        if nutation_in_longitude is None:
            nutation_in_longitude, _ = nutation(jde)
        if body is Body.MOON:
            return moon_geocentric_position(jde, nutation_in_longitude)
        return geocentric_position(self.heliocentric_source(body, source),
                                   self.heliocentric_source(Body.EARTH), jde,
                                   nutation_in_longitude)

    def obliquity_and_sidereal_time(self, jd: float,
                                    location: ObserverLocation) -> Tuple[Angle, Angle]:
        """
        True obliquity and local apparent sidereal time.

        Returns:
            Tuple of (obliquity, local sidereal time)
        """
        delta_psi, delta_eps = nutation(jd)
        eps = mean_obliquity(jd) + delta_eps
        return eps, local_sidereal_time(jd, location.longitude, delta_psi, eps)

    def topocentric_position_longitude(self, jd: float, location: ObserverLocation,
                                       body: BodyId,
                                       source: Optional[PositionSource] = None) -> Angle:
        """
        Topocentric ecliptic longitude of a body at a Julian Day.

        Args:
            jd: Julian Day
            location: Observer location
            body: Body identifier
            source: Heliocentric model override for planets

        Returns:
            Topocentric longitude in [0, 2π)
        """
        body = Body.parse(body)
        delta_psi, delta_eps = nutation(jd)
        eps = mean_obliquity(jd) + delta_eps
        lst = local_sidereal_time(jd, location.longitude, delta_psi, eps)

        geo = self.geocentric_position(body, jd, delta_psi, source)
        if body is Body.MOON:
            parallax = lunar_horizontal_parallax(geo.distance)
        else:
            parallax = horizontal_parallax(geo.distance)

        lon = parallax_corrected_longitude(geo.longitude, geo.latitude, location, eps, lst, parallax)
        logger.debug(f"{body.name.lower()} at JD {jd:.6f}: geocentric {geo.longitude.deg:.6f}, "
                     f"parallax {parallax.arcsec:.3f}\", topocentric {lon.deg:.6f}")
        return lon

    def topocentric_longitude(self, year: int, month: int, fractional_day: float,
                              latitude: Angle, longitude: Angle, height: float,
                              body: BodyId, source: Optional[PositionSource] = None) -> Angle:
        """
        Topocentric ecliptic longitude of a body for a calendar date.

        Args:
            year: Year
            month: Month (1-12)
            fractional_day: Day of month with UT time of day as a fraction
            latitude: Geodetic latitude of the observer
            longitude: Longitude of the observer (west positive)
            height: Height above sea level in meters
            body: Body identifier (member, id or name)
            source: Heliocentric model override for planets

        Returns:
            Topocentric longitude in [0, 2π)

        Raises:
            InvalidBodyIdentifier: For an unknown body
            DataUnavailable: If no data exists for the body's model
            DomainError: For degenerate input
        """
        body = Body.parse(body)
        jd = calendar_gregorian_to_jd(year, month, fractional_day)
        location = ObserverLocation(latitude, longitude, height)
        return self.topocentric_position_longitude(jd, location, body, source)

    def stellar_longitude(self, jd: float, coord: EquatorialCoordinate,
                          proper_motion: Optional[ProperMotion] = None) -> Angle:
        """Apparent ecliptic longitude of a J2000.0 catalog star"""
        return apparent_stellar_longitude(jd, coord, proper_motion)

    def moon_phase(self, jd: float) -> float:
        """Moon-Sun elongation in whole degrees"""
        return moon_phase(jd)

    def ascending_node(self, jd: float) -> Angle:
        """True (instantaneous) ascending node of the lunar orbit"""
        return true_ascending_node(jd)

    def sunrise_sunset(self, year: int, month: int, day: int,
                       location: ObserverLocation) -> Tuple[float, float]:
        """Sunrise and sunset as Julian Days (UT) for a calendar date"""
        jd = calendar_gregorian_to_jd(year, month, day)
        return sunrise_sunset(jd, location.latitude, location.longitude)


# ============================================================================
# Module Interface
# ============================================================================

DEFAULT_EPHEMERIS = Ephemeris(BodyRegistry.load())


def topocentric_longitude(year: int, month: int, fractional_day: float, latitude: Angle,
                          longitude: Angle, height: float, body: BodyId) -> Angle:
    """
    Topocentric ecliptic longitude of a body, using the bundled tables.

    See Ephemeris.topocentric_longitude.
    """
    return DEFAULT_EPHEMERIS.topocentric_longitude(year, month, fractional_day, latitude,
                                                   longitude, height, body)


def longitude_difference(a: Angle, b: Angle) -> float:
    """
    Separation of two ecliptic longitudes across the 0/360 wrap.

    Always the shorter arc. This differs from a quadrant-based difference,
    which can report the longer arc: (10, 200) gives 170 here, not 190.

    Returns:
        Difference in degrees, in [0, 180]
    """
    diff = abs(a.normalize().deg - b.normalize().deg)
    return 360.0 - diff if diff > 180.0 else diff


# ============================================================================
# Main Entry Point
# ============================================================================

def main(argv=None) -> int:
    import argparse

    parser = argparse.ArgumentParser(description='Topocentric ecliptic longitude of a body')
    parser.add_argument('body', help='Body name, e.g. saturn')
    parser.add_argument('year', type=int, help='Year')
    parser.add_argument('month', type=int, help='Month (1-12)')
    parser.add_argument('day', type=float, help='Day of month with UT fraction')
    parser.add_argument('--lat', type=float, default=Config.DEFAULT_LATITUDE,
                        help='Latitude in degrees (north positive)')
    parser.add_argument('--lon', type=float, default=Config.DEFAULT_LONGITUDE,
                        help='Longitude in degrees (west positive)')
    parser.add_argument('--height', type=float, default=Config.DEFAULT_HEIGHT,
                        help='Height above sea level in meters')
    parser.add_argument('--keplerian', action='store_true',
                        help='Use orbital elements for Mercury and Venus')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=Config.LOG_FORMAT)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    source = PositionSource.KEPLERIAN if args.keplerian else None
    try:
        lon = DEFAULT_EPHEMERIS.topocentric_longitude(
            args.year, args.month, args.day,
            Angle.from_degrees(args.lat), Angle.from_degrees(args.lon), args.height,
            args.body, source)
    except EphemerisError as e:
        logger.error(f"Cannot compute longitude: {e}")
        return 1

    print(f"{args.body.lower()}: {lon.deg:.4f} deg ({lon})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
