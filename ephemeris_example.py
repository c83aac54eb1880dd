"""
Example Usage of the Topocentric Ephemeris

This file demonstrates how to use the ephemeris modules to:
1. Convert calendar dates to Julian Days and sidereal time
2. Compute topocentric longitudes of the planets, Sun and Moon
3. Compare the series and Keplerian models
4. Compute stellar longitudes, moon phase, lunar node and sunrise/sunset
5. Handle invalid requests
"""

import sys
import logging

# Add src to path if running from project root
sys.path.insert(0, 'src')

from ephemeris import (
    Config, Ephemeris, BodyRegistry, PositionSource,
    topocentric_longitude, longitude_difference
)
from ephemeris_angle import Angle, EphemerisError
from ephemeris_data import Body, SeriesDataProvider
from ephemeris_frames import EquatorialCoordinate, ProperMotion
from ephemeris_parallax import ObserverLocation
from ephemeris_time import calendar_gregorian_to_jd, jd_to_calendar

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format=Config.LOG_FORMAT
)
logger = logging.getLogger(__name__)

SITE = ObserverLocation.from_degrees(Config.DEFAULT_LATITUDE, Config.DEFAULT_LONGITUDE,
                                     Config.DEFAULT_HEIGHT)
DATE = (2022, 1, 19.849056)


def demonstrate_time():
    """Show time conversions for the example date"""
    print("\n" + "="*60)
    print("TIME CONVERSIONS")
    print("="*60)

    jd = calendar_gregorian_to_jd(*DATE)
    date = jd_to_calendar(jd)
    print(f"\n  Date: {DATE[0]}-{DATE[1]:02d}-{DATE[2]:.6f}")
    print(f"  Julian Day: {jd:.6f}")
    print(f"  Back to calendar: {date.year}-{date.month:02d}-{date.day:02d} "
          f"{date.hour:02d}:{date.minute:02d}:{date.second:06.3f} UT")

    ephemeris = Ephemeris(BodyRegistry.load())
    eps, lst = ephemeris.obliquity_and_sidereal_time(jd, SITE)
    print(f"  True obliquity: {eps}")
    print(f"  Local sidereal time: {lst.hours:.6f} h")


def demonstrate_longitudes():
    """Topocentric longitudes of all bodies"""
    print("\n" + "="*60)
    print("TOPOCENTRIC LONGITUDES")
    print("="*60)
    print(f"\n  Site: {SITE.latitude.deg:.4f}° N, {SITE.longitude.deg:.4f}° W, "
          f"{SITE.height:.1f} m")
    print("-" * 50)

    for body in Body:
        if body is Body.EARTH:
            continue
        lon = topocentric_longitude(*DATE, SITE.latitude, SITE.longitude, SITE.height, body)
        print(f"  {body.name.capitalize():<10} {lon.deg:>10.4f}°  {lon}")


def demonstrate_models():
    """Series against Keplerian positions for Venus"""
    print("\n" + "="*60)
    print("SERIES AND KEPLERIAN MODELS")
    print("="*60)

    ephemeris = Ephemeris(BodyRegistry.load(SeriesDataProvider()))
    series = ephemeris.topocentric_longitude(*DATE, SITE.latitude, SITE.longitude,
                                             SITE.height, Body.VENUS)
    kepler = ephemeris.topocentric_longitude(*DATE, SITE.latitude, SITE.longitude,
                                             SITE.height, Body.VENUS, PositionSource.KEPLERIAN)
    print(f"\n  Venus (series):    {series.deg:.4f}°")
    print(f"  Venus (Keplerian): {kepler.deg:.4f}°")
    print(f"  Difference:        {longitude_difference(series, kepler):.4f}°")


def demonstrate_stars_and_sun():
    """Stellar longitude, moon phase, lunar node and sunrise/sunset"""
    print("\n" + "="*60)
    print("STARS, MOON PHASE AND SUNRISE")
    print("="*60)

    ephemeris = Ephemeris(BodyRegistry.load())
    jd = calendar_gregorian_to_jd(*DATE)

    algol = EquatorialCoordinate(Angle.from_hms(3, 8, 10.13), Angle.from_sexagesimal(False, 40, 57, 20.3))
    lon = ephemeris.stellar_longitude(jd, algol, ProperMotion.from_catalog(0.0002, -0.001))
    print(f"\n  Algol longitude: {lon.deg:.4f}°")
    print(f"  Moon phase: {ephemeris.moon_phase(jd):.0f}°")
    print(f"  Lunar node: {ephemeris.ascending_node(jd).deg:.4f}°")

    rise, set_ = ephemeris.sunrise_sunset(2022, 2, 11, SITE)
    for label, value in (("Sunrise", rise), ("Sunset", set_)):
        t = jd_to_calendar(value)
        print(f"  {label}: {t.hour:02d}:{t.minute:02d}:{int(t.second):02d} UT")


def demonstrate_errors():
    """Invalid requests raise typed errors"""
    print("\n" + "="*60)
    print("ERROR HANDLING")
    print("="*60)

    for body in ("nibiru", 99):
        try:
            topocentric_longitude(*DATE, SITE.latitude, SITE.longitude, SITE.height, body)
        except EphemerisError as e:
            print(f"\n  {body!r}: {type(e).__name__}: {e}")

    ephemeris = Ephemeris(BodyRegistry.load())
    try:
        ephemeris.topocentric_longitude(*DATE, SITE.latitude, SITE.longitude, SITE.height,
                                        Body.MERCURY, PositionSource.SERIES)
    except EphemerisError as e:
        print(f"  mercury (series): {type(e).__name__}: {e}")


def main():
    print("\n" + "="*60)
    print("TOPOCENTRIC EPHEMERIS - EXAMPLE USAGE")
    print("="*60)

    demonstrate_time()
    demonstrate_longitudes()
    demonstrate_models()
    demonstrate_stars_and_sun()
    demonstrate_errors()

    print("\n" + "="*60)
    print("EXAMPLE COMPLETE")
    print("="*60 + "\n")


if __name__ == "__main__":
    main()
