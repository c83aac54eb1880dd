"""
Angle Value Module for the Ephemeris

This module provides the angular quantity every other ephemeris module is
built on:
- An immutable Angle type stored in radians
- Constructors from degrees, hours, arcseconds and sexagesimal parts
- Normalization, trigonometric accessors and arithmetic
- The error base classes shared across the ephemeris modules
- Small numeric helpers (Horner evaluation, positive modulo)
"""

import math
from dataclasses import dataclass
from typing import Iterable, Tuple, Union

# ============================================================================
# Constants
# ============================================================================

DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi
HOURS_TO_RAD = math.pi / 12.0
RAD_TO_HOURS = 12.0 / math.pi
ARCSEC_TO_RAD = DEG_TO_RAD / 3600.0
TWO_PI = 2.0 * math.pi


# ============================================================================
# Errors
# ============================================================================

class EphemerisError(Exception):
    """Base class for all ephemeris errors"""


class DomainError(EphemerisError, ValueError):
    """Degenerate numeric input, e.g. a division by zero near a pole"""


# ============================================================================
# Numeric Helpers
# ============================================================================

def horner(x: float, *coeffs: float) -> float:
    """
    Evaluate a polynomial by Horner's method.

    Args:
        x: Variable of the polynomial
        coeffs: Coefficients, constant term first

    Returns:
        Value of the polynomial at x
    """
    if not coeffs:
        return 0.0
    result = coeffs[-1]
    for c in reversed(coeffs[:-1]):
        result = result * x + c
    return result


def reverse_sum(values: Iterable[float]) -> float:
    """
    Sum a sequence from its last element to its first.

    Periodic-term tables are ordered by decreasing amplitude, so this adds
    the smallest terms first.
    """
    total = 0.0
    for value in reversed(list(values)):
        total += float(value)
    return total


def pmod(x: float, y: float) -> float:
    """Modulo that is always in [0, y) for positive y"""
    r = math.fmod(x, y)
    if r < 0:
        r += y
    # r + y can round up to y for tiny negative r
    if r >= y:
        r = 0.0
    return r


# ============================================================================
# Angle
# ============================================================================

@dataclass(frozen=True, order=True)
class Angle:
    """
    Immutable angular quantity stored in radians.

    Equality and ordering compare the raw radian value, so callers must
    normalize before comparing angles across the 0/2π wrap.
    """
    rad: float = 0.0

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_radians(cls, rad: float) -> "Angle":
        return cls(float(rad))

    @classmethod
    def from_degrees(cls, deg: float) -> "Angle":
        return cls(deg * DEG_TO_RAD)

    @classmethod
    def from_arcseconds(cls, sec: float) -> "Angle":
        return cls(sec * ARCSEC_TO_RAD)

    @classmethod
    def from_hours(cls, hours: float) -> "Angle":
        return cls(hours * HOURS_TO_RAD)

    @classmethod
    def from_sexagesimal(cls, negative: bool, degrees: float, minutes: float = 0.0,
                         seconds: float = 0.0) -> "Angle":
        """
        Build an angle from degrees, arcminutes and arcseconds.

        The sign is carried separately so that values such as -0°30′ can be
        expressed.

        Args:
            negative: True for a negative angle
            degrees: Whole degrees (unsigned)
            minutes: Arcminutes (unsigned)
            seconds: Arcseconds (unsigned)

        Returns:
            Angle
        """
        value = (abs(degrees) * 3600.0 + abs(minutes) * 60.0 + abs(seconds)) * ARCSEC_TO_RAD
        return cls(-value if negative else value)

    @classmethod
    def from_hms(cls, hours: float, minutes: float = 0.0, seconds: float = 0.0,
                 negative: bool = False) -> "Angle":
        """Build an angle from hours, minutes and seconds of time"""
        value = (abs(hours) + abs(minutes) / 60.0 + abs(seconds) / 3600.0) * HOURS_TO_RAD
        return cls(-value if negative else value)

    # ------------------------------------------------------------------
    # Unit accessors
    # ------------------------------------------------------------------

    @property
    def deg(self) -> float:
        return self.rad * RAD_TO_DEG

    @property
    def hours(self) -> float:
        return self.rad * RAD_TO_HOURS

    @property
    def arcsec(self) -> float:
        return self.rad / ARCSEC_TO_RAD

    # ------------------------------------------------------------------
    # Trigonometry
    # ------------------------------------------------------------------

    def sin(self) -> float:
        return math.sin(self.rad)

    def cos(self) -> float:
        return math.cos(self.rad)

    def tan(self) -> float:
        c = math.cos(self.rad)
        if c == 0.0:
            raise DomainError(f"tangent undefined at {self.deg} degrees")
        return math.sin(self.rad) / c

    def sincos(self) -> Tuple[float, float]:
        return math.sin(self.rad), math.cos(self.rad)

    # ------------------------------------------------------------------
    # Normalization and arithmetic
    # ------------------------------------------------------------------

    def normalize(self) -> "Angle":
        """Return the equivalent angle in [0, 2π)"""
        return Angle(pmod(self.rad, TWO_PI))

    def __add__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.rad + other.rad)

    def __sub__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.rad - other.rad)

    def __neg__(self) -> "Angle":
        return Angle(-self.rad)

    def __abs__(self) -> "Angle":
        return Angle(abs(self.rad))

    def __mul__(self, factor: float) -> "Angle":
        if isinstance(factor, Angle):
            return NotImplemented
        return Angle(self.rad * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: Union[float, "Angle"]) -> Union[float, "Angle"]:
        """
        Divide by a scalar (giving an Angle) or by another Angle (giving a ratio).

        Raises:
            DomainError: If the divisor is zero
        """
        if isinstance(divisor, Angle):
            if divisor.rad == 0.0:
                raise DomainError("division by a zero angle")
            return self.rad / divisor.rad
        if divisor == 0:
            raise DomainError("division of an angle by zero")
        return Angle(self.rad / divisor)

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def to_sexagesimal(self) -> Tuple[int, int, int, float]:
        """
        Split into sign, degrees, arcminutes and arcseconds.

        Returns:
            Tuple of (sign, degrees, minutes, seconds) with sign -1 or 1
        """
        sign = -1 if self.rad < 0 else 1
        total = abs(self.arcsec)
        degrees = int(total // 3600.0)
        minutes = int((total - degrees * 3600.0) // 60.0)
        seconds = total - degrees * 3600.0 - minutes * 60.0
        return sign, degrees, minutes, seconds

    def to_hms(self) -> Tuple[int, int, float]:
        """Split a non-negative angle into hours, minutes and seconds of time"""
        total = self.hours * 3600.0
        hours = int(total // 3600.0)
        minutes = int((total - hours * 3600.0) // 60.0)
        return hours, minutes, total - hours * 3600.0 - minutes * 60.0

    def __str__(self) -> str:
        sign, degrees, minutes, seconds = self.to_sexagesimal()
        prefix = "-" if sign < 0 else ""
        return f"{prefix}{degrees}°{minutes}′{seconds:.3f}″"
