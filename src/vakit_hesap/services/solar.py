"""Low-precision solar position (declination and equation of time).

Uses the U.S. Naval Observatory approximation, good to about 0.01° for
dates within two centuries of J2000.
"""

import math
from dataclasses import dataclass
from datetime import date

from vakit_hesap.domain.errors import OutOfRangeError

MIN_YEAR = 1901
MAX_YEAR = 2199

J2000 = 2451545.0


@dataclass(frozen=True)
class SolarPosition:
    """Güneşin deklinasyonu (derece) ve zaman denklemi (dakika)."""

    declination: float
    equation_of_time: float


def dsin(degrees: float) -> float:
    return math.sin(math.radians(degrees))


def dcos(degrees: float) -> float:
    return math.cos(math.radians(degrees))


def fix_angle(angle: float) -> float:
    """Normalize angle to 0-360 degree range."""
    return angle - 360.0 * math.floor(angle / 360.0)


def julian_day(year: int, month: int, day: int) -> float:
    """Julian day at 0h UT of a Gregorian calendar date (Meeus, ch. 7)."""
    if month <= 2:
        year -= 1
        month += 12
    a = year // 100
    b = 2 - a + a // 4
    return math.floor(365.25 * (year + 4716)) + math.floor(30.6001 * (month + 1)) + day + b - 1524.5


def solar_position(target_date: date, hour_ut: float = 12.0) -> SolarPosition:
    """
    Belirtilen tarih için güneş konumunu hesapla.

    Args:
        target_date: Miladi tarih (1901-2199)
        hour_ut: Gün içindeki UT saati (varsayılan öğlen)

    Returns:
        SolarPosition

    Raises:
        OutOfRangeError: Tarih desteklenen aralığın dışında
    """
    if not MIN_YEAR <= target_date.year <= MAX_YEAR:
        raise OutOfRangeError("date", target_date.isoformat(), MIN_YEAR, MAX_YEAR)

    jd = julian_day(target_date.year, target_date.month, target_date.day) + hour_ut / 24.0
    d = jd - J2000

    g = fix_angle(357.529 + 0.98560028 * d)  # mean anomaly
    q = fix_angle(280.459 + 0.98564736 * d)  # mean longitude
    ecliptic_longitude = fix_angle(q + 1.915 * dsin(g) + 0.020 * dsin(2 * g))
    obliquity = 23.439 - 0.00000036 * d

    declination = math.degrees(math.asin(dsin(obliquity) * dsin(ecliptic_longitude)))
    right_ascension = math.degrees(
        math.atan2(dcos(obliquity) * dsin(ecliptic_longitude), dcos(ecliptic_longitude))
    )
    right_ascension_hours = fix_angle(right_ascension) / 15.0

    # RA and q/15 can sit on opposite sides of the 0h/24h seam
    eqt_hours = q / 15.0 - right_ascension_hours
    eqt_hours = (eqt_hours + 12.0) % 24.0 - 12.0

    return SolarPosition(declination=declination, equation_of_time=eqt_hours * 60.0)
