"""Service layer - Business logic."""

from vakit_hesap.services.ports import HijriCalendarPort, PrayerTimeCalculatorPort
from vakit_hesap.services.prayer_service import PrayerService
from vakit_hesap.services.qibla_service import (
    KAABA,
    bearing_to_kaaba,
    cardinal_direction_of,
    display_bearing,
    distance_to_kaaba_km,
)
from vakit_hesap.services.solar import SolarPosition, solar_position

__all__ = [
    "KAABA",
    "HijriCalendarPort",
    "PrayerService",
    "PrayerTimeCalculatorPort",
    "SolarPosition",
    "bearing_to_kaaba",
    "cardinal_direction_of",
    "display_bearing",
    "distance_to_kaaba_km",
    "solar_position",
]
