"""Vakit-Hesap - Namaz vakti ve kıble yönü hesaplama motoru."""

__version__ = "0.1.0"

from vakit_hesap.domain import (  # noqa: E402
    AsrJuristicMethod,
    CalculationMethod,
    CalculationSettings,
    InvalidCoordinateError,
    InvariantViolationError,
    Location,
    OutOfRangeError,
    PolarDegeneracyError,
    PrayerName,
    PrayerTime,
    PrayerTimes,
    UnknownMethodError,
    VakitError,
)
from vakit_hesap.engine import (  # noqa: E402
    daily_schedule,
    fasting_window,
    monthly_schedule,
    next_prayer,
    yearly_fasting_window,
)
from vakit_hesap.services.qibla_service import (  # noqa: E402
    bearing_to_kaaba,
    cardinal_direction_of,
)

__all__ = [
    "AsrJuristicMethod",
    "CalculationMethod",
    "CalculationSettings",
    "InvalidCoordinateError",
    "InvariantViolationError",
    "Location",
    "OutOfRangeError",
    "PolarDegeneracyError",
    "PrayerName",
    "PrayerTime",
    "PrayerTimes",
    "UnknownMethodError",
    "VakitError",
    "__version__",
    "bearing_to_kaaba",
    "cardinal_direction_of",
    "daily_schedule",
    "fasting_window",
    "monthly_schedule",
    "next_prayer",
    "yearly_fasting_window",
]
