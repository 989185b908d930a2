"""Domain layer - Business entities and value objects."""

from vakit_hesap.domain.errors import (
    InvalidCoordinateError,
    InvariantViolationError,
    OutOfRangeError,
    PolarDegeneracyError,
    UnknownMethodError,
    VakitError,
)
from vakit_hesap.domain.methods import MethodParameters, parameters_for, shadow_factor_for
from vakit_hesap.domain.models import (
    AsrJuristicMethod,
    CalculationMethod,
    CalculationSettings,
    CardinalDirection,
    FastingDay,
    FastingWindow,
    HijriDate,
    Location,
    PrayerName,
    PrayerTime,
    PrayerTimes,
)

__all__ = [
    "AsrJuristicMethod",
    "CalculationMethod",
    "CalculationSettings",
    "CardinalDirection",
    "FastingDay",
    "FastingWindow",
    "HijriDate",
    "InvalidCoordinateError",
    "InvariantViolationError",
    "Location",
    "MethodParameters",
    "OutOfRangeError",
    "PolarDegeneracyError",
    "PrayerName",
    "PrayerTime",
    "PrayerTimes",
    "UnknownMethodError",
    "VakitError",
    "parameters_for",
    "shadow_factor_for",
]
