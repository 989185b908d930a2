"""Infrastructure layer - Adapters and implementations."""

from vakit_hesap.infrastructure.hijri_calendar import TabularHijriCalendar

__all__ = [
    "TabularHijriCalendar",
]
