"""Functional entry points that wire the services together.

Every function builds a fresh PrayerService from its arguments, so calls
share no state and can run concurrently.
"""

from datetime import date, datetime

from vakit_hesap.domain.methods import resolve_asr_method, resolve_method
from vakit_hesap.domain.models import (
    AsrJuristicMethod,
    CalculationMethod,
    CalculationSettings,
    FastingWindow,
    Location,
    PrayerTime,
    PrayerTimes,
)
from vakit_hesap.infrastructure.hijri_calendar import TabularHijriCalendar
from vakit_hesap.services.ports import HijriCalendarPort
from vakit_hesap.services.prayer_service import PrayerService


def _service(
    location: Location,
    method: CalculationMethod | str,
    asr_method: AsrJuristicMethod | str,
    timezone_offset: int,
) -> PrayerService:
    settings = CalculationSettings(
        method=resolve_method(method),
        asr_method=resolve_asr_method(asr_method),
        timezone_offset=timezone_offset,
    )
    return PrayerService(location, settings)


def daily_schedule(
    location: Location,
    target_date: date,
    method: CalculationMethod | str = CalculationMethod.ISNA,
    asr_method: AsrJuristicMethod | str = AsrJuristicMethod.STANDARD,
    timezone_offset: int = 0,
    *,
    ramadan: bool = False,
) -> PrayerTimes:
    """Bir günün altı vaktini hesapla."""
    return _service(location, method, asr_method, timezone_offset).calculate(
        target_date, ramadan=ramadan
    )


def monthly_schedule(
    location: Location,
    year: int,
    month: int,
    method: CalculationMethod | str = CalculationMethod.ISNA,
    asr_method: AsrJuristicMethod | str = AsrJuristicMethod.STANDARD,
    timezone_offset: int = 0,
) -> list[PrayerTimes]:
    """Ayın her günü için vakitler."""
    return _service(location, method, asr_method, timezone_offset).calculate_month(year, month)


def fasting_window(
    location: Location,
    start_date: date,
    end_date: date,
    method: CalculationMethod | str = CalculationMethod.ISNA,
    timezone_offset: int = 0,
) -> FastingWindow:
    """Verilen tarih aralığı için sahur/iftar listesi."""
    service = _service(location, method, AsrJuristicMethod.STANDARD, timezone_offset)
    return service.fasting_window(start_date, end_date)


def yearly_fasting_window(
    location: Location,
    year: int,
    method: CalculationMethod | str = CalculationMethod.ISNA,
    timezone_offset: int = 0,
    hijri_calendar: HijriCalendarPort | None = None,
) -> FastingWindow:
    """Yılın Ramazan ayı için sahur/iftar listesi."""
    service = _service(location, method, AsrJuristicMethod.STANDARD, timezone_offset)
    return service.yearly_fasting_window(year, hijri_calendar or TabularHijriCalendar())


def next_prayer(
    location: Location,
    now: datetime,
    method: CalculationMethod | str = CalculationMethod.ISNA,
    asr_method: AsrJuristicMethod | str = AsrJuristicMethod.STANDARD,
    timezone_offset: int = 0,
) -> PrayerTime:
    """`now` anından sonraki ilk vakit (yatsıdan sonra ertesi günün imsakı)."""
    return _service(location, method, asr_method, timezone_offset).get_next_prayer(now)
