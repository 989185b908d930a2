"""Service layer interfaces (ports)."""

from abc import ABC, abstractmethod
from datetime import date

from vakit_hesap.domain.models import HijriDate, PrayerTimes


class PrayerTimeCalculatorPort(ABC):
    """Namaz vakti hesaplama arayüzü (port)."""

    @abstractmethod
    def calculate(self, target_date: date, *, ramadan: bool = False) -> PrayerTimes:
        """Belirtilen tarih için namaz vakitlerini hesapla."""

    @abstractmethod
    def calculate_range(self, start_date: date, days: int) -> list[PrayerTimes]:
        """Belirtilen tarihten itibaren n gün için vakitleri hesapla."""


class HijriCalendarPort(ABC):
    """Hicri takvim arayüzü (port)."""

    @abstractmethod
    def to_hijri(self, gregorian: date) -> HijriDate:
        """Miladi tarihi hicriye çevir."""

    @abstractmethod
    def ramadan_range(self, year: int) -> tuple[date, date]:
        """Verilen miladi yılda başlayan Ramazan'ın ilk ve son günü."""
