"""Domain models and value objects."""

from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum
from typing import Self

from vakit_hesap.domain.errors import InvalidCoordinateError, OutOfRangeError

MINUTES_PER_DAY = 24 * 60

# Saat dilimi ofseti sınırları (UTC-12 .. UTC+14)
MIN_TIMEZONE_OFFSET = -12
MAX_TIMEZONE_OFFSET = 14


def format_minutes(minutes: int) -> str:
    """Gece yarısından itibaren dakikayı HH:MM formatına çevir."""
    hours, mins = divmod(minutes, 60)
    return f"{hours:02d}:{mins:02d}"


class PrayerName(str, Enum):
    """Namaz vakti isimleri (günlük sırasıyla)."""

    FAJR = "fajr"
    SUNRISE = "sunrise"
    DHUHR = "dhuhr"
    ASR = "asr"
    MAGHRIB = "maghrib"
    ISHA = "isha"

    @property
    def display_name(self) -> str:
        """Türkçe görüntüleme adı."""
        names = {
            PrayerName.FAJR: "İmsak",
            PrayerName.SUNRISE: "Güneş",
            PrayerName.DHUHR: "Öğle",
            PrayerName.ASR: "İkindi",
            PrayerName.MAGHRIB: "Akşam",
            PrayerName.ISHA: "Yatsı",
        }
        return names[self]

    @property
    def icon(self) -> str:
        """Emoji ikonu."""
        icons = {
            PrayerName.FAJR: "🌙",
            PrayerName.SUNRISE: "🌅",
            PrayerName.DHUHR: "☀️",
            PrayerName.ASR: "🌤️",
            PrayerName.MAGHRIB: "🌇",
            PrayerName.ISHA: "🌃",
        }
        return icons[self]


class CalculationMethod(str, Enum):
    """İmsak/yatsı hesaplama metotları."""

    ISNA = "ISNA"
    MWL = "MWL"
    EGYPTIAN = "EGYPTIAN"
    KARACHI = "KARACHI"
    MAKKAH = "MAKKAH"
    TEHRAN = "TEHRAN"

    @property
    def display_name(self) -> str:
        """Metodu yayınlayan kurumun adı."""
        names = {
            CalculationMethod.ISNA: "Islamic Society of North America",
            CalculationMethod.MWL: "Muslim World League",
            CalculationMethod.EGYPTIAN: "Egyptian General Authority of Survey",
            CalculationMethod.KARACHI: "University of Islamic Sciences, Karachi",
            CalculationMethod.MAKKAH: "Umm Al-Qura University, Makkah",
            CalculationMethod.TEHRAN: "Institute of Geophysics, University of Tehran",
        }
        return names[self]


class AsrJuristicMethod(str, Enum):
    """İkindi vakti için fıkhi görüş."""

    STANDARD = "standard"
    HANAFI = "hanafi"

    @property
    def display_name(self) -> str:
        """Görüntüleme adı."""
        names = {
            AsrJuristicMethod.STANDARD: "Standard (Şafi, Maliki, Hanbeli)",
            AsrJuristicMethod.HANAFI: "Hanefi",
        }
        return names[self]


class CardinalDirection(str, Enum):
    """Sekiz ana yön (45° dilimler)."""

    N = "N"
    NE = "NE"
    E = "E"
    SE = "SE"
    S = "S"
    SW = "SW"
    W = "W"
    NW = "NW"

    @property
    def display_name(self) -> str:
        """İngilizce tam adı."""
        names = {
            CardinalDirection.N: "North",
            CardinalDirection.NE: "Northeast",
            CardinalDirection.E: "East",
            CardinalDirection.SE: "Southeast",
            CardinalDirection.S: "South",
            CardinalDirection.SW: "Southwest",
            CardinalDirection.W: "West",
            CardinalDirection.NW: "Northwest",
        }
        return names[self]


@dataclass(frozen=True)
class Location:
    """Konum bilgisi (immutable value object)."""

    latitude: float
    longitude: float
    city: str = ""

    def __post_init__(self) -> None:
        """Koordinat doğrulaması (NaN ve sonsuz değerler de reddedilir)."""
        if not -90 <= self.latitude <= 90:
            raise InvalidCoordinateError("latitude", self.latitude)
        if not -180 <= self.longitude <= 180:
            raise InvalidCoordinateError("longitude", self.longitude)


@dataclass(frozen=True)
class CalculationSettings:
    """Hesaplama ayarları; her çağrıda açıkça verilir."""

    method: CalculationMethod = CalculationMethod.ISNA
    asr_method: AsrJuristicMethod = AsrJuristicMethod.STANDARD
    timezone_offset: int = 0

    def __post_init__(self) -> None:
        """Saat dilimi doğrulaması."""
        if not MIN_TIMEZONE_OFFSET <= self.timezone_offset <= MAX_TIMEZONE_OFFSET:
            raise OutOfRangeError(
                "timezone_offset",
                self.timezone_offset,
                MIN_TIMEZONE_OFFSET,
                MAX_TIMEZONE_OFFSET,
            )

    def to_dict(self) -> dict[str, str | int]:
        """Dictionary olarak döndür."""
        return {
            "method": self.method.value,
            "asr_method": self.asr_method.value,
            "timezone_offset": self.timezone_offset,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        """Dictionary'den oluştur."""
        return cls(
            method=CalculationMethod(str(data.get("method", "ISNA")).upper()),
            asr_method=AsrJuristicMethod(str(data.get("asr_method", "standard")).lower()),
            timezone_offset=int(data.get("timezone_offset", 0)),
        )


@dataclass(frozen=True)
class PrayerTime:
    """Tek bir namaz vakti (gece yarısından itibaren dakika)."""

    name: PrayerName
    minutes: int
    date: date

    @property
    def time(self) -> time:
        """datetime.time olarak döndür."""
        hours, mins = divmod(self.minutes, 60)
        return time(hours, mins)

    @property
    def datetime(self) -> datetime:
        """Datetime olarak döndür."""
        return datetime.combine(self.date, self.time)

    @property
    def time_str(self) -> str:
        """HH:MM formatında."""
        return format_minutes(self.minutes)


@dataclass(frozen=True)
class PrayerTimes:
    """Bir günün tüm namaz vakitleri (dakika cinsinden)."""

    date: date
    fajr: int
    sunrise: int
    dhuhr: int
    asr: int
    maghrib: int
    isha: int

    def get_time(self, prayer: PrayerName) -> int:
        """Belirtilen vaktin dakikasını döndür."""
        mapping = {
            PrayerName.FAJR: self.fajr,
            PrayerName.SUNRISE: self.sunrise,
            PrayerName.DHUHR: self.dhuhr,
            PrayerName.ASR: self.asr,
            PrayerName.MAGHRIB: self.maghrib,
            PrayerName.ISHA: self.isha,
        }
        return mapping[prayer]

    def get_prayer_time(self, prayer: PrayerName) -> PrayerTime:
        """PrayerTime nesnesi olarak döndür."""
        return PrayerTime(name=prayer, minutes=self.get_time(prayer), date=self.date)

    def all_prayer_times(self) -> list[PrayerTime]:
        """Tüm vakitleri sıralı liste olarak döndür."""
        return [self.get_prayer_time(prayer) for prayer in PrayerName]

    def to_dict(self) -> dict[str, str]:
        """Dictionary olarak döndür."""
        data = {"date": self.date.isoformat()}
        for prayer in PrayerName:
            data[prayer.value] = format_minutes(self.get_time(prayer))
        return data


@dataclass(frozen=True)
class FastingDay:
    """Oruç takviminde bir gün."""

    day: int
    date: date
    suhoor_end: int
    iftar: int

    @property
    def suhoor_end_str(self) -> str:
        """İmsak (sahur bitişi) HH:MM."""
        return format_minutes(self.suhoor_end)

    @property
    def iftar_str(self) -> str:
        """İftar HH:MM."""
        return format_minutes(self.iftar)


@dataclass(frozen=True)
class FastingWindow:
    """Ramazan gibi bir oruç penceresinin imsak/iftar listesi."""

    start_date: date
    end_date: date
    days: tuple[FastingDay, ...]

    def __len__(self) -> int:
        return len(self.days)


HIJRI_MONTH_NAMES = (
    "Muharrem",
    "Safer",
    "Rebiülevvel",
    "Rebiülahir",
    "Cemaziyelevvel",
    "Cemaziyelahir",
    "Recep",
    "Şaban",
    "Ramazan",
    "Şevval",
    "Zilkade",
    "Zilhicce",
)

RAMADAN = 9


@dataclass(frozen=True, order=True)
class HijriDate:
    """Hicri tarih."""

    year: int
    month: int
    day: int

    @property
    def month_name(self) -> str:
        """Türkçe ay adı."""
        return HIJRI_MONTH_NAMES[self.month - 1]

    def __str__(self) -> str:
        return f"{self.day} {self.month_name} {self.year}"
