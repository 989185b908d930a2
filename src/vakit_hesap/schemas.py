"""Pydantic schemas for the JSON boundary.

Times are serialized as 24-hour ``HH:MM`` strings and bearings as floats
with one decimal, so every payload is finite and round-trips losslessly.
"""

from datetime import date
from typing import Annotated, Self

from pydantic import BaseModel, Field

from vakit_hesap.domain.models import (
    MAX_TIMEZONE_OFFSET,
    MIN_TIMEZONE_OFFSET,
    AsrJuristicMethod,
    CalculationMethod,
    CalculationSettings,
    CardinalDirection,
    FastingWindow,
    Location,
    PrayerName,
    PrayerTime,
    PrayerTimes,
)
from vakit_hesap.services.qibla_service import (
    bearing_to_kaaba,
    cardinal_direction_of,
    display_bearing,
    distance_to_kaaba_km,
)

TimeString = Annotated[str, Field(pattern=r"^([01]\d|2[0-3]):[0-5]\d$")]


class LocationSchema(BaseModel):
    """Konum şeması."""

    latitude: Annotated[float, Field(ge=-90, le=90, description="Enlem")]
    longitude: Annotated[float, Field(ge=-180, le=180, description="Boylam")]

    def to_location(self) -> Location:
        """Domain nesnesine çevir."""
        return Location(latitude=self.latitude, longitude=self.longitude)


class PrayerTimesRequest(LocationSchema):
    """Günlük vakit isteği."""

    date: date
    method: CalculationMethod = Field(default=CalculationMethod.ISNA)
    asr_method: AsrJuristicMethod = Field(default=AsrJuristicMethod.STANDARD)
    timezone_offset: Annotated[
        int, Field(ge=MIN_TIMEZONE_OFFSET, le=MAX_TIMEZONE_OFFSET, default=0)
    ]

    def to_settings(self) -> CalculationSettings:
        """Hesaplama ayarlarına çevir."""
        return CalculationSettings(
            method=self.method,
            asr_method=self.asr_method,
            timezone_offset=self.timezone_offset,
        )


class DailyScheduleSchema(BaseModel):
    """Günlük namaz vakitleri şeması."""

    date: date
    fajr: TimeString
    sunrise: TimeString
    dhuhr: TimeString
    asr: TimeString
    maghrib: TimeString
    isha: TimeString
    method: CalculationMethod | None = None
    asr_method: AsrJuristicMethod | None = None

    @classmethod
    def from_domain(
        cls,
        times: PrayerTimes,
        settings: CalculationSettings | None = None,
    ) -> Self:
        """PrayerTimes nesnesinden oluştur."""
        return cls(
            **times.to_dict(),
            method=settings.method if settings else None,
            asr_method=settings.asr_method if settings else None,
        )


class MonthlyScheduleSchema(BaseModel):
    """Aylık vakit çizelgesi şeması."""

    year: int
    month: Annotated[int, Field(ge=1, le=12)]
    days: list[DailyScheduleSchema]


class FastingDaySchema(BaseModel):
    """Oruç günü şeması."""

    day: Annotated[int, Field(ge=1)]
    date: date
    suhoor_end: TimeString
    iftar_time: TimeString


class FastingWindowSchema(BaseModel):
    """Ramazan takvimi şeması."""

    start_date: date
    end_date: date
    fasting_schedule: list[FastingDaySchema]

    @classmethod
    def from_domain(cls, window: FastingWindow) -> Self:
        """FastingWindow nesnesinden oluştur."""
        return cls(
            start_date=window.start_date,
            end_date=window.end_date,
            fasting_schedule=[
                FastingDaySchema(
                    day=day.day,
                    date=day.date,
                    suhoor_end=day.suhoor_end_str,
                    iftar_time=day.iftar_str,
                )
                for day in window.days
            ],
        )


class QiblaSchema(BaseModel):
    """Kıble yönü şeması."""

    latitude: Annotated[float, Field(ge=-90, le=90)]
    longitude: Annotated[float, Field(ge=-180, le=180)]
    qibla_direction: Annotated[float, Field(ge=0, lt=360)]
    cardinal_direction: CardinalDirection
    distance_km: Annotated[float, Field(ge=0)]

    @classmethod
    def from_location(cls, location: Location) -> Self:
        """Konumdan kıble bilgisi üret."""
        bearing = bearing_to_kaaba(location)
        return cls(
            latitude=location.latitude,
            longitude=location.longitude,
            qibla_direction=display_bearing(bearing),
            cardinal_direction=cardinal_direction_of(bearing),
            distance_km=round(distance_to_kaaba_km(location), 1),
        )


class NextPrayerSchema(BaseModel):
    """Sonraki vakit şeması."""

    name: PrayerName
    display_name: str
    date: date
    time: TimeString

    @classmethod
    def from_domain(cls, prayer_time: PrayerTime) -> Self:
        """PrayerTime nesnesinden oluştur."""
        return cls(
            name=prayer_time.name,
            display_name=prayer_time.name.display_name,
            date=prayer_time.date,
            time=prayer_time.time_str,
        )
