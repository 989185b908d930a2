"""Prayer time calculation service."""

import calendar
import logging
import math
from datetime import date, datetime, timedelta, timezone

from vakit_hesap.domain.errors import (
    InvariantViolationError,
    OutOfRangeError,
    PolarDegeneracyError,
)
from vakit_hesap.domain.methods import MethodParameters, parameters_for, shadow_factor_for
from vakit_hesap.domain.models import (
    MINUTES_PER_DAY,
    CalculationSettings,
    FastingDay,
    FastingWindow,
    Location,
    PrayerName,
    PrayerTime,
    PrayerTimes,
)
from vakit_hesap.services.ports import HijriCalendarPort, PrayerTimeCalculatorPort
from vakit_hesap.services.solar import dcos, dsin, solar_position

logger = logging.getLogger(__name__)

# Bu enlemin üzerinde vakitler hesaplanmaz
POLAR_LATITUDE_LIMIT = 65.0

# Güneş doğuşu/batışı: kırılma + güneş yarıçapı
HORIZON_DEPRESSION = 0.833


def _round_minutes(hours: float) -> int:
    """Saat değerini en yakın dakikaya yuvarla (gün sınırı kontrolü çağırana ait)."""
    return math.floor(hours * 60.0 + 0.5)


def _check_order(target_date: date, minutes: dict[PrayerName, int]) -> None:
    """Vakitler kesin artan sırada değilse InvariantViolationError fırlat."""
    ordered = [minutes[prayer] for prayer in PrayerName]
    if any(earlier >= later for earlier, later in zip(ordered, ordered[1:])):
        raise InvariantViolationError(
            target_date, {prayer.value: value for prayer, value in minutes.items()}
        )


class PrayerService(PrayerTimeCalculatorPort):
    """Namaz vakti hesaplama servisi."""

    def __init__(
        self,
        location: Location,
        settings: CalculationSettings | None = None,
    ) -> None:
        """
        Initialize prayer service.

        Args:
            location: Konum bilgisi
            settings: Hesaplama metodu, ikindi mezhebi ve saat dilimi
        """
        self._location = location
        self._settings = settings or CalculationSettings()
        self._parameters = parameters_for(self._settings.method)
        self._shadow_factor = shadow_factor_for(self._settings.asr_method)
        self._tz = timezone(timedelta(hours=self._settings.timezone_offset))

    @property
    def location(self) -> Location:
        """Konum bilgisi."""
        return self._location

    @property
    def settings(self) -> CalculationSettings:
        """Hesaplama ayarları."""
        return self._settings

    @property
    def parameters(self) -> MethodParameters:
        """Seçili metodun açı parametreleri."""
        return self._parameters

    @property
    def timezone(self) -> timezone:
        """Sabit ofsetli timezone nesnesi."""
        return self._tz

    @property
    def timezone_offset(self) -> int:
        """UTC offset saat cinsinden."""
        return self._settings.timezone_offset

    def _hour_angle(
        self,
        altitude: float,
        declination: float,
        target_date: date,
        prayer: PrayerName,
    ) -> float:
        """Güneşin verilen yüksekliğe ulaştığı saat açısı (saat cinsinden)."""
        latitude = self._location.latitude
        cos_h = (dsin(altitude) - dsin(latitude) * dsin(declination)) / (
            dcos(latitude) * dcos(declination)
        )
        if not -1.0 <= cos_h <= 1.0:
            raise PolarDegeneracyError(latitude, target_date, prayer.value)
        return math.degrees(math.acos(cos_h)) / 15.0

    def _asr_altitude(self, declination: float) -> float:
        """Gölge boyu = t + öğle gölgesi olduğunda güneş yüksekliği."""
        zenith_shadow = math.tan(math.radians(abs(self._location.latitude - declination)))
        return math.degrees(math.atan(1.0 / (self._shadow_factor + zenith_shadow)))

    def calculate(self, target_date: date, *, ramadan: bool = False) -> PrayerTimes:
        """
        Belirtilen tarih için namaz vakitlerini hesapla.

        Args:
            target_date: Miladi tarih
            ramadan: Ramazan günü mü (Mekke metodunda yatsı aralığını değiştirir)

        Raises:
            OutOfRangeError: Tarih 1901-2199 dışında
            PolarDegeneracyError: Vakit bu enlem/tarihte tanımsız ya da gün dışına taşıyor
            InvariantViolationError: Vakit sırası bozuldu
        """
        latitude = self._location.latitude
        longitude = self._location.longitude
        if abs(latitude) > POLAR_LATITUDE_LIMIT:
            raise PolarDegeneracyError(latitude, target_date)

        sun = solar_position(target_date, hour_ut=12.0 - longitude / 15.0)
        decl = sun.declination
        params = self._parameters

        noon = 12.0 - longitude / 15.0 - sun.equation_of_time / 60.0 + self.timezone_offset
        horizon = self._hour_angle(-HORIZON_DEPRESSION, decl, target_date, PrayerName.SUNRISE)

        fajr = noon - self._hour_angle(-params.fajr_angle, decl, target_date, PrayerName.FAJR)
        sunrise = noon - horizon
        asr = noon + self._hour_angle(
            self._asr_altitude(decl), decl, target_date, PrayerName.ASR
        )

        if params.maghrib_angle is not None:
            maghrib = noon + self._hour_angle(
                -params.maghrib_angle, decl, target_date, PrayerName.MAGHRIB
            )
        else:
            maghrib = noon + horizon + params.maghrib_offset_minutes / 60.0

        interval = params.isha_interval(ramadan=ramadan)
        if interval is not None:
            isha = maghrib + interval / 60.0
        else:
            isha = noon + self._hour_angle(-params.isha_angle, decl, target_date, PrayerName.ISHA)

        minutes = {
            PrayerName.FAJR: _round_minutes(fajr),
            PrayerName.SUNRISE: _round_minutes(sunrise),
            PrayerName.DHUHR: _round_minutes(noon),
            PrayerName.ASR: _round_minutes(asr),
            PrayerName.MAGHRIB: _round_minutes(maghrib),
            PrayerName.ISHA: _round_minutes(isha),
        }

        # İmsak ve yatsı aynı sivil gün içinde kalmalı
        if minutes[PrayerName.FAJR] < 0:
            raise PolarDegeneracyError(latitude, target_date, PrayerName.FAJR.value)
        if minutes[PrayerName.ISHA] >= MINUTES_PER_DAY:
            raise PolarDegeneracyError(latitude, target_date, PrayerName.ISHA.value)

        _check_order(target_date, minutes)

        logger.debug(
            f"Vakitler hesaplandı: {target_date} ({latitude}, {longitude}) "
            f"{self._settings.method.value}/{self._settings.asr_method.value}"
        )

        return PrayerTimes(
            date=target_date,
            fajr=minutes[PrayerName.FAJR],
            sunrise=minutes[PrayerName.SUNRISE],
            dhuhr=minutes[PrayerName.DHUHR],
            asr=minutes[PrayerName.ASR],
            maghrib=minutes[PrayerName.MAGHRIB],
            isha=minutes[PrayerName.ISHA],
        )

    def calculate_range(self, start_date: date, days: int) -> list[PrayerTimes]:
        """Belirtilen tarihten itibaren n gün için vakitleri hesapla."""
        return [self.calculate(start_date + timedelta(days=i)) for i in range(days)]

    def calculate_month(self, year: int, month: int) -> list[PrayerTimes]:
        """Bir ayın her günü için vakitleri hesapla."""
        if not 1 <= month <= 12:
            raise OutOfRangeError("month", month, 1, 12)
        _, days_in_month = calendar.monthrange(year, month)
        return self.calculate_range(date(year, month, 1), days_in_month)

    def fasting_window(self, start_date: date, end_date: date) -> FastingWindow:
        """Verilen tarih aralığı için imsak ve iftar vakitleri."""
        if start_date > end_date:
            raise OutOfRangeError(
                "fasting_window", f"{start_date.isoformat()}..{end_date.isoformat()}"
            )

        days = []
        total = (end_date - start_date).days + 1
        for index in range(total):
            current = start_date + timedelta(days=index)
            times = self.calculate(current, ramadan=True)
            days.append(
                FastingDay(
                    day=index + 1,
                    date=current,
                    suhoor_end=times.fajr,
                    iftar=times.maghrib,
                )
            )

        return FastingWindow(start_date=start_date, end_date=end_date, days=tuple(days))

    def yearly_fasting_window(self, year: int, hijri_calendar: HijriCalendarPort) -> FastingWindow:
        """Verilen yılda başlayan Ramazan için oruç takvimi."""
        start_date, end_date = hijri_calendar.ramadan_range(year)
        logger.debug(f"Ramazan {year}: {start_date} - {end_date}")
        return self.fasting_window(start_date, end_date)

    def _local_now(self, now: datetime) -> datetime:
        """Zamanı ayarlardaki saat dilimine çevir (naive ise olduğu gibi kabul et)."""
        if now.tzinfo is None:
            return now
        return now.astimezone(self._tz).replace(tzinfo=None)

    def get_current_prayer(self, now: datetime) -> PrayerTime:
        """Şu anki namaz vaktini döndür."""
        local_now = self._local_now(now)
        today_times = self.calculate(local_now.date())
        current_minutes = local_now.hour * 60 + local_now.minute

        for prayer in reversed(PrayerName):
            if current_minutes >= today_times.get_time(prayer):
                return today_times.get_prayer_time(prayer)

        # Gece yarısından sonra, dünün yatsı vakti
        yesterday = local_now.date() - timedelta(days=1)
        return self.calculate(yesterday).get_prayer_time(PrayerName.ISHA)

    def get_next_prayer(self, now: datetime) -> PrayerTime:
        """Sonraki namaz vaktini döndür."""
        local_now = self._local_now(now)
        today_times = self.calculate(local_now.date())
        current_minutes = local_now.hour * 60 + local_now.minute

        for prayer in PrayerName:
            if current_minutes < today_times.get_time(prayer):
                return today_times.get_prayer_time(prayer)

        # Yarının ilk vakti (imsak)
        tomorrow = local_now.date() + timedelta(days=1)
        return self.calculate(tomorrow).get_prayer_time(PrayerName.FAJR)

    def get_time_until_next_prayer(self, now: datetime) -> timedelta:
        """Sonraki namaz vaktine kalan süre."""
        local_now = self._local_now(now)
        next_prayer = self.get_next_prayer(local_now)
        return next_prayer.datetime - local_now
