"""Arithmetic (tabular) Hijri calendar adapter."""

import logging
import math
from datetime import date, timedelta

from vakit_hesap.domain.errors import OutOfRangeError
from vakit_hesap.domain.models import RAMADAN, HijriDate
from vakit_hesap.services.ports import HijriCalendarPort
from vakit_hesap.services.solar import MAX_YEAR, MIN_YEAR

logger = logging.getLogger(__name__)

# date.toordinal() ile Julian gün numarası arasındaki fark
_ORDINAL_TO_JDN = 1721425

# 1 Muharrem 1 (16 Temmuz 622, Jülyen) Julian gün numarası
_HIJRI_EPOCH_JDN = 1948440


class TabularHijriCalendar(HijriCalendarPort):
    """
    Kuveyt algoritmasıyla hicri takvim.

    Ay gözlemi yerine 30 yıllık döngü kullanır, bu yüzden resmi takvimden
    bir gün sapabilir.
    """

    def to_hijri(self, gregorian: date) -> HijriDate:
        """Miladi tarihi hicriye çevir."""
        jd = gregorian.toordinal() + _ORDINAL_TO_JDN
        l_val = jd - _HIJRI_EPOCH_JDN + 10632
        n = (l_val - 1) // 10631
        l2 = l_val - 10631 * n + 354
        j = ((10985 - l2) // 5316) * ((50 * l2) // 17719) + (l2 // 5670) * ((43 * l2) // 15238)
        l3 = l2 - ((30 - j) // 15) * ((17719 * j) // 50) - (j // 16) * ((15238 * j) // 43) + 29
        month = (24 * l3) // 709
        day = l3 - (709 * month) // 24
        year = 30 * n + j - 30
        return HijriDate(year=year, month=month, day=day)

    def to_gregorian(self, hijri: HijriDate) -> date:
        """Hicri tarihi miladiye çevir."""
        jd = (
            hijri.day
            + math.ceil(29.5 * (hijri.month - 1))
            + (hijri.year - 1) * 354
            + (3 + 11 * hijri.year) // 30
            + _HIJRI_EPOCH_JDN
            - 1
        )
        return date.fromordinal(jd - _ORDINAL_TO_JDN)

    def ramadan_range(self, year: int) -> tuple[date, date]:
        """Verilen miladi yılda başlayan Ramazan'ın ilk ve son günü."""
        if not MIN_YEAR <= year <= MAX_YEAR:
            raise OutOfRangeError("year", year, MIN_YEAR, MAX_YEAR)

        # Hicri yıl miladiden ~%3 kısa; yılın ortasından tahmin et
        guess = self.to_hijri(date(year, 7, 1)).year
        for hijri_year in (guess - 1, guess, guess + 1):
            start = self.to_gregorian(HijriDate(hijri_year, RAMADAN, 1))
            if start.year == year:
                shawwal = self.to_gregorian(HijriDate(hijri_year, RAMADAN + 1, 1))
                end = shawwal - timedelta(days=1)
                logger.debug(f"Ramazan {hijri_year}: {start} - {end}")
                return start, end

        raise OutOfRangeError("year", year)
