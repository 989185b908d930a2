"""Calculation method registry.

Angle constants follow the published PrayTimes reference table. All values
are degrees below the horizon unless noted otherwise.
"""

from dataclasses import dataclass
from types import MappingProxyType

from vakit_hesap.domain.errors import UnknownMethodError
from vakit_hesap.domain.models import AsrJuristicMethod, CalculationMethod


@dataclass(frozen=True)
class MethodParameters:
    """Bir hesaplama metodunun açı parametreleri."""

    fajr_angle: float
    isha_angle: float | None = None
    isha_interval_minutes: int | None = None
    ramadan_isha_interval_minutes: int | None = None
    maghrib_offset_minutes: int = 0
    maghrib_angle: float | None = None

    def __post_init__(self) -> None:
        if (self.isha_angle is None) == (self.isha_interval_minutes is None):
            raise ValueError("Yatsı için açı ya da sabit dakika verilmeli (ikisi birden değil)")

    @property
    def has_fixed_isha(self) -> bool:
        """Yatsı akşamdan sonra sabit dakika mı?"""
        return self.isha_interval_minutes is not None

    def isha_interval(self, *, ramadan: bool = False) -> int | None:
        """Sabit yatsı aralığı (Ramazan'da farklı olabilir)."""
        if ramadan and self.ramadan_isha_interval_minutes is not None:
            return self.ramadan_isha_interval_minutes
        return self.isha_interval_minutes


_METHOD_PARAMETERS = MappingProxyType(
    {
        CalculationMethod.ISNA: MethodParameters(fajr_angle=15.0, isha_angle=15.0),
        CalculationMethod.MWL: MethodParameters(fajr_angle=18.0, isha_angle=17.0),
        CalculationMethod.EGYPTIAN: MethodParameters(fajr_angle=19.5, isha_angle=17.5),
        CalculationMethod.KARACHI: MethodParameters(fajr_angle=18.0, isha_angle=18.0),
        CalculationMethod.MAKKAH: MethodParameters(
            fajr_angle=18.5,
            isha_interval_minutes=90,
            ramadan_isha_interval_minutes=120,
        ),
        CalculationMethod.TEHRAN: MethodParameters(
            fajr_angle=17.7,
            isha_angle=14.0,
            maghrib_angle=4.5,
        ),
    }
)

_SHADOW_FACTORS = MappingProxyType(
    {
        AsrJuristicMethod.STANDARD: 1,
        AsrJuristicMethod.HANAFI: 2,
    }
)


def resolve_method(method: CalculationMethod | str) -> CalculationMethod:
    """Metod adını (büyük/küçük harf duyarsız) enum'a çevir."""
    if isinstance(method, CalculationMethod):
        return method
    try:
        return CalculationMethod(str(method).strip().upper())
    except ValueError:
        raise UnknownMethodError(method) from None


def resolve_asr_method(asr_method: AsrJuristicMethod | str) -> AsrJuristicMethod:
    """İkindi mezhebi adını enum'a çevir."""
    if isinstance(asr_method, AsrJuristicMethod):
        return asr_method
    try:
        return AsrJuristicMethod(str(asr_method).strip().lower())
    except ValueError:
        raise UnknownMethodError(asr_method) from None


def parameters_for(method: CalculationMethod | str) -> MethodParameters:
    """Metodun açı parametrelerini döndür."""
    resolved = resolve_method(method)
    try:
        return _METHOD_PARAMETERS[resolved]
    except KeyError:
        raise UnknownMethodError(method) from None


def shadow_factor_for(asr_method: AsrJuristicMethod | str) -> int:
    """İkindi gölge çarpanı (Standard=1, Hanefi=2)."""
    resolved = resolve_asr_method(asr_method)
    try:
        return _SHADOW_FACTORS[resolved]
    except KeyError:
        raise UnknownMethodError(asr_method) from None


def available_methods() -> dict[CalculationMethod, MethodParameters]:
    """Tüm metotlar, tanım sırasıyla."""
    return {method: _METHOD_PARAMETERS[method] for method in CalculationMethod}
