"""Domain errors raised by the calculation engine."""

from datetime import date


class VakitError(Exception):
    """Base class for all engine errors."""


class InvalidCoordinateError(VakitError, ValueError):
    """Enlem/boylam geçerli aralığın dışında."""

    def __init__(self, field: str, value: float) -> None:
        self.field = field
        self.value = value
        names = {"latitude": "enlem", "longitude": "boylam"}
        super().__init__(f"Geçersiz {names.get(field, field)}: {value}")


class OutOfRangeError(VakitError, ValueError):
    """Desteklenen aralığın dışındaki girdi (tarih, saat dilimi, pencere)."""

    def __init__(
        self,
        field: str,
        value: object,
        minimum: object = None,
        maximum: object = None,
    ) -> None:
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        if minimum is not None and maximum is not None:
            message = f"{field} aralık dışında: {value} (beklenen {minimum}..{maximum})"
        else:
            message = f"{field} geçersiz: {value}"
        super().__init__(message)


class PolarDegeneracyError(VakitError):
    """Güneş gerekli açıya ulaşmıyor (kutup günü/gecesi)."""

    def __init__(self, latitude: float, target_date: date, prayer: str | None = None) -> None:
        self.latitude = latitude
        self.date = target_date
        self.prayer = prayer
        super().__init__(
            f"{target_date.isoformat()} tarihinde {latitude}° enleminde "
            f"{prayer or 'namaz'} vakti hesaplanamıyor"
        )


class UnknownMethodError(VakitError, LookupError):
    """Tanınmayan hesaplama metodu veya ikindi mezhebi."""

    def __init__(self, identifier: object) -> None:
        self.identifier = identifier
        super().__init__(f"Bilinmeyen metod: {identifier!r}")


class InvariantViolationError(VakitError):
    """Vakit sıralaması bozuldu (Fajr < Sunrise < ... < Isha)."""

    def __init__(self, target_date: date, times: dict[str, int]) -> None:
        self.date = target_date
        self.times = times
        super().__init__(f"{target_date.isoformat()} için vakit sırası bozuk: {times}")
