"""Qibla direction calculation."""

import math

from vakit_hesap.domain.models import CardinalDirection, Location

KAABA = Location(latitude=21.4225, longitude=39.8262, city="Mekke")

# Ortalama dünya yarıçapı (IUGG)
EARTH_RADIUS_KM = 6371.0088

_SECTORS = tuple(CardinalDirection)


def bearing_to_kaaba(location: Location) -> float:
    """
    Kabe'ye büyük daire başlangıç açısını hesapla.

    Args:
        location: Gözlemci konumu

    Returns:
        Kuzeyden saat yönünde derece, [0, 360) aralığında. Gözlemci tam
        Kabe'de ise yön tanımsızdır ve 0.0 döner.
    """
    if (location.latitude, location.longitude) == (KAABA.latitude, KAABA.longitude):
        return 0.0

    lat1 = math.radians(location.latitude)
    lat2 = math.radians(KAABA.latitude)
    delta_lon = math.radians(KAABA.longitude - location.longitude)

    y = math.sin(delta_lon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(delta_lon)
    bearing = (math.degrees(math.atan2(y, x)) + 360.0) % 360.0

    # -1e-15 + 360 rounds to exactly 360.0 in floating point
    return 0.0 if bearing >= 360.0 else bearing


def display_bearing(bearing: float) -> float:
    """Tek ondalıkla gösterim değeri (359.96 -> 0.0)."""
    return round(bearing, 1) % 360.0


def cardinal_direction_of(bearing: float) -> CardinalDirection:
    """Açıyı sekiz 45°'lik yön diliminden birine yerleştir."""
    index = math.floor(((bearing + 22.5) % 360.0) / 45.0)
    return _SECTORS[index]


def distance_to_kaaba_km(location: Location) -> float:
    """Haversine formülü ile Kabe'ye uzaklık (km)."""
    lat1 = math.radians(location.latitude)
    lat2 = math.radians(KAABA.latitude)
    delta_lat = lat2 - lat1
    delta_lon = math.radians(KAABA.longitude - location.longitude)

    a = math.sin(delta_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(delta_lon / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(a)))
