"""Tests for Qibla direction."""

import pytest

from vakit_hesap.domain.models import CardinalDirection, Location
from vakit_hesap.services.qibla_service import (
    KAABA,
    bearing_to_kaaba,
    cardinal_direction_of,
    display_bearing,
    distance_to_kaaba_km,
)


class TestBearingToKaaba:
    """bearing_to_kaaba tests."""

    @pytest.mark.parametrize(
        ("latitude", "longitude", "expected"),
        [
            (40.7128, -74.0060, 58.48),  # New York
            (51.5074, -0.1278, 118.99),  # London
            (-6.2088, 106.8456, 295.15),  # Jakarta
        ],
    )
    def test_known_cities(self, latitude: float, longitude: float, expected: float) -> None:
        """Test published Qibla bearings."""
        bearing = bearing_to_kaaba(Location(latitude=latitude, longitude=longitude))
        assert bearing == pytest.approx(expected, abs=0.3)

    def test_at_kaaba(self) -> None:
        """Test the observer at the Kaaba gets 0.0 by convention."""
        assert bearing_to_kaaba(Location(latitude=21.4225, longitude=39.8262)) == 0.0
        assert bearing_to_kaaba(KAABA) == 0.0

    def test_due_north(self) -> None:
        """Test an observer on the Kaaba meridian to the south faces north."""
        assert bearing_to_kaaba(Location(latitude=0.0, longitude=39.8262)) == pytest.approx(0.0)

    def test_due_south(self) -> None:
        """Test an observer on the Kaaba meridian to the north faces south."""
        bearing = bearing_to_kaaba(Location(latitude=50.0, longitude=39.8262))
        assert bearing == pytest.approx(180.0)

    def test_range(self) -> None:
        """Test every valid coordinate maps into [0, 360)."""
        for latitude in range(-90, 91, 15):
            for longitude in range(-180, 181, 30):
                bearing = bearing_to_kaaba(Location(float(latitude), float(longitude)))
                assert 0.0 <= bearing < 360.0

    def test_independent_of_city_label(self) -> None:
        """Test only coordinates matter."""
        assert bearing_to_kaaba(Location(41.0, 29.0, city="İstanbul")) == bearing_to_kaaba(
            Location(41.0, 29.0)
        )


class TestCardinalDirection:
    """cardinal_direction_of tests."""

    @pytest.mark.parametrize(
        ("bearing", "expected"),
        [
            (0.0, CardinalDirection.N),
            (22.4999, CardinalDirection.N),
            (22.5, CardinalDirection.NE),
            (58.48, CardinalDirection.NE),
            (67.5, CardinalDirection.E),
            (135.0, CardinalDirection.SE),
            (180.0, CardinalDirection.S),
            (202.5, CardinalDirection.SW),
            (270.0, CardinalDirection.W),
            (292.5, CardinalDirection.NW),
            (337.4999, CardinalDirection.NW),
            (337.5, CardinalDirection.N),
            (359.99, CardinalDirection.N),
        ],
    )
    def test_sectors(self, bearing: float, expected: CardinalDirection) -> None:
        """Test 45° sectors with half-open boundaries."""
        assert cardinal_direction_of(bearing) == expected

    def test_display_names(self) -> None:
        """Test full direction names."""
        assert CardinalDirection.NE.display_name == "Northeast"
        assert CardinalDirection.W.display_name == "West"


class TestDisplayBearing:
    """display_bearing tests."""

    def test_one_decimal(self) -> None:
        """Test rounding to one decimal."""
        assert display_bearing(58.4812) == 58.5

    def test_wraps_at_360(self) -> None:
        """Test values that round up to 360 wrap to 0."""
        assert display_bearing(359.96) == 0.0


class TestDistance:
    """distance_to_kaaba_km tests."""

    def test_new_york(self) -> None:
        """Test New York is roughly 10,300 km from Mecca."""
        distance = distance_to_kaaba_km(Location(40.7128, -74.0060))
        assert 10_000 < distance < 10_600

    def test_at_kaaba(self) -> None:
        """Test zero distance at the Kaaba."""
        assert distance_to_kaaba_km(KAABA) == 0.0
