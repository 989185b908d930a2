"""Tests for the JSON boundary schemas."""

from datetime import date

import pytest
from pydantic import ValidationError

from vakit_hesap.domain.models import (
    AsrJuristicMethod,
    CalculationMethod,
    CalculationSettings,
    CardinalDirection,
    FastingDay,
    FastingWindow,
    Location,
    PrayerName,
    PrayerTime,
    PrayerTimes,
)
from vakit_hesap.schemas import (
    DailyScheduleSchema,
    FastingWindowSchema,
    LocationSchema,
    MonthlyScheduleSchema,
    NextPrayerSchema,
    PrayerTimesRequest,
    QiblaSchema,
)


@pytest.fixture
def sample_times() -> PrayerTimes:
    """Create sample prayer times."""
    return PrayerTimes(
        date=date(2024, 1, 1),
        fajr=330,
        sunrise=420,
        dhuhr=750,
        asr=915,
        maghrib=1065,
        isha=1155,
    )


class TestRequestSchemas:
    """Input validation tests."""

    def test_location_schema_validation(self) -> None:
        """Test location schema validates correctly."""
        loc = LocationSchema(latitude=41.0, longitude=29.0)
        assert loc.to_location() == Location(41.0, 29.0)

    def test_location_schema_invalid_latitude(self) -> None:
        """Test location schema rejects invalid latitude."""
        with pytest.raises(ValidationError):
            LocationSchema(latitude=91.0, longitude=29.0)

    def test_prayer_times_request_defaults(self) -> None:
        """Test defaults match the engine defaults."""
        request = PrayerTimesRequest(latitude=41.0, longitude=29.0, date="2024-06-21")
        assert request.date == date(2024, 6, 21)
        assert request.to_settings() == CalculationSettings()

    def test_prayer_times_request_payload(self) -> None:
        """Test a full client payload."""
        request = PrayerTimesRequest.model_validate(
            {
                "latitude": 21.4225,
                "longitude": 39.8262,
                "date": "2024-03-11",
                "method": "MAKKAH",
                "asr_method": "hanafi",
                "timezone_offset": 3,
            }
        )
        settings = request.to_settings()
        assert settings.method == CalculationMethod.MAKKAH
        assert settings.asr_method == AsrJuristicMethod.HANAFI
        assert settings.timezone_offset == 3

    @pytest.mark.parametrize("payload", [{"method": "JAFARI"}, {"timezone_offset": 15}])
    def test_prayer_times_request_invalid(self, payload: dict) -> None:
        """Test unknown methods and offsets are rejected."""
        with pytest.raises(ValidationError):
            PrayerTimesRequest(latitude=41.0, longitude=29.0, date="2024-06-21", **payload)


class TestResponseSchemas:
    """Output serialization tests."""

    def test_daily_schedule_fields(self, sample_times: PrayerTimes) -> None:
        """Test field names and HH:MM values."""
        schema = DailyScheduleSchema.from_domain(sample_times)
        data = schema.model_dump(mode="json")
        assert data["date"] == "2024-01-01"
        assert data["fajr"] == "05:30"
        assert data["isha"] == "19:15"
        assert data["method"] is None

    def test_daily_schedule_round_trip(self, sample_times: PrayerTimes) -> None:
        """Test JSON round trip is lossless."""
        schema = DailyScheduleSchema.from_domain(
            sample_times, CalculationSettings(method=CalculationMethod.MWL)
        )
        restored = DailyScheduleSchema.model_validate_json(schema.model_dump_json())
        assert restored == schema
        assert restored.method == CalculationMethod.MWL

    def test_daily_schedule_rejects_invalid_time(self) -> None:
        """Test 24:00 is not a valid clock value."""
        with pytest.raises(ValidationError):
            DailyScheduleSchema(
                date=date(2024, 1, 1),
                fajr="24:00",
                sunrise="07:00",
                dhuhr="12:30",
                asr="15:15",
                maghrib="17:45",
                isha="19:15",
            )

    def test_monthly_schedule(self, sample_times: PrayerTimes) -> None:
        """Test monthly wrapper."""
        schema = MonthlyScheduleSchema(
            year=2024, month=1, days=[DailyScheduleSchema.from_domain(sample_times)]
        )
        assert schema.model_dump(mode="json")["days"][0]["dhuhr"] == "12:30"

    def test_fasting_window(self) -> None:
        """Test Ramadan payload field names."""
        window = FastingWindow(
            start_date=date(2024, 3, 11),
            end_date=date(2024, 3, 12),
            days=(
                FastingDay(day=1, date=date(2024, 3, 11), suhoor_end=305, iftar=1150),
                FastingDay(day=2, date=date(2024, 3, 12), suhoor_end=303, iftar=1151),
            ),
        )
        data = FastingWindowSchema.from_domain(window).model_dump(mode="json")
        assert data["start_date"] == "2024-03-11"
        assert data["fasting_schedule"][1] == {
            "day": 2,
            "date": "2024-03-12",
            "suhoor_end": "05:03",
            "iftar_time": "19:11",
        }

    def test_qibla(self) -> None:
        """Test Qibla payload for New York."""
        schema = QiblaSchema.from_location(Location(40.7128, -74.0060))
        assert schema.qibla_direction == 58.5
        assert schema.cardinal_direction == CardinalDirection.NE
        restored = QiblaSchema.model_validate_json(schema.model_dump_json())
        assert restored == schema

    def test_qibla_at_kaaba(self) -> None:
        """Test the boundary value serializes cleanly."""
        schema = QiblaSchema.from_location(Location(21.4225, 39.8262))
        assert schema.qibla_direction == 0.0
        assert schema.distance_km == 0.0

    def test_next_prayer(self) -> None:
        """Test next prayer payload."""
        schema = NextPrayerSchema.from_domain(
            PrayerTime(name=PrayerName.FAJR, minutes=225, date=date(2024, 6, 22))
        )
        data = schema.model_dump(mode="json")
        assert data == {
            "name": "fajr",
            "display_name": "İmsak",
            "date": "2024-06-22",
            "time": "03:45",
        }
