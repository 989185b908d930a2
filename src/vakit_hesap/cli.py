"""Command-line interface for Vakit-Hesap."""

import argparse
import logging
import sys
from datetime import date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

from babel.dates import format_date, format_time
from pydantic import BaseModel
from timezonefinder import TimezoneFinder

from vakit_hesap import __version__
from vakit_hesap.config import get_config, setup_logging
from vakit_hesap.domain.errors import OutOfRangeError, VakitError
from vakit_hesap.domain.methods import available_methods
from vakit_hesap.domain.models import (
    AsrJuristicMethod,
    CalculationMethod,
    CalculationSettings,
    Location,
    PrayerName,
    PrayerTimes,
)
from vakit_hesap.infrastructure.hijri_calendar import TabularHijriCalendar
from vakit_hesap.schemas import (
    DailyScheduleSchema,
    FastingWindowSchema,
    MonthlyScheduleSchema,
    NextPrayerSchema,
    QiblaSchema,
)
from vakit_hesap.services.prayer_service import PrayerService

logger = logging.getLogger(__name__)

DATE_FORMAT = "d MMMM yyyy, EEEE"


def _iso_date(value: str) -> date:
    return date.fromisoformat(value)


def _iso_datetime(value: str) -> datetime:
    return datetime.fromisoformat(value)


def _add_location_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--lat", type=float, required=True, help="Enlem")
    parser.add_argument("--lng", type=float, required=True, help="Boylam")


def _add_calculation_arguments(parser: argparse.ArgumentParser, *, asr: bool = True) -> None:
    config = get_config()
    parser.add_argument(
        "--method",
        "-m",
        type=str.upper,
        choices=[m.value for m in CalculationMethod],
        default=config.default_method.value,
        help=f"Hesaplama metodu (varsayılan: {config.default_method.value})",
    )
    if asr:
        parser.add_argument(
            "--asr",
            type=str.lower,
            choices=[a.value for a in AsrJuristicMethod],
            default=config.default_asr_method.value,
            help=f"İkindi mezhebi (varsayılan: {config.default_asr_method.value})",
        )
    parser.add_argument(
        "--tz",
        type=int,
        default=config.default_timezone_offset,
        help="UTC ofseti (saat). Verilmezse konumdan bulunur",
    )
    parser.add_argument("--json", action="store_true", help="JSON çıktı ver")
    parser.add_argument("--12h", dest="twelve_hour", action="store_true", help="12 saat formatı")


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="vakit-hesap",
        description="Namaz vakti ve kıble yönü hesaplayıcı",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"vakit-hesap {__version__}",
    )
    parser.add_argument(
        "--log-level",
        "-l",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log seviyesi",
    )

    subparsers = parser.add_subparsers(dest="command", help="Komutlar")

    # times command
    times_parser = subparsers.add_parser("times", help="Namaz vakitlerini göster")
    _add_location_arguments(times_parser)
    times_parser.add_argument("--date", type=_iso_date, help="Başlangıç tarihi (YYYY-MM-DD)")
    times_parser.add_argument(
        "--days",
        "-d",
        type=int,
        default=1,
        help="Kaç günlük (varsayılan: 1)",
    )
    _add_calculation_arguments(times_parser)

    # month command
    month_parser = subparsers.add_parser("month", help="Aylık vakit çizelgesi")
    _add_location_arguments(month_parser)
    month_parser.add_argument("--year", type=int, required=True, help="Yıl")
    month_parser.add_argument("--month", type=int, required=True, help="Ay (1-12)")
    _add_calculation_arguments(month_parser)

    # ramadan command
    ramadan_parser = subparsers.add_parser("ramadan", help="Ramazan imsakiyesi")
    _add_location_arguments(ramadan_parser)
    ramadan_parser.add_argument("--year", type=int, required=True, help="Miladi yıl")
    ramadan_parser.add_argument("--start", type=_iso_date, help="Pencere başlangıcı")
    ramadan_parser.add_argument("--end", type=_iso_date, help="Pencere bitişi")
    _add_calculation_arguments(ramadan_parser, asr=False)

    # next command
    next_parser = subparsers.add_parser("next", help="Sonraki namaz vakti")
    _add_location_arguments(next_parser)
    next_parser.add_argument("--now", type=_iso_datetime, help="Yerel zaman (ISO 8601)")
    _add_calculation_arguments(next_parser)

    # qibla command
    qibla_parser = subparsers.add_parser("qibla", help="Kıble yönünü göster")
    _add_location_arguments(qibla_parser)
    qibla_parser.add_argument("--json", action="store_true", help="JSON çıktı ver")

    # methods command
    subparsers.add_parser("methods", help="Hesaplama metotlarını listele")

    return parser


def resolve_timezone_offset(latitude: float, longitude: float, on_date: date) -> int:
    """Koordinatlardan o tarihteki UTC ofsetini (saat) bul."""
    tz_name = TimezoneFinder().timezone_at(lat=latitude, lng=longitude) or "UTC"
    offset = datetime.combine(on_date, time(12)).replace(tzinfo=ZoneInfo(tz_name)).utcoffset()
    if offset is None:
        return 0
    hours = offset.total_seconds() / 3600
    if not hours.is_integer():
        logger.warning(f"{tz_name} tam saat değil ({hours}), {int(hours)} kullanılıyor")
    return int(hours)


def _build_service(args: argparse.Namespace, on_date: date) -> PrayerService:
    location = Location(latitude=args.lat, longitude=args.lng)
    tz = args.tz
    if tz is None:
        tz = resolve_timezone_offset(args.lat, args.lng, on_date)
    settings = CalculationSettings(
        method=CalculationMethod(args.method),
        asr_method=AsrJuristicMethod(getattr(args, "asr", AsrJuristicMethod.STANDARD.value)),
        timezone_offset=tz,
    )
    return PrayerService(location, settings)


def _format_clock(minutes: int, twelve_hour: bool) -> str:
    hours, mins = divmod(minutes, 60)
    if twelve_hour:
        return format_time(time(hours, mins), "h:mm a", locale="en_US")
    return f"{hours:02d}:{mins:02d}"


def _print_json(model: BaseModel) -> None:
    print(model.model_dump_json(indent=2))


def _print_header(service: PrayerService) -> None:
    location = service.location
    settings = service.settings
    print(f"\n📍 Konum: {location.latitude:.4f}, {location.longitude:.4f}")
    params = service.parameters
    print(f"🌍 {service.timezone}")
    print(f"🧭 Metod: {settings.method.display_name} / {settings.asr_method.display_name}")
    print(f"📐 İmsak açısı: {params.fajr_angle}°")
    print()


def _print_table(times_list: list[PrayerTimes], twelve_hour: bool) -> None:
    width = 12 if twelve_hour else 8
    header = f"{'Tarih':<32}" + "".join(f"{p.display_name:>{width}}" for p in PrayerName)
    print("=" * len(header))
    print(header)
    print("-" * len(header))
    for times in times_list:
        row = f"{format_date(times.date, DATE_FORMAT, locale='tr_TR'):<32}"
        row += "".join(
            f"{_format_clock(times.get_time(p), twelve_hour):>{width}}" for p in PrayerName
        )
        print(row)
    print("=" * len(header))


def cmd_times(args: argparse.Namespace) -> None:
    """Show prayer times."""
    start = args.date or date.today()
    service = _build_service(args, start)
    times_list = service.calculate_range(start, args.days)

    if args.json:
        for times in times_list:
            _print_json(DailyScheduleSchema.from_domain(times, service.settings))
        return

    _print_header(service)
    _print_table(times_list, args.twelve_hour)


def cmd_month(args: argparse.Namespace) -> None:
    """Show monthly timetable."""
    if not 1 <= args.month <= 12:
        raise OutOfRangeError("month", args.month, 1, 12)
    service = _build_service(args, date(args.year, args.month, 1))
    times_list = service.calculate_month(args.year, args.month)

    if args.json:
        _print_json(
            MonthlyScheduleSchema(
                year=args.year,
                month=args.month,
                days=[DailyScheduleSchema.from_domain(t, service.settings) for t in times_list],
            )
        )
        return

    _print_header(service)
    _print_table(times_list, args.twelve_hour)


def cmd_ramadan(args: argparse.Namespace) -> None:
    """Show Ramadan fasting schedule."""
    calendar = TabularHijriCalendar()
    if args.start is not None:
        start, end = args.start, args.end
    else:
        start, end = calendar.ramadan_range(args.year)

    service = _build_service(args, start)
    window = service.fasting_window(start, end)

    if args.json:
        _print_json(FastingWindowSchema.from_domain(window))
        return

    _print_header(service)
    print(f"🌙 {calendar.to_hijri(start)} - {calendar.to_hijri(end)}")
    print("=" * 56)
    print(f"{'Gün':<5} {'Tarih':<32} {'Sahur':>8} {'İftar':>8}")
    print("-" * 56)
    for day in window.days:
        print(
            f"{day.day:<5} "
            f"{format_date(day.date, DATE_FORMAT, locale='tr_TR'):<32} "
            f"{_format_clock(day.suhoor_end, args.twelve_hour):>8} "
            f"{_format_clock(day.iftar, args.twelve_hour):>8}"
        )
    print("=" * 56)


def cmd_next(args: argparse.Namespace) -> None:
    """Show the next prayer."""
    now = args.now
    if now is None:
        tz = args.tz
        if tz is None:
            tz = resolve_timezone_offset(args.lat, args.lng, date.today())
        now = datetime.now(timezone(timedelta(hours=tz))).replace(tzinfo=None)
    service = _build_service(args, now.date())
    upcoming = service.get_next_prayer(now)

    if args.json:
        _print_json(NextPrayerSchema.from_domain(upcoming))
        return

    remaining = service.get_time_until_next_prayer(now)
    hours, remainder = divmod(int(remaining.total_seconds()), 3600)
    minutes = remainder // 60
    print(
        f"{upcoming.name.icon} {upcoming.name.display_name}: "
        f"{_format_clock(upcoming.minutes, args.twelve_hour)} "
        f"({upcoming.date.isoformat()}, {hours:02d}:{minutes:02d} kaldı)"
    )


def cmd_qibla(args: argparse.Namespace) -> None:
    """Show the Qibla direction."""
    location = Location(latitude=args.lat, longitude=args.lng)
    qibla = QiblaSchema.from_location(location)

    if args.json:
        _print_json(qibla)
        return

    print(f"\n📍 Konum: {location.latitude:.4f}, {location.longitude:.4f}")
    print(f"🕋 Kıble: {qibla.qibla_direction:.1f}° ({qibla.cardinal_direction.display_name})")
    print(f"📏 Kabe'ye uzaklık: {qibla.distance_km:.1f} km")


def cmd_methods(args: argparse.Namespace) -> None:
    """List calculation methods."""
    for method, params in available_methods().items():
        if params.has_fixed_isha:
            isha = f"akşam + {params.isha_interval_minutes} dk"
            if params.ramadan_isha_interval_minutes is not None:
                isha += f" (Ramazan: {params.ramadan_isha_interval_minutes} dk)"
        else:
            isha = f"{params.isha_angle}°"
        print(f"{method.value:<10} {method.display_name:<48} imsak {params.fajr_angle}°, yatsı {isha}")


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command == "ramadan" and (args.start is None) != (args.end is None):
        parser.error("ramadan: --start ve --end birlikte verilmeli")

    setup_logging(args.log_level or get_config().log_level)

    commands = {
        "times": cmd_times,
        "month": cmd_month,
        "ramadan": cmd_ramadan,
        "next": cmd_next,
        "qibla": cmd_qibla,
        "methods": cmd_methods,
    }

    cmd_func = commands.get(args.command)
    if cmd_func is None:
        parser.print_help()
        return 1

    try:
        cmd_func(args)
    except VakitError as e:
        logger.error(f"Hesaplama hatası: {e}")
        print(f"❌ Hata: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
