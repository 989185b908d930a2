"""Configuration management."""

import logging
import os
from dataclasses import dataclass
from typing import Self

from vakit_hesap.domain.methods import resolve_asr_method, resolve_method
from vakit_hesap.domain.models import AsrJuristicMethod, CalculationMethod


def _parse_timezone_offset(value: str | None) -> int | None:
    """Boş değer: saat dilimi konumdan bulunur."""
    if value is None or value.strip() == "":
        return None
    return int(value)


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    log_level: str = "WARNING"
    default_method: CalculationMethod = CalculationMethod.ISNA
    default_asr_method: AsrJuristicMethod = AsrJuristicMethod.STANDARD
    default_timezone_offset: int | None = None

    @classmethod
    def from_env(cls) -> Self:
        """Load configuration from environment variables."""
        return cls(
            log_level=os.getenv("VAKIT_HESAP_LOG_LEVEL", "WARNING"),
            default_method=resolve_method(os.getenv("VAKIT_HESAP_METHOD", "ISNA")),
            default_asr_method=resolve_asr_method(os.getenv("VAKIT_HESAP_ASR", "standard")),
            default_timezone_offset=_parse_timezone_offset(os.getenv("VAKIT_HESAP_TZ")),
        )


_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get application configuration."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def setup_logging(level: str = "WARNING") -> None:
    """Setup application logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Reduce noise from third-party libraries
    logging.getLogger("timezonefinder").setLevel(logging.WARNING)
