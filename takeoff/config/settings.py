"""Takeoff configuration settings.

Loads configuration from environment variables with sensible defaults.
Values here only seed defaults; every analysis receives an explicit
AnalysisConfig so runs stay reproducible.
"""

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

# Load .env file for local overrides (log level, default markup rates, etc.)
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    """Read a boolean flag from the environment."""
    return os.getenv(name, default).lower() in ("1", "true", "yes")


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("TAKEOFF_LOG_LEVEL", "INFO"))
    log_banners: bool = field(default_factory=lambda: _env_flag("TAKEOFF_LOG_BANNERS"))

    # Estimate markups (fractions of the subtotal)
    contingency_rate: float = field(default_factory=lambda: float(os.getenv("TAKEOFF_CONTINGENCY_RATE", "0.10")))
    general_conditions_rate: float = field(default_factory=lambda: float(os.getenv("TAKEOFF_GENERAL_CONDITIONS_RATE", "0")))
    overhead_profit_rate: float = field(default_factory=lambda: float(os.getenv("TAKEOFF_OVERHEAD_PROFIT_RATE", "0")))

    # Framing defaults
    stud_spacing_in: float = field(default_factory=lambda: float(os.getenv("TAKEOFF_STUD_SPACING_IN", "16")))
    default_wall_height: float = field(default_factory=lambda: float(os.getenv("TAKEOFF_DEFAULT_WALL_HEIGHT", "9")))

    # Carpentry equipment rental period
    equipment_rental_days: int = field(default_factory=lambda: int(os.getenv("TAKEOFF_EQUIPMENT_RENTAL_DAYS", "5")))

    def validate(self) -> None:
        """Validate configured defaults.

        Raises:
            ValueError: If a rate or dimension is negative.
        """
        for name in (
            "contingency_rate",
            "general_conditions_rate",
            "overhead_profit_rate",
            "stud_spacing_in",
            "default_wall_height",
            "equipment_rental_days",
        ):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")
        if self.stud_spacing_in == 0:
            raise ValueError("stud_spacing_in must be greater than zero")


# Singleton settings instance
settings = Settings()
