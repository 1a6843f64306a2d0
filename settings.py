"""Runtime defaults for the BMI explorer.

Every default can be overridden through the environment or a local .env file.
• BMI_DEFAULT_HEIGHT_CM        – initial height in centimetres.
• BMI_DEFAULT_MIN_WEIGHT / MAX – initial weight range in kilograms.
• BMI_DEFAULT_STEP             – initial weight step in kilograms.
• BMI_DEFAULT_CONVERTER_WEIGHT – initial weight in the Weight → BMI converter.
• BMI_LOG_LEVEL                – logging level name.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace

from dotenv import load_dotenv  # type: ignore

load_dotenv()


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass(frozen=True)
class AppSettings:
    """Immutable container for UI defaults and input limits."""

    # --- Initial inputs ---------------------------------------------------
    default_height_cm: float = field(default_factory=lambda: _env_float("BMI_DEFAULT_HEIGHT_CM", 175))
    default_min_weight: float = field(default_factory=lambda: _env_float("BMI_DEFAULT_MIN_WEIGHT", 40))
    default_max_weight: float = field(default_factory=lambda: _env_float("BMI_DEFAULT_MAX_WEIGHT", 140))
    default_step: float = field(default_factory=lambda: _env_float("BMI_DEFAULT_STEP", 0.5))
    default_converter_weight: float = field(
        default_factory=lambda: _env_float("BMI_DEFAULT_CONVERTER_WEIGHT", 75)
    )

    # --- Input limits -----------------------------------------------------
    height_min_cm: float = 100
    height_max_cm: float = 230
    step_min: float = 0.1
    step_max: float = 10

    # --- Converter targets ------------------------------------------------
    target_bmis: tuple = (
        (22, "Target BMI 22"),
        (25, "Upper normal BMI 25"),
    )

    log_level: str = field(default_factory=lambda: os.getenv("BMI_LOG_LEVEL", "INFO").upper())

    def __post_init__(self):
        if self.default_height_cm <= 0:
            raise ValueError(f"default_height_cm must be positive, got {self.default_height_cm}")


SETTINGS = AppSettings()


def update_from_kwargs(**overrides) -> AppSettings:
    """Return a new AppSettings with supplied overrides."""

    return replace(SETTINGS, **overrides)
