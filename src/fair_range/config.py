"""Configuration system for fair-range.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (FAIR_RANGE_*) -> .env file -> field defaults.

Per-call overrides are applied via resolve_config() which creates a new
config instance without mutating the defaults. Infrastructure fields are
protected from per-call override.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from fair_range.exceptions import ConfigValidationError

# Fields that can be overridden per call. Source selection and fallback
# behaviour are fixed for the lifetime of a FairRange instance.
_PER_CALL_FIELDS: frozenset[str] = frozenset(
    {
        "sampling_method",
        "source_width",
        "max_draws",
        "log_level",
        "diagnostic_mode",
    }
)

# All known config field names (populated after class definition).
_ALL_FIELDS: frozenset[str] = frozenset()


class FairRangeConfig(BaseSettings):
    """Configuration for fair-range.

    Resolution order: init kwargs -> env vars (FAIR_RANGE_*) -> .env file -> defaults.

    Fields are divided into two groups:
    - **Infrastructure**: entropy source type, fallback mode, device path,
      mock seed. NOT overridable per call.
    - **Sampling parameters**: method, source width, retry cap, logging.
      Overridable per call via ``resolve_config()``.
    """

    model_config = SettingsConfigDict(
        env_prefix="FAIR_RANGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Infrastructure (NOT per-call overridable) ---

    entropy_source_type: str = Field(
        default="system",
        description="Primary random bit source identifier",
    )
    fallback_mode: str = Field(
        default="system",
        description="Fallback source: 'error', 'system', 'mock_uniform'",
    )
    device_path: str = Field(
        default="/dev/urandom",
        description="Entropy device read by the 'device' source",
    )
    mock_seed: int | None = Field(
        default=None,
        description="Seed for the 'mock_uniform' source (None = OS-seeded)",
    )

    # --- Sampling (per-call overridable) ---

    sampling_method: str = Field(
        default="rejection",
        description="Sampler: 'rejection' (unbiased) or 'modulo' (biased baseline)",
    )
    source_width: int = Field(
        default=0,
        ge=0,
        description="Fixed draw width in bits (0 = smallest width covering the range)",
    )
    max_draws: int = Field(
        default=0,
        ge=0,
        description="Cap on draws per sample (0 = unbounded)",
    )

    # --- Logging (per-call overridable) ---

    log_level: Literal["none", "summary", "full"] = Field(
        default="none",
        description="Logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all sample records in memory for analysis",
    )


# Populate _ALL_FIELDS now that the class is defined.
_ALL_FIELDS = frozenset(FairRangeConfig.model_fields.keys())


def validate_overrides(overrides: dict[str, Any]) -> None:
    """Validate per-call override keys without creating a config.

    Args:
        overrides: Mapping of config field names to override values.

    Raises:
        ConfigValidationError: If any key is unknown or non-overridable.
    """
    for key in overrides:
        if key not in _ALL_FIELDS:
            raise ConfigValidationError(f"Unknown config field: '{key}'")
        if key not in _PER_CALL_FIELDS:
            raise ConfigValidationError(
                f"Field '{key}' is an infrastructure field and cannot be "
                f"overridden per call"
            )


def resolve_config(
    defaults: FairRangeConfig,
    overrides: dict[str, Any] | None,
) -> FairRangeConfig:
    """Create a new config instance merging defaults with per-call overrides.

    Args:
        defaults: The base configuration loaded from environment.
        overrides: Per-call overrides keyed by bare field name.

    Returns:
        A new FairRangeConfig with overrides applied, or *defaults* itself
        when there is nothing to override.

    Raises:
        ConfigValidationError: If any key is unknown or non-overridable, or
            an override value fails field validation.
    """
    if not overrides:
        return defaults

    validate_overrides(overrides)

    # model_copy(update=...) skips validation; model_validate coerces and
    # enforces field constraints.
    merged = defaults.model_dump()
    merged.update(overrides)
    try:
        return FairRangeConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigValidationError(f"Invalid override value: {exc}") from exc
