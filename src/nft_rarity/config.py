"""Configuration system for nft-rarity.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (RARITY_*) -> .env file -> field defaults.

Per-call overrides are applied via resolve_config() which creates a new
config instance without mutating the defaults. Infrastructure fields are
protected from per-call override.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from nft_rarity.exceptions import ConfigValidationError

# Fields that can be overridden per call via RarityEngine.rank(overrides=...).
_PER_CALL_FIELDS: frozenset[str] = frozenset(
    {
        "scorer_type",
        "nan_policy",
        "log_level",
        "diagnostic_mode",
    }
)

# All known config field names (populated after class definition).
_ALL_FIELDS: frozenset[str] = frozenset()


class RarityConfig(BaseSettings):
    """Configuration for nft-rarity.

    Resolution order: init kwargs -> env vars (RARITY_*) -> .env file -> defaults.

    Fields are divided into two groups:
    - **Infrastructure**: worker pool sizing, fixed for the engine's lifetime.
    - **Ranking parameters**: scorer choice, NaN policy, logging.
      Overridable per call.
    """

    model_config = SettingsConfigDict(
        env_prefix="RARITY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Infrastructure (NOT per-call overridable) ---

    score_workers: int = Field(
        default=1,
        description="Worker threads for the scoring phase (1 scores inline)",
    )

    # --- Scoring and ranking (per-call overridable) ---

    scorer_type: str = Field(
        default="statistical",
        description="Scoring algorithm: 'statistical' or 'information_content'",
    )
    nan_policy: Literal["equal", "error"] = Field(
        default="equal",
        description="NaN handling while ranking: 'equal' or 'error'",
    )

    # --- Logging (per-call overridable) ---

    log_level: Literal["none", "summary", "full"] = Field(
        default="summary",
        description="Logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all run records in memory for analysis",
    )


_ALL_FIELDS = frozenset(RarityConfig.model_fields.keys())


def validate_overrides(overrides: dict[str, Any]) -> None:
    """Validate override keys without creating a config.

    Args:
        overrides: Mapping of config field name to override value.

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
    defaults: RarityConfig,
    overrides: dict[str, Any] | None,
) -> RarityConfig:
    """Create a new config instance merging defaults with per-call overrides.

    Args:
        defaults: The base configuration loaded from environment.
        overrides: Per-call overrides keyed by field name.

    Returns:
        A new RarityConfig with overrides applied, or *defaults* itself
        when there is nothing to override.

    Raises:
        ConfigValidationError: If any key is unknown or non-overridable, or
            a value fails field validation.
    """
    if not overrides:
        return defaults

    validate_overrides(overrides)

    # model_copy(update=...) skips validation; model_validate coerces types.
    merged = defaults.model_dump()
    merged.update(overrides)
    try:
        return RarityConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigValidationError(f"Invalid override value: {exc}") from exc
