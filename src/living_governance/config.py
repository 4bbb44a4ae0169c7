"""Configuration with layered resolution: defaults -> YAML -> env -> CLI.

Uses pydantic-settings with YamlConfigSettingsSource. Supports ``.env``
file loading, ``LIVING_GOVERNANCE_`` prefixed env vars, and the nested
delimiter ``__`` for overriding sub-model fields.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, Field, ValidationError, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

# ---------------------------------------------------------------------------
# Sub-models
# ---------------------------------------------------------------------------


class FreshnessSettings(BaseModel):
    """Confidence decay configuration."""

    default_valid_days: int = Field(
        default=90,
        gt=0,
        description="Validity window used when a knowledge object sets none.",
    )


class IntegritySettings(BaseModel):
    """Editorial integrity audit configuration."""

    enforce_score_totals: bool = Field(
        default=True,
        description="Treat a total that differs from its sub-score sum as an error.",
    )
    enforce_coverage_match: bool = Field(
        default=False,
        description="Treat coverage scores that differ from total/100 as errors.",
    )
    coverage_tolerance: float = Field(default=0.005, ge=0.0, le=1.0)


class DisplaySettings(BaseModel):
    """Presentation settings for the CLI."""

    default_knowledge: str = "framework-coverage"
    default_threats: str = "threats"
    danger_below: float = Field(default=0.4, ge=0.0, le=1.0)
    warning_below: float = Field(default=0.7, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def check_band_order(self) -> DisplaySettings:
        """Coverage bands must be ordered danger < warning."""
        if self.danger_below > self.warning_below:
            msg = "danger_below must not exceed warning_below"
            raise ValueError(msg)
        return self


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["console", "json"] = "console"
    file: Path | None = None


# ---------------------------------------------------------------------------
# Main Settings
# ---------------------------------------------------------------------------


class Settings(BaseSettings):
    """Top-level application settings.

    Resolution order (last wins):
        1. Field defaults (defined above)
        2. YAML config file (``config.yaml`` or ``--config`` path)
        3. Environment variables (prefixed ``LIVING_GOVERNANCE_``)
        4. CLI overrides (applied programmatically after loading)
    """

    model_config = SettingsConfigDict(
        env_prefix="LIVING_GOVERNANCE_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        yaml_file="config.yaml",
        yaml_file_encoding="utf-8",
        extra="ignore",
    )

    _config_path_override: ClassVar[Path | None] = None

    freshness: FreshnessSettings = Field(default_factory=FreshnessSettings)
    integrity: IntegritySettings = Field(default_factory=IntegritySettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Order sources: init (CLI) > env > dotenv > yaml > defaults."""
        yaml_file = cls._config_path_override or settings_cls.model_config.get(
            "yaml_file", "config.yaml"
        )
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls, yaml_file=yaml_file),
        )

    @classmethod
    def load(cls, config_path: Path | None = None, **overrides: Any) -> Settings:
        """Load settings with optional config path and CLI overrides.

        Args:
            config_path: Optional path to a YAML config file.
            **overrides: Key-value overrides applied at highest priority.

        Returns:
            Fully-resolved Settings instance.

        Raises:
            ValidationError: If any setting value fails validation.
        """
        cls._config_path_override = config_path
        try:
            return cls(**overrides)
        finally:
            cls._config_path_override = None


def format_validation_error(exc: ValidationError) -> str:
    """Format a Pydantic ValidationError into a user-friendly message."""
    lines: list[str] = []
    for error in exc.errors():
        loc = " -> ".join(str(part) for part in error["loc"])
        msg = error["msg"]
        raw_input = error.get("input")
        if raw_input is not None:
            lines.append(f"  {loc}: {msg} (got {raw_input!r})")
        else:
            lines.append(f"  {loc}: {msg}")
    return "Configuration error:\n" + "\n".join(lines)
