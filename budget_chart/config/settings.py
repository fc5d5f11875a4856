"""
Configuration Management for Budget Chart

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Chart appearance and export parameters are fixed by default but can be
overridden from the environment or a .env file without code changes.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ChartSettings(BaseSettings):
    """Chart rendering and export configuration."""

    model_config = SettingsConfigDict(
        env_prefix="BUDGET_CHART_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    surface_id: str = Field(
        default="budgetChart",
        description="Identifier of the drawing surface the chart is attached to"
    )
    currency_symbol: str = Field(
        default="$",
        min_length=1,
        max_length=3,
        description="Symbol prefixed to axis ticks and tooltips"
    )

    # Export
    export_filename: str = Field(
        default="budget-chart.png",
        description="Filename offered for the downloaded image"
    )
    export_width: int = Field(
        default=1200,
        ge=200,
        le=4000,
        description="Width of the exported image in pixels"
    )
    export_height: int = Field(
        default=600,
        ge=200,
        le=4000,
        description="Height of the exported image in pixels"
    )
    export_scale: float = Field(
        default=2.0,
        ge=1.0,
        le=4.0,
        description="Pixel density multiplier for the exported image"
    )

    # Colours, as "r, g, b"
    income_color: str = Field(
        default="40, 167, 69",
        description="RGB triple for the income series (green)"
    )
    expense_color: str = Field(
        default="220, 53, 69",
        description="RGB triple for the expense series (red)"
    )
    fill_opacity: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Opacity of the bar fill (borders are always solid)"
    )
    border_width: int = Field(
        default=1,
        ge=0,
        le=10,
        description="Bar border width in pixels"
    )

    @field_validator('income_color', 'expense_color')
    @classmethod
    def validate_rgb_triple(cls, v: str) -> str:
        """Normalise an "r, g, b" string and check each channel is 0-255."""
        parts = [part.strip() for part in v.split(",")]
        if len(parts) != 3 or not all(part.isdigit() for part in parts):
            raise ValueError(f"Expected an 'r, g, b' triple, got {v!r}")
        if any(int(part) > 255 for part in parts):
            raise ValueError(f"RGB channels must be between 0 and 255, got {v!r}")
        return ", ".join(parts)

    @field_validator('export_filename')
    @classmethod
    def validate_export_filename(cls, v: str) -> str:
        if not v.lower().endswith(".png"):
            raise ValueError("Export filename must end with .png")
        return v

    def fill_rgba(self, rgb: str) -> str:
        """Semi-transparent fill colour for a series."""
        return f"rgba({rgb}, {self.fill_opacity})"

    @staticmethod
    def border_rgba(rgb: str) -> str:
        """Solid border colour for a series."""
        return f"rgba({rgb}, 1)"


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Minimum level for structured log output"
    )


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def chart(self) -> ChartSettings:
        return ChartSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool | str]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, with a
    "<name>_error" entry for each section that failed.
    """
    results = {}

    settings = get_settings()

    for name in ("chart", "app"):
        try:
            getattr(settings, name)
            results[name] = True
        except ValueError as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
