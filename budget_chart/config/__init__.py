"""Configuration package."""

from budget_chart.config.settings import (
    AppSettings,
    ChartSettings,
    Settings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "ChartSettings",
    "Settings",
    "get_settings",
    "validate_all_settings",
]
