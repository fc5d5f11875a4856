"""Tests for configuration loading."""

import pytest

from budget_chart.config import AppSettings, ChartSettings, get_settings, validate_all_settings


class TestChartSettings:
    def test_defaults(self):
        settings = ChartSettings()
        assert settings.surface_id == "budgetChart"
        assert settings.currency_symbol == "$"
        assert settings.export_filename == "budget-chart.png"
        assert settings.fill_rgba(settings.income_color) == "rgba(40, 167, 69, 0.7)"
        assert settings.border_rgba(settings.expense_color) == "rgba(220, 53, 69, 1)"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("BUDGET_CHART_CURRENCY_SYMBOL", "€")
        monkeypatch.setenv("BUDGET_CHART_EXPORT_FILENAME", "my-budget.png")
        settings = ChartSettings()
        assert settings.currency_symbol == "€"
        assert settings.export_filename == "my-budget.png"

    def test_rgb_triple_normalised(self):
        settings = ChartSettings(income_color="0,128 , 255")
        assert settings.income_color == "0, 128, 255"

    @pytest.mark.parametrize("value", ["1, 2", "red", "0, 0, 256"])
    def test_rgb_triple_rejected(self, value):
        with pytest.raises(ValueError):
            ChartSettings(income_color=value)

    def test_export_filename_must_be_png(self):
        with pytest.raises(ValueError, match=".png"):
            ChartSettings(export_filename="budget-chart.jpg")

    def test_export_scale_bounds(self):
        with pytest.raises(ValueError):
            ChartSettings(export_scale=10)


class TestAppSettings:
    def test_log_level_pattern(self):
        assert AppSettings().log_level == "INFO"
        with pytest.raises(ValueError):
            AppSettings(log_level="LOUD")


class TestValidateAllSettings:
    def test_all_valid_by_default(self):
        get_settings.cache_clear()
        status = validate_all_settings()
        assert status == {"chart": True, "app": True}

    def test_reports_invalid_section(self, monkeypatch):
        monkeypatch.setenv("BUDGET_CHART_EXPORT_SCALE", "99")
        get_settings.cache_clear()
        status = validate_all_settings()
        assert status["chart"] is False
        assert isinstance(status["chart_error"], str)
        assert "export_scale" in status["chart_error"]
        assert status["app"] is True
