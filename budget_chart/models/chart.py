"""
Chart Configuration Models

A ChartConfig is the complete, library-independent description of the
budget chart: categories, series, colours, axis ticks and legend. The
charting backend only translates it; it makes no decisions of its own.
"""

import base64
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from budget_chart.models.budget import MONTH_LABELS, MONTHS_PER_YEAR


def format_amount(value: float) -> str:
    """
    Format a number with thousands separators and at most three
    fraction digits, trailing zeros removed.

    1200 -> "1,200", 1200.5 -> "1,200.5", 0.1234 -> "0.123"
    """
    text = f"{value:,.3f}".rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def format_currency(value: float, symbol: str = "$") -> str:
    """Currency string, e.g. "$1,200"."""
    return f"{symbol}{format_amount(value)}"


class DatasetConfig(BaseModel):
    """One value series in the grouped bar chart."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., min_length=1)
    data: tuple[float, ...] = Field(
        ...,
        min_length=MONTHS_PER_YEAR,
        max_length=MONTHS_PER_YEAR,
    )
    background_color: str = Field(
        ...,
        description="Semi-transparent fill colour"
    )
    border_color: str = Field(
        ...,
        description="Solid border colour"
    )
    border_width: int = Field(default=1, ge=0)


class ValueAxisConfig(BaseModel):
    """Vertical (value) axis."""

    model_config = ConfigDict(frozen=True)

    begin_at_zero: bool = True
    tick_values: tuple[float, ...] = Field(default_factory=tuple)
    tick_labels: tuple[str, ...] = Field(default_factory=tuple)

    @model_validator(mode='after')
    def validate_ticks(self) -> 'ValueAxisConfig':
        if len(self.tick_values) != len(self.tick_labels):
            raise ValueError("Every tick value needs exactly one label")
        return self


class LegendConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    display: bool = True
    position: str = Field(
        default="top",
        pattern="^(top|bottom|left|right)$",
    )


class ChartConfig(BaseModel):
    """
    Complete description of the budget chart.

    CRITICAL: labels are always the twelve month abbreviations in
    calendar order, and every dataset has one value per month.
    """

    model_config = ConfigDict(frozen=True)

    chart_type: str = Field(default="bar", pattern="^bar$")
    bar_mode: str = Field(default="group", pattern="^group$")
    labels: tuple[str, ...] = MONTH_LABELS
    datasets: tuple[DatasetConfig, ...] = Field(..., min_length=1)
    value_axis: ValueAxisConfig = Field(default_factory=ValueAxisConfig)
    legend: LegendConfig = Field(default_factory=LegendConfig)
    currency_symbol: str = "$"

    @model_validator(mode='after')
    def validate_labels(self) -> 'ChartConfig':
        if tuple(self.labels) != MONTH_LABELS:
            raise ValueError("Chart labels must be the twelve months, Jan through Dec")
        return self

    def format_tick(self, value: float) -> str:
        """Value-axis tick label, e.g. "$1,200"."""
        return format_currency(value, self.currency_symbol)

    def format_tooltip(self, label: str, value: float) -> str:
        """Hover text for one bar, e.g. "Income: $1,000"."""
        return f"{label}: {self.format_tick(value)}"

    def dataset(self, label: str) -> Optional[DatasetConfig]:
        for dataset in self.datasets:
            if dataset.label == label:
                return dataset
        return None


class ExportedImage(BaseModel):
    """A static PNG rendering of the current chart, ready for download."""

    model_config = ConfigDict(frozen=True)

    filename: str = Field(..., min_length=1)
    data_url: str = Field(
        ...,
        pattern="^data:image/png;base64,",
        description="Base64-encoded PNG as a data URL"
    )
    mime_type: str = "image/png"

    @property
    def content(self) -> bytes:
        """Decoded PNG bytes."""
        _, _, payload = self.data_url.partition(",")
        return base64.b64decode(payload)
