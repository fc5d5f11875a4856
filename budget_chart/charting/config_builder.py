"""
Chart configuration construction.

Turns the two validated monthly series into the fixed budget chart
configuration: grouped bars per month, green income and red expenses,
a currency value axis starting at zero and the legend above the plot.
"""

import math
import sys
from typing import Optional

from budget_chart.config import ChartSettings, get_settings
from budget_chart.models.budget import MONTH_LABELS, MonthlySeries
from budget_chart.models.chart import (
    ChartConfig,
    DatasetConfig,
    LegendConfig,
    ValueAxisConfig,
    format_currency,
)


INCOME_LABEL = "Income"
EXPENSE_LABEL = "Expenses"

DEFAULT_TICK_INTERVALS = 5


def value_axis_ticks(max_value: float, intervals: int = DEFAULT_TICK_INTERVALS) -> tuple[float, ...]:
    """
    Evenly spaced tick values from 0 up to at least max_value.

    The step is 1, 2 or 5 times a power of ten, chosen so there are
    roughly `intervals` steps. An empty chart gets the ticks (0, 1).
    Ticks never pass the largest float; the top tick is clamped to
    max_value instead.
    """
    if max_value <= 0:
        return (0.0, 1.0)

    raw_step = max_value / intervals
    if raw_step < sys.float_info.min:
        # Subnormal range: no power of ten to step by
        return (0.0, float(max_value))

    exponent = math.floor(math.log10(raw_step))
    magnitude = 10.0 ** exponent
    residual = raw_step / magnitude

    if residual <= 1:
        step = magnitude
    elif residual <= 2:
        step = 2 * magnitude
    elif residual <= 5:
        step = 5 * magnitude
    else:
        step = 10 * magnitude

    # Every tick is a multiple of 10**exponent
    digits = max(0, -exponent)
    count = math.ceil(max_value / step)

    ticks = []
    for index in range(count + 1):
        tick = round(index * step, digits)
        if not math.isfinite(tick):
            break
        ticks.append(tick)

    if ticks[-1] < max_value:
        ticks.append(float(max_value))

    return tuple(ticks)


def _dataset(label: str, series: MonthlySeries, rgb: str, settings: ChartSettings) -> DatasetConfig:
    return DatasetConfig(
        label=label,
        data=series.values,
        background_color=settings.fill_rgba(rgb),
        border_color=settings.border_rgba(rgb),
        border_width=settings.border_width,
    )


def build_chart_config(
    income: MonthlySeries,
    expense: MonthlySeries,
    settings: Optional[ChartSettings] = None,
) -> ChartConfig:
    """
    Build the grouped bar chart configuration for one render.

    Args:
        income: Validated income series
        expense: Validated expense series
        settings: Chart settings (defaults to the application settings)
    """
    settings = settings or get_settings().chart

    max_value = max(income.values + expense.values)
    ticks = value_axis_ticks(max_value)

    return ChartConfig(
        labels=MONTH_LABELS,
        datasets=(
            _dataset(INCOME_LABEL, income, settings.income_color, settings),
            _dataset(EXPENSE_LABEL, expense, settings.expense_color, settings),
        ),
        value_axis=ValueAxisConfig(
            begin_at_zero=True,
            tick_values=ticks,
            tick_labels=tuple(format_currency(tick, settings.currency_symbol) for tick in ticks),
        ),
        legend=LegendConfig(display=True, position="top"),
        currency_symbol=settings.currency_symbol,
    )
