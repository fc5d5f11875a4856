"""Charting package."""

from budget_chart.charting.config_builder import (
    EXPENSE_LABEL,
    INCOME_LABEL,
    build_chart_config,
    value_axis_ticks,
)
from budget_chart.charting.manager import (
    ChartDisposedError,
    ChartError,
    ChartFactory,
    ChartHandle,
    ChartManager,
    DrawingSurfaceError,
    ExportPreconditionError,
    RenderPreconditionError,
)
from budget_chart.charting.plotly_chart import (
    PlotlyChartHandle,
    build_figure,
    create_plotly_chart,
)

__all__ = [
    # Configuration
    "EXPENSE_LABEL",
    "INCOME_LABEL",
    "build_chart_config",
    "value_axis_ticks",
    # Lifecycle
    "ChartDisposedError",
    "ChartError",
    "ChartFactory",
    "ChartHandle",
    "ChartManager",
    "DrawingSurfaceError",
    "ExportPreconditionError",
    "RenderPreconditionError",
    # Plotly backend
    "PlotlyChartHandle",
    "build_figure",
    "create_plotly_chart",
]
