"""
Plotly chart backend.

Translates a ChartConfig into a plotly Figure with two grouped Bar
traces. Raster export goes through plotly.io.to_image, which uses the
kaleido engine.
"""

import base64
from typing import Optional
from uuid import UUID, uuid4

import plotly.graph_objects as go
import plotly.io as pio

from budget_chart.charting.manager import ChartDisposedError, ChartHandle, DrawingSurfaceError
from budget_chart.config import ChartSettings, get_settings
from budget_chart.models.chart import ChartConfig


def build_figure(config: ChartConfig) -> go.Figure:
    """Build the grouped bar figure described by `config`."""
    fig = go.Figure()

    for dataset in config.datasets:
        fig.add_trace(go.Bar(
            name=dataset.label,
            x=list(config.labels),
            y=list(dataset.data),
            marker=dict(
                color=dataset.background_color,
                line=dict(color=dataset.border_color, width=dataset.border_width),
            ),
            hovertext=[config.format_tooltip(dataset.label, value) for value in dataset.data],
            hovertemplate="%{hovertext}<extra></extra>",
        ))

    fig.update_layout(
        barmode=config.bar_mode,
        showlegend=config.legend.display,
        legend=dict(
            orientation="h", yanchor="bottom", y=1.02, xanchor="center", x=0.5
        ),
        margin=dict(l=20, r=20, t=40, b=20),
        plot_bgcolor="rgba(0,0,0,0)",
    )

    fig.update_xaxes(
        categoryorder="array",
        categoryarray=list(config.labels),
    )

    fig.update_yaxes(
        rangemode="tozero" if config.value_axis.begin_at_zero else "normal",
        tickmode="array",
        tickvals=list(config.value_axis.tick_values),
        ticktext=list(config.value_axis.tick_labels),
        showgrid=True,
        gridcolor="rgba(128,128,128,0.2)",
    )

    return fig


class PlotlyChartHandle(ChartHandle):
    """A rendered plotly figure bound to one drawing surface."""

    def __init__(
        self,
        surface_id: str,
        config: ChartConfig,
        settings: Optional[ChartSettings] = None,
    ):
        if not surface_id:
            raise DrawingSurfaceError("No drawing surface to render the chart on")

        self._handle_id = uuid4()
        self._surface_id = surface_id
        self._config = config
        self._settings = settings or get_settings().chart
        self._figure: Optional[go.Figure] = build_figure(config)

    @property
    def handle_id(self) -> UUID:
        return self._handle_id

    @property
    def surface_id(self) -> str:
        return self._surface_id

    @property
    def config(self) -> ChartConfig:
        return self._config

    @property
    def is_disposed(self) -> bool:
        return self._figure is None

    @property
    def figure(self) -> go.Figure:
        if self._figure is None:
            raise ChartDisposedError("Chart has been disposed")
        return self._figure

    def dispose(self) -> None:
        self._figure = None

    def to_image_data_url(self) -> str:
        png = pio.to_image(
            self.figure,
            format="png",
            width=self._settings.export_width,
            height=self._settings.export_height,
            scale=self._settings.export_scale,
        )
        return "data:image/png;base64," + base64.b64encode(png).decode("ascii")


def create_plotly_chart(surface_id: str, config: ChartConfig) -> PlotlyChartHandle:
    """Default chart factory for ChartManager."""
    return PlotlyChartHandle(surface_id, config)
