"""
Chart Lifecycle Management

DESIGN DECISION: Exactly one object owns the live chart.
The ChartManager holds at most one ChartHandle. Replacing the chart
always disposes the old handle BEFORE the new one is constructed, so
two charts never share a drawing surface.

The charting library itself is injected as a factory:
    factory(surface_id, config) -> ChartHandle
which keeps the manager testable without a rendering backend.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional
from uuid import UUID

from budget_chart.models.chart import ChartConfig, ExportedImage


class ChartError(Exception):
    """Base exception for chart operations."""
    pass


class RenderPreconditionError(ChartError):
    """A render was requested while form fields are invalid."""

    def __init__(self, error_count: int, message: str):
        self.error_count = error_count
        super().__init__(message)


class ExportPreconditionError(ChartError):
    """An export was requested before any chart was rendered."""
    pass


class ChartDisposedError(ChartError):
    """The chart handle has already been released."""
    pass


class DrawingSurfaceError(ChartError):
    """The drawing surface is missing. Not recoverable without a reload."""
    pass


class ChartHandle(ABC):
    """
    A live, disposable chart.

    Handles are never mutated after construction; a new render
    always builds a new handle.
    """

    @property
    @abstractmethod
    def handle_id(self) -> UUID:
        pass

    @property
    @abstractmethod
    def surface_id(self) -> str:
        pass

    @property
    @abstractmethod
    def config(self) -> ChartConfig:
        pass

    @property
    @abstractmethod
    def is_disposed(self) -> bool:
        pass

    @abstractmethod
    def dispose(self) -> None:
        """Release the chart's resources. Safe to call more than once."""
        pass

    @abstractmethod
    def to_image_data_url(self) -> str:
        """
        Static PNG of the chart's current state.

        Returns:
            "data:image/png;base64,..."

        Raises:
            ChartDisposedError: If the handle was disposed
        """
        pass


ChartFactory = Callable[[str, ChartConfig], ChartHandle]


class ChartManager:
    """
    Owns the single live chart of one session.

    Usage:
        manager = ChartManager(create_plotly_chart, surface_id="budgetChart")
        handle = manager.replace(config)
        image = manager.export_image("budget-chart.png")
    """

    def __init__(
        self,
        factory: ChartFactory,
        surface_id: str,
        on_dispose: Optional[Callable[[ChartHandle], None]] = None,
    ):
        """
        Args:
            factory: Builds a chart on a drawing surface
            surface_id: Identifier of the drawing surface
            on_dispose: Called with each handle after it is disposed
        """
        self._factory = factory
        self._surface_id = surface_id
        self._on_dispose = on_dispose
        self._current: Optional[ChartHandle] = None

    @property
    def current(self) -> Optional[ChartHandle]:
        return self._current

    @property
    def has_chart(self) -> bool:
        return self._current is not None

    def dispose(self) -> None:
        """Release the current chart, if any."""
        if self._current is None:
            return

        handle = self._current
        self._current = None
        handle.dispose()
        if self._on_dispose:
            self._on_dispose(handle)

    def replace(self, config: ChartConfig) -> ChartHandle:
        """
        Dispose the current chart, then build and keep a new one.

        Errors from the factory propagate; in that case no chart is
        left live.
        """
        self.dispose()
        handle = self._factory(self._surface_id, config)
        self._current = handle
        return handle

    def export_image(self, filename: str) -> ExportedImage:
        """
        Encode the current chart as a PNG.

        Raises:
            ExportPreconditionError: If there is no chart yet
        """
        if self._current is None:
            raise ExportPreconditionError("No chart has been rendered yet")

        return ExportedImage(
            filename=filename,
            data_url=self._current.to_image_data_url(),
        )
