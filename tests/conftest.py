"""Shared fixtures: a recording chart backend and an in-memory UI."""

import base64
from uuid import uuid4

import pytest

from budget_chart.charting import ChartDisposedError, ChartHandle
from budget_chart.config import ChartSettings
from budget_chart.environment import InMemoryForm, RecordingDownloader, RecordingNotifier
from budget_chart.orchestrator import BudgetChartFlow


FAKE_PNG = b"\x89PNG\r\n\x1a\nfake-chart"


class FakeChart(ChartHandle):
    """Chart handle that records construction and disposal."""

    def __init__(self, registry, surface_id, config):
        self._handle_id = uuid4()
        self._surface_id = surface_id
        self._config = config
        self._disposed = False
        registry.append(self)

    @property
    def handle_id(self):
        return self._handle_id

    @property
    def surface_id(self):
        return self._surface_id

    @property
    def config(self):
        return self._config

    @property
    def is_disposed(self):
        return self._disposed

    def dispose(self):
        self._disposed = True

    def to_image_data_url(self):
        if self._disposed:
            raise ChartDisposedError("Chart has been disposed")
        return "data:image/png;base64," + base64.b64encode(FAKE_PNG).decode("ascii")


@pytest.fixture
def chart_instances():
    """Every FakeChart built during the test, in construction order."""
    return []


@pytest.fixture
def fake_chart_factory(chart_instances):
    def factory(surface_id, config):
        return FakeChart(chart_instances, surface_id, config)
    return factory


@pytest.fixture
def chart_settings():
    return ChartSettings()


@pytest.fixture
def form():
    return InMemoryForm()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def downloader():
    return RecordingDownloader()


@pytest.fixture
def flow(form, notifier, downloader, fake_chart_factory, chart_settings):
    return BudgetChartFlow(
        form=form,
        notifier=notifier,
        downloader=downloader,
        chart_factory=fake_chart_factory,
        settings=chart_settings,
    )
