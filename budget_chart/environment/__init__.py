"""UI environment package."""

from budget_chart.environment.interface import Downloader, FormEnvironment, Notifier
from budget_chart.environment.memory import (
    InMemoryForm,
    RecordingDownloader,
    RecordingNotifier,
)

__all__ = [
    # Interfaces
    "Downloader",
    "FormEnvironment",
    "Notifier",
    # In-memory implementations
    "InMemoryForm",
    "RecordingDownloader",
    "RecordingNotifier",
]
