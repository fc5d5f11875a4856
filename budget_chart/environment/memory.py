"""
In-memory UI environment.

Plain Python stand-ins for the form, the notifier and the downloader.
Used by the test suite and for headless runs of the chart flow.
"""

from typing import Optional, Sequence

from budget_chart.environment.interface import Downloader, FormEnvironment, Notifier
from budget_chart.models.budget import MONTHS_PER_YEAR, SeriesKind


class InMemoryForm(FormEnvironment):
    """Form whose field values and markers live in dictionaries."""

    def __init__(
        self,
        income: Optional[Sequence[str]] = None,
        expense: Optional[Sequence[str]] = None,
    ):
        self._values: dict[SeriesKind, list[str]] = {
            SeriesKind.INCOME: [""] * MONTHS_PER_YEAR,
            SeriesKind.EXPENSE: [""] * MONTHS_PER_YEAR,
        }
        self._invalid: set[tuple[SeriesKind, int]] = set()

        if income is not None:
            self.fill(SeriesKind.INCOME, income)
        if expense is not None:
            self.fill(SeriesKind.EXPENSE, expense)

    def fill(self, kind: SeriesKind, values: Sequence[object]) -> None:
        """
        Replace the text of every field in a group.

        Non-string values are converted with str(), so tests can pass
        numbers directly.
        """
        if len(values) != MONTHS_PER_YEAR:
            raise ValueError(
                f"Expected {MONTHS_PER_YEAR} {kind.value} values, got {len(values)}"
            )
        self._values[kind] = [str(value) for value in values]

    def set_value(self, kind: SeriesKind, month_index: int, value: object) -> None:
        self._values[kind][month_index] = str(value)

    def read_fields(self, kind: SeriesKind) -> list[str]:
        return list(self._values[kind])

    def set_invalid(self, kind: SeriesKind, month_index: int, invalid: bool) -> None:
        if invalid:
            self._invalid.add((kind, month_index))
        else:
            self._invalid.discard((kind, month_index))

    def is_invalid(self, kind: SeriesKind, month_index: int) -> bool:
        return (kind, month_index) in self._invalid

    def invalid_indices(self, kind: SeriesKind) -> list[int]:
        return sorted(index for marked_kind, index in self._invalid if marked_kind == kind)


class RecordingNotifier(Notifier):
    """Keeps every alert instead of showing it."""

    def __init__(self):
        self.messages: list[str] = []

    def alert(self, message: str) -> None:
        self.messages.append(message)


class RecordingDownloader(Downloader):
    """Keeps every requested download as a (data_url, filename) pair."""

    def __init__(self):
        self.downloads: list[tuple[str, str]] = []

    def download(self, data_url: str, filename: str) -> None:
        self.downloads.append((data_url, filename))
