"""
Abstract UI Environment Interface

DESIGN DECISION: The core never touches a UI toolkit directly.
It talks to three small interfaces:
1. FormEnvironment - the 24 text fields and their "invalid" markers
2. Notifier - blocking, user-facing error messages
3. Downloader - client-side file downloads

This lets the same validation and chart logic run inside Streamlit,
in tests with in-memory fakes, or behind any other front end.
"""

from abc import ABC, abstractmethod

from budget_chart.models.budget import SeriesKind


class FormEnvironment(ABC):
    """
    The budget form: 12 income fields and 12 expense fields,
    each in calendar order.
    """

    @abstractmethod
    def read_fields(self, kind: SeriesKind) -> list[str]:
        """
        Read the raw text of every field in one group.

        Returns:
            Twelve strings, January first. Empty fields are "".
        """
        pass

    @abstractmethod
    def set_invalid(self, kind: SeriesKind, month_index: int, invalid: bool) -> None:
        """Add (invalid=True) or remove the invalid marker on one field."""
        pass

    @abstractmethod
    def is_invalid(self, kind: SeriesKind, month_index: int) -> bool:
        """Does the field currently carry the invalid marker?"""
        pass


class Notifier(ABC):
    """Presents blocking messages to the user."""

    @abstractmethod
    def alert(self, message: str) -> None:
        pass


class Downloader(ABC):
    """Starts a client-side download."""

    @abstractmethod
    def download(self, data_url: str, filename: str) -> None:
        """
        Offer the encoded payload to the user as a file.

        Args:
            data_url: "data:<mime>;base64,<payload>"
            filename: Suggested name for the saved file
        """
        pass
