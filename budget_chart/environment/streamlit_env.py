"""
Streamlit UI environment.

Field values are the session-state entries behind the form's
st.text_input widgets; invalid markers are a set of field keys kept
alongside them. The page reads both when it draws the form.
"""

import base64
from typing import Any, Optional

import streamlit as st

from budget_chart.environment.interface import Downloader, FormEnvironment, Notifier
from budget_chart.models.budget import MONTH_LABELS, SeriesKind


INVALID_FIELDS_KEY = "invalid_fields"
PENDING_DOWNLOAD_KEY = "pending_download"


def field_key(kind: SeriesKind, month_index: int) -> str:
    """Widget key for one field, e.g. 'income-jan'."""
    return f"{kind.value}-{MONTH_LABELS[month_index].lower()}"


class StreamlitForm(FormEnvironment):
    """Form backed by st.session_state."""

    def __init__(self, state: Optional[Any] = None):
        # Anything dict-like works; defaults to the live session state
        self._state = state if state is not None else st.session_state
        if INVALID_FIELDS_KEY not in self._state:
            self._state[INVALID_FIELDS_KEY] = set()

    def read_fields(self, kind: SeriesKind) -> list[str]:
        return [
            str(self._state.get(field_key(kind, index), "") or "")
            for index in range(len(MONTH_LABELS))
        ]

    def set_invalid(self, kind: SeriesKind, month_index: int, invalid: bool) -> None:
        key = field_key(kind, month_index)
        if invalid:
            self._state[INVALID_FIELDS_KEY].add(key)
        else:
            self._state[INVALID_FIELDS_KEY].discard(key)

    def is_invalid(self, kind: SeriesKind, month_index: int) -> bool:
        return field_key(kind, month_index) in self._state[INVALID_FIELDS_KEY]


class StreamlitNotifier(Notifier):
    def alert(self, message: str) -> None:
        st.error(message)


class StreamlitDownloader(Downloader):
    """
    Streamlit can only start a download from a download button, so the
    payload is parked in session state and the page renders the button.
    """

    def __init__(self, state: Optional[Any] = None):
        self._state = state if state is not None else st.session_state

    def download(self, data_url: str, filename: str) -> None:
        header, _, payload = data_url.partition(",")
        mime = header.removeprefix("data:").split(";")[0] or "application/octet-stream"
        self._state[PENDING_DOWNLOAD_KEY] = {
            "data": base64.b64decode(payload),
            "file_name": filename,
            "mime": mime,
        }


def pop_pending_download(state: Optional[Any] = None) -> Optional[dict]:
    """Take the parked download, if any, so it is offered only once."""
    state = state if state is not None else st.session_state
    return state.pop(PENDING_DOWNLOAD_KEY, None)


def keep_form_values(state: Optional[Any] = None) -> None:
    """
    Re-assign every field value so it survives pages where the form
    widgets are not drawn (Streamlit drops state of unrendered widgets).
    """
    state = state if state is not None else st.session_state
    for kind in SeriesKind:
        for index in range(len(MONTH_LABELS)):
            key = field_key(kind, index)
            if key in state:
                state[key] = state[key]
