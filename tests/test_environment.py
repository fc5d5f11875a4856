"""
Tests for the Streamlit-backed environment.

A plain dict stands in for st.session_state.
"""

import base64

import pytest

from budget_chart.environment.streamlit_env import (
    INVALID_FIELDS_KEY,
    StreamlitDownloader,
    StreamlitForm,
    field_key,
    keep_form_values,
    pop_pending_download,
)
from budget_chart.models.budget import SeriesKind
from budget_chart.validation import apply_markers, collect_from_form


class TestStreamlitForm:
    def test_field_keys(self):
        assert field_key(SeriesKind.INCOME, 0) == "income-jan"
        assert field_key(SeriesKind.EXPENSE, 11) == "expense-dec"

    def test_missing_fields_read_as_empty(self):
        form = StreamlitForm(state={})
        assert form.read_fields(SeriesKind.INCOME) == [""] * 12

    def test_reads_session_values(self):
        state = {"income-jan": "100", "income-mar": " 5 ", "expense-feb": None}
        form = StreamlitForm(state=state)

        assert form.read_fields(SeriesKind.INCOME)[:3] == ["100", "", " 5 "]
        assert form.read_fields(SeriesKind.EXPENSE)[1] == ""

    def test_markers_live_in_session_state(self):
        state = {"income-mar": "-300", "expense-apr": "abc"}
        form = StreamlitForm(state=state)

        apply_markers(form, collect_from_form(form))

        assert state[INVALID_FIELDS_KEY] == {"income-mar", "expense-apr"}
        assert form.is_invalid(SeriesKind.INCOME, 2)

        state["income-mar"] = "300"
        apply_markers(form, collect_from_form(form))
        assert state[INVALID_FIELDS_KEY] == {"expense-apr"}

    def test_keep_form_values(self):
        state = {"income-jan": "100", "other": "x"}
        keep_form_values(state)
        assert state == {"income-jan": "100", "other": "x"}


class TestStreamlitDownloader:
    def test_parks_decoded_payload(self):
        state = {}
        downloader = StreamlitDownloader(state=state)
        payload = b"\x89PNGdata"

        downloader.download(
            "data:image/png;base64," + base64.b64encode(payload).decode(),
            "budget-chart.png",
        )

        pending = pop_pending_download(state)
        assert pending == {
            "data": payload,
            "file_name": "budget-chart.png",
            "mime": "image/png",
        }
        assert pop_pending_download(state) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
