"""
Tests for budget form validation.

The validator is a pure function of the raw field texts; marker
handling is tested through the in-memory form.
"""

import pytest

from budget_chart.environment import InMemoryForm
from budget_chart.models.budget import IssueType, SeriesKind
from budget_chart.validation import (
    FieldValidationError,
    apply_markers,
    collect_from_form,
    parse_amount,
    validate_and_collect,
    validate_field,
)


EMPTY = [""] * 12


class TestParseAmount:
    """Tests for parsing a single field."""

    @pytest.mark.parametrize("raw, expected", [
        ("100", 100.0),
        ("  250.75 ", 250.75),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("+4", 4.0),
        ("0", 0.0),
        ("-0", 0.0),
        ("", 0.0),
        ("   ", 0.0),
    ])
    def test_accepted_values(self, raw, expected):
        assert parse_amount(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "12abc", "1,000", "$50", "nan", "inf", "0x10", "1_000", "--5"])
    def test_not_a_number(self, raw):
        with pytest.raises(FieldValidationError) as exc_info:
            parse_amount(raw)
        assert exc_info.value.issue_type == IssueType.NOT_A_NUMBER

    def test_overflow_is_not_a_number(self):
        with pytest.raises(FieldValidationError) as exc_info:
            parse_amount("1e400")
        assert exc_info.value.issue_type == IssueType.NOT_A_NUMBER

    @pytest.mark.parametrize("raw", ["-1", "-300", " -0.01 ", "-1e2"])
    def test_negative(self, raw):
        with pytest.raises(FieldValidationError) as exc_info:
            parse_amount(raw)
        assert exc_info.value.issue_type == IssueType.NEGATIVE

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_amount("abc")


class TestValidateField:
    def test_valid_field(self):
        result = validate_field(SeriesKind.INCOME, 2, " 42 ")
        assert result.is_valid is True
        assert result.value == 42.0
        assert result.raw_value == " 42 "
        assert result.issue_type is None
        assert result.field_id == "income-mar"

    def test_invalid_field_collapses_to_zero(self):
        result = validate_field(SeriesKind.EXPENSE, 0, "abc")
        assert result.is_valid is False
        assert result.value == 0.0
        assert result.issue_type == IssueType.NOT_A_NUMBER
        assert result.message


class TestValidateAndCollect:
    """Tests for the full 24-field pass."""

    def test_all_numeric_inputs(self):
        income = [1000, 1500, 2000, 2500, 3000, 3500, 4000, 4500, 5000, 5500, 6000, 6500]
        expense = [500, 600, 700, 800, 900, 1000, 1100, 1200, 1300, 1400, 1500, 1600]

        result = validate_and_collect([str(v) for v in income], [str(v) for v in expense])

        assert result.is_valid is True
        assert result.income_series.as_list() == [float(v) for v in income]
        assert result.expense_series.as_list() == [float(v) for v in expense]
        assert result.invalid_fields == []

    def test_empty_inputs_default_to_zero(self):
        result = validate_and_collect(EMPTY, EMPTY)

        assert result.is_valid is True
        assert result.income_series.as_list() == [0.0] * 12
        assert result.expense_series.as_list() == [0.0] * 12
        assert result.error_count == 0

    def test_negative_and_text_values_are_invalid(self):
        income = list(EMPTY)
        income[1] = "-100"
        expense = list(EMPTY)
        expense[3] = "abc"

        result = validate_and_collect(income, expense)

        assert result.is_valid is False
        assert result.income_series.values[1] == 0
        assert result.expense_series.values[3] == 0
        assert [f.field_id for f in result.invalid_fields] == ["income-feb", "expense-apr"]

    def test_mixed_inputs(self):
        income = ["100", "", "-300", "abc", "500", "600", "700", "800", "900", "1000", "1100", "1200"]

        result = validate_and_collect(income, EMPTY)

        assert result.is_valid is False
        assert result.income_series.as_list() == [
            100.0, 0.0, 0.0, 0.0, 500.0, 600.0, 700.0, 800.0, 900.0, 1000.0, 1100.0, 1200.0,
        ]
        invalid = result.invalid_fields
        assert [f.month_index for f in invalid] == [2, 3]
        assert [f.issue_type for f in invalid] == [IssueType.NEGATIVE, IssueType.NOT_A_NUMBER]

    def test_every_field_is_evaluated(self):
        """Test a failure does not stop later fields from being read."""
        income = ["abc"] + ["10"] * 11
        result = validate_and_collect(income, ["-1"] * 12)

        assert len(result.field_results) == 24
        assert result.income_series.total == 110
        assert result.error_count == 13

    def test_field_order(self):
        """Test income fields come first, each group in calendar order."""
        result = validate_and_collect(EMPTY, EMPTY)
        kinds = [f.kind for f in result.field_results]
        assert kinds == [SeriesKind.INCOME] * 12 + [SeriesKind.EXPENSE] * 12
        assert [f.month_index for f in result.fields_for(SeriesKind.EXPENSE)] == list(range(12))

    def test_idempotent(self):
        income = ["100", "", "-300", "abc"] + ["1"] * 8
        first = validate_and_collect(income, EMPTY)
        second = validate_and_collect(income, EMPTY)
        assert first == second

    def test_wrong_field_count(self):
        with pytest.raises(ValueError, match="Expected 12 income fields"):
            validate_and_collect([""] * 11, EMPTY)


class TestMarkers:
    """Tests for pushing results back to the form."""

    def test_markers_set_on_invalid_fields_only(self):
        form = InMemoryForm(
            income=["100", "", "-300", "abc", "500"] + [""] * 7,
            expense=[""] * 5 + ["-1", "x"] + [""] * 5,
        )

        result = collect_from_form(form)
        apply_markers(form, result)

        assert form.invalid_indices(SeriesKind.INCOME) == [2, 3]
        assert form.invalid_indices(SeriesKind.EXPENSE) == [5, 6]

    def test_markers_cleared_when_fixed(self):
        form = InMemoryForm(income=["abc"] + [""] * 11)
        apply_markers(form, collect_from_form(form))
        assert form.is_invalid(SeriesKind.INCOME, 0)

        form.set_value(SeriesKind.INCOME, 0, "")
        apply_markers(form, collect_from_form(form))
        assert not form.is_invalid(SeriesKind.INCOME, 0)

    def test_marker_state_idempotent(self):
        form = InMemoryForm(income=["-5"] + [""] * 11)
        apply_markers(form, collect_from_form(form))
        first = form.invalid_indices(SeriesKind.INCOME)
        apply_markers(form, collect_from_form(form))
        assert form.invalid_indices(SeriesKind.INCOME) == first == [0]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
