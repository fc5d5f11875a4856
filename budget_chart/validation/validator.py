"""
Budget Form Validation

DESIGN DECISION: Validation is a pure function of the raw field texts.
It never touches the UI; apply_markers() is the thin adapter that turns
the result into "invalid" markers on the form.

Rules, applied to every field independently:
- Surrounding whitespace is ignored
- An empty field counts as 0 and is NOT an error
- A non-numeric or negative value counts as 0, is flagged, and makes
  the whole pass invalid
- Anything else contributes its numeric value

Every field is evaluated on every pass, even after an earlier failure,
so the markers always reflect the current form contents.
"""

import math
import re
from typing import Sequence

from budget_chart.environment.interface import FormEnvironment
from budget_chart.models.budget import (
    MONTHS_PER_YEAR,
    CollectionResult,
    FieldResult,
    IssueType,
    MonthlySeries,
    SeriesKind,
)


# Optional sign, digits with an optional fraction (or a bare fraction),
# optional exponent. Rules out nan/inf, hex and digit separators.
_NUMBER_PATTERN = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")


class FieldValidationError(ValueError):
    """A field's text is not a usable amount."""

    def __init__(self, issue_type: IssueType, message: str):
        self.issue_type = issue_type
        super().__init__(message)


def parse_amount(raw: str) -> float:
    """
    Parse one field's text into a non-negative amount.

    Args:
        raw: Field text. Surrounding whitespace is ignored.

    Returns:
        The parsed value, or 0.0 for an empty field.

    Raises:
        FieldValidationError: If the text is not a number or is negative
    """
    text = raw.strip()
    if text == "":
        return 0.0

    if not _NUMBER_PATTERN.match(text):
        raise FieldValidationError(
            IssueType.NOT_A_NUMBER,
            f"'{text}' is not a number",
        )

    value = float(text)
    if not math.isfinite(value):
        # Exponents large enough to overflow to infinity
        raise FieldValidationError(
            IssueType.NOT_A_NUMBER,
            f"'{text}' is too large",
        )
    if value < 0:
        raise FieldValidationError(
            IssueType.NEGATIVE,
            "Amounts cannot be negative",
        )
    return value


def validate_field(kind: SeriesKind, month_index: int, raw: str) -> FieldResult:
    """Validate a single field and describe the outcome."""
    try:
        value = parse_amount(raw)
    except FieldValidationError as e:
        return FieldResult(
            kind=kind,
            month_index=month_index,
            raw_value=raw,
            value=0.0,
            is_valid=False,
            issue_type=e.issue_type,
            message=str(e),
        )

    return FieldResult(
        kind=kind,
        month_index=month_index,
        raw_value=raw,
        value=value,
    )


def _validate_group(kind: SeriesKind, raw_values: Sequence[str]) -> list[FieldResult]:
    if len(raw_values) != MONTHS_PER_YEAR:
        raise ValueError(
            f"Expected {MONTHS_PER_YEAR} {kind.value} fields, got {len(raw_values)}"
        )
    return [
        validate_field(kind, index, raw)
        for index, raw in enumerate(raw_values)
    ]


def validate_and_collect(
    income_values: Sequence[str],
    expense_values: Sequence[str],
) -> CollectionResult:
    """
    Validate all 24 fields and collect the two monthly series.

    Args:
        income_values: Twelve raw income texts, January first
        expense_values: Twelve raw expense texts, January first

    Returns:
        CollectionResult with both series (0 for empty or invalid
        fields) and one FieldResult per field.

    Raises:
        ValueError: If either group does not have exactly twelve fields
    """
    income_results = _validate_group(SeriesKind.INCOME, income_values)
    expense_results = _validate_group(SeriesKind.EXPENSE, expense_values)
    field_results = income_results + expense_results

    return CollectionResult(
        is_valid=all(result.is_valid for result in field_results),
        income_series=MonthlySeries(
            kind=SeriesKind.INCOME,
            values=tuple(result.value for result in income_results),
        ),
        expense_series=MonthlySeries(
            kind=SeriesKind.EXPENSE,
            values=tuple(result.value for result in expense_results),
        ),
        field_results=tuple(field_results),
    )


def collect_from_form(form: FormEnvironment) -> CollectionResult:
    """Read both field groups from the form and validate them."""
    return validate_and_collect(
        form.read_fields(SeriesKind.INCOME),
        form.read_fields(SeriesKind.EXPENSE),
    )


def apply_markers(form: FormEnvironment, result: CollectionResult) -> None:
    """
    Push every field's validity to the form.

    Each of the 24 markers is set or cleared, not just the changed ones.
    """
    for field in result.field_results:
        form.set_invalid(field.kind, field.month_index, not field.is_valid)
