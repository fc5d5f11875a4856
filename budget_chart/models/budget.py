"""
Core Data Models for Budget Chart

These models describe the data produced by one validation pass over the
budget form:
1. One FieldResult per input field (24 in total)
2. Two MonthlySeries (income and expenses), twelve values each
3. One CollectionResult tying them together with the overall verdict

DESIGN DECISION: Results are created fresh on every pass and never mutated.
The visual "invalid" marker on a field is derived from its FieldResult
rather than stored separately.
"""

from enum import Enum
from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)


MONTH_LABELS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

MONTHS_PER_YEAR = len(MONTH_LABELS)


# =============================================================================
# ENUMS
# =============================================================================

class SeriesKind(str, Enum):
    """The two groups of form fields."""
    INCOME = "income"
    EXPENSE = "expense"


class IssueType(str, Enum):
    """
    Why a field failed validation.

    Both collapse to a stored value of 0; the distinction only
    survives here and in the message shown next to the field.
    """
    NOT_A_NUMBER = "not_a_number"
    NEGATIVE = "negative"


# =============================================================================
# FIELD AND SERIES MODELS
# =============================================================================

class FieldResult(BaseModel):
    """Outcome of validating a single form field."""

    model_config = ConfigDict(frozen=True)

    kind: SeriesKind
    month_index: int = Field(
        ...,
        ge=0,
        lt=MONTHS_PER_YEAR,
        description="0 for January through 11 for December"
    )
    raw_value: str = Field(
        default="",
        description="Field text exactly as read from the form"
    )
    value: float = Field(
        default=0.0,
        ge=0,
        description="Value contributed to the series (0 when empty or invalid)"
    )
    is_valid: bool = True
    issue_type: Optional[IssueType] = None
    message: Optional[str] = None

    @model_validator(mode='after')
    def validate_issue_consistency(self) -> 'FieldResult':
        """An invalid field must say why and contribute nothing."""
        if self.is_valid and self.issue_type is not None:
            raise ValueError("A valid field cannot carry an issue type")
        if not self.is_valid:
            if self.issue_type is None:
                raise ValueError("An invalid field must carry an issue type")
            if self.value != 0:
                raise ValueError("An invalid field must contribute 0")
        return self

    @property
    def month_label(self) -> str:
        return MONTH_LABELS[self.month_index]

    @property
    def field_id(self) -> str:
        """Form identifier, e.g. 'income-jan'."""
        return f"{self.kind.value}-{self.month_label.lower()}"


class MonthlySeries(BaseModel):
    """
    Twelve non-negative values, January through December.

    Created fresh on every validation pass.
    """

    model_config = ConfigDict(frozen=True)

    kind: SeriesKind
    values: tuple[float, ...] = Field(
        ...,
        min_length=MONTHS_PER_YEAR,
        max_length=MONTHS_PER_YEAR,
    )

    @field_validator('values')
    @classmethod
    def validate_non_negative(cls, v: tuple[float, ...]) -> tuple[float, ...]:
        if any(value < 0 for value in v):
            raise ValueError("Monthly series values cannot be negative")
        return v

    @classmethod
    def zeros(cls, kind: SeriesKind) -> 'MonthlySeries':
        return cls(kind=kind, values=(0.0,) * MONTHS_PER_YEAR)

    @property
    def total(self) -> float:
        return sum(self.values)

    def as_list(self) -> list[float]:
        return list(self.values)


class CollectionResult(BaseModel):
    """
    Result of one validation pass over all 24 fields.

    field_results holds the income fields in calendar order followed
    by the expense fields in calendar order.
    """

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    income_series: MonthlySeries
    expense_series: MonthlySeries
    field_results: tuple[FieldResult, ...] = Field(default_factory=tuple)

    @model_validator(mode='after')
    def validate_verdict(self) -> 'CollectionResult':
        """The overall flag must agree with the individual fields."""
        if self.field_results:
            expected = all(result.is_valid for result in self.field_results)
            if expected != self.is_valid:
                raise ValueError("is_valid does not match the field results")
        return self

    @property
    def invalid_fields(self) -> list[FieldResult]:
        return [result for result in self.field_results if not result.is_valid]

    @property
    def error_count(self) -> int:
        return len(self.invalid_fields)

    def fields_for(self, kind: SeriesKind) -> list[FieldResult]:
        return [result for result in self.field_results if result.kind == kind]
