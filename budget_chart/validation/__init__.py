"""Validation package."""

from budget_chart.validation.validator import (
    FieldValidationError,
    apply_markers,
    collect_from_form,
    parse_amount,
    validate_and_collect,
    validate_field,
)

__all__ = [
    "FieldValidationError",
    "apply_markers",
    "collect_from_form",
    "parse_amount",
    "validate_and_collect",
    "validate_field",
]
