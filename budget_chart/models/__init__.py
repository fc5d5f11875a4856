"""
Data Models Package

This package contains all Pydantic models used in the Budget Chart system.
All data flowing between the form, the validator and the chart conforms
to these schemas.
"""

from budget_chart.models.budget import (
    MONTH_LABELS,
    MONTHS_PER_YEAR,
    CollectionResult,
    FieldResult,
    IssueType,
    MonthlySeries,
    SeriesKind,
)
from budget_chart.models.chart import (
    ChartConfig,
    DatasetConfig,
    ExportedImage,
    LegendConfig,
    ValueAxisConfig,
    format_amount,
    format_currency,
)
from budget_chart.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Budget models
    "MONTH_LABELS",
    "MONTHS_PER_YEAR",
    "CollectionResult",
    "FieldResult",
    "IssueType",
    "MonthlySeries",
    "SeriesKind",
    # Chart models
    "ChartConfig",
    "DatasetConfig",
    "ExportedImage",
    "LegendConfig",
    "ValueAxisConfig",
    "format_amount",
    "format_currency",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
