"""
Audit Models for Budget Chart

Every user-triggered step (validation, render, dispose, export) produces
one AuditEvent. Events are written to the structured log only; nothing is
persisted across reloads.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Validation
    VALIDATION_PASSED = "validation_passed"
    VALIDATION_FAILED = "validation_failed"

    # Chart lifecycle
    RENDER_BLOCKED = "render_blocked"
    CHART_RENDERED = "chart_rendered"
    CHART_DISPOSED = "chart_disposed"

    # Export
    EXPORT_COMPLETED = "export_completed"
    EXPORT_BLOCKED = "export_blocked"

    # Triggers
    TRIGGER_RECEIVED = "trigger_received"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEvent(BaseModel):
    """
    A single audit event.

    Every significant action creates one of these.
    """

    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    event_type: AuditEventType
    severity: AuditSeverity = AuditSeverity.INFO

    # What entity is this about? ("form", "chart", "export")
    entity_type: Optional[str] = None
    entity_id: Optional[UUID] = None

    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID shared by all events of one user action"
    )

    description: str = Field(..., max_length=500)
    details: dict[str, Any] = Field(default_factory=dict)

    is_user_action: bool = False

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": str(self.entity_id) if self.entity_id else None,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.chart_rendered(handle_id, totals, correlation_id)
        event = AuditEventBuilder.export_blocked(correlation_id)
    """

    @staticmethod
    def validation_completed(
        is_valid: bool,
        invalid_fields: list[str],
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        if is_valid:
            return AuditEvent(
                event_type=AuditEventType.VALIDATION_PASSED,
                entity_type="form",
                correlation_id=correlation_id,
                description="All budget fields are valid",
            )
        return AuditEvent(
            event_type=AuditEventType.VALIDATION_FAILED,
            severity=AuditSeverity.WARNING,
            entity_type="form",
            correlation_id=correlation_id,
            description=f"{len(invalid_fields)} budget field(s) failed validation",
            details={"invalid_fields": invalid_fields},
        )

    @staticmethod
    def render_blocked(
        error_count: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.RENDER_BLOCKED,
            severity=AuditSeverity.WARNING,
            entity_type="chart",
            correlation_id=correlation_id,
            description="Chart update blocked by validation errors",
            details={"error_count": error_count},
            is_user_action=True,
        )

    @staticmethod
    def chart_rendered(
        handle_id: UUID,
        income_total: float,
        expense_total: float,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.CHART_RENDERED,
            entity_type="chart",
            entity_id=handle_id,
            correlation_id=correlation_id,
            description="Budget chart rendered",
            details={
                "income_total": income_total,
                "expense_total": expense_total,
            },
            is_user_action=True,
        )

    @staticmethod
    def chart_disposed(
        handle_id: UUID,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.CHART_DISPOSED,
            severity=AuditSeverity.DEBUG,
            entity_type="chart",
            entity_id=handle_id,
            correlation_id=correlation_id,
            description="Previous chart disposed",
        )

    @staticmethod
    def export_completed(
        handle_id: UUID,
        filename: str,
        size_bytes: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPORT_COMPLETED,
            entity_type="export",
            entity_id=handle_id,
            correlation_id=correlation_id,
            description=f"Chart exported as {filename}",
            details={
                "filename": filename,
                "size_bytes": size_bytes,
            },
            is_user_action=True,
        )

    @staticmethod
    def export_blocked(
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPORT_BLOCKED,
            severity=AuditSeverity.WARNING,
            entity_type="export",
            correlation_id=correlation_id,
            description="Export requested before any chart was rendered",
            is_user_action=True,
        )

    @staticmethod
    def trigger_received(
        trigger: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRIGGER_RECEIVED,
            severity=AuditSeverity.DEBUG,
            correlation_id=correlation_id,
            description=f"Trigger received: {trigger}",
            details={"trigger": trigger},
            is_user_action=True,
        )
