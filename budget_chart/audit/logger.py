"""
Audit Logger

DESIGN DECISION: Every user-triggered step is logged.
This provides:
1. Traceability of what the user asked for and what happened
2. Debugging capability when a chart does not appear
3. Correlation of the events belonging to one click

The audit logger is synchronous: every operation in this application runs
to completion within a single UI event, so there is nothing to await.
"""

import logging
import sys
from typing import Optional
from uuid import UUID, uuid4

import structlog

from budget_chart.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity


structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_logging(level: str = "INFO") -> None:
    """
    Route stdlib logging (and so structlog output) to stdout.

    Call once at application start-up.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )


class AuditLogger:
    """
    Central audit logging service.

    Writes each AuditEvent to the structured log at the level
    matching the event's severity.
    """

    def __init__(self, logger_name: str = "budget_chart.audit"):
        self._logger = structlog.get_logger(logger_name)

    def log(self, event: AuditEvent) -> None:
        """Log an audit event."""
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

    def log_validation_completed(
        self,
        is_valid: bool,
        invalid_fields: list[str],
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log the outcome of a validation pass."""
        self.log(AuditEventBuilder.validation_completed(
            is_valid=is_valid,
            invalid_fields=invalid_fields,
            correlation_id=correlation_id,
        ))

    def log_render_blocked(
        self,
        error_count: int,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.render_blocked(
            error_count=error_count,
            correlation_id=correlation_id,
        ))

    def log_chart_rendered(
        self,
        handle_id: UUID,
        income_total: float,
        expense_total: float,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.chart_rendered(
            handle_id=handle_id,
            income_total=income_total,
            expense_total=expense_total,
            correlation_id=correlation_id,
        ))

    def log_chart_disposed(
        self,
        handle_id: UUID,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.chart_disposed(
            handle_id=handle_id,
            correlation_id=correlation_id,
        ))

    def log_export_completed(
        self,
        handle_id: UUID,
        filename: str,
        size_bytes: int,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.export_completed(
            handle_id=handle_id,
            filename=filename,
            size_bytes=size_bytes,
            correlation_id=correlation_id,
        ))

    def log_export_blocked(
        self,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.export_blocked(correlation_id=correlation_id))

    def log_trigger(
        self,
        trigger: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.trigger_received(
            trigger=trigger,
            correlation_id=correlation_id,
        ))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of a new user action (e.g., a button click).
    Pass it through all subsequent operations.
    """
    return uuid4()
