"""
Main Orchestrator for Budget Chart

This module ties the components together and defines the two
user-facing flows:
1. Render (read form → validate → mark fields → replace chart)
2. Export (current chart → PNG → download)

DESIGN DECISION: The orchestrator enforces the boundaries:
- No chart is touched unless every field is valid
- No download starts unless a chart exists
- Every step is audited

Both recognized failure modes are handled here, at the boundary where
they occur, by showing the user a message. Anything else (a missing
drawing surface, a charting library fault) propagates.
"""

from typing import Optional
from uuid import UUID

from budget_chart.audit import AuditLogger, create_correlation_id
from budget_chart.charting import (
    ChartFactory,
    ChartHandle,
    ChartManager,
    ExportPreconditionError,
    RenderPreconditionError,
    build_chart_config,
    create_plotly_chart,
)
from budget_chart.config import ChartSettings, get_settings
from budget_chart.environment import Downloader, FormEnvironment, Notifier
from budget_chart.models.budget import CollectionResult
from budget_chart.models.chart import ExportedImage
from budget_chart.triggers import TriggerBus, wire_triggers
from budget_chart.validation import apply_markers, collect_from_form


RENDER_BLOCKED_MESSAGE = "Please fix the validation errors before updating the chart."
EXPORT_BLOCKED_MESSAGE = "Please update the chart first before downloading."


class BudgetChartFlow:
    """
    Orchestrates validation, chart rendering and export for one session.

    Flow (render):
    1. Read all 24 fields from the form
    2. Validate, and set/clear every field's invalid marker
    3. If anything is invalid → tell the user, leave the chart alone
    4. Otherwise → dispose the old chart, build the new one
    """

    def __init__(
        self,
        form: FormEnvironment,
        notifier: Notifier,
        downloader: Downloader,
        chart_factory: Optional[ChartFactory] = None,
        settings: Optional[ChartSettings] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._form = form
        self._notifier = notifier
        self._downloader = downloader
        self._settings = settings or get_settings().chart
        self._audit_logger = audit_logger
        self._correlation_id: Optional[UUID] = None
        self._charts = ChartManager(
            factory=chart_factory or create_plotly_chart,
            surface_id=self._settings.surface_id,
            on_dispose=self._log_disposed,
        )

    @property
    def charts(self) -> ChartManager:
        return self._charts

    @property
    def current_chart(self) -> Optional[ChartHandle]:
        return self._charts.current

    def _log_disposed(self, handle: ChartHandle) -> None:
        if self._audit_logger:
            self._audit_logger.log_chart_disposed(
                handle_id=handle.handle_id,
                correlation_id=self._correlation_id,
            )

    def validate_and_collect(
        self,
        correlation_id: Optional[UUID] = None,
    ) -> CollectionResult:
        """
        Validate the whole form and refresh every field's marker.

        Returns the collected series and per-field results.
        """
        result = collect_from_form(self._form)
        apply_markers(self._form, result)

        if self._audit_logger:
            self._audit_logger.log_validation_completed(
                is_valid=result.is_valid,
                invalid_fields=[field.field_id for field in result.invalid_fields],
                correlation_id=correlation_id,
            )

        return result

    def _ensure_renderable(self, result: CollectionResult) -> None:
        if not result.is_valid:
            raise RenderPreconditionError(result.error_count, RENDER_BLOCKED_MESSAGE)

    def render_chart(
        self,
        correlation_id: Optional[UUID] = None,
    ) -> Optional[ChartHandle]:
        """
        Validate the form and, if it is valid, replace the chart.

        Returns:
            The new chart handle, or None if validation failed.
        """
        correlation_id = correlation_id or create_correlation_id()
        result = self.validate_and_collect(correlation_id)

        try:
            self._ensure_renderable(result)
        except RenderPreconditionError as e:
            self._notifier.alert(str(e))
            if self._audit_logger:
                self._audit_logger.log_render_blocked(
                    error_count=e.error_count,
                    correlation_id=correlation_id,
                )
            return None

        config = build_chart_config(
            result.income_series,
            result.expense_series,
            self._settings,
        )

        self._correlation_id = correlation_id
        try:
            handle = self._charts.replace(config)
        finally:
            self._correlation_id = None

        if self._audit_logger:
            self._audit_logger.log_chart_rendered(
                handle_id=handle.handle_id,
                income_total=result.income_series.total,
                expense_total=result.expense_series.total,
                correlation_id=correlation_id,
            )

        return handle

    def export_chart(
        self,
        correlation_id: Optional[UUID] = None,
    ) -> Optional[ExportedImage]:
        """
        Download the current chart as a PNG.

        Returns:
            The exported image, or None if there is no chart yet.
        """
        correlation_id = correlation_id or create_correlation_id()

        try:
            image = self._charts.export_image(self._settings.export_filename)
        except ExportPreconditionError:
            self._notifier.alert(EXPORT_BLOCKED_MESSAGE)
            if self._audit_logger:
                self._audit_logger.log_export_blocked(correlation_id=correlation_id)
            return None

        self._downloader.download(image.data_url, image.filename)

        if self._audit_logger:
            self._audit_logger.log_export_completed(
                handle_id=self._charts.current.handle_id,
                filename=image.filename,
                size_bytes=len(image.content),
                correlation_id=correlation_id,
            )

        return image


def create_app_components(
    form: FormEnvironment,
    notifier: Notifier,
    downloader: Downloader,
    chart_factory: Optional[ChartFactory] = None,
) -> tuple[BudgetChartFlow, TriggerBus]:
    """
    Factory function to create all application components.

    Args:
        form: Where the 24 fields live
        notifier: How blocking messages reach the user
        downloader: How files reach the user
        chart_factory: Charting backend (defaults to plotly)

    Returns:
        (chart_flow, trigger_bus) with the triggers already wired
    """
    audit_logger = AuditLogger()

    chart_flow = BudgetChartFlow(
        form=form,
        notifier=notifier,
        downloader=downloader,
        chart_factory=chart_factory,
        audit_logger=audit_logger,
    )

    trigger_bus = wire_triggers(TriggerBus(audit_logger=audit_logger), chart_flow)

    return chart_flow, trigger_bus
