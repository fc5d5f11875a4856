"""
External triggers.

The surrounding UI delivers three zero-argument notifications:
"update requested", "tab shown" and "export requested". wire_triggers()
is the single place where they are bound to the chart flow.
"""

from collections import defaultdict
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional

from budget_chart.audit import AuditLogger

if TYPE_CHECKING:
    from budget_chart.orchestrator import BudgetChartFlow


class TriggerEvent(str, Enum):
    UPDATE_REQUESTED = "update_requested"
    TAB_SHOWN = "tab_shown"
    EXPORT_REQUESTED = "export_requested"


Handler = Callable[[], object]


class TriggerBus:
    """
    Synchronous dispatcher for trigger events.

    Handlers run in registration order, inside emit().
    """

    def __init__(self, audit_logger: Optional[AuditLogger] = None):
        self._handlers: dict[TriggerEvent, list[Handler]] = defaultdict(list)
        self._audit_logger = audit_logger

    def on(self, event: TriggerEvent, handler: Handler) -> None:
        self._handlers[event].append(handler)

    def emit(self, event: TriggerEvent) -> list[object]:
        """Run every handler bound to `event` and return their results."""
        if self._audit_logger:
            self._audit_logger.log_trigger(event.value)
        return [handler() for handler in self._handlers[event]]

    def handlers_for(self, event: TriggerEvent) -> list[Handler]:
        return list(self._handlers[event])


def wire_triggers(bus: TriggerBus, flow: "BudgetChartFlow") -> TriggerBus:
    """Bind the three UI triggers to the chart flow."""
    bus.on(TriggerEvent.UPDATE_REQUESTED, flow.render_chart)
    bus.on(TriggerEvent.TAB_SHOWN, flow.render_chart)
    bus.on(TriggerEvent.EXPORT_REQUESTED, flow.export_chart)
    return bus
