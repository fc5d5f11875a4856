"""
Streamlit Frontend for Budget Chart

Two pages:
- Budget Form: twelve months of income and expenses
- Chart: grouped bar chart of the form, with a PNG download

The page never validates or draws anything itself. Buttons and page
switches are turned into trigger events; the chart flow does the rest.
"""

import streamlit as st

from budget_chart.audit import configure_logging
from budget_chart.charting import EXPENSE_LABEL, INCOME_LABEL, PlotlyChartHandle
from budget_chart.config import get_settings, validate_all_settings
from budget_chart.environment.streamlit_env import (
    StreamlitDownloader,
    StreamlitForm,
    StreamlitNotifier,
    field_key,
    keep_form_values,
    pop_pending_download,
)
from budget_chart.models.budget import MONTH_LABELS, SeriesKind
from budget_chart.orchestrator import create_app_components
from budget_chart.triggers import TriggerEvent


FORM_PAGE = "📝 Budget Form"
CHART_PAGE = "📊 Chart"
SETTINGS_PAGE = "⚙️ Settings"


# Page configuration
st.set_page_config(
    page_title="Budget Chart",
    page_icon="💰",
    layout="wide",
    initial_sidebar_state="expanded",
)


@st.cache_resource
def init_logging():
    """Configure structured logging once per server process."""
    configure_logging(get_settings().app.log_level)


def get_components():
    """Get or create this session's chart flow and trigger bus."""
    if "components" not in st.session_state:
        st.session_state.components = create_app_components(
            form=StreamlitForm(),
            notifier=StreamlitNotifier(),
            downloader=StreamlitDownloader(),
        )
    return st.session_state.components


def main():
    """Main application entry point."""
    init_logging()
    keep_form_values()
    chart_flow, trigger_bus = get_components()

    st.sidebar.title("💰 Budget Chart")
    st.sidebar.markdown("---")

    page = st.sidebar.radio(
        "Navigate to:",
        [FORM_PAGE, CHART_PAGE, SETTINGS_PAGE],
        index=0,
    )

    st.sidebar.markdown("---")
    st.sidebar.markdown(
        """
        **How to use:**
        1. Enter monthly income and expenses
        2. Leave a month empty to count it as 0
        3. Open the chart or click "Update Chart"
        """
    )

    # Switching to the chart page counts as "tab shown"
    previous_page = st.session_state.get("last_page")
    st.session_state.last_page = page

    if page == FORM_PAGE:
        render_form_page(trigger_bus)
    elif page == CHART_PAGE:
        if previous_page != CHART_PAGE:
            trigger_bus.emit(TriggerEvent.TAB_SHOWN)
        render_chart_page(chart_flow, trigger_bus)
    elif page == SETTINGS_PAGE:
        render_settings_page()


def render_form_page(trigger_bus):
    """Render the income/expense form."""
    st.title("📝 Monthly Budget")
    st.markdown("Enter amounts without currency symbols. Empty months count as 0.")

    invalid_fields = st.session_state.get("invalid_fields", set())

    header = st.columns([1, 3, 3])
    header[1].markdown("**Income**")
    header[2].markdown("**Expenses**")

    for index, month in enumerate(MONTH_LABELS):
        row = st.columns([1, 3, 3])
        row[0].markdown(f"**{month}**")
        for column, kind in ((row[1], SeriesKind.INCOME), (row[2], SeriesKind.EXPENSE)):
            key = field_key(kind, index)
            column.text_input(
                f"{kind.value.title()} {month}",
                key=key,
                placeholder="0",
                label_visibility="collapsed",
            )
            if key in invalid_fields:
                column.caption("⚠️ Enter a non-negative number")

    st.markdown("---")

    st.button(
        "🔄 Update Chart",
        type="primary",
        on_click=trigger_bus.emit,
        args=(TriggerEvent.UPDATE_REQUESTED,),
    )


def render_chart_page(chart_flow, trigger_bus):
    """Render the current chart and the download controls."""
    st.title("📊 Income vs Expenses")

    col1, col2 = st.columns(2)
    with col1:
        st.button(
            "🔄 Update Chart",
            type="primary",
            on_click=trigger_bus.emit,
            args=(TriggerEvent.UPDATE_REQUESTED,),
        )
    with col2:
        st.button(
            "⬇️ Download Chart",
            on_click=trigger_bus.emit,
            args=(TriggerEvent.EXPORT_REQUESTED,),
        )

    handle = chart_flow.current_chart
    if isinstance(handle, PlotlyChartHandle) and not handle.is_disposed:
        st.plotly_chart(handle.figure, use_container_width=True, key=str(handle.handle_id))

        config = handle.config
        income_total = sum(config.dataset(INCOME_LABEL).data)
        expense_total = sum(config.dataset(EXPENSE_LABEL).data)

        c1, c2, c3 = st.columns(3)
        c1.metric("Total income", config.format_tick(income_total))
        c2.metric("Total expenses", config.format_tick(expense_total))
        c3.metric("Net", config.format_tick(income_total - expense_total))
    else:
        st.info("📋 Fill in the Budget Form and click 'Update Chart' to see your chart.")

    pending = pop_pending_download()
    if pending:
        st.download_button(
            f"💾 Save {pending['file_name']}",
            data=pending["data"],
            file_name=pending["file_name"],
            mime=pending["mime"],
        )


def render_settings_page():
    """Render the settings page."""
    st.title("⚙️ Settings")

    status = validate_all_settings()

    sections = [
        ("Chart", "chart"),
        ("Application", "app"),
    ]

    for name, key in sections:
        if status.get(key, False):
            st.success(f"✅ {name} settings - OK")
        else:
            error = status.get(f"{key}_error", "Not configured")
            st.error(f"❌ {name} settings - {error}")

    if status.get("chart"):
        st.markdown("### Effective chart configuration")
        st.json(get_settings().chart.model_dump())

    st.markdown("---")
    st.markdown(
        "Override any value with a `BUDGET_CHART_*` environment variable "
        "or a `.env` file. See `.env.example`."
    )


if __name__ == "__main__":
    main()
