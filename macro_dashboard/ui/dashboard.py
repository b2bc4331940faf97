"""Streamlit dashboard for macroeconomic indicators.

Sidebar lists the indicators; the main panel shows one chart at a time with
a 1Y / 5Y / All range selector. Changing the range refetches every series;
changing the indicator only switches which fetched series is shown.
"""

import logging

import streamlit as st

from macro_dashboard.config import SERIES_CATALOG, Settings, get_chart_color
from macro_dashboard.data import FredFetcher, SeriesFetchOrchestrator
from macro_dashboard.errors import ConfigurationError
from macro_dashboard.models import TimeRange
from macro_dashboard.ui.renderer import (
    ChartSpec,
    ErrorPlaceholder,
    build_figure,
    render_series,
)


logger = logging.getLogger(__name__)


def format_title(name: str) -> str:
    """UNEMPLOYMENT -> Unemployment, FEDERAL_FUNDS_RATE -> Federal Funds Rate."""
    if name == "GDP":
        return "GDP"
    return " ".join(word.capitalize() for word in name.split("_"))


def notify_error(title: str, message: str) -> None:
    """Non-blocking toast for a failed series."""
    st.toast(f"**{title}**\n\n{message}", icon="⚠️")


@st.cache_resource(show_spinner=False)
def get_fetcher() -> FredFetcher:
    """One fetcher, and so one HTTP client, shared by every session."""
    settings = Settings()
    settings.validate()
    return FredFetcher(settings)


def get_orchestrator() -> SeriesFetchOrchestrator:
    """One orchestrator per browser session, built after the key check."""
    if "orchestrator" not in st.session_state:
        st.session_state.orchestrator = SeriesFetchOrchestrator(
            fetch=get_fetcher().fetch_observations,
            notify=notify_error,
        )
    return st.session_state.orchestrator


def render_sidebar() -> str:
    """Indicator picker; returns the selected indicator name."""
    st.sidebar.markdown("**Economic Indicators**")
    return st.sidebar.radio(
        "Economic Indicators",
        options=list(SERIES_CATALOG),
        format_func=format_title,
        label_visibility="collapsed",
        key="indicator",
    )


def render_time_range() -> TimeRange:
    _, col_range = st.columns([3, 1])
    with col_range:
        return st.radio(
            "Time range",
            options=list(TimeRange),
            index=list(TimeRange).index(TimeRange.ALL),
            format_func=lambda r: r.label,
            horizontal=True,
            label_visibility="collapsed",
            key="time_range",
        )


def render_chart(orchestrator: SeriesFetchOrchestrator, name: str) -> None:
    """Render the selected indicator from already-fetched state."""
    title = format_title(name)
    result = render_series(
        orchestrator.get_state(name),
        SERIES_CATALOG[name],
        color=get_chart_color(name),
        title=title,
    )

    st.subheader(result.title)
    if isinstance(result, ChartSpec):
        st.plotly_chart(
            build_figure(result),
            use_container_width=True,
            config={"displayModeBar": False},
        )
    elif isinstance(result, ErrorPlaceholder):
        st.error(result.message)
    else:
        st.info("Loading...")


def main() -> None:
    """Main dashboard entry point."""
    st.set_page_config(
        page_title="Macroeconomic Dashboard",
        layout="wide",
    )
    st.markdown(
        "<h1 style='text-align: center;'>Macroeconomic Dashboard</h1>",
        unsafe_allow_html=True,
    )

    try:
        orchestrator = get_orchestrator()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        st.error(f"Configuration error: {e}")
        st.stop()

    name = render_sidebar()
    time_range = render_time_range()

    chart_slot = st.empty()
    with chart_slot.container():
        render_chart(orchestrator, name)

    def redraw(updated: str, state) -> None:
        if updated == name:
            with chart_slot.container():
                render_chart(orchestrator, name)

    if orchestrator.time_range != time_range or not orchestrator.is_complete:
        orchestrator.on_update = redraw
        try:
            with st.spinner("Loading..."):
                orchestrator.select_time_range(time_range)
        finally:
            orchestrator.on_update = None


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    # httpx logs full request URLs, API key included
    logging.getLogger("httpx").setLevel(logging.WARNING)
    main()
