"""Streamlit dashboard for producer price index series.

Run with:
    streamlit run ppi_analyzer/ui/dashboard.py
"""

from datetime import date
from typing import Iterable

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from ppi_analyzer.analysis.query import QueryEngine
from ppi_analyzer.config import Settings
from ppi_analyzer.data.fred_fetcher import FredFetcher
from ppi_analyzer.data.selector import SeriesSelector
from ppi_analyzer.data.store import ObservationStore
from ppi_analyzer.errors import FetchFailed, InvalidSelection
from ppi_analyzer.models.observation import Observation, ObservationSeries
from ppi_analyzer.models.results import Extremes, NoDataAvailable, NoDataInRange


def build_series_chart(series: ObservationSeries, extremes: Extremes | None = None) -> go.Figure:
    """Line chart of a series. Missing values show as gaps."""
    df = series.to_frame()
    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=df.index, y=df["value"],
        mode="lines", line=dict(color="#3b82f6", width=2),
        connectgaps=False,
        name=series.series_id,
        hovertemplate="%{x|%Y-%m-%d}: %{y:.2f}<extra></extra>",
    ))

    if extremes is not None:
        for label, point, color in (
            ("Max", extremes.max, "#ef4444"),
            ("Min", extremes.min, "#10b981"),
        ):
            fig.add_trace(go.Scatter(
                x=[pd.Timestamp(point.date)], y=[point.value],
                mode="markers", marker=dict(color=color, size=10),
                name=label,
                hovertemplate=f"{label}: %{{y:.2f}}<extra></extra>",
            ))

    fig.update_layout(
        title=series.title or series.series_id,
        height=400,
        margin=dict(l=40, r=20, t=50, b=40),
        hovermode="x unified",
        yaxis_title="Index",
    )
    return fig


def observations_frame(observations: Iterable[Observation]) -> pd.DataFrame:
    """Table view of observations for st.dataframe."""
    rows = [{"Date": obs.date, "Value": obs.value} for obs in observations]
    return pd.DataFrame(rows, columns=["Date", "Value"])


def _get_store() -> ObservationStore:
    if "store" not in st.session_state:
        st.session_state["store"] = ObservationStore()
    return st.session_state["store"]


def render_selector(store: ObservationStore) -> None:
    settings = Settings()
    try:
        settings.validate()
    except ValueError as e:
        st.error(str(e))
        return

    with FredFetcher(settings) as fetcher:
        selector = SeriesSelector(store, fetcher)
        labels = {f"{sid} | {title}": choice for choice, sid, title in selector.options()}
        label = st.selectbox("Series", options=list(labels.keys()))

        if st.button("Load series"):
            with st.spinner("Fetching..."):
                try:
                    series = selector.select(labels[label])
                except (InvalidSelection, FetchFailed) as e:
                    st.error(str(e))
                    return
            st.success(f"Loaded {series.series_id}: {len(series)} observations")
            if series.skipped:
                st.warning(f"{series.skipped} malformed observations skipped")


def analysis_tabs(series: ObservationSeries, extremes: Extremes | NoDataAvailable) -> list[str]:
    """Tabs that have something to show. Filter needs at least one present value."""
    if len(series) == 0:
        return []
    tabs = ["Average"]
    if isinstance(extremes, Extremes):
        tabs.append("Filter")
    tabs.append("Latest")
    return tabs


def render_analysis(engine: QueryEngine) -> None:
    series = engine.store.current()
    extremes = engine.find_extremes()

    if isinstance(extremes, Extremes):
        col_max, col_min, col_count = st.columns(3)
        col_max.metric("Maximum", f"{extremes.max.value:.2f}", extremes.max.date, delta_color="off")
        col_min.metric("Minimum", f"{extremes.min.value:.2f}", extremes.min.date, delta_color="off")
        col_count.metric("Observations", len(series))
        st.plotly_chart(build_series_chart(series, extremes), use_container_width=True)
    else:
        st.info(f"No data available ({len(series)} observations, all missing)")

    names = analysis_tabs(series, extremes)
    if not names:
        return
    tabs = dict(zip(names, st.tabs(names)))

    with tabs["Average"]:
        col_start, col_end = st.columns(2)
        start = col_start.date_input("Start", value=date.fromisoformat(series.first_date))
        end = col_end.date_input("End", value=date.fromisoformat(series.last_date))
        result = engine.average_in_range(start.isoformat(), end.isoformat())
        if isinstance(result, NoDataInRange):
            st.info("No valid data in range")
        else:
            st.metric("Average", f"{result.average:.2f}", f"{result.count} observations", delta_color="off")

    if "Filter" in tabs:
        with tabs["Filter"]:
            col_low, col_high = st.columns(2)
            low = col_low.number_input("Minimum value", value=float(extremes.min.value))
            high = col_high.number_input("Maximum value", value=float(extremes.max.value))
            st.dataframe(observations_frame(engine.filter_by_range(low, high)), use_container_width=True)

    with tabs["Latest"]:
        n = st.number_input("Entries", min_value=1, value=12, step=1)
        latest: tuple[Observation, ...] = engine.latest_entries(int(n))
        st.dataframe(observations_frame(latest), use_container_width=True)


def main() -> None:
    """Main dashboard entry point."""
    st.set_page_config(page_title="PPI Analyzer", layout="wide")
    st.title("Producer Price Index Analyzer")
    st.caption("Data: FRED")

    store = _get_store()
    render_selector(store)

    if not store.is_loaded:
        st.info("Select a series and click Load series.")
        return

    render_analysis(QueryEngine(store))


if __name__ == "__main__":
    main()
