"""Sargassum forecast dashboard."""

import sys
from datetime import date
from pathlib import Path

# Add project root to path (for streamlit which runs this file directly)
_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(_root))

import plotly.graph_objects as go  # noqa: E402
import streamlit as st  # noqa: E402
from loguru import logger  # noqa: E402

from app.container import Container  # noqa: E402
from app.errors import ForecastError  # noqa: E402
from app.services.forecast import add_months  # noqa: E402
from web.api import forecast  # noqa: E402

st.set_page_config(page_title="Sargassum Forecast", page_icon="🌊", layout="wide")

DENSITY_COLOR = "#B45309"
YEARLY_COLOR = "#0E7490"


@st.cache_resource
def get_container() -> Container:
    """Single service context for the app lifetime."""
    logger.info("Initializing container (one-time)")
    container = Container()
    container.init()
    return container


@st.cache_data(ttl=3600, show_spinner="Joining forecast with EEZ...")
def get_daily(timestamp: str, eez: str) -> dict:
    resp = forecast.get_eez_volume(get_container(), timestamp, eez)
    return resp.model_dump(by_alias=True)


@st.cache_data(ttl=3600, show_spinner="Loading yearly series...")
def get_yearly(eez: str, year: int) -> dict:
    return forecast.get_yearly_volume(get_container(), eez, year).model_dump()


def series_chart(values: list, y_key: str, title: str, y_title: str, line_color: str) -> go.Figure:
    return go.Figure(
        go.Scatter(
            x=[v["date"] for v in values],
            y=[v[y_key] for v in values],
            mode="lines+markers",
            line=dict(color=line_color),
        )
    ).update_layout(
        title=title,
        xaxis_title="",
        yaxis_title=y_title,
        margin=dict(t=40, b=40, l=60, r=20),
        height=400,
    )


def daily_tab(eez: str):
    container = get_container()
    resolver = container.resolver

    day = st.date_input(
        "Forecast date",
        value=resolver.latest_anchor.replace(day=16),
        min_value=resolver.first_anchor,
        max_value=add_months(resolver.latest_anchor, resolver.horizon_months),
    )
    timestamp = day.isoformat()

    try:
        artifact = container.forecast.resolve(timestamp)
        data = get_daily(timestamp, eez)
    except ForecastError as e:
        st.error(e.message)
        return

    st.caption(f"Forecast {artifact.artifact_id}")
    values = data["values"]
    if not values:
        st.info(f"No forecast cells intersect {eez}.")
        return

    cols = st.columns(3)
    peak = max(values, key=lambda v: v["m2PerKm2"])
    cols[0].metric("EEZ area (km²)", f"{data['eez_area']:,}")
    cols[1].metric("Days", len(values))
    cols[2].metric("Peak (m²/km²)", f"{peak['m2PerKm2']:.1f}", help=peak["date"])

    st.plotly_chart(
        series_chart(values, "m2PerKm2", f"Daily density over {eez}", "m²/km²", DENSITY_COLOR),
        width="stretch",
    )


def yearly_tab(eez: str):
    year = st.number_input("Year", min_value=2000, max_value=date.today().year, value=date.today().year - 1)

    try:
        data = get_yearly(eez, int(year))
    except ForecastError as e:
        st.error(e.message)
        return

    if not data["values"]:
        st.info(f"No data for {eez} in {year}.")
        return

    st.plotly_chart(
        series_chart(data["values"], "value", f"{eez} - {year}", "Sum of cell values", YEARLY_COLOR),
        width="stretch",
    )


st.title("🌊 Sargassum Forecast")

eez = st.sidebar.text_input("EEZ (GEONAME)", value="Guadeloupean Exclusive Economic Zone")

tab1, tab2 = st.tabs(["📈 Daily forecast", "📅 Yearly"])

with tab1:
    daily_tab(eez)

with tab2:
    yearly_tab(eez)
