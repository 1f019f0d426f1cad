import logging

import streamlit as st

from config.settings import load_settings
from state import init_state
from crime_map.ui import render_map
from summary_tables.logic import TableView, build_table, ranking_rows
from summary_tables.ui import render_table
from charts.ui import render_top_crime_chart

# ---------------------------------------------
# Logging
# ---------------------------------------------
logging.basicConfig(
    level=load_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# -----------------------------
# Streamlit UI
# -----------------------------
st.set_page_config(page_title="Polda Crime Map", layout="wide")

st.title("Polda Crime Map")
st.caption(
    "Crime, public disturbance and disaster reports per regional police jurisdiction. "
    "Hover a marker for details, click a ⭐ to show its Polres."
)

session = init_state()
snapshot = session.snapshot

# =============================
# Map
# =============================
render_map(session)

st.divider()

# =============================
# Tables
# =============================
rank_col, trend_col, percent_col = st.columns(3, gap="large")

with rank_col:
    st.subheader("Top 5 regions by cases")
    rows = ranking_rows(snapshot.top_regions, snapshot.crime)
    keys = ["region_name", "count"]
    view = (
        build_table("top5Table", rows, keys, navigable_key="region_name")
        if rows is not None
        else TableView.failed("top5Table", keys)
    )
    render_table(session, view, {"region_name": "Region", "count": "Cases"})

with trend_col:
    st.subheader("Yearly trend")
    keys = ["year", "count"]
    view = (
        build_table("trenTable", snapshot.trend, keys)
        if snapshot.trend is not None
        else TableView.failed("trenTable", keys)
    )
    render_table(session, view, {"year": "Year", "count": "Cases"})

with percent_col:
    st.subheader("Violent crime share")
    keys = ["category", "percent"]
    view = (
        build_table("persenTable", snapshot.percent, keys)
        if snapshot.percent is not None
        else TableView.failed("persenTable", keys)
    )
    render_table(session, view, {"category": "Category", "percent": "Percent"})

st.divider()

# =============================
# Chart
# =============================
st.subheader("Top 10 crime types")
render_top_crime_chart(session)

if snapshot.errors:
    with st.expander("Datasets that failed to load", expanded=False):
        for name, error in snapshot.errors.items():
            st.write(f"**{name}**: {error}")
