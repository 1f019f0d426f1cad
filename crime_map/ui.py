import logging

import streamlit as st
from streamlit_folium import st_folium

from state.session import DashboardSession

from .layers import MapBuild, build_layers, build_sub_region_marker

logger = logging.getLogger(__name__)

MAP_ERROR_MESSAGE = "Failed to load map data."


def handle_marker_click(session: DashboardSession, build: MapBuild, clicked: dict | None) -> bool:
    """Drill into the crime region at the clicked position.

    Returns True when the active drill-down set changed.
    """
    if not clicked:
        return False
    record = build.crime_record_at(clicked.get("lat"), clicked.get("lng"))
    if record is None:
        # Disturbance, disaster or Polres markers have no drill-down.
        return False
    session.drilldown.show(record, build_sub_region_marker)
    return True


def render_map(session: DashboardSession) -> None:
    snapshot = session.snapshot
    if not snapshot.map_ready:
        st.markdown(
            f'<p style="color:red;padding:10px;">{MAP_ERROR_MESSAGE}</p>',
            unsafe_allow_html=True,
        )
        return

    build = build_layers(snapshot, focus=session.focus)

    map_state = st_folium(
        build.map,
        height=560,
        use_container_width=True,
        key="crime_map",
        feature_group_to_add=session.drilldown.to_feature_group(),
        returned_objects=["last_object_clicked"],
    )

    clicked = (map_state or {}).get("last_object_clicked")
    if clicked and clicked != st.session_state.get("last_drilldown_click"):
        st.session_state["last_drilldown_click"] = clicked
        if handle_marker_click(session, build, clicked):
            st.rerun()

    if session.drilldown.region_name:
        st.caption(
            f"Showing {len(session.drilldown.markers)} Polres for {session.drilldown.region_name}"
        )

    st.download_button(
        "Download map (HTML)",
        data=build.map.get_root().render(),
        file_name="crime_map.html",
        mime="text/html",
    )
