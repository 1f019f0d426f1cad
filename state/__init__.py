import streamlit as st

from config.settings import load_settings
from sources.loader import load_snapshot

from .session import DashboardSession


def init_state() -> DashboardSession:
    if "settings" not in st.session_state:
        st.session_state["settings"] = load_settings()

    if "dashboard" not in st.session_state:
        with st.spinner("Loading datasets..."):
            snapshot = load_snapshot(st.session_state["settings"])
        st.session_state["dashboard"] = DashboardSession(snapshot=snapshot)

    if "last_drilldown_click" not in st.session_state:
        st.session_state["last_drilldown_click"] = None

    return st.session_state["dashboard"]
