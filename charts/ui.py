import streamlit as st

from state.session import DashboardSession

from .logic import build_bar_chart

CHART_ERROR_MESSAGE = "Failed to load chart data."


def render_top_crime_chart(session: DashboardSession) -> None:
    items = session.snapshot.top_crime_types
    if not items:
        session.chart.discard()
        st.markdown(f'<p style="color:red;">{CHART_ERROR_MESSAGE}</p>', unsafe_allow_html=True)
        return

    fig = session.chart.replace(build_bar_chart(items))
    st.pyplot(fig, clear_figure=False)
