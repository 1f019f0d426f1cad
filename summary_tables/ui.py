import pandas as pd
import streamlit as st

from state.session import DashboardSession

from .logic import TableView

ERROR_STYLE = "color:red;"


def _show_message(message: str, style: str = "") -> None:
    st.markdown(f'<p style="{style}">{message}</p>', unsafe_allow_html=True)


def render_table(session: DashboardSession, view: TableView, headers: dict[str, str]) -> None:
    """Draw a table view; selecting a navigable row queues a map focus request."""
    if view.error:
        _show_message(view.error, ERROR_STYLE)
        return
    if view.placeholder:
        _show_message(view.placeholder)
        return

    df = pd.DataFrame(view.as_records(), columns=list(view.keys)).rename(columns=headers)
    navigable = any(cell.nav is not None for row in view.rows for cell in row)

    if not navigable:
        st.dataframe(df, width="stretch", hide_index=True, key=view.table_id)
        return

    event = st.dataframe(
        df,
        width="stretch",
        hide_index=True,
        key=view.table_id,
        on_select="rerun",
        selection_mode="single-row",
    )
    st.caption("Select a region to fly to it on the map.")

    selected = event.selection.rows if event is not None else []
    row = selected[0] if selected else None
    target = view.nav_target(row) if row is not None else None
    if session.select_row(view.table_id, row, target) is not None:
        st.rerun()
