"""
Food-Service Investment Calculator - Streamlit UI
Inputs live in a per-session CalculatorSession; every rerun recomputes the metrics from it
"""

import streamlit as st
from datetime import datetime
from loguru import logger

from config.logging import configure_logging
from engine.models import StoreKind
from engine.store import CalculatorSession
from components.widgets import sync_widgets
from components.new_store_tab import (
    render_setup_cost_panel, render_break_even_panel, render_setup_cost_chart
)
from components.existing_store_tab import render_existing_store_panel, render_daily_economics_chart
from utils.export import build_summary_frame, summary_to_csv, summary_to_excel


st.set_page_config(
    page_title="Food-Service Investment Calculator",
    page_icon="🧮",
    layout="wide"
)


@st.cache_resource
def init_logging():
    configure_logging()
    logger.info("Investment calculator started")
    return True


def get_session() -> CalculatorSession:
    """One calculator session per browser session"""
    if 'calculator' not in st.session_state:
        st.session_state['calculator'] = CalculatorSession()
    return st.session_state['calculator']


def clear_inputs(session, kind):
    session.reset(kind)
    sync_widgets(session, kind)


def main():
    init_logging()
    session = get_session()

    st.title("🧮 Food-Service Investment Calculator")
    st.caption("Financial model v2.0  ·  * required  ·  results update automatically")

    # Single call to the engine per rerun
    metrics = session.metrics()
    new_metrics = metrics[StoreKind.NEW.value]
    existing_metrics = metrics[StoreKind.EXISTING.value]

    col1, col2, col3 = st.columns(3)
    with col1:
        render_setup_cost_panel(session, new_metrics)
    with col2:
        render_break_even_panel(session, new_metrics)
        st.button("Clear new store", on_click=clear_inputs, args=(session, StoreKind.NEW))
    with col3:
        render_existing_store_panel(session, existing_metrics)
        st.button("Clear existing store", on_click=clear_inputs, args=(session, StoreKind.EXISTING))

    st.markdown("---")
    chart_cols = st.columns(2)
    with chart_cols[0]:
        render_setup_cost_chart(session)
    with chart_cols[1]:
        render_daily_economics_chart(session, existing_metrics)

    with st.expander("📥 Export summary"):
        df = build_summary_frame(session)
        st.dataframe(df, use_container_width=True, hide_index=True)
        exp_cols = st.columns(2)
        with exp_cols[0]:
            st.download_button(
                "Summary (CSV)",
                data=summary_to_csv(df),
                file_name=f"Investment_Summary_{datetime.now().strftime('%Y%m%d')}.csv",
                mime="text/csv"
            )
        with exp_cols[1]:
            st.download_button(
                "Summary (Excel)",
                data=summary_to_excel(df),
                file_name=f"Investment_Summary_{datetime.now().strftime('%Y%m%d')}.xlsx",
                mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
            )


if __name__ == "__main__":
    main()
