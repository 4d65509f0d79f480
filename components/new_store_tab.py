"""New store panels: setup cost and break-even."""

import streamlit as st

from config.default_params import NEW_STORE_FIELDS, RESULT_LABELS
from engine.compute import setup_cost_components
from engine.models import StoreKind
from utils.visualizations import create_setup_cost_chart
from components.widgets import input_field, result_box


def _panel_fields(panel):
    return [f for f in NEW_STORE_FIELDS if f['panel'] == panel]


def render_setup_cost_panel(session, metrics):
    """Render the new store setup cost panel."""
    st.subheader("🔨 New store: setup cost")

    for field_def in _panel_fields("setup"):
        input_field(session, StoreKind.NEW, field_def)

    st.divider()
    result_box(
        RESULT_LABELS['setup_cost']['label'],
        metrics.setup_cost,
        RESULT_LABELS['setup_cost']['caption'],
        color="orange",
    )


def render_break_even_panel(session, metrics):
    """Render the new store break-even panel."""
    st.subheader("📊 New store: break-even")

    for field_def in _panel_fields("break_even"):
        input_field(session, StoreKind.NEW, field_def)

    st.info("Break-even shows how much the store must take per day to avoid a loss.")

    st.divider()
    col1, col2 = st.columns(2)
    with col1:
        result_box(
            RESULT_LABELS['daily_fixed_cost']['label'],
            metrics.daily_fixed_cost,
            RESULT_LABELS['daily_fixed_cost']['caption'],
            color="violet",
        )
    with col2:
        result_box(
            RESULT_LABELS['daily_break_even_revenue']['label'],
            metrics.daily_break_even_revenue,
            RESULT_LABELS['daily_break_even_revenue']['caption'],
            color="violet",
        )


def render_setup_cost_chart(session):
    components = setup_cost_components(session.inputs(StoreKind.NEW))
    if sum(components.values()) > 0:
        st.plotly_chart(create_setup_cost_chart(components), use_container_width=True)
    else:
        st.caption("Enter setup costs to see the breakdown.")
