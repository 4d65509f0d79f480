"""Existing store analysis panel."""

import streamlit as st

from config.default_params import EXISTING_STORE_FIELDS, RESULT_LABELS
from engine.models import StoreKind
from engine.parsing import numeric
from utils.visualizations import create_daily_economics_chart
from components.widgets import input_field, result_box


def render_existing_store_panel(session, metrics):
    """Render the existing store inputs and daily results."""
    st.subheader("📈 Existing store analysis")

    for field_def in EXISTING_STORE_FIELDS:
        input_field(session, StoreKind.EXISTING, field_def)

    st.divider()
    top = st.columns(2)
    bottom = st.columns(2)
    cells = [
        (top[0], 'gross_profit_per_day'),
        (top[1], 'fixed_cost_per_day'),
        (bottom[0], 'break_even_revenue_per_day'),
        (bottom[1], 'net_profit_per_day'),
    ]
    for col, key in cells:
        with col:
            result_box(RESULT_LABELS[key]['label'], getattr(metrics, key), RESULT_LABELS[key]['caption'], signed=True)


def render_daily_economics_chart(session, metrics):
    revenue = numeric(session.inputs(StoreKind.EXISTING).daily_revenue)
    st.plotly_chart(create_daily_economics_chart(revenue, metrics), use_container_width=True)
