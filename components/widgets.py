"""Input and result widgets shared by the calculator panels."""

import streamlit as st

from engine.models import StoreKind
from utils.formatting import format_amount, result_tone

TONE_COLORS = {"positive": "green", "negative": "red"}


def widget_key(kind, field):
    return f"{StoreKind(kind).value}.{field}"


def _apply_edit(session, kind, field):
    key = widget_key(kind, field)
    session.update_field(kind, field, st.session_state[key])
    # Rejected text reverts to the stored value
    st.session_state[key] = session.fields(kind)[field]


def sync_widgets(session, kind):
    """Copy stored field text into the widget state (after a reset)."""
    for field, text in session.fields(kind).items():
        st.session_state[widget_key(kind, field)] = text


def input_field(session, kind, field_def):
    """Text input bound to one store field."""
    key = widget_key(kind, field_def['key'])
    if key not in st.session_state:
        st.session_state[key] = session.fields(kind)[field_def['key']]

    label = field_def['label']
    if field_def['prefix']:
        label = f"{label} ({field_def['prefix']})"
    if field_def['required']:
        label = f"{label} *"

    st.text_input(
        label,
        key=key,
        placeholder="0",
        on_change=_apply_edit,
        args=(session, kind, field_def['key']),
        help="Required" if field_def['required'] else None,
    )


def result_box(label, value, caption=None, signed=False, color="blue"):
    """Show a derived value with two decimals; signed values are colored by gain/loss."""
    if signed:
        color = TONE_COLORS[result_tone(value)]
    st.caption(label)
    st.markdown(f"#### :{color}[{format_amount(value)}]")
    if caption:
        st.caption(caption)
