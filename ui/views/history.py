"""History: every feeding, newest first, with toggle / edit / delete."""

from datetime import datetime

import streamlit as st

from app.core.consumption import CONSUMPTION_LABELS
from app.core.timeutils import to_local_datetime
from ui.session import controller, local_time, perform, run

_ICONS = {True: "✅", False: "🍽️", None: "❔"}


def render_feeding_row(record, key_prefix: str) -> None:
    """One feeding line with its actions. Shared with the calendar day view."""
    ctrl = controller()
    food = record.feed_type.label if record.feed_type else f"food #{record.feed_type_id}"

    col_info, col_toggle, col_edit, col_del = st.columns([6, 2, 1, 1])
    with col_info:
        st.markdown(f"`{local_time(record.feeding_time)}` {food}")
    with col_toggle:
        label = f"{_ICONS[record.consumed]} {CONSUMPTION_LABELS[record.consumed]}"
        if st.button(label, key=f"{key_prefix}_toggle_{record.id}", help="Change consumption"):
            perform("toggle_consumption", record.id)
            st.rerun()
    with col_edit:
        editing = st.session_state.get("_editing_feeding") == record.id
        if st.button("✏️", key=f"{key_prefix}_edit_{record.id}", help="Edit"):
            st.session_state._editing_feeding = None if editing else record.id
            st.rerun()
    with col_del:
        if st.button("✕", key=f"{key_prefix}_del_{record.id}", help="Delete"):
            perform("delete_feeding_record", record.id)
            st.rerun()

    if st.session_state.get("_editing_feeding") == record.id:
        local = to_local_datetime(record.feeding_time, ctrl.tz)
        feed_types = ctrl.state.feed_types
        index = next((i for i, f in enumerate(feed_types) if f.id == record.feed_type_id), 0)
        with st.form(f"{key_prefix}_edit_form_{record.id}"):
            feed_type = st.selectbox("Food", feed_types, index=index, format_func=lambda f: f.label)
            c1, c2 = st.columns(2)
            new_date = c1.date_input("Date", value=local.date())
            new_time = c2.time_input("Time", value=local.time().replace(tzinfo=None))
            if st.form_submit_button("Save"):
                perform(
                    "update_feeding_record",
                    record.id,
                    feed_type.id if feed_type else None,
                    datetime.combine(new_date, new_time),
                )
                st.session_state._editing_feeding = None
                st.rerun()


def render():
    ctrl = controller()
    st.markdown("## 📋 Feeding history")

    if st.button("🔄 Refresh") or not ctrl.state.feeding_history_loaded:
        run(ctrl.orchestrator.load_feeding_history())

    records = ctrl.state.feeding_history
    if not records:
        st.info("No feedings recorded yet.")
        return

    st.caption(f"{len(records)} feedings")
    for record in sorted(records, key=lambda r: (r.feeding_time, r.id), reverse=True):
        render_feeding_row(record, "hist")
