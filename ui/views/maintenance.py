"""Maintenance: water filter, litter and nail clipping log."""

from datetime import datetime

import streamlit as st

from app.core.timeutils import to_local_datetime
from app.models import MAINTENANCE_LABELS
from ui.session import controller, local_time, perform, run


def render():
    ctrl = controller()
    st.markdown("## 🧰 Maintenance")

    types = list(MAINTENANCE_LABELS)
    now = ctrl.now_local()

    with st.form("add_maintenance", clear_on_submit=True):
        kind = st.selectbox("Task", types, format_func=MAINTENANCE_LABELS.get)
        c1, c2 = st.columns(2)
        done_date = c1.date_input("Date", value=now.date())
        done_time = c2.time_input("Time", value=now.time().replace(tzinfo=None, second=0, microsecond=0))
        notes = st.text_input("Notes (optional)")
        if st.form_submit_button("✅ Save", type="primary"):
            perform("create_maintenance_record", kind, datetime.combine(done_date, done_time), notes or None)
            st.rerun()

    st.divider()
    filter_options = [None, *types]
    selected = st.selectbox(
        "Show",
        filter_options,
        format_func=lambda t: "All tasks" if t is None else MAINTENANCE_LABELS[t],
        key="maintenance_filter",
    )
    refresh = st.button("🔄 Refresh")
    if refresh or ctrl.state.maintenance_history_stale(selected):
        run(ctrl.orchestrator.load_maintenance_history(selected))

    records = [r for r in ctrl.state.maintenance_history if selected is None or r.type == selected]
    if not records:
        st.info("Nothing recorded yet.")
        return

    for record in sorted(records, key=lambda r: (r.performed_at, r.id), reverse=True):
        col_info, col_edit, col_del = st.columns([6, 1, 1])
        note = f"  ·  _{record.notes}_" if record.notes else ""
        col_info.markdown(f"`{local_time(record.performed_at)}` **{record.label}**{note}")
        editing = st.session_state.get("_editing_maintenance") == record.id
        if col_edit.button("✏️", key=f"m_edit_{record.id}", help="Edit"):
            st.session_state._editing_maintenance = None if editing else record.id
            st.rerun()
        if col_del.button("✕", key=f"m_del_{record.id}", help="Delete"):
            perform("delete_maintenance_record", record.id)
            st.rerun()

        if editing:
            local = to_local_datetime(record.performed_at, ctrl.tz)
            with st.form(f"m_edit_form_{record.id}"):
                new_kind = st.selectbox("Task", types, index=types.index(record.type), format_func=MAINTENANCE_LABELS.get)
                e1, e2 = st.columns(2)
                new_date = e1.date_input("Date", value=local.date())
                new_time = e2.time_input("Time", value=local.time().replace(tzinfo=None))
                new_notes = st.text_input("Notes", value=record.notes or "")
                if st.form_submit_button("Save"):
                    perform(
                        "update_maintenance_record",
                        record.id, new_kind, datetime.combine(new_date, new_time), new_notes or None,
                    )
                    st.session_state._editing_maintenance = None
                    st.rerun()
