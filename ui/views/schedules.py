"""Schedules: daily feeding slots."""

import streamlit as st

from ui.session import controller, perform, run


def render():
    ctrl = controller()
    st.markdown("## ⏰ Feeding schedule")

    if st.button("🔄 Refresh") or not ctrl.state.schedules:
        run(ctrl.orchestrator.load_schedules())

    with st.form("add_schedule", clear_on_submit=True):
        time = st.text_input("Time (HH:mm)", placeholder="08:00")
        if st.form_submit_button("➕ Add"):
            perform("create_schedule", time)
            st.rerun()

    if not ctrl.state.schedules:
        st.info("No feeding slots yet.")
        return

    for schedule in ctrl.state.schedules:
        col_time, col_toggle, col_edit, col_del = st.columns([3, 2, 1, 1])
        status = "Active" if schedule.is_active else "Paused"
        col_time.markdown(f"`{schedule.time}` · {status}")
        if col_toggle.button("Pause" if schedule.is_active else "Resume", key=f"s_toggle_{schedule.id}"):
            perform("toggle_schedule", schedule.id)
            st.rerun()
        editing = st.session_state.get("_editing_schedule") == schedule.id
        if col_edit.button("✏️", key=f"s_edit_{schedule.id}", help="Edit"):
            st.session_state._editing_schedule = None if editing else schedule.id
            st.rerun()
        if col_del.button("✕", key=f"s_del_{schedule.id}", help="Delete"):
            perform("delete_schedule", schedule.id)
            st.rerun()

        if editing:
            with st.form(f"s_edit_form_{schedule.id}"):
                new_time = st.text_input("Time (HH:mm)", value=schedule.time)
                if st.form_submit_button("Save"):
                    perform("update_schedule", schedule.id, new_time)
                    st.session_state._editing_schedule = None
                    st.rerun()
