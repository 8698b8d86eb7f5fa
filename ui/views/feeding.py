"""Feeding: log a meal, answer the "did they eat?" prompt."""

from datetime import datetime

import streamlit as st

from app.core.consumption import CONSUMPTION_LABELS
from ui.session import controller, local_time, perform, run


def _render_reconciliation(ctrl) -> None:
    record = ctrl.state.prompt.record
    if record is None:
        return
    food = record.feed_type.label if record.feed_type else f"food #{record.feed_type_id}"
    with st.container(border=True):
        st.markdown(
            f"**Did they finish the previous meal?**  \n"
            f"`{local_time(record.feeding_time)}` · {food}"
        )
        c1, c2, _ = st.columns([1, 1, 3])
        if c1.button(f"✅ {CONSUMPTION_LABELS[True]}", key="reconcile_yes"):
            perform("resolve_reconciliation", True)
            st.rerun()
        if c2.button(f"🍽️ {CONSUMPTION_LABELS[False]}", key="reconcile_no"):
            perform("resolve_reconciliation", False)
            st.rerun()


def render():
    ctrl = controller()
    state = ctrl.state
    if not state.schedules:
        run(ctrl.orchestrator.load_schedules())

    st.markdown("## 🍽️ Feeding")

    _render_reconciliation(ctrl)

    next_time = ctrl.next_scheduled_time()
    st.caption(f"Next scheduled feeding: **{next_time}**" if next_time else "No active feeding schedule")

    # ── New feeding ──────────────────────────────────────────────────────────

    if not state.feed_types:
        st.info("Add a food first.")
    else:
        default = ctrl.default_feeding_time()
        with st.form("add_feeding"):
            feed_type = st.selectbox("Food", state.feed_types, format_func=lambda f: f.label)
            col_l, col_r = st.columns(2)
            with col_l:
                fed_date = st.date_input("Date", value=default.date())
            with col_r:
                fed_time = st.time_input("Time", value=default.time().replace(tzinfo=None))
            submitted = st.form_submit_button("✅ Save", use_container_width=True, type="primary")

        if submitted:
            perform(
                "create_feeding_record",
                feed_type.id if feed_type else None,
                datetime.combine(fed_date, fed_time),
            )
            st.rerun()

    # ── New food product ─────────────────────────────────────────────────────

    with st.expander("➕ Add a food", expanded=not state.feed_types):
        with st.form("add_feed_type", clear_on_submit=True):
            manufacturer = st.text_input("Manufacturer")
            product_name = st.text_input("Product name")
            if st.form_submit_button("Add"):
                perform("create_feed_type", manufacturer, product_name)
                st.rerun()
