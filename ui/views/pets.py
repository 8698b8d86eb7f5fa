"""Pets: register pets and chart their weight."""

import plotly.graph_objects as go
import streamlit as st

from app.core.periods import DEFAULT_PERIOD, PERIOD_LABELS, filter_weights_by_period
from ui.session import controller, perform, run


def _render_chart(ctrl) -> None:
    periods = list(PERIOD_LABELS)
    period = st.radio(
        "Period",
        periods,
        index=periods.index(DEFAULT_PERIOD),
        format_func=PERIOD_LABELS.get,
        horizontal=True,
        key="weight_period",
    )
    records = filter_weights_by_period(ctrl.state.pet_weight_records, period, ctrl.today())
    if not records:
        st.info("No weight records for this period.")
        return

    dates = [r.measured_date for r in records]
    values = [r.weight for r in records]
    fig = go.Figure()
    fig.add_scatter(x=dates, y=values, mode="lines+markers", name="Weight (kg)", marker_color="#4F86C6")
    fig.update_layout(
        title="Weight (kg)",
        xaxis=dict(tickformat="%Y/%m/%d"),
        height=350, margin=dict(t=50, b=30),
    )
    st.plotly_chart(fig, use_container_width=True)

    latest = records[-1]
    st.metric("Latest", f"{latest.weight:g} kg", latest.measured_date.strftime("%Y/%m/%d"), delta_color="off")


def render():
    ctrl = controller()
    state = ctrl.state
    if not state.pets:
        run(ctrl.orchestrator.load_pets())

    st.markdown("## 🐾 Pets & weight")

    with st.expander("➕ Add a pet", expanded=not state.pets):
        with st.form("add_pet", clear_on_submit=True):
            name = st.text_input("Name")
            if st.form_submit_button("Add"):
                perform("create_pet", name)
                st.rerun()

    if not state.pets:
        st.info("No pets registered yet.")
        return

    ids = [p.id for p in state.pets]
    names = {p.id: p.name for p in state.pets}
    current = state.selected_pet_id if state.selected_pet_id in ids else ids[0]
    chosen = st.selectbox("Pet", ids, index=ids.index(current), format_func=names.get)
    if chosen != state.selected_pet_id:
        run(ctrl.orchestrator.select_pet(chosen))
        st.rerun()

    pet = state.selected_pet
    if pet is None:
        return

    with st.expander("✏️ Rename / delete"):
        with st.form("edit_pet"):
            new_name = st.text_input("Name", value=pet.name)
            if st.form_submit_button("Save"):
                perform("update_pet", pet.id, new_name)
                st.rerun()
        if st.button("🗑️ Delete this pet", key="delete_pet"):
            perform("delete_pet", pet.id)
            st.rerun()

    with st.form("add_weight", clear_on_submit=True):
        c1, c2 = st.columns(2)
        weight = c1.number_input("Weight (kg)", min_value=0.0, step=0.01, format="%.2f")
        measured = c2.date_input("Measured on", value=ctrl.today())
        if st.form_submit_button("⚖️ Record weight", type="primary"):
            perform("create_weight_record", pet.id, round(weight, 2), measured)
            st.rerun()

    _render_chart(ctrl)
