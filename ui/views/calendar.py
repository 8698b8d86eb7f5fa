"""Calendar: month grid of feedings, weights and maintenance."""

import streamlit as st

from app.core.bucketing import weeks
from ui.views.history import render_feeding_row
from ui.session import controller, local_time, perform, run

_WEEKDAYS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
_MAINTENANCE_ICONS = {"water_filter": "💧", "litter_box": "🪣", "nail_clipping": "✂️"}


def _cell_summary(cell) -> str:
    data = cell.data
    parts = []
    if data.feeding:
        finished = sum(1 for r in data.feeding if r.consumed is True)
        parts.append(f"🍽️{len(data.feeding)}" + (f" ✅{finished}" if finished else ""))
    if data.first_weight:
        parts.append(f"⚖️{data.first_weight.weight:g}")
    if data.maintenance:
        parts.append("".join(_MAINTENANCE_ICONS.get(r.type, "🔧") for r in data.maintenance))
    return " ".join(parts)


def _render_grid(ctrl) -> None:
    header = st.columns(7)
    for col, name in zip(header, _WEEKDAYS):
        col.markdown(f"**{name}**")

    today = ctrl.today()
    for week in weeks(ctrl.month_view()):
        cols = st.columns(7)
        for col, cell in zip(cols, week):
            with col:
                label = f"{cell.day.day}"
                if cell.day == today:
                    label = f"**{label}** •"
                if st.button(
                    label,
                    key=f"day_{cell.day.isoformat()}",
                    use_container_width=True,
                    type="primary" if cell.day == ctrl.state.selected_day else "secondary",
                    disabled=not cell.in_month,
                ):
                    ctrl.open_day(cell.day)
                    st.rerun()
                summary = _cell_summary(cell)
                if summary:
                    st.caption(summary)


def _render_day(ctrl) -> None:
    day = ctrl.state.selected_day
    if day is None:
        return
    data = ctrl.day_data(day)

    st.divider()
    head, close = st.columns([6, 1])
    head.markdown(f"### {day.strftime('%Y/%m/%d (%a)')}")
    if close.button("Close", key="close_day"):
        ctrl.close_day()
        st.rerun()

    if data.is_empty:
        st.caption("Nothing recorded on this day.")
        return

    if data.feeding:
        st.markdown("#### Feedings")
        for record in data.feeding:
            render_feeding_row(record, "cal")

    if data.weight:
        st.markdown("#### Weight")
        for record in data.weight:
            name = record.pet.name if record.pet else f"pet #{record.pet_id}"
            st.markdown(f"- {name}: **{record.weight:g} kg**")

    if data.maintenance:
        st.markdown("#### Maintenance")
        for record in data.maintenance:
            col_info, col_del = st.columns([6, 1])
            note = f"  ·  _{record.notes}_" if record.notes else ""
            col_info.markdown(
                f"`{local_time(record.performed_at, '%H:%M')}` "
                f"{_MAINTENANCE_ICONS.get(record.type, '🔧')} {record.label}{note}"
            )
            if col_del.button("✕", key=f"cal_mdel_{record.id}", help="Delete"):
                perform("delete_maintenance_record", record.id)
                st.rerun()


def render():
    ctrl = controller()
    month = ctrl.current_month

    prev, title, nxt, today = st.columns([1, 4, 1, 1])
    if prev.button("◀", key="prev_month"):
        run(ctrl.previous_month())
        st.rerun()
    title.markdown(f"## 📅 {month.first_day.strftime('%B %Y')}")
    if nxt.button("▶", key="next_month"):
        run(ctrl.next_month())
        st.rerun()
    if today.button("Today", key="this_month"):
        run(ctrl.this_month())
        st.rerun()

    if ctrl.state.loading:
        st.caption("Loading…")

    _render_grid(ctrl)
    _render_day(ctrl)
