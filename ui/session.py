"""Per-browser-session wiring between Streamlit and the calendar controller."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime

import streamlit as st

from app.config import get_timezone
from app.core.navigation import CalendarController
from app.core.timeutils import to_local_datetime
from ui.api_client import ApiRecordStore
from ui.confirm import ConfirmGate

logger = logging.getLogger(__name__)


def run(coro):
    """Drive one core coroutine to completion from a Streamlit script run."""
    return asyncio.run(coro)


def controller() -> CalendarController:
    """The session's controller, created and loaded on first use."""
    if "controller" not in st.session_state:
        gate = ConfirmGate()
        ctrl = CalendarController(ApiRecordStore(), get_timezone(), confirm=gate)
        run(ctrl.start())
        st.session_state.confirm_gate = gate
        st.session_state.controller = ctrl
        logger.info("New session, showing %s", ctrl.current_month.label)
    return st.session_state.controller


def gate() -> ConfirmGate:
    controller()
    return st.session_state.confirm_gate


def perform(name: str, *args):
    """Run an orchestrator action; destructive ones may wait for confirmation."""
    ctrl = controller()
    result = run(getattr(ctrl.orchestrator, name)(*args))
    gate().ask(name, *args)
    return result


def render_pending_confirmation() -> None:
    gate().render(perform)


def render_message() -> None:
    """Banner for the last action's outcome."""
    message = controller().state.message
    if message is None:
        return
    if message.is_error:
        st.error(message.text)
    else:
        st.success(message.text)


def local_time(instant: datetime, fmt: str = "%Y/%m/%d %H:%M") -> str:
    return to_local_datetime(instant, controller().tz).strftime(fmt)
