"""PetLog: Streamlit front end.

Run: streamlit run ui/app.py
     (API must be running on localhost:8000, or set PETLOG_API_URL)
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure project root is on sys.path regardless of how Streamlit is invoked
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import logging

import requests
import streamlit as st

import ui.api_client as api
from app.config import TIMEZONE_NAME
from ui.views import calendar, feeding, history, maintenance, pets, schedules
from ui.session import controller, render_message, render_pending_confirmation

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
)

st.set_page_config(
    page_title="PetLog",
    page_icon="🐾",
    layout="wide",
    initial_sidebar_state="expanded",
)

PAGES = {
    "🍽️ Feeding": feeding.render,
    "📅 Calendar": calendar.render,
    "📋 History": history.render,
    "🐾 Pets & weight": pets.render,
    "🧰 Maintenance": maintenance.render,
    "⏰ Schedule": schedules.render,
}


def api_ok() -> bool:
    """Checks that the API is responding."""
    try:
        return api.health().get("status") == "ok"
    except requests.RequestException:
        return False


with st.sidebar:
    st.title("🐾 PetLog")
    st.caption(f"Times shown in {TIMEZONE_NAME}")
    st.divider()

    if not api_ok():
        st.error("❌ API offline\n\n`uvicorn main:app --reload`")
        st.stop()

    page = st.radio("Navigation", list(PAGES), label_visibility="collapsed")

controller()
render_message()
render_pending_confirmation()
PAGES[page]()
