"""Two-click confirmation for destructive actions in Streamlit."""

from __future__ import annotations

from typing import Optional

import streamlit as st


class ConfirmGate:
    """
    Confirmation capability handed to the record orchestrator.

    A Streamlit run cannot block on a dialog, so the first call for a prompt
    answers "no" and remembers the question together with the action that
    asked it. ``render`` then shows the question; approving it replays the
    action, and this time the same prompt is answered "yes".
    """

    def __init__(self) -> None:
        self.prompt: Optional[str] = None
        self.action: Optional[tuple[str, tuple]] = None
        self._approved: Optional[str] = None

    def __call__(self, prompt: str) -> bool:
        if self._approved == prompt:
            self._approved = None
            return True
        self.prompt = prompt
        self.action = None
        return False

    def ask(self, action: str, *args) -> None:
        """Remember which orchestrator method to replay once approved."""
        if self.prompt is not None and self.action is None:
            self.action = (action, args)

    def clear(self) -> None:
        self.prompt = None
        self.action = None

    def render(self, run_action) -> None:
        """Show the pending question, if any. ``run_action(name, *args)`` replays it."""
        if self.prompt is None or self.action is None:
            return
        st.warning(self.prompt)
        yes, no, _ = st.columns([1, 1, 4])
        if yes.button("Delete", type="primary", key="confirm_yes"):
            name, args = self.action
            self._approved = self.prompt
            self.clear()
            run_action(name, *args)
            st.rerun()
        if no.button("Cancel", key="confirm_no"):
            self.clear()
            st.rerun()
