from __future__ import annotations

from dataclasses import asdict, replace

from ...domain.entities import MentorProfile, Role, Session
from ..session_store import SessionStore


class MentorProfileView:
    """Mentor profile page; the displayed name follows the logged-in mentor."""

    def __init__(self, session: SessionStore, profile: MentorProfile):
        self.session = session
        self._default = profile
        self.profile = replace(profile)
        self.is_edit_mode = False
        self.unsubscribe = session.subscribe(self._on_session_change)
        self._on_session_change(session.session)

    def _on_session_change(self, session: Session) -> None:
        if session.user is not None and session.user.role == Role.MENTOR:
            self.profile.name = session.user.name
        else:
            self.profile.name = self._default.name
            self.is_edit_mode = False

    def toggle_edit_mode(self) -> bool:
        self.is_edit_mode = not self.is_edit_mode
        return self.is_edit_mode

    def snapshot(self) -> dict:
        return {**asdict(self.profile), "is_edit_mode": self.is_edit_mode}
