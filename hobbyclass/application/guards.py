from typing import Callable

from ..domain.entities import Role
from .session_store import SessionStore

Guard = Callable[[SessionStore], bool]


def admin_guard(session: SessionStore) -> bool:
    return session.is_logged_in and session.is_admin()


def mentor_guard(session: SessionStore) -> bool:
    user = session.current_user
    return session.is_logged_in and user is not None and user.role == Role.MENTOR
