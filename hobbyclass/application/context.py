from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from ..domain.entities import MentorClass, MentorProfile, StudentClass, User
from .router import Router
from .session_store import ISessionCodec, ISessionStorage, SessionStore
from .use_cases.register_user import RegisterUser
from .user_registry import UserRegistry
from .view_models.admin_dashboard import AdminDashboard
from .view_models.auth_forms import LoginForm, RegisterForm
from .view_models.mentor_dashboard import MentorDashboard
from .view_models.mentor_profile import MentorProfileView
from .view_models.student_dashboard import StudentDashboard


@dataclass
class AppContext:
    """Everything one running client owns; handed to handlers explicitly."""
    registry: UserRegistry
    session: SessionStore
    router: Router
    login_form: LoginForm
    register_form: RegisterForm
    admin_dashboard: AdminDashboard
    mentor_dashboard: MentorDashboard
    mentor_profile: MentorProfileView
    student_dashboard: StudentDashboard

    def view(self, name: str):
        return getattr(self, name)


def build_context(
    users: Iterable[User],
    mentor_classes: Iterable[MentorClass],
    student_classes: Iterable[StudentClass],
    profile: MentorProfile,
    storage: ISessionStorage | None = None,
    codec: ISessionCodec | None = None,
    on_denied: Callable[[str, str], None] | None = None,
) -> AppContext:
    registry = UserRegistry(users)
    session = SessionStore(registry, storage=storage, codec=codec)
    return AppContext(
        registry=registry,
        session=session,
        router=Router(session, on_denied=on_denied),
        login_form=LoginForm(session),
        register_form=RegisterForm(RegisterUser(registry)),
        admin_dashboard=AdminDashboard(session, registry),
        mentor_dashboard=MentorDashboard(session, mentor_classes),
        mentor_profile=MentorProfileView(session, profile),
        student_dashboard=StudentDashboard(session, student_classes),
    )
