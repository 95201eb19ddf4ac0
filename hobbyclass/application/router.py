from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

import structlog

from ..domain.entities import Role, User
from .guards import Guard, admin_guard, mentor_guard
from .session_store import SessionStore

logger = structlog.get_logger()

REGISTER_PATH = "/register"
LOGIN_PATH = "/login"
ADMIN_DASHBOARD_PATH = "/admin-dashboard"
MENTOR_DASHBOARD_PATH = "/mentor-dashboard"
MENTOR_PROFILE_PATH = "/mentor-profile"
STUDENT_DASHBOARD_PATH = "/student-dashboard"

MAX_REDIRECTS = 5


@dataclass(frozen=True)
class Route:
    path: str
    view: str | None = None
    guards: tuple[Guard, ...] = field(default_factory=tuple)
    redirect_to: str | None = None


@dataclass(frozen=True)
class Navigation:
    requested: str
    path: str
    view: str

    @property
    def redirected(self) -> bool:
        return self.requested != self.path


DEFAULT_ROUTES = (
    Route("/", redirect_to=REGISTER_PATH),
    Route(REGISTER_PATH, view="register_form"),
    Route(LOGIN_PATH, view="login_form"),
    Route(ADMIN_DASHBOARD_PATH, view="admin_dashboard", guards=(admin_guard,)),
    Route(MENTOR_DASHBOARD_PATH, view="mentor_dashboard", guards=(mentor_guard,)),
    Route(MENTOR_PROFILE_PATH, view="mentor_profile", guards=(mentor_guard,)),
    Route(STUDENT_DASHBOARD_PATH, view="student_dashboard"),
)


def normalize_path(path: str) -> str:
    path = path.split("?", 1)[0].split("#", 1)[0].strip()
    path = "/" + path.strip("/")
    return path


def landing_path(user: User | None) -> str:
    if user is None:
        return LOGIN_PATH
    if user.role == Role.ADMIN:
        return ADMIN_DASHBOARD_PATH
    if user.role == Role.MENTOR:
        return MENTOR_DASHBOARD_PATH
    return STUDENT_DASHBOARD_PATH


class Router:
    """Resolves a path to a view, running route guards first.

    Unknown paths fall back to ``fallback``; a failing guard sends the
    navigation to ``denied``.
    """

    def __init__(
        self,
        session: SessionStore,
        routes=DEFAULT_ROUTES,
        fallback: str = REGISTER_PATH,
        denied: str = LOGIN_PATH,
        on_denied: Callable[[str, str], None] | None = None,
    ):
        self.session = session
        self.routes = {r.path: r for r in routes}
        self.fallback = fallback
        self.denied = denied
        self.on_denied = on_denied

    def resolve(self, path: str) -> Navigation:
        requested = normalize_path(path)
        current = requested
        for _ in range(MAX_REDIRECTS + 1):
            route = self.routes.get(current)
            if route is None:
                current = self.fallback
                continue
            if route.redirect_to is not None:
                current = route.redirect_to
                continue
            denied_by = self._first_failing_guard(route)
            if denied_by is not None:
                logger.info("guard_denied", path=current, guard=denied_by)
                if self.on_denied is not None:
                    self.on_denied(current, denied_by)
                current = self.denied
                continue
            return Navigation(requested=requested, path=current, view=route.view)
        raise RuntimeError(f"Too many redirects while resolving {requested!r}")

    def _first_failing_guard(self, route: Route) -> str | None:
        for guard in route.guards:
            if not guard(self.session):
                return guard.__name__
        return None
