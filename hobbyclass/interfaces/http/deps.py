from fastapi import Depends, HTTPException, Request, status

from ...application.context import AppContext, build_context
from ...application.guards import admin_guard, mentor_guard
from ...domain.entities import Session
from ...infrastructure import seed
from ...infrastructure.metrics import active_session, guard_denials_total
from ...infrastructure.security import SessionTokenCodec
from ...infrastructure.storage import create_storage


def _count_denial(path: str, guard: str) -> None:
    guard_denials_total.labels(guard=guard).inc()


def _track_session(session: Session) -> None:
    active_session.set(1 if session.logged_in else 0)


def create_context(storage_backend: str = None) -> AppContext:
    ctx = build_context(
        users=seed.seed_users(),
        mentor_classes=seed.seed_mentor_classes(),
        student_classes=seed.seed_student_classes(),
        profile=seed.default_mentor_profile(),
        storage=create_storage(storage_backend),
        codec=SessionTokenCodec(),
        on_denied=_count_denial,
    )
    ctx.session.subscribe(_track_session)
    return ctx


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def require_admin(ctx: AppContext = Depends(get_context)) -> AppContext:
    if not admin_guard(ctx.session):
        guard_denials_total.labels(guard="admin_guard").inc()
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin required")
    return ctx


def require_mentor(ctx: AppContext = Depends(get_context)) -> AppContext:
    if not mentor_guard(ctx.session):
        guard_denials_total.labels(guard="mentor_guard").inc()
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Mentor required")
    return ctx
