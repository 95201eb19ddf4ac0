from fastapi import APIRouter, Depends, HTTPException, Request, status

from ....application.context import AppContext
from ....application.view_models.auth_forms import MISSING_FIELDS
from ....application.view_models.navbar import navbar_state
from ....config import settings
from ....infrastructure.metrics import login_attempts_total
from ..deps import get_context
from ..rate_limit import limiter
from ..schemas import LoginReq, LoginResp, RegisterReq, SessionResp, UserResp

router = APIRouter(prefix="/api/auth", tags=["auth"])

# Более строгий лимит для логина (защита от брутфорса)
@router.post("/login", response_model=LoginResp)
@limiter.limit("10/minute")
def login(request: Request, payload: LoginReq, ctx: AppContext = Depends(get_context)):
    outcome = ctx.login_form.submit(payload.username, payload.password)
    login_attempts_total.labels(outcome="success" if outcome.success else "failure").inc()
    if not outcome.success:
        code = status.HTTP_400_BAD_REQUEST if outcome.message == MISSING_FIELDS else status.HTTP_401_UNAUTHORIZED
        raise HTTPException(status_code=code, detail=outcome.message)
    return LoginResp(
        success=True,
        message=outcome.message,
        user=UserResp(**outcome.user.to_dict()),
        redirect_to=outcome.redirect_to,
    )

@router.post("/logout")
def logout(ctx: AppContext = Depends(get_context)):
    ctx.session.logout()
    return {"ok": True, "redirect_to": "/login"}

@router.get("/me", response_model=UserResp)
def me(ctx: AppContext = Depends(get_context)):
    user = ctx.session.current_user
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not logged in")
    return UserResp(**user.to_dict())

@router.get("/session", response_model=SessionResp)
def session_state(ctx: AppContext = Depends(get_context)):
    return SessionResp(**navbar_state(ctx.session))

@router.post("/register", response_model=UserResp, status_code=status.HTTP_201_CREATED)
@limiter.limit(f"{settings.RATE_LIMIT_PER_MINUTE}/minute")
def register(request: Request, payload: RegisterReq, ctx: AppContext = Depends(get_context)):
    outcome = ctx.register_form.submit(payload.username, payload.email, payload.password)
    if not outcome.success:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=outcome.message)
    return UserResp(**outcome.user.to_dict())
