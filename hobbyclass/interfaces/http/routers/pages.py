from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import RedirectResponse

from ....application.context import AppContext
from ....application.view_models.navbar import navbar_state
from ..deps import get_context
from ..schemas import NavigationResp

router = APIRouter(tags=["pages"])

@router.get("/api/navigate", response_model=NavigationResp)
def navigate(path: str = Query(...), ctx: AppContext = Depends(get_context)):
    nav = ctx.router.resolve(path)
    return NavigationResp(requested=nav.requested, path=nav.path, view=nav.view, redirected=nav.redirected)

# Должен подключаться последним: перехватывает все остальные пути
@router.get("/{path:path}")
def page(path: str, ctx: AppContext = Depends(get_context)):
    # неизвестный API-путь не страница
    trimmed = path.strip("/")
    if trimmed == "api" or trimmed.startswith("api/"):
        raise HTTPException(status_code=404, detail="Not found")
    nav = ctx.router.resolve(path)
    if nav.redirected:
        return RedirectResponse(url=nav.path, status_code=307)
    return {
        "view": nav.view,
        "path": nav.path,
        "navbar": navbar_state(ctx.session),
        "state": ctx.view(nav.view).snapshot(),
    }
