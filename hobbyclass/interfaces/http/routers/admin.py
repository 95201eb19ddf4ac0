from fastapi import APIRouter, Depends, HTTPException, Query, status

from ....application.context import AppContext
from ....application.dto import NewUser
from ..deps import require_admin
from ..schemas import UserCreate, UserResp, UserUpdate

router = APIRouter(prefix="/api/admin", tags=["admin"])

@router.get("/users", response_model=list[UserResp])
def list_users(ctx: AppContext = Depends(require_admin),
               role: str | None = Query(None, pattern="^(|admin|mentor|student)$"),
               search: str | None = Query(None)):
    dashboard = ctx.admin_dashboard
    dashboard.load_users()
    rows = dashboard.set_filters(role=role, search=search)
    return [UserResp(**u.to_dict()) for u in rows]

@router.get("/stats")
def stats(ctx: AppContext = Depends(require_admin)):
    return ctx.admin_dashboard.stats()

@router.post("/users", response_model=UserResp, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, ctx: AppContext = Depends(require_admin)):
    user = ctx.admin_dashboard.add_user(
        NewUser(name=payload.name, email=payload.email, role=payload.role, status=payload.status)
    )
    return UserResp(**user.to_dict())

@router.put("/users/{user_id}", response_model=UserResp)
def update_user(user_id: int, payload: UserUpdate, ctx: AppContext = Depends(require_admin)):
    changes = payload.model_dump(exclude_none=True)
    user = ctx.admin_dashboard.update_user(user_id, **changes)
    if user is None: raise HTTPException(404, "user not found")
    return UserResp(**user.to_dict())

@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, ctx: AppContext = Depends(require_admin)):
    if not ctx.admin_dashboard.delete_user(user_id):
        raise HTTPException(404, "user not found")
