from fastapi import APIRouter, Depends, HTTPException, Query, status

from ....application.context import AppContext
from ....application.dto import NewMentorClass
from ..deps import require_mentor
from ..schemas import ClassCreate, ClassUpdate, MentorClassOut, MentorProfileOut

router = APIRouter(prefix="/api/mentor", tags=["mentor"])

def _out(mentor_class) -> MentorClassOut:
    return MentorClassOut(**mentor_class.to_dict())

@router.get("/classes", response_model=list[MentorClassOut])
def list_classes(ctx: AppContext = Depends(require_mentor),
                 search: str | None = Query(None),
                 status_filter: str | None = Query(None, alias="status",
                                                   pattern="^(all|active|inactive|pending)$")):
    rows = ctx.mentor_dashboard.set_filters(search=search, status=status_filter)
    return [_out(c) for c in rows]

@router.get("/stats")
def stats(ctx: AppContext = Depends(require_mentor)):
    return ctx.mentor_dashboard.stats()

@router.post("/classes", response_model=MentorClassOut, status_code=status.HTTP_201_CREATED)
def create_class(payload: ClassCreate, ctx: AppContext = Depends(require_mentor)):
    row = ctx.mentor_dashboard.add_class(NewMentorClass(**payload.model_dump()))
    if row is None: raise HTTPException(400, "title and category are required")
    return _out(row)

@router.put("/classes/{class_id}", response_model=MentorClassOut)
def update_class(class_id: str, payload: ClassUpdate, ctx: AppContext = Depends(require_mentor)):
    row = ctx.mentor_dashboard.update_class(class_id, **payload.model_dump(exclude_none=True))
    if row is None: raise HTTPException(404, "class not found")
    return _out(row)

@router.delete("/classes/{class_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_class(class_id: str, ctx: AppContext = Depends(require_mentor)):
    if not ctx.mentor_dashboard.delete_class(class_id):
        raise HTTPException(404, "class not found")

@router.post("/classes/{class_id}/activate", response_model=MentorClassOut)
def activate_class(class_id: str, ctx: AppContext = Depends(require_mentor)):
    row = ctx.mentor_dashboard.activate_class(class_id)
    if row is None: raise HTTPException(404, "class not found")
    return _out(row)

@router.post("/classes/{class_id}/deactivate", response_model=MentorClassOut)
def deactivate_class(class_id: str, ctx: AppContext = Depends(require_mentor)):
    row = ctx.mentor_dashboard.deactivate_class(class_id)
    if row is None: raise HTTPException(404, "class not found")
    return _out(row)

@router.get("/profile", response_model=MentorProfileOut)
def profile(ctx: AppContext = Depends(require_mentor)):
    return MentorProfileOut(**ctx.mentor_profile.snapshot())

@router.post("/profile/edit-mode", response_model=MentorProfileOut)
def toggle_edit_mode(ctx: AppContext = Depends(require_mentor)):
    ctx.mentor_profile.toggle_edit_mode()
    return MentorProfileOut(**ctx.mentor_profile.snapshot())
