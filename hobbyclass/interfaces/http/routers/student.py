from fastapi import APIRouter, Depends, HTTPException, Query

from ....application.context import AppContext
from ....application.view_models.student_dashboard import SPECIALIZATIONS
from ..deps import get_context
from ..schemas import StudentClassOut

router = APIRouter(prefix="/api/student", tags=["student"])

@router.get("/specializations")
def specializations():
    return [{"value": value, "label": label} for value, label in SPECIALIZATIONS]

@router.get("/classes", response_model=list[StudentClassOut])
def list_classes(ctx: AppContext = Depends(get_context),
                 specialization: str | None = Query(None),
                 availability: str | None = Query(None, pattern="^(all|available)$"),
                 search: str | None = Query(None)):
    rows = ctx.student_dashboard.set_filters(
        specialization=specialization, availability=availability, search=search
    )
    return [StudentClassOut(**c.to_dict()) for c in rows]

@router.get("/stats")
def stats(ctx: AppContext = Depends(get_context)):
    return ctx.student_dashboard.stats()

@router.post("/filters/reset", response_model=list[StudentClassOut])
def reset_filters(ctx: AppContext = Depends(get_context)):
    return [StudentClassOut(**c.to_dict()) for c in ctx.student_dashboard.reset_filters()]

@router.post("/classes/{class_id}/enroll", response_model=StudentClassOut)
def enroll(class_id: str, ctx: AppContext = Depends(get_context)):
    row = ctx.student_dashboard.choose_class(class_id)
    if row is None: raise HTTPException(404, "class not found")
    return StudentClassOut(**row.to_dict())

@router.get("/classes/{class_id}/mentor")
def class_mentor(class_id: str, ctx: AppContext = Depends(get_context)):
    mentor_name = ctx.student_dashboard.mentor_for_class(class_id)
    if mentor_name is None: raise HTTPException(404, "class not found")
    return {"class_id": class_id, "mentor_name": mentor_name}
