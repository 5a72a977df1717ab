from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.deps.auth import get_current_user
from liftlog.repositories.template_repo import ExerciseTemplateRepository
from liftlog.schemas.exercise_template import TemplateRead

router = APIRouter(prefix="/templates", tags=["templates"])

@router.get("", response_model=list[TemplateRead], dependencies=[Depends(get_current_user)])
def list_templates(category: str | None = Query(None), db: Session = Depends(get_db)):
    return ExerciseTemplateRepository(db).list(category=category)
