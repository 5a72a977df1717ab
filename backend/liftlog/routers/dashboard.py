"""Page loaders: read straight through the repositories for the current user."""
import datetime as dt
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.deps.auth import get_current_user
from liftlog.models import User
from liftlog.repositories.workout_repo import WorkoutRepository
from liftlog.schemas.workout import WorkoutRead
from liftlog.validation import parse_uuid

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

@router.get("", response_model=list[WorkoutRead])
def dashboard(
    date: dt.date | None = Query(None, description="YYYY-MM-DD; defaults to today"),
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    day = date or dt.date.today()
    return WorkoutRepository(db).list_for_day(current.id, day)

@router.get("/workout/{workout_id}", response_model=WorkoutRead)
def workout_page(
    workout_id: str,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    return WorkoutRepository(db).get(parse_uuid(workout_id, "workout_id"), current.id)
