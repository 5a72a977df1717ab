from typing import Any
from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session
from liftlog.actions import (
    ActionContext,
    add_exercise_action,
    create_workout_action,
    delete_workout_action,
    update_workout_action,
)
from liftlog.db import get_db
from liftlog.deps.auth import get_action_context, get_current_user
from liftlog.models import User
from liftlog.repositories.workout_repo import WorkoutRepository
from liftlog.schemas.exercise import ExerciseRead
from liftlog.schemas.workout import WorkoutRead

router = APIRouter(prefix="/workouts", tags=["workouts"])

# Bodies are taken raw: validation belongs to the action, not the route.

@router.get("", response_model=list[WorkoutRead])
def list_my_workouts(db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return WorkoutRepository(db).list_by_user(current.id)

@router.post("", response_model=WorkoutRead, status_code=status.HTTP_201_CREATED)
def create_workout(payload: dict[str, Any] = Body(...), ctx: ActionContext = Depends(get_action_context)):
    return create_workout_action(ctx, payload)

@router.patch("/{workout_id}", response_model=WorkoutRead)
def update_workout(
    workout_id: str,
    payload: dict[str, Any] | None = Body(None),
    ctx: ActionContext = Depends(get_action_context),
):
    return update_workout_action(ctx, {**(payload or {}), "workout_id": workout_id})

@router.delete("/{workout_id}", response_model=WorkoutRead)
def delete_workout(workout_id: str, ctx: ActionContext = Depends(get_action_context)):
    return delete_workout_action(ctx, workout_id)

@router.post("/{workout_id}/exercises", response_model=ExerciseRead, status_code=status.HTTP_201_CREATED)
def add_exercise(
    workout_id: str,
    payload: dict[str, Any] = Body(...),
    ctx: ActionContext = Depends(get_action_context),
):
    return add_exercise_action(ctx, {**payload, "workout_id": workout_id})
