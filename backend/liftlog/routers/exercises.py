from typing import Any
from fastapi import APIRouter, Body, Depends, status
from liftlog.actions import (
    ActionContext,
    add_set_action,
    delete_exercise_action,
    delete_set_action,
    update_exercise_action,
    update_set_action,
)
from liftlog.deps.auth import get_action_context
from liftlog.schemas.exercise import ExerciseRead
from liftlog.schemas.workout_set import SetRead

router = APIRouter(tags=["exercises"])

@router.patch("/exercises/{exercise_id}", response_model=ExerciseRead)
def update_exercise(
    exercise_id: str,
    payload: dict[str, Any] | None = Body(None),
    ctx: ActionContext = Depends(get_action_context),
):
    return update_exercise_action(ctx, {**(payload or {}), "exercise_id": exercise_id})

@router.delete("/exercises/{exercise_id}", response_model=ExerciseRead)
def delete_exercise(exercise_id: str, ctx: ActionContext = Depends(get_action_context)):
    return delete_exercise_action(ctx, exercise_id)

@router.post("/exercises/{exercise_id}/sets", response_model=SetRead, status_code=status.HTTP_201_CREATED)
def add_set(
    exercise_id: str,
    payload: dict[str, Any] = Body(...),
    ctx: ActionContext = Depends(get_action_context),
):
    return add_set_action(ctx, {**payload, "exercise_id": exercise_id})

@router.patch("/sets/{set_id}", response_model=SetRead)
def update_set(
    set_id: str,
    payload: dict[str, Any] | None = Body(None),
    ctx: ActionContext = Depends(get_action_context),
):
    return update_set_action(ctx, {**(payload or {}), "set_id": set_id})

@router.delete("/sets/{set_id}", response_model=SetRead)
def delete_set(set_id: str, ctx: ActionContext = Depends(get_action_context)):
    return delete_set_action(ctx, set_id)
