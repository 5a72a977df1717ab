"""Workout mutations exposed to the rendering layer.

Each action runs the same four steps in order: validate the raw input,
resolve the current user, call the repository with that user's id, then
mark the affected views stale.
"""
from __future__ import annotations
import logging
from typing import Any, Mapping

from liftlog.actions.context import ActionContext
from liftlog.models import Workout
from liftlog.repositories.workout_repo import WorkoutRepository
from liftlog.schemas.workout import WorkoutCreate, WorkoutUpdate
from liftlog.validation import parse_uuid, validate_or_raise
from liftlog.views import dashboard_path, workout_path

log = logging.getLogger(__name__)


def create_workout_action(ctx: ActionContext, raw: Mapping[str, Any] | WorkoutCreate) -> Workout:
    data = validate_or_raise(WorkoutCreate, raw)
    user = ctx.auth.current_user()

    # user id comes from the session only; WorkoutCreate has no such field
    workout = WorkoutRepository(ctx.db).create(
        user.id,
        name=data.name,
        date=data.date,
        notes=data.notes,
        duration_minutes=data.duration_minutes,
    )
    log.info("workout created id=%s user=%s", workout.id, user.id)

    ctx.views.revalidate(dashboard_path())
    return workout


def update_workout_action(ctx: ActionContext, raw: Mapping[str, Any] | WorkoutUpdate) -> Workout:
    data = validate_or_raise(WorkoutUpdate, raw)
    user = ctx.auth.current_user()

    workout = WorkoutRepository(ctx.db).update(data.workout_id, user.id, **data.changes())
    log.info("workout updated id=%s user=%s", workout.id, user.id)

    ctx.views.revalidate(dashboard_path())
    ctx.views.revalidate(workout_path(data.workout_id))
    return workout


def delete_workout_action(ctx: ActionContext, workout_id: Any) -> Workout:
    wid = parse_uuid(workout_id, "workout_id")
    user = ctx.auth.current_user()

    workout = WorkoutRepository(ctx.db).delete(wid, user.id)
    log.info("workout deleted id=%s user=%s", wid, user.id)

    ctx.views.revalidate(dashboard_path())
    ctx.views.revalidate(workout_path(wid))
    return workout
