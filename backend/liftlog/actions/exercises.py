"""Exercise and set mutations; same four steps as the workout actions."""
from __future__ import annotations
import logging
from typing import Any, Mapping

from liftlog.actions.context import ActionContext
from liftlog.models import Exercise, WorkoutSet
from liftlog.repositories.exercise_repo import ExerciseRepository
from liftlog.repositories.set_repo import SetRepository
from liftlog.schemas.exercise import ExerciseCreate, ExerciseUpdate
from liftlog.schemas.workout_set import SetCreate, SetUpdate
from liftlog.validation import parse_uuid, validate_or_raise
from liftlog.views import dashboard_path, workout_path

log = logging.getLogger(__name__)


def _touch_workout(ctx: ActionContext, workout_id) -> None:
    ctx.views.revalidate(dashboard_path())
    ctx.views.revalidate(workout_path(workout_id))


def add_exercise_action(ctx: ActionContext, raw: Mapping[str, Any] | ExerciseCreate) -> Exercise:
    data = validate_or_raise(ExerciseCreate, raw)
    user = ctx.auth.current_user()

    ex = ExerciseRepository(ctx.db).create(
        data.workout_id,
        user.id,
        exercise_name=data.exercise_name,
        exercise_type=data.exercise_type,
        order_in_workout=data.order_in_workout,
        notes=data.notes,
        template_id=data.template_id,
    )
    log.info("exercise added id=%s workout=%s", ex.id, data.workout_id)

    _touch_workout(ctx, data.workout_id)
    return ex


def update_exercise_action(ctx: ActionContext, raw: Mapping[str, Any] | ExerciseUpdate) -> Exercise:
    data = validate_or_raise(ExerciseUpdate, raw)
    user = ctx.auth.current_user()

    ex = ExerciseRepository(ctx.db).update(data.exercise_id, user.id, **data.changes())

    _touch_workout(ctx, ex.workout_id)
    return ex


def delete_exercise_action(ctx: ActionContext, exercise_id: Any) -> Exercise:
    eid = parse_uuid(exercise_id, "exercise_id")
    user = ctx.auth.current_user()

    ex = ExerciseRepository(ctx.db).delete(eid, user.id)
    log.info("exercise deleted id=%s workout=%s", eid, ex.workout_id)

    _touch_workout(ctx, ex.workout_id)
    return ex


def add_set_action(ctx: ActionContext, raw: Mapping[str, Any] | SetCreate) -> WorkoutSet:
    data = validate_or_raise(SetCreate, raw)
    user = ctx.auth.current_user()

    s = SetRepository(ctx.db).create(
        data.exercise_id,
        user.id,
        set_number=data.set_number,
        reps=data.reps,
        weight_kg=data.weight_kg,
        rpe=data.rpe,
        rest_seconds=data.rest_seconds,
        is_warmup=data.is_warmup,
        is_failure=data.is_failure,
        notes=data.notes,
    )

    _touch_workout(ctx, s.exercise.workout_id)
    return s


def update_set_action(ctx: ActionContext, raw: Mapping[str, Any] | SetUpdate) -> WorkoutSet:
    data = validate_or_raise(SetUpdate, raw)
    user = ctx.auth.current_user()

    s = SetRepository(ctx.db).update(data.set_id, user.id, **data.changes())

    _touch_workout(ctx, s.exercise.workout_id)
    return s


def delete_set_action(ctx: ActionContext, set_id: Any) -> WorkoutSet:
    sid = parse_uuid(set_id, "set_id")
    user = ctx.auth.current_user()

    s = SetRepository(ctx.db).delete(sid, user.id)
    # the set row is gone; the parent exercise still names the workout
    ex = ExerciseRepository(ctx.db).get(s.exercise_id, user.id)

    _touch_workout(ctx, ex.workout_id)
    return s
