import uuid
from datetime import datetime
from decimal import Decimal

import pytest
from sqlalchemy import func, select

from liftlog.actions import (
    ActionContext,
    add_exercise_action,
    add_set_action,
    create_workout_action,
    delete_set_action,
    delete_workout_action,
    update_exercise_action,
    update_set_action,
    update_workout_action,
)
from liftlog.errors import NotFoundOrUnauthorized, Unauthorized, ValidationError
from liftlog.models import Workout
from liftlog.repositories.workout_repo import WorkoutRepository


class NoSession:
    def current_user(self):
        raise Unauthorized()


def count_workouts(db, user_id):
    return db.execute(select(func.count()).select_from(Workout).where(Workout.user_id == user_id)).scalar_one()


def test_create_uses_session_user_not_payload(ctx, db, user, other_user):
    w = create_workout_action(ctx, {
        "name": "Sneaky",
        "date": "2025-01-17",
        "user_id": str(other_user.id),
        "userId": str(other_user.id),
    })
    assert w.user_id == user.id
    assert count_workouts(db, other_user.id) == 0


def test_create_ignores_client_timestamps(ctx):
    w = create_workout_action(ctx, {
        "name": "Backdated",
        "date": "2025-01-17",
        "created_at": "2000-01-01T00:00:00Z",
        "updated_at": "2000-01-01T00:00:00Z",
    })
    assert w.created_at.year != 2000
    assert w.updated_at.year != 2000
    assert w.created_at.replace(tzinfo=None) > datetime(2024, 1, 1)


def test_create_marks_dashboard_stale(ctx, views):
    create_workout_action(ctx, {"name": "Fresh", "date": "2025-01-17"})
    assert views.is_stale("/dashboard")


def test_empty_name_is_rejected_before_insert(ctx, db, user, views):
    with pytest.raises(ValidationError) as exc:
        create_workout_action(ctx, {"name": "", "date": "2025-01-17"})
    assert "name" in exc.value.paths()
    assert count_workouts(db, user.id) == 0
    assert views.stale_paths == frozenset()


@pytest.mark.parametrize("payload, field", [
    ({"name": "x" * 256, "date": "2025-01-17"}, "name"),
    ({"name": "ok"}, "date"),
    ({"name": "ok", "date": "not a date"}, "date"),
    ({"name": "ok", "date": "2025-01-17", "notes": "n" * 1001}, "notes"),
    ({"name": "ok", "date": "2025-01-17", "duration_minutes": 0}, "duration_minutes"),
    ({"name": "ok", "date": "2025-01-17", "duration_minutes": 601}, "duration_minutes"),
])
def test_create_field_rules(ctx, payload, field):
    with pytest.raises(ValidationError) as exc:
        create_workout_action(ctx, payload)
    assert field in exc.value.paths()


def test_validation_runs_before_auth(db, views):
    ctx = ActionContext(db=db, auth=NoSession(), views=views)
    with pytest.raises(ValidationError):
        create_workout_action(ctx, {"name": "", "date": "2025-01-17"})
    with pytest.raises(Unauthorized):
        create_workout_action(ctx, {"name": "fine", "date": "2025-01-17"})


def test_update_is_partial_and_null_duration_is_ignored(ctx, views):
    w = create_workout_action(ctx, {"name": "Legs", "date": "2025-01-17", "duration_minutes": 60, "notes": "n"})
    wid = w.id
    updated = update_workout_action(ctx, {"workout_id": str(wid), "name": "Legs v2", "duration_minutes": None})
    assert updated.name == "Legs v2"
    assert updated.duration_minutes == 60
    assert updated.notes == "n"
    assert views.is_stale(f"/dashboard/workout/{wid}")


def test_update_requires_well_formed_id(ctx):
    with pytest.raises(ValidationError) as exc:
        update_workout_action(ctx, {"workout_id": "not-a-uuid", "name": "x"})
    assert exc.value.paths() == ["workout_id"]


def test_update_of_foreign_workout_fails(ctx, db, other_user, views):
    theirs = WorkoutRepository(db).create(other_user.id, name="theirs", date=datetime(2025, 1, 1, 9))
    with pytest.raises(NotFoundOrUnauthorized):
        update_workout_action(ctx, {"workout_id": str(theirs.id), "name": "mine now"})
    assert views.stale_paths == frozenset()


def test_delete_action(ctx, user, views):
    wid = create_workout_action(ctx, {"name": "Temp", "date": "2025-01-17"}).id
    deleted = delete_workout_action(ctx, str(wid))
    assert deleted.id == wid
    assert views.is_stale(f"/dashboard/workout/{wid}")
    with pytest.raises(NotFoundOrUnauthorized):
        delete_workout_action(ctx, wid)
    with pytest.raises(ValidationError):
        delete_workout_action(ctx, "garbage")


def test_exercise_create_rules(ctx):
    wid = str(create_workout_action(ctx, {"name": "W", "date": "2025-01-17"}).id)
    with pytest.raises(ValidationError) as exc:
        add_exercise_action(ctx, {"workout_id": wid, "exercise_name": "Squat", "order_in_workout": 0})
    assert "order_in_workout" in exc.value.paths()
    with pytest.raises(ValidationError) as exc:
        add_exercise_action(ctx, {
            "workout_id": wid, "exercise_name": "Squat", "order_in_workout": 1, "exercise_type": "cardio",
        })
    assert "exercise_type" in exc.value.paths()
    with pytest.raises(ValidationError) as exc:
        add_exercise_action(ctx, {"workout_id": "nope", "exercise_name": "", "order_in_workout": 1})
    assert set(exc.value.paths()) >= {"workout_id", "exercise_name"}


def test_exercise_and_set_updates(ctx, views):
    wid = create_workout_action(ctx, {"name": "W", "date": "2025-01-17"}).id
    ex = add_exercise_action(ctx, {"workout_id": str(wid), "exercise_name": "Bench", "order_in_workout": 1})
    ex = update_exercise_action(ctx, {"exercise_id": str(ex.id), "exercise_type": "compound"})
    assert ex.exercise_type == "compound"

    s = add_set_action(ctx, {"exercise_id": str(ex.id), "reps": 5, "weight_kg": "80.5"})
    assert s.set_number == 1
    s = update_set_action(ctx, {"set_id": str(s.id), "rpe": "8.5"})
    assert s.rpe == Decimal("8.5")
    assert s.weight_kg == Decimal("80.50")

    removed = delete_set_action(ctx, str(s.id))
    assert removed.exercise_id == ex.id
    assert views.is_stale(f"/dashboard/workout/{wid}")


def test_set_rules(ctx):
    wid = create_workout_action(ctx, {"name": "W", "date": "2025-01-17"}).id
    ex = add_exercise_action(ctx, {"workout_id": str(wid), "exercise_name": "Bench", "order_in_workout": 1})
    with pytest.raises(ValidationError) as exc:
        add_set_action(ctx, {"exercise_id": str(ex.id), "reps": 0})
    assert "reps" in exc.value.paths()
    with pytest.raises(ValidationError) as exc:
        add_set_action(ctx, {"exercise_id": str(ex.id), "reps": 5, "weight_kg": "1.234"})
    assert "weight_kg" in exc.value.paths()


def test_leg_day_end_to_end(ctx, user):
    w = create_workout_action(ctx, {"name": "Leg Day", "date": "2025-01-17"})
    wid = w.id
    ex = add_exercise_action(ctx, {"workout_id": str(wid), "exercise_name": "Squat", "order_in_workout": 1})
    for reps, kg in [(8, 60), (6, 100), (5, 120), (5, 120)]:
        add_set_action(ctx, {"exercise_id": str(ex.id), "reps": reps, "weight_kg": kg})

    fetched = WorkoutRepository(ctx.db).get(wid, user.id)
    assert fetched.name == "Leg Day"
    assert fetched.date.replace(tzinfo=None) == datetime(2025, 1, 17)
    sets = fetched.exercises[0].sets
    assert len(sets) == 4
    assert [s.set_number for s in sets] == [1, 2, 3, 4]
    assert [s.reps for s in sets] == [8, 6, 5, 5]
    assert [s.weight_kg for s in sets] == [Decimal(60), Decimal(100), Decimal(120), Decimal(120)]
    assert uuid.UUID(str(fetched.user_id)) == user.id


def test_view_subscribers_hear_every_path(ctx, views):
    heard = []
    views.subscribe(heard.append)
    w = create_workout_action(ctx, {"name": "Pull", "date": "2025-02-02"})
    update_workout_action(ctx, {"workout_id": str(w.id), "notes": "grip gave out"})
    assert heard == ["/dashboard", "/dashboard", f"/dashboard/workout/{w.id}"]
