import uuid
from datetime import datetime

import pytest

from liftlog.errors import NotFoundOrUnauthorized
from liftlog.repositories.exercise_repo import ExerciseRepository
from liftlog.repositories.set_repo import SetRepository
from liftlog.repositories.workout_repo import WorkoutRepository


@pytest.fixture
def owned(db, user):
    """A workout with one exercise and one set, owned by ``user``."""
    w = WorkoutRepository(db).create(user.id, name="mine", date=datetime(2025, 1, 10, 9))
    ex = ExerciseRepository(db).create(w.id, user.id, exercise_name="Bench", order_in_workout=1)
    s = SetRepository(db).create(ex.id, user.id, set_number=1, reps=5)
    return {"workout": w.id, "exercise": ex.id, "set": s.id}


def test_foreign_workout_is_invisible(db, owned, other_user):
    repo = WorkoutRepository(db)
    with pytest.raises(NotFoundOrUnauthorized):
        repo.get(owned["workout"], other_user.id)
    with pytest.raises(NotFoundOrUnauthorized):
        repo.update(owned["workout"], other_user.id, name="hijacked")
    with pytest.raises(NotFoundOrUnauthorized):
        repo.delete(owned["workout"], other_user.id)
    assert repo.list_for_day(other_user.id, datetime(2025, 1, 10)) == []


def test_foreign_writes_leave_row_untouched(db, owned, user, other_user):
    repo = WorkoutRepository(db)
    with pytest.raises(NotFoundOrUnauthorized):
        repo.update(owned["workout"], other_user.id, name="hijacked")
    with pytest.raises(NotFoundOrUnauthorized):
        repo.delete(owned["workout"], other_user.id)
    assert repo.get(owned["workout"], user.id).name == "mine"


def test_missing_and_foreign_look_the_same(db, owned, user, other_user):
    repo = WorkoutRepository(db)
    with pytest.raises(NotFoundOrUnauthorized) as foreign:
        repo.get(owned["workout"], other_user.id)
    with pytest.raises(NotFoundOrUnauthorized) as missing:
        repo.get(uuid.uuid4(), user.id)
    assert str(foreign.value) == str(missing.value) == "Workout not found or unauthorized"


def test_foreign_exercise_is_invisible(db, owned, other_user):
    repo = ExerciseRepository(db)
    with pytest.raises(NotFoundOrUnauthorized):
        repo.get(owned["exercise"], other_user.id)
    with pytest.raises(NotFoundOrUnauthorized):
        repo.update(owned["exercise"], other_user.id, exercise_name="nope")
    with pytest.raises(NotFoundOrUnauthorized):
        repo.delete(owned["exercise"], other_user.id)
    with pytest.raises(NotFoundOrUnauthorized):
        repo.create(owned["workout"], other_user.id, exercise_name="sneak", order_in_workout=9)
    assert repo.list_for_workout(owned["workout"], other_user.id) == []


def test_foreign_set_is_invisible(db, owned, user, other_user):
    repo = SetRepository(db)
    with pytest.raises(NotFoundOrUnauthorized):
        repo.get(owned["set"], other_user.id)
    with pytest.raises(NotFoundOrUnauthorized):
        repo.update(owned["set"], other_user.id, reps=99)
    with pytest.raises(NotFoundOrUnauthorized):
        repo.delete(owned["set"], other_user.id)
    with pytest.raises(NotFoundOrUnauthorized):
        repo.create(owned["exercise"], other_user.id, reps=1)
    assert repo.list_for_exercise(owned["exercise"], other_user.id) == []
    assert repo.get(owned["set"], user.id).reps == 5
