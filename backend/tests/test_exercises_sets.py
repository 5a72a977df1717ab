from datetime import datetime
from decimal import Decimal

from liftlog.repositories.exercise_repo import ExerciseRepository
from liftlog.repositories.set_repo import SetRepository
from liftlog.repositories.template_repo import ExerciseTemplateRepository
from liftlog.repositories.workout_repo import WorkoutRepository
import uuid, pytest


@pytest.fixture
def workout_id(db, user):
    return WorkoutRepository(db).create(user.id, name="sets", date=datetime(2025, 6, 1, 9)).id


def test_set_number_auto_increments(db, user, workout_id):
    ex = ExerciseRepository(db).create(workout_id, user.id, exercise_name="Curl", order_in_workout=1)
    repo = SetRepository(db)
    first = repo.create(ex.id, user.id, reps=12)
    second = repo.create(ex.id, user.id, reps=10)
    explicit = repo.create(ex.id, user.id, set_number=7, reps=8)
    after = repo.create(ex.id, user.id, reps=6)
    assert (first.set_number, second.set_number, explicit.set_number, after.set_number) == (1, 2, 7, 8)


def test_set_fields_round_trip(db, user, workout_id):
    ex = ExerciseRepository(db).create(workout_id, user.id, exercise_name="Bench", order_in_workout=1)
    s = SetRepository(db).create(
        ex.id, user.id, set_number=1, reps=5, weight_kg=Decimal("102.50"), rpe=Decimal("8.5"),
        rest_seconds=180, is_failure=True, notes="grindy",
    )
    got = SetRepository(db).get(s.id, user.id)
    assert got.weight_kg == Decimal("102.50")
    assert got.rpe == Decimal("8.5")
    assert got.rest_seconds == 180
    assert got.is_failure is True and got.is_warmup is False
    assert got.notes == "grindy"


def test_duplicate_order_keys_are_tolerated(db, user, workout_id):
    repo = ExerciseRepository(db)
    a = repo.create(workout_id, user.id, exercise_name="A", order_in_workout=1)
    b = repo.create(workout_id, user.id, exercise_name="B", order_in_workout=1)
    listed = repo.list_for_workout(workout_id, user.id)
    assert {e.id for e in listed} == {a.id, b.id}
    assert [e.order_in_workout for e in listed] == [1, 1]


def test_exercise_update_and_delete(db, user, workout_id):
    repo = ExerciseRepository(db)
    ex = repo.create(workout_id, user.id, exercise_name="Row", order_in_workout=3)
    eid = ex.id
    SetRepository(db).create(eid, user.id, reps=8)

    updated = repo.update(eid, user.id, exercise_name="Pendlay Row", exercise_type="compound")
    assert updated.exercise_name == "Pendlay Row"
    assert updated.order_in_workout == 3

    gone = repo.delete(eid, user.id)
    assert gone.id == eid
    assert WorkoutRepository(db).get(workout_id, user.id).exercises == []


def test_set_update_and_delete(db, user, workout_id):
    ex = ExerciseRepository(db).create(workout_id, user.id, exercise_name="Press", order_in_workout=1)
    repo = SetRepository(db)
    sid = repo.create(ex.id, user.id, reps=5).id

    assert repo.update(sid, user.id, reps=6, is_warmup=True).reps == 6
    repo.delete(sid, user.id)
    assert repo.list_for_exercise(ex.id, user.id) == []


def test_deleting_template_nulls_exercise_link(db, user, workout_id):
    templates = ExerciseTemplateRepository(db)
    tpl = templates.create(name=f"Tpl {uuid.uuid4().hex[:6]}", category="Legs")
    tpl_id = tpl.id
    ex = ExerciseRepository(db).create(
        workout_id, user.id, exercise_name="Hack Squat", order_in_workout=1, template_id=tpl_id
    )
    eid = ex.id

    assert templates.delete(tpl_id) is True
    db.expire_all()
    survivor = ExerciseRepository(db).get(eid, user.id)
    assert survivor.template_id is None
    assert templates.get(tpl_id) is None


def test_template_names_are_unique_and_listed_by_category(db):
    repo = ExerciseTemplateRepository(db)
    tag = uuid.uuid4().hex[:6]
    repo.create(name=f"Zercher {tag}", category=f"cat-{tag}")
    repo.create(name=f"Anderson {tag}", category=f"cat-{tag}")
    with pytest.raises(ValueError):
        repo.create(name=f"Zercher {tag}")
    assert [t.name for t in repo.list(category=f"cat-{tag}")] == [f"Anderson {tag}", f"Zercher {tag}"]
    assert repo.get_by_name(f"Zercher {tag}").category == f"cat-{tag}"
