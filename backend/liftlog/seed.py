"""Reset the database to a small, known data set.

    python -m liftlog.seed

Everything workout-scoped is written through the repositories, so the seed
obeys the same ownership rules as the app.
"""
from __future__ import annotations
import logging
from datetime import datetime, timedelta
from decimal import Decimal

from sqlalchemy import delete
from sqlalchemy.orm import Session

from liftlog.db import Base, SessionLocal, engine
from liftlog.models import Exercise, ExerciseTemplate, User, Workout, WorkoutSet
from liftlog.repositories.exercise_repo import ExerciseRepository
from liftlog.repositories.set_repo import SetRepository
from liftlog.repositories.template_repo import ExerciseTemplateRepository
from liftlog.repositories.user_repo import UserRepository
from liftlog.repositories.workout_repo import WorkoutRepository
from liftlog.security import hash_password

log = logging.getLogger("liftlog.seed")

TEMPLATES = [
    ("Bench Press", "Chest", "Barbell, Bench", "Compound chest exercise performed lying on a bench"),
    ("Squat", "Legs", "Barbell, Squat Rack", "Compound leg exercise targeting quads, glutes, and hamstrings"),
    ("Deadlift", "Back", "Barbell", "Compound full-body exercise with emphasis on posterior chain"),
    ("Overhead Press", "Shoulders", "Barbell", "Compound shoulder exercise"),
    ("Barbell Row", "Back", "Barbell", "Compound back exercise targeting lats and rhomboids"),
    ("Pull-ups", "Back", "Pull-up Bar", "Bodyweight back exercise"),
    ("Incline Dumbbell Press", "Chest", "Dumbbells, Incline Bench", "Isolation exercise for upper chest"),
    ("Leg Press", "Legs", "Leg Press Machine", "Machine-based leg exercise"),
    ("Romanian Deadlift", "Legs", "Barbell", "Hamstring-focused variation of deadlift"),
    ("Tricep Dips", "Arms", "Dip Station", "Compound exercise for triceps and chest"),
    ("Bicep Curls", "Arms", "Dumbbells or Barbell", "Isolation exercise for biceps"),
    ("Lateral Raises", "Shoulders", "Dumbbells", "Isolation exercise for side delts"),
    ("Leg Curls", "Legs", "Leg Curl Machine", "Isolation exercise for hamstrings"),
    ("Cable Flyes", "Chest", "Cable Machine", "Isolation exercise for chest"),
    ("Face Pulls", "Shoulders", "Cable Machine", "Rear delt and upper back exercise"),
]

SEED_PASSWORD = "Liftlog-Seed-2025!"

USERS = [
    ("user@example.com", "testuser"),
    ("john@example.com", "john_lifter"),
    ("sarah@example.com", "sarah_strong"),
    ("mike@example.com", "mike_muscles"),
]

# set tuples: (reps, weight_kg, rpe, rest_seconds, flags)
WORKOUTS = {
    "john_lifter": [
        {
            "name": "Push Day - Chest & Triceps",
            "date": datetime(2025, 1, 15, 9, 0),
            "notes": "Felt strong today, increased weight on bench press",
            "duration_minutes": 75,
            "exercises": [
                ("Bench Press", "compound", [
                    (10, "60.00", None, 90, "warmup"),
                    (8, "80.00", "7.0", 120, ""),
                    (6, "90.00", "8.5", 180, ""),
                    (5, "95.00", "9.0", 180, "failure"),
                ]),
                ("Cable Flyes", "isolation", [
                    (12, "20.00", "7.0", 60, ""),
                    (12, "20.00", "7.5", 60, ""),
                    (10, "20.00", "8.5", 60, "failure"),
                ]),
            ],
        },
        {
            "name": "Leg Day",
            "date": datetime(2025, 1, 17, 10, 0),
            "notes": "Tough workout, legs are sore",
            "duration_minutes": 90,
            "exercises": [
                ("Squat", "compound", [
                    (8, "60.00", None, 120, "warmup"),
                    (6, "100.00", "7.5", 180, ""),
                    (5, "120.00", "8.5", 180, ""),
                    (5, "120.00", "9.0", 180, ""),
                ]),
                ("Leg Curls", "isolation", [
                    (12, "40.00", "6.5", 60, ""),
                    (10, "45.00", "7.5", 60, ""),
                ]),
            ],
        },
    ],
    "sarah_strong": [
        {
            "name": "Pull Day - Back & Biceps",
            "date": datetime(2025, 1, 16, 14, 0),
            "notes": "Great pump in the back today",
            "duration_minutes": 80,
            "exercises": [
                ("Deadlift", "compound", [
                    (8, "60.00", None, 120, "warmup"),
                    (5, "90.00", "7.5", 180, ""),
                    (3, "110.00", "9.5", 240, ""),
                ]),
                ("Pull-ups", "compound", [
                    (8, None, "7.0", 90, ""),
                    (6, None, "8.5", 90, "failure"),
                ]),
            ],
        },
    ],
    "mike_muscles": [
        {
            "name": "Shoulder Day",
            "date": datetime(2025, 1, 18, 11, 0),
            "notes": "Focus on shoulder health and mobility",
            "duration_minutes": 60,
            "exercises": [
                ("Overhead Press", "compound", [
                    (8, "40.00", "7.0", 120, ""),
                    (6, "50.00", "8.5", 150, ""),
                ]),
                ("Lateral Raises", "isolation", [
                    (15, "8.00", "7.0", 45, ""),
                ]),
            ],
        },
    ],
}


def _dev_user_workouts(now: datetime) -> list[dict]:
    # dated today and yesterday so the dashboard has something to show
    today = now.replace(hour=10, minute=0, second=0, microsecond=0)
    return [
        {
            "name": "Morning Upper Body",
            "date": today,
            "notes": None,
            "duration_minutes": 45,
            "exercises": [("Bench Press", "compound", [(8, "70.00", "7.5", 120, "")])],
        },
        {
            "name": "Easy Legs",
            "date": today - timedelta(days=1, hours=1),
            "notes": "Recovery pace",
            "duration_minutes": 40,
            "exercises": [("Leg Press", "compound", [(12, "120.00", "6.5", 90, "")])],
        },
    ]


def clear(db: Session) -> None:
    # children first; cascades would do it, but this also works without FKs enforced
    for model in (WorkoutSet, Exercise, Workout, ExerciseTemplate, User):
        db.execute(delete(model))
    db.commit()


def _dec(v: str | None) -> Decimal | None:
    return Decimal(v) if v is not None else None


def seed(db: Session, *, now: datetime | None = None) -> dict[str, int]:
    clear(db)

    templates = {}
    tpl_repo = ExerciseTemplateRepository(db)
    for name, category, equipment, description in TEMPLATES:
        templates[name] = tpl_repo.create(
            name=name, category=category, equipment_required=equipment, description=description
        )
    log.info("created %d exercise templates", len(templates))

    users = {}
    user_repo = UserRepository(db)
    pw_hash = hash_password(SEED_PASSWORD)
    for email, username in USERS:
        users[username] = user_repo.create(email=email, username=username, password_hash=pw_hash)
    log.info("created %d users", len(users))

    plan = dict(WORKOUTS)
    plan["testuser"] = _dev_user_workouts(now or datetime.now())

    workouts, sets = 0, 0
    w_repo, e_repo, s_repo = WorkoutRepository(db), ExerciseRepository(db), SetRepository(db)
    for username, entries in plan.items():
        owner = users[username].id
        for entry in entries:
            w = w_repo.create(
                owner,
                name=entry["name"],
                date=entry["date"],
                notes=entry["notes"],
                duration_minutes=entry["duration_minutes"],
            )
            workouts += 1
            for order, (ex_name, ex_type, set_rows) in enumerate(entry["exercises"], start=1):
                ex = e_repo.create(
                    w.id,
                    owner,
                    exercise_name=ex_name,
                    exercise_type=ex_type,
                    order_in_workout=order,
                    template_id=templates[ex_name].id,
                )
                for number, (reps, weight, rpe, rest, flags) in enumerate(set_rows, start=1):
                    s_repo.create(
                        ex.id,
                        owner,
                        set_number=number,
                        reps=reps,
                        weight_kg=_dec(weight),
                        rpe=_dec(rpe),
                        rest_seconds=rest,
                        is_warmup=flags == "warmup",
                        is_failure=flags == "failure",
                    )
                    sets += 1
    log.info("created %d workouts with %d sets", workouts, sets)
    return {"templates": len(templates), "users": len(users), "workouts": workouts, "sets": sets}


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    Base.metadata.create_all(bind=engine)
    with SessionLocal() as db:
        counts = seed(db)
    log.info("seed complete: %s", counts)


if __name__ == "__main__":
    main()
