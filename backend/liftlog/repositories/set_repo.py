from __future__ import annotations
import uuid
from decimal import Decimal

from sqlalchemy import delete, func, select, update

from liftlog.errors import NotFoundOrUnauthorized
from liftlog.models import Exercise, Workout, WorkoutSet
from liftlog.repositories.base import BaseRepository

_SET_FIELDS = frozenset({
    "set_number", "reps", "weight_kg", "rpe", "rest_seconds", "is_warmup", "is_failure", "notes",
})


def owned_exercise_ids(user_id: uuid.UUID):
    return (
        select(Exercise.id)
        .join(Workout, Exercise.workout_id == Workout.id)
        .where(Workout.user_id == user_id)
    )


class SetRepository(BaseRepository[WorkoutSet]):
    model = WorkoutSet

    def get(self, set_id: uuid.UUID, user_id: uuid.UUID) -> WorkoutSet:
        stmt = (
            select(WorkoutSet)
            .where(WorkoutSet.id == set_id, WorkoutSet.exercise_id.in_(owned_exercise_ids(user_id)))
            .execution_options(populate_existing=True)
        )
        s = self.db.execute(stmt).scalar_one_or_none()
        if s is None:
            raise NotFoundOrUnauthorized("Set")
        return s

    def list_for_exercise(self, exercise_id: uuid.UUID, user_id: uuid.UUID) -> list[WorkoutSet]:
        stmt = (
            select(WorkoutSet)
            .where(
                WorkoutSet.exercise_id == exercise_id,
                WorkoutSet.exercise_id.in_(owned_exercise_ids(user_id)),
            )
            .order_by(WorkoutSet.set_number.asc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def create(
        self,
        exercise_id: uuid.UUID,
        user_id: uuid.UUID,
        *,
        reps: int,
        set_number: int | None = None,
        weight_kg: Decimal | None = None,
        rpe: Decimal | None = None,
        rest_seconds: int | None = None,
        is_warmup: bool = False,
        is_failure: bool = False,
        notes: str | None = None,
    ) -> WorkoutSet:
        owner_check = (
            select(Exercise.id)
            .join(Workout, Exercise.workout_id == Workout.id)
            .where(Exercise.id == exercise_id, Workout.user_id == user_id)
            .with_for_update()
        )
        if self.db.execute(owner_check).scalar_one_or_none() is None:
            self.db.rollback()
            raise NotFoundOrUnauthorized("Exercise")

        if set_number is None:
            # Auto-increment based on current max for this exercise
            max_no = self.db.execute(
                select(func.max(WorkoutSet.set_number)).where(WorkoutSet.exercise_id == exercise_id)
            ).scalar_one()
            set_number = (max_no or 0) + 1

        s = WorkoutSet(
            exercise_id=exercise_id,
            set_number=set_number,
            reps=reps,
            weight_kg=weight_kg,
            rpe=rpe,
            rest_seconds=rest_seconds,
            is_warmup=is_warmup,
            is_failure=is_failure,
            notes=notes,
        )
        return self.add_and_commit(s)

    def update(self, set_id: uuid.UUID, user_id: uuid.UUID, **fields) -> WorkoutSet:
        unknown = set(fields) - _SET_FIELDS
        if unknown:
            raise TypeError(f"not updatable: {sorted(unknown)}")
        if not fields:
            return self.get(set_id, user_id)

        stmt = (
            update(WorkoutSet)
            .where(WorkoutSet.id == set_id, WorkoutSet.exercise_id.in_(owned_exercise_ids(user_id)))
            .values(**fields)
            .returning(WorkoutSet.id)
            .execution_options(synchronize_session=False)
        )
        if self.db.execute(stmt).scalar_one_or_none() is None:
            self.db.rollback()
            raise NotFoundOrUnauthorized("Set")
        self.db.commit()
        return self.get(set_id, user_id)

    def delete(self, set_id: uuid.UUID, user_id: uuid.UUID) -> WorkoutSet:
        table = WorkoutSet.__table__
        stmt = (
            delete(table)
            .where(table.c.id == set_id, table.c.exercise_id.in_(owned_exercise_ids(user_id)))
            .returning(*table.c)
        )
        row = self.db.execute(stmt).one_or_none()
        if row is None:
            self.db.rollback()
            raise NotFoundOrUnauthorized("Set")
        self.db.commit()
        return self.detached_from_row(row)
