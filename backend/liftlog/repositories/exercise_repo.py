from __future__ import annotations
import uuid

from sqlalchemy import delete, select, update
from sqlalchemy.orm import selectinload

from liftlog.errors import NotFoundOrUnauthorized
from liftlog.models import Exercise, Workout
from liftlog.repositories.base import BaseRepository

_EXERCISE_FIELDS = frozenset({"exercise_name", "exercise_type", "order_in_workout", "notes", "template_id"})


def owned_workout_ids(user_id: uuid.UUID):
    return select(Workout.id).where(Workout.user_id == user_id)


class ExerciseRepository(BaseRepository[Exercise]):
    model = Exercise

    def get(self, exercise_id: uuid.UUID, user_id: uuid.UUID) -> Exercise:
        stmt = (
            select(Exercise)
            .join(Workout, Exercise.workout_id == Workout.id)
            .where(Exercise.id == exercise_id, Workout.user_id == user_id)
            .options(selectinload(Exercise.sets))
            .execution_options(populate_existing=True)
        )
        ex = self.db.execute(stmt).scalar_one_or_none()
        if ex is None:
            raise NotFoundOrUnauthorized("Exercise")
        return ex

    def list_for_workout(self, workout_id: uuid.UUID, user_id: uuid.UUID) -> list[Exercise]:
        stmt = (
            select(Exercise)
            .join(Workout, Exercise.workout_id == Workout.id)
            .where(Exercise.workout_id == workout_id, Workout.user_id == user_id)
            .order_by(Exercise.order_in_workout.asc())
            .options(selectinload(Exercise.sets))
        )
        return list(self.db.execute(stmt).scalars().all())

    def create(
        self,
        workout_id: uuid.UUID,
        user_id: uuid.UUID,
        *,
        exercise_name: str,
        order_in_workout: int,
        exercise_type: str | None = None,
        notes: str | None = None,
        template_id: uuid.UUID | None = None,
    ) -> Exercise:
        # Ownership test and insert share one transaction; the row lock keeps
        # a concurrent delete of the parent from slipping in between.
        owner_check = (
            select(Workout.id)
            .where(Workout.id == workout_id, Workout.user_id == user_id)
            .with_for_update()
        )
        if self.db.execute(owner_check).scalar_one_or_none() is None:
            self.db.rollback()
            raise NotFoundOrUnauthorized("Workout")

        ex = Exercise(
            workout_id=workout_id,
            exercise_name=exercise_name,
            exercise_type=exercise_type,
            order_in_workout=order_in_workout,
            notes=notes,
            template_id=template_id,
        )
        return self.add_and_commit(ex)

    def update(self, exercise_id: uuid.UUID, user_id: uuid.UUID, **fields) -> Exercise:
        unknown = set(fields) - _EXERCISE_FIELDS
        if unknown:
            raise TypeError(f"not updatable: {sorted(unknown)}")
        if not fields:
            return self.get(exercise_id, user_id)

        stmt = (
            update(Exercise)
            .where(Exercise.id == exercise_id, Exercise.workout_id.in_(owned_workout_ids(user_id)))
            .values(**fields)
            .returning(Exercise.id)
            .execution_options(synchronize_session=False)
        )
        if self.db.execute(stmt).scalar_one_or_none() is None:
            self.db.rollback()
            raise NotFoundOrUnauthorized("Exercise")
        self.db.commit()
        return self.get(exercise_id, user_id)

    def delete(self, exercise_id: uuid.UUID, user_id: uuid.UUID) -> Exercise:
        table = Exercise.__table__
        stmt = (
            delete(table)
            .where(table.c.id == exercise_id, table.c.workout_id.in_(owned_workout_ids(user_id)))
            .returning(*table.c)
        )
        row = self.db.execute(stmt).one_or_none()
        if row is None:
            self.db.rollback()
            raise NotFoundOrUnauthorized("Exercise")
        self.db.commit()
        return self.detached_from_row(row)
