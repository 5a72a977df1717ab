# liftlog/repositories/workout_repo.py
"""Workout data access. Every query is scoped by the owning user's id.

Callers pass ``user_id`` from the resolved session, never from a payload.
Updates and deletes are single statements whose WHERE clause carries the
owner predicate, so there is no check-then-act gap between the ownership
test and the write.
"""
from __future__ import annotations
import uuid
from datetime import date, datetime, time, timedelta

from sqlalchemy import delete, select, update
from sqlalchemy.orm import selectinload

from liftlog.errors import NotFoundOrUnauthorized
from liftlog.models import Exercise, Workout
from liftlog.repositories.base import BaseRepository

_WORKOUT_FIELDS = frozenset({"name", "date", "notes", "duration_minutes"})


def day_bounds(day: date | datetime) -> tuple[datetime, datetime]:
    """[start of the calendar day containing ``day``, start of the next one).

    An aware datetime keeps its tzinfo, so "local" means the caller's zone.
    """
    if isinstance(day, datetime):
        start = day.replace(hour=0, minute=0, second=0, microsecond=0)
    else:
        start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def _with_children(stmt):
    # ordering comes from the relationship order_by on Workout/Exercise
    return stmt.options(selectinload(Workout.exercises).selectinload(Exercise.sets))


class WorkoutRepository(BaseRepository[Workout]):
    model = Workout

    # READS
    def list_for_day(self, user_id: uuid.UUID, day: date | datetime) -> list[Workout]:
        start, end = day_bounds(day)
        stmt = _with_children(
            select(Workout)
            .where(Workout.user_id == user_id, Workout.date >= start, Workout.date < end)
            .order_by(Workout.created_at.desc(), Workout.id.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def get(self, workout_id: uuid.UUID, user_id: uuid.UUID) -> Workout:
        stmt = _with_children(
            select(Workout).where(Workout.id == workout_id, Workout.user_id == user_id)
        ).execution_options(populate_existing=True)
        workout = self.db.execute(stmt).scalar_one_or_none()
        if workout is None:
            raise NotFoundOrUnauthorized("Workout")
        return workout

    def list_by_user(self, user_id: uuid.UUID) -> list[Workout]:
        stmt = _with_children(
            select(Workout).where(Workout.user_id == user_id).order_by(Workout.date.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    # WRITES
    def create(
        self,
        user_id: uuid.UUID,
        *,
        name: str,
        date: datetime,
        notes: str | None = None,
        duration_minutes: int | None = None,
    ) -> Workout:
        workout = Workout(
            user_id=user_id,
            name=name,
            date=date,
            notes=notes,
            duration_minutes=duration_minutes,
        )
        return self.add_and_commit(workout)

    def update(self, workout_id: uuid.UUID, user_id: uuid.UUID, **fields) -> Workout:
        unknown = set(fields) - _WORKOUT_FIELDS
        if unknown:
            raise TypeError(f"not updatable: {sorted(unknown)}")
        if not fields:
            return self.get(workout_id, user_id)

        stmt = (
            update(Workout)
            .where(Workout.id == workout_id, Workout.user_id == user_id)
            .values(**fields)
            .returning(Workout.id)
            .execution_options(synchronize_session=False)
        )
        if self.db.execute(stmt).scalar_one_or_none() is None:
            self.db.rollback()
            raise NotFoundOrUnauthorized("Workout")
        self.db.commit()
        return self.get(workout_id, user_id)

    def delete(self, workout_id: uuid.UUID, user_id: uuid.UUID) -> Workout:
        """Delete and return a snapshot; exercises and sets go with it via FK cascade."""
        table = Workout.__table__
        stmt = (
            delete(table)
            .where(table.c.id == workout_id, table.c.user_id == user_id)
            .returning(*table.c)
        )
        row = self.db.execute(stmt).one_or_none()
        if row is None:
            self.db.rollback()
            raise NotFoundOrUnauthorized("Workout")
        self.db.commit()
        return self.detached_from_row(row)
