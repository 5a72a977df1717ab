import datetime as dt
import uuid
from typing import Annotated
from pydantic import BaseModel, Field, field_validator

from liftlog.schemas._types import NameStr, NotesStr, changed_fields, coerce_datetime
from liftlog.schemas.exercise import ExerciseRead

DurationMinutes = Annotated[int, Field(ge=1, le=600)]

class WorkoutCreate(BaseModel):
    # unknown keys (a client-sent user_id included) are dropped
    name: NameStr
    date: dt.datetime
    notes: NotesStr | None = None
    duration_minutes: DurationMinutes | None = None

    @field_validator("date", mode="before")
    @classmethod
    def coerce_date(cls, v):
        return coerce_datetime(v)

class WorkoutUpdate(BaseModel):
    workout_id: uuid.UUID
    name: NameStr | None = None
    date: dt.datetime | None = None
    notes: NotesStr | None = None
    # null means "leave as is", same as omitting it
    duration_minutes: DurationMinutes | None = None

    @field_validator("date", mode="before")
    @classmethod
    def coerce_date(cls, v):
        return coerce_datetime(v)

    def changes(self) -> dict:
        return changed_fields(self, "workout_id")

class WorkoutRead(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    name: str
    date: dt.datetime
    notes: str | None = None
    duration_minutes: int | None = None
    created_at: dt.datetime
    updated_at: dt.datetime
    exercises: list[ExerciseRead] = []

    model_config = {"from_attributes": True}
