import uuid
from datetime import datetime
from typing import Literal
from pydantic import BaseModel

from liftlog.schemas._types import NameStr, NotesStr, PosInt, changed_fields
from liftlog.schemas.workout_set import SetRead

ExerciseType = Literal["compound", "isolation"]

class ExerciseCreate(BaseModel):
    workout_id: uuid.UUID
    exercise_name: NameStr
    exercise_type: ExerciseType | None = None
    order_in_workout: PosInt
    notes: NotesStr | None = None
    template_id: uuid.UUID | None = None

class ExerciseUpdate(BaseModel):
    exercise_id: uuid.UUID
    exercise_name: NameStr | None = None
    exercise_type: ExerciseType | None = None
    order_in_workout: PosInt | None = None
    notes: NotesStr | None = None
    template_id: uuid.UUID | None = None

    def changes(self) -> dict:
        return changed_fields(self, "exercise_id")

class ExerciseRead(BaseModel):
    id: uuid.UUID
    workout_id: uuid.UUID
    template_id: uuid.UUID | None = None
    exercise_name: str
    exercise_type: str | None = None
    order_in_workout: int
    notes: str | None = None
    created_at: datetime
    updated_at: datetime
    sets: list[SetRead] = []

    model_config = {"from_attributes": True}
