import uuid
from datetime import datetime
from decimal import Decimal
from typing import Annotated
from pydantic import BaseModel, Field

from liftlog.schemas._types import NonNegInt, NotesStr, PosInt, changed_fields

WeightKg = Annotated[Decimal, Field(ge=0, max_digits=6, decimal_places=2)]
# One decimal place; the 1-10 scale is a convention, not a rule
Rpe = Annotated[Decimal, Field(max_digits=3, decimal_places=1)]

class SetCreate(BaseModel):
    exercise_id: uuid.UUID
    # omitted -> next number after the current max for the exercise
    set_number: PosInt | None = None
    reps: PosInt
    weight_kg: WeightKg | None = None
    rpe: Rpe | None = None
    rest_seconds: NonNegInt | None = None
    is_warmup: bool = False
    is_failure: bool = False
    notes: NotesStr | None = None

class SetUpdate(BaseModel):
    set_id: uuid.UUID
    set_number: PosInt | None = None
    reps: PosInt | None = None
    weight_kg: WeightKg | None = None
    rpe: Rpe | None = None
    rest_seconds: NonNegInt | None = None
    is_warmup: bool | None = None
    is_failure: bool | None = None
    notes: NotesStr | None = None

    def changes(self) -> dict:
        return changed_fields(self, "set_id")

class SetRead(BaseModel):
    id: uuid.UUID
    exercise_id: uuid.UUID
    set_number: int
    reps: int
    weight_kg: Decimal | None = None
    rpe: Decimal | None = None
    rest_seconds: int | None = None
    is_warmup: bool
    is_failure: bool
    notes: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
