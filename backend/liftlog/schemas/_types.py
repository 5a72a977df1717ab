import datetime as dt
from typing import Annotated
from pydantic import Field

NameStr = Annotated[str, Field(min_length=1, max_length=255)]
NotesStr = Annotated[str, Field(max_length=1000)]
PosInt = Annotated[int, Field(ge=1)]
NonNegInt = Annotated[int, Field(ge=0)]

def coerce_datetime(v):
    """Accept a datetime, a date or a date-only ISO string; dates become midnight."""
    if isinstance(v, dt.datetime):
        return v
    if isinstance(v, dt.date):
        return dt.datetime.combine(v, dt.time.min)
    if isinstance(v, str) and len(v.strip()) == 10:
        try:
            return dt.datetime.combine(dt.date.fromisoformat(v.strip()), dt.time.min)
        except ValueError:
            return v  # let pydantic report it
    return v

def changed_fields(model, *exclude: str) -> dict:
    """Fields the caller actually set, minus nulls and the given keys."""
    data = model.model_dump(exclude_unset=True, exclude=set(exclude))
    return {k: v for k, v in data.items() if v is not None}
