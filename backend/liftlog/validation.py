"""Turn raw payloads into typed records, or a list of field issues.

``validate`` never raises for bad input; it returns ``Valid`` or ``Invalid``
so callers can branch on the result. ``validate_or_raise`` is the form the
action layer uses.
"""
from __future__ import annotations
import uuid
from dataclasses import dataclass
from typing import Any, Generic, Mapping, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from liftlog.errors import FieldIssue, ValidationError

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True, slots=True)
class Valid(Generic[M]):
    value: M
    ok: bool = True


@dataclass(frozen=True, slots=True)
class Invalid:
    issues: list[FieldIssue]
    ok: bool = False


ValidationResult = Union[Valid[M], Invalid]


def _issue_path(loc: tuple) -> str:
    # ("exercises", 0, "name") -> "exercises.0.name"; model-level errors have no loc
    return ".".join(str(p) for p in loc) or "__root__"


def issues_from(exc: PydanticValidationError) -> list[FieldIssue]:
    return [FieldIssue(_issue_path(err["loc"]), err["msg"]) for err in exc.errors()]


def validate(model: type[M], raw: Mapping[str, Any] | M) -> ValidationResult:
    if isinstance(raw, model):
        return Valid(raw)
    if isinstance(raw, BaseModel):
        raw = raw.model_dump(exclude_unset=True)
    try:
        return Valid(model.model_validate(raw))
    except PydanticValidationError as e:
        return Invalid(issues_from(e))


def validate_or_raise(model: type[M], raw: Mapping[str, Any] | M) -> M:
    result = validate(model, raw)
    if isinstance(result, Invalid):
        raise ValidationError(result.issues)
    return result.value


def parse_uuid(value: Any, field: str) -> uuid.UUID:
    """Bare id arguments (delete actions) get the same structured error."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError:
        raise ValidationError([FieldIssue(field, "Invalid UUID")])
