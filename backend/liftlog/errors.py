"""Errors raised by the data-access and action layers.

Routers map these to HTTP responses in ``liftlog.main``; nothing below the
action layer catches them.
"""
from __future__ import annotations
from dataclasses import dataclass


class LiftlogError(Exception):
    """Base class for domain errors."""


@dataclass(frozen=True, slots=True)
class FieldIssue:
    path: str
    message: str

    def as_dict(self) -> dict[str, str]:
        return {"path": self.path, "message": self.message}


class ValidationError(LiftlogError):
    """Input rejected before any database call."""

    def __init__(self, issues: list[FieldIssue]):
        self.issues = list(issues)
        summary = "; ".join(f"{i.path}: {i.message}" for i in self.issues)
        super().__init__(summary or "validation failed")

    def paths(self) -> list[str]:
        return [i.path for i in self.issues]


class NotFoundOrUnauthorized(LiftlogError):
    """Missing row and foreign row look the same to the caller."""

    def __init__(self, entity: str = "Workout"):
        self.entity = entity
        super().__init__(f"{entity} not found or unauthorized")


class Unauthorized(LiftlogError):
    """No resolvable current user."""

    def __init__(self, detail: str = "Not authenticated"):
        self.detail = detail
        super().__init__(detail)
