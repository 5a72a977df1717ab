from __future__ import annotations
from dataclasses import dataclass

from sqlalchemy.orm import Session

from liftlog.auth import SessionResolver
from liftlog.views import ViewInvalidator


@dataclass(slots=True)
class ActionContext:
    """Everything an action needs, passed in rather than looked up."""
    db: Session
    auth: SessionResolver
    views: ViewInvalidator
