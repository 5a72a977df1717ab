"""Resolve the current user for an action.

Actions receive a ``SessionResolver`` explicitly; they never look the user
up on their own.
"""
from __future__ import annotations
import logging
import uuid
from typing import Protocol

from jose.exceptions import ExpiredSignatureError, JWTError
from sqlalchemy.orm import Session

from liftlog.errors import Unauthorized
from liftlog.models import User
from liftlog.repositories.user_repo import UserRepository
from liftlog.security import decode_token

log = logging.getLogger(__name__)

# Dev-provisioned users can never log in with a password
UNUSABLE_PASSWORD_HASH = "!"


class SessionResolver(Protocol):
    def current_user(self) -> User: ...


class BearerTokenResolver:
    """Real session: a signed, unexpired token naming an existing user."""

    def __init__(self, db: Session, token: str | None):
        self.db = db
        self.token = token

    def current_user(self) -> User:
        if not self.token:
            raise Unauthorized()
        try:
            payload = decode_token(self.token)
            user_id = uuid.UUID(str(payload.get("sub")))
        except ExpiredSignatureError:
            raise Unauthorized("Token expired")
        except (JWTError, ValueError):
            raise Unauthorized()

        user = UserRepository(self.db).get(user_id)
        if user is None:
            raise Unauthorized()
        return user


class DevUserResolver:
    """Development stub: a fixed, configured principal, provisioned on first use.

    Only wired when DEV_USER_EMAIL is set.
    """

    def __init__(self, db: Session, email: str, username: str):
        self.db = db
        self.email = email
        self.username = username

    def current_user(self) -> User:
        repo = UserRepository(self.db)
        user = repo.get_by_email(self.email)
        if user is None:
            log.info("provisioning dev user %s", self.email)
            user = repo.get_or_create(
                email=self.email, username=self.username, password_hash=UNUSABLE_PASSWORD_HASH
            )
        return user


class FixedUserResolver:
    """Already-authenticated user (background jobs, tests)."""

    def __init__(self, user: User):
        self.user = user

    def current_user(self) -> User:
        return self.user
