# liftlog/repositories/user_repo.py
from __future__ import annotations
import uuid
from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError

from liftlog.models import User
from liftlog.repositories.base import BaseRepository

class UserRepository(BaseRepository[User]):
    model = User

    # READS
    def get(self, user_id: uuid.UUID) -> Optional[User]:
        return self.db.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(func.lower(User.email) == email.lower())
        return self.db.execute(stmt).scalar_one_or_none()

    def get_by_username(self, username: str) -> Optional[User]:
        stmt = select(User).where(User.username == username)
        return self.db.execute(stmt).scalar_one_or_none()

    # WRITES
    def create(self, *, email: str, username: str, password_hash: str) -> User:
        # stored lower-case so the unique index also covers case variants
        user = User(email=email.strip().lower(), username=username, password_hash=password_hash)
        try:
            return self.add_and_commit(user)
        except IntegrityError:
            self.db.rollback()
            # Re-raise a clean marker your router can map to 400
            raise ValueError("email_or_username_exists")

    def get_or_create(self, *, email: str, username: str, password_hash: str) -> User:
        user = self.get_by_email(email)
        if user:
            return user
        try:
            return self.create(email=email, username=username, password_hash=password_hash)
        except ValueError:
            # lost a race with another request provisioning the same email
            user = self.get_by_email(email)
            if user is None:
                raise
            return user
