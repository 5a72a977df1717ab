"""
Point the app at a throwaway SQLite file before anything imports
liftlog.db, then build the schema once for the whole run.
"""
import os
import tempfile
import uuid

_DB_DIR = tempfile.mkdtemp(prefix="liftlog-tests-")
os.environ["DB_URL"] = f"sqlite+pysqlite:///{_DB_DIR}/test.db"
os.environ.pop("DEV_USER_EMAIL", None)

import pytest  # noqa: E402

from liftlog import models  # noqa: E402,F401
from liftlog.actions import ActionContext  # noqa: E402
from liftlog.auth import FixedUserResolver, UNUSABLE_PASSWORD_HASH  # noqa: E402
from liftlog.db import Base, SessionLocal, engine  # noqa: E402
from liftlog.repositories.user_repo import UserRepository  # noqa: E402
from liftlog.views import StaleViewTracker  # noqa: E402

Base.metadata.create_all(bind=engine)


def make_user(db, prefix="u"):
    tag = uuid.uuid4().hex[:8]
    return UserRepository(db).create(
        email=f"{prefix}-{tag}@ex.com", username=f"{prefix}_{tag}", password_hash=UNUSABLE_PASSWORD_HASH
    )


@pytest.fixture
def db():
    s = SessionLocal()
    yield s
    s.close()


@pytest.fixture
def user(db):
    return make_user(db, "owner")


@pytest.fixture
def other_user(db):
    return make_user(db, "other")


@pytest.fixture
def views():
    return StaleViewTracker()


@pytest.fixture
def ctx(db, user, views):
    return ActionContext(db=db, auth=FixedUserResolver(user), views=views)
