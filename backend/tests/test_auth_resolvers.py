import uuid

import pytest

import liftlog.auth as auth_mod
from liftlog.auth import BearerTokenResolver, DevUserResolver
from liftlog.errors import Unauthorized
from liftlog.security import create_access_token


def test_missing_token_is_unauthorized(db):
    with pytest.raises(Unauthorized):
        BearerTokenResolver(db, None).current_user()


def test_garbage_token_is_unauthorized(db):
    with pytest.raises(Unauthorized):
        BearerTokenResolver(db, "not.a.jwt").current_user()


def test_token_for_unknown_user_is_unauthorized(db):
    token = create_access_token(sub=str(uuid.uuid4()))
    with pytest.raises(Unauthorized):
        BearerTokenResolver(db, token).current_user()


def test_valid_token_resolves_same_user_every_time(db, user):
    token = create_access_token(sub=str(user.id))
    resolver = BearerTokenResolver(db, token)
    assert resolver.current_user().id == user.id
    assert resolver.current_user().id == user.id


def test_expired_token(db, user, monkeypatch):
    from jose.exceptions import ExpiredSignatureError
    def fake_decode(_): raise ExpiredSignatureError()
    # resolver imports decode_token at import-time
    monkeypatch.setattr(auth_mod, "decode_token", fake_decode)
    with pytest.raises(Unauthorized) as exc:
        BearerTokenResolver(db, "whatever").current_user()
    assert exc.value.detail == "Token expired"


def test_dev_resolver_provisions_once(db):
    email = f"dev-{uuid.uuid4().hex[:8]}@example.com"
    resolver = DevUserResolver(db, email, f"dev_{uuid.uuid4().hex[:8]}")
    first = resolver.current_user()
    second = resolver.current_user()
    assert first.id == second.id
    assert first.email == email
