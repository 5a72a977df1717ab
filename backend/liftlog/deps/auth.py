# liftlog/deps/auth.py
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from liftlog.actions.context import ActionContext
from liftlog.auth import BearerTokenResolver, DevUserResolver, SessionResolver
from liftlog.db import get_db
from liftlog.models import User
from liftlog.settings import get_settings
from liftlog.views import StaleViewTracker

# Exposes Bearer auth in Swagger; login endpoint issues the token
bearer = HTTPBearer(auto_error=False)

def get_session_resolver(
    db: Session = Depends(get_db),
    creds: HTTPAuthorizationCredentials | None = Depends(bearer),
) -> SessionResolver:
    if creds is not None and creds.credentials:
        return BearerTokenResolver(db, creds.credentials)
    s = get_settings()
    if s.DEV_USER_EMAIL:
        return DevUserResolver(db, s.DEV_USER_EMAIL, s.DEV_USERNAME)
    return BearerTokenResolver(db, None)

def get_current_user(resolver: SessionResolver = Depends(get_session_resolver)) -> User:
    # Unauthorized raised here becomes a 401 via the app's exception handler
    return resolver.current_user()

def get_view_tracker(request: Request) -> StaleViewTracker:
    return request.app.state.views

def get_action_context(
    db: Session = Depends(get_db),
    resolver: SessionResolver = Depends(get_session_resolver),
    views: StaleViewTracker = Depends(get_view_tracker),
) -> ActionContext:
    return ActionContext(db=db, auth=resolver, views=views)
