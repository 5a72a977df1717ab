"""Invalidation of cached views after a mutation.

The action layer only knows paths ("/dashboard", "/dashboard/workout/<id>");
whatever renders or caches those paths subscribes here.
"""
from __future__ import annotations
import logging
from typing import Callable, Protocol

log = logging.getLogger(__name__)


class ViewInvalidator(Protocol):
    def revalidate(self, path: str) -> None: ...


def dashboard_path() -> str:
    return "/dashboard"


def workout_path(workout_id) -> str:
    return f"/dashboard/workout/{workout_id}"


class StaleViewTracker:
    """Records stale paths and fans them out to listeners."""

    def __init__(self) -> None:
        self._stale: set[str] = set()
        self._listeners: list[Callable[[str], None]] = []

    def subscribe(self, listener: Callable[[str], None]) -> None:
        self._listeners.append(listener)

    def revalidate(self, path: str) -> None:
        self._stale.add(path)
        log.debug("view stale: %s", path)
        for listener in self._listeners:
            listener(path)

    def is_stale(self, path: str) -> bool:
        return path in self._stale

    @property
    def stale_paths(self) -> frozenset[str]:
        return frozenset(self._stale)
