"""Route guards over the auth state.

Guards only decide what to render; the server authorises every request.
"""

import threading
from collections.abc import Callable
from dataclasses import dataclass

from gatherguru_client.auth import AuthState, SessionContext
from gatherguru_client.roles import DASHBOARD_PATHS, LOGIN_PATHS, Role


@dataclass(frozen=True)
class GuardDecision:
    allowed: bool
    redirect_to: str | None = None


ALLOW = GuardDecision(allowed=True)


def _require(state: AuthState, role: Role, redirect_to: str) -> GuardDecision:
    if state.is_authenticated and state.role is role:
        return ALLOW
    return GuardDecision(allowed=False, redirect_to=redirect_to)


def admin_guard(session: SessionContext) -> GuardDecision:
    return _require(session.state, Role.ADMIN, "/admin-login")


def organizer_guard(session: SessionContext) -> GuardDecision:
    return _require(session.state, Role.ORGANIZER, "/organizer/login")


def user_guard(session: SessionContext) -> GuardDecision:
    session.validate_session()
    return _require(session.state, Role.USER, "/")


def auth_page_guard(session: SessionContext) -> GuardDecision:
    """Keep signed-in users away from login and signup pages."""
    state = session.state
    if state.is_authenticated and state.role is not None:
        return GuardDecision(allowed=False, redirect_to=DASHBOARD_PATHS[state.role])
    return ALLOW


def is_login_path(path: str) -> bool:
    return path.rstrip("/") in LOGIN_PATHS


class Navigator:
    """Tracks the current location for code outside a browser."""

    def __init__(self, path: str = "/") -> None:
        self._lock = threading.Lock()
        self._path = path
        self.history: list[str] = [path]

    @property
    def current_path(self) -> str:
        return self._path

    def navigate(self, path: str) -> None:
        with self._lock:
            self._path = path
            self.history.append(path)

    def navigate_unless(self, predicate: Callable[[str], bool], path: str) -> bool:
        """Navigate unless ``predicate`` holds for the current path, atomically."""
        with self._lock:
            if predicate(self._path):
                return False
            self._path = path
            self.history.append(path)
            return True

    def follow(self, decision: GuardDecision) -> bool:
        """Apply a guard decision; True when the route may render."""
        if not decision.allowed and decision.redirect_to:
            self.navigate(decision.redirect_to)
        return decision.allowed
