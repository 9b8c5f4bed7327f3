"""Session/auth state holder.

State machine:
- LOGGED_OUT → AWAITING_LOGIN: ``require_login()`` while not logged in
- any → LOGGED_IN: ``record_login(token)``
- any → LOGGED_OUT: ``logout()``

Single writer, many readers: only the owner thread (the one that built the
manager, normally the UI thread) may mutate; any thread may read. State lives
in memory only.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Generator
from enum import Enum

import httpx

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    """Derived session states."""

    LOGGED_OUT = "logged_out"
    AWAITING_LOGIN = "awaiting_login"
    LOGGED_IN = "logged_in"


class AuthStateError(RuntimeError):
    """Auth state was mutated from a thread other than its owner."""


class AuthManager:
    """Holds login status, the login-prompt flag, and the session token."""

    def __init__(self) -> None:
        self._owner_thread_id = threading.get_ident()
        self._is_logged_in = False
        self._show_login_sheet = False
        self._token: str | None = None

    # -- reads (any thread) -------------------------------------------------

    @property
    def is_logged_in(self) -> bool:
        return self._is_logged_in

    @property
    def show_login_sheet(self) -> bool:
        """True while the app should be presenting its login UI."""
        return self._show_login_sheet

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def state(self) -> SessionState:
        if self._is_logged_in:
            return SessionState.LOGGED_IN
        if self._show_login_sheet:
            return SessionState.AWAITING_LOGIN
        return SessionState.LOGGED_OUT

    # -- writes (owner thread only) -----------------------------------------

    def require_login(self) -> None:
        """Ask for the login UI unless already logged in."""
        self._ensure_owner()
        if not self._is_logged_in:
            self._show_login_sheet = True

    def record_login(self, token: str) -> None:
        """Store ``token`` and mark the session logged in."""
        self._ensure_owner()
        self._token = token
        self._is_logged_in = True
        self._show_login_sheet = False
        logger.info("Session logged in")

    def logout(self) -> None:
        """Drop the token and mark the session logged out."""
        self._ensure_owner()
        self._token = None
        self._is_logged_in = False
        self._show_login_sheet = False
        logger.info("Session logged out")

    def dismiss_login(self) -> None:
        """Clear the login-prompt flag, e.g. when the user closes the login UI."""
        self._ensure_owner()
        self._show_login_sheet = False

    def _ensure_owner(self) -> None:
        if threading.get_ident() != self._owner_thread_id:
            raise AuthStateError("AuthManager may only be mutated from its owner thread")


_default_manager: AuthManager | None = None
_default_manager_lock = threading.Lock()


def get_auth_manager() -> AuthManager:
    """Return the process-wide AuthManager, creating it on first use.

    The first caller becomes the owner thread, so call this once at startup
    from the UI thread. The instance lives for the rest of the process.
    """
    global _default_manager
    with _default_manager_lock:
        if _default_manager is None:
            _default_manager = AuthManager()
        return _default_manager


class BearerTokenInterceptor(httpx.Auth):
    """Attach ``Authorization: Bearer <token>`` from an AuthManager.

    The manager is resolved at construction, so build the interceptor on the
    owner thread when relying on the process-wide manager. Requests only read
    it, so they may run on whichever thread runs the event loop.
    """

    def __init__(self, manager: AuthManager | None = None) -> None:
        self._manager = manager if manager is not None else get_auth_manager()

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        token = self._manager.token
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
        response = yield request
        if response.status_code == 401:
            logger.warning("Request to %s was rejected as unauthorized", request.url)
