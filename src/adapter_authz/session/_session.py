"""AuthSession — reference SessionAuthority backed by an authorizer registry."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from adapter_authz._types import HeaderCallback
from adapter_authz.authorizers._registry import AuthorizerRegistry, get_default_registry

__all__ = ["AuthSession"]

logger = logging.getLogger("adapter_authz.session")

InvalidatedListener = Callable[[], None]
AuthenticatedListener = Callable[[Mapping[str, Any]], None]

L = TypeVar("L", bound=Callable[..., None])


class AuthSession:
    """In-memory session that satisfies the ``SessionAuthority`` protocol.

    Holds the credential data of the current user, resolves authorizers by
    name through an ``AuthorizerRegistry`` and notifies listeners when the
    session is authenticated or invalidated. Persistence is left to the
    listeners.

    State transitions are guarded by a re-entrant lock, so the session is
    safe to share between in-flight requests and listeners may call back
    into it.

    Args:
        registry: Registry used to resolve authorizer names. Defaults to
            the global registry.
        data: Initial credential data. The session starts authenticated
            when data is given.

    Example::

        session = AuthSession(data={"access_token": "abc123"})

        @session.on_invalidated
        def clear_store() -> None:
            store.clear()

        session.authorize("token", lambda name, value: print(name, value))
    """

    def __init__(
        self,
        *,
        registry: AuthorizerRegistry | None = None,
        data: Mapping[str, Any] | None = None,
    ) -> None:
        self._registry = registry if registry is not None else get_default_registry()
        self._lock = threading.RLock()
        self._data: dict[str, Any] = dict(data) if data is not None else {}
        self._authenticated = data is not None
        self._invalidated_listeners: list[InvalidatedListener] = []
        self._authenticated_listeners: list[AuthenticatedListener] = []

    @property
    def is_authenticated(self) -> bool:
        return self._authenticated

    @property
    def data(self) -> dict[str, Any]:
        """A copy of the current credential data (empty when unauthenticated)."""
        with self._lock:
            return dict(self._data)

    @property
    def registry(self) -> AuthorizerRegistry:
        return self._registry

    def on_invalidated(self, listener: L) -> L:
        """Register *listener* to run after every invalidation.

        Returns the listener so this can be used as a decorator.
        """
        self._invalidated_listeners.append(listener)
        return listener

    def on_authenticated(self, listener: L) -> L:
        """Register *listener* to run with the new data after authentication.

        Returns the listener so this can be used as a decorator.
        """
        self._authenticated_listeners.append(listener)
        return listener

    def authenticate(self, data: Mapping[str, Any]) -> None:
        """Store *data* as the session's credentials and mark it authenticated."""
        with self._lock:
            self._data = dict(data)
            self._authenticated = True
            snapshot = dict(self._data)
        logger.info("Session authenticated")
        for listener in list(self._authenticated_listeners):
            listener(snapshot)

    def invalidate(self) -> None:
        """Clear the credentials and mark the session unauthenticated.

        A no-op when the session is already unauthenticated; listeners
        only run on an actual transition.
        """
        with self._lock:
            if not self._authenticated:
                logger.debug("invalidate() called on an unauthenticated session")
                return
            self._data = {}
            self._authenticated = False
        logger.info("Session invalidated")
        for listener in list(self._invalidated_listeners):
            listener()

    def authorize(self, authorizer_id: str, callback: HeaderCallback) -> None:
        """Run the authorizer named *authorizer_id* with the current data.

        Does nothing while the session is unauthenticated, so requests go
        out without authorization headers.

        Raises:
            UnknownAuthorizerError: If *authorizer_id* is not registered.
        """
        with self._lock:
            if not self._authenticated:
                return
            snapshot = dict(self._data)
        registration = self._registry.lookup(authorizer_id)
        registration.fn(snapshot, callback)

    def __repr__(self) -> str:
        state = "authenticated" if self._authenticated else "unauthenticated"
        return f"<AuthSession {state}>"
