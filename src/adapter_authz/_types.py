"""Shared protocols and type aliases for adapter-authz."""

from __future__ import annotations

from collections.abc import Callable, Mapping, MutableMapping
from typing import Any, Literal, Protocol, runtime_checkable

__all__ = [
    "AuthorizerFn",
    "HeaderCallback",
    "HeaderMap",
    "IntegrationMode",
    "RequestHandle",
    "SessionAuthority",
]

# Valid values for InterceptorConfig.integration.
IntegrationMode = Literal["before_send", "headers"]

# Receives one (header_name, header_value) pair per call.
HeaderCallback = Callable[[str, str], None]

# Authorizer strategy: credential data in, header pairs out through the callback.
AuthorizerFn = Callable[[Mapping[str, Any], HeaderCallback], None]

HeaderMap = MutableMapping[str, str]


@runtime_checkable
class SessionAuthority(Protocol):
    """Structural type for the session the interceptor authorizes against.

    Any object exposing ``is_authenticated``, ``authorize`` and
    ``invalidate`` satisfies this protocol. The interceptor reads the flag
    and calls the two methods; it never mutates session state directly.

    Example::

        class MySession:
            is_authenticated = True

            def authorize(self, authorizer_id, callback):
                callback("Authorization", f"Bearer {self.token}")

            def invalidate(self):
                self.is_authenticated = False

        assert isinstance(MySession(), SessionAuthority)
    """

    @property
    def is_authenticated(self) -> bool: ...

    def authorize(self, authorizer_id: str, callback: HeaderCallback) -> None: ...

    def invalidate(self) -> None: ...


@runtime_checkable
class RequestHandle(Protocol):
    """A live, mutable outgoing request.

    ``httpx.Request`` and ``requests.PreparedRequest`` both qualify.
    """

    @property
    def headers(self) -> HeaderMap: ...
