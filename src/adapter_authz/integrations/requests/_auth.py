"""requests auth handler and response hook driven by a RequestInterceptor."""

from __future__ import annotations

from typing import Any

import requests
from requests.auth import AuthBase, HTTPBasicAuth

from adapter_authz.interceptor._interceptor import RequestInterceptor

__all__ = ["InterceptorAuth", "install_requests_interceptor"]

WrappedAuth = AuthBase | tuple[str, str] | None


def _coerce_auth(auth: WrappedAuth) -> AuthBase | None:
    # requests turns (user, password) tuples into basic auth when preparing.
    if isinstance(auth, tuple):
        return HTTPBasicAuth(*auth)
    return auth


class InterceptorAuth(AuthBase):
    """Authorizes each prepared request through an interceptor.

    Wraps the auth handler that would otherwise run (*wrapped*). In
    ``"before_send"`` mode the interceptor composes it as the pre-existing
    pre-send callback: authorization headers are injected first, then the
    wrapped handler runs and sees them. In ``"headers"`` mode the wrapped
    handler runs first and the interceptor's header mapping is merged on
    top, overwriting collisions.

    Args:
        interceptor: The interceptor providing headers.
        wrapped: The auth handler being replaced, if any.

    Raises:
        MissingAuthorizer: If the interceptor has no authorizer configured.

    Example::

        auth = InterceptorAuth(RequestInterceptor(session, authorizer="token"))
        requests.get("https://api.example.com/posts", auth=auth)
    """

    def __init__(self, interceptor: RequestInterceptor, wrapped: WrappedAuth = None) -> None:
        self._interceptor = interceptor
        self._wrapped = _coerce_auth(wrapped)
        self._before_send: Any = None
        self.response_hook: Any = None
        if interceptor.integration == "before_send":
            options = interceptor.augment_request_options({"auth": self._wrapped}, hook_key="auth")
            self._before_send = options["auth"]
        else:
            interceptor.require_authorizer()

    @property
    def wrapped(self) -> AuthBase | None:
        return self._wrapped

    def __call__(self, r: requests.PreparedRequest) -> requests.PreparedRequest:
        if self._before_send is not None:
            return self._before_send(r)
        if self._wrapped is not None:
            r = self._wrapped(r)
        r.headers.update(self._interceptor.augment_headers())
        return r


def install_requests_interceptor(
    session: requests.Session,
    interceptor: RequestInterceptor,
) -> None:
    """Authorize every request sent through a ``requests.Session``.

    Replaces ``session.auth`` with an ``InterceptorAuth`` wrapping the
    previous value, and inserts a response hook at the front of
    ``session.hooks["response"]`` that hands each status to the
    interceptor before any existing response hook runs.

    An ``auth=`` argument passed to a single request takes precedence over
    ``session.auth`` in requests, which bypasses the injected headers for
    that request; the response hook still runs.

    Installing again on the same session replaces the earlier interceptor:
    the original auth stays wrapped once and only the new response hook
    remains.

    Args:
        session: The session to authorize.
        interceptor: The interceptor providing headers and 401 handling.

    Example::

        http = requests.Session()
        install_requests_interceptor(
            http,
            RequestInterceptor(session, authorizer="token"),
        )
        http.get("https://api.example.com/posts")
    """
    previous = session.auth
    hooks = session.hooks.setdefault("response", [])
    if isinstance(previous, InterceptorAuth):
        auth = InterceptorAuth(interceptor, wrapped=previous.wrapped)
        hooks[:] = [hook for hook in hooks if hook is not previous.response_hook]
    else:
        auth = InterceptorAuth(interceptor, wrapped=previous)

    def check_response(response: requests.Response, *args: Any, **kwargs: Any) -> None:
        interceptor.handle_response(response.status_code)

    auth.response_hook = check_response
    session.auth = auth
    hooks.insert(0, check_response)
