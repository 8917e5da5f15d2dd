"""httpx event hooks and auth flow driven by a RequestInterceptor."""

from __future__ import annotations

from collections.abc import Callable, Generator
from typing import Any

import httpx

from adapter_authz.interceptor._interceptor import RequestInterceptor

__all__ = ["InterceptorAuth", "install_httpx_interceptor"]


def _build_request_hook(interceptor: RequestInterceptor) -> Callable[[httpx.Request], None]:
    """Build the request event hook for the interceptor's integration shape."""
    if interceptor.integration == "before_send":
        before_send = interceptor.augment_request_options({})["before_send"]

        def authorize_request(request: httpx.Request) -> None:
            before_send(request)

    else:

        def authorize_request(request: httpx.Request) -> None:
            request.headers.update(interceptor.augment_headers())

    return authorize_request


def _build_response_hook(interceptor: RequestInterceptor) -> Callable[[httpx.Response], None]:
    def check_response(response: httpx.Response) -> None:
        interceptor.handle_response(response.status_code)

    return check_response


def install_httpx_interceptor(
    client: httpx.Client | httpx.AsyncClient,
    interceptor: RequestInterceptor,
) -> None:
    """Install authorization event hooks on an httpx client.

    The request hook and the response hook are placed *before* any hooks
    already registered on the client, so existing request hooks observe
    the injected headers and existing response hooks run after the
    session has been invalidated.

    In ``"before_send"`` mode the request hook is the interceptor's
    composed pre-send callback applied to the live ``httpx.Request``; in
    ``"headers"`` mode the interceptor's header mapping is merged into
    ``request.headers``.

    Works with both ``httpx.Client`` and ``httpx.AsyncClient``.

    Args:
        client: The client to authorize.
        interceptor: The interceptor providing headers and 401 handling.

    Raises:
        MissingAuthorizer: If the interceptor has no authorizer configured.

    Example::

        client = httpx.Client(base_url="https://api.example.com")
        install_httpx_interceptor(
            client,
            RequestInterceptor(session, authorizer="token"),
        )
        client.get("/posts")  # sent with an Authorization header
    """
    interceptor.require_authorizer()

    request_hook = _build_request_hook(interceptor)
    response_hook = _build_response_hook(interceptor)

    hooks: list[Any]
    if isinstance(client, httpx.AsyncClient):

        async def async_request_hook(request: httpx.Request) -> None:
            request_hook(request)

        async def async_response_hook(response: httpx.Response) -> None:
            response_hook(response)

        hooks = [async_request_hook, async_response_hook]
    else:
        hooks = [request_hook, response_hook]

    existing = client.event_hooks
    client.event_hooks = {
        "request": [hooks[0], *existing.get("request", [])],
        "response": [hooks[1], *existing.get("response", [])],
    }


class InterceptorAuth(httpx.Auth):
    """``httpx.Auth`` flow that authorizes each request through an interceptor.

    Follows the interceptor's integration shape: in ``"before_send"`` mode
    the composed pre-send callback is applied to the live request, in
    ``"headers"`` mode the header mapping is merged into it. The request is
    then sent and the response status handed to the interceptor. Usable
    with both sync and async clients, per client or per request.

    Example::

        auth = InterceptorAuth(RequestInterceptor(session, authorizer="token"))
        httpx.get("https://api.example.com/posts", auth=auth)
    """

    def __init__(self, interceptor: RequestInterceptor) -> None:
        self._interceptor = interceptor

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        _build_request_hook(self._interceptor)(request)
        response = yield request
        self._interceptor.handle_response(response.status_code)
