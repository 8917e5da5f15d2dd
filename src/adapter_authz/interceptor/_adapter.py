"""AuthorizedAdapter — wraps a host adapter's base behavior by composition."""

from __future__ import annotations

from typing import Any

from adapter_authz._types import SessionAuthority
from adapter_authz.config._config import InterceptorConfig
from adapter_authz.interceptor._interceptor import RequestInterceptor

__all__ = ["AuthorizedAdapter", "authorize_adapter"]


class AuthorizedAdapter:
    """Adds authorization to a host adapter without subclassing it.

    Holds the base adapter and a ``RequestInterceptor``, and exposes the
    same capability interface as the base: each method calls the base
    behavior and then applies the interceptor. Only the integration shape
    selected by ``interceptor.config.integration`` is augmented; the other
    one passes the base result through unchanged.

    Base methods that do not exist are treated as returning an empty
    mapping (``request_options``, ``headers_for_request``) or ``None``
    (``handle_response``). Every other attribute is looked up on the base.

    Example::

        class ApiAdapter:
            def headers_for_request(self):
                return {"Accept": "application/json"}

            def handle_response(self, status, headers, payload):
                return payload

        adapter = AuthorizedAdapter(ApiAdapter(), interceptor)
        adapter.headers_for_request()
        # {"Accept": "application/json", "Authorization": "Bearer abc123"}
    """

    def __init__(self, base: Any, interceptor: RequestInterceptor) -> None:
        self._base = base
        self._interceptor = interceptor

    @property
    def base(self) -> Any:
        return self._base

    @property
    def interceptor(self) -> RequestInterceptor:
        return self._interceptor

    def request_options(self, *args: Any, **kwargs: Any) -> Any:
        base_method = getattr(self._base, "request_options", None)
        options = base_method(*args, **kwargs) if base_method is not None else {}
        if self._interceptor.integration != "before_send":
            return options
        return self._interceptor.augment_request_options(options)

    def headers_for_request(self, *args: Any, **kwargs: Any) -> Any:
        base_method = getattr(self._base, "headers_for_request", None)
        headers = base_method(*args, **kwargs) if base_method is not None else {}
        if self._interceptor.integration != "headers":
            return headers
        return self._interceptor.augment_headers(headers)

    def handle_response(self, status: int, *args: Any, **kwargs: Any) -> Any:
        self._interceptor.handle_response(status)
        base_method = getattr(self._base, "handle_response", None)
        if base_method is None:
            return None
        return base_method(status, *args, **kwargs)

    def __getattr__(self, name: str) -> Any:
        # Only reached for attributes not defined on the wrapper itself.
        if name.startswith("__") or name in ("_base", "_interceptor"):
            raise AttributeError(name)
        return getattr(self._base, name)

    def __repr__(self) -> str:
        return f"AuthorizedAdapter({self._base!r}, {self._interceptor!r})"


def authorize_adapter(
    base: Any,
    authority: SessionAuthority,
    *,
    authorizer: str | None = None,
    config: InterceptorConfig | None = None,
) -> AuthorizedAdapter:
    """Wrap *base* so its requests are authorized against *authority*.

    Convenience factory that creates a ``RequestInterceptor`` and the
    ``AuthorizedAdapter`` around *base* in one step.

    Args:
        base: The host adapter providing the base behavior.
        authority: The session to authorize against.
        authorizer: Name of the authorizer to use.
        config: Configuration. Defaults to the global config.

    Example::

        adapter = authorize_adapter(ApiAdapter(), session, authorizer="token")
    """
    interceptor = RequestInterceptor(authority, authorizer=authorizer, config=config)
    return AuthorizedAdapter(base, interceptor)
