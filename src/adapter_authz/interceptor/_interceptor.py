"""RequestInterceptor — authorizes outgoing requests and watches for 401s."""

from __future__ import annotations

from collections.abc import Callable, Mapping, MutableMapping
from typing import Any

from adapter_authz._audit import (
    log_anonymous_unauthorized,
    log_header_injection,
    log_invalidation,
)
from adapter_authz._types import HeaderMap, IntegrationMode, RequestHandle, SessionAuthority
from adapter_authz.config._config import InterceptorConfig, get_global_config
from adapter_authz.exceptions import MissingAuthorizer

__all__ = ["RequestInterceptor"]

_UNAUTHORIZED = 401

BeforeSend = Callable[[RequestHandle], Any]


class RequestInterceptor:
    """Injects authorization headers and invalidates the session on 401.

    The interceptor holds no per-request state: every request re-derives
    its headers from the session at the time it is sent. It offers two
    alternative integration points for the outgoing side (a host uses one
    of them, selected by ``config.integration``) and one for responses.

    Args:
        authority: The session to authorize against. Must satisfy
            ``SessionAuthority``.
        authorizer: Name of the authorizer to use. Overrides the
            ``authorizer`` of *config*.
        config: Configuration to use. Defaults to the global config.

    Example::

        interceptor = RequestInterceptor(session, authorizer="token")

        headers = interceptor.augment_headers({"Accept": "application/json"})
        # {"Accept": "application/json", "Authorization": "Bearer abc123"}

        interceptor.handle_response(401)  # invalidates the session
    """

    def __init__(
        self,
        authority: SessionAuthority,
        *,
        authorizer: str | None = None,
        config: InterceptorConfig | None = None,
    ) -> None:
        base_config = config if config is not None else get_global_config()
        self._config = base_config.merge(authorizer=authorizer)
        self._authority = authority

    @property
    def authority(self) -> SessionAuthority:
        return self._authority

    @property
    def config(self) -> InterceptorConfig:
        return self._config

    @property
    def integration(self) -> IntegrationMode:
        return self._config.integration

    def require_authorizer(self) -> str:
        """Return the configured authorizer name.

        An empty or whitespace-only name counts as missing.

        Raises:
            MissingAuthorizer: If no authorizer is configured.
        """
        authorizer = self._config.authorizer
        if not authorizer or not authorizer.strip():
            raise MissingAuthorizer()
        return authorizer

    def _inject(self, authorizer: str, target: HeaderMap) -> None:
        injected: list[str] = []

        def set_header(name: str, value: str) -> None:
            # Header names are case-insensitive; drop any differently-cased copy.
            lowered = name.lower()
            for key in [k for k in target if k != name and k.lower() == lowered]:
                del target[key]
            target[name] = value
            injected.append(name)

        self._authority.authorize(authorizer, set_header)

        if self._config.log_authorization:
            log_header_injection(
                authorizer=authorizer,
                integration=self._config.integration,
                header_names=injected,
            )

    def augment_request_options(
        self,
        options: MutableMapping[str, Any] | None,
        *,
        hook_key: str = "before_send",
    ) -> MutableMapping[str, Any]:
        """Compose an authorizing pre-send callback into *options*.

        The callback already stored under *hook_key* (if any) is wrapped,
        not replaced: the composed callback first writes the authorization
        headers onto the live request handle, then calls the previous
        callback with the same handle. It returns the previous callback's
        result when that is not ``None``, else the handle, so it fits slots
        whose callables must return the request.

        Args:
            options: Request options produced by the base behavior.
                ``None`` is treated as a new empty mapping.
            hook_key: Key of the pre-send callback slot.

        Returns:
            The same options object with the composed callback installed.

        Raises:
            MissingAuthorizer: If no authorizer is configured. Raised
                before *options* is touched.
        """
        authorizer = self.require_authorizer()
        if options is None:
            options = {}
        previous: BeforeSend | None = options.get(hook_key)

        def before_send(handle: RequestHandle) -> Any:
            self._inject(authorizer, handle.headers)
            if previous is not None:
                result = previous(handle)
                if result is not None:
                    return result
            return handle

        options[hook_key] = before_send
        return options

    def augment_headers(self, base_headers: Mapping[str, str] | None = None) -> dict[str, str]:
        """Return *base_headers* merged with the authorization headers.

        Authorization headers overwrite colliding keys, compared
        case-insensitively. *base_headers* is copied, never mutated.

        Raises:
            MissingAuthorizer: If no authorizer is configured.
        """
        authorizer = self.require_authorizer()
        headers: dict[str, str] = dict(base_headers) if base_headers is not None else {}
        self._inject(authorizer, headers)
        return headers

    def handle_response(self, status: int) -> bool:
        """Invalidate the session if *status* is 401 while authenticated.

        Returns:
            ``True`` if the session was invalidated.
        """
        if status != _UNAUTHORIZED or not self._config.invalidate_on_unauthorized:
            return False
        if not self._authority.is_authenticated:
            log_anonymous_unauthorized(status=status)
            return False
        log_invalidation(status=status)
        self._authority.invalidate()
        return True

    def __repr__(self) -> str:
        return (
            f"RequestInterceptor(authorizer={self._config.authorizer!r}, "
            f"integration={self._config.integration!r})"
        )
