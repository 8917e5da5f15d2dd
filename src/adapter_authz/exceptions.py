"""Exception hierarchy for adapter-authz."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "AdapterAuthzError",
    "MissingAuthorizer",
    "UnknownAuthorizerError",
]


class AdapterAuthzError(Exception):
    """Base exception for all adapter-authz errors."""


class MissingAuthorizer(AdapterAuthzError):  # noqa: N818
    """No authorizer is configured for a request interceptor.

    Raised on the request path, before any header is injected, so that a
    misconfigured adapter never sends unauthenticated traffic.

    Attributes:
        setting: Name of the setting that must be provided.

    Example::

        interceptor = RequestInterceptor(session)
        interceptor.augment_headers({})  # raises MissingAuthorizer
    """

    def __init__(self, *, setting: str = "authorizer", message: str | None = None) -> None:
        self.setting = setting
        if message is None:
            message = (
                f"RequestInterceptor is used without specifying an authorizer. "
                f"Please pass `{setting}=\"application\"` (or configure "
                f"`{setting}`) with the name of a registered authorizer."
            )
        super().__init__(message)


class UnknownAuthorizerError(AdapterAuthzError):
    """No authorizer is registered under the requested name.

    Attributes:
        name: The authorizer name that was looked up.
        available: The names registered at lookup time.
    """

    def __init__(self, *, name: str, available: Iterable[str] = ()) -> None:
        self.name = name
        self.available = sorted(available)
        super().__init__(
            f"No authorizer registered as {name!r} (registered: {self.available!r})"
        )
