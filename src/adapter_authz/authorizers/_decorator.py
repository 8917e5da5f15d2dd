"""@authorizer decorator — register authorizer strategy functions."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from adapter_authz._types import AuthorizerFn
from adapter_authz.authorizers._registry import AuthorizerRegistry, get_default_registry

__all__ = ["authorizer"]

F = TypeVar("F", bound=AuthorizerFn)


def authorizer(
    name: str,
    *,
    registry: AuthorizerRegistry | None = None,
) -> Callable[[F], F]:
    """Decorator that registers an authorizer strategy under *name*.

    The decorated function receives the session's credential data and a
    header callback, and calls the callback once per header to inject.

    Args:
        name: The name sessions resolve the strategy by.
        registry: Optional custom registry. Defaults to the global registry.

    Returns:
        A decorator that registers the function and returns it unchanged.

    Example::

        @authorizer("token")
        def bearer_token(data, header):
            token = data.get("access_token")
            if token:
                header("Authorization", f"Bearer {token}")
    """

    def decorator(fn: F) -> F:
        target = registry if registry is not None else get_default_registry()
        target.register(name, fn, description=fn.__doc__ or "")
        return fn

    return decorator
