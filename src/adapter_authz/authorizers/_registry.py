"""AuthorizerRegistry — stores and resolves named authorizer strategies."""

from __future__ import annotations

from adapter_authz._types import AuthorizerFn
from adapter_authz.authorizers._base import AuthorizerRegistration
from adapter_authz.exceptions import UnknownAuthorizerError

__all__ = ["AuthorizerRegistry", "get_default_registry"]


class AuthorizerRegistry:
    """Registry that maps authorizer names to strategy functions.

    Thread-safe for reads after startup.

    Example::

        registry = AuthorizerRegistry()
        registry.register("token", bearer_token, description="")
        registration = registry.lookup("token")
    """

    def __init__(self) -> None:
        self._authorizers: dict[str, AuthorizerRegistration] = {}

    def register(
        self,
        name: str,
        fn: AuthorizerFn,
        *,
        description: str = "",
    ) -> None:
        """Register an authorizer strategy under *name*.

        Registering a name twice replaces the earlier strategy.

        Args:
            name: The name sessions resolve the strategy by.
            fn: A callable ``fn(data, header)`` that calls
                ``header(name, value)`` for each header to inject.
            description: Description of the strategy (typically the docstring).

        Example::

            registry.register(
                "token",
                lambda data, header: header("Authorization", f"Bearer {data['token']}"),
                description="Bearer token from the session",
            )
        """
        if not name:
            raise ValueError("authorizer name must be a non-empty string")
        self._authorizers[name] = AuthorizerRegistration(
            name=name,
            fn=fn,
            description=description,
        )

    def lookup(self, name: str) -> AuthorizerRegistration:
        """Resolve the strategy registered under *name*.

        Raises:
            UnknownAuthorizerError: If nothing is registered under *name*.

        Example::

            registration = registry.lookup("token")
            registration.fn(session_data, header_callback)
        """
        try:
            return self._authorizers[name]
        except KeyError:
            raise UnknownAuthorizerError(name=name, available=self._authorizers) from None

    def has_authorizer(self, name: str) -> bool:
        """Check whether a strategy is registered under *name*."""
        return name in self._authorizers

    def names(self) -> list[str]:
        """Return the registered names, sorted."""
        return sorted(self._authorizers)

    def clear(self) -> None:
        """Remove all registered authorizers.

        Primarily useful in test teardown to reset the registry state
        between tests.
        """
        self._authorizers.clear()


# Module-level default registry (singleton).
_default_registry = AuthorizerRegistry()


def get_default_registry() -> AuthorizerRegistry:
    """Return the global default (singleton) authorizer registry.

    This is the registry used by ``@authorizer`` and ``AuthSession`` when
    no explicit registry is provided.

    Example::

        registry = get_default_registry()
        registry.clear()  # reset between tests
    """
    return _default_registry
