"""AuthorizerRegistration dataclass — metadata for a registered authorizer."""

from __future__ import annotations

from dataclasses import dataclass

from adapter_authz._types import AuthorizerFn

__all__ = ["AuthorizerRegistration"]


@dataclass(frozen=True, slots=True)
class AuthorizerRegistration:
    """A single registered authorizer strategy with its metadata.

    Attributes:
        name: The name the strategy is resolved by (e.g., ``"token"``).
        fn: Callable taking the session's credential data and a header
            callback; calls the callback once per header to inject.
        description: Human-readable description (from docstring).
    """

    name: str
    fn: AuthorizerFn
    description: str
