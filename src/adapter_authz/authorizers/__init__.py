"""Authorizer registration and lookup."""

from adapter_authz.authorizers._base import AuthorizerRegistration
from adapter_authz.authorizers._decorator import authorizer
from adapter_authz.authorizers._registry import AuthorizerRegistry, get_default_registry

__all__ = [
    "AuthorizerRegistration",
    "AuthorizerRegistry",
    "authorizer",
    "get_default_registry",
]
