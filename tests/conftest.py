"""Shared test fixtures for adapter-authz tests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from adapter_authz._types import HeaderCallback
from adapter_authz.authorizers._registry import AuthorizerRegistry
from adapter_authz.config._config import _reset_global_config
from adapter_authz.session._session import AuthSession

# Make the plugin fixtures available without relying on the installed entry point.
from adapter_authz.testing._fixtures import (  # noqa: F401
    authz_config,
    authz_registry,
    fake_authority,
    isolated_authz_state,
)

# ---------------------------------------------------------------------------
# Authorizer strategies used across the suite
# ---------------------------------------------------------------------------


def bearer_token(data: Mapping[str, Any], header: HeaderCallback) -> None:
    """Bearer token from ``access_token``."""
    token = data.get("access_token")
    if token:
        header("Authorization", f"Bearer {token}")


def token_and_email(data: Mapping[str, Any], header: HeaderCallback) -> None:
    """Devise-style token plus user email."""
    header("X-User-Token", str(data["token"]))
    header("X-User-Email", str(data["email"]))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clean_global_config():
    """Every test starts and ends with the default global config."""
    _reset_global_config()
    yield
    _reset_global_config()


@pytest.fixture()
def registry() -> AuthorizerRegistry:
    """Registry with ``token`` and ``devise`` authorizers."""
    reg = AuthorizerRegistry()
    reg.register("token", bearer_token, description=bearer_token.__doc__ or "")
    reg.register("devise", token_and_email, description=token_and_email.__doc__ or "")
    return reg


@pytest.fixture()
def auth_session(registry: AuthorizerRegistry) -> AuthSession:
    """An authenticated session holding a bearer token and devise credentials."""
    return AuthSession(
        registry=registry,
        data={"access_token": "abc123", "token": "t0k3n", "email": "alice@example.com"},
    )


@pytest.fixture()
def anonymous_session(registry: AuthorizerRegistry) -> AuthSession:
    """A session that has never been authenticated."""
    return AuthSession(registry=registry)
