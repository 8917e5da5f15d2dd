"""Tests for public API surface — verifies all __init__.py re-exports.

Every public symbol must be importable from its documented location, and
every ``__all__`` list must be complete and match the actual module
attributes.
"""

from __future__ import annotations

import importlib
import inspect

import pytest

# ---------------------------------------------------------------------------
# Top-level: adapter_authz
# ---------------------------------------------------------------------------


class TestTopLevelExports:
    """Verify adapter_authz top-level exports."""

    EXPECTED = {
        "__version__",
        "AdapterAuthzError",
        "AuthSession",
        "AuthorizedAdapter",
        "AuthorizerRegistry",
        "HeaderCallback",
        "InterceptorConfig",
        "MissingAuthorizer",
        "RequestInterceptor",
        "SessionAuthority",
        "UnknownAuthorizerError",
        "authorize_adapter",
        "authorizer",
        "configure",
    }

    def test_callable_symbols_are_callable(self) -> None:
        from adapter_authz import authorize_adapter, authorizer, configure

        for sym in [authorize_adapter, authorizer, configure]:
            assert callable(sym), f"{sym!r} should be callable"

    def test_class_symbols_are_classes(self) -> None:
        from adapter_authz import (
            AdapterAuthzError,
            AuthorizedAdapter,
            AuthorizerRegistry,
            AuthSession,
            InterceptorConfig,
            MissingAuthorizer,
            RequestInterceptor,
            UnknownAuthorizerError,
        )

        for sym in [
            AdapterAuthzError,
            AuthSession,
            AuthorizedAdapter,
            AuthorizerRegistry,
            InterceptorConfig,
            MissingAuthorizer,
            RequestInterceptor,
            UnknownAuthorizerError,
        ]:
            assert inspect.isclass(sym), f"{sym!r} should be a class"

    def test_session_authority_is_protocol(self) -> None:
        from adapter_authz import AuthSession, SessionAuthority

        assert isinstance(AuthSession(), SessionAuthority)

    def test_version_is_string(self) -> None:
        from adapter_authz import __version__

        assert isinstance(__version__, str)
        assert __version__

    def test_all_is_complete(self) -> None:
        import adapter_authz

        actual = set(adapter_authz.__all__)
        assert actual == self.EXPECTED, (
            f"__all__ mismatch.\n"
            f"  Missing: {self.EXPECTED - actual}\n"
            f"  Extra:   {actual - self.EXPECTED}"
        )

    def test_all_matches_module_attrs(self) -> None:
        import adapter_authz

        for name in adapter_authz.__all__:
            assert hasattr(adapter_authz, name), (
                f"adapter_authz.__all__ lists {name!r} but it is not an attribute"
            )


# ---------------------------------------------------------------------------
# Sub-packages
# ---------------------------------------------------------------------------


SUBPACKAGE_EXPORTS = {
    "adapter_authz.authorizers": {
        "AuthorizerRegistration",
        "AuthorizerRegistry",
        "authorizer",
        "get_default_registry",
    },
    "adapter_authz.config": {"InterceptorConfig", "configure", "get_global_config"},
    "adapter_authz.interceptor": {"AuthorizedAdapter", "RequestInterceptor", "authorize_adapter"},
    "adapter_authz.session": {"AuthSession"},
    "adapter_authz.exceptions": {
        "AdapterAuthzError",
        "MissingAuthorizer",
        "UnknownAuthorizerError",
    },
    "adapter_authz.testing": {
        "FakeSessionAuthority",
        "RecordingAdapter",
        "assert_headers_injected",
        "assert_invalidated",
        "assert_not_invalidated",
        "authz_config",
        "authz_registry",
        "fake_authority",
        "isolated_authz",
        "isolated_authz_state",
    },
    "adapter_authz.integrations.httpx": {"InterceptorAuth", "install_httpx_interceptor"},
    "adapter_authz.integrations.requests": {
        "InterceptorAuth",
        "install_requests_interceptor",
    },
}


class TestSubpackageExports:
    """Verify every sub-package's ``__all__``."""

    @pytest.mark.parametrize("module_name", sorted(SUBPACKAGE_EXPORTS))
    def test_all_is_complete(self, module_name: str) -> None:
        module = importlib.import_module(module_name)
        expected = SUBPACKAGE_EXPORTS[module_name]
        actual = set(module.__all__)
        assert actual == expected, (
            f"{module_name} __all__ mismatch.\n"
            f"  Missing: {expected - actual}\n"
            f"  Extra:   {actual - expected}"
        )

    @pytest.mark.parametrize("module_name", sorted(SUBPACKAGE_EXPORTS))
    def test_all_matches_module_attrs(self, module_name: str) -> None:
        module = importlib.import_module(module_name)
        for name in module.__all__:
            assert hasattr(module, name), (
                f"{module_name}.__all__ lists {name!r} but it is not an attribute"
            )

    def test_integration_auth_classes_differ(self) -> None:
        from adapter_authz.integrations.httpx import InterceptorAuth as HttpxAuth
        from adapter_authz.integrations.requests import InterceptorAuth as RequestsAuth

        assert HttpxAuth is not RequestsAuth
