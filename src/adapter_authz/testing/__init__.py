"""adapter-authz testing utilities — fakes, assertions, and fixtures.

Provides test helpers for verifying adapter authorization:

- **Fakes**: ``FakeSessionAuthority`` and ``RecordingAdapter``.
- **Assertion helpers**: ``assert_headers_injected``, ``assert_invalidated``,
  ``assert_not_invalidated``.
- **Fixtures**: ``authz_registry``, ``authz_config``, ``fake_authority``,
  ``isolated_authz_state``.

Example::

    from adapter_authz import RequestInterceptor
    from adapter_authz.testing import FakeSessionAuthority, assert_invalidated

    def test_logout_on_401():
        authority = FakeSessionAuthority()
        RequestInterceptor(authority, authorizer="token").handle_response(401)
        assert_invalidated(authority)
"""

from adapter_authz.testing._assertions import (
    assert_headers_injected,
    assert_invalidated,
    assert_not_invalidated,
)
from adapter_authz.testing._fakes import FakeSessionAuthority, RecordingAdapter
from adapter_authz.testing._fixtures import (
    authz_config,
    authz_registry,
    fake_authority,
    isolated_authz_state,
)
from adapter_authz.testing._isolation import isolated_authz

__all__ = [
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
]
