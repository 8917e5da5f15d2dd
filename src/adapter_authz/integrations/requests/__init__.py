"""requests integration for adapter-authz."""

from __future__ import annotations

try:
    import requests as _requests_check  # noqa: F401  # pyright: ignore[reportUnusedImport]

    del _requests_check
except ImportError as exc:
    raise ImportError(
        "requests integration requires requests. "
        "Install it with: pip install adapter-authz[requests]"
    ) from exc

from adapter_authz.integrations.requests._auth import InterceptorAuth, install_requests_interceptor

__all__ = ["InterceptorAuth", "install_requests_interceptor"]
