"""httpx integration for adapter-authz."""

from __future__ import annotations

try:
    import httpx as _httpx_check  # noqa: F401  # pyright: ignore[reportUnusedImport]

    del _httpx_check
except ImportError as exc:
    raise ImportError(
        "httpx integration requires httpx. Install it with: pip install adapter-authz[httpx]"
    ) from exc

from adapter_authz.integrations.httpx._hooks import InterceptorAuth, install_httpx_interceptor

__all__ = ["InterceptorAuth", "install_httpx_interceptor"]
