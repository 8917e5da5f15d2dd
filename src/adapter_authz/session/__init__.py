"""Session module for adapter-authz — reference session authority."""

from __future__ import annotations

from adapter_authz.session._session import AuthSession

__all__ = ["AuthSession"]
