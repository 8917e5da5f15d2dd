"""Configuration module for adapter-authz."""

from __future__ import annotations

from adapter_authz.config._config import InterceptorConfig, configure, get_global_config

__all__ = ["InterceptorConfig", "configure", "get_global_config"]
