"""Interceptor module for adapter-authz — request authorization and 401 handling."""

from __future__ import annotations

from adapter_authz.interceptor._adapter import AuthorizedAdapter, authorize_adapter
from adapter_authz.interceptor._interceptor import RequestInterceptor

__all__ = ["AuthorizedAdapter", "RequestInterceptor", "authorize_adapter"]
