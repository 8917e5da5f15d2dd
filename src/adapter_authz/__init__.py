"""adapter-authz — Session authorization for data-access adapters.

Injects authorization headers produced by a named authorizer into every
outgoing request, and invalidates the session when an authenticated
request comes back 401. Works by composition around an existing adapter,
or through the httpx and requests integrations.

Example::

    from adapter_authz import AuthSession, RequestInterceptor, authorizer

    @authorizer("token")
    def bearer_token(data, header):
        header("Authorization", f"Bearer {data['access_token']}")

    session = AuthSession(data={"access_token": "abc123"})
    interceptor = RequestInterceptor(session, authorizer="token")

    interceptor.augment_headers({"Accept": "application/json"})
    # {"Accept": "application/json", "Authorization": "Bearer abc123"}
"""

from importlib.metadata import PackageNotFoundError, version

from adapter_authz._types import HeaderCallback, SessionAuthority
from adapter_authz.authorizers._decorator import authorizer
from adapter_authz.authorizers._registry import AuthorizerRegistry
from adapter_authz.config._config import InterceptorConfig, configure
from adapter_authz.exceptions import (
    AdapterAuthzError,
    MissingAuthorizer,
    UnknownAuthorizerError,
)
from adapter_authz.interceptor._adapter import AuthorizedAdapter, authorize_adapter
from adapter_authz.interceptor._interceptor import RequestInterceptor
from adapter_authz.session._session import AuthSession

try:
    __version__ = version("adapter-authz")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
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
]
