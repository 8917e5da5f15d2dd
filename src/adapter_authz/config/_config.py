"""Layered configuration for adapter-authz."""

from __future__ import annotations

from dataclasses import dataclass

from adapter_authz._types import IntegrationMode

__all__ = [
    "InterceptorConfig",
    "configure",
    "get_global_config",
    "_reset_global_config",
    "_set_global_config",
]

_VALID_INTEGRATIONS: set[str] = {"before_send", "headers"}


@dataclass(frozen=True, slots=True)
class InterceptorConfig:
    """Layered configuration with merge semantics (global -> interceptor).

    Attributes:
        authorizer: Name of the authorizer used to authorize requests.
            Required before the first request; checked on every request
            path rather than at construction.
        integration: Which host integration shape is active.
            ``"before_send"`` composes a pre-send callback on the request
            options. ``"headers"`` merges into a finished header mapping.
        invalidate_on_unauthorized: Invalidate the session on a 401
            response while authenticated.
        log_authorization: Audit-log every header injection.

    Example::

        config = InterceptorConfig(authorizer="token")
        merged = config.merge(integration="before_send")
    """

    authorizer: str | None = None
    integration: IntegrationMode = "headers"
    invalidate_on_unauthorized: bool = True
    log_authorization: bool = False

    def __post_init__(self) -> None:
        if self.integration not in _VALID_INTEGRATIONS:
            raise ValueError(
                f"integration must be one of {_VALID_INTEGRATIONS!r}, got {self.integration!r}"
            )

    def merge(
        self,
        *,
        authorizer: str | None = None,
        integration: IntegrationMode | None = None,
        invalidate_on_unauthorized: bool | None = None,
        log_authorization: bool | None = None,
    ) -> InterceptorConfig:
        """Return a new config with non-None overrides applied.

        Args:
            authorizer: Override for authorizer (ignored if None).
            integration: Override for integration (ignored if None).
            invalidate_on_unauthorized: Override for invalidate_on_unauthorized
                (ignored if None).
            log_authorization: Override for log_authorization (ignored if None).

        Returns:
            A new ``InterceptorConfig`` with overrides merged.

        Example::

            base = InterceptorConfig(authorizer="token")
            adapter_cfg = base.merge(integration="before_send")
        """
        return InterceptorConfig(
            authorizer=authorizer if authorizer is not None else self.authorizer,
            integration=integration if integration is not None else self.integration,
            invalidate_on_unauthorized=(
                invalidate_on_unauthorized
                if invalidate_on_unauthorized is not None
                else self.invalidate_on_unauthorized
            ),
            log_authorization=(
                log_authorization if log_authorization is not None else self.log_authorization
            ),
        )


# ---------------------------------------------------------------------------
# Global configuration singleton
# ---------------------------------------------------------------------------

_global_config = InterceptorConfig()


def get_global_config() -> InterceptorConfig:
    """Return the current global configuration.

    Example::

        config = get_global_config()
        print(config.integration)  # "headers"
    """
    return _global_config


def configure(
    *,
    authorizer: str | None = None,
    integration: IntegrationMode | None = None,
    invalidate_on_unauthorized: bool | None = None,
    log_authorization: bool | None = None,
) -> InterceptorConfig:
    """Update the global configuration by merging overrides.

    Only non-None values are applied. Returns the new global config.

    Args:
        authorizer: Default authorizer name for interceptors built
            without one.
        integration: Set to ``"before_send"`` or ``"headers"``.
        invalidate_on_unauthorized: Enable/disable invalidation on 401.
        log_authorization: Enable/disable audit logging of header injection.

    Returns:
        The updated global ``InterceptorConfig``.

    Example::

        configure(authorizer="token", log_authorization=True)
    """
    global _global_config
    _global_config = _global_config.merge(
        authorizer=authorizer,
        integration=integration,
        invalidate_on_unauthorized=invalidate_on_unauthorized,
        log_authorization=log_authorization,
    )
    return _global_config


def _set_global_config(cfg: InterceptorConfig) -> None:
    """Replace global config with an exact snapshot. For testing only."""
    global _global_config
    _global_config = cfg


def _reset_global_config() -> None:
    """Reset global config to defaults. For testing only."""
    global _global_config
    _global_config = InterceptorConfig()
