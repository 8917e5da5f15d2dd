"""Audit logging for header injection and session invalidation."""

from __future__ import annotations

import logging
from collections.abc import Sequence

__all__ = ["log_anonymous_unauthorized", "log_header_injection", "log_invalidation"]

logger = logging.getLogger("adapter_authz")
session_logger = logging.getLogger("adapter_authz.session")


def log_header_injection(
    *,
    authorizer: str,
    integration: str,
    header_names: Sequence[str],
) -> None:
    """Log one authorization of an outgoing request.

    Logging levels:
    - INFO: Summary (authorizer, integration shape, header count)
    - DEBUG: Header names. Header values are never logged.
    - WARNING: The authorizer produced no headers.

    Example::

        log_header_injection(
            authorizer="token",
            integration="headers",
            header_names=["Authorization"],
        )
    """
    header_count = len(header_names)

    if header_count == 0:
        logger.warning(
            "Authorizer %r produced no headers — request sent without authorization",
            authorizer,
        )
        return

    logger.info(
        "Authorized request via %r (%s) — %d header(s) injected",
        authorizer,
        integration,
        header_count,
    )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Headers injected by %r: %s", authorizer, list(header_names))


def log_invalidation(*, status: int) -> None:
    """Log a session invalidation triggered by a response status."""
    session_logger.warning(
        "Received %d while authenticated — invalidating session",
        status,
    )


def log_anonymous_unauthorized(*, status: int) -> None:
    """Log a 401 received while the session is already unauthenticated."""
    session_logger.debug(
        "Received %d while unauthenticated — session left unchanged",
        status,
    )
