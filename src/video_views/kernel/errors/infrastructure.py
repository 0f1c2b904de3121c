"""Infrastructure errors – I/O failures of the event log backend."""

from __future__ import annotations

from typing import Any

from video_views.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class PersistenceError(InfrastructureError):
    """A durable write or read against the event log failed.

    The operation is not recorded; callers (typically the transport layer)
    decide whether to retry.  *operation* names the store call that failed
    and is part of :attr:`detail`.
    """

    default_code = "persistence_error"

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        detail: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        if operation is not None:
            detail = {"operation": operation, **(detail or {})}
        super().__init__(message, detail=detail, **kwargs)
        self.operation = operation


__all__ = ["InfrastructureError", "PersistenceError"]
