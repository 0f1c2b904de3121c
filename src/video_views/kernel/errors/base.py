"""Root error class for the video_views error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of every error raised by the views service.

    ``code`` is a stable slug that callers match on; ``detail`` carries the
    structured context (bucket sequence, attempts, setting name) that is
    logged alongside it.  Both reach the logs through :meth:`log_fields`.
    """

    default_code: str = "views_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def log_fields(self) -> dict[str, Any]:
        """Key/value pairs for a structlog event describing this error."""
        fields: dict[str, Any] = {"code": self.code, "error": self.message, **self.detail}
        if self.__cause__ is not None:
            fields["cause"] = repr(self.__cause__)
        return fields


__all__ = ["BaseError"]
