"""Domain errors – conditions raised by the view counting model itself."""

from __future__ import annotations

from typing import Any

from video_views.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when the view model encounters a domain-level anomaly."""

    default_code = "domain_error"


class UnknownEventTypeError(DomainError):
    """An event carries a type outside :class:`ViewEventType`.

    Never raised out of the aggregate: it is built to give the warning log a
    structured payload, and the event itself stays in the log for replay by a
    newer aggregate.
    """

    default_code = "unknown_event_type"

    def __init__(self, event_type: str, **kwargs: Any) -> None:
        super().__init__(
            f"Unknown video event type '{event_type}'",
            detail={"event_type": event_type},
            **kwargs,
        )
        self.event_type = event_type


class ViewNotAppliedError(DomainError):
    """A recorded view did not show up in the aggregate that applied it."""

    default_code = "view_not_applied"

    def __init__(self, video_id: str, **kwargs: Any) -> None:
        super().__init__(
            f"View of video '{video_id}' was appended but not applied",
            detail={"video_id": video_id},
            **kwargs,
        )
        self.video_id = video_id


__all__ = ["DomainError", "UnknownEventTypeError", "ViewNotAppliedError"]
