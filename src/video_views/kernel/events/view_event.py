"""View events – the atomic unit of state change."""

from __future__ import annotations

import dataclasses
from datetime import datetime
from enum import Enum
from typing import Any


class ViewEventType(str, Enum):
    """Closed set of event types understood by the views aggregate."""

    ADD_VIEW = "AddView"

    @classmethod
    def parse(cls, raw: str) -> ViewEventType | str:
        """Return the enum member for *raw*, or *raw* itself when unknown.

        Unknown types are preserved verbatim so that a newer aggregate can
        still replay them from the log.
        """
        try:
            return cls(raw)
        except ValueError:
            return raw


@dataclasses.dataclass(frozen=True)
class ViewEvent:
    """An immutable event as appended to the bucket log.

    ``category_id`` is optional; ``timestamp`` is assigned at ingestion and
    is only monotonic per writer.
    """

    type: ViewEventType | str
    video_id: str
    channel_id: str
    timestamp: datetime
    category_id: str | None = None

    @classmethod
    def add_view(
        cls,
        video_id: str,
        channel_id: str,
        timestamp: datetime,
        category_id: str | None = None,
    ) -> ViewEvent:
        return cls(
            type=ViewEventType.ADD_VIEW,
            video_id=video_id,
            channel_id=channel_id,
            timestamp=timestamp,
            category_id=category_id,
        )

    @property
    def type_name(self) -> str:
        return self.type.value if isinstance(self.type, ViewEventType) else self.type


@dataclasses.dataclass(frozen=True)
class RetainedView:
    """A view kept by the aggregate for windowed rankings (type dropped)."""

    video_id: str
    channel_id: str
    category_id: str | None
    timestamp: datetime

    @classmethod
    def from_event(cls, event: ViewEvent) -> RetainedView:
        return cls(
            video_id=event.video_id,
            channel_id=event.channel_id,
            category_id=event.category_id,
            timestamp=event.timestamp,
        )


@dataclasses.dataclass(frozen=True)
class EntityViewsInfo:
    """View count of a single video, channel or category."""

    id: str
    views: int

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "views": self.views}


__all__ = ["EntityViewsInfo", "RetainedView", "ViewEvent", "ViewEventType"]
