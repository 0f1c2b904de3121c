"""MongoDB adapter — event/bucket document (de)serialisation.

Persisted layout of a bucket document::

    {
        "_id": 3,
        "sequence": 3,
        "size": 2,
        "created_at": datetime,
        "events": [
            {"type": "AddView", "videoId": "12", "channelId": "22",
             "categoryId": "32", "timestamp": datetime},
            ...
        ],
    }
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from video_views.application.event_log import Bucket
from video_views.kernel.events import ViewEvent, ViewEventType


def event_to_doc(event: ViewEvent) -> dict[str, Any]:
    doc: dict[str, Any] = {
        "type": event.type_name,
        "videoId": event.video_id,
        "channelId": event.channel_id,
        "timestamp": event.timestamp,
    }
    if event.category_id is not None:
        doc["categoryId"] = event.category_id
    return doc


def event_from_doc(doc: dict[str, Any]) -> ViewEvent:
    timestamp: datetime = doc["timestamp"]
    # BSON dates come back naive unless the client is tz_aware
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=UTC)
    return ViewEvent(
        type=ViewEventType.parse(doc["type"]),
        video_id=doc["videoId"],
        channel_id=doc["channelId"],
        category_id=doc.get("categoryId"),
        timestamp=timestamp,
    )


def bucket_from_doc(doc: dict[str, Any], capacity: int) -> Bucket:
    return Bucket(
        sequence=doc["sequence"],
        capacity=capacity,
        events=tuple(event_from_doc(e) for e in doc.get("events", [])),
    )


__all__ = ["bucket_from_doc", "event_from_doc", "event_to_doc"]
