"""Application — bucketed event log."""

from video_views.application.event_log.bucket import Bucket
from video_views.application.event_log.store import (
    EventBucketStore,
    InMemoryEventBucketStore,
)

__all__ = ["Bucket", "EventBucketStore", "InMemoryEventBucketStore"]
