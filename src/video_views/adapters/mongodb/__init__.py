"""MongoDB adapter — bucketed event log.

Requires ``motor`` (and its ``pymongo`` dependency).
"""

from video_views.adapters.mongodb.bucket_store import MongoEventBucketStore
from video_views.adapters.mongodb.factory import open_bucket_store

__all__ = ["MongoEventBucketStore", "open_bucket_store"]
