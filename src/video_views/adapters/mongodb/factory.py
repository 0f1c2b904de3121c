"""MongoDB adapter — open a bucket store from ViewsSettings."""

from __future__ import annotations

from typing import Any

from motor.motor_asyncio import AsyncIOMotorClient

from video_views.adapters.mongodb.bucket_store import MongoEventBucketStore
from video_views.config.settings import ViewsSettings


async def open_bucket_store(
    settings: ViewsSettings,
    client: Any | None = None,
) -> MongoEventBucketStore:
    """Return a :class:`MongoEventBucketStore` with its indexes in place.

    A motor client is created from ``settings.mongo_url`` unless *client*
    is given.
    """
    if client is None:
        client = AsyncIOMotorClient(settings.mongo_url, tz_aware=True)
    collection = client[settings.mongo_database][settings.buckets_collection]
    await MongoEventBucketStore.create_indexes(collection)
    return MongoEventBucketStore(
        collection,
        settings.bucket_capacity,
        max_attempts=settings.append_max_attempts,
    )


__all__ = ["open_bucket_store"]
