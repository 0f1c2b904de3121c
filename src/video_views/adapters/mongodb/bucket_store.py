"""MongoDB adapter — MongoEventBucketStore."""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime
from typing import Any, AsyncIterator

from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from video_views.adapters.mongodb.codec import bucket_from_doc, event_from_doc, event_to_doc
from video_views.application.event_log import Bucket, EventBucketStore
from video_views.kernel.errors import PersistenceError
from video_views.kernel.events import ViewEvent
from video_views.observability.logging import get_logger

logger = get_logger(__name__)


class MongoEventBucketStore(EventBucketStore):
    """Bucketed event log backed by a MongoDB collection.

    Each document is one bucket keyed by its sequence number (``_id``).

    Append strategy
    ~~~~~~~~~~~~~~~
    The latest bucket is read; if it still has room, the event is pushed
    with a single-document update guarded on the ``size`` that was read
    (compare-and-set).  Otherwise bucket ``sequence + 1`` is inserted; the
    ``_id`` uniqueness means only one writer can create it.  Losing either
    race re-reads the latest bucket and tries again, up to
    ``max_attempts`` times.

    Call :meth:`create_indexes` once on startup.
    """

    COLLECTION_NAME = "video_events_buckets"

    def __init__(self, collection: Any, capacity: int, *, max_attempts: int = 5) -> None:
        super().__init__(capacity)
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        self._col = collection
        self._max_attempts = max_attempts
        self._lock = asyncio.Lock()

    @classmethod
    async def create_indexes(cls, collection: Any) -> None:
        """Create the ``sequence`` index.  Idempotent."""
        try:
            await collection.create_index([("sequence", 1)], name="idx_bucket_sequence")
        except PyMongoError as exc:
            raise PersistenceError(
                "Could not create bucket indexes", operation="create_indexes", cause=exc
            ) from exc

    # ------------------------------------------------------------------
    # EventBucketStore interface
    # ------------------------------------------------------------------

    async def append(self, event: ViewEvent) -> Bucket:
        doc = event_to_doc(event)
        async with self._lock:
            try:
                for _ in range(self._max_attempts):
                    bucket = await self._try_append(doc)
                    if bucket is not None:
                        return bucket
            except PyMongoError as exc:
                raise PersistenceError(
                    "Failed to append view event", operation="append", cause=exc
                ) from exc
        raise PersistenceError(
            f"Failed to append view event after {self._max_attempts} conflicting attempts",
            operation="append",
            detail={"attempts": self._max_attempts},
        )

    async def _try_append(self, event_doc: dict[str, Any]) -> Bucket | None:
        latest = await self._col.find_one(
            {}, projection={"sequence": 1, "size": 1}, sort=[("sequence", -1)]
        )
        if latest is not None and latest["size"] < self._capacity:
            updated = await self._col.find_one_and_update(
                {"_id": latest["_id"], "size": latest["size"]},
                {"$push": {"events": event_doc}, "$inc": {"size": 1}},
                return_document=ReturnDocument.AFTER,
            )
            if updated is None:
                return None
            logger.debug("event_appended", sequence=updated["sequence"], size=updated["size"])
            return bucket_from_doc(updated, self._capacity)

        sequence = 0 if latest is None else latest["sequence"] + 1
        new_doc = {
            "_id": sequence,
            "sequence": sequence,
            "size": 1,
            "events": [event_doc],
            "created_at": datetime.now(UTC),
        }
        try:
            await self._col.insert_one(new_doc)
        except DuplicateKeyError:
            return None
        logger.info("bucket_created", sequence=sequence)
        return bucket_from_doc(new_doc, self._capacity)

    async def stream_events(self) -> AsyncIterator[ViewEvent]:
        try:
            cursor = self._col.find({}, sort=[("sequence", 1)])
            async for doc in cursor:
                for event_doc in doc.get("events", []):
                    yield event_from_doc(event_doc)
        except PyMongoError as exc:
            raise PersistenceError(
                "Failed to read view events", operation="stream_events", cause=exc
            ) from exc

    async def buckets(self) -> list[Bucket]:
        try:
            cursor = self._col.find({}, sort=[("sequence", 1)])
            return [bucket_from_doc(doc, self._capacity) async for doc in cursor]
        except PyMongoError as exc:
            raise PersistenceError(
                "Failed to read buckets", operation="buckets", cause=exc
            ) from exc


__all__ = ["MongoEventBucketStore"]
