"""Application event log – EventBucketStore port and InMemoryEventBucketStore."""

from __future__ import annotations

import abc
import asyncio
from typing import AsyncIterator

from video_views.application.event_log.bucket import Bucket
from video_views.kernel.events import ViewEvent
from video_views.observability.logging import get_logger

logger = get_logger(__name__)


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError(f"Bucket capacity must be >= 1, got {capacity}")
    return capacity


class EventBucketStore(abc.ABC):
    """Port — durable, ordered, capacity-bounded append log of view events.

    Events land in the most recent bucket until it holds ``capacity`` events;
    the next append then opens bucket ``sequence + 1``.  Implementations
    must serialise concurrent appends so that no bucket is ever created
    twice or filled past its capacity, and must raise
    :class:`~video_views.kernel.errors.PersistenceError` when the backend
    fails.
    """

    def __init__(self, capacity: int) -> None:
        self._capacity = _check_capacity(capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    @abc.abstractmethod
    async def append(self, event: ViewEvent) -> Bucket:
        """Durably append *event*; return the bucket it was written to."""

    @abc.abstractmethod
    def stream_events(self) -> AsyncIterator[ViewEvent]:
        """Yield every event, oldest bucket first, oldest event first."""

    @abc.abstractmethod
    async def buckets(self) -> list[Bucket]:
        """Return every bucket ordered by sequence."""

    async def all_events(self) -> list[ViewEvent]:
        """Eager form of :meth:`stream_events`."""
        return [event async for event in self.stream_events()]


class InMemoryEventBucketStore(EventBucketStore):
    """In-memory :class:`EventBucketStore` for tests and local development."""

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)
        # sequence → ordered events; index == sequence
        self._buckets: list[list[ViewEvent]] = []
        self._lock = asyncio.Lock()

    async def append(self, event: ViewEvent) -> Bucket:
        async with self._lock:
            if not self._buckets or len(self._buckets[-1]) >= self._capacity:
                self._buckets.append([])
                logger.info("bucket_created", sequence=len(self._buckets) - 1)
            sequence = len(self._buckets) - 1
            active = self._buckets[sequence]
            active.append(event)
            logger.debug("event_appended", sequence=sequence, size=len(active))
            return Bucket(sequence, self._capacity, tuple(active))

    async def stream_events(self) -> AsyncIterator[ViewEvent]:
        for bucket in await self.buckets():
            for event in bucket.events:
                yield event

    async def buckets(self) -> list[Bucket]:
        return [
            Bucket(seq, self._capacity, tuple(events))
            for seq, events in enumerate(self._buckets)
        ]

    def event_count(self) -> int:
        """Return the total number of stored events."""
        return sum(len(events) for events in self._buckets)


__all__ = ["EventBucketStore", "InMemoryEventBucketStore"]
