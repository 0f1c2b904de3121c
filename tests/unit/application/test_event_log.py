"""Unit tests for the bucketed event log (InMemoryEventBucketStore)."""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime, timedelta

import pytest

from video_views.application.event_log import (
    Bucket,
    EventBucketStore,
    InMemoryEventBucketStore,
)
from video_views.kernel.events import ViewEvent

BUCKET_SIZE = 3
T0 = datetime(2026, 1, 1, tzinfo=UTC)


def _event(n: int = 0, video_id: str = "12") -> ViewEvent:
    return ViewEvent.add_view(video_id, "22", T0 + timedelta(seconds=n))


class TestBucket:
    def test_size_and_sealed(self) -> None:
        events = tuple(_event(i) for i in range(3))
        assert Bucket(0, 3, events).is_sealed
        assert Bucket(0, 3, events[:2]).size == 2
        assert not Bucket(0, 3, events[:2]).is_sealed

    def test_empty_by_default(self) -> None:
        assert Bucket(0, 3).events == ()


class TestInMemoryEventBucketStore:
    def test_is_subclass_of_port(self) -> None:
        assert issubclass(InMemoryEventBucketStore, EventBucketStore)

    def test_rejects_non_positive_capacity(self) -> None:
        with pytest.raises(ValueError):
            InMemoryEventBucketStore(0)

    def test_first_append_creates_bucket_zero(self) -> None:
        store = InMemoryEventBucketStore(BUCKET_SIZE)
        bucket = asyncio.run(store.append(_event()))
        assert bucket.sequence == 0
        assert bucket.size == 1

    def test_appends_fill_active_bucket_in_place(self) -> None:
        store = InMemoryEventBucketStore(BUCKET_SIZE)

        async def run() -> list[Bucket]:
            return [await store.append(_event(i)) for i in range(BUCKET_SIZE)]

        written = asyncio.run(run())
        assert [b.sequence for b in written] == [0, 0, 0]
        assert written[-1].is_sealed

    def test_split_across_buckets(self) -> None:
        store = InMemoryEventBucketStore(BUCKET_SIZE)
        count = BUCKET_SIZE * 2 + 1

        async def run() -> list[Bucket]:
            for i in range(count):
                await store.append(_event(i))
            return await store.buckets()

        buckets = asyncio.run(run())
        assert [b.sequence for b in buckets] == [0, 1, 2]
        assert [b.size for b in buckets] == [BUCKET_SIZE, BUCKET_SIZE, 1]
        assert store.event_count() == count

    def test_all_events_preserves_order(self) -> None:
        store = InMemoryEventBucketStore(BUCKET_SIZE)
        events = [_event(i, video_id=f"v{i}") for i in range(8)]

        async def run() -> list[ViewEvent]:
            for ev in events:
                await store.append(ev)
            return await store.all_events()

        assert asyncio.run(run()) == events

    def test_stream_events_matches_all_events(self) -> None:
        store = InMemoryEventBucketStore(BUCKET_SIZE)

        async def run() -> tuple[list[ViewEvent], list[ViewEvent]]:
            for i in range(5):
                await store.append(_event(i))
            streamed = [ev async for ev in store.stream_events()]
            return streamed, await store.all_events()

        streamed, eager = asyncio.run(run())
        assert streamed == eager

    def test_empty_store(self) -> None:
        store = InMemoryEventBucketStore(BUCKET_SIZE)
        assert asyncio.run(store.all_events()) == []
        assert asyncio.run(store.buckets()) == []

    def test_returned_bucket_is_a_snapshot(self) -> None:
        store = InMemoryEventBucketStore(BUCKET_SIZE)

        async def run() -> Bucket:
            first = await store.append(_event(0))
            await store.append(_event(1))
            return first

        assert asyncio.run(run()).size == 1

    def test_concurrent_appends_never_overfill(self) -> None:
        store = InMemoryEventBucketStore(BUCKET_SIZE)
        count = 20

        async def run() -> list[Bucket]:
            await asyncio.gather(*(store.append(_event(i)) for i in range(count)))
            return await store.buckets()

        buckets = asyncio.run(run())
        assert all(b.size <= BUCKET_SIZE for b in buckets)
        assert all(b.size == BUCKET_SIZE for b in buckets[:-1])
        assert [b.sequence for b in buckets] == list(range(len(buckets)))
        assert sum(b.size for b in buckets) == count
