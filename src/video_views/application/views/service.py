"""Application views – ViewsService, the contract offered to the query layer."""

from __future__ import annotations

import asyncio
from datetime import timedelta

from video_views.application.event_log import EventBucketStore
from video_views.application.views.aggregate import ViewsAggregate
from video_views.application.views.handle import AggregateHandle
from video_views.application.views.ranking import EntityClass, RankingView
from video_views.kernel.errors import PersistenceError, ViewNotAppliedError
from video_views.kernel.events import EntityViewsInfo, ViewEvent
from video_views.kernel.time import Clock, SystemClock
from video_views.observability.logging import get_logger

logger = get_logger(__name__)


class ViewsService:
    """Records views and answers view-count queries.

    Writes go to the store first and reach the aggregate only once the
    append succeeded; both steps run under one lock so the aggregate sees
    events in log order.  Reads never take that lock.

    Usage::

        service = await ViewsService.create(InMemoryEventBucketStore(100))
        await service.record_view("12", "22", "32")
        service.query_video_views("12")          # EntityViewsInfo("12", 1)
        service.most_viewed_categories()         # [EntityViewsInfo("32", 1)]
    """

    def __init__(
        self,
        store: EventBucketStore,
        handle: AggregateHandle | None = None,
        *,
        clock: Clock | None = None,
    ) -> None:
        self._store = store
        self._handle = handle or AggregateHandle()
        self._clock = clock or SystemClock()
        self._write_lock = asyncio.Lock()

    @classmethod
    async def create(
        cls,
        store: EventBucketStore,
        *,
        clock: Clock | None = None,
    ) -> ViewsService:
        """Build the aggregate from *store* and return a ready service."""
        aggregate = await ViewsAggregate.build(store)
        return cls(store, AggregateHandle(aggregate), clock=clock)

    @property
    def aggregate(self) -> ViewsAggregate:
        return self._handle.current

    @property
    def store(self) -> EventBucketStore:
        return self._store

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def record_view(
        self,
        video_id: str,
        channel_id: str,
        category_id: str | None = None,
    ) -> EntityViewsInfo:
        """Append an AddView event and return the new video view count."""
        async with self._write_lock:
            event = ViewEvent.add_view(video_id, channel_id, self._clock.now(), category_id)
            try:
                await self._store.append(event)
            except PersistenceError as exc:
                logger.error("append_failed", video_id=video_id, **exc.log_fields())
                raise
            aggregate = self._handle.current
            aggregate.apply_event(event)
            views = aggregate.video_views(video_id)
            if views is None:
                raise ViewNotAppliedError(video_id)
        return EntityViewsInfo(id=video_id, views=views)

    async def rebuild(self) -> ViewsAggregate:
        """Replay the whole log into a new aggregate and swap it in.

        Writers wait for the rebuild; readers keep using the previous
        aggregate until the swap.
        """
        async with self._write_lock:
            aggregate = await ViewsAggregate.build(self._store)
            self._handle.swap(aggregate)
        logger.info("aggregate_swapped", events=aggregate.event_count)
        return aggregate

    # ------------------------------------------------------------------
    # Point queries
    # ------------------------------------------------------------------

    def query_video_views(self, video_id: str) -> EntityViewsInfo | None:
        return self._info(video_id, self._handle.current.video_views(video_id))

    def query_channel_views(self, channel_id: str) -> EntityViewsInfo | None:
        return self._info(channel_id, self._handle.current.channel_views(channel_id))

    def query_category_views(self, category_id: str) -> EntityViewsInfo | None:
        return self._info(category_id, self._handle.current.category_views(category_id))

    @staticmethod
    def _info(entity_id: str, views: int | None) -> EntityViewsInfo | None:
        if views is None:
            return None
        return EntityViewsInfo(id=entity_id, views=views)

    # ------------------------------------------------------------------
    # Rankings
    # ------------------------------------------------------------------

    def query_most_viewed(
        self,
        entity_class: EntityClass,
        period: timedelta | None = None,
        *,
        limit: int | None = None,
    ) -> list[EntityViewsInfo]:
        ranking = RankingView(self._handle.current, self._clock)
        return ranking.most_viewed(entity_class, period, limit=limit)

    def most_viewed_videos(
        self, period: timedelta | None = None, *, limit: int | None = None
    ) -> list[EntityViewsInfo]:
        return self.query_most_viewed(EntityClass.VIDEO, period, limit=limit)

    def most_viewed_channels(
        self, period: timedelta | None = None, *, limit: int | None = None
    ) -> list[EntityViewsInfo]:
        return self.query_most_viewed(EntityClass.CHANNEL, period, limit=limit)

    def most_viewed_categories(
        self, period: timedelta | None = None, *, limit: int | None = None
    ) -> list[EntityViewsInfo]:
        return self.query_most_viewed(EntityClass.CATEGORY, period, limit=limit)


__all__ = ["ViewsService"]
