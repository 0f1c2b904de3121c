"""Application views – ViewsAggregate."""

from __future__ import annotations

import threading
from types import MappingProxyType
from typing import Mapping

from video_views.application.event_log import EventBucketStore
from video_views.application.views.tally import ViewTally
from video_views.kernel.errors import UnknownEventTypeError
from video_views.kernel.events import RetainedView, ViewEvent, ViewEventType
from video_views.observability.logging import get_logger

logger = get_logger(__name__)


class ViewsAggregate:
    """In-memory view counters derived from the bucket log.

    The aggregate is never persisted: :meth:`build` replays the whole log,
    and :meth:`apply_event` folds in one more event.  Building from a log
    yields the same state as applying its events one by one to an empty
    aggregate.

    An entity with no recorded views has no key at all, so lookups answer
    ``None`` rather than ``0``.

    Example::

        aggregate = await ViewsAggregate.build(store)
        aggregate.apply_event(ViewEvent.add_view("12", "22", now, "32"))
        aggregate.video_views("12")   # -> 1
        aggregate.video_views("99")   # -> None
    """

    def __init__(self) -> None:
        self._videos = ViewTally()
        self._channels = ViewTally()
        self._categories = ViewTally()
        self._views_events: list[RetainedView] = []
        self._lock = threading.Lock()

    @classmethod
    async def build(cls, store: EventBucketStore) -> ViewsAggregate:
        """Replay every event of *store* into a fresh aggregate."""
        aggregate = cls()
        async for event in store.stream_events():
            aggregate.apply_event(event)
        logger.info(
            "aggregate_built",
            events=aggregate.event_count,
            videos=len(aggregate._videos),
            channels=len(aggregate._channels),
            categories=len(aggregate._categories),
        )
        return aggregate

    def apply_event(self, event: ViewEvent) -> None:
        """Fold a single event into the counters.

        Types outside :class:`ViewEventType` are logged and skipped; they
        stay in the log so a newer aggregate can replay them.
        """
        if event.type == ViewEventType.ADD_VIEW:
            with self._lock:
                position = len(self._views_events)
                self._videos.add(event.video_id, position)
                self._channels.add(event.channel_id, position)
                if event.category_id:
                    self._categories.add(event.category_id, position)
                self._views_events.append(RetainedView.from_event(event))
        else:
            error = UnknownEventTypeError(event.type_name)
            logger.warning(
                "unknown_event_type",
                video_id=event.video_id,
                **error.log_fields(),
            )

    # ------------------------------------------------------------------
    # Point lookups
    # ------------------------------------------------------------------

    def video_views(self, video_id: str) -> int | None:
        return self._videos.counts.get(video_id)

    def channel_views(self, channel_id: str) -> int | None:
        return self._channels.counts.get(channel_id)

    def category_views(self, category_id: str) -> int | None:
        return self._categories.counts.get(category_id)

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def get_all_views_events(self) -> tuple[RetainedView, ...]:
        """Return retained views in application order."""
        with self._lock:
            return tuple(self._views_events)

    def get_video_views_map(self) -> Mapping[str, int]:
        return MappingProxyType(self._snapshot(self._videos).counts)

    def get_channel_views_map(self) -> Mapping[str, int]:
        return MappingProxyType(self._snapshot(self._channels).counts)

    def get_category_views_map(self) -> Mapping[str, int]:
        return MappingProxyType(self._snapshot(self._categories).counts)

    def get_video_tally(self) -> ViewTally:
        return self._snapshot(self._videos)

    def get_channel_tally(self) -> ViewTally:
        return self._snapshot(self._channels)

    def get_category_tally(self) -> ViewTally:
        return self._snapshot(self._categories)

    def _snapshot(self, tally: ViewTally) -> ViewTally:
        with self._lock:
            return tally.copy()

    @property
    def event_count(self) -> int:
        return len(self._views_events)


__all__ = ["ViewsAggregate"]
