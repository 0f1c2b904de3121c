"""Application views – RankingView (most viewed listings)."""

from __future__ import annotations

from datetime import timedelta
from enum import Enum
from typing import Callable, Iterable

from video_views.application.views.aggregate import ViewsAggregate
from video_views.application.views.tally import ViewTally
from video_views.kernel.events import EntityViewsInfo, RetainedView
from video_views.kernel.time import Clock, SystemClock


class EntityClass(str, Enum):
    VIDEO = "video"
    CHANNEL = "channel"
    CATEGORY = "category"


_KEYS: dict[EntityClass, Callable[[RetainedView], str | None]] = {
    EntityClass.VIDEO: lambda view: view.video_id,
    EntityClass.CHANNEL: lambda view: view.channel_id,
    EntityClass.CATEGORY: lambda view: view.category_id,
}


def count_views(
    views: Iterable[RetainedView],
    key: Callable[[RetainedView], str | None],
) -> ViewTally:
    """Tally *views* by *key*; views whose key is empty are skipped."""
    tally = ViewTally()
    for position, view in enumerate(views):
        entity_id = key(view)
        if entity_id:
            tally.add(entity_id, position)
    return tally


class RankingView:
    """Read-only projection answering "most viewed" queries.

    Without a period, rankings come straight from the aggregate's lifetime
    tallies.  With a period, the retained views are filtered to
    ``[now - period, now]`` and counted afresh, so ties inside the window
    are broken by who reached the count first within the window.
    """

    def __init__(self, aggregate: ViewsAggregate, clock: Clock | None = None) -> None:
        self._aggregate = aggregate
        self._clock = clock or SystemClock()

    def most_viewed(
        self,
        entity_class: EntityClass,
        period: timedelta | None = None,
        *,
        limit: int | None = None,
    ) -> list[EntityViewsInfo]:
        entity_class = EntityClass(entity_class)
        if period is None:
            return self._lifetime_tally(entity_class).ranked(limit)
        if period < timedelta(0):
            raise ValueError(f"Ranking period must not be negative, got {period}")

        now = self._clock.now()
        since = now - period
        in_window = (
            view
            for view in self._aggregate.get_all_views_events()
            if since <= view.timestamp <= now
        )
        return count_views(in_window, _KEYS[entity_class]).ranked(limit)

    def _lifetime_tally(self, entity_class: EntityClass) -> ViewTally:
        if entity_class is EntityClass.VIDEO:
            return self._aggregate.get_video_tally()
        if entity_class is EntityClass.CHANNEL:
            return self._aggregate.get_channel_tally()
        return self._aggregate.get_category_tally()


__all__ = ["EntityClass", "RankingView", "count_views"]
