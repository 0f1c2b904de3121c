"""Application views – ViewTally (counters with reach order)."""

from __future__ import annotations

from video_views.kernel.events import EntityViewsInfo


class ViewTally:
    """View counts per entity, plus the fold position at which each entity
    reached its current count.

    Rankings order by descending count; between equal counts, the entity
    that reached the count earlier wins.  Views ``A, B, B, A`` therefore rank
    ``B`` before ``A``: both have two views, but ``B`` got there at position 2
    and ``A`` only at position 3.

    :attr:`counts` keeps first-seen insertion order.
    """

    __slots__ = ("counts", "reached_at")

    def __init__(self) -> None:
        self.counts: dict[str, int] = {}
        self.reached_at: dict[str, int] = {}

    def add(self, entity_id: str, position: int) -> None:
        self.counts[entity_id] = self.counts.get(entity_id, 0) + 1
        self.reached_at[entity_id] = position

    def copy(self) -> ViewTally:
        tally = ViewTally()
        tally.counts = dict(self.counts)
        tally.reached_at = dict(self.reached_at)
        return tally

    def ranked(self, limit: int | None = None) -> list[EntityViewsInfo]:
        ordered = sorted(
            self.counts.items(),
            key=lambda item: (-item[1], self.reached_at[item[0]]),
        )
        if limit is not None:
            ordered = ordered[:limit]
        return [EntityViewsInfo(id=entity_id, views=views) for entity_id, views in ordered]

    def __len__(self) -> int:
        return len(self.counts)


__all__ = ["ViewTally"]
