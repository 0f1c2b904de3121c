"""Application views – AggregateHandle."""

from __future__ import annotations

import threading

from video_views.application.views.aggregate import ViewsAggregate


class AggregateHandle:
    """Owned, swappable reference to the active :class:`ViewsAggregate`.

    Readers grab :attr:`current` once per query; a rebuild swaps in the
    new aggregate in a single step, so a half-built aggregate is never
    visible.
    """

    def __init__(self, aggregate: ViewsAggregate | None = None) -> None:
        self._aggregate = aggregate or ViewsAggregate()
        self._lock = threading.Lock()

    @property
    def current(self) -> ViewsAggregate:
        return self._aggregate

    def swap(self, aggregate: ViewsAggregate) -> ViewsAggregate:
        """Install *aggregate* and return the one it replaces."""
        with self._lock:
            previous, self._aggregate = self._aggregate, aggregate
        return previous


__all__ = ["AggregateHandle"]
