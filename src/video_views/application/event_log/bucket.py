"""Application event log – Bucket."""

from __future__ import annotations

import dataclasses

from video_views.kernel.events import ViewEvent


@dataclasses.dataclass(frozen=True)
class Bucket:
    """Snapshot of one fixed-capacity partition of the event log.

    ``sequence`` starts at 0 and increases by one per bucket.  Events are
    totally ordered by ``(sequence, position in events)``.
    """

    sequence: int
    capacity: int
    events: tuple[ViewEvent, ...] = ()

    @property
    def size(self) -> int:
        return len(self.events)

    @property
    def is_sealed(self) -> bool:
        """``True`` once the bucket holds ``capacity`` events or more."""
        return self.size >= self.capacity


__all__ = ["Bucket"]
