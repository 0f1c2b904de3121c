"""Testing helpers – deterministic clocks and failing store doubles."""
from video_views.testing.fakes import FailingEventBucketStore, FakeClock, StepClock

__all__ = ["FailingEventBucketStore", "FakeClock", "StepClock"]
