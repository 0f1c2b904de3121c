"""Testing fakes – in-memory doubles for kernel ports."""
from video_views.testing.fakes.bucket_store import FailingEventBucketStore
from video_views.testing.fakes.clock import FakeClock, StepClock
from video_views.kernel.time import FrozenClock

__all__ = ["FailingEventBucketStore", "FakeClock", "FrozenClock", "StepClock"]
