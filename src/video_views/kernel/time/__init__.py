"""Kernel time – Clock port + implementations."""
from video_views.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
