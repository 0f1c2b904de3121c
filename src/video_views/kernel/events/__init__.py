"""Kernel events – view event model."""
from video_views.kernel.events.view_event import (
    EntityViewsInfo,
    RetainedView,
    ViewEvent,
    ViewEventType,
)

__all__ = ["EntityViewsInfo", "RetainedView", "ViewEvent", "ViewEventType"]
