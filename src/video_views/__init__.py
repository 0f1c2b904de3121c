"""
video_views – event-sourced view counting for videos, channels and categories.

Import path convention::

    from video_views.kernel.events import ViewEvent, ViewEventType
    from video_views.application.event_log import InMemoryEventBucketStore
    from video_views.application.views import ViewsAggregate, ViewsService
    from video_views.adapters.mongodb import MongoEventBucketStore
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
