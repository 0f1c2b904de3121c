"""Application — views aggregate, rankings and service."""

from video_views.application.views.aggregate import ViewsAggregate
from video_views.application.views.handle import AggregateHandle
from video_views.application.views.ranking import EntityClass, RankingView
from video_views.application.views.service import ViewsService
from video_views.application.views.tally import ViewTally

__all__ = [
    "AggregateHandle",
    "EntityClass",
    "RankingView",
    "ViewTally",
    "ViewsAggregate",
    "ViewsService",
]
