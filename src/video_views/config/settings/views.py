"""Config settings – ViewsSettings."""
from __future__ import annotations

import dataclasses
import logging

from video_views.config.settings.base import Settings
from video_views.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class ViewsSettings(Settings):
    """Deployment settings, read from ``VIEWS_*`` environment variables.

    ``bucket_capacity`` may change between deployments: existing buckets
    stay valid because replay only depends on the flattened event order.
    """

    _prefix = "VIEWS"

    bucket_capacity: int = 1000
    mongo_url: str = "mongodb://localhost:27017"
    mongo_database: str = "video_views"
    buckets_collection: str = "video_events_buckets"
    append_max_attempts: int = 5
    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        if self.bucket_capacity < 1:
            raise InvalidSettingValueError(
                "bucket_capacity", self.bucket_capacity, "must be at least 1"
            )
        if self.append_max_attempts < 1:
            raise InvalidSettingValueError(
                "append_max_attempts", self.append_max_attempts, "must be at least 1"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError(
                "log_level", self.log_level, "not a logging level name"
            )


__all__ = ["ViewsSettings"]
