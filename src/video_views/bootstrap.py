"""Process start-up: settings → logging → bucket store → built service."""

from __future__ import annotations

from typing import Any

from video_views.adapters.mongodb import open_bucket_store
from video_views.application.event_log import EventBucketStore
from video_views.application.views import ViewsService
from video_views.config import EnvSettingsLoader, SettingsFactory, ViewsSettings
from video_views.kernel.time import Clock
from video_views.observability.logging import JsonLoggerFactory, get_logger

logger = get_logger(__name__)


def load_settings(overrides: dict[str, Any] | None = None) -> ViewsSettings:
    """Read ``VIEWS_*`` environment variables, then apply *overrides*."""
    return SettingsFactory.create(ViewsSettings, [EnvSettingsLoader()], overrides)


async def create_views_service(
    settings: ViewsSettings | None = None,
    *,
    store: EventBucketStore | None = None,
    client: Any | None = None,
    clock: Clock | None = None,
) -> ViewsService:
    """Wire a :class:`ViewsService` whose aggregate is rebuilt from the log.

    *store* short-circuits the MongoDB store (tests, local development);
    *client* reuses an existing motor client.
    """
    settings = settings or load_settings()
    JsonLoggerFactory.configure(settings.log_level, json=settings.log_json)
    if store is None:
        store = await open_bucket_store(settings, client)
    service = await ViewsService.create(store, clock=clock)
    logger.info(
        "views_service_ready",
        bucket_capacity=store.capacity,
        events=service.aggregate.event_count,
    )
    return service


__all__ = ["create_views_service", "load_settings"]
