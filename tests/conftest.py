"""Shared fixtures for the video_views test-suite."""

from __future__ import annotations

import structlog
import pytest


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Every test starts and ends with structlog's default configuration."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
