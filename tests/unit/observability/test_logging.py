"""Unit tests for logging configuration."""

from __future__ import annotations

import json
import logging

import structlog
from structlog.testing import capture_logs

from video_views.observability.logging import JsonLoggerFactory, get_logger


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            logger = get_logger("views.test", component="store")
            logger.info("bucket_created", sequence=1)
        assert logs == [
            {"event": "bucket_created", "sequence": 1, "component": "store", "log_level": "info"}
        ]


class TestJsonLoggerFactory:
    def test_configures_root_logger(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        try:
            JsonLoggerFactory.configure("debug", cache=False)
            assert root.level == logging.DEBUG
            assert len(root.handlers) == 1
            assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)

    def test_renders_json(self, capsys) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        try:
            JsonLoggerFactory.configure(logging.INFO, cache=False)
            get_logger("views.json").info("aggregate_built", events=3)
            line = capsys.readouterr().err.strip().splitlines()[-1]
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)

        payload = json.loads(line)
        assert payload["event"] == "aggregate_built"
        assert payload["events"] == 3
        assert payload["level"] == "info"
        assert payload["logger"] == "views.json"
