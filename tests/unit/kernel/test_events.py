"""Unit tests for the view event model."""

from __future__ import annotations

import dataclasses
from datetime import UTC, datetime

import pytest

from video_views.kernel.events import (
    EntityViewsInfo,
    RetainedView,
    ViewEvent,
    ViewEventType,
)

TS = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


class TestViewEventType:
    def test_add_view_value(self) -> None:
        assert ViewEventType.ADD_VIEW.value == "AddView"

    def test_parse_known(self) -> None:
        assert ViewEventType.parse("AddView") is ViewEventType.ADD_VIEW

    def test_parse_unknown_keeps_raw_string(self) -> None:
        assert ViewEventType.parse("RemoveView") == "RemoveView"


class TestViewEvent:
    def test_add_view_factory(self) -> None:
        ev = ViewEvent.add_view("12", "22", TS, "32")
        assert ev.type is ViewEventType.ADD_VIEW
        assert ev.video_id == "12"
        assert ev.channel_id == "22"
        assert ev.category_id == "32"
        assert ev.timestamp == TS

    def test_category_is_optional(self) -> None:
        assert ViewEvent.add_view("12", "22", TS).category_id is None

    def test_is_frozen(self) -> None:
        ev = ViewEvent.add_view("12", "22", TS)
        with pytest.raises(dataclasses.FrozenInstanceError):
            ev.video_id = "13"  # type: ignore[misc]

    def test_type_name(self) -> None:
        assert ViewEvent.add_view("12", "22", TS).type_name == "AddView"
        unknown = ViewEvent(type="RemoveView", video_id="1", channel_id="2", timestamp=TS)
        assert unknown.type_name == "RemoveView"


class TestRetainedView:
    def test_from_event_drops_type(self) -> None:
        view = RetainedView.from_event(ViewEvent.add_view("12", "22", TS, "32"))
        assert view == RetainedView("12", "22", "32", TS)
        assert not hasattr(view, "type")


class TestEntityViewsInfo:
    def test_to_dict(self) -> None:
        assert EntityViewsInfo(id="12", views=2).to_dict() == {"id": "12", "views": 2}

    def test_equality(self) -> None:
        assert EntityViewsInfo("12", 1) == EntityViewsInfo("12", 1)
