#!/usr/bin/env python3
"""Tests for the media list state."""

import pytest

from appcontrol.core.event_bus import EventType
from appcontrol.core.list_state import LikeState, MediaItem, MediaListState

TITLES = ["Dune", "Jaws", "The Matrix"]


@pytest.fixture
def list_state(bus):
    return MediaListState([MediaItem(title=t, description=f"About {t}") for t in TITLES], event_bus=bus)


def collect(bus, event_type):
    received = []
    bus.subscribe(event_type, received.append)
    return received


class TestNavigation:
    def test_starts_at_first_item(self, list_state):
        assert list_state.selected_index == 0
        assert list_state.selected_item().title == "Dune"
        assert not list_state.is_expanded

    def test_next_wraps(self, list_state):
        for expected in [1, 2, 0]:
            list_state.go_next()
            assert list_state.selected_index == expected

    def test_previous_wraps(self, list_state):
        list_state.go_previous()
        assert list_state.selected_index == 2
        list_state.go_previous()
        assert list_state.selected_index == 1

    def test_navigation_collapses(self, list_state):
        list_state.toggle_expand()
        assert list_state.is_expanded
        list_state.go_next()
        assert not list_state.is_expanded

    def test_select_item(self, list_state):
        list_state.toggle_expand()
        list_state.select_item(2)
        assert list_state.selected_item().title == "The Matrix"
        assert not list_state.is_expanded

    @pytest.mark.parametrize("index", [-1, 3])
    def test_select_out_of_range(self, list_state, index):
        with pytest.raises(IndexError):
            list_state.select_item(index)
        assert list_state.selected_index == 0

    def test_selection_events(self, list_state, bus):
        received = collect(bus, EventType.SELECTION_CHANGED)
        list_state.go_next()
        bus.process_events()
        assert received[0].payload == {"index": 1, "title": "Jaws"}


class TestRating:
    def test_like_toggles(self, list_state):
        list_state.toggle_like()
        assert list_state.selected_item().like_state == LikeState.LIKED
        list_state.toggle_like()
        assert list_state.selected_item().like_state == LikeState.NEUTRAL

    def test_dislike_toggles(self, list_state):
        list_state.toggle_dislike()
        assert list_state.selected_item().like_state == LikeState.DISLIKED
        list_state.toggle_dislike()
        assert list_state.selected_item().like_state == LikeState.NEUTRAL

    def test_like_replaces_dislike(self, list_state):
        list_state.toggle_dislike()
        list_state.toggle_like()
        assert list_state.selected_item().like_state == LikeState.LIKED
        list_state.toggle_dislike()
        assert list_state.selected_item().like_state == LikeState.DISLIKED

    def test_rating_applies_to_selected_item_only(self, list_state):
        list_state.go_next()
        list_state.toggle_like()
        states = [item.like_state for item in list_state.items]
        assert states == [LikeState.NEUTRAL, LikeState.LIKED, LikeState.NEUTRAL]

    def test_like_event(self, list_state, bus):
        received = collect(bus, EventType.LIKE_STATE_CHANGED)
        list_state.toggle_like()
        bus.process_events()
        assert received[0].payload == {"index": 0, "like_state": "liked"}


class TestExpansion:
    def test_toggle(self, list_state, bus):
        received = collect(bus, EventType.EXPANSION_CHANGED)
        list_state.toggle_expand()
        list_state.toggle_expand()
        bus.process_events()
        assert [e.payload["expanded"] for e in received] == [True, False]


class TestContent:
    def test_index_of_title(self, list_state):
        assert list_state.index_of_title("the matrix") == 2
        assert list_state.index_of_title("jaws") == 1
        assert list_state.index_of_title("alien") is None

    def test_set_items_resets_and_announces(self, list_state, bus):
        received = collect(bus, EventType.ITEMS_CHANGED)
        list_state.go_next()
        list_state.toggle_expand()

        list_state.set_items([MediaItem(title="Soul"), MediaItem(title="Tron")])
        bus.process_events()

        assert list_state.titles() == ["Soul", "Tron"]
        assert list_state.selected_index == 0
        assert not list_state.is_expanded
        assert received[-1].payload == {"titles": ["Soul", "Tron"]}

    def test_publish_titles(self, list_state, bus):
        received = collect(bus, EventType.ITEMS_CHANGED)
        list_state.publish_titles()
        bus.process_events()
        assert received[0].payload == {"titles": TITLES}

    def test_items_returns_copy(self, list_state):
        list_state.items.clear()
        assert len(list_state.items) == 3


class TestEmptyList:
    def test_operations_are_noops(self):
        empty = MediaListState()
        empty.go_next()
        empty.go_previous()
        empty.toggle_like()
        empty.toggle_dislike()
        empty.toggle_expand()

        assert empty.selected_item() is None
        assert empty.selected_index == 0
        assert not empty.is_expanded
        assert empty.index_of_title("dune") is None
