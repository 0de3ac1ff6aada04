#!/usr/bin/env python3
"""
Media List State - thread-safe state of the voice-controlled item list.

Mutated by intent handlers, read by whatever presents the list.
"""

import threading
from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum

from appcontrol.core.event_bus import EventBus, EventType
from appcontrol.core.event_payloads import (
    ExpansionChangedPayload,
    ItemsChangedPayload,
    LikeStateChangedPayload,
    SelectionChangedPayload,
)
from appcontrol.voice.normalizer import normalize


class LikeState(str, Enum):
    """Rating of a single item."""

    NEUTRAL = "neutral"
    LIKED = "liked"
    DISLIKED = "disliked"


@dataclass(frozen=True)
class MediaItem:
    """One entry of the list."""

    title: str
    description: str = ""
    like_state: LikeState = LikeState.NEUTRAL


class MediaListState:
    """Thread-safe list state: items, selection, expansion."""

    def __init__(self, items: Iterable[MediaItem] = (), event_bus: EventBus | None = None):
        """Initialize list state.

        Args:
            items: Initial items
            event_bus: Optional EventBus for change notifications
        """
        self._lock = threading.RLock()
        self.event_bus = event_bus
        self._items: list[MediaItem] = list(items)
        self._selected_index = 0
        self._expanded = False

    # Read accessors
    @property
    def items(self) -> list[MediaItem]:
        with self._lock:
            return list(self._items)

    @property
    def selected_index(self) -> int:
        with self._lock:
            return self._selected_index

    @property
    def is_expanded(self) -> bool:
        with self._lock:
            return self._expanded

    def selected_item(self) -> MediaItem | None:
        """Get the selected item, or None for an empty list."""
        with self._lock:
            if not self._items:
                return None
            return self._items[self._selected_index]

    def titles(self) -> list[str]:
        with self._lock:
            return [item.title for item in self._items]

    def index_of_title(self, keyword: str) -> int | None:
        """Find the first item whose cleaned title equals a matched keyword.

        Args:
            keyword: Normalized keyword from a dynamic trigger

        Returns:
            Item index or None
        """
        with self._lock:
            for index, item in enumerate(self._items):
                if normalize(item.title) == keyword:
                    return index
        return None

    # Content
    def set_items(self, items: Iterable[MediaItem]):
        """Replace the list contents and reset selection.

        Emits ITEMS_CHANGED so the new titles become addressable by voice.
        """
        with self._lock:
            self._items = list(items)
            self._selected_index = 0
            self._expanded = False
            titles = [item.title for item in self._items]
        self._emit(EventType.ITEMS_CHANGED, ItemsChangedPayload(titles=titles))

    def publish_titles(self):
        """Announce the current titles without changing the list."""
        self._emit(EventType.ITEMS_CHANGED, ItemsChangedPayload(titles=self.titles()))

    # Navigation
    def go_next(self):
        """Select the next item, wrapping to the first."""
        with self._lock:
            if not self._items:
                return
            self._select((self._selected_index + 1) % len(self._items))

    def go_previous(self):
        """Select the previous item, wrapping to the last."""
        with self._lock:
            if not self._items:
                return
            if self._selected_index == 0:
                self._select(len(self._items) - 1)
            else:
                self._select(self._selected_index - 1)

    def select_item(self, index: int):
        """Select an item by index.

        Raises:
            IndexError: If index is outside the list
        """
        with self._lock:
            if not 0 <= index < len(self._items):
                raise IndexError(f"Item index {index} out of range (0..{len(self._items) - 1})")
            self._select(index)

    def _select(self, index: int):
        # Selection always collapses the details view
        self._selected_index = index
        self._expanded = False
        self._emit(
            EventType.SELECTION_CHANGED,
            SelectionChangedPayload(index=index, title=self._items[index].title),
        )

    # Rating
    def toggle_like(self):
        """Liked <-> neutral for the selected item (disliked becomes liked)."""
        self._toggle_rating(LikeState.LIKED)

    def toggle_dislike(self):
        """Disliked <-> neutral for the selected item (liked becomes disliked)."""
        self._toggle_rating(LikeState.DISLIKED)

    def _toggle_rating(self, target: LikeState):
        with self._lock:
            if not self._items:
                return
            index = self._selected_index
            item = self._items[index]
            new_state = LikeState.NEUTRAL if item.like_state == target else target
            self._items[index] = replace(item, like_state=new_state)
        self._emit(
            EventType.LIKE_STATE_CHANGED,
            LikeStateChangedPayload(index=index, like_state=new_state.value),
        )

    # Details
    def toggle_expand(self):
        """Show or hide details of the selected item."""
        with self._lock:
            if not self._items:
                return
            self._expanded = not self._expanded
            payload = ExpansionChangedPayload(index=self._selected_index, expanded=self._expanded)
        self._emit(EventType.EXPANSION_CHANGED, payload)

    def _emit(self, event_type: EventType, payload: dict):
        if self.event_bus:
            self.event_bus.emit(event_type, payload, source="list_state")
