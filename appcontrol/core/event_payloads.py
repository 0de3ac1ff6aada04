"""Typed event payload definitions."""

from typing import TypedDict


class TranscriptionPayload(TypedDict):
    """Payload for transcription events."""

    text: str


class TriggerPayload(TypedDict):
    """Payload for trigger detected/missed events."""

    category: str
    keyword: str
    text: str


class ItemsChangedPayload(TypedDict):
    """Payload for list content changes."""

    titles: list[str]


class SelectionChangedPayload(TypedDict):
    """Payload for selection changes."""

    index: int
    title: str


class LikeStateChangedPayload(TypedDict):
    """Payload for like/dislike toggles."""

    index: int
    like_state: str


class ExpansionChangedPayload(TypedDict):
    """Payload for expand/collapse of the selected item."""

    index: int
    expanded: bool


__all__ = [
    "TranscriptionPayload",
    "TriggerPayload",
    "ItemsChangedPayload",
    "SelectionChangedPayload",
    "LikeStateChangedPayload",
    "ExpansionChangedPayload",
]
