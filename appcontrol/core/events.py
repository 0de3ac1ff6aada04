#!/usr/bin/env python3
"""Centralized event types for the application.

All event types are defined here to avoid ad-hoc string events.
"""

from enum import Enum, auto

__all__ = ["EventType"]


class EventType(Enum):
    """All possible events in the system."""

    # Voice events
    VOICE_TRANSCRIPTION_READY = auto()  # Upstream speech-to-text produced a phrase
    TRIGGER_DETECTED = auto()  # Phrase resolved to a trigger
    TRIGGER_MISSED = auto()  # Phrase matched no keyword

    # Media list events
    ITEMS_CHANGED = auto()  # List contents replaced, titles need re-registering
    SELECTION_CHANGED = auto()
    LIKE_STATE_CHANGED = auto()
    EXPANSION_CHANGED = auto()

    # System events
    SHUTDOWN = auto()
