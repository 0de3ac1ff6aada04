#!/usr/bin/env python3
"""Voice command modules.

Contains:
- Normalizer (transcript cleaning)
- Trigger table and engine (keyword classification)
- Transcription handler (event bus glue)
"""

from .normalizer import normalize
from .transcription_handler import TranscriptionHandler, publish_transcription
from .trigger_engine import TriggerEngine, find_longest_match
from .trigger_table import TriggerTable
from .triggers import (
    DEFAULT_TRIGGER_KEYWORDS,
    FIXED_CATEGORIES,
    Category,
    TriggerConfigError,
    TriggerResult,
)

__all__ = [
    "normalize",
    "TriggerEngine",
    "find_longest_match",
    "TriggerTable",
    "TranscriptionHandler",
    "publish_transcription",
    "Category",
    "TriggerResult",
    "TriggerConfigError",
    "FIXED_CATEGORIES",
    "DEFAULT_TRIGGER_KEYWORDS",
]
