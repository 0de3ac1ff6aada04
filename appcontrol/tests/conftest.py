"""Pytest configuration."""

import sys
from pathlib import Path

import pytest

# Add project root to path (two levels above this directory)
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from appcontrol.core.event_bus import EventBus  # noqa: E402
from appcontrol.voice.trigger_engine import TriggerEngine  # noqa: E402


@pytest.fixture
def engine():
    """Engine with the demo vocabulary."""
    return TriggerEngine()


@pytest.fixture
def bus():
    event_bus = EventBus()
    yield event_bus
    event_bus.shutdown()
