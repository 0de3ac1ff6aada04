#!/usr/bin/env python3
"""Application initialization: argument parsing, logging and component wiring."""

import argparse

from appcontrol.core.app_context import AppContext
from appcontrol.core.config_loader import get_nested
from appcontrol.core.event_bus import EventBus
from appcontrol.core.list_state import MediaItem, MediaListState
from appcontrol.core.logging_utils import configure_file_logging, set_global_log_level, setup_logger
from appcontrol.routing.intent_handlers import connect_trigger_events, register_all_intents
from appcontrol.routing.intent_router import IntentRouter
from appcontrol.voice.transcription_handler import TranscriptionHandler
from appcontrol.voice.trigger_engine import TriggerEngine

logger = setup_logger(__name__)


def parse_arguments(argv=None):
    """Parse command-line arguments.

    Returns:
        argparse.Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Voice control demo: classify phrases and drive a media list"
    )
    parser.add_argument("--config", type=str, help="Path to base config YAML")
    parser.add_argument(
        "--phrase",
        action="append",
        help="Phrase to process (repeatable). Reads stdin lines when omitted.",
    )
    parser.add_argument("--log-level", type=str, help="Log level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--log-file", type=str, help="Also write logs to this file")
    parser.add_argument(
        "--metrics",
        action="store_true",
        help="Print engine and event bus metrics on exit",
    )
    return parser.parse_args(argv)


def configure_logging(config: dict):
    """Apply the logging section of the config."""
    set_global_log_level(get_nested(config, "logging.level", "INFO"))

    log_file = get_nested(config, "logging.file")
    if log_file:
        configure_file_logging(
            log_file,
            max_bytes=get_nested(config, "logging.max_size_mb", 10) * 1024 * 1024,
            backup_count=get_nested(config, "logging.backup_count", 3),
        )


def items_from_config(config: dict) -> list[MediaItem]:
    """Build list items from the 'items' config section."""
    return [
        MediaItem(title=entry["title"], description=entry.get("description", ""))
        for entry in config.get("items") or []
    ]


def create_app_components(config: dict) -> AppContext:
    """Create and wire all components.

    The configured items are loaded into the list state and their titles are
    registered with the trigger engine before this returns.

    Args:
        config: Loaded configuration dict

    Returns:
        AppContext with all components

    Raises:
        TriggerConfigError: If the trigger keywords are invalid
    """
    event_bus = EventBus()
    trigger_engine = TriggerEngine(config.get("triggers"))
    list_state = MediaListState(event_bus=event_bus)

    intent_router = IntentRouter(event_bus=event_bus)
    register_all_intents(intent_router, list_state)

    transcription_handler = TranscriptionHandler(trigger_engine, event_bus)
    connect_trigger_events(event_bus, intent_router)

    list_state.set_items(items_from_config(config))
    event_bus.process_events()

    logger.info(f"App components ready ({len(list_state.items)} items)")
    return AppContext(
        config=config,
        event_bus=event_bus,
        trigger_engine=trigger_engine,
        list_state=list_state,
        intent_router=intent_router,
        transcription_handler=transcription_handler,
    )
