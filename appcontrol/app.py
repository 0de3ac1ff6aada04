#!/usr/bin/env python3
import sys

from appcontrol.__version__ import __version__
from appcontrol.core.app_context import AppContext
from appcontrol.core.app_initializer import (
    configure_logging,
    create_app_components,
    parse_arguments,
)
from appcontrol.core.config_loader import load_config, override_from_args
from appcontrol.core.events import EventType
from appcontrol.voice.transcription_handler import publish_transcription
from appcontrol.voice.triggers import TriggerResult


def process_phrase(ctx: AppContext, text: str) -> TriggerResult:
    """Publish one transcribed phrase and drain the bus.

    The transcription handler classifies it and intent routing applies the
    resulting trigger before this returns.

    Args:
        ctx: App context
        text: Raw transcription

    Returns:
        The classification result

    Raises:
        RuntimeError: If the transcription never reached the handler
    """
    handler = ctx.transcription_handler
    handler.last_result = None
    publish_transcription(ctx.event_bus, text, source="cli")
    ctx.event_bus.process_events()
    if handler.last_result is None:
        raise RuntimeError(f"Transcription {text!r} was not handled")
    return handler.last_result


def describe_state(ctx: AppContext) -> str:
    """One-line summary of the list selection."""
    item = ctx.list_state.selected_item()
    if item is None:
        return "(empty list)"
    line = f"[{ctx.list_state.selected_index}] {item.title} ({item.like_state.value})"
    if ctx.list_state.is_expanded:
        line += f"\n    {item.description}"
    return line


def format_result(text: str, result: TriggerResult) -> str:
    if not result.matched:
        return f"{text!r} -> no trigger"
    return f"{text!r} -> {result.category}:{result.keyword}"


def main(argv=None) -> int:
    args = parse_arguments(argv)

    config = load_config(args.config)
    override_from_args(config, args)
    configure_logging(config)

    ctx = create_app_components(config)
    print(f"{config.get('title', 'Voice Control Demo')} v{__version__}")
    print(describe_state(ctx))

    phrases = args.phrase if args.phrase else (line.rstrip("\n") for line in sys.stdin)
    for text in phrases:
        if not text.strip():
            continue
        result = process_phrase(ctx, text)
        print(format_result(text, result))
        print(describe_state(ctx))

    if args.metrics:
        print(f"engine: {ctx.trigger_engine.get_metrics()}")
        print(f"event_bus: {ctx.event_bus.get_metrics()}")

    ctx.event_bus.emit(EventType.SHUTDOWN, source="main")
    ctx.event_bus.process_events()
    ctx.event_bus.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())
