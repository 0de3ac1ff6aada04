#!/usr/bin/env python3
"""Intent handlers that apply voice commands to the media list."""

from appcontrol.core.event_bus import Event, EventBus, EventType
from appcontrol.core.list_state import MediaListState
from appcontrol.core.logging_utils import setup_logger
from appcontrol.routing.intent_router import Intent, IntentRouter
from appcontrol.voice.triggers import Category, TriggerResult

logger = setup_logger(__name__)


def register_all_intents(intent_router: IntentRouter, list_state: MediaListState):
    """Register all application intents.

    Args:
        intent_router: IntentRouter instance
        list_state: MediaListState the handlers mutate
    """
    _register_navigation_intents(intent_router, list_state)
    _register_item_intents(intent_router, list_state)


def _register_navigation_intents(intent_router: IntentRouter, list_state: MediaListState):
    """Register next/previous and select-by-title.

    All handlers use signature: handler(event_bus, **slots)
    """

    def go_next(event_bus, **slots):
        list_state.go_next()

    def go_previous(event_bus, **slots):
        list_state.go_previous()

    def select_title(event_bus, keyword="", **slots):
        index = list_state.index_of_title(keyword)
        if index is None:
            logger.warning(f"No list item titled {keyword!r}")
            return
        list_state.select_item(index)

    intent_router.register(Intent.NEXT, go_next)
    intent_router.register(Intent.PREVIOUS, go_previous)
    intent_router.register(Intent.SELECT_TITLE, select_title)


def _register_item_intents(intent_router: IntentRouter, list_state: MediaListState):
    """Register like/dislike/expand for the selected item."""

    intent_router.register(Intent.TOGGLE_LIKE, lambda event_bus, **slots: list_state.toggle_like())
    intent_router.register(
        Intent.TOGGLE_DISLIKE, lambda event_bus, **slots: list_state.toggle_dislike()
    )
    intent_router.register(
        Intent.TOGGLE_EXPAND, lambda event_bus, **slots: list_state.toggle_expand()
    )


def connect_trigger_events(event_bus: EventBus, intent_router: IntentRouter):
    """Route TRIGGER_DETECTED events through the intent router.

    Returns:
        Subscription token
    """

    def on_trigger(event: Event):
        try:
            result = TriggerResult(
                category=Category(event.payload.get("category")),
                keyword=event.payload.get("keyword", ""),
                matched=True,
            )
        except ValueError as e:
            logger.warning(f"Ignoring malformed trigger from {event.source}: {e}")
            return
        intent_router.route_trigger(result)

    return event_bus.subscribe(EventType.TRIGGER_DETECTED, on_trigger)
