#!/usr/bin/env python3
import logging
from collections.abc import Callable
from enum import Enum

from appcontrol.voice.triggers import Category, TriggerResult


class Intent(str, Enum):
    """Intent constants for type-safe intent routing.

    Inherits from str so intents can be used as plain string keys.
    """

    # Navigation intents
    NEXT = "next"
    PREVIOUS = "previous"
    SELECT_TITLE = "select_title"

    # Item intents
    TOGGLE_LIKE = "toggle_like"
    TOGGLE_DISLIKE = "toggle_dislike"
    TOGGLE_EXPAND = "toggle_expand"

    def __str__(self) -> str:
        return self.value


# Trigger category -> intent
TRIGGER_INTENT_MAP: dict[Category, Intent] = {
    Category.ADVANCE: Intent.NEXT,
    Category.RETREAT: Intent.PREVIOUS,
    Category.LIKE: Intent.TOGGLE_LIKE,
    Category.DISLIKE: Intent.TOGGLE_DISLIKE,
    Category.EXPAND: Intent.TOGGLE_EXPAND,
    Category.DYNAMIC: Intent.SELECT_TITLE,
}


class IntentRouter:
    """Routes intents to registered handlers.

    All handlers follow the signature: handler(event_bus, **slots)
    """

    def __init__(self, event_bus=None):
        """Initialize IntentRouter.

        Args:
            event_bus: EventBus instance (injected, not imported globally)
        """
        self.handlers: dict[str, Callable] = {}
        self.event_bus = event_bus
        self.logger = logging.getLogger(__name__)

    def register(self, handler_name: Intent | str, callback: Callable):
        """Register an intent handler.

        Args:
            handler_name: Intent enum or string name of the intent to handle
            callback: Function to call when intent is emitted
        """
        self.handlers[str(handler_name)] = callback

    def emit(self, handler_name: Intent | str, **slots) -> bool:
        """Emit an intent with optional slot parameters.

        Args:
            handler_name: Intent enum or string name of the intent to emit
            **slots: Slot parameters passed to the handler (e.g., keyword="dune")

        Returns:
            True if a handler was found
        """
        key = str(handler_name)

        if slots:
            params_str = " ".join(f"{k}={v}" for k, v in slots.items())
            self.logger.debug(f"Intent emitted: {key} {params_str}")
        else:
            self.logger.debug(f"Intent emitted: {key}")

        handler = self.handlers.get(key)
        if handler is None:
            self.logger.debug(f"No handler registered for intent: {key}")
            return False
        handler(self.event_bus, **slots)
        return True

    def route_trigger(self, result: TriggerResult) -> bool:
        """Route a trigger result to its intent.

        Title triggers carry the matched keyword as the 'keyword' slot.

        Args:
            result: Result from TriggerEngine.classify

        Returns:
            True if an intent handler ran
        """
        if not result.matched:
            self.logger.debug("Ignoring unmatched trigger result")
            return False

        intent = TRIGGER_INTENT_MAP.get(result.category)
        if intent is None:
            self.logger.warning(f"No intent mapped for trigger category: {result.category}")
            return False

        self.logger.info(f"Routing trigger: {result.category}:{result.keyword!r} -> {intent}")
        if intent is Intent.SELECT_TITLE:
            return self.emit(intent, keyword=result.keyword)
        return self.emit(intent)
