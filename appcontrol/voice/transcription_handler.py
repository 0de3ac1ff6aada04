"""Transcription handler - turns recognized phrases into trigger events."""

from appcontrol.core.event_bus import Event, EventBus, EventType
from appcontrol.core.event_payloads import TranscriptionPayload, TriggerPayload
from appcontrol.core.logging_utils import log_event, setup_logger
from appcontrol.voice.trigger_engine import TriggerEngine
from appcontrol.voice.triggers import TriggerResult

logger = setup_logger(__name__)


def publish_transcription(event_bus: EventBus, text: str, source: str = "stt"):
    """Announce a finished transcription on the bus.

    Args:
        event_bus: EventBus instance
        text: Raw transcription
        source: Producer identifier
    """
    event_bus.emit(EventType.VOICE_TRANSCRIPTION_READY, TranscriptionPayload(text=text), source=source)


class TranscriptionHandler:
    """Connects the trigger engine to the event bus.

    Listens for transcriptions and item list changes. Matched phrases are
    published as TRIGGER_DETECTED, everything else as TRIGGER_MISSED.
    Unsubscribes itself on SHUTDOWN.
    """

    def __init__(self, engine: TriggerEngine, event_bus: EventBus):
        """Initialize transcription handler.

        Args:
            engine: TriggerEngine used for classification
            event_bus: EventBus instance (injected)
        """
        self.engine = engine
        self.event_bus = event_bus
        self.last_result: TriggerResult | None = None

        self._tokens = [
            self.event_bus.subscribe(EventType.VOICE_TRANSCRIPTION_READY, self._on_transcription),
            self.event_bus.subscribe(EventType.ITEMS_CHANGED, self._on_items_changed),
            self.event_bus.subscribe(EventType.SHUTDOWN, self._on_shutdown),
        ]

        logger.info("Transcription handler initialized")

    def handle_transcription(self, text: str) -> TriggerResult:
        """Classify a phrase and publish the outcome.

        Args:
            text: Raw transcription

        Returns:
            The classification result
        """
        result = self.engine.classify(text)
        self.last_result = result
        payload = TriggerPayload(
            category=result.category.value, keyword=result.keyword, text=text
        )

        if result.matched:
            log_event(logger, "trigger_detected", result.to_payload())
            self.event_bus.emit(EventType.TRIGGER_DETECTED, payload, source="transcription_handler")
        else:
            logger.debug(f"No trigger in: {text!r}")
            self.event_bus.emit(EventType.TRIGGER_MISSED, payload, source="transcription_handler")
        return result

    def _on_transcription(self, event: Event):
        text = event.payload.get("text")
        if not isinstance(text, str):
            logger.warning(f"Ignoring transcription event without text from {event.source}")
            return
        self.handle_transcription(text)

    def _on_items_changed(self, event: Event):
        titles = event.payload.get("titles", [])
        self.engine.register_dynamic_keywords(titles)

    def _on_shutdown(self, event: Event):
        logger.info(f"Shutdown requested by {event.source}")
        self.close()

    def close(self):
        """Unsubscribe from the event bus."""
        for token in self._tokens:
            self.event_bus.unsubscribe_token(token)
        self._tokens = []
