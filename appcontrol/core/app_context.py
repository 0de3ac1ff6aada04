#!/usr/bin/env python3


class AppContext:
    """Central context object containing all app-level dependencies."""

    def __init__(
        self,
        config,
        event_bus,
        trigger_engine,
        list_state,
        intent_router,
        transcription_handler,
    ):
        """Initialize app context with all dependencies.

        Args:
            config: Application configuration dict
            event_bus: EventBus instance
            trigger_engine: TriggerEngine instance
            list_state: MediaListState instance
            intent_router: IntentRouter instance
            transcription_handler: TranscriptionHandler instance
        """
        self.config = config
        self.event_bus = event_bus
        self.trigger_engine = trigger_engine
        self.list_state = list_state
        self.intent_router = intent_router
        self.transcription_handler = transcription_handler
