from claim_engine.application.ports.event_bus import IEventBus
from claim_engine.application.ports.logger import ILogger
from claim_engine.domain.events import DomainEvent, ClaimEvaluated, FactionNotifiedOfClaim


class LoggingEventHandler:
    """
    An event handler that logs claim decisions and owner notifications.
    """
    def __init__(self, logger: ILogger):
        self._logger = logger

    async def handle(self, event: DomainEvent):
        """
        Generic handler that dispatches to specific methods based on event type.
        """
        try:
            if isinstance(event, ClaimEvaluated):
                self._handle_claim_evaluated(event)
            elif isinstance(event, FactionNotifiedOfClaim):
                self._handle_faction_notified(event)
            else:
                self._logger.debug(f"Received unknown event type: {type(event).__name__}")
        except Exception as e:
            self._logger.error(f"Error in LoggingEventHandler: {e}")

    def _handle_claim_evaluated(self, event: ClaimEvaluated):
        verdict = "ALLOWED" if event.allowed else "DENIED"
        self._logger.info(
            f"CLAIM {verdict}: '{event.requester_id}' claiming {event.location} "
            f"for '{event.for_faction_id}' from '{event.from_faction_id}' ({event.outcome.value})."
        )

    def _handle_faction_notified(self, event: FactionNotifiedOfClaim):
        self._logger.info(
            f"OWNER NOTIFIED: '{event.notified_faction_id}' told that '{event.claiming_faction_id}' "
            f"tried to claim {event.location} (allowed={event.allowed})."
        )

    def subscribe(self, event_bus: IEventBus):
        """Subscribes the handler to all relevant events on the event bus."""
        event_bus.subscribe(DomainEvent, self.handle)
