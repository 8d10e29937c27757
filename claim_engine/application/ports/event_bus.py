from abc import ABC, abstractmethod
from typing import Callable, Type

from claim_engine.domain.events import DomainEvent


class IEventBus(ABC):
    """
    An interface (Port) for an event bus.
    Claim decisions are announced on it so that logging and owner
    notifications stay decoupled from the claim checkers.
    """

    @abstractmethod
    async def publish(self, event: DomainEvent) -> None:
        """
        Publishes a domain event to all subscribed handlers.
        """
        pass

    @abstractmethod
    def subscribe(self, event_type: Type[DomainEvent], handler: Callable):
        """
        Subscribes a handler to a specific type of domain event (or any of its subtypes).
        The handler is expected to be an awaitable callable that accepts the event as an argument.
        """
        pass
