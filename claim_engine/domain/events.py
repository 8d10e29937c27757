from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pydantic import BaseModel, Field

from claim_engine.domain.claim_result import ClaimOutcome
from claim_engine.domain.value_objects import ClaimLocation

# Plain strings here keep the events independent from the entity module.
FactionId = str
PlayerId = str


class DomainEvent(BaseModel, ABC):
    """
    An abstract base class for domain events.
    Represents something significant that has happened in the domain.
    """
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    @abstractmethod
    def name(self) -> str:
        """A unique, machine-readable name for the event."""
        pass


class ClaimEvaluated(DomainEvent):
    """Event triggered after a claim attempt has been decided, whatever the verdict."""
    requester_id: PlayerId
    for_faction_id: FactionId
    from_faction_id: FactionId
    location: ClaimLocation
    allowed: bool
    outcome: ClaimOutcome
    message: str = ""

    @property
    def name(self) -> str:
        return "claim.evaluated"


class FactionNotifiedOfClaim(DomainEvent):
    """Event triggered when the owner of a chunk has to be told about a claim attempt on it."""
    notified_faction_id: FactionId
    claiming_faction_id: FactionId
    requester_id: PlayerId
    location: ClaimLocation
    allowed: bool

    @property
    def name(self) -> str:
        return "claim.owner_notified"
