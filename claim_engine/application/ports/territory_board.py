from abc import ABC, abstractmethod

from claim_engine.domain.entities import Faction, FactionId
from claim_engine.domain.value_objects import ClaimLocation


class ITerritoryBoard(ABC):
    """
    An interface (Port) for read-only queries against the territory board,
    i.e. which faction owns which chunk.
    """

    @abstractmethod
    def get_faction_id_at(self, location: ClaimLocation) -> FactionId:
        """
        Returns the id of the faction owning the chunk, the wilderness id if nobody does.
        """
        pass

    @abstractmethod
    def is_connected(self, location: ClaimLocation, faction: Faction) -> bool:
        """
        True if the chunk touches territory already owned by the faction.
        """
        pass

    @abstractmethod
    def is_border(self, location: ClaimLocation) -> bool:
        """
        True if the chunk touches territory owned by a different faction than its own owner.
        """
        pass
