from abc import ABC, abstractmethod
from typing import Optional

from claim_engine.domain.entities import Faction, FactionId, FactionPlayer, PlayerId


class IFactionRepository(ABC):
    """
    An interface (Port) for retrieving faction and player state.
    This contract is defined by the application layer and implemented by
    the infrastructure layer.
    """

    @abstractmethod
    async def get_faction(self, faction_id: FactionId) -> Optional[Faction]:
        """
        Retrieves a faction by its unique ID.
        Returns None if the faction is not found.
        """
        pass

    @abstractmethod
    async def get_wilderness(self) -> Faction:
        """
        Returns the faction that owns all unclaimed land.
        """
        pass

    @abstractmethod
    async def get_player(self, player_id: PlayerId) -> Optional[FactionPlayer]:
        """
        Retrieves a player by ID. Returns None if the player is not found.
        """
        pass

    @abstractmethod
    async def save_faction(self, faction: Faction) -> None:
        pass

    @abstractmethod
    async def save_player(self, player: FactionPlayer) -> None:
        pass
