from typing import Dict, Iterable, Optional

from claim_engine.domain.entities import Faction, FactionId, FactionPlayer, PlayerId, WILDERNESS_ID, wilderness
from claim_engine.application.ports.faction_repository import IFactionRepository


class InMemoryFactionRepository(IFactionRepository):
    """
    An in-memory implementation of the IFactionRepository.
    It stores factions and players in simple dictionaries.
    Useful for testing and development without a real database.
    The wilderness faction is always present.
    """
    _factions: Dict[FactionId, Faction]
    _players: Dict[PlayerId, FactionPlayer]

    def __init__(self, factions: Iterable[Faction] = (), players: Iterable[FactionPlayer] = ()):
        self.clear()
        for faction in factions:
            self._factions[faction.id] = faction.model_copy(deep=True)
        for player in players:
            self._players[player.id] = player.model_copy(deep=True)

    async def get_faction(self, faction_id: FactionId) -> Optional[Faction]:
        """
        Retrieves a faction from the in-memory dictionary.
        Returns a copy to prevent mutation of the stored state.
        """
        faction = self._factions.get(faction_id)
        return faction.model_copy(deep=True) if faction else None

    async def get_wilderness(self) -> Faction:
        return self._factions[WILDERNESS_ID].model_copy(deep=True)

    async def get_player(self, player_id: PlayerId) -> Optional[FactionPlayer]:
        player = self._players.get(player_id)
        return player.model_copy(deep=True) if player else None

    async def save_faction(self, faction: Faction) -> None:
        """
        Saves a faction to the in-memory dictionary.
        Stores a copy to ensure the repository owns its state.
        """
        self._factions[faction.id] = faction.model_copy(deep=True)

    async def save_player(self, player: FactionPlayer) -> None:
        self._players[player.id] = player.model_copy(deep=True)

    def clear(self) -> None:
        """A helper method for tests to reset the repository to just the wilderness."""
        self._factions = {WILDERNESS_ID: wilderness()}
        self._players = {}
