from typing import Dict, Iterable, Tuple

from claim_engine.application.ports.territory_board import ITerritoryBoard
from claim_engine.domain.entities import Faction, FactionId, WILDERNESS_ID
from claim_engine.domain.value_objects import ClaimLocation

ChunkKey = Tuple[str, int, int]


class InMemoryTerritoryBoard(ITerritoryBoard):
    """
    An in-memory territory board mapping chunks to their owning faction.
    Chunks that were never assigned belong to the wilderness.
    """
    _owners: Dict[ChunkKey, FactionId]

    def __init__(self, owners: Dict[ClaimLocation, FactionId] | None = None):
        self._owners = {}
        for location, faction_id in (owners or {}).items():
            self.set_faction_at(location, faction_id)

    @staticmethod
    def _key(location: ClaimLocation) -> ChunkKey:
        return (location.world_name, location.chunk_x, location.chunk_z)

    def set_faction_at(self, location: ClaimLocation, faction_id: FactionId) -> None:
        if faction_id == WILDERNESS_ID:
            self._owners.pop(self._key(location), None)
        else:
            self._owners[self._key(location)] = faction_id

    def get_faction_id_at(self, location: ClaimLocation) -> FactionId:
        return self._owners.get(self._key(location), WILDERNESS_ID)

    def is_connected(self, location: ClaimLocation, faction: Faction) -> bool:
        return any(self.get_faction_id_at(neighbour) == faction.id for neighbour in location.neighbours())

    def is_border(self, location: ClaimLocation) -> bool:
        owner_id = self.get_faction_id_at(location)
        return any(self.get_faction_id_at(neighbour) != owner_id for neighbour in location.neighbours())

    def owned_locations(self, world_name: str) -> Iterable[Tuple[ClaimLocation, FactionId]]:
        """Every owned chunk in the world, with its owner."""
        for (world, x, z), owner_id in self._owners.items():
            if world == world_name:
                yield ClaimLocation(world_name=world, chunk_x=x, chunk_z=z), owner_id
