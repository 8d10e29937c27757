from pydantic import BaseModel
from typing import Optional

# Using simple strings for now, but aliased types from the domain can be used.
PlayerId = str
FactionId = str


class AttemptClaimCommand(BaseModel):
    """
    A Command Data Transfer Object (DTO).
    It represents a player's intent to claim a single chunk. Without a
    for_faction_id the player claims for their own faction.
    """
    requester_id: PlayerId
    world_name: str
    chunk_x: int
    chunk_z: int
    for_faction_id: Optional[FactionId] = None
