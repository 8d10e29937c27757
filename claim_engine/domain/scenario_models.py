from pydantic import BaseModel, Field
from typing import List, Dict, Any, Tuple

from claim_engine.domain.entities import FactionId, FactionKind, FactionFlag, PlayerId


class ConfigFaction(BaseModel):
    """Configuration model for a Faction. Land is derived from the territory section."""
    id: FactionId
    tag: str
    kind: FactionKind = FactionKind.NORMAL
    power: float = 0.0
    flags: List[FactionFlag] = Field(default_factory=list)
    relations: Dict[FactionId, str] = Field(default_factory=dict)  # Faction ID to relation wish, e.g. "ally"


class ConfigPlayer(BaseModel):
    """Configuration model for a player. Players make up the members of their faction."""
    id: PlayerId
    name: str
    faction: FactionId
    admin_mode: bool = False


class ConfigTerritory(BaseModel):
    """A block of chunks in one world owned by one faction."""
    faction: FactionId
    world: str
    chunks: List[Tuple[int, int]] = Field(default_factory=list)


class ConfigProtectedArea(BaseModel):
    """Chunks covered by an external protected region."""
    world: str
    chunks: List[Tuple[int, int]] = Field(default_factory=list)


class ConfigScenario(BaseModel):
    """
    The top-level configuration model for a claim scenario.
    This will be loaded from a YAML file.
    """
    id: str
    name: str
    description: str = ""
    # Overrides for the claim settings, keyed like ClaimSettings fields.
    settings: Dict[str, Any] = Field(default_factory=dict)

    factions: List[ConfigFaction] = Field(default_factory=list)
    players: List[ConfigPlayer] = Field(default_factory=list)
    territory: List[ConfigTerritory] = Field(default_factory=list)
    protected: List[ConfigProtectedArea] = Field(default_factory=list)
