import math
from enum import Enum
from pydantic import BaseModel, Field
from typing import NewType, List, Dict, Optional

from claim_engine.domain.relations import Relation

# Using NewType for semantic clarity in the domain model.
FactionId = NewType('FactionId', str)
PlayerId = NewType('PlayerId', str)

WILDERNESS_ID = FactionId("wilderness")

# Power reported by factions flagged with infinite power.
INFINITE_POWER = 999999


class FactionKind(str, Enum):
    """Classification of a faction. Only NORMAL factions are player-run."""
    NONE = "none"  # Wilderness, i.e. unowned land
    SAFE = "safe"  # Safe zone
    WAR = "war"    # War zone
    NORMAL = "normal"


class FactionFlag(str, Enum):
    """Named boolean flags a faction can carry."""
    INFINITE_POWER = "infinite_power"
    PEACEFUL = "peaceful"
    PERMANENT = "permanent"


class FactionPlayer(BaseModel):
    """A player who can attempt claims, usually on behalf of their own faction."""
    id: PlayerId
    name: str
    faction_id: FactionId = WILDERNESS_ID
    admin_mode: bool = False

    def has_admin_mode(self) -> bool:
        return self.admin_mode


class Faction(BaseModel):
    """
    A read-only snapshot of a faction's state, as consulted by the claim rules.
    Land is counted in chunks and kept per world; power is a fractional score.
    """
    id: FactionId
    tag: str
    kind: FactionKind = FactionKind.NORMAL
    member_ids: List[PlayerId] = Field(default_factory=list)
    power: float = 0.0
    land_by_world: Dict[str, int] = Field(default_factory=dict)
    flags: Dict[FactionFlag, bool] = Field(default_factory=dict)
    relation_wishes: Dict[FactionId, Relation] = Field(default_factory=dict)

    # --- Classification ---

    def is_none(self) -> bool:
        return self.kind == FactionKind.NONE

    def is_normal(self) -> bool:
        return self.kind == FactionKind.NORMAL

    def get_flag(self, flag: FactionFlag) -> bool:
        return self.flags.get(flag, False)

    # --- Members, land and power ---

    def member_count(self) -> int:
        return len(self.member_ids)

    def land_rounded(self) -> int:
        return sum(self.land_by_world.values())

    def land_rounded_in_world(self, world_name: str) -> int:
        return self.land_by_world.get(world_name, 0)

    def power_rounded(self) -> int:
        if self.get_flag(FactionFlag.INFINITE_POWER):
            return INFINITE_POWER
        # Half-up rounding, so 2.5 rounds to 3 rather than to the even 2.
        return math.floor(self.power + 0.5)

    def has_land_inflation(self) -> bool:
        """True when the faction has more power than land, which leaves its border open to claims."""
        return self.power_rounded() > self.land_rounded()

    # --- Relations ---

    def get_relation_wish(self, other: "Faction") -> Relation:
        return self.relation_wishes.get(other.id, Relation.NEUTRAL)

    def relation_to(self, other: "Faction") -> Relation:
        """
        The actual relation between this faction and another one.
        Non-normal factions are neutral to everyone, peaceful ones are always in truce.
        """
        if self.id == other.id:
            return Relation.MEMBER
        if not self.is_normal() or not other.is_normal():
            return Relation.NEUTRAL
        if self.get_flag(FactionFlag.PEACEFUL) or other.get_flag(FactionFlag.PEACEFUL):
            return Relation.TRUCE
        return Relation.between(self.get_relation_wish(other), other.get_relation_wish(self))

    # --- Display ---

    def get_tag(self, viewer: Optional[FactionPlayer] = None) -> str:
        return self.tag

    def describe_to(self, viewer: Optional[FactionPlayer] = None, capitalize: bool = False) -> str:
        """Name of this faction as seen by the given player ('your faction' for their own)."""
        if viewer is not None and viewer.faction_id == self.id:
            description = Relation.MEMBER.desc_faction_one
        else:
            description = self.tag
        if capitalize and description:
            description = description[0].upper() + description[1:]
        return description


def wilderness() -> Faction:
    """The faction that owns every unclaimed chunk."""
    return Faction(
        id=WILDERNESS_ID,
        tag="Wilderness",
        kind=FactionKind.NONE,
        flags={FactionFlag.PERMANENT: True, FactionFlag.INFINITE_POWER: True},
    )
