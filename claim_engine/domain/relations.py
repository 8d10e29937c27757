from enum import Enum


class Relation(Enum):
    """
    The standing between two factions, ordered by closeness.
    ENEMY is the most distant, MEMBER (the same faction) the closest.

    Each member carries its closeness value and the labels used in messages:
    (value, player_one, player_many, faction_one, faction_many).
    """
    ENEMY = (10, "an enemy", "enemies", "an enemy faction", "enemy factions")
    NEUTRAL = (20, "someone neutral to you", "those neutral to you", "a neutral faction", "neutral factions")
    TRUCE = (30, "someone in truce with you", "those in truce with you", "a faction in truce", "factions in truce")
    ALLY = (40, "an ally", "allies", "an allied faction", "allied factions")
    MEMBER = (50, "a member in your faction", "members in your faction", "your faction", "your factions")

    def __init__(self, closeness: int, player_one: str, player_many: str, faction_one: str, faction_many: str):
        self.closeness = closeness
        self.desc_player_one = player_one
        self.desc_player_many = player_many
        self.desc_faction_one = faction_one
        self.desc_faction_many = faction_many

    def is_at_least(self, threshold: "Relation") -> bool:
        """True if this relation is at least as close as the threshold."""
        return self.closeness >= threshold.closeness

    def is_at_most(self, threshold: "Relation") -> bool:
        return self.closeness <= threshold.closeness

    def __lt__(self, other: "Relation") -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return self.closeness < other.closeness

    @classmethod
    def between(cls, wish: "Relation", other_wish: "Relation") -> "Relation":
        """
        Resolves two one-sided relation wishes into the actual relation.
        Both sides have to agree, so the less close wish wins.
        """
        return wish if wish.closeness <= other_wish.closeness else other_wish

    @classmethod
    def from_name(cls, name: str) -> "Relation":
        """Looks up a relation by its case-insensitive name (e.g. 'ally')."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown relation '{name}'.") from None
