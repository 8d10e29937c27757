from abc import ABC, abstractmethod
from typing import Optional

from claim_engine.domain.claim_result import ClaimResult
from claim_engine.domain.entities import Faction, FactionPlayer
from claim_engine.domain.value_objects import ClaimLocation


class IClaimChecker(ABC):
    """
    An interface (Port) deciding whether a player's faction claim should be allowed.
    """

    @abstractmethod
    def evaluate(
        self,
        requester: FactionPlayer,
        for_faction: Faction,
        from_faction: Faction,
        location: ClaimLocation,
    ) -> Optional[ClaimResult]:
        """
        Can this player claim the chunk at `location` for `for_faction`?

        requester:    the player attempting the claim
        for_faction:  the faction the player is claiming for
        from_faction: the faction currently owning the chunk (often the wilderness)
        location:     the chunk being claimed

        Returns None when the checker has no objection. Callers layering on
        top of a checker have to treat None and a success result as distinct
        until the outermost layer turns None into a concrete success.
        Implementations keep no memory of earlier calls and never modify their inputs.
        """
        pass
