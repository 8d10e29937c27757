from pydantic import BaseModel
from typing import Set


class ClaimPolicy(BaseModel):
    """
    Thresholds and switches consulted by the claim rules and the claim use case.
    The defaults apply when nothing else is configured.
    """
    # Deny claims touching a region of the external protection system.
    world_guard_checking: bool = False
    # Worlds in which nobody may claim, admins included.
    worlds_no_claiming: Set[str] = set()
    claims_require_min_faction_members: int = 1
    # 0 means no cap.
    claimed_lands_max: int = 0
    claiming_from_others_allowed: bool = True
    claims_must_be_connected: bool = False
    # Only relevant with claims_must_be_connected: land of another faction may still be taken unconnected.
    claims_can_be_unconnected_if_owned_by_other_faction: bool = True
    enemy_notify_on_claim: bool = True
