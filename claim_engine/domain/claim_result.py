from enum import Enum

from claim_engine.domain.value_objects import ImmutableValueObject


class ClaimOutcome(str, Enum):
    """Which policy outcome a ClaimResult stands for."""
    LAND_PROTECT = "fail_land_protect"
    WORLD_PROTECT = "fail_world_protect"
    SAME_FACTION = "fail_same_faction"
    NOT_ENOUGH_MEMBERS = "fail_not_enough_members"
    MORE_POWER_NEEDED = "fail_more_power_needed"
    MAX_LAND_REACHED = "fail_max_land_reached"
    NO_ENEMY_CLAIM = "fail_no_enemy_claim"
    RELATION = "fail_relation"
    MUST_CONNECT = "fail_must_connect"
    MUST_CONNECT_WILDERNESS = "fail_must_connect_wilderness"
    POWERFUL_ENEMY = "fail_powerful_enemy"
    INSIDE_ENEMY_TERRITORY = "fail_inside_enemy_territory"
    SUCCESS_ADMIN = "success_admin"
    SUCCESS_FROM_ENEMY = "success_from_enemy"
    SUCCESS_DEFAULT = "success_default"
    CUSTOM = "custom"


class ClaimResult(ImmutableValueObject):
    """
    The outcome of a claim attempt.

    allowed:       whether the claim may go ahead.
    notify_others: whether the faction owning the land should hear about the attempt.
    message:       already formatted text for the player; may be empty.
    outcome:       the catalog entry this result came from, CUSTOM for hand-built ones.
    """
    allowed: bool
    notify_others: bool
    message: str
    outcome: ClaimOutcome = ClaimOutcome.CUSTOM

    def is_allowed(self) -> bool:
        return self.allowed

    def should_notify_others(self) -> bool:
        return self.notify_others

    def get_message(self) -> str:
        return self.message
