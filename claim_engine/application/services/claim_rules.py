"""
The ordered rules deciding whether a chunk may be claimed.

Each rule looks at the claim request and the environment and either raises an
objection (a failing ClaimResult) or lets the request through (None). The
rules run in a fixed order and the first objection wins.
"""
from pydantic import BaseModel, ConfigDict
from typing import Callable, NamedTuple, Optional, Sequence

from claim_engine.application.ports.region_protection import IRegionProtection
from claim_engine.application.ports.territory_board import ITerritoryBoard
from claim_engine.application.services.claim_policy import ClaimPolicy
from claim_engine.application.services.claim_results import ClaimResultCatalog
from claim_engine.domain.claim_result import ClaimResult
from claim_engine.domain.entities import Faction, FactionFlag, FactionPlayer
from claim_engine.domain.relations import Relation
from claim_engine.domain.value_objects import ClaimLocation


class ClaimRequest(BaseModel):
    """The four facts a claim is decided on."""
    model_config = ConfigDict(frozen=True)

    requester: FactionPlayer
    for_faction: Faction
    from_faction: Faction
    location: ClaimLocation


class ClaimEnvironment(BaseModel):
    """
    Everything the rules consult besides the request itself.
    Passed explicitly so that the rules never reach for global state.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    settings: ClaimPolicy
    board: ITerritoryBoard
    region_protection: IRegionProtection
    results: ClaimResultCatalog


RuleCheck = Callable[[ClaimRequest, ClaimEnvironment], Optional[ClaimResult]]


class ClaimRule(NamedTuple):
    """A named check. Returns a failing ClaimResult to object, None to let the claim through."""
    name: str
    check: RuleCheck


def run_rules(
    rules: Sequence[ClaimRule],
    request: ClaimRequest,
    environment: ClaimEnvironment,
) -> tuple[Optional[ClaimRule], Optional[ClaimResult]]:
    """
    Evaluates the rules in order and stops at the first objection.
    Returns the objecting rule together with its result, or (None, None).
    """
    for rule in rules:
        result = rule.check(request, environment)
        if result is not None:
            return rule, result
    return None, None


# =====================================================================
# Base rules, in evaluation order
# =====================================================================

def check_region_protection(request: ClaimRequest, env: ClaimEnvironment) -> Optional[ClaimResult]:
    if env.settings.world_guard_checking and env.region_protection.has_protected_region(request.location):
        return env.results.fail_land_protect
    return None


def check_world_protection(request: ClaimRequest, env: ClaimEnvironment) -> Optional[ClaimResult]:
    if request.location.world_name in env.settings.worlds_no_claiming:
        return env.results.fail_world_protect
    return None


def check_self_claim(request: ClaimRequest, env: ClaimEnvironment) -> Optional[ClaimResult]:
    if request.for_faction.id == request.from_faction.id:
        return env.results.fail_same_faction(request.for_faction.describe_to(request.requester, True))
    return None


def check_min_members(request: ClaimRequest, env: ClaimEnvironment) -> Optional[ClaimResult]:
    min_members = env.settings.claims_require_min_faction_members
    if request.for_faction.member_count() < min_members:
        return env.results.fail_not_enough_members(min_members)
    return None


def check_power_vs_land(request: ClaimRequest, env: ClaimEnvironment) -> Optional[ClaimResult]:
    if request.for_faction.land_rounded() >= request.for_faction.power_rounded():
        return env.results.fail_more_power_needed
    return None


def check_land_cap(request: ClaimRequest, env: ClaimEnvironment) -> Optional[ClaimResult]:
    cap = env.settings.claimed_lands_max
    faction = request.for_faction
    if cap > 0 and faction.land_rounded() >= cap and not faction.get_flag(FactionFlag.INFINITE_POWER):
        return env.results.fail_more_power_needed
    return None


def check_claim_from_others(request: ClaimRequest, env: ClaimEnvironment) -> Optional[ClaimResult]:
    if not env.settings.claiming_from_others_allowed and request.from_faction.is_normal():
        return env.results.fail_no_enemy_claim
    return None


def check_relation(request: ClaimRequest, env: ClaimEnvironment) -> Optional[ClaimResult]:
    if request.from_faction.is_none():
        return None
    relation = request.from_faction.relation_to(request.for_faction)
    if relation.is_at_least(Relation.TRUCE):
        return env.results.fail_relation(relation)
    return None


def check_connectivity(request: ClaimRequest, env: ClaimEnvironment) -> Optional[ClaimResult]:
    settings = env.settings
    if not settings.claims_must_be_connected:
        return None
    if request.for_faction.land_rounded_in_world(request.location.world_name) <= 0:
        return None
    if env.board.is_connected(request.location, request.for_faction):
        return None

    unconnected_allowed = settings.claims_can_be_unconnected_if_owned_by_other_faction
    if unconnected_allowed and request.from_faction.is_normal():
        return None
    if unconnected_allowed:
        return env.results.fail_must_connect
    return env.results.fail_must_connect_wilderness


def check_enemy_territory(request: ClaimRequest, env: ClaimEnvironment) -> Optional[ClaimResult]:
    owner = request.from_faction
    if not owner.is_normal():
        return None
    if not owner.has_land_inflation():
        return env.results.fail_powerful_enemy(owner.get_tag(request.requester))
    if not env.board.is_border(request.location):
        return env.results.fail_inside_enemy_territory
    return None


BASE_RULES: tuple[ClaimRule, ...] = (
    ClaimRule("region_protection", check_region_protection),
    ClaimRule("world_protection", check_world_protection),
    ClaimRule("self_claim", check_self_claim),
    ClaimRule("min_members", check_min_members),
    ClaimRule("power_vs_land", check_power_vs_land),
    ClaimRule("land_cap", check_land_cap),
    ClaimRule("claim_from_others", check_claim_from_others),
    ClaimRule("relation", check_relation),
    ClaimRule("connectivity", check_connectivity),
    ClaimRule("enemy_territory", check_enemy_territory),
)
