from typing import Optional, Sequence

from claim_engine.application.ports.claim_checker import IClaimChecker
from claim_engine.application.ports.logger import ILogger
from claim_engine.application.services.claim_rules import (
    BASE_RULES,
    ClaimEnvironment,
    ClaimRequest,
    ClaimRule,
    run_rules,
)
from claim_engine.domain.claim_result import ClaimResult
from claim_engine.domain.entities import Faction, FactionPlayer
from claim_engine.domain.value_objects import ClaimLocation


class BaseClaimChecker(IClaimChecker):
    """
    Runs the base claim rules, followed by any extra rules given at construction.

    Note that if the claim would succeed by default, None is returned.
    Extra rules only run when every base rule has let the claim through, so
    they can add policy but never change the verdict of an earlier rule.
    """

    def __init__(
        self,
        environment: ClaimEnvironment,
        extra_rules: Sequence[ClaimRule] = (),
        logger: Optional[ILogger] = None,
    ):
        self._environment = environment
        self._rules: tuple[ClaimRule, ...] = tuple(BASE_RULES) + tuple(extra_rules)
        self._logger = logger

    @property
    def rules(self) -> tuple[ClaimRule, ...]:
        return self._rules

    def evaluate(
        self,
        requester: FactionPlayer,
        for_faction: Faction,
        from_faction: Faction,
        location: ClaimLocation,
    ) -> Optional[ClaimResult]:
        request = ClaimRequest(
            requester=requester,
            for_faction=for_faction,
            from_faction=from_faction,
            location=location,
        )
        rule, result = run_rules(self._rules, request, self._environment)

        if self._logger and rule is not None:
            self._logger.debug(
                f"Claim of {location} by '{requester.name}' for '{for_faction.tag}' "
                f"stopped by rule '{rule.name}' ({result.outcome.value})."
            )
        return result
