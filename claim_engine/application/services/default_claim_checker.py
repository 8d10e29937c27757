from claim_engine.application.ports.claim_checker import IClaimChecker
from claim_engine.application.services.claim_results import ClaimResultCatalog
from claim_engine.domain.claim_result import ClaimOutcome, ClaimResult
from claim_engine.domain.entities import Faction, FactionPlayer
from claim_engine.domain.value_objects import ClaimLocation


class DefaultClaimChecker(IClaimChecker):
    """
    Default claim checking behavior, layered on top of another checker.

    Turns "no objection" into a concrete success and lets players in admin
    mode override every denial except the world protection one.
    Never returns None.
    """

    def __init__(self, base_checker: IClaimChecker, results: ClaimResultCatalog):
        self._base_checker = base_checker
        self._results = results

    def evaluate(
        self,
        requester: FactionPlayer,
        for_faction: Faction,
        from_faction: Faction,
        location: ClaimLocation,
    ) -> ClaimResult:
        base_result = self._base_checker.evaluate(requester, for_faction, from_faction, location)

        if base_result is None:
            if from_faction.is_normal():
                # Notifies the previous owner, if turned on in the settings.
                return self._results.success_from_enemy
            return self._results.success_default

        # Protected worlds must not change hands, not even for admins.
        if requester.has_admin_mode() and base_result.outcome != ClaimOutcome.WORLD_PROTECT:
            return self._results.success_admin

        return base_result
