from claim_engine.application.commands.claim import AttemptClaimCommand
from claim_engine.application.ports.claim_checker import IClaimChecker
from claim_engine.application.ports.event_bus import IEventBus
from claim_engine.application.ports.faction_repository import IFactionRepository
from claim_engine.application.ports.territory_board import ITerritoryBoard
from claim_engine.application.services.claim_policy import ClaimPolicy
from claim_engine.domain.claim_result import ClaimResult
from claim_engine.domain.entities import FactionId, PlayerId
from claim_engine.domain.events import ClaimEvaluated, FactionNotifiedOfClaim
from claim_engine.domain.value_objects import ClaimLocation


class AttemptClaimHandler:
    """
    Handles the AttemptClaimCommand use case.
    Gathers the facts a claim is decided on, asks the claim checker for a
    verdict and announces the outcome. Ownership itself is left untouched.
    """
    def __init__(
        self,
        faction_repository: IFactionRepository,
        board: ITerritoryBoard,
        claim_checker: IClaimChecker,
        event_bus: IEventBus,
        settings: ClaimPolicy,
    ):
        self._repo = faction_repository
        self._board = board
        self._checker = claim_checker
        self._bus = event_bus
        self._settings = settings

    async def execute(self, command: AttemptClaimCommand) -> ClaimResult:
        """
        Executes the claim attempt.
        1. Fetches the requester, the faction claimed for and the current owner.
        2. Evaluates the claim.
        3. Publishes the decision.
        4. Publishes an owner notification if the result asks for one.
        """
        requester = await self._repo.get_player(PlayerId(command.requester_id))
        if not requester:
            raise ValueError(f"Player with id '{command.requester_id}' not found.")

        for_faction_id = FactionId(command.for_faction_id or requester.faction_id)
        for_faction = await self._repo.get_faction(for_faction_id)
        if not for_faction:
            raise ValueError(f"Faction with id '{for_faction_id}' not found.")

        location = ClaimLocation(world_name=command.world_name, chunk_x=command.chunk_x, chunk_z=command.chunk_z)
        from_faction_id = self._board.get_faction_id_at(location)
        from_faction = await self._repo.get_faction(from_faction_id)
        if not from_faction:
            # The board may still point at a faction that has been disbanded.
            from_faction = await self._repo.get_wilderness()

        result = self._checker.evaluate(requester, for_faction, from_faction, location)
        if result is None:
            raise ValueError("The configured claim checker left the claim undecided.")

        await self._bus.publish(ClaimEvaluated(
            requester_id=requester.id,
            for_faction_id=for_faction.id,
            from_faction_id=from_faction.id,
            location=location,
            allowed=result.allowed,
            outcome=result.outcome,
            message=result.message,
        ))

        if result.notify_others and self._settings.enemy_notify_on_claim and from_faction.is_normal():
            await self._bus.publish(FactionNotifiedOfClaim(
                notified_faction_id=from_faction.id,
                claiming_faction_id=for_faction.id,
                requester_id=requester.id,
                location=location,
                allowed=result.allowed,
            ))

        return result
