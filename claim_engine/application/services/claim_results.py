from typing import Optional

from claim_engine.application.ports.message_formatter import IMessageFormatter
from claim_engine.domain.claim_result import ClaimOutcome, ClaimResult
from claim_engine.domain.relations import Relation


class ClaimResultCatalog:
    """
    Builds every ClaimResult the claim checkers can hand out.

    Parameter-free outcomes are built once, when the catalog is created, and
    shared from then on. Outcomes that embed a faction name, a relation or a
    number are built on demand by the fail_* factory methods. Every message
    goes through the formatter exactly once.
    """

    def __init__(self, formatter: IMessageFormatter):
        self._formatter = formatter

        # Something about this location is protected, usually an external region.
        self.fail_land_protect = self._build(
            ClaimOutcome.LAND_PROTECT, False, False, "<b>This land is protected")
        self.fail_world_protect = self._build(
            ClaimOutcome.WORLD_PROTECT, False, False, "<b>Cannot claim land in this world.")
        self.fail_more_power_needed = self._build(
            ClaimOutcome.MORE_POWER_NEEDED, False, False, "<b>You can't claim more land! You need more power!")
        self.fail_max_land_reached = self._build(
            ClaimOutcome.MAX_LAND_REACHED, False, False, "<b>Limit reached. You can't claim more land!")
        self.fail_no_enemy_claim = self._build(
            ClaimOutcome.NO_ENEMY_CLAIM, False, False, "<b>You may not claim land from others.")
        self.fail_inside_enemy_territory = self._build(
            ClaimOutcome.INSIDE_ENEMY_TERRITORY, False, False,
            "<b>You can't claim land from inside of enemy territory - start on the outside.")
        self.fail_must_connect = self._build(
            ClaimOutcome.MUST_CONNECT, False, False,
            "<b>You can only claim additional land which is connected to your first claim!")
        self.fail_must_connect_wilderness = self._build(
            ClaimOutcome.MUST_CONNECT_WILDERNESS, False, False,
            "<b>You can only claim additional land which is connected to your first claim, "
            "or controlled by another faction!")
        self.success_admin = self._build(
            ClaimOutcome.SUCCESS_ADMIN, True, False, "<g>Claim succeeded due to admin privileges.")
        # Notifies the previous owner, if enabled in the settings.
        self.success_from_enemy = self._build(ClaimOutcome.SUCCESS_FROM_ENEMY, True, True, "")
        self.success_default = self._build(ClaimOutcome.SUCCESS_DEFAULT, True, False, "")

    # --- Custom results ---

    def create(self, allowed: bool, notify_others: bool, message: str) -> ClaimResult:
        """Builds a custom result, running the raw message through the formatter."""
        return ClaimResult(allowed=allowed, notify_others=notify_others, message=self._formatter.format(message))

    @staticmethod
    def create_pre_formatted(allowed: bool, notify_others: bool, formatted_message: Optional[str]) -> ClaimResult:
        """
        Builds a custom result from a message that was already formatted.
        Use the empty string if no message is wanted; None is rejected.
        """
        if formatted_message is None:
            raise ValueError("Message cannot be None.")
        return ClaimResult(allowed=allowed, notify_others=notify_others, message=formatted_message)

    # --- Parametrized outcomes ---

    def fail_same_faction(self, faction_name: str) -> ClaimResult:
        """The land already belongs to the claiming faction."""
        return self._build(ClaimOutcome.SAME_FACTION, False, False,
                           "%s<i> already own this land.", faction_name)

    def fail_powerful_enemy(self, faction_name: str) -> ClaimResult:
        """The owner has enough power to hold its land. The owner gets notified."""
        return self._build(ClaimOutcome.POWERFUL_ENEMY, False, True,
                           "%s<i> owns this land and is strong enough to keep it.", faction_name)

    def fail_not_enough_members(self, min_members: int) -> ClaimResult:
        return self._build(ClaimOutcome.NOT_ENOUGH_MEMBERS, False, False,
                           "Factions must have at least <h>%s<b> members to claim land.", str(min_members))

    def fail_relation(self, relation: Relation) -> ClaimResult:
        """The claiming faction stands too close to the owner to take its land."""
        return self._build(ClaimOutcome.RELATION, False, False,
                           "<b>You may not claim land from <i>%s<b>.", relation.desc_faction_many)

    # --- Internals ---

    def _build(self, outcome: ClaimOutcome, allowed: bool, notify_others: bool, template: str, *args: object) -> ClaimResult:
        return ClaimResult(
            allowed=allowed,
            notify_others=notify_others,
            message=self._formatter.format(template, *args),
            outcome=outcome,
        )
