import pytest
from unittest.mock import AsyncMock

from claim_engine.application.commands.claim import AttemptClaimCommand
from claim_engine.application.services.base_claim_checker import BaseClaimChecker
from claim_engine.application.services.claim_policy import ClaimPolicy
from claim_engine.application.services.claim_results import ClaimResultCatalog
from claim_engine.application.services.claim_rules import ClaimEnvironment
from claim_engine.application.services.default_claim_checker import DefaultClaimChecker
from claim_engine.application.use_cases.attempt_claim import AttemptClaimHandler
from claim_engine.domain.claim_result import ClaimOutcome
from claim_engine.domain.entities import Faction, FactionPlayer
from claim_engine.domain.events import ClaimEvaluated, FactionNotifiedOfClaim
from claim_engine.domain.relations import Relation
from claim_engine.domain.value_objects import ClaimLocation
from claim_engine.infrastructure.event_bus.local_event_bus import LocalEventBus
from claim_engine.infrastructure.formatting.markup_formatter import MarkupMessageFormatter
from claim_engine.infrastructure.repositories.in_memory_faction_repository import InMemoryFactionRepository
from claim_engine.infrastructure.territory.in_memory_board import InMemoryTerritoryBoard
from claim_engine.infrastructure.territory.in_memory_region_protection import InMemoryRegionProtection

# Blue owns chunk (5, 5) in "world".
BLUE_CHUNK = ClaimLocation(world_name="world", chunk_x=5, chunk_z=5)


@pytest.fixture
def board():
    return InMemoryTerritoryBoard({BLUE_CHUNK: "blue"})


@pytest.fixture
def repo():
    """A repository seeded with two enemy factions; blue is strong enough to keep its land."""
    red = Faction(id="red", tag="RedHand", member_ids=["alice", "bob"], power=10,
                  relation_wishes={"blue": Relation.ENEMY})
    blue = Faction(id="blue", tag="BlueWatch", member_ids=["carol"], power=1, land_by_world={"world": 1},
                   relation_wishes={"red": Relation.ENEMY})
    players = [
        FactionPlayer(id="alice", name="Alice", faction_id="red"),
        FactionPlayer(id="carol", name="Carol", faction_id="blue"),
    ]
    return InMemoryFactionRepository(factions=[red, blue], players=players)


def make_handler(repo, board, event_bus, **settings) -> AttemptClaimHandler:
    claim_settings = ClaimPolicy(**settings)
    results = ClaimResultCatalog(MarkupMessageFormatter(strip=True))
    environment = ClaimEnvironment(
        settings=claim_settings,
        board=board,
        region_protection=InMemoryRegionProtection(),
        results=results,
    )
    checker = DefaultClaimChecker(BaseClaimChecker(environment), results)
    return AttemptClaimHandler(
        faction_repository=repo,
        board=board,
        claim_checker=checker,
        event_bus=event_bus,
        settings=claim_settings,
    )


@pytest.mark.asyncio
async def test_claiming_wilderness_publishes_the_decision(repo, board):
    """
    Tests the happy path: a player claims an unowned chunk for their own faction.
    Verifies the verdict and that exactly one decision event is published.
    """
    # 1. ARRANGE
    event_bus = LocalEventBus()
    evaluated_spy = AsyncMock()
    notified_spy = AsyncMock()
    event_bus.subscribe(ClaimEvaluated, evaluated_spy)
    event_bus.subscribe(FactionNotifiedOfClaim, notified_spy)
    handler = make_handler(repo, board, event_bus)

    command = AttemptClaimCommand(requester_id="alice", world_name="world", chunk_x=0, chunk_z=0)

    # 2. ACT
    result = await handler.execute(command)

    # 3. ASSERT
    assert result.outcome == ClaimOutcome.SUCCESS_DEFAULT
    evaluated_spy.assert_called_once()
    event = evaluated_spy.call_args[0][0]
    assert event.requester_id == "alice"
    assert event.for_faction_id == "red"
    assert event.from_faction_id == "wilderness"
    assert event.allowed is True
    notified_spy.assert_not_called()


@pytest.mark.asyncio
async def test_attempt_on_strong_enemy_notifies_the_owner(repo, board):
    event_bus = LocalEventBus()
    notified_spy = AsyncMock()
    event_bus.subscribe(FactionNotifiedOfClaim, notified_spy)
    handler = make_handler(repo, board, event_bus)

    command = AttemptClaimCommand(requester_id="alice", world_name="world", chunk_x=5, chunk_z=5)
    result = await handler.execute(command)

    assert result.outcome == ClaimOutcome.POWERFUL_ENEMY
    notified_spy.assert_called_once()
    notification = notified_spy.call_args[0][0]
    assert notification.notified_faction_id == "blue"
    assert notification.claiming_faction_id == "red"
    assert notification.location == BLUE_CHUNK
    assert notification.allowed is False


@pytest.mark.asyncio
async def test_owner_notifications_can_be_switched_off(repo, board):
    event_bus = LocalEventBus()
    notified_spy = AsyncMock()
    event_bus.subscribe(FactionNotifiedOfClaim, notified_spy)
    handler = make_handler(repo, board, event_bus, enemy_notify_on_claim=False)

    command = AttemptClaimCommand(requester_id="alice", world_name="world", chunk_x=5, chunk_z=5)
    result = await handler.execute(command)

    assert result.notify_others is True
    notified_spy.assert_not_called()


@pytest.mark.asyncio
async def test_claiming_for_another_faction(repo, board):
    event_bus = AsyncMock(spec=LocalEventBus)
    handler = make_handler(repo, board, event_bus)

    # Alice claims blue's own chunk on behalf of blue.
    command = AttemptClaimCommand(requester_id="alice", world_name="world", chunk_x=5, chunk_z=5,
                                  for_faction_id="blue")
    result = await handler.execute(command)

    assert result.outcome == ClaimOutcome.SAME_FACTION
    assert result.message == "BlueWatch already own this land."


@pytest.mark.asyncio
async def test_board_pointing_at_a_missing_faction_counts_as_wilderness(repo):
    board = InMemoryTerritoryBoard({BLUE_CHUNK: "disbanded"})
    event_bus = AsyncMock(spec=LocalEventBus)
    handler = make_handler(repo, board, event_bus)

    command = AttemptClaimCommand(requester_id="alice", world_name="world", chunk_x=5, chunk_z=5)
    result = await handler.execute(command)

    assert result.outcome == ClaimOutcome.SUCCESS_DEFAULT


@pytest.mark.asyncio
async def test_unknown_player_raises_error(repo, board):
    """
    Tests that a ValueError is raised for an unknown requester, and nothing is published.
    """
    event_bus = AsyncMock(spec=LocalEventBus)
    handler = make_handler(repo, board, event_bus)

    command = AttemptClaimCommand(requester_id="mallory", world_name="world", chunk_x=0, chunk_z=0)

    with pytest.raises(ValueError, match="not found"):
        await handler.execute(command)

    event_bus.publish.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_target_faction_raises_error(repo, board):
    event_bus = AsyncMock(spec=LocalEventBus)
    handler = make_handler(repo, board, event_bus)

    command = AttemptClaimCommand(requester_id="alice", world_name="world", chunk_x=0, chunk_z=0,
                                  for_faction_id="purple")

    with pytest.raises(ValueError, match="Faction with id 'purple' not found"):
        await handler.execute(command)
