import pytest
from unittest.mock import Mock

from claim_engine.application.ports.logger import ILogger
from claim_engine.domain.claim_result import ClaimOutcome
from claim_engine.domain.events import ClaimEvaluated, FactionNotifiedOfClaim
from claim_engine.domain.value_objects import ClaimLocation
from claim_engine.infrastructure.event_bus.local_event_bus import LocalEventBus
from claim_engine.infrastructure.logging.event_handler import LoggingEventHandler

LOCATION = ClaimLocation(world_name="world", chunk_x=3, chunk_z=1)


@pytest.mark.asyncio
async def test_claim_decisions_are_logged_through_the_bus():
    logger = Mock(spec=ILogger)
    event_bus = LocalEventBus()
    LoggingEventHandler(logger).subscribe(event_bus)

    await event_bus.publish(ClaimEvaluated(
        requester_id="alice",
        for_faction_id="red",
        from_faction_id="blue",
        location=LOCATION,
        allowed=False,
        outcome=ClaimOutcome.POWERFUL_ENEMY,
    ))

    logger.info.assert_called_once()
    message = logger.info.call_args[0][0]
    assert "CLAIM DENIED" in message
    assert "world:3,1" in message
    assert "fail_powerful_enemy" in message


@pytest.mark.asyncio
async def test_owner_notifications_are_logged():
    logger = Mock(spec=ILogger)
    handler = LoggingEventHandler(logger)

    await handler.handle(FactionNotifiedOfClaim(
        notified_faction_id="blue",
        claiming_faction_id="red",
        requester_id="alice",
        location=LOCATION,
        allowed=True,
    ))

    assert "OWNER NOTIFIED" in logger.info.call_args[0][0]


@pytest.mark.asyncio
async def test_handler_errors_are_logged_not_raised():
    logger = Mock(spec=ILogger)
    logger.info.side_effect = RuntimeError("disk full")
    handler = LoggingEventHandler(logger)

    await handler.handle(FactionNotifiedOfClaim(
        notified_faction_id="blue",
        claiming_faction_id="red",
        requester_id="alice",
        location=LOCATION,
        allowed=True,
    ))

    logger.error.assert_called_once()
    assert "disk full" in logger.error.call_args[0][0]
