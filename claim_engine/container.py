from dependency_injector import containers, providers

from claim_engine.application.services.base_claim_checker import BaseClaimChecker
from claim_engine.application.services.claim_results import ClaimResultCatalog
from claim_engine.application.services.claim_rules import ClaimEnvironment
from claim_engine.application.services.default_claim_checker import DefaultClaimChecker
from claim_engine.application.use_cases.attempt_claim import AttemptClaimHandler
from claim_engine.infrastructure.config.scenario_loader import ScenarioLoader
from claim_engine.infrastructure.config.settings import ClaimSettings, LoggingSettings
from claim_engine.infrastructure.event_bus.local_event_bus import LocalEventBus
from claim_engine.infrastructure.formatting.markup_formatter import MarkupMessageFormatter
from claim_engine.infrastructure.logging.event_handler import LoggingEventHandler
from claim_engine.infrastructure.logging.file_logger import FileLogger
from claim_engine.infrastructure.repositories.in_memory_faction_repository import InMemoryFactionRepository
from claim_engine.infrastructure.territory.in_memory_board import InMemoryTerritoryBoard
from claim_engine.infrastructure.territory.in_memory_region_protection import InMemoryRegionProtection


class Container(containers.DeclarativeContainer):
    """
    The Dependency Injection (DI) container for the application.
    It wires together the different components of the system.
    """
    # =====================================================================
    # Configuration
    # =====================================================================
    claim_settings = providers.Singleton(ClaimSettings)
    logging_settings = providers.Singleton(LoggingSettings)

    # =====================================================================
    # Infrastructure Layer
    # =====================================================================
    # A single instance of each infrastructure service is shared across the app.
    # The board and region protection are usually overridden with the ones
    # built from a scenario.
    logger = providers.Singleton(
        FileLogger,
        log_file=logging_settings.provided.file,
        level=logging_settings.provided.level,
    )
    faction_repository = providers.Singleton(InMemoryFactionRepository)
    territory_board = providers.Singleton(InMemoryTerritoryBoard)
    region_protection = providers.Singleton(InMemoryRegionProtection)
    message_formatter = providers.Singleton(MarkupMessageFormatter, strip=True)
    event_bus = providers.Singleton(LocalEventBus)
    scenario_loader = providers.Singleton(ScenarioLoader, logger=logger)
    logging_event_handler = providers.Singleton(LoggingEventHandler, logger=logger)

    # =====================================================================
    # Application Layer (Services)
    # =====================================================================
    claim_results = providers.Singleton(ClaimResultCatalog, formatter=message_formatter)

    claim_environment = providers.Singleton(
        ClaimEnvironment,
        settings=claim_settings,
        board=territory_board,
        region_protection=region_protection,
        results=claim_results,
    )

    base_claim_checker = providers.Singleton(
        BaseClaimChecker,
        environment=claim_environment,
        logger=logger,
    )

    claim_checker = providers.Singleton(
        DefaultClaimChecker,
        base_checker=base_claim_checker,
        results=claim_results,
    )

    # =====================================================================
    # Application Layer (Use Case Handlers)
    # =====================================================================
    # Handlers are created on-demand (Factory scope).
    attempt_claim_handler = providers.Factory(
        AttemptClaimHandler,
        faction_repository=faction_repository,
        board=territory_board,
        claim_checker=claim_checker,
        event_bus=event_bus,
        settings=claim_settings,
    )


def wire_dependencies():
    """Subscribes the event handlers to the shared event bus."""
    container.logging_event_handler().subscribe(container.event_bus())


# A global instance of the container
container = Container()
