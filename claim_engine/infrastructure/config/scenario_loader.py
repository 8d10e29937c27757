import yaml
from collections import Counter
from pathlib import Path
from typing import Dict, List, Optional

from claim_engine.application.ports.logger import ILogger
from claim_engine.domain.entities import Faction, FactionId, FactionPlayer, WILDERNESS_ID
from claim_engine.domain.relations import Relation
from claim_engine.domain.scenario_models import ConfigScenario
from claim_engine.domain.value_objects import ClaimLocation
from claim_engine.infrastructure.config.settings import ClaimSettings
from claim_engine.infrastructure.territory.in_memory_board import InMemoryTerritoryBoard
from claim_engine.infrastructure.territory.in_memory_region_protection import InMemoryRegionProtection


class ScenarioLoader:
    """
    Loads a claim scenario from a YAML file, validates it against Pydantic models,
    and converts it into factions, players and in-memory territory adapters.
    """

    def __init__(self, logger: ILogger):
        self._logger = logger

    def load_scenario(self, file_path: Path) -> ConfigScenario:
        """
        Loads and validates a scenario configuration from a YAML file.
        """
        if not file_path.exists():
            raise FileNotFoundError(f"Scenario file not found: {file_path}")

        with open(file_path, 'r', encoding='utf-8') as f:
            raw_config = yaml.safe_load(f)

        # Validate the raw config against our Pydantic model
        return ConfigScenario(**(raw_config or {}))

    def build_settings(self, config: ConfigScenario, base: Optional[ClaimSettings] = None) -> ClaimSettings:
        """Applies the scenario's overrides on top of the given (or environment) claim settings."""
        base = base or ClaimSettings()
        return ClaimSettings(**{**base.model_dump(), **config.settings})

    def build_board(self, config: ConfigScenario) -> InMemoryTerritoryBoard:
        known_ids = self._faction_ids(config)
        board = InMemoryTerritoryBoard()
        for block in config.territory:
            if block.faction not in known_ids:
                self._logger.warning(f"Territory in '{block.world}' belongs to unknown faction '{block.faction}'. Skipping.")
                continue
            for x, z in block.chunks:
                board.set_faction_at(ClaimLocation(world_name=block.world, chunk_x=x, chunk_z=z), block.faction)
        return board

    def build_region_protection(self, config: ConfigScenario) -> InMemoryRegionProtection:
        return InMemoryRegionProtection(
            ClaimLocation(world_name=area.world, chunk_x=x, chunk_z=z)
            for area in config.protected
            for x, z in area.chunks
        )

    def build_players(self, config: ConfigScenario) -> List[FactionPlayer]:
        known_ids = self._faction_ids(config)
        players: List[FactionPlayer] = []
        for player_config in config.players:
            faction_id = player_config.faction
            if faction_id not in known_ids:
                self._logger.warning(f"Player '{player_config.id}' belongs to unknown faction '{faction_id}'. "
                           f"Placing them in the wilderness.")
                faction_id = WILDERNESS_ID
            players.append(FactionPlayer(
                id=player_config.id,
                name=player_config.name,
                faction_id=faction_id,
                admin_mode=player_config.admin_mode,
            ))
        return players

    def build_factions(self, config: ConfigScenario) -> List[Faction]:
        """
        Converts the configured factions. Members come from the players section,
        land is counted from the territory section, per world.
        """
        known_ids = self._faction_ids(config)

        land: Dict[FactionId, Counter] = {faction_id: Counter() for faction_id in known_ids}
        for (world_name, _x, _z), owner_id in self._chunk_owners(config).items():
            land[owner_id][world_name] += 1

        factions: List[Faction] = []
        for faction_config in config.factions:
            wishes: Dict[FactionId, Relation] = {}
            for other_id, relation_name in faction_config.relations.items():
                if other_id not in known_ids:
                    self._logger.warning(f"Faction '{faction_config.id}' has a relation to unknown faction '{other_id}'. Skipping.")
                    continue
                wishes[other_id] = Relation.from_name(relation_name)

            factions.append(Faction(
                id=faction_config.id,
                tag=faction_config.tag,
                kind=faction_config.kind,
                member_ids=[p.id for p in config.players if p.faction == faction_config.id],
                power=faction_config.power,
                land_by_world=dict(land[faction_config.id]),
                flags={flag: True for flag in faction_config.flags},
                relation_wishes=wishes,
            ))
        return factions

    def _chunk_owners(self, config: ConfigScenario) -> Dict[tuple, FactionId]:
        """Owner of every configured chunk; later blocks win over earlier ones."""
        known_ids = self._faction_ids(config)
        owners: Dict[tuple, FactionId] = {}
        for block in config.territory:
            if block.faction in known_ids:
                for x, z in block.chunks:
                    owners[(block.world, x, z)] = block.faction
        return owners

    @staticmethod
    def _faction_ids(config: ConfigScenario) -> set:
        return {faction.id for faction in config.factions}
