import asyncio
from pathlib import Path

from dependency_injector import providers

from claim_engine.container import container, wire_dependencies
from claim_engine.application.commands.claim import AttemptClaimCommand
from claim_engine.domain.entities import PlayerId, WILDERNESS_ID
from claim_engine.domain.value_objects import ClaimLocation

# --- Constants ---
DEFAULT_WORLD = "world"
SCENARIO_FILE = Path("scenarios/border_war.yaml")
COMMANDS = ["claim", "as", "for", "admin", "map", "quit", "help"]


async def _setup_scenario():
    """Loads factions, players and territory from the scenario file into the container."""
    loader = container.scenario_loader()
    config = loader.load_scenario(SCENARIO_FILE)

    # These must be overridden before anything resolves the claim checker.
    container.claim_settings.override(providers.Object(loader.build_settings(config)))
    container.territory_board.override(providers.Object(loader.build_board(config)))
    container.region_protection.override(providers.Object(loader.build_region_protection(config)))

    repo = container.faction_repository()
    for faction in loader.build_factions(config):
        await repo.save_faction(faction)
    players = loader.build_players(config)
    for player in players:
        await repo.save_player(player)

    print(f"Scenario '{config.name}' loaded from {SCENARIO_FILE}.")
    return players[0].id if players else None


def print_help():
    """Prints available commands."""
    print("\n--- Help ---")
    print("  claim <x> <z> [world]           - Try to claim a chunk.")
    print("  as <player>                     - Act as another player.")
    print("  for <faction|own>               - Claim on behalf of another faction.")
    print("  admin                           - Toggle admin mode for the current player.")
    print("  map [world]                     - Show who owns what.")
    print("  quit                            - Exit.")
    print("---")


def print_map(world_name: str):
    """Prints an ownership map of the world, one letter per faction."""
    board = container.territory_board()
    owned = list(board.owned_locations(world_name))
    if not owned:
        print(f"Nobody owns land in '{world_name}'.")
        return

    xs = [location.chunk_x for location, _ in owned]
    zs = [location.chunk_z for location, _ in owned]
    letters = {WILDERNESS_ID: "."}
    for z in range(min(zs) - 1, max(zs) + 2):
        row = ""
        for x in range(min(xs) - 1, max(xs) + 2):
            owner_id = board.get_faction_id_at(ClaimLocation(world_name=world_name, chunk_x=x, chunk_z=z))
            row += letters.setdefault(owner_id, owner_id[0].upper())
        print(f"{z:>4} {row}")
    print("Legend: " + ", ".join(f"{letter}={faction_id}" for faction_id, letter in letters.items()))


async def main():
    """The interactive claim loop."""
    wire_dependencies()
    current_player_id = await _setup_scenario()

    repo = container.faction_repository()
    claim_handler = container.attempt_claim_handler()
    for_faction_id = None

    print("\n--- Claim Engine ---")
    print("Type 'help' for commands.")

    while True:
        try:
            player = await repo.get_player(PlayerId(current_player_id)) if current_player_id else None
            prompt = f"({player.name}{' [admin]' if player.admin_mode else ''})> " if player else "> "

            command_str = input(prompt).strip()
            parts = command_str.split()
            if not parts:
                continue

            verb = parts[0].lower()

            if verb not in COMMANDS:
                print(f"Unknown command: '{verb}'. Type 'help' for a list of commands.")

            elif verb == "quit":
                print("Goodbye!")
                break

            elif verb == "help":
                print_help()

            elif verb == "as":
                if len(parts) > 1:
                    target = await repo.get_player(PlayerId(parts[1].lower()))
                    if target:
                        current_player_id = target.id
                        for_faction_id = None
                    else:
                        print(f"Player '{parts[1]}' not found.")
                else:
                    print("Usage: as <player>")

            elif verb == "for":
                if len(parts) > 1:
                    for_faction_id = None if parts[1].lower() == "own" else parts[1].lower()
                else:
                    print("Usage: for <faction|own>")

            elif verb == "admin":
                if player:
                    player.admin_mode = not player.admin_mode
                    await repo.save_player(player)
                    print(f"Admin mode {'enabled' if player.admin_mode else 'disabled'}.")

            elif verb == "map":
                print_map(parts[1] if len(parts) > 1 else DEFAULT_WORLD)

            elif verb == "claim":
                if len(parts) < 3 or not player:
                    print("Usage: claim <x> <z> [world]")
                    continue
                command = AttemptClaimCommand(
                    requester_id=player.id,
                    world_name=parts[3] if len(parts) > 3 else DEFAULT_WORLD,
                    chunk_x=int(parts[1]),
                    chunk_z=int(parts[2]),
                    for_faction_id=for_faction_id,
                )
                result = await claim_handler.execute(command)
                verdict = "ALLOWED" if result.allowed else "DENIED"
                print(f"{verdict}: {result.message}" if result.message else verdict)
                if result.notify_others:
                    print("(The current owner will be told about this attempt.)")

        except Exception as e:
            print(f"ERROR: {e}")


if __name__ == "__main__":
    asyncio.run(main())
