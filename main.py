import asyncio
import sys

# This adds the project root to the Python path.
# It allows running the CLI from the root directory with all imports working.
sys.path.insert(0, '.')

from claim_engine.interface.cli.main import main


if __name__ == "__main__":
    """
    The main entrypoint for the Claim Engine application.
    """
    try:
        print("Starting Claim Engine...")
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nApplication exited by user.")
    except Exception as e:
        print(f"\nAn unexpected error occurred: {e}", file=sys.stderr)
