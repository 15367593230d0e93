"""
main.py
-------
Entry point for the Virtual Art Gallery console application.

Responsibilities:
    - Open the single database connection and make sure the schema exists.
    - Build the GalleryService on that connection and run the console menu.
    - Close the connection exactly once on exit, whatever the exit path.
"""

import sys

from config import DATABASE_URL
from db.connection import StoreConnectionError, StoreError, open_store
from db.init_db import create_tables
from handlers.menu_handler import MenuHandler
from services.gallery_service import GalleryService
from utils.logger import get_logger

logger = get_logger(__name__)


def main() -> int:
    """Run the gallery menu. Returns the process exit code."""

    # ── 1. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    try:
        store = open_store(DATABASE_URL)
    except (StoreConnectionError, ValueError) as e:
        print(f"Cannot start the Virtual Art Gallery: {e}", file=sys.stderr)
        return 1

    # ── 2. Menu loop, connection released on every exit path ──
    try:
        create_tables(store)
        MenuHandler(GalleryService(store)).run()
    except StoreConnectionError as e:
        logger.error(f"Session terminated: {e}")
        print(f"Database connection lost, ending session: {e}", file=sys.stderr)
        return 1
    except StoreError as e:
        print(f"Database error, ending session: {e}", file=sys.stderr)
        return 1
    except (KeyboardInterrupt, EOFError):
        print("\nExiting the Virtual Art Gallery. Goodbye!")
    finally:
        store.close()

    logger.info("Virtual Art Gallery stopped.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
