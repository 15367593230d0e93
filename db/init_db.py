"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import SQLITE, RecordStore
from utils.logger import get_logger

logger = get_logger(__name__)

POSTGRES_SCHEMA_SQL = """
-- Artworks table: one catalog record per piece of art
CREATE TABLE IF NOT EXISTS artworks (
    artwork_id      SERIAL PRIMARY KEY,
    title           VARCHAR(255) NOT NULL,
    description     TEXT,
    creation_date   DATE,
    medium          VARCHAR(100),
    image_url       TEXT,
    artist_id       INT
);

-- Favorites join table: a (user, artwork) pair appears at most once
CREATE TABLE IF NOT EXISTS user_favorite_artworks (
    user_id         INT NOT NULL,
    artwork_id      INT NOT NULL REFERENCES artworks(artwork_id) ON DELETE CASCADE,
    PRIMARY KEY (user_id, artwork_id)
);

CREATE INDEX IF NOT EXISTS idx_favorites_artwork ON user_favorite_artworks(artwork_id);
"""

SQLITE_SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS artworks (
    artwork_id      INTEGER PRIMARY KEY AUTOINCREMENT,
    title           TEXT NOT NULL,
    description     TEXT,
    creation_date   DATE,
    medium          TEXT,
    image_url       TEXT,
    artist_id       INTEGER
);

CREATE TABLE IF NOT EXISTS user_favorite_artworks (
    user_id         INTEGER NOT NULL,
    artwork_id      INTEGER NOT NULL REFERENCES artworks(artwork_id) ON DELETE CASCADE,
    PRIMARY KEY (user_id, artwork_id)
);

CREATE INDEX IF NOT EXISTS idx_favorites_artwork ON user_favorite_artworks(artwork_id);
"""


def create_tables(store: RecordStore) -> None:
    """
    Execute the schema SQL for the store's backend.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    script = SQLITE_SCHEMA_SQL if store.backend is SQLITE else POSTGRES_SCHEMA_SQL
    try:
        store.execute_script(script)
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        logger.error(f"Failed to initialize schema: {e}")
        raise


if __name__ == "__main__":
    from db.connection import open_store
    with open_store() as store:
        create_tables(store)
    print("Database schema created successfully.")
