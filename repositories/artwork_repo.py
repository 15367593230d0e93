"""
repositories/artwork_repo.py
----------------------------
Data access layer for catalog artworks.
All SQL queries related to the `artworks` table live here.
"""

from datetime import date
from typing import Optional

from db.connection import RecordStore
from models.artwork import Artwork
from utils.logger import get_logger

logger = get_logger(__name__)

ARTWORK_COLUMNS = "artwork_id, title, description, creation_date, medium, image_url, artist_id"
LIKE_ESCAPE = "!"


class ArtworkRepository:
    """Repository for CRUD operations on the artworks table."""

    def __init__(self, store: RecordStore):
        self.store = store

    # ── CREATE ────────────────────────────────────────────

    def add(self, artwork: Artwork) -> Artwork:
        """
        Insert a new artwork.

        Args:
            artwork: The Artwork to persist (its `id` is ignored).

        Returns:
            The same Artwork with its `id` populated.

        Raises:
            StoreError: If the insert fails.
        """
        sql = """
            INSERT INTO artworks (title, description, creation_date, medium, image_url, artist_id)
            VALUES (%s, %s, %s, %s, %s, %s)
            RETURNING artwork_id;
        """
        artwork.id = self.store.insert_returning_id(sql, (
            artwork.title, artwork.description, _date_param(artwork.creation_date),
            artwork.medium, artwork.image_url, artwork.artist_id,
        ))
        logger.info(f"Added artwork #{artwork.id} '{artwork.title}'")
        return artwork

    # ── READ ──────────────────────────────────────────────

    def get_by_id(self, artwork_id: int) -> Optional[Artwork]:
        """
        Fetch a single artwork by ID.

        Returns:
            An Artwork object or None if not found.
        """
        sql = f"SELECT {ARTWORK_COLUMNS} FROM artworks WHERE artwork_id = %s;"
        row = self.store.fetch_one(sql, (artwork_id,))
        return row_to_artwork(row) if row else None

    def exists(self, artwork_id: int) -> bool:
        """Returns True if an artwork with this ID is stored."""
        sql = "SELECT 1 FROM artworks WHERE artwork_id = %s;"
        return self.store.fetch_one(sql, (artwork_id,)) is not None

    def search(self, keyword: str) -> list[Artwork]:
        """
        Case-insensitive substring search over title and description.

        Args:
            keyword: Text to look for. LIKE wildcards in it match literally.

        Returns:
            Matching artworks ordered by ID ascending (empty list if none).
        """
        sql = f"""
            SELECT {ARTWORK_COLUMNS} FROM artworks
            WHERE LOWER(title) LIKE %s ESCAPE '{LIKE_ESCAPE}'
               OR LOWER(description) LIKE %s ESCAPE '{LIKE_ESCAPE}'
            ORDER BY artwork_id;
        """
        pattern = _like_pattern(keyword)
        return [row_to_artwork(r) for r in self.store.fetch_all(sql, (pattern, pattern))]

    # ── UPDATE ────────────────────────────────────────────

    def update(self, artwork: Artwork) -> bool:
        """
        Overwrite every field of an existing artwork.

        Args:
            artwork: Artwork with updated fields (must have id set).

        Returns:
            True if a row was updated, False otherwise.
        """
        sql = """
            UPDATE artworks
            SET title = %s, description = %s, creation_date = %s,
                medium = %s, image_url = %s, artist_id = %s
            WHERE artwork_id = %s;
        """
        updated = self.store.execute(sql, (
            artwork.title, artwork.description, _date_param(artwork.creation_date),
            artwork.medium, artwork.image_url, artwork.artist_id, artwork.id,
        )) > 0
        if updated:
            logger.info(f"Updated artwork #{artwork.id}")
        return updated

    # ── DELETE ────────────────────────────────────────────

    def delete(self, artwork_id: int) -> bool:
        """
        Delete an artwork by ID.

        Returns:
            True if a row was deleted, False otherwise.
        """
        sql = "DELETE FROM artworks WHERE artwork_id = %s;"
        deleted = self.store.execute(sql, (artwork_id,)) > 0
        if deleted:
            logger.info(f"Deleted artwork #{artwork_id}")
        return deleted


# ── HELPERS ───────────────────────────────────────────────

def row_to_artwork(row: tuple) -> Artwork:
    """Convert an `ARTWORK_COLUMNS` row tuple to an Artwork domain object."""
    return Artwork(
        id=row[0],
        title=row[1],
        description=row[2],
        creation_date=_parse_date(row[3]),
        medium=row[4],
        image_url=row[5],
        artist_id=row[6],
    )


def _date_param(value: Optional[date]) -> Optional[str]:
    # ISO text is accepted by a DATE column on both backends
    return value.isoformat() if value is not None else None


def _parse_date(value) -> Optional[date]:
    # psycopg2 returns date objects, SQLite returns the stored ISO text
    if value is None or isinstance(value, date):
        return value
    return date.fromisoformat(value)


def _like_pattern(keyword: str) -> str:
    escaped = (
        keyword.lower()
        .replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"
