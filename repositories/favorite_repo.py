"""
repositories/favorite_repo.py
-----------------------------
Data access layer for the user ↔ artwork favorites join table.
"""

from db.connection import RecordStore
from models.artwork import Artwork
from models.favorite import Favorite
from repositories.artwork_repo import row_to_artwork
from utils.logger import get_logger

logger = get_logger(__name__)


class FavoriteRepository:
    """Repository for CRUD operations on the user_favorite_artworks table."""

    def __init__(self, store: RecordStore):
        self.store = store

    def add(self, favorite: Favorite) -> bool:
        """
        Insert a favorite pair.

        Returns:
            True if a row was inserted, False if the pair already existed.
        """
        sql = """
            INSERT INTO user_favorite_artworks (user_id, artwork_id)
            VALUES (%s, %s)
            ON CONFLICT (user_id, artwork_id) DO NOTHING;
        """
        inserted = self.store.execute(sql, (favorite.user_id, favorite.artwork_id)) > 0
        if inserted:
            logger.info(f"Added favorite: {favorite}")
        return inserted

    def exists(self, favorite: Favorite) -> bool:
        sql = "SELECT 1 FROM user_favorite_artworks WHERE user_id = %s AND artwork_id = %s;"
        return self.store.fetch_one(sql, (favorite.user_id, favorite.artwork_id)) is not None

    def get_for_user(self, user_id: int) -> list[Favorite]:
        """Get all favorite pairs of a user, ordered by artwork ID."""
        sql = """
            SELECT user_id, artwork_id FROM user_favorite_artworks
            WHERE user_id = %s
            ORDER BY artwork_id;
        """
        return [Favorite(user_id=r[0], artwork_id=r[1]) for r in self.store.fetch_all(sql, (user_id,))]

    def get_artworks_for_user(self, user_id: int) -> list[Artwork]:
        """Get the full artwork records a user has favorited, ordered by artwork ID."""
        sql = """
            SELECT a.artwork_id, a.title, a.description, a.creation_date,
                   a.medium, a.image_url, a.artist_id
            FROM artworks a
            JOIN user_favorite_artworks f ON f.artwork_id = a.artwork_id
            WHERE f.user_id = %s
            ORDER BY a.artwork_id;
        """
        return [row_to_artwork(r) for r in self.store.fetch_all(sql, (user_id,))]

    def delete(self, favorite: Favorite) -> bool:
        """
        Delete a favorite pair.

        Returns:
            True if a row was deleted, False if the pair was not present.
        """
        sql = "DELETE FROM user_favorite_artworks WHERE user_id = %s AND artwork_id = %s;"
        deleted = self.store.execute(sql, (favorite.user_id, favorite.artwork_id)) > 0
        if deleted:
            logger.info(f"Removed favorite: {favorite}")
        return deleted

    def delete_for_artwork(self, artwork_id: int) -> int:
        """Delete every favorite pointing at an artwork. Returns the number removed."""
        sql = "DELETE FROM user_favorite_artworks WHERE artwork_id = %s;"
        return self.store.execute(sql, (artwork_id,))
