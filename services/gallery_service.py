"""
services/gallery_service.py
---------------------------
Business logic for the artwork catalog and user favorites.
Orchestrates the ArtworkRepository and the FavoriteRepository over one RecordStore.
"""

from contextlib import nullcontext
from typing import Optional

from db.connection import RecordStore, StoreConnectionError, StoreError
from models.artwork import Artwork
from models.exceptions import ArtworkNotFound, UserNotFound
from models.favorite import Favorite
from models.result import Result
from repositories.artwork_repo import ArtworkRepository
from repositories.favorite_repo import FavoriteRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class GalleryService:
    """
    The eight gallery operations used by the console menu.

    Error policy:
        - Mutations return True/False. Store failures are logged with their
          cause and reported as False.
        - Lookups raise ArtworkNotFound / UserNotFound. The `find_*` variants
          return a Result instead.
        - StoreConnectionError always propagates; the session cannot go on.

    Favorites policy:
        There is no user table. A user is known exactly when they have at
        least one favorite, so listing the favorites of a user with none
        raises UserNotFound.
    """

    def __init__(
        self,
        store: Optional[RecordStore] = None,
        artwork_repo: Optional[ArtworkRepository] = None,
        favorite_repo: Optional[FavoriteRepository] = None,
    ):
        if store is None and (artwork_repo is None or favorite_repo is None):
            raise ValueError("GalleryService needs a store or both repositories.")
        self.store = store
        self.artwork_repo = artwork_repo or ArtworkRepository(store)
        self.favorite_repo = favorite_repo or FavoriteRepository(store)

    # ── ARTWORKS ──────────────────────────────────────────

    def add_artwork(self, artwork: Artwork) -> bool:
        """
        Store a new artwork and write the generated ID back onto it.

        Returns:
            True on success, False if the artwork already has an ID or the store rejects it.
        """
        if artwork.is_persisted():
            logger.warning(f"Refusing to add artwork that already has ID {artwork.id}")
            return False
        try:
            self.artwork_repo.add(artwork)
            return True
        except StoreConnectionError:
            raise
        except StoreError as e:
            logger.error(f"Failed to add artwork '{artwork.title}': {e}")
            return False

    def update_artwork(self, artwork: Artwork) -> bool:
        """
        Overwrite every field of an existing artwork.

        Returns:
            True if the artwork was updated, False if it has no ID, does not exist,
            or the store rejects the update.
        """
        if not artwork.is_persisted():
            logger.warning(f"Cannot update artwork '{artwork.title}' without an ID")
            return False
        try:
            updated = self.artwork_repo.update(artwork)
        except StoreConnectionError:
            raise
        except StoreError as e:
            logger.error(f"Failed to update artwork #{artwork.id}: {e}")
            return False
        if not updated:
            logger.warning(f"Update skipped: artwork #{artwork.id} does not exist")
        return updated

    def remove_artwork(self, artwork_id: int) -> bool:
        """
        Delete an artwork together with every favorite that points at it.

        Returns:
            True if the artwork was deleted, False if it does not exist or the store fails.
        """
        try:
            with self._transaction():
                dropped = self.favorite_repo.delete_for_artwork(artwork_id)
                deleted = self.artwork_repo.delete(artwork_id)
        except StoreConnectionError:
            raise
        except StoreError as e:
            logger.error(f"Failed to remove artwork #{artwork_id}: {e}")
            return False
        if not deleted:
            logger.warning(f"Remove skipped: artwork #{artwork_id} does not exist")
        elif dropped:
            logger.info(f"Removed {dropped} favorite(s) of deleted artwork #{artwork_id}")
        return deleted

    def find_artwork_by_id(self, artwork_id: int) -> Result[Artwork]:
        """Look up an artwork without raising on absence."""
        artwork = self.artwork_repo.get_by_id(artwork_id)
        if artwork is None:
            return Result.failure(ArtworkNotFound(artwork_id))
        return Result.success(artwork)

    def get_artwork_by_id(self, artwork_id: int) -> Artwork:
        """
        Raises:
            ArtworkNotFound: If no artwork has this ID.
        """
        return self.find_artwork_by_id(artwork_id).unwrap()

    def search_artworks(self, keyword: str) -> list[Artwork]:
        """Case-insensitive search over title and description, ordered by ID."""
        return self.artwork_repo.search(keyword)

    # ── FAVORITES ─────────────────────────────────────────

    def add_artwork_to_favorite(self, user_id: int, artwork_id: int) -> bool:
        """
        Returns:
            True if the favorite was added, False if the artwork does not exist,
            the pair is already a favorite, or the store fails.
        """
        favorite = Favorite(user_id=user_id, artwork_id=artwork_id)
        try:
            if not self.artwork_repo.exists(artwork_id):
                logger.warning(f"Cannot favorite missing artwork #{artwork_id} for user {user_id}")
                return False
            added = self.favorite_repo.add(favorite)
        except StoreConnectionError:
            raise
        except StoreError as e:
            logger.error(f"Failed to add favorite ({favorite}): {e}")
            return False
        if not added:
            logger.warning(f"Duplicate favorite ignored: {favorite}")
        return added

    def remove_artwork_from_favorite(self, user_id: int, artwork_id: int) -> bool:
        """
        Returns:
            True if the favorite was removed, False if the pair was not present
            or the store fails.
        """
        favorite = Favorite(user_id=user_id, artwork_id=artwork_id)
        try:
            removed = self.favorite_repo.delete(favorite)
        except StoreConnectionError:
            raise
        except StoreError as e:
            logger.error(f"Failed to remove favorite ({favorite}): {e}")
            return False
        if not removed:
            logger.warning(f"Not a favorite: {favorite}")
        return removed

    def find_user_favorite_artworks(self, user_id: int) -> Result[list[Artwork]]:
        """List a user's favorite artworks without raising on an unknown user."""
        artworks = self.favorite_repo.get_artworks_for_user(user_id)
        if not artworks:
            return Result.failure(UserNotFound(user_id))
        return Result.success(artworks)

    def get_user_favorite_artworks(self, user_id: int) -> list[Artwork]:
        """
        Raises:
            UserNotFound: If the user has no favorites.
        """
        return self.find_user_favorite_artworks(user_id).unwrap()

    # ── HELPERS ───────────────────────────────────────────

    def _transaction(self):
        if self.store is None:
            return nullcontext()
        return self.store.transaction()

