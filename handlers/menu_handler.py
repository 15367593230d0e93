"""
handlers/menu_handler.py
------------------------
Console menu for the Virtual Art Gallery.
Reads and parses user input, delegates to GalleryService, prints the outcome.
"""

from datetime import date
from typing import Callable, Optional

from db.connection import StoreConnectionError, StoreError
from models.artwork import Artwork
from models.exceptions import GalleryError
from services.gallery_service import GalleryService
from utils.logger import get_logger

logger = get_logger(__name__)

MENU_TEXT = """
===== Virtual Art Gallery =====
1. Add Artwork
2. Update Artwork
3. Remove Artwork
4. Get Artwork by ID
5. Search Artworks
6. Add Artwork to User Favorites
7. Remove Artwork from User Favorites
8. Get User Favorite Artworks
9. Exit"""

EXIT_CHOICE = "9"


class InvalidInput(ValueError):
    """The user typed something that does not parse; the current action is abandoned."""


class MenuHandler:
    """
    Interactive menu loop.

    Args:
        service: The gallery service to delegate to.
        read: Prompt-and-read function (defaults to `input`).
        write: Output function (defaults to `print`).
    """

    def __init__(
        self,
        service: GalleryService,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ):
        self.service = service
        self.read = read
        self.write = write
        self.actions = {
            "1": self.add_artwork,
            "2": self.update_artwork,
            "3": self.remove_artwork,
            "4": self.get_artwork_by_id,
            "5": self.search_artworks,
            "6": self.add_artwork_to_favorites,
            "7": self.remove_artwork_from_favorites,
            "8": self.get_user_favorite_artworks,
        }

    def run(self) -> None:
        """Show the menu until the user exits or input ends."""
        while True:
            self.write(MENU_TEXT)
            try:
                choice = self.read("Choose an option: ").strip()
            except EOFError:
                choice = EXIT_CHOICE
            if choice == EXIT_CHOICE:
                self.write("Exiting the Virtual Art Gallery. Goodbye!")
                return
            self.dispatch(choice)

    def dispatch(self, choice: str) -> None:
        """Run one menu action. Bad input aborts the action, not the loop."""
        action = self.actions.get(choice)
        if action is None:
            self.write("Invalid option. Please try again.")
            return
        try:
            action()
        except InvalidInput as e:
            self.write(f"Invalid input: {e}")
        except StoreConnectionError:
            raise
        except StoreError as e:
            logger.error(f"Menu option {choice} failed: {e}")
            self.write("A database error occurred. Please try again.")

    # ── ARTWORKS ──────────────────────────────────────────

    def add_artwork(self) -> None:
        artwork = self._read_artwork(artwork_id=None)
        if self.service.add_artwork(artwork):
            self.write(f"Artwork added successfully with ID {artwork.id}.")
        else:
            self.write("Failed to add artwork.")

    def update_artwork(self) -> None:
        artwork_id = self._read_int("Enter Artwork ID to update: ")
        artwork = self._read_artwork(artwork_id=artwork_id, prefix="new ")
        success = self.service.update_artwork(artwork)
        self.write("Artwork updated successfully." if success else "Failed to update artwork.")

    def remove_artwork(self) -> None:
        artwork_id = self._read_int("Enter Artwork ID to remove: ")
        success = self.service.remove_artwork(artwork_id)
        self.write("Artwork removed successfully." if success else "Failed to remove artwork.")

    def get_artwork_by_id(self) -> None:
        artwork_id = self._read_int("Enter Artwork ID: ")
        result = self.service.find_artwork_by_id(artwork_id)
        if not result.ok:
            self.write(str(result.error))
            return
        artwork = result.value
        self.write(f"Artwork: {artwork.title}, {artwork.description}")
        self.write(f"  Created: {artwork.creation_date} | Medium: {artwork.medium}")
        self.write(f"  Image: {artwork.image_url} | Artist ID: {artwork.artist_id}")

    def search_artworks(self) -> None:
        keyword = self.read("Enter keyword to search: ")
        artworks = self.service.search_artworks(keyword)
        if not artworks:
            self.write(f'No artworks found matching the keyword "{keyword}".')
            return
        self.write("Search Results:")
        self._write_list(artworks)

    # ── FAVORITES ─────────────────────────────────────────

    def add_artwork_to_favorites(self) -> None:
        user_id = self._read_int("Enter User ID: ")
        artwork_id = self._read_int("Enter Artwork ID: ")
        success = self.service.add_artwork_to_favorite(user_id, artwork_id)
        self.write("Artwork added to favorites." if success else "Failed to add to favorites.")

    def remove_artwork_from_favorites(self) -> None:
        user_id = self._read_int("Enter User ID: ")
        artwork_id = self._read_int("Enter Artwork ID: ")
        success = self.service.remove_artwork_from_favorite(user_id, artwork_id)
        self.write("Artwork removed from favorites." if success else "Failed to remove from favorites.")

    def get_user_favorite_artworks(self) -> None:
        user_id = self._read_int("Enter User ID: ")
        try:
            favorites = self.service.get_user_favorite_artworks(user_id)
        except GalleryError as e:
            self.write(str(e))
            return
        self.write("Favorite Artworks:")
        self._write_list(favorites)

    # ── HELPERS ───────────────────────────────────────────

    def _read_artwork(self, artwork_id: Optional[int], prefix: str = "") -> Artwork:
        title = self.read(f"Enter {prefix}Title: ")
        description = self.read(f"Enter {prefix}Description: ")
        creation_date = self._read_date(f"Enter {prefix}Creation Date (yyyy-mm-dd): ")
        medium = self.read(f"Enter {prefix}Medium: ")
        image_url = self.read(f"Enter {prefix}Image URL: ")
        artist_id = self._read_int(f"Enter {prefix}Artist ID: ")
        return Artwork(
            id=artwork_id,
            title=title,
            description=description,
            creation_date=creation_date,
            medium=medium,
            image_url=image_url,
            artist_id=artist_id,
        )

    def _read_int(self, prompt: str) -> int:
        raw = self.read(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            raise InvalidInput(f"'{raw}' is not a whole number.") from None

    def _read_date(self, prompt: str) -> date:
        raw = self.read(prompt).strip()
        try:
            return date.fromisoformat(raw)
        except ValueError:
            raise InvalidInput(f"'{raw}' is not a date in yyyy-mm-dd format.") from None

    def _write_list(self, artworks: list[Artwork]) -> None:
        for artwork in artworks:
            self.write(f"ID: {artwork.id}, Title: {artwork.title}")
