"""
models/exceptions.py
--------------------
Declared failures of the gallery service.
The menu handler catches GalleryError and prints its message.
"""


class GalleryError(Exception):
    """Base class for all gallery domain errors."""


class ArtworkNotFound(GalleryError):
    """No artwork row matches the requested ID."""

    def __init__(self, artwork_id: int):
        self.artwork_id = artwork_id
        super().__init__(f"Artwork with ID {artwork_id} not found.")


class UserNotFound(GalleryError):
    """The user has no favorites, so nothing is known about them."""

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"User with ID {user_id} not found or has no favorite artworks.")
