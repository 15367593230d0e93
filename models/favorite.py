"""
models/favorite.py
------------------
Domain model for the user ↔ artwork favorites relationship.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Favorite:
    """
    A user's favorite artwork. Identified only by the (user_id, artwork_id) pair.

    Attributes:
        user_id: ID of the user; users are managed outside this catalog.
        artwork_id: ID of the favorited artwork.
    """
    user_id: int
    artwork_id: int

    def __str__(self) -> str:
        return f"user {self.user_id} ♥ artwork #{self.artwork_id}"
