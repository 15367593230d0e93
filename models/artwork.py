"""
models/artwork.py
-----------------
Domain model for catalog artworks.
"""

from dataclasses import dataclass, fields
from datetime import date
from typing import Optional


@dataclass
class Artwork:
    """
    Represents a single piece of art in the gallery catalog.

    Attributes:
        title: Display title (required by the schema).
        description: Free-text description.
        creation_date: Date the piece was created.
        medium: Material or technique (e.g., oil, watercolor).
        image_url: Location of the artwork's image.
        artist_id: ID of the artist; artists are managed outside this catalog.
        id: Database primary key (None until the artwork is stored).
    """
    title: str
    description: str
    creation_date: date
    medium: str
    image_url: str
    artist_id: int
    id: Optional[int] = None

    def is_persisted(self) -> bool:
        """Returns True once the store has assigned an ID."""
        return self.id is not None

    def same_content(self, other: "Artwork") -> bool:
        """Compare every field except the ID."""
        return all(
            getattr(self, f.name) == getattr(other, f.name)
            for f in fields(self)
            if f.name != "id"
        )

    def __str__(self) -> str:
        ref = f"#{self.id}" if self.id is not None else "(new)"
        return f"{ref} {self.title} | {self.medium} | {self.creation_date}"
