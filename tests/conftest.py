"""Test configuration and fixtures for the Virtual Art Gallery.

Every test gets a fresh in-memory SQLite record store with the schema applied,
so tests never need a running PostgreSQL server.
"""
from datetime import date

import pytest

from db.connection import open_store
from db.init_db import create_tables
from models.artwork import Artwork
from repositories.artwork_repo import ArtworkRepository
from repositories.favorite_repo import FavoriteRepository
from services.gallery_service import GalleryService


@pytest.fixture
def store():
    """Fresh in-memory database with the gallery schema."""
    store = open_store("sqlite://")
    create_tables(store)
    yield store
    store.close()


@pytest.fixture
def artwork_repo(store):
    return ArtworkRepository(store)


@pytest.fixture
def favorite_repo(store):
    return FavoriteRepository(store)


@pytest.fixture
def service(store):
    return GalleryService(store)


@pytest.fixture
def make_artwork():
    """Factory for unsaved artworks; keyword arguments override the defaults."""
    def _make(**overrides) -> Artwork:
        fields = {
            "title": "Starry Night",
            "description": "oil painting",
            "creation_date": date(1889, 6, 1),
            "medium": "oil",
            "image_url": "https://example.org/starry-night.jpg",
            "artist_id": 1,
        }
        fields.update(overrides)
        return Artwork(**fields)
    return _make
