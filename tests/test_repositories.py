"""Tests for ArtworkRepository and FavoriteRepository on an in-memory SQLite store."""
from datetime import date
from unittest.mock import MagicMock

import pytest

from db.connection import POSTGRES, RecordStore, StoreError
from models.favorite import Favorite
from repositories.artwork_repo import ArtworkRepository


class TestArtworkRepository:

    def test_add_sets_generated_id(self, artwork_repo, make_artwork):
        artwork = artwork_repo.add(make_artwork())

        assert artwork.id is not None
        assert artwork_repo.exists(artwork.id)

    def test_get_by_id_maps_every_column(self, artwork_repo, make_artwork):
        artwork = artwork_repo.add(make_artwork(creation_date=date(1503, 10, 1), artist_id=9))

        stored = artwork_repo.get_by_id(artwork.id)

        assert stored == artwork
        assert isinstance(stored.creation_date, date)

    def test_get_by_id_missing_returns_none(self, artwork_repo):
        assert artwork_repo.get_by_id(1) is None
        assert not artwork_repo.exists(1)

    def test_search_orders_by_id(self, artwork_repo, make_artwork):
        ids = [artwork_repo.add(make_artwork(title=f"Study {n}")).id for n in range(3)]

        assert [a.id for a in artwork_repo.search("study")] == ids

    def test_search_ignores_null_description(self, artwork_repo, make_artwork):
        artwork_repo.add(make_artwork(title="Mona Lisa", description=None))

        assert [a.title for a in artwork_repo.search("mona")] == ["Mona Lisa"]
        assert artwork_repo.search("painting") == []

    def test_search_escapes_underscore_and_escape_char(self, artwork_repo, make_artwork):
        artwork_repo.add(make_artwork(title="file_name"))
        artwork_repo.add(make_artwork(title="fileXname"))
        artwork_repo.add(make_artwork(title="C:\\art"))
        artwork_repo.add(make_artwork(title="Wow!"))

        assert [a.title for a in artwork_repo.search("_")] == ["file_name"]
        assert [a.title for a in artwork_repo.search("\\")] == ["C:\\art"]
        assert [a.title for a in artwork_repo.search("!")] == ["Wow!"]

    def test_search_sql_sent_to_postgres(self):
        conn = MagicMock()
        conn.cursor.return_value.fetchall.return_value = []
        repo = ArtworkRepository(RecordStore(conn, POSTGRES))

        repo.search("50%_off!")

        sql, params = conn.cursor.return_value.execute.call_args.args
        assert sql.count("LIKE %s ESCAPE '!'") == 2
        assert "\\" not in sql
        assert params == ("%50!%!_off!!%", "%50!%!_off!!%")

    def test_update_and_delete_report_affected_rows(self, artwork_repo, make_artwork):
        artwork = artwork_repo.add(make_artwork())
        artwork.title = "Renamed"

        assert artwork_repo.update(artwork) is True
        assert artwork_repo.get_by_id(artwork.id).title == "Renamed"
        assert artwork_repo.delete(artwork.id) is True
        assert artwork_repo.delete(artwork.id) is False

    def test_add_propagates_store_error(self, artwork_repo, make_artwork):
        with pytest.raises(StoreError):
            artwork_repo.add(make_artwork(title=None))


class TestFavoriteRepository:

    def test_add_duplicate_inserts_nothing(self, artwork_repo, favorite_repo, make_artwork):
        artwork = artwork_repo.add(make_artwork())
        favorite = Favorite(user_id=3, artwork_id=artwork.id)

        assert favorite_repo.add(favorite) is True
        assert favorite_repo.add(favorite) is False
        assert favorite_repo.get_for_user(3) == [favorite]

    def test_add_for_missing_artwork_violates_foreign_key(self, favorite_repo):
        with pytest.raises(StoreError):
            favorite_repo.add(Favorite(user_id=3, artwork_id=404))

    def test_get_artworks_for_user_joins_artworks(self, artwork_repo, favorite_repo, make_artwork):
        artwork = artwork_repo.add(make_artwork())
        favorite_repo.add(Favorite(user_id=3, artwork_id=artwork.id))

        assert favorite_repo.get_artworks_for_user(3) == [artwork]
        assert favorite_repo.get_artworks_for_user(4) == []

    def test_delete_and_exists(self, artwork_repo, favorite_repo, make_artwork):
        artwork = artwork_repo.add(make_artwork())
        favorite = Favorite(user_id=3, artwork_id=artwork.id)
        favorite_repo.add(favorite)

        assert favorite_repo.exists(favorite)
        assert favorite_repo.delete(favorite) is True
        assert not favorite_repo.exists(favorite)
        assert favorite_repo.delete(favorite) is False

    def test_delete_for_artwork_returns_count(self, artwork_repo, favorite_repo, make_artwork):
        artwork = artwork_repo.add(make_artwork())
        for user_id in (1, 2, 3):
            favorite_repo.add(Favorite(user_id=user_id, artwork_id=artwork.id))

        assert favorite_repo.delete_for_artwork(artwork.id) == 3
        assert favorite_repo.get_for_user(1) == []

    def test_schema_cascades_when_artwork_row_is_deleted(self, artwork_repo, favorite_repo, make_artwork):
        artwork = artwork_repo.add(make_artwork())
        favorite_repo.add(Favorite(user_id=3, artwork_id=artwork.id))

        artwork_repo.delete(artwork.id)

        assert favorite_repo.get_for_user(3) == []
