"""
Tests for the data-access functions in app.db.movies.
"""
from datetime import date

import pytest
from sqlalchemy.exc import IntegrityError

from app.db import movies as movie_store
from app.db.schema import movies
from app.errors import DuplicateTitleError, InvalidReferenceError, StoreUnavailableError


@pytest.fixture
def values(catalog):
    def _values(title="Inception", genre="Sci-Fi", **overrides):
        data = {
            "title": title,
            "genre_id": catalog[genre],
            "language_id": catalog["English"],
            "oscar_count": 4,
            "release_date": date(2010, 7, 16),
        }
        data.update(overrides)
        return data

    return _values


def test_create_and_find_by_id(db_engine, values):
    with db_engine.begin() as conn:
        movie_id = movie_store.create_movie(conn, values())
        row = movie_store.find_movie_by_id(conn, movie_id)

    assert row["title"] == "Inception"
    assert row["release_date"] == date(2010, 7, 16)


def test_find_by_title_ignores_case(db_engine, values):
    with db_engine.begin() as conn:
        movie_store.create_movie(conn, values(title="John Wick"))

        assert movie_store.find_movie_by_title(conn, "JOHN WICK") is not None
        assert movie_store.find_movie_by_title(conn, "john wick 2") is None


def test_find_by_id_missing(db_engine, catalog):
    with db_engine.connect() as conn:
        assert movie_store.find_movie_by_id(conn, 42) is None


def test_duplicate_title_is_classified(db_engine, values):
    with db_engine.begin() as conn:
        movie_store.create_movie(conn, values(title="Inception"))

    with pytest.raises(DuplicateTitleError) as excinfo:
        with db_engine.begin() as conn:
            movie_store.create_movie(conn, values(title="iNcEpTiOn"))

    assert excinfo.value.title == "iNcEpTiOn"


def test_unknown_reference_is_classified(db_engine, values):
    with pytest.raises(InvalidReferenceError):
        with db_engine.begin() as conn:
            movie_store.create_movie(conn, values(language_id=999))


def test_missing_table_is_store_unavailable(db_engine, catalog):
    movies.drop(db_engine)

    with pytest.raises(StoreUnavailableError):
        with db_engine.connect() as conn:
            movie_store.list_movies(conn)


def test_list_movies_embeds_relations(db_engine, catalog, values):
    with db_engine.begin() as conn:
        movie_store.create_movie(conn, values(title="B"))
        movie_store.create_movie(conn, values(title="A", genre="Drama"))
        result = movie_store.list_movies(conn)

    assert [m.title for m in result] == ["A", "B"]
    assert result[0].genres.name == "Drama"
    assert result[0].languages.id == catalog["English"]


def test_list_by_genre_name(db_engine, values):
    with db_engine.begin() as conn:
        movie_store.create_movie(conn, values(title="Gladiator", genre="Action"))
        movie_store.create_movie(conn, values(title="Inception", genre="Sci-Fi"))
        result = movie_store.list_movies_by_genre_name(conn, "sci-fi")

    assert [m.title for m in result] == ["Inception"]


def test_update_with_no_values_is_noop(db_engine, values):
    with db_engine.begin() as conn:
        movie_id = movie_store.create_movie(conn, values())
        movie_store.update_movie(conn, movie_id, {})
        row = movie_store.find_movie_by_id(conn, movie_id)

    assert row["oscar_count"] == 4


def test_update_and_delete(db_engine, values):
    with db_engine.begin() as conn:
        movie_id = movie_store.create_movie(conn, values())
        movie_store.update_movie(conn, movie_id, {"oscar_count": 7})
        assert movie_store.find_movie_by_id(conn, movie_id)["oscar_count"] == 7

        movie_store.delete_movie(conn, movie_id)
        assert movie_store.find_movie_by_id(conn, movie_id) is None


def test_not_null_violation_is_not_a_duplicate_title(db_engine, values):
    with db_engine.begin() as conn:
        movie_id = movie_store.create_movie(conn, values())

    with pytest.raises(IntegrityError) as excinfo:
        with db_engine.begin() as conn:
            movie_store.update_movie(conn, movie_id, {"title": None})

    assert not isinstance(excinfo.value, DuplicateTitleError)
