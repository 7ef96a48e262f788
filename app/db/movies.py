# app/db/movies.py
"""
Data access for the movie catalog.

Every function takes an open Connection and issues a single statement.
Store failures are classified here into the kinds defined in app.errors.
"""

from contextlib import contextmanager
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.engine import Connection, RowMapping
from sqlalchemy.exc import IntegrityError, OperationalError

from app.db.schema import TITLE_INDEX_NAME, genres, languages, movies
from app.errors import (
    DuplicateTitleError,
    InvalidReferenceError,
    StoreUnavailableError,
)
from app.models.movies import GenreOut, LanguageOut, MovieOut


def _movie_select():
    return (
        select(
            movies.c.id,
            movies.c.title,
            movies.c.genre_id,
            movies.c.language_id,
            movies.c.oscar_count,
            movies.c.release_date,
            genres.c.name.label("genre_name"),
            languages.c.name.label("language_name"),
        )
        .select_from(movies.join(genres).join(languages))
    )


def _row_to_movie(row) -> MovieOut:
    return MovieOut(
        id=row["id"],
        title=row["title"],
        genre_id=row["genre_id"],
        language_id=row["language_id"],
        oscar_count=row["oscar_count"],
        release_date=row["release_date"],
        genres=GenreOut(id=row["genre_id"], name=row["genre_name"]),
        languages=LanguageOut(id=row["language_id"], name=row["language_name"]),
    )


@contextmanager
def _classified(title: Optional[str] = None):
    try:
        yield
    except IntegrityError as exc:
        message = str(exc.orig)
        if TITLE_INDEX_NAME in message:
            raise DuplicateTitleError(title or "") from exc
        if "foreign key" in message.lower():
            raise InvalidReferenceError(message) from exc
        raise
    except OperationalError as exc:
        raise StoreUnavailableError(str(exc.orig)) from exc


def list_movies(conn: Connection) -> List[MovieOut]:
    stmt = _movie_select().order_by(movies.c.title.asc())
    with _classified():
        rows = conn.execute(stmt).mappings().all()
    return [_row_to_movie(row) for row in rows]


def list_movies_by_genre_name(conn: Connection, genre_name: str) -> List[MovieOut]:
    stmt = (
        _movie_select()
        .where(func.lower(genres.c.name) == func.lower(genre_name))
        .order_by(movies.c.title.asc())
    )
    with _classified():
        rows = conn.execute(stmt).mappings().all()
    return [_row_to_movie(row) for row in rows]


def find_movie_by_title(conn: Connection, title: str) -> Optional[RowMapping]:
    """First movie whose title matches case-insensitively, or None."""
    stmt = (
        select(movies)
        .where(func.lower(movies.c.title) == func.lower(title))
        .limit(1)
    )
    with _classified():
        return conn.execute(stmt).mappings().first()


def find_movie_by_id(conn: Connection, movie_id: int) -> Optional[RowMapping]:
    stmt = select(movies).where(movies.c.id == movie_id)
    with _classified():
        return conn.execute(stmt).mappings().first()


def create_movie(conn: Connection, values: dict) -> int:
    with _classified(values.get("title")):
        result = conn.execute(movies.insert().values(**values))
    return result.inserted_primary_key[0]


def update_movie(conn: Connection, movie_id: int, values: dict) -> None:
    if not values:
        return

    stmt = movies.update().where(movies.c.id == movie_id).values(**values)
    with _classified(values.get("title")):
        conn.execute(stmt)


def delete_movie(conn: Connection, movie_id: int) -> None:
    with _classified():
        conn.execute(movies.delete().where(movies.c.id == movie_id))
