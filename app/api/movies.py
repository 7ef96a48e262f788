# app/api/movies.py

import logging
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.engine import Engine

from app.api.errors import translate_store_errors
from app.db import movies as movie_store
from app.db.engine import get_engine
from app.errors import DuplicateTitleError, MovieNotFoundError
from app.models.movies import MovieCreate, MovieOut, MovieUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("", response_model=List[MovieOut])
def list_movies(engine: Engine = Depends(get_engine)) -> List[MovieOut]:
    """
    Return all movies ordered by title, with genre and language embedded.
    """
    with engine.connect() as conn:
        return movie_store.list_movies(conn)


@router.post("", status_code=201)
def create_movie(
    payload: MovieCreate,
    engine: Engine = Depends(get_engine),
) -> Response:
    """
    Create a movie unless another one already has the same title (case-insensitive).
    """
    with translate_store_errors("Failed to create movie"):
        with engine.begin() as conn:
            if movie_store.find_movie_by_title(conn, payload.title) is not None:
                raise DuplicateTitleError(payload.title)

            movie_id = movie_store.create_movie(conn, payload.model_dump())

    logger.info("Created movie %s (%r)", movie_id, payload.title)
    return Response(status_code=201)


@router.put("/{movie_id}")
def update_movie(
    movie_id: int,
    payload: MovieUpdate,
    engine: Engine = Depends(get_engine),
) -> Response:
    values = payload.changes()

    with translate_store_errors("Failed to update movie"):
        with engine.begin() as conn:
            if movie_store.find_movie_by_id(conn, movie_id) is None:
                raise MovieNotFoundError(movie_id)

            movie_store.update_movie(conn, movie_id, values)

    logger.info("Updated movie %s (%s)", movie_id, ", ".join(sorted(values)) or "no fields")
    return Response(status_code=200)


@router.delete("/{movie_id}")
def delete_movie(movie_id: int, engine: Engine = Depends(get_engine)) -> Response:
    with translate_store_errors("Failed to delete movie"):
        with engine.begin() as conn:
            if movie_store.find_movie_by_id(conn, movie_id) is None:
                raise MovieNotFoundError(movie_id)

            movie_store.delete_movie(conn, movie_id)

    logger.info("Deleted movie %s", movie_id)
    return Response(status_code=200)


@router.get("/{genre_name}", response_model=List[MovieOut])
def list_movies_by_genre(
    genre_name: str,
    engine: Engine = Depends(get_engine),
) -> List[MovieOut]:
    """
    Return the movies whose genre name matches genre_name, ignoring case.
    """
    with translate_store_errors("Failed to filter movies by genre"):
        with engine.connect() as conn:
            return movie_store.list_movies_by_genre_name(conn, genre_name)
