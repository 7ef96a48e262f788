# app/errors.py
"""
Error kinds raised by the data-access layer.

Each kind maps to one outward-facing HTTP status in app.api.errors.
"""


class CatalogError(Exception):
    """Base class for every classified store failure."""


class MovieNotFoundError(CatalogError):
    def __init__(self, movie_id: int):
        super().__init__(f"movie {movie_id} not found")
        self.movie_id = movie_id


class DuplicateTitleError(CatalogError):
    def __init__(self, title: str):
        super().__init__(f"title {title!r} already exists")
        self.title = title


class InvalidReferenceError(CatalogError):
    """genre_id or language_id points at no row."""


class StoreUnavailableError(CatalogError):
    """The database could not be reached or the operation was aborted by it."""
