# app/api/errors.py

import logging
from contextlib import contextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from app.errors import (
    DuplicateTitleError,
    InvalidReferenceError,
    MovieNotFoundError,
    StoreUnavailableError,
)

logger = logging.getLogger(__name__)

MOVIE_NOT_FOUND = "Movie not found"
DUPLICATE_TITLE = "A movie with this title already exists"
INVALID_REFERENCE = "Unknown genre or language"
STORE_UNAVAILABLE = "Database unavailable"


@contextmanager
def translate_store_errors(failure_detail: str):
    """
    Turn catalog errors raised inside the block into a single HTTPException.

    Anything the store raised that has no kind of its own becomes a 500
    carrying failure_detail.
    """
    try:
        yield
    except MovieNotFoundError as exc:
        logger.warning("%s", exc)
        raise HTTPException(status_code=404, detail=MOVIE_NOT_FOUND) from exc
    except DuplicateTitleError as exc:
        logger.warning("%s", exc)
        raise HTTPException(status_code=409, detail=DUPLICATE_TITLE) from exc
    except InvalidReferenceError as exc:
        logger.warning("Invalid reference: %s", exc)
        raise HTTPException(status_code=422, detail=INVALID_REFERENCE) from exc
    except (StoreUnavailableError, OperationalError) as exc:
        logger.error("Database unavailable: %s", exc, exc_info=True)
        raise HTTPException(status_code=503, detail=STORE_UNAVAILABLE) from exc
    except SQLAlchemyError as exc:
        logger.error("%s: %s", failure_detail, exc, exc_info=True)
        raise HTTPException(status_code=500, detail=failure_detail) from exc


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )
