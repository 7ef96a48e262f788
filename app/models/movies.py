# app/models/movies.py

from datetime import date, datetime, timezone
from typing import Optional

from pydantic import BaseModel, TypeAdapter, ValidationError, field_validator

_datetime_adapter = TypeAdapter(datetime)


def _to_release_date(value):
    """
    Accept a plain date or a full ISO-8601 timestamp such as
    "2010-07-16T15:30:00.000Z"; timestamps are reduced to their UTC date.
    """
    if isinstance(value, str) and "T" in value:
        try:
            value = _datetime_adapter.validate_python(value)
        except ValidationError as exc:
            raise ValueError(f"invalid release_date timestamp: {value!r}") from exc
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


class GenreOut(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class LanguageOut(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class MovieOut(BaseModel):
    id: int
    title: str
    genre_id: int
    language_id: int
    oscar_count: int
    release_date: date
    genres: GenreOut
    languages: LanguageOut

    class Config:
        from_attributes = True


class MovieCreate(BaseModel):
    title: str
    genre_id: int
    language_id: int
    oscar_count: int
    release_date: date

    @field_validator("release_date", mode="before")
    @classmethod
    def accept_timestamp(cls, value):
        return _to_release_date(value)


class MovieUpdate(BaseModel):
    """Partial update: only the fields present in the request body are written."""

    title: Optional[str] = None
    genre_id: Optional[int] = None
    language_id: Optional[int] = None
    oscar_count: Optional[int] = None
    release_date: Optional[date] = None

    @field_validator("release_date", mode="before")
    @classmethod
    def accept_timestamp(cls, value):
        return _to_release_date(value)

    def changes(self) -> dict:
        """Fields sent in the body, minus explicit nulls (every column is NOT NULL)."""
        return {
            field: value
            for field, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }
