# app/db/schema.py

from sqlalchemy import (
    MetaData, Table, Column, Integer, String,
    Date, ForeignKey, Index, func
)

metadata = MetaData()

genres = Table(
    "genres",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String, nullable=False, unique=True),
)

languages = Table(
    "languages",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String, nullable=False, unique=True),
)

movies = Table(
    "movies",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String, nullable=False),
    Column("genre_id", Integer, ForeignKey("genres.id"), nullable=False),
    Column("language_id", Integer, ForeignKey("languages.id"), nullable=False),
    Column("oscar_count", Integer, nullable=False, default=0),
    Column("release_date", Date, nullable=False),
)

# Case-insensitive title uniqueness lives in the store, not only in the handler
TITLE_INDEX_NAME = "uq_movies_title_lower"

Index(TITLE_INDEX_NAME, func.lower(movies.c.title), unique=True)
