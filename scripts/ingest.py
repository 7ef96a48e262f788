# scripts/ingest.py

import csv
import logging
from datetime import datetime

from sqlalchemy import func, select

from app.config import MOVIES_CSV
from app.db.engine import get_engine
from app.db.schema import genres, languages, movies

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)

FILE_PATH = MOVIES_CSV


# ---- Helpers ----

def parse_oscar_count(value: str) -> int:
    value = (value or "").strip()
    if value == "":
        return 0
    return int(value)


def parse_release_date(value: str):
    value = (value or "").strip()
    if not value:
        raise ValueError("ReleaseDate is required")
    # accept "2010-07-16" and "2010-07-16T00:00:00Z"
    value = value.split("T")[0]
    return datetime.strptime(value, "%Y-%m-%d").date()


def clean_name(value: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValueError("empty name")
    return value


def parse_movies_csv(file_path: str = FILE_PATH):
    """
    Read the seed CSV (Title, Genre, Language, OscarCount, ReleaseDate).

    Genres and languages are keyed by lowercased name; the first spelling seen wins.
    Titles repeated in the file (case-insensitive) are counted and skipped.
    """
    genres_by_key = {}
    languages_by_key = {}
    movies_list = []

    n_rows = 0
    n_errors = 0
    error_examples = []

    seen_titles: set[str] = set()
    duplicate_title_examples: list[str] = []
    duplicate_title_count = 0

    with open(file_path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)

        for row in reader:
            n_rows += 1

            try:
                title = clean_name(row["Title"])
                genre_name = clean_name(row["Genre"])
                language_name = clean_name(row["Language"])
                oscar_count = parse_oscar_count(row["OscarCount"])
                release_date = parse_release_date(row["ReleaseDate"])
            except (KeyError, ValueError) as e:
                n_errors += 1
                if len(error_examples) < 5:
                    error_examples.append(
                        {
                            "row_number": n_rows,
                            "row": dict(row),
                            "error": repr(e),
                        }
                    )
                continue

            if title.lower() in seen_titles:
                duplicate_title_count += 1
                if len(duplicate_title_examples) < 5:
                    duplicate_title_examples.append(
                        f"Duplicate Title {title!r} at CSV row {n_rows}"
                    )
                continue
            seen_titles.add(title.lower())

            genres_by_key.setdefault(genre_name.lower(), genre_name)
            languages_by_key.setdefault(language_name.lower(), language_name)

            movies_list.append(
                {
                    "title": title,
                    "genre": genre_name.lower(),
                    "language": language_name.lower(),
                    "oscar_count": oscar_count,
                    "release_date": release_date,
                }
            )

    stats = {
        "n_rows": n_rows,
        "n_movies": len(movies_list),
        "n_genres": len(genres_by_key),
        "n_languages": len(languages_by_key),
        "n_errors": n_errors,
        "error_examples": error_examples,
        "n_duplicate_titles": duplicate_title_count,
        "duplicate_title_examples": duplicate_title_examples,
    }
    return genres_by_key, languages_by_key, movies_list, stats


def get_or_create_ids(conn, table, names_by_key: dict) -> dict:
    """Map lowercased name -> id, inserting names the table does not hold yet."""
    existing = {
        row.name_key: row.id
        for row in conn.execute(
            select(table.c.id, func.lower(table.c.name).label("name_key"))
        )
    }

    for key, name in names_by_key.items():
        if key not in existing:
            result = conn.execute(table.insert().values(name=name))
            existing[key] = result.inserted_primary_key[0]

    return existing


def load_into_db(genres_by_key, languages_by_key, movies_list, engine=None) -> int:
    """
    Insert the parsed movies in one transaction. Returns the number inserted.

    Titles already stored (case-insensitive) are left untouched.
    """
    engine = engine or get_engine()
    with engine.begin() as conn:
        genre_ids = get_or_create_ids(conn, genres, genres_by_key)
        language_ids = get_or_create_ids(conn, languages, languages_by_key)

        stored_titles = set(
            conn.execute(select(func.lower(movies.c.title))).scalars().all()
        )

        rows = [
            {
                "title": m["title"],
                "genre_id": genre_ids[m["genre"]],
                "language_id": language_ids[m["language"]],
                "oscar_count": m["oscar_count"],
                "release_date": m["release_date"],
            }
            for m in movies_list
            if m["title"].lower() not in stored_titles
        ]

        if rows:
            conn.execute(movies.insert(), rows)

    return len(rows)


def main():
    genres_by_key, languages_by_key, movies_list, stats = parse_movies_csv(FILE_PATH)
    n_inserted = load_into_db(genres_by_key, languages_by_key, movies_list)

    logger.info(f"Total CSV rows read:   {stats['n_rows']}")
    logger.info(f"Movies parsed:         {stats['n_movies']}")
    logger.info(f"Movies inserted:       {n_inserted}")
    logger.info(f"Genres:                {stats['n_genres']}")
    logger.info(f"Languages:             {stats['n_languages']}")
    logger.info(f"Rows with errors:      {stats['n_errors']}")
    logger.info(
        "Duplicate titles (case-insensitive): %s",
        stats["n_duplicate_titles"],
    )
    for example in stats["duplicate_title_examples"]:
        logger.warning("Duplicate title example: %s", example)

    if stats["error_examples"]:
        logger.warning("Example errors:")
        for ex in stats["error_examples"]:
            logger.warning("Row %s: %s", ex["row_number"], ex["error"])


if __name__ == "__main__":
    main()
