# load_data.py
"""
Load the seed movies CSV into the database.
Run scripts/init_db.py first to create the schema.
"""

from scripts.ingest import parse_movies_csv, load_into_db, FILE_PATH


def main():
    genres_by_key, languages_by_key, movies_list, stats = parse_movies_csv(FILE_PATH)
    n_inserted = load_into_db(genres_by_key, languages_by_key, movies_list)

    print("Load complete.")
    print(f"Total CSV rows read:   {stats['n_rows']}")
    print(f"Movies inserted:       {n_inserted}")
    print(f"Genres:                {stats['n_genres']}")
    print(f"Languages:             {stats['n_languages']}")
    print(f"Rows with errors:      {stats['n_errors']}")


if __name__ == "__main__":
    main()
