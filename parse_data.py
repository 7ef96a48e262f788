# parse_data.py
"""
Parse the seed movies CSV and print basic stats without touching the database.
"""

from scripts.ingest import parse_movies_csv, FILE_PATH


def main():
    _, _, _, stats = parse_movies_csv(FILE_PATH)

    print(f"Total CSV rows read:   {stats['n_rows']}")
    print(f"Movies parsed:         {stats['n_movies']}")
    print(f"Duplicate titles:      {stats['n_duplicate_titles']}")
    print(f"Rows with errors:      {stats['n_errors']}")

    if stats["error_examples"]:
        print("\nExample errors:")
        for ex in stats["error_examples"]:
            print(f"- Row {ex['row_number']}: {ex['error']}")


if __name__ == "__main__":
    main()
