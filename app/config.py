# app/config.py

import os

from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///db.sqlite")  # file in project root
DB_ECHO = os.getenv("DB_ECHO", "false").lower() == "true"

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 3000))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

MOVIES_CSV = os.getenv("MOVIES_CSV", "data/movies.csv")
