import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from app.db.engine import build_engine, get_engine
from app.db.schema import genres, languages, metadata
from app.main import app

SQLALCHEMY_DATABASE_URL = "sqlite://"

engine = build_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@pytest.fixture
def db_engine():
    """Provide a freshly created schema for each test."""
    metadata.drop_all(bind=engine)
    metadata.create_all(bind=engine)
    yield engine


@pytest.fixture
def client(db_engine):
    """FastAPI test client with the engine dependency overridden."""
    app.dependency_overrides[get_engine] = lambda: db_engine

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.pop(get_engine, None)


@pytest.fixture
def catalog(db_engine):
    """Seed genres and languages; returns their ids keyed by name."""
    ids = {}
    with db_engine.begin() as conn:
        for name in ("Action", "Drama", "Sci-Fi"):
            ids[name] = conn.execute(genres.insert().values(name=name)).inserted_primary_key[0]
        for name in ("English", "Portuguese"):
            ids[name] = conn.execute(languages.insert().values(name=name)).inserted_primary_key[0]
    return ids


@pytest.fixture
def movie_payload(catalog):
    def _payload(title="Inception", genre="Sci-Fi", language="English", **overrides):
        payload = {
            "title": title,
            "genre_id": catalog[genre],
            "language_id": catalog[language],
            "oscar_count": 4,
            "release_date": "2010-07-16",
        }
        payload.update(overrides)
        return payload

    return _payload


@pytest.fixture
def lenient_client(db_engine):
    """Test client that returns 500 responses instead of re-raising server errors."""
    app.dependency_overrides[get_engine] = lambda: db_engine

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    app.dependency_overrides.pop(get_engine, None)
