"""
Fixtures comunes.

- Cada test usa una BD SQLite en memoria nueva (con FKs activadas).
- get_db se sustituye para que las rutas usen esa BD.
"""

import os

# Antes de importar la app: la configuración exige PORT
os.environ.setdefault("PORT", "8009")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from library_api import database, models  # noqa: F401
from library_api.database import Base, get_db
from library_api.main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(engine, session_factory, monkeypatch):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    monkeypatch.setattr(database, "engine", engine)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def create_author(client):
    def _create(first_name="Ada", last_name="Lovelace"):
        r = client.post("/api/authors", json={"firstName": first_name, "lastName": last_name})
        assert r.status_code == 201
        return r.json()

    return _create


@pytest.fixture
def create_book(client, create_author):
    def _create(author_id=None, title="Sapiens", date_published="2011-01-01", is_fiction=False):
        if author_id is None:
            author_id = create_author()["id"]
        payload = {
            "title": title,
            "authorId": author_id,
            "datePublished": date_published,
            "isFiction": is_fiction,
        }
        r = client.post("/api/books", json=payload)
        assert r.status_code == 201, r.text
        return r.json()

    return _create
