"""
Pytest configuration and fixtures for the RapidReads API tests.
"""

import os

# configure before the app package reads its settings
os.environ.setdefault("ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("AUTO_CREATE_TABLES", "true")
os.environ.setdefault("SEED_SAMPLE_DATA", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel, Session, create_engine
from sqlalchemy.pool import StaticPool

from app.config import get_settings
from app.main import create_app
from app.models.product import Product


# =============================================================================
# Data
# =============================================================================

CATALOGUE = [
    {
        "id": 204,
        "title": "To Kill a Mockingbird",
        "author": "Harper Lee",
        "genre": "Fiction",
        "price": 55,
        "image": "book4.jpg",
        "available_inventory": 5,
        "description": "A timeless classic about racial injustice in 1930s Alabama.",
    },
    {
        "id": 205,
        "title": "Atomic Habits",
        "author": "James Clear",
        "genre": "Self help",
        "price": 66,
        "image": "book5.jpg",
        "available_inventory": 10,
        "description": "A guide to building good habits and breaking bad ones.",
    },
    {
        "id": 206,
        "title": "The Alchemist",
        "author": "Paulo Coelho",
        "genre": "Philosophical",
        "price": 53,
        "image": "book6.jpg",
        "available_inventory": 10,
        "description": "Santiago, a young shepherd, journeys to find treasure.",
    },
    {
        "id": 299,
        "title": "Reading Coelho",
        "author": "M. Reader",
        "genre": "Commentary",
        "price": 40,
        "image": None,
        "available_inventory": 2,
        "description": "A companion guide to The ALCHEMIST and its themes.",
    },
]


@pytest.fixture
def catalogue_data() -> list:
    return [dict(item) for item in CATALOGUE]


# =============================================================================
# Service-level fixtures
# =============================================================================

@pytest.fixture
def engine():
    """Fresh in-memory database for service tests."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    from app.models import CartItem, Product, User  # noqa: F401

    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def seeded_session(session, catalogue_data):
    session.add_all([Product(**data) for data in catalogue_data])
    session.commit()
    return session


# =============================================================================
# Application fixtures
# =============================================================================

@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client with the lifespan running, so the database is ready."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def database(client):
    return client.app.state.database


@pytest.fixture
def seeded(database, catalogue_data):
    with database.session() as session:
        session.add_all([Product(**data) for data in catalogue_data])
        session.commit()
    return database


@pytest.fixture
def registration() -> dict:
    return {
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "Jane.Doe@Example.com",
        "password": "secret123",
    }


@pytest.fixture
def auth_headers(client, registration) -> dict:
    response = client.post("/auth/register", json=registration)
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['token']}"}
