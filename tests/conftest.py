import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECURITY_HEADERS_ENABLED", "true")

from typing import Optional  # noqa: E402

import pytest  # noqa: E402
from fastapi import Request  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from barbershop import database, main  # noqa: E402
from barbershop.auth import AdminIdentity, AuthProvider, get_auth_provider  # noqa: E402
from barbershop.client import BarbershopClient  # noqa: E402

ADMIN_TOKEN = "admin-token"


class FakeAuthProvider(AuthProvider):
    """Accepts a single bearer token and maps it to a fixed admin"""

    def __init__(self, token: str = ADMIN_TOKEN):
        self.token = token

    async def current_user(self, request: Request) -> Optional[AdminIdentity]:
        if request.headers.get("authorization") == f"Bearer {self.token}":
            return AdminIdentity(id="admin-1", display_name="Shop Owner")
        return None


@pytest.fixture
def engine(monkeypatch):
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    monkeypatch.setattr(database, "engine", test_engine)
    monkeypatch.setattr(
        database,
        "SessionLocal",
        sessionmaker(autocommit=False, autoflush=False, bind=test_engine),
    )
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def db(engine):
    database.init_db()
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seed_enabled():
    return True


@pytest.fixture
def client(engine, monkeypatch, seed_enabled):
    """TestClient with lifespan (tables + demo catalog) and the fake auth provider"""
    monkeypatch.setattr(main, "SEED_DEMO_DATA", seed_enabled)
    main.app.dependency_overrides[get_auth_provider] = lambda: FakeAuthProvider()
    with TestClient(main.app) as test_client:
        yield test_client
    main.app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture
def public_api(client):
    return BarbershopClient(http=client)


@pytest.fixture
def admin_api(client):
    return BarbershopClient(http=client, token=ADMIN_TOKEN)


@pytest.fixture
def service_payload():
    return {
        "name": "Hot Towel Fade",
        "description": "Skin fade finished with a hot towel.",
        "price": 4000,
        "duration": 40,
        "image": "https://example.com/fade.jpg",
    }


@pytest.fixture
def barber_payload():
    return {
        "name": "Marco",
        "bio": "Ten years behind the chair.",
        "image": "https://example.com/marco.jpg",
        "specialties": ["Fades", "Beards"],
        "availability": {"days": [1, 2, 3], "hours": {"start": "09:00", "end": "17:00"}},
    }


@pytest.fixture
def appointment_payload():
    return {
        "customerName": "Jane Doe",
        "customerEmail": "jane@example.com",
        "customerPhone": "5551234567",
        "serviceId": 1,
        "barberId": 1,
        "startTime": "2025-06-10T10:00:00",
    }
