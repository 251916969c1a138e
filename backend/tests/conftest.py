# backend/tests/conftest.py
from datetime import date
import itertools

from fastapi.testclient import TestClient
import pytest

from spotbnb.config import Settings
from spotbnb.gateway import Gateway
from spotbnb.main import create_app
from spotbnb.security import create_access_token, hash_password

SPOT_PAYLOAD = {
    "address": "123 Disney Lane",
    "city": "San Francisco",
    "state": "California",
    "country": "United States of America",
    "lat": 37.7645358,
    "lng": -122.4730327,
    "name": "App Academy",
    "description": "Place where web developers are created",
    "price": 123,
}


@pytest.fixture
def settings():
    return Settings(
        environment="test",
        database_url="sqlite://",
        jwt_secret="test-secret",
        bcrypt_rounds=4,
        log_level="WARNING",
    )


@pytest.fixture
def app(settings):
    app = create_app(settings)
    yield app
    app.state.engine.dispose()


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(app):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def gateway(db):
    return Gateway(db)


@pytest.fixture
def make_user(gateway, settings):
    counter = itertools.count(1)

    def _make(first_name="Test", last_name=None, email=None, password="password123"):
        n = next(counter)
        return gateway.add_user(
            first_name=first_name,
            last_name=last_name or f"User{n}",
            email=email or f"user{n}@example.com",
            hashed_password=hash_password(password, rounds=settings.bcrypt_rounds),
        )

    return _make


@pytest.fixture
def make_spot(gateway):
    def _make(owner, **overrides):
        return gateway.add_spot(owner.id, {**SPOT_PAYLOAD, **overrides})

    return _make


@pytest.fixture
def make_booking(gateway):
    def _make(spot, user, start: date, end: date):
        return gateway.add_booking(spot_id=spot.id, user_id=user.id, start_date=start, end_date=end)

    return _make


@pytest.fixture
def auth_headers(settings):
    def _headers(user):
        return {"Authorization": f"Bearer {create_access_token(user.id, settings)}"}

    return _headers
