"""Pytest configuration and shared fixtures."""
import pytest
from unittest.mock import MagicMock
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from app.api.deps import get_forecast_client
from app.core.database import get_db, init_db
from app.main import app
from app.services.location_store import LocationStore
from app.services.open_meteo import OpenMeteoClient


@pytest.fixture
def engine():
    """In-memory SQLite shared by every session of a test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def store(db_session):
    return LocationStore(db_session)


@pytest.fixture
def forecast_client():
    """Spy standing in for the Open-Meteo client."""
    return MagicMock(spec=OpenMeteoClient)


@pytest.fixture
def client(session_factory, forecast_client):
    """FastAPI test client wired to the test database and the forecast spy."""
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_forecast_client] = lambda: forecast_client
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def current_weather_json():
    """Open-Meteo answer for latitude=10, longitude=20 with current weather."""
    return (
        b'{"latitude":10.0,"longitude":20.0,"generationtime_ms":0.04,"utc_offset_seconds":0,'
        b'"timezone":"GMT","timezone_abbreviation":"GMT","elevation":312.0,'
        b'"current_weather":{"time":"2026-10-19T09:45","interval":900,"temperature":27.4,'
        b'"windspeed":11.2,"winddirection":184,"is_day":1,"weathercode":3}}'
    )
