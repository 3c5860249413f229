import os

# Must be set before the application modules read their settings
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from unittest.mock import MagicMock

from chat_microservice.database import Base, SessionLocal, engine
from chat_microservice.dependencies import get_chat_service
from chat_microservice.main import app
from chat_microservice.services.chat_service import ChatService


@pytest.fixture(scope="function")
def db():
    """Fresh tables for every test, dropped afterwards."""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    # Unhandled errors must come back as 500 responses, not raise into the test
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def mock_chat_service():
    """A mocked ChatService injected through dependency_overrides."""
    service = MagicMock(spec=ChatService)
    app.dependency_overrides[get_chat_service] = lambda: service
    yield service
    app.dependency_overrides.clear()
