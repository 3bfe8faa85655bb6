import time
from datetime import datetime, timezone

import jwt
import pytest
from dishka import make_async_container
from fastapi.testclient import TestClient

from jai_backend.fastapi_app import create_fastapi_app
from jai_backend.infrastructure.auth import JwtCredentialVerifier
from jai_backend.setup.ioc import ApplicationProvider
from tests.fakes import (
    FakeInfrastructureProvider,
    FakeModelProvider,
    InMemoryConversationRepository,
)

SERVICE_AUTH_SECRET = "jai-test-secret-with-at-least-32-bytes"
AUD = "jai-test-audience"
ISS = "jai-test-issuer"

# Sunday 18 October 2026, 20:00 UTC = Monday 19 October 01:30 in Mumbai
FIXED_NOW = datetime(2026, 10, 18, 20, 0, tzinfo=timezone.utc)


def _service_token(
    user_id="user-1",
    email="user@example.com",
    email_verified=True,
    secret=SERVICE_AUTH_SECRET,
    expires_in=300,
):
    now = int(time.time())
    return jwt.encode(
        {
            "sub": user_id,
            "email": email,
            "email_verified": email_verified,
            "firebase": {"sign_in_provider": "password"},
            "iat": now,
            "exp": now + expires_in,
            "iss": ISS,
            "aud": AUD,
        },
        secret,
        algorithm="HS256",
    )


def auth_headers_for(user_id: str, **claims) -> dict:
    return {"Authorization": f"Bearer {_service_token(user_id=user_id, **claims)}"}


@pytest.fixture()
def verifier():
    return JwtCredentialVerifier(secret=SERVICE_AUTH_SECRET, audience=AUD, issuer=ISS)


@pytest.fixture()
def repository():
    return InMemoryConversationRepository()


@pytest.fixture()
def model_provider():
    return FakeModelProvider()


@pytest.fixture()
def app(repository, model_provider, verifier):
    """FastAPI app wired with in-memory infrastructure."""
    container = make_async_container(
        FakeInfrastructureProvider(repository, model_provider, verifier),
        ApplicationProvider(),
    )
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture()
def auth_headers():
    """Authentication headers with valid JWT token."""
    return auth_headers_for("user-1")
