"""
Test configuration for the CarePass backend.
"""
import os

# Settings are read at import time, so the environment is set up first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["EMAIL_SERVICE"] = "ses"
os.environ["AWS_REGION"] = "us-east-1"
os.environ["SOURCE_EMAIL"] = "hello@carepass.com"
os.environ["CLOUDINARY_CLOUD_NAME"] = "carepass-test"
os.environ["CLOUDINARY_API_KEY"] = "123456789012345"
os.environ["CLOUDINARY_API_SECRET"] = "cloudinary-test-secret"
os.environ["LOG_LEVEL"] = "WARNING"

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from carepass.core.security import create_access_token
from carepass.database import Base, get_db
from carepass.dependencies import get_email_dispatcher
from carepass.main import app
from carepass.notifications.dispatcher import EmailDispatcher, EmailTransport
from carepass.promos.models import PromoCode
from carepass.users.models import User

# Test database URL
TEST_DATABASE_URL = "sqlite://"

# Create test database engine
engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class FakeTransport(EmailTransport):
    """Records messages instead of sending them."""

    name = "fake"

    def __init__(self):
        self.sent = []
        self.error = None

    async def send(self, message):
        if self.error is not None:
            raise self.error
        self.sent.append(message)
        return f"fake-{len(self.sent)}"


@pytest.fixture(scope="function")
def db():
    """
    Create a fresh database for each test.
    """
    Base.metadata.create_all(bind=engine)

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def transport():
    """
    Fake email transport shared by the client and the test.
    """
    return FakeTransport()


@pytest.fixture(scope="function")
def client(db, transport):
    """
    Create a test client with a test database session and a fake transport.
    """
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_email_dispatcher] = lambda: EmailDispatcher(transport)

    with TestClient(app) as client:
        yield client

    app.dependency_overrides = {}


@pytest.fixture
def auth_headers():
    """
    Authorization header carrying a valid token.
    """
    token = create_access_token({"id": "admin-1", "role": "admin"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user(db):
    """
    A member with id "u1".
    """
    user = User(id="u1", email="jane@example.com", name="Jane Doe")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def make_promo(db):
    """
    Factory storing a promo code; valid for a day unless told otherwise.
    """
    def _make_promo(code="SAVE10", discount=Decimal("10"), is_active=True, expiry_date=None):
        promo = PromoCode(
            code=code,
            discount_percentage=discount,
            is_active=is_active,
            expiry_date=expiry_date or datetime.now(timezone.utc) + timedelta(days=1),
        )
        db.add(promo)
        db.commit()
        db.refresh(promo)
        return promo
    return _make_promo
