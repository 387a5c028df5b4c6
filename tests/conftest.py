"""
Shared fixtures: an in-memory SQLite database wired into the app
"""
import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-0123456789abcdef0123456789abcdef")
os.environ.setdefault("RATE_LIMIT_REQUESTS", "100000")
os.environ["TIMEZONE"] = "UTC"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SMS_API_KEY"] = ""
os.environ["OTP_RETURN_IN_RESPONSE"] = "true"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from fiftyhertz.core.database import Database, get_db
from fiftyhertz.core.security import issue_session_token
from fiftyhertz.main import app
from fiftyhertz.models import User
from fiftyhertz.models.enums import AdminFlag, DeviceType


@pytest.fixture
def test_database():
    db = Database()
    db.init("sqlite://", poolclass=StaticPool)
    db.create_all()
    yield db
    db.close()


@pytest.fixture
def db_session(test_database):
    session = test_database.session()
    yield session
    session.close()


@pytest.fixture
def client(test_database):
    def override_get_db():
        session = test_database.session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session):
    def _make_user(phone="9000000001", admin=False, language_code="en", language_name="English"):
        user = User(
            phone=phone,
            device_type=DeviceType.ANDROID,
            language_code=language_code,
            language_name=language_name,
            is_admin=AdminFlag.ADMIN if admin else AdminFlag.NON_ADMIN,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def login(db_session):
    """Issue a stored session token for a user and return request headers"""

    def _login(user):
        token = issue_session_token(db_session, user)
        db_session.commit()
        return {"Authorization": f"Bearer {token}"}

    return _login


@pytest.fixture
def user_headers(make_user, login):
    return login(make_user())


@pytest.fixture
def admin_headers(make_user, login):
    return login(make_user(phone="9000000099", admin=True))
