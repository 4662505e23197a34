import os
import tempfile

# Settings are read at import time, so point them at a throwaway database first
_TEST_DB_DIR = tempfile.mkdtemp(prefix="agrihub-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TEST_DB_DIR, 'test.db')}"
os.environ["SEED_DEMO_DATA"] = "false"

import pytest
from fastapi.testclient import TestClient

from agrihub.auth.otp import OTPStore, get_otp_store
from agrihub.db.session import Base, SessionLocal, engine
from agrihub.main import app


class FakeClock:
    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def otp_store(clock):
    return OTPStore(ttl_seconds=300, length=6, clock=clock)


@pytest.fixture
def client(otp_store):
    app.dependency_overrides[get_otp_store] = lambda: otp_store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def auth_headers():
    def _headers(token):
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def signup(client, otp_store):
    """Register and verify a user, returning (token, user)."""
    counter = {"n": 0}

    def _signup(role, name=None, phone=None, **extra):
        counter["n"] += 1
        phone = phone or f"90000{counter['n']:05d}"
        payload = {"name": name or f"{role} {counter['n']}", "phone": phone, "role": role, **extra}
        response = client.post("/api/v1/auth/register", json=payload)
        assert response.status_code == 200, response.text

        code = otp_store.get(phone).code
        response = client.post("/api/v1/auth/verify-otp", json={"phone": phone, "otp": code})
        assert response.status_code == 200, response.text
        body = response.json()
        return body["token"], body["user"]

    return _signup
