from dataclasses import dataclass

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import tripmate.db.models  # noqa: F401  registers tables on Base
from tripmate.api.deps import get_db
from tripmate.db.database import Base
from tripmate.main import app

API = "/api/v1"


@dataclass
class TestUser:
    __test__ = False

    id: int
    email: str
    username: str
    headers: dict


@pytest.fixture()
def client():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(engine)
    TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    engine.dispose()


@pytest.fixture()
def make_user(client):
    def _make_user(username: str, password: str = "secret123") -> TestUser:
        email = f"{username}@example.com"
        resp = client.post(f"{API}/auth/register", json={"email": email, "password": password, "username": username})
        assert resp.status_code == 201, resp.text
        headers = {"Authorization": f"Bearer {resp.json()['access_token']}"}
        me = client.get(f"{API}/users/me", headers=headers).json()
        return TestUser(id=me["id"], email=email, username=username, headers=headers)

    return _make_user


@pytest.fixture()
def alice(make_user) -> TestUser:
    return make_user("alice")


@pytest.fixture()
def bob(make_user) -> TestUser:
    return make_user("bob")


@pytest.fixture()
def group_of_two(client, alice, bob) -> int:
    """A group created by alice with bob invited"""
    resp = client.post(f"{API}/groups", json={"name": "Summer"}, headers=alice.headers)
    group_id = resp.json()["id"]
    resp = client.post(f"{API}/groups/{group_id}/members", json={"user_id": bob.id}, headers=alice.headers)
    assert resp.status_code == 201, resp.text
    return group_id
