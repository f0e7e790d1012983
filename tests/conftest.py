import pytest
from fastapi.testclient import TestClient

from models.user import User
from services.posts import PostStore
from services.users import UserDirectory


@pytest.fixture
def alice():
    return User(id=1, username="alice", memberSince="2024-01-01T00:00:00+00:00")


@pytest.fixture
def users(alice):
    """A directory that already holds alice."""
    return UserDirectory([alice])


@pytest.fixture
def posts():
    return PostStore()


@pytest.fixture
def app():
    from main import app
    return app


@pytest.fixture
def client(app):
    """Test client with fresh, empty stores; redirects are not followed."""
    with TestClient(app, follow_redirects=False) as c:
        yield c


@pytest.fixture
def login(client):
    """Register (if needed) and log in as the given username."""
    def _login(username):
        client.post("/register", data={"username": username})
        resp = client.post("/login", data={"username": username})
        assert resp.status_code == 302
        assert resp.headers["location"] == "/"
        return client.app.state.users.find_by_username(username)
    return _login
