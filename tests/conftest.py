import pytest

from models.user import User
from tests.mockdb import MockDatabase


def _make_user(user_id: int) -> User:
    return User(
        id=user_id,
        email="test@test.com",
        pass_hash=b"passhash123",
        username="username",
        first_name="firstname",
        last_name="lastname",
        photo_url="photourl",
    )


def _as_row(user: User) -> tuple:
    return (
        user.id,
        user.email,
        user.pass_hash,
        user.username,
        user.first_name,
        user.last_name,
        user.photo_url,
    )


@pytest.fixture
def mock_db():
    """A fresh fake database per test; every borrowed connection must be given back."""
    db = MockDatabase()
    yield db
    assert db.open_connections == 0, "connection was not released"


@pytest.fixture
def make_user():
    """Factory for the reference user with a chosen id."""
    return _make_user


@pytest.fixture
def as_row():
    """Turns a User back into the positional row the users query returns."""
    return _as_row


@pytest.fixture
def user_row():
    """Row for the reference user with id 1."""
    return _as_row(_make_user(1))
