import pytest
from fastapi.testclient import TestClient

from usersvc.core.exceptions import StoreUnavailableError
from usersvc.main import create_app
from usersvc.repositories.memory import InMemoryUserRepository
from usersvc.repositories.user_repository import UserRepository


class UnavailableUserRepository(UserRepository):
    """Behaves like a store whose server cannot be reached."""

    def __init__(self):
        self.calls = 0

    async def list_users(self):
        self.calls += 1
        raise StoreUnavailableError(details="connection refused")

    async def create_user(self, attributes):
        self.calls += 1
        raise StoreUnavailableError(details="connection refused")

    async def ping(self):
        return False


@pytest.fixture
def repository():
    return InMemoryUserRepository()


@pytest.fixture
def client(repository):
    with TestClient(create_app(repository)) as client:
        yield client


@pytest.fixture
def unavailable_client():
    with TestClient(create_app(UnavailableUserRepository())) as client:
        yield client
