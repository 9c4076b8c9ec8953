import pytest
from unittest.mock import AsyncMock, MagicMock

from src.api.utils.jwt import TokenIssuer
from src.app.services.password_hasher import PasswordHasher

TEST_SECRET = "unit-test-secret"


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Mock repositories
    uow.users = MagicMock()
    uow.users.get_by_id = AsyncMock()
    uow.users.get_by_email = AsyncMock()
    uow.users.get_by_email_or_username = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)

    uow.login_records = MagicMock()
    uow.login_records.create = AsyncMock(side_effect=lambda record: record)
    uow.login_records.count_by_day = AsyncMock(return_value={})
    uow.login_records.get_recent = AsyncMock(return_value=[])

    return uow


@pytest.fixture
def hasher():
    # Lowest bcrypt cost keeps the suite fast
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_issuer():
    return TokenIssuer(TEST_SECRET)
