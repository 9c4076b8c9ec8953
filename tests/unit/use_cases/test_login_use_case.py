from uuid import uuid4

import pytest
from sqlalchemy.exc import SQLAlchemyError

from src.app.use_cases.auth import LoginCommand, LoginUseCase
from src.domain.entities import User


@pytest.fixture
def existing_user(hasher):
    return User(
        id=uuid4(),
        username="acme_user",
        email="user@acme.com",
        password_hash=hasher.hash("SecurePass123!"),
    )


def make_command(**overrides):
    data = {
        "email": "user@acme.com",
        "password": "SecurePass123!",
        "ip_address": "203.0.113.7",
        "user_agent": "pytest-agent",
    }
    data.update(overrides)
    return LoginCommand(**data)


@pytest.mark.asyncio
async def test_successful_login(mock_uow, hasher, token_issuer, existing_user):
    mock_uow.users.get_by_email.return_value = existing_user
    use_case = LoginUseCase(mock_uow, hasher, token_issuer)

    result = await use_case.execute(make_command())

    assert result.is_ok()
    data = result.value
    assert data.success is True
    assert data.user.id == str(existing_user.id)
    assert data.user.username == "acme_user"
    assert data.user.last_login is not None

    claim = token_issuer.verify(data.token)
    assert claim.user_id == existing_user.id
    assert claim.email == "user@acme.com"

    mock_uow.users.get_by_email.assert_called_once_with("user@acme.com")
    mock_uow.users.update.assert_called_once()
    record = mock_uow.login_records.create.call_args.args[0]
    assert record.user_id == existing_user.id
    assert record.success is True
    assert record.ip_address == "203.0.113.7"
    assert record.user_agent == "pytest-agent"


@pytest.mark.asyncio
async def test_login_wrong_password_records_failed_attempt(
    mock_uow, hasher, token_issuer, existing_user
):
    mock_uow.users.get_by_email.return_value = existing_user
    use_case = LoginUseCase(mock_uow, hasher, token_issuer)

    result = await use_case.execute(make_command(password="WrongPassword1"))

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.message == "Invalid email or password"

    mock_uow.users.update.assert_not_called()
    mock_uow.login_records.create.assert_called_once()
    record = mock_uow.login_records.create.call_args.args[0]
    assert record.user_id == existing_user.id
    assert record.success is False


@pytest.mark.asyncio
async def test_login_unknown_email_records_unknown_account(mock_uow, hasher, token_issuer):
    mock_uow.users.get_by_email.return_value = None
    use_case = LoginUseCase(mock_uow, hasher, token_issuer)

    result = await use_case.execute(make_command(email="nobody@acme.com"))

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.message == "Invalid email or password"

    mock_uow.login_records.create.assert_called_once()
    record = mock_uow.login_records.create.call_args.args[0]
    assert record.user_id is None
    assert record.success is False


@pytest.mark.asyncio
async def test_unknown_email_and_wrong_password_are_indistinguishable(
    mock_uow, hasher, token_issuer, existing_user
):
    use_case = LoginUseCase(mock_uow, hasher, token_issuer)

    mock_uow.users.get_by_email.return_value = None
    unknown = await use_case.execute(make_command(email="nobody@acme.com"))

    mock_uow.users.get_by_email.return_value = existing_user
    wrong = await use_case.execute(make_command(password="WrongPassword1"))

    assert unknown.error == wrong.error


@pytest.mark.asyncio
async def test_login_succeeds_when_audit_write_fails(
    mock_uow, hasher, token_issuer, existing_user
):
    mock_uow.users.get_by_email.return_value = existing_user
    mock_uow.login_records.create.side_effect = SQLAlchemyError("audit table locked")
    use_case = LoginUseCase(mock_uow, hasher, token_issuer)

    result = await use_case.execute(make_command())

    assert result.is_ok()
    assert result.value.token
    mock_uow.rollback.assert_called_once()


@pytest.mark.asyncio
async def test_failed_login_still_rejected_when_audit_write_fails(
    mock_uow, hasher, token_issuer
):
    mock_uow.users.get_by_email.return_value = None
    mock_uow.login_records.create.side_effect = SQLAlchemyError("audit table locked")
    use_case = LoginUseCase(mock_uow, hasher, token_issuer)

    result = await use_case.execute(make_command(email="nobody@acme.com"))

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
