from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from src.api.utils.jwt import ConfigurationError, InvalidToken, TokenIssuer


def test_issue_then_verify_round_trips_claim(token_issuer):
    user_id = uuid4()

    token = token_issuer.issue(user_id, "user@acme.com")
    claim = token_issuer.verify(token)

    assert claim.user_id == user_id
    assert claim.email == "user@acme.com"


def test_token_expires_seven_days_after_issuance(token_issuer):
    now = datetime.now(UTC).replace(microsecond=0)

    claim = token_issuer.verify(token_issuer.issue(uuid4(), "user@acme.com", now=now))

    assert claim.expires_at == now + timedelta(days=7)


def test_corrupted_signature_fails(token_issuer):
    token = token_issuer.issue(uuid4(), "user@acme.com")
    header_and_payload, signature = token.rsplit(".", 1)
    replacement = "A" if signature[0] != "A" else "B"

    with pytest.raises(InvalidToken):
        token_issuer.verify(f"{header_and_payload}.{replacement}{signature[1:]}")


def test_expired_token_fails(token_issuer):
    issued_at = datetime.now(UTC) - timedelta(days=8)
    token = token_issuer.issue(uuid4(), "user@acme.com", now=issued_at)

    with pytest.raises(InvalidToken):
        token_issuer.verify(token)


def test_token_signed_with_other_secret_fails(token_issuer):
    other = TokenIssuer("some-other-secret")
    token = other.issue(uuid4(), "user@acme.com")

    with pytest.raises(InvalidToken):
        token_issuer.verify(token)


def test_garbage_token_fails(token_issuer):
    with pytest.raises(InvalidToken):
        token_issuer.verify("invalid_token_here")


def test_token_without_identity_claims_fails(token_issuer):
    from jose import jwt

    token = jwt.encode(
        {"exp": datetime.now(UTC) + timedelta(minutes=5)},
        "unit-test-secret",
        algorithm="HS256",
    )

    with pytest.raises(InvalidToken):
        token_issuer.verify(token)


@pytest.mark.parametrize(
    "secret", ["", None, "fallback-secret", "dev-secret-key-change-in-production"]
)
def test_missing_or_placeholder_secret_is_rejected(secret):
    with pytest.raises(ConfigurationError):
        TokenIssuer(secret)
