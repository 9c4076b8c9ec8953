from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt
from pydantic import BaseModel

# Values that have shipped as defaults somewhere and must never sign real tokens
PLACEHOLDER_SECRETS = frozenset(
    {"fallback-secret", "dev-secret-key-change-in-production", "change-me"}
)


class ConfigurationError(Exception):
    """Raised at startup when a required setting is missing or unsafe"""


class InvalidToken(Exception):
    """Token is missing, malformed, tampered with or expired"""


class SessionClaim(BaseModel):
    """Decoded identity carried by a verified access token"""

    user_id: UUID
    email: str
    expires_at: datetime


class TokenIssuer:
    """
    Issues and verifies signed, time-bounded bearer tokens.

    Business Rules:
    - HS256 signed with a server-held secret
    - Tokens expire 7 days after issuance by default
    - Verification is binary: any failure raises InvalidToken
    - Stateless: no server-side record of issued tokens
    """

    def __init__(
        self,
        secret: str,
        lifetime: timedelta = timedelta(days=7),
        algorithm: str = "HS256",
    ):
        if not secret:
            raise ConfigurationError("JWT_SECRET is not configured")
        if secret in PLACEHOLDER_SECRETS:
            raise ConfigurationError("JWT_SECRET is set to a placeholder value")
        self._secret = secret
        self.lifetime = lifetime
        self.algorithm = algorithm

    def issue(self, user_id: UUID, email: str, now: Optional[datetime] = None) -> str:
        """
        Generate access token

        Args:
            user_id: User UUID
            email: User email
            now: Issuance instant (defaults to current UTC time)

        Returns:
            JWT token string
        """
        now = now or datetime.now(UTC)
        payload = {
            "user_id": str(user_id),
            "email": email,
            "exp": now + self.lifetime,
            "iat": now,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> SessionClaim:
        """
        Verify and decode token

        Raises:
            InvalidToken: bad signature, malformed payload or expired
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self.algorithm])
            return SessionClaim(
                user_id=UUID(payload["user_id"]),
                email=payload["email"],
                expires_at=datetime.fromtimestamp(payload["exp"], UTC),
            )
        except (JWTError, KeyError, TypeError, ValueError) as exc:
            raise InvalidToken("Invalid or expired token") from exc
