import ipaddress
from typing import Optional

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.jwt import InvalidToken, SessionClaim, TokenIssuer
from src.app.services.password_hasher import PasswordHasher

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_token_issuer(request: Request) -> TokenIssuer:
    """TokenIssuer built from configuration at application startup"""
    return request.app.state.token_issuer


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
) -> SessionClaim:
    """
    Dependency to extract and verify the bearer token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header (None if absent)
        token_issuer: Verifier configured at startup

    Returns:
        Decoded SessionClaim containing user_id and email

    Raises:
        ClientError: 401 if the header is missing or the token is invalid or expired
    """
    if credentials is None:
        raise ClientError(
            Error("INVALID_TOKEN", "Authorization token required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    try:
        return token_issuer.verify(credentials.credentials)
    except InvalidToken:
        raise ClientError(
            Error("INVALID_TOKEN", "Invalid or expired token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )


def _valid_ip(candidate: Optional[str]) -> Optional[str]:
    if not candidate:
        return None
    candidate = candidate.strip()
    try:
        return str(ipaddress.ip_address(candidate))
    except ValueError:
        return None


def get_client_ip(request: Request) -> Optional[str]:
    """First X-Forwarded-For hop, then X-Real-IP, then the socket peer.

    Header values that are not IP addresses are skipped.
    """
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        first_hop = _valid_ip(forwarded_for.split(",")[0])
        if first_hop:
            return first_hop
    real_ip = _valid_ip(request.headers.get("x-real-ip"))
    if real_ip:
        return real_ip
    if request.client:
        return _valid_ip(request.client.host)
    return None
