"""
Authentication Use Case DTOs (Data Transfer Objects)

Login command and the public account views returned by auth use cases.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from src.app.use_cases.dto_base import CamelModel
from src.domain.entities import User


# ============================================================================
# Command DTOs
# ============================================================================


class LoginCommand(BaseModel):
    """Validated login intent plus the request context that gets audited"""

    email: str
    password: str
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(CamelModel):
    """Public account fields; never includes the password hash"""

    id: str
    username: str
    email: str
    created_at: datetime
    last_login: Optional[datetime] = None

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            username=user.username,
            email=user.email,
            created_at=user.created_at,
            last_login=user.last_login,
        )


class LoginResponse(CamelModel):
    """Response for user login use case"""

    success: bool = True
    token: str
    user: UserInfo


class ProfileResponse(CamelModel):
    """Response for load profile use case"""

    success: bool = True
    user: UserInfo
