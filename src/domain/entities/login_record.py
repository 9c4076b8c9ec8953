"""
LoginRecord Entity

Append-only log of login attempts.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow


class LoginRecord(SQLModel, table=True):
    """
    LoginRecord entity - one row per login attempt, successful or not.

    Business Rules:
    - Immutable (never updated or deleted)
    - user_id is None for attempts against an unknown email
    - login_timestamp is UTC; daily analytics bucket on its calendar date
    - country, city, device and browser are reserved for a future
      enrichment step and are currently always None
    """

    __tablename__ = "login_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: Optional[UUID] = Field(default=None, foreign_key="users.id")

    login_timestamp: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, nullable=False)
    )
    ip_address: Optional[str] = Field(default=None, max_length=45)
    user_agent: Optional[str] = Field(default=None, max_length=512)

    country: Optional[str] = Field(default=None, max_length=100)
    city: Optional[str] = Field(default=None, max_length=100)
    device: Optional[str] = Field(default=None, max_length=100)
    browser: Optional[str] = Field(default=None, max_length=100)

    success: bool = Field(default=False)

    __table_args__ = (
        Index("idx_login_logs_user_timestamp", "user_id", "login_timestamp"),
    )
