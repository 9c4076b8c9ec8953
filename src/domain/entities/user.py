"""
User Entity

Represents a registered account.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class User(SQLModel, table=True):
    """
    User entity - a registered account.

    Business Rules:
    - Username and email are each unique across all users (enforced by the store)
    - Password stored as bcrypt hash, never plaintext
    - last_login stays null until the first successful login
    - id, username and email never change after registration
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=50)
    email: str = Field(unique=True, index=True, max_length=100)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    last_login: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
