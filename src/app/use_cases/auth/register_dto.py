"""
Register Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- RegisterCommand: Input to use case (validated business intent)
- RegisterResponse: Output from use case (structured result)
"""

from datetime import datetime

from pydantic import BaseModel

from src.app.use_cases.dto_base import CamelModel


class RegisterCommand(BaseModel):
    """
    Register command - represents validated registration intent

    Created by API layer after request validation passes.
    Contains only business-relevant data (no HTTP concerns).
    """

    username: str
    email: str
    password: str


class RegisteredUser(CamelModel):
    """Public account fields in register response"""

    username: str
    email: str
    created_at: datetime


class RegisterResponse(CamelModel):
    """
    Register response - structured output from use case

    Never carries the password hash.
    """

    success: bool = True
    user_id: str
    user: RegisteredUser
