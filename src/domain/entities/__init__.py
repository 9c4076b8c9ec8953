"""
Account Service Domain Entities

Each entity in its own file.
"""

from .user import User
from .login_record import LoginRecord

__all__ = [
    "User",
    "LoginRecord",
]
