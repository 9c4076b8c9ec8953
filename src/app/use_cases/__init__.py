"""
Use Cases

Organized into domain folders:
- auth/: Registration and login
- users/: Current account profile
- audit/: Login activity (analytics and history)
"""

from .auth import LoginUseCase, RegisterUseCase
from .users import LoadProfileUseCase
from .audit import GetLoginAnalyticsUseCase, GetLoginHistoryUseCase

__all__ = [
    # Auth
    "RegisterUseCase",
    "LoginUseCase",
    # Users
    "LoadProfileUseCase",
    # Audit
    "GetLoginAnalyticsUseCase",
    "GetLoginHistoryUseCase",
]
