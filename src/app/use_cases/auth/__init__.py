"""
Authentication Use Cases

Register and login flows plus their DTOs.
"""

from .dtos import LoginCommand, LoginResponse, ProfileResponse, UserInfo
from .login_use_case import LoginUseCase
from .register_dto import RegisterCommand, RegisteredUser, RegisterResponse
from .register_use_case import RegisterUseCase

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    # Commands
    "RegisterCommand",
    "LoginCommand",
    # Responses
    "RegisterResponse",
    "RegisteredUser",
    "LoginResponse",
    "ProfileResponse",
    "UserInfo",
]
