import re

from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel, EmailStr, Field, field_validator

from src.api.error import ClientError, ServerError
from src.api.utils.jwt import TokenIssuer
from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    LoginCommand,
    LoginResponse,
    LoginUseCase,
    RegisterCommand,
    RegisterResponse,
    RegisterUseCase,
)
from src.depends import (
    get_client_ip,
    get_password_hasher,
    get_token_issuer,
    get_unit_of_work,
)

router = APIRouter(tags=["Authentication"])

USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_]+$")
EMAIL_MAX_LENGTH = 100


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    API layer responsibility: HTTP validation and serialization.
    """

    username: str = Field(..., min_length=3, max_length=50, description="Public handle")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=8, max_length=100, description="User password")

    @field_validator("username")
    @classmethod
    def username_charset(cls, value: str) -> str:
        if not USERNAME_PATTERN.match(value):
            raise ValueError("Username can only contain letters, numbers, and underscores")
        return value

    @field_validator("email")
    @classmethod
    def email_length(cls, value: str) -> str:
        if len(value) > EMAIL_MAX_LENGTH:
            raise ValueError("Email must be less than 100 characters")
        return value

    @field_validator("password")
    @classmethod
    def password_strength(cls, value: str) -> str:
        if not (
            any(c.islower() for c in value)
            and any(c.isupper() for c in value)
            and any(c.isdigit() for c in value)
        ):
            raise ValueError(
                "Password must contain at least one lowercase letter, "
                "one uppercase letter, and one number"
            )
        return value


@router.post("/register", status_code=status.HTTP_200_OK, response_model=RegisterResponse)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    User Registration

    Creates a new account and returns its public fields.

    Raises:
        - 400 Bad Request: Invalid input, or email/username already in use
        - 500 Internal Server Error: Server error
    """
    command = RegisterCommand(
        username=request.username, email=request.email, password=request.password
    )

    use_case = RegisterUseCase(uow, hasher)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "EMAIL_ALREADY_EXISTS":
            raise ClientError(error, errors=[{"field": "email", "message": error.message}])
        elif error.code == "USERNAME_ALREADY_TAKEN":
            raise ClientError(error, errors=[{"field": "username", "message": error.message}])
        raise ServerError(error)

    return result.value


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    Validates incoming login request.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    http_request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: PasswordHasher = Depends(get_password_hasher),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
):
    """
    User Login

    Authenticates the user, records the attempt and returns a bearer token.

    Raises:
        - 400 Bad Request: Invalid input or invalid credentials (one message for
          unknown email and wrong password)
        - 500 Internal Server Error: Server error
    """
    command = LoginCommand(
        email=request.email,
        password=request.password,
        ip_address=get_client_ip(http_request),
        user_agent=http_request.headers.get("user-agent"),
    )

    use_case = LoginUseCase(uow, hasher, token_issuer)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value
