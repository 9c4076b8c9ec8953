import logging

from sqlalchemy.exc import IntegrityError

from libs.result import Error, Result, Return
from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from .register_dto import RegisterCommand, RegisteredUser, RegisterResponse

logger = logging.getLogger(__name__)

EMAIL_CONFLICT = Error("EMAIL_ALREADY_EXISTS", "Email already registered")
USERNAME_CONFLICT = Error("USERNAME_ALREADY_TAKEN", "Username already taken")


class RegisterUseCase:
    """
    Register Use Case

    Command/Response Pattern:
    - Input: RegisterCommand (validated business intent)
    - Output: Result[RegisterResponse] (structured response)

    Business Logic:
    1. Check whether email or username is already taken
    2. Hash password with bcrypt
    3. Create User and commit
    4. Unique constraint violations at commit (concurrent registration)
       map to the same conflict errors as step 1
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(self, command: RegisterCommand) -> Result[RegisterResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with validated username, email, password

        Returns:
            Result[RegisterResponse] with public account fields,
            or Error(EMAIL_ALREADY_EXISTS / USERNAME_ALREADY_TAKEN)
        """
        async with self.uow:
            conflict = await self._find_conflict(command)
            if conflict:
                return Return.err(conflict)

            user = User(
                username=command.username,
                email=command.email,
                password_hash=self.hasher.hash(command.password),
            )

            try:
                user = await self.uow.users.create(user)
                await self.uow.commit()
            except IntegrityError:
                await self.uow.rollback()
                logger.info(f"Registration race lost for {command.email}")
                conflict = await self._find_conflict(command)
                return Return.err(conflict or EMAIL_CONFLICT)

            return Return.ok(
                RegisterResponse(
                    user_id=str(user.id),
                    user=RegisteredUser(
                        username=user.username,
                        email=user.email,
                        created_at=user.created_at,
                    ),
                )
            )

    async def _find_conflict(self, command: RegisterCommand):
        existing = await self.uow.users.get_by_email_or_username(
            command.email, command.username
        )
        if existing is None:
            return None
        if existing.email == command.email:
            return EMAIL_CONFLICT
        return USERNAME_CONFLICT
