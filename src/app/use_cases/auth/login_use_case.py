"""
Login Use Case

Authenticates a user, records the attempt and issues an access token.
"""

import logging

from libs.result import Error, Result, Return
from src.api.utils.jwt import TokenIssuer
from src.app.services.login_auditor import UNKNOWN_ACCOUNT, LoginAuditor
from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from .dtos import LoginCommand, LoginResponse, UserInfo

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid email or password")


class LoginUseCase:
    """
    Use case for user login and token issuance.

    Business Rules:
    - Unknown email and wrong password return the identical error
    - Unknown email still pays for one bcrypt check (timing)
    - Every attempt is audited; unknown emails are recorded with no account
    - Audit writes are best-effort and never fail the login
    - Successful login updates user.last_login
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher, token_issuer: TokenIssuer):
        self.uow = uow
        self.hasher = hasher
        self.token_issuer = token_issuer
        self.auditor = LoginAuditor(uow)

    async def execute(self, command: LoginCommand) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            command: LoginCommand with credentials and request context

        Returns:
            Result with LoginResponse containing token and public user fields,
            or Error(INVALID_CREDENTIALS)
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(command.email)

            if user is None:
                self.hasher.verify_dummy(command.password)
                await self._audit(UNKNOWN_ACCOUNT, command, success=False)
                return Return.err(INVALID_CREDENTIALS)

            user_id = user.id

            if not self.hasher.verify(command.password, user.password_hash):
                await self._audit(user_id, command, success=False)
                return Return.err(INVALID_CREDENTIALS)

            user.last_login = utcnow()
            user = await self.uow.users.update(user)
            await self.uow.commit()

            # Build the response before auditing: a failed audit rolls back
            # the session and expires loaded instances
            response = LoginResponse(
                token=self.token_issuer.issue(user.id, user.email),
                user=UserInfo.from_user(user),
            )

            await self._audit(user_id, command, success=True)

            return Return.ok(response)

    async def _audit(self, user_id, command: LoginCommand, success: bool) -> None:
        result = await self.auditor.record_attempt(
            user_id,
            ip_address=command.ip_address,
            user_agent=command.user_agent,
            success=success,
        )
        if result.is_err():
            logger.info(f"Login continued without audit record: {result.error.code}")
