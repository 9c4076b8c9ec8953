"""
Load Profile Use Case

Loads the current account from the token claim.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import ProfileResponse, UserInfo


class LoadProfileUseCase:
    """
    Use case for loading the authenticated account's public fields.

    Business Rules:
    - Token claim provides user_id
    - User must still exist
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[ProfileResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            return Return.ok(ProfileResponse(user=UserInfo.from_user(user)))
