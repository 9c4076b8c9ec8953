"""
Get Login History Use Case
"""

from typing import List
from uuid import UUID

from libs.result import Result, Return
from src.app.services.login_auditor import LoginAuditor
from src.app.services.unit_of_work import UnitOfWork
from .dtos import LoginRecordInfo


class GetLoginHistoryUseCase:
    """Most recent login attempts for the authenticated account, newest first."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, limit: int = 10) -> Result[List[LoginRecordInfo]]:
        async with self.uow:
            auditor = LoginAuditor(self.uow)
            records = await auditor.query_recent(user_id, limit=limit)
            return Return.ok([LoginRecordInfo.from_record(r) for r in records])
