"""
Get Login Analytics Use Case

Daily login attempt counts for the authenticated account.
"""

from datetime import date
from typing import List, Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.login_auditor import LoginAuditor
from src.app.services.unit_of_work import UnitOfWork
from .dtos import DailyLoginCount


class GetLoginAnalyticsUseCase:
    """
    Use case for the login activity chart.

    Business Rules:
    - Exactly `days` entries, oldest first, the last one being today (UTC)
    - Days without attempts report 0
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, days: int = 30, today: Optional[date] = None
    ) -> Result[List[DailyLoginCount]]:
        async with self.uow:
            auditor = LoginAuditor(self.uow)
            buckets = await auditor.query_daily_counts(user_id, window_days=days, today=today)
            return Return.ok(
                [DailyLoginCount(date=day, count=count) for day, count in buckets]
            )
