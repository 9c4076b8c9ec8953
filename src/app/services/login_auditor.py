"""
Login Auditor

Records login attempts and answers the activity queries built on them.
"""

import logging
from datetime import date, datetime, time, timedelta
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import LoginRecord

logger = logging.getLogger(__name__)

# Marks an attempt against an email that matches no account
UNKNOWN_ACCOUNT: Optional[UUID] = None

USER_AGENT_MAX_LENGTH = 512
IP_ADDRESS_MAX_LENGTH = 45


class LoginAuditor:
    """
    Append-only login attempt log.

    Must be used inside an open UnitOfWork context.

    Business Rules:
    - One record per attempt, success or failure
    - Writing a record is best-effort: store failures are logged and
      returned as an Error, never raised to the caller
    - Daily buckets use the UTC calendar date of the attempt
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def record_attempt(
        self,
        user_id: Optional[UUID],
        ip_address: Optional[str],
        user_agent: Optional[str],
        success: bool,
    ) -> Result[LoginRecord]:
        """
        Append one login record and commit it.

        Args:
            user_id: Account the attempt targeted, or UNKNOWN_ACCOUNT
            ip_address: Client address, if known
            user_agent: Client User-Agent header, if sent
            success: Whether the attempt authenticated

        Returns:
            Result with the stored record, or Error(AUDIT_WRITE_FAILED)
        """
        record = LoginRecord(
            user_id=user_id,
            ip_address=ip_address[:IP_ADDRESS_MAX_LENGTH] if ip_address else None,
            user_agent=user_agent[:USER_AGENT_MAX_LENGTH] if user_agent else None,
            success=success,
        )
        try:
            record = await self.uow.login_records.create(record)
            await self.uow.commit()
        except SQLAlchemyError as exc:
            logger.warning(
                f"Login audit write failed for user_id={user_id} success={success}: {exc}"
            )
            await self._discard()
            return Return.err(
                Error("AUDIT_WRITE_FAILED", "Login attempt could not be recorded")
            )
        return Return.ok(record)

    async def _discard(self) -> None:
        try:
            await self.uow.rollback()
        except SQLAlchemyError as exc:
            logger.warning(f"Rollback after failed login audit write also failed: {exc}")

    async def query_daily_counts(
        self, user_id: UUID, window_days: int = 30, today: Optional[date] = None
    ) -> List[Tuple[date, int]]:
        """
        Attempts per day over the trailing window ending today, inclusive.

        Returns exactly `window_days` (day, count) pairs in ascending order,
        with zero for days that have no attempts.
        """
        if window_days < 1:
            return []

        today = today or utcnow().date()
        first_day = today - timedelta(days=window_days - 1)
        since = datetime.combine(first_day, time.min)

        counts = await self.uow.login_records.count_by_day(user_id, since)

        return [
            (day, counts.get(day, 0))
            for day in (first_day + timedelta(days=offset) for offset in range(window_days))
        ]

    async def query_recent(self, user_id: UUID, limit: int = 10) -> List[LoginRecord]:
        """Most recent attempts for the account, newest first"""
        return await self.uow.login_records.get_recent(user_id, limit=limit)
