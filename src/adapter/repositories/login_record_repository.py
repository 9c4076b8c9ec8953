from datetime import date, datetime
from typing import Dict, List
from uuid import UUID

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.login_record_repository import ILoginRecordRepository
from src.domain.entities import LoginRecord


class LoginRecordRepository(ILoginRecordRepository):
    """LoginRecord repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, record: LoginRecord) -> LoginRecord:
        """Append a login record (immutable)"""
        self.session.add(record)
        await self.session.flush()
        await self.session.refresh(record)
        return record

    async def count_by_day(self, user_id: UUID, since: datetime) -> Dict[date, int]:
        """
        Count a user's login attempts per calendar day.

        Timestamps are stored as naive UTC, so date() yields the UTC day.
        SQLite returns the day as an ISO string, other backends as a date.
        """
        day = func.date(LoginRecord.login_timestamp)
        stmt = (
            select(day, func.count(LoginRecord.id))
            .where(LoginRecord.user_id == user_id)
            .where(LoginRecord.login_timestamp >= since)
            .group_by(day)
        )
        result = await self.session.exec(stmt)

        counts: Dict[date, int] = {}
        for bucket, count in result.all():
            if isinstance(bucket, str):
                bucket = date.fromisoformat(bucket)
            elif isinstance(bucket, datetime):
                bucket = bucket.date()
            counts[bucket] = counts.get(bucket, 0) + count
        return counts

    async def get_recent(self, user_id: UUID, limit: int = 10) -> List[LoginRecord]:
        """Get a user's most recent login records, newest first"""
        stmt = (
            select(LoginRecord)
            .where(LoginRecord.user_id == user_id)
            .order_by(LoginRecord.login_timestamp.desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
