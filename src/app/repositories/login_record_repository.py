from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Dict, List
from uuid import UUID

from src.domain.entities import LoginRecord


class ILoginRecordRepository(ABC):
    """LoginRecord repository interface - application layer"""

    @abstractmethod
    async def create(self, record: LoginRecord) -> LoginRecord:
        """Append a login record (immutable)"""
        pass

    @abstractmethod
    async def count_by_day(self, user_id: UUID, since: datetime) -> Dict[date, int]:
        """
        Count a user's login attempts per UTC calendar day.

        Returns:
            Mapping of day -> attempt count for records at or after `since`.
            Days without attempts are absent.
        """
        pass

    @abstractmethod
    async def get_recent(self, user_id: UUID, limit: int = 10) -> List[LoginRecord]:
        """Get a user's most recent login records, newest first"""
        pass
