"""
Login Activity DTOs
"""

import datetime as dt
from typing import Optional

from src.app.use_cases.dto_base import CamelModel
from src.domain.entities import LoginRecord


class DailyLoginCount(CamelModel):
    """Attempts on one UTC calendar day"""

    date: dt.date
    count: int


class LoginRecordInfo(CamelModel):
    """One login attempt as shown in login history"""

    id: str
    user_id: Optional[str]
    login_timestamp: dt.datetime
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    country: Optional[str] = None
    city: Optional[str] = None
    device: Optional[str] = None
    browser: Optional[str] = None
    success: bool

    @classmethod
    def from_record(cls, record: LoginRecord) -> "LoginRecordInfo":
        return cls(
            id=str(record.id),
            user_id=str(record.user_id) if record.user_id else None,
            login_timestamp=record.login_timestamp,
            ip_address=record.ip_address,
            user_agent=record.user_agent,
            country=record.country,
            city=record.city,
            device=record.device,
            browser=record.browser,
            success=record.success,
        )
