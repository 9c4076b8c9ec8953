"""
Login Activity Use Cases
"""

from .dtos import DailyLoginCount, LoginRecordInfo
from .get_login_analytics_use_case import GetLoginAnalyticsUseCase
from .get_login_history_use_case import GetLoginHistoryUseCase

__all__ = [
    "GetLoginAnalyticsUseCase",
    "GetLoginHistoryUseCase",
    "DailyLoginCount",
    "LoginRecordInfo",
]
