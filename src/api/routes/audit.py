"""
Login Activity API Routes

Daily login analytics and recent login history for the current user.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from src.api.error import ServerError
from src.api.utils.jwt import SessionClaim
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit import (
    DailyLoginCount,
    GetLoginAnalyticsUseCase,
    GetLoginHistoryUseCase,
    LoginRecordInfo,
)
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(tags=["Login Activity"])

ANALYTICS_WINDOW_DAYS = 30
HISTORY_LIMIT = 10


@router.get(
    "/analytics/logins",
    status_code=status.HTTP_200_OK,
    response_model=List[DailyLoginCount],
)
async def get_login_analytics(
    current_user: SessionClaim = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Login Analytics

    Returns one {date, count} entry per day for the last 30 days
    (today included), oldest first, zero-filled.

    Raises:
        - 401 Unauthorized: Missing, invalid or expired token
    """
    use_case = GetLoginAnalyticsUseCase(uow)
    result = await use_case.execute(current_user.user_id, days=ANALYTICS_WINDOW_DAYS)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.get(
    "/login-history",
    status_code=status.HTTP_200_OK,
    response_model=List[LoginRecordInfo],
)
async def get_login_history(
    current_user: SessionClaim = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Login History

    Returns the 10 most recent login attempts, newest first.

    Raises:
        - 401 Unauthorized: Missing, invalid or expired token
    """
    use_case = GetLoginHistoryUseCase(uow)
    result = await use_case.execute(current_user.user_id, limit=HISTORY_LIMIT)

    if result.is_err():
        raise ServerError(result.error)

    return result.value
