from fastapi import APIRouter, Depends, status

from src.api.error import ClientError, ServerError
from src.api.utils.jwt import SessionClaim
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import ProfileResponse
from src.app.use_cases.users import LoadProfileUseCase
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(tags=["User"])


@router.get("/me", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def get_me(
    current_user: SessionClaim = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Load Current User

    Returns the public fields of the account named by the bearer token.

    Raises:
        - 401 Unauthorized: Missing, invalid or expired token
        - 404 Not Found: Account no longer exists
        - 500 Internal Server Error: Server error
    """
    use_case = LoadProfileUseCase(uow)
    result = await use_case.execute(current_user.user_id)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
