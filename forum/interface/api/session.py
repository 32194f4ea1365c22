"""Resolution of the authenticated user from the session cookie."""

from fastapi import HTTPException, status

from forum.application.usecase.auth import GetCurrentUserRequest, GetCurrentUserUseCase
from forum.application.usecase.user import UserInfo
from forum.domain.error import NotFoundError
from forum.util.jwt import JWTError


async def require_user(
    get_current_user_use_case: GetCurrentUserUseCase,
    auth_token: str | None,
    action: str,
) -> UserInfo:
    """Return the user behind ``auth_token`` or raise 401.

    Args:
        get_current_user_use_case: Get current user use case
        auth_token: JWT token from cookie
        action: What the caller is trying to do, used in the error message

    Raises:
        HTTPException: If the token is missing, invalid or names no user
    """
    if not auth_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )

    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication token",
        )
