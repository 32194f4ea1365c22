"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from forum.application.usecase.user import (
    CreateUserRequest,
    CreateUserUseCase,
    GetUserRequest,
    GetUserUseCase,
    ListUsersResponse,
    ListUsersUseCase,
    UserInfo,
)
from forum.domain.error import DomainError
from forum.interface.error import to_http_exception

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("", response_model=ListUsersResponse)
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
) -> ListUsersResponse:
    """List all users, ordered by username."""
    try:
        return await list_users_use_case.execute()
    except DomainError as e:
        raise to_http_exception(e, "User listing")


@router.post("", response_model=UserInfo, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: CreateUserRequest,
    create_user_use_case: FromDishka[CreateUserUseCase],
) -> UserInfo:
    """Register a new user.

    The password is hashed before it is stored and never returned.

    Raises:
        HTTPException: 409 if the ID, username or email is taken
    """
    try:
        return await create_user_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e, "User registration")


@router.get("/{user_id}", response_model=UserInfo)
async def get_user(
    user_id: str,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> UserInfo:
    """Get a user by ID.

    Raises:
        HTTPException: If user not found
    """
    try:
        user = await get_user_use_case.execute(GetUserRequest(user_id=user_id))
    except DomainError as e:
        raise to_http_exception(e, "User lookup")

    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User '{user_id}' not found",
        )
    return user
