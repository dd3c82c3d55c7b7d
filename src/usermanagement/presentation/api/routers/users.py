"""User management endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status

from usermanagement.domain.shared import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    PageRequest,
    SortDirection,
)
from usermanagement.domain.user import UserRole, UserStatus
from usermanagement.presentation.api.dependencies import UserServiceDep
from usermanagement.presentation.api.schemas import (
    ErrorResponse,
    UserPageResponse,
    UserRequest,
    UserResponse,
    UserSortField,
    UserStatsResponse,
)

logger = logging.getLogger(__name__)

MAX_PAGE_SIZE = 100

router = APIRouter(prefix="/users")


def get_page_request(
    page: int = Query(DEFAULT_PAGE, ge=0, description="Zero-based page index"),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    sort_by: UserSortField = Query(UserSortField.ID, description="Sort field"),
    sort_dir: str = Query("ASC", description="ASC or DESC"),
) -> PageRequest:
    return PageRequest(
        page=page,
        size=size,
        sort_by=sort_by.value,
        direction=SortDirection.parse(sort_dir),
    )


def get_simple_page_request(
    page: int = Query(DEFAULT_PAGE, ge=0, description="Zero-based page index"),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
) -> PageRequest:
    """Paging without a caller-chosen order (sorted by id)."""
    return PageRequest(page=page, size=size)


SortedPage = Annotated[PageRequest, Depends(get_page_request)]
SimplePage = Annotated[PageRequest, Depends(get_simple_page_request)]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    responses={
        201: {"description": "User created"},
        400: {"model": ErrorResponse, "description": "Invalid input"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def create_user(
    request: UserRequest,
    service: UserServiceDep,
) -> UserResponse:
    """Create a new user. Status defaults to ACTIVE when omitted."""
    user = await service.create_user(request.to_dto())
    return UserResponse.from_dto(user)


@router.get(
    "",
    summary="List users",
    responses={400: {"model": ErrorResponse, "description": "Invalid paging"}},
)
async def list_users(
    service: UserServiceDep,
    page_request: SortedPage,
) -> UserPageResponse:
    """List users page by page, ordered by ``sort_by`` / ``sort_dir``."""
    page = await service.list_users(page_request)
    return UserPageResponse.from_dto(page)


@router.get("/search", summary="Search users by name or email")
async def search_users(
    service: UserServiceDep,
    page_request: SortedPage,
    q: str = Query(..., description="Case-insensitive substring"),
) -> UserPageResponse:
    page = await service.search_users(q, page_request)
    return UserPageResponse.from_dto(page)


@router.get("/stats", summary="User counts per status and role")
async def get_user_stats(service: UserServiceDep) -> UserStatsResponse:
    stats = await service.get_statistics()
    return UserStatsResponse.from_dto(stats)


@router.get("/filter/role/{role}", summary="List users with a role")
async def get_users_by_role(
    role: UserRole,
    service: UserServiceDep,
    page_request: SimplePage,
) -> UserPageResponse:
    page = await service.get_users_by_role(role, page_request)
    return UserPageResponse.from_dto(page)


@router.get("/filter/status/{user_status}", summary="List users with a status")
async def get_users_by_status(
    user_status: UserStatus,
    service: UserServiceDep,
    page_request: SimplePage,
) -> UserPageResponse:
    page = await service.get_users_by_status(user_status, page_request)
    return UserPageResponse.from_dto(page)


@router.get(
    "/filter/role/{role}/status/{user_status}",
    summary="List users with a role and status",
)
async def get_users_by_role_and_status(
    role: UserRole,
    user_status: UserStatus,
    service: UserServiceDep,
    page_request: SimplePage,
) -> UserPageResponse:
    page = await service.get_users_by_role_and_status(role, user_status, page_request)
    return UserPageResponse.from_dto(page)


@router.get("/filter/city/{city}", summary="List all users in a city")
async def get_users_by_city(
    city: str,
    service: UserServiceDep,
) -> list[UserResponse]:
    users = await service.get_users_by_city(city)
    return [UserResponse.from_dto(u) for u in users]


@router.get("/filter/country/{country}", summary="List all users in a country")
async def get_users_by_country(
    country: str,
    service: UserServiceDep,
) -> list[UserResponse]:
    users = await service.get_users_by_country(country)
    return [UserResponse.from_dto(u) for u in users]


@router.get(
    "/{user_id}",
    summary="Get a user",
    responses={404: {"model": ErrorResponse, "description": "User not found"}},
)
async def get_user(user_id: int, service: UserServiceDep) -> UserResponse:
    user = await service.get_user(user_id)
    return UserResponse.from_dto(user)


@router.put(
    "/{user_id}",
    summary="Replace a user's details",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "User not found"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def update_user(
    user_id: int,
    request: UserRequest,
    service: UserServiceDep,
) -> UserResponse:
    """Overwrite all editable fields. An omitted status keeps the current one."""
    user = await service.update_user(user_id, request.to_dto())
    return UserResponse.from_dto(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
    responses={404: {"model": ErrorResponse, "description": "User not found"}},
)
async def delete_user(user_id: int, service: UserServiceDep) -> Response:
    await service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
