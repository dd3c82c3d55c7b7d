"""User lifecycle service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from usermanagement.application.dtos import (
    PageDTO,
    UserDTO,
    UserInputDTO,
    UserStatisticsDTO,
)
from usermanagement.domain.user import (
    DuplicateEmailError,
    User,
    UserCriteria,
    UserEvent,
    UserEventType,
    UserNotFoundError,
    UserRole,
    UserStatus,
)

if TYPE_CHECKING:
    from usermanagement.application.ports import UserEventPublisher
    from usermanagement.domain.shared import PageRequest
    from usermanagement.domain.user import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """
    Application service for the user lifecycle.

    Enforces the user invariants (unique email, default status, partial
    status update), delegates storage to the repository and emits a change
    event after every successful mutation.

    Event emission is fire-and-forget: the mutation result never depends
    on whether the event was delivered.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        event_publisher: UserEventPublisher,
    ):
        self._user_repo = user_repository
        self._event_publisher = event_publisher

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    async def create_user(self, request: UserInputDTO) -> UserDTO:
        logger.info("Creating user with email: %s", request.email)

        if await self._user_repo.exists_by_email(request.email):
            raise DuplicateEmailError(request.email)

        user = User.create(**request.field_values())
        saved = await self._user_repo.save(user)
        logger.info("User created successfully with id: %s", saved.id)

        self._emit(saved, UserEventType.USER_CREATED)
        return UserDTO.from_user(saved)

    async def update_user(self, user_id: int, request: UserInputDTO) -> UserDTO:
        logger.info("Updating user with id: %s", user_id)

        user = await self._get_user(user_id)

        if not user.has_email(request.email) and await self._user_repo.exists_by_email(
            request.email
        ):
            raise DuplicateEmailError(request.email)

        user.update_details(**request.field_values())
        saved = await self._user_repo.save(user)
        logger.info("User updated successfully with id: %s", saved.id)

        self._emit(saved, UserEventType.USER_UPDATED)
        return UserDTO.from_user(saved)

    async def delete_user(self, user_id: int) -> None:
        logger.info("Deleting user with id: %s", user_id)

        user = await self._get_user(user_id)
        await self._user_repo.delete(user_id)
        logger.info("User deleted successfully with id: %s", user_id)

        # Snapshot taken before deletion
        self._emit(user, UserEventType.USER_DELETED)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    async def get_user(self, user_id: int) -> UserDTO:
        logger.info("Fetching user with id: %s", user_id)
        return UserDTO.from_user(await self._get_user(user_id))

    async def list_users(self, page_request: PageRequest) -> PageDTO[UserDTO]:
        logger.info(
            "Fetching all users with pagination: page=%d, size=%d",
            page_request.page,
            page_request.size,
        )
        page = await self._user_repo.find_page(UserCriteria(), page_request)
        return PageDTO.from_page(page, UserDTO.from_user)

    async def search_users(
        self,
        term: str,
        page_request: PageRequest,
    ) -> PageDTO[UserDTO]:
        logger.info("Searching users with term: %s", term)
        page = await self._user_repo.search(term, page_request)
        return PageDTO.from_page(page, UserDTO.from_user)

    async def get_users_by_role(
        self,
        role: UserRole,
        page_request: PageRequest,
    ) -> PageDTO[UserDTO]:
        logger.info("Fetching users with role: %s", role.value)
        return await self._filtered_page(UserCriteria(role=role), page_request)

    async def get_users_by_status(
        self,
        status: UserStatus,
        page_request: PageRequest,
    ) -> PageDTO[UserDTO]:
        logger.info("Fetching users with status: %s", status.value)
        return await self._filtered_page(UserCriteria(status=status), page_request)

    async def get_users_by_role_and_status(
        self,
        role: UserRole,
        status: UserStatus,
        page_request: PageRequest,
    ) -> PageDTO[UserDTO]:
        logger.info(
            "Fetching users with role: %s and status: %s",
            role.value,
            status.value,
        )
        return await self._filtered_page(
            UserCriteria(role=role, status=status),
            page_request,
        )

    async def get_users_by_city(self, city: str) -> list[UserDTO]:
        logger.info("Fetching users from city: %s", city)
        users = await self._user_repo.find_all_matching(UserCriteria(city=city))
        return [UserDTO.from_user(u) for u in users]

    async def get_users_by_country(self, country: str) -> list[UserDTO]:
        logger.info("Fetching users from country: %s", country)
        users = await self._user_repo.find_all_matching(UserCriteria(country=country))
        return [UserDTO.from_user(u) for u in users]

    async def count_users_by_status(self, status: UserStatus) -> int:
        return await self._user_repo.count_by(UserCriteria(status=status))

    async def count_users_by_role(self, role: UserRole) -> int:
        return await self._user_repo.count_by(UserCriteria(role=role))

    async def get_statistics(self) -> UserStatisticsDTO:
        logger.info("Fetching user statistics")
        by_status = {s: await self.count_users_by_status(s) for s in UserStatus}
        by_role = {r: await self.count_users_by_role(r) for r in UserRole}
        return UserStatisticsDTO(by_status=by_status, by_role=by_role)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    async def _get_user(self, user_id: int) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def _filtered_page(
        self,
        criteria: UserCriteria,
        page_request: PageRequest,
    ) -> PageDTO[UserDTO]:
        page = await self._user_repo.find_page(criteria, page_request)
        return PageDTO.from_page(page, UserDTO.from_user)

    def _emit(self, user: User, event_type: UserEventType) -> None:
        try:
            self._event_publisher.publish(UserEvent.from_user(user, event_type))
        except Exception as e:
            logger.warning(
                "Failed to publish %s event for user %s: %s",
                event_type.value,
                user.id,
                e,
            )
