"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union

from usermanagement.domain.shared.pagination import Page, PageRequest
from usermanagement.domain.user.aggregates.user import User
from usermanagement.domain.user.value_objects import Email, UserCriteria


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Every method is atomic with respect to the user it targets. The
    repository, not the caller, assigns identifiers and timestamps.
    """

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """
        Find a user by their ID.

        Parameters
        ----------
        user_id
            The user's unique identifier

        Returns
        -------
        User if found, None otherwise
        """

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """
        Find a user by their email address (case-insensitive).

        Parameters
        ----------
        email
            The user's email address (string or Email value object)

        Returns
        -------
        User if found, None otherwise
        """

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """
        Check if a user exists with the given email (case-insensitive).

        Parameters
        ----------
        email
            The email address to check

        Returns
        -------
        True if user exists, False otherwise
        """

    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Insert or update a user and commit.

        On insert the identifier and both timestamps are assigned; on update
        only the update timestamp is refreshed.

        Parameters
        ----------
        user
            The user to save

        Returns
        -------
        The persisted user, carrying identifier and timestamps

        Raises
        ------
        DuplicateEmailError
            If the store rejects the email as already in use
        """

    @abstractmethod
    async def delete(self, user_id: int) -> None:
        """
        Delete a user by ID and commit. Missing users are ignored.

        Parameters
        ----------
        user_id
            The user's unique identifier
        """

    @abstractmethod
    async def find_page(
        self,
        criteria: UserCriteria,
        page_request: PageRequest,
    ) -> Page[User]:
        """
        Return one page of users matching the criteria.

        Content and total count are computed against the same query.
        """

    @abstractmethod
    async def search(self, term: str, page_request: PageRequest) -> Page[User]:
        """
        Return users whose first name, last name or email contains ``term``
        as a case-insensitive substring.
        """

    @abstractmethod
    async def count_by(self, criteria: UserCriteria) -> int:
        """Count users matching the criteria."""

    @abstractmethod
    async def find_all_matching(self, criteria: UserCriteria) -> list[User]:
        """Return every user matching the criteria, ordered by ID."""
