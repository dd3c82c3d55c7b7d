from datetime import datetime
from typing import Optional, Union

from usermanagement.domain.user.value_objects import Email, UserRole, UserStatus


class User:
    """
    User aggregate root.

    The identifier and the creation/update timestamps are assigned by the
    persistence layer when the user is first saved; a freshly created
    aggregate has ``id`` None until then.
    """

    def __init__(  # NOQA: PLR0913
        self,
        first_name: str,
        last_name: str,
        email: Union[str, Email],
        role: Union[str, UserRole],
        status: Union[str, UserStatus, None] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        city: Optional[str] = None,
        country: Optional[str] = None,
        postal_code: Optional[str] = None,
        bio: Optional[str] = None,
        avatar_url: Optional[str] = None,
        id: Optional[int] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        last_login_at: Optional[datetime] = None,
    ):
        self._id = id
        self._first_name = first_name
        self._last_name = last_name
        self._email = email if isinstance(email, Email) else Email(email)
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        if status is None:
            self._status = UserStatus.ACTIVE
        else:
            self._status = (
                status if isinstance(status, UserStatus) else UserStatus(status)
            )
        self._phone = phone
        self._address = address
        self._city = city
        self._country = country
        self._postal_code = postal_code
        self._bio = bio
        self._avatar_url = avatar_url
        self._created_at = created_at
        self._updated_at = updated_at
        self._last_login_at = last_login_at

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def is_persisted(self) -> bool:
        return self._id is not None

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def full_name(self) -> str:
        return f"{self._first_name} {self._last_name}"

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def status(self) -> UserStatus:
        return self._status

    @property
    def phone(self) -> Optional[str]:
        return self._phone

    @property
    def address(self) -> Optional[str]:
        return self._address

    @property
    def city(self) -> Optional[str]:
        return self._city

    @property
    def country(self) -> Optional[str]:
        return self._country

    @property
    def postal_code(self) -> Optional[str]:
        return self._postal_code

    @property
    def bio(self) -> Optional[str]:
        return self._bio

    @property
    def avatar_url(self) -> Optional[str]:
        return self._avatar_url

    @property
    def created_at(self) -> Optional[datetime]:
        return self._created_at

    @property
    def updated_at(self) -> Optional[datetime]:
        return self._updated_at

    @property
    def last_login_at(self) -> Optional[datetime]:
        return self._last_login_at

    def has_email(self, email: Union[str, Email]) -> bool:
        return self._email.matches(email)

    def update_details(  # NOQA: PLR0913
        self,
        first_name: str,
        last_name: str,
        email: Union[str, Email],
        role: UserRole,
        status: Optional[UserStatus] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        city: Optional[str] = None,
        country: Optional[str] = None,
        postal_code: Optional[str] = None,
        bio: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> None:
        # Every field is overwritten, including with None. Status is the
        # exception: omitting it keeps the current value.
        self._first_name = first_name
        self._last_name = last_name
        self._email = email if isinstance(email, Email) else Email(email)
        self._role = role
        if status is not None:
            self._status = status
        self._phone = phone
        self._address = address
        self._city = city
        self._country = country
        self._postal_code = postal_code
        self._bio = bio
        self._avatar_url = avatar_url

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        first_name: str,
        last_name: str,
        email: Union[str, Email],
        role: UserRole,
        status: Optional[UserStatus] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        city: Optional[str] = None,
        country: Optional[str] = None,
        postal_code: Optional[str] = None,
        bio: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> "User":
        return cls(
            first_name=first_name,
            last_name=last_name,
            email=email,
            role=role,
            status=status or UserStatus.ACTIVE,
            phone=phone,
            address=address,
            city=city,
            country=country,
            postal_code=postal_code,
            bio=bio,
            avatar_url=avatar_url,
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: int,
        first_name: str,
        last_name: str,
        email: Union[str, Email],
        role: Union[str, UserRole],
        status: Union[str, UserStatus],
        created_at: datetime,
        updated_at: datetime,
        phone: Optional[str] = None,
        address: Optional[str] = None,
        city: Optional[str] = None,
        country: Optional[str] = None,
        postal_code: Optional[str] = None,
        bio: Optional[str] = None,
        avatar_url: Optional[str] = None,
        last_login_at: Optional[datetime] = None,
    ) -> "User":
        return cls(
            id=id,
            first_name=first_name,
            last_name=last_name,
            email=email,
            role=role,
            status=status,
            phone=phone,
            address=address,
            city=city,
            country=country,
            postal_code=postal_code,
            bio=bio,
            avatar_url=avatar_url,
            created_at=created_at,
            updated_at=updated_at,
            last_login_at=last_login_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        if self._id is None:
            return id(self)
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
