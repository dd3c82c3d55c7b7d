"""SQLAlchemy implementation of UserRepository."""

import logging
from datetime import datetime
from typing import Any, Optional, Union

from sqlalchemy import ColumnElement, Select, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from usermanagement.domain.shared import (
    Page,
    PageRequest,
    SortDirection,
    ValidationError,
    ensure_tz_aware,
    utc_now,
)
from usermanagement.domain.user import (
    DuplicateEmailError,
    Email,
    User,
    UserCriteria,
    UserNotFoundError,
    UserRepository,
)
from usermanagement.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)

# Public sort keys mapped to columns
SORTABLE_COLUMNS: dict[str, Any] = {
    "id": UserModel.id,
    "first_name": UserModel.first_name,
    "last_name": UserModel.last_name,
    "email": UserModel.email,
    "city": UserModel.city,
    "country": UserModel.country,
    "role": UserModel.role,
    "status": UserModel.status,
    "created_at": UserModel.created_at,
    "updated_at": UserModel.updated_at,
}


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    ``save`` and ``delete`` commit their own transaction so that each call
    is atomic and its effect is durable once it returns.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: int) -> Optional[User]:
        model = await self._find_model_by_id(user_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        email_value = email.normalized if isinstance(email, Email) else email
        stmt = select(UserModel).where(
            func.lower(UserModel.email) == email_value.strip().lower(),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        user = await self.find_by_email(email)
        return user is not None

    async def save(self, user: User) -> User:
        now = utc_now()

        try:
            if user.id is None:
                model = self._map_to_model(user, now)
                self._session.add(model)
                await self._session.flush()
                logger.info("Created user: %s (email: %s)", model.id, model.email)
            else:
                existing = await self._find_model_by_id(user.id)
                if existing is None:
                    raise UserNotFoundError(user.id)
                model = existing
                self._update_model(model, user, now)
                await self._session.flush()
                logger.debug("Updated user: %s", model.id)

            saved = self._map_to_domain(model)
            await self._session.commit()
        except IntegrityError as e:
            await self._session.rollback()
            # Handle unique constraint violation on email
            if "unique" in str(e).lower() or "duplicate" in str(e).lower():
                raise DuplicateEmailError(user.email) from e
            raise

        return saved

    async def delete(self, user_id: int) -> None:
        model = await self._find_model_by_id(user_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            await self._session.commit()
            logger.info("Deleted user: %s", user_id)

    async def find_page(
        self,
        criteria: UserCriteria,
        page_request: PageRequest,
    ) -> Page[User]:
        return await self._fetch_page(self._criteria_clauses(criteria), page_request)

    async def search(self, term: str, page_request: PageRequest) -> Page[User]:
        needle = term.lower()
        clause = or_(
            func.lower(UserModel.first_name).contains(needle, autoescape=True),
            func.lower(UserModel.last_name).contains(needle, autoescape=True),
            func.lower(UserModel.email).contains(needle, autoescape=True),
        )
        return await self._fetch_page([clause], page_request)

    async def count_by(self, criteria: UserCriteria) -> int:
        return await self._count(self._criteria_clauses(criteria))

    async def find_all_matching(self, criteria: UserCriteria) -> list[User]:
        stmt = self._where(select(UserModel), self._criteria_clauses(criteria))
        result = await self._session.execute(stmt.order_by(UserModel.id.asc()))
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def _find_model_by_id(self, user_id: int) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _fetch_page(
        self,
        clauses: list[ColumnElement[bool]],
        page_request: PageRequest,
    ) -> Page[User]:
        # count(*) over () returns the total next to every row, so content
        # and total come from one statement
        total_count = func.count().over().label("total_count")
        stmt = (
            self._where(select(UserModel, total_count), clauses)
            .order_by(*self._ordering(page_request))
            .offset(page_request.offset)
            .limit(page_request.size)
        )
        result = await self._session.execute(stmt)
        rows = result.all()

        if rows:
            total = int(rows[0][1])
        else:
            # Requested page is past the end (or nothing matches)
            total = await self._count(clauses)

        content = [self._map_to_domain(row[0]) for row in rows]
        return Page.of(content, page_request, total)

    async def _count(self, clauses: list[ColumnElement[bool]]) -> int:
        stmt = self._where(select(func.count()).select_from(UserModel), clauses)
        result = await self._session.execute(stmt)
        return int(result.scalar_one())

    @staticmethod
    def _where(stmt: Select, clauses: list[ColumnElement[bool]]) -> Select:
        if clauses:
            stmt = stmt.where(*clauses)
        return stmt

    @staticmethod
    def _criteria_clauses(criteria: UserCriteria) -> list[ColumnElement[bool]]:
        clauses: list[ColumnElement[bool]] = []
        if criteria.is_empty:
            return clauses
        if criteria.role is not None:
            clauses.append(UserModel.role == criteria.role)
        if criteria.status is not None:
            clauses.append(UserModel.status == criteria.status)
        if criteria.city is not None:
            clauses.append(UserModel.city == criteria.city)
        if criteria.country is not None:
            clauses.append(UserModel.country == criteria.country)
        return clauses

    @staticmethod
    def _ordering(page_request: PageRequest) -> list[Any]:
        column = SORTABLE_COLUMNS.get(page_request.sort_by)
        if column is None:
            msg = f"Unsupported sort field: {page_request.sort_by}"
            raise ValidationError(msg, details={"sort_by": page_request.sort_by})

        primary = (
            column.desc()
            if page_request.direction == SortDirection.DESC
            else column.asc()
        )
        if column is UserModel.id:
            return [primary]
        # Tie-breaker keeps page boundaries stable
        return [primary, UserModel.id.asc()]

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            role=model.role,
            status=model.status,
            phone=model.phone,
            address=model.address,
            city=model.city,
            country=model.country,
            postal_code=model.postal_code,
            bio=model.bio,
            avatar_url=model.avatar_url,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
            last_login_at=(
                ensure_tz_aware(model.last_login_at) if model.last_login_at else None
            ),
        )

    def _map_to_model(self, user: User, now: datetime) -> UserModel:
        return UserModel(
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            phone=user.phone,
            address=user.address,
            city=user.city,
            country=user.country,
            postal_code=user.postal_code,
            role=user.role,
            status=user.status,
            bio=user.bio,
            avatar_url=user.avatar_url,
            created_at=now,
            updated_at=now,
            last_login_at=user.last_login_at,
        )

    def _update_model(self, model: UserModel, user: User, now: datetime) -> None:
        # id, created_at and last_login_at never change here
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.email = user.email
        model.phone = user.phone
        model.address = user.address
        model.city = user.city
        model.country = user.country
        model.postal_code = user.postal_code
        model.role = user.role
        model.status = user.status
        model.bio = user.bio
        model.avatar_url = user.avatar_url
        model.updated_at = now
