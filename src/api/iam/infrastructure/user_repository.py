"""PostgreSQL implementation of IUserRepository."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from iam.domain.aggregates import User
from iam.domain.value_objects import Role, UserId
from iam.infrastructure.models import UserModel
from iam.infrastructure.observability import (
    DefaultUserRepositoryProbe,
    UserRepositoryProbe,
)
from iam.ports.repositories import IUserRepository


class UserRepository(IUserRepository):
    """PostgreSQL-backed repository for User aggregates.

    Runs inside the caller's transaction; only flushes, never commits.
    """

    def __init__(
        self, session: AsyncSession, probe: UserRepositoryProbe | None = None
    ) -> None:
        self._session = session
        self._probe = probe or DefaultUserRepositoryProbe()

    async def save(self, user: User) -> None:
        """Insert a new user or update the existing row.

        The provider subject id is fixed at insert and never rewritten.
        """
        model = await self._session.get(UserModel, user.id.value)

        created = model is None
        if model is None:
            model = UserModel(id=user.id.value, external_id=user.external_id)
            self._session.add(model)

        model.email = user.email
        model.name = user.name
        model.role = user.role.value
        model.phone = user.phone
        model.address = user.address

        await self._session.flush()
        self._probe.user_saved(user.id.value, created=created)

    async def get_by_id(self, user_id: UserId) -> User | None:
        return await self._find_one(UserModel.id, user_id.value, lookup="id")

    async def get_by_external_id(self, external_id: str) -> User | None:
        return await self._find_one(
            UserModel.external_id, external_id, lookup="external_id"
        )

    async def _find_one(self, column, value: str, lookup: str) -> User | None:
        result = await self._session.execute(select(UserModel).where(column == value))
        model = result.scalar_one_or_none()
        if model is None:
            self._probe.user_not_found(lookup, value)
            return None
        self._probe.user_retrieved(model.id)
        return self._to_domain(model)

    async def list_page(self, offset: int, limit: int) -> list[User]:
        stmt = (
            select(UserModel)
            .order_by(UserModel.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def count(self) -> int:
        result = await self._session.execute(select(func.count(UserModel.id)))
        return int(result.scalar_one())

    @staticmethod
    def _to_domain(model: UserModel) -> User:
        return User(
            id=UserId(value=model.id),
            external_id=model.external_id,
            email=model.email,
            name=model.name,
            role=Role(model.role),
            phone=model.phone,
            address=model.address,
            created_at=model.created_at,
        )
