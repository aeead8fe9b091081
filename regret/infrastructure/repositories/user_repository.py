from __future__ import annotations

from sqlalchemy import select

from regret.domain.interfaces.repositories import IUserRepository
from regret.infrastructure.repositories.base import SQLRepository
from regret.models.user import User


class SQLUserRepository(SQLRepository, IUserRepository):
    async def get_by_username(self, username: str) -> User | None:
        res = await self._session.execute(select(User).where(User.username == username))
        return res.scalar_one_or_none()

    async def add(self, user: User) -> User:
        self._session.add(user)
        await self._session.flush()
        return user
