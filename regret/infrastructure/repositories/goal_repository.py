from __future__ import annotations

import uuid

from sqlalchemy import select

from regret.domain.interfaces.repositories import IGoalRepository
from regret.infrastructure.repositories.base import SQLRepository
from regret.models.goal import Goal


class SQLGoalRepository(SQLRepository, IGoalRepository):
    async def get(self, goal_id: uuid.UUID, *, owner_id: uuid.UUID) -> Goal | None:
        res = await self._session.execute(select(Goal).where(Goal.id == goal_id, Goal.owner_id == owner_id))
        return res.scalar_one_or_none()

    async def list_for_owner(self, owner_id: uuid.UUID) -> list[Goal]:
        res = await self._session.execute(
            select(Goal).where(Goal.owner_id == owner_id).order_by(Goal.target_date.asc(), Goal.created_at.asc())
        )
        return list(res.scalars().all())

    async def add(self, goal: Goal) -> Goal:
        self._session.add(goal)
        await self._session.flush()
        return goal

    async def delete(self, goal: Goal) -> None:
        await self._session.delete(goal)
        await self._session.flush()
