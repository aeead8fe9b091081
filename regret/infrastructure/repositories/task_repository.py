from __future__ import annotations

import uuid

from sqlalchemy import select

from regret.domain.interfaces.repositories import ITaskRepository
from regret.infrastructure.repositories.base import SQLRepository
from regret.models.task import Task


class SQLTaskRepository(SQLRepository, ITaskRepository):
    async def get(self, task_id: uuid.UUID, *, owner_id: uuid.UUID) -> Task | None:
        res = await self._session.execute(select(Task).where(Task.id == task_id, Task.owner_id == owner_id))
        return res.scalar_one_or_none()

    async def list_for_owner(self, owner_id: uuid.UUID) -> list[Task]:
        res = await self._session.execute(
            select(Task)
            .where(Task.owner_id == owner_id)
            .order_by(Task.completed.asc(), Task.schedule_date.asc(), Task.created_at.asc())
        )
        return list(res.scalars().all())

    async def add(self, task: Task) -> Task:
        self._session.add(task)
        await self._session.flush()
        return task

    async def delete(self, task: Task) -> None:
        await self._session.delete(task)
        await self._session.flush()
