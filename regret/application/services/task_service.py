from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable

from regret.core.errors import NotFound
from regret.core.logging import log
from regret.domain import task_completion
from regret.domain.interfaces.repositories import ITaskRepository
from regret.domain.task_completion import ToggleRequest
from regret.domain.types import Priority
from regret.models.task import SubTask, Task

GoalResync = Callable[[uuid.UUID, uuid.UUID], Awaitable[Any]]


class TaskService:
    """Task CRUD plus completion propagation between a task and its sub-tasks.

    Whenever a linked task is created, deleted or flips completion, ``goal_resync``
    is invoked for the linked goal after the task change is committed. Task state
    does not feed goal progress; the call only lets the goal repair drift. It is
    best-effort: failures are logged and never undo the task change.
    """

    def __init__(self, repo: ITaskRepository, goal_resync: GoalResync | None = None) -> None:
        self._repo = repo
        self._goal_resync = goal_resync

    async def get_task(self, task_id: uuid.UUID, owner_id: uuid.UUID) -> Task:
        task = await self._repo.get(task_id, owner_id=owner_id)
        if not task:
            raise NotFound("Task not found or unauthorized.")
        return task

    async def list_tasks(self, owner_id: uuid.UUID) -> list[Task]:
        return list(await self._repo.list_for_owner(owner_id))

    async def create_task(self, owner_id: uuid.UUID, data: dict[str, Any]) -> Task:
        now = datetime.now(timezone.utc)
        task = Task(
            owner_id=owner_id,
            title=data["title"],
            description=data.get("description") or "",
            schedule_date=data["schedule_date"],
            priority=data.get("priority") or Priority.MEDIUM.value,
            goal_id=data.get("goal_id"),
            completed=False,
            sub_tasks=[
                SubTask(title=st["title"], completed=False, position=i)
                for i, st in enumerate(data.get("sub_tasks") or [])
            ],
            created_at=now,
            updated_at=now,
        )
        await self._repo.add(task)
        await self._repo.commit()
        log.info("task_created", task_id=str(task.id), owner_id=str(owner_id), goal_id=_str(task.goal_id))

        await self._sync_linked_goal(task.goal_id, owner_id, reason="task_created")
        return task

    async def toggle_completion(self, task_id: uuid.UUID, owner_id: uuid.UUID, request: ToggleRequest) -> Task:
        task = await self.get_task(task_id, owner_id)
        changed = task_completion.apply_toggle(task, request)

        task.updated_at = datetime.now(timezone.utc)
        await self._repo.commit()
        log.info(
            "task_completion_toggled",
            task_id=str(task.id),
            type=request.type,
            sub_task_id=_str(request.sub_task_id),
            completed=task.completed,
            changed=changed,
        )

        if changed:
            await self._sync_linked_goal(task.goal_id, owner_id, reason="task_completion_changed")
        return task

    async def delete_task(self, task_id: uuid.UUID, owner_id: uuid.UUID) -> None:
        task = await self.get_task(task_id, owner_id)
        goal_id = task.goal_id

        await self._repo.delete(task)
        await self._repo.commit()
        log.info("task_deleted", task_id=str(task_id), owner_id=str(owner_id), goal_id=_str(goal_id))

        await self._sync_linked_goal(goal_id, owner_id, reason="task_deleted")

    async def _sync_linked_goal(self, goal_id: uuid.UUID | None, owner_id: uuid.UUID, *, reason: str) -> None:
        if goal_id is None or self._goal_resync is None:
            return
        try:
            await self._goal_resync(goal_id, owner_id)
        except NotFound:
            log.warning("goal_resync_skipped", goal_id=str(goal_id), reason=reason, detail="linked goal not found")
        except Exception:
            log.exception("goal_resync_failed", goal_id=str(goal_id), reason=reason)


def _str(value: uuid.UUID | None) -> str | None:
    return str(value) if value is not None else None
