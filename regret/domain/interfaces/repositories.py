from __future__ import annotations

import uuid
from typing import Any, Protocol, Sequence


class IUnitOfWork(Protocol):
    async def flush(self) -> None:
        """Push pending changes to the data store without committing."""

    async def commit(self) -> None:
        """Commit the current transaction."""

    async def rollback(self) -> None:
        """Discard the current transaction."""


class IGoalRepository(IUnitOfWork, Protocol):
    async def get(self, goal_id: uuid.UUID, *, owner_id: uuid.UUID) -> Any | None:
        """Return a goal with its chapters and lessons, or None if absent or foreign."""

    async def list_for_owner(self, owner_id: uuid.UUID) -> Sequence[Any]:
        """Return the owner's goals ordered by target date ascending."""

    async def add(self, goal: Any) -> Any:
        """Persist a new goal and return it."""

    async def delete(self, goal: Any) -> None:
        """Delete a goal along with its chapters and lessons."""


class ITaskRepository(IUnitOfWork, Protocol):
    async def get(self, task_id: uuid.UUID, *, owner_id: uuid.UUID) -> Any | None:
        """Return a task with its sub-tasks, or None if absent or foreign."""

    async def list_for_owner(self, owner_id: uuid.UUID) -> Sequence[Any]:
        """Return the owner's tasks, open ones first, then by schedule date."""

    async def add(self, task: Any) -> Any:
        """Persist a new task and return it."""

    async def delete(self, task: Any) -> None:
        """Delete a task along with its sub-tasks."""


class IUserRepository(IUnitOfWork, Protocol):
    async def get_by_username(self, username: str) -> Any | None:
        """Return the user with that username, or None."""

    async def add(self, user: Any) -> Any:
        """Persist a new user and return it."""
