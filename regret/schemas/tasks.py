from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import Field

from regret.domain.types import Priority
from regret.schemas.base import CamelModel


class SubTaskIn(CamelModel):
    title: str = Field(min_length=1, max_length=300)


class TaskCreateIn(CamelModel):
    title: str = Field(min_length=1, max_length=300)
    description: str = ""
    schedule_date: datetime
    priority: Priority = Priority.MEDIUM.value
    goal_id: uuid.UUID | None = None
    sub_tasks: list[SubTaskIn] = Field(default_factory=list)


class ToggleCompletionIn(CamelModel):
    # 'main' | 'sub'; anything else is rejected by the propagator
    type: str | None = None
    sub_task_id: uuid.UUID | None = None


class SubTaskOut(CamelModel):
    id: uuid.UUID
    title: str
    completed: bool


class TaskOut(CamelModel):
    id: uuid.UUID
    owner_id: uuid.UUID
    title: str
    description: str
    schedule_date: datetime
    priority: Priority
    goal_id: uuid.UUID | None = None
    completed: bool
    sub_tasks: list[SubTaskOut]
    created_at: datetime | None = None
    updated_at: datetime | None = None
