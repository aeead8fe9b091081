from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import Field

from regret.domain.types import GoalStatus
from regret.schemas.base import CamelModel


class LessonIn(CamelModel):
    title: str = Field(min_length=1, max_length=300)
    completed: bool = False
    notes: str | None = None


class ChapterIn(CamelModel):
    title: str = Field(min_length=1, max_length=300)
    order: int | None = None
    lessons: list[LessonIn] = Field(default_factory=list)


class GoalCreateIn(CamelModel):
    title: str = Field(min_length=1, max_length=300)
    description: str = ""
    target_date: datetime
    category: str | None = Field(default=None, max_length=100)
    chapters: list[ChapterIn] = Field(default_factory=list)


class GoalUpdateIn(CamelModel):
    title: str | None = Field(default=None, max_length=300)
    description: str | None = None
    target_date: datetime | None = None
    category: str | None = Field(default=None, max_length=100)
    status: GoalStatus | None = None
    # present => replaces every chapter and lesson
    chapters: list[ChapterIn] | None = None


class LessonOut(CamelModel):
    id: uuid.UUID
    title: str
    completed: bool
    notes: str | None = None


class ChapterOut(CamelModel):
    id: uuid.UUID
    title: str
    order: int
    lessons: list[LessonOut]


class GoalOut(CamelModel):
    id: uuid.UUID
    owner_id: uuid.UUID
    title: str
    description: str
    target_date: datetime
    category: str
    status: GoalStatus
    progress_percentage: int
    chapters: list[ChapterOut]
    created_at: datetime | None = None
    updated_at: datetime | None = None
