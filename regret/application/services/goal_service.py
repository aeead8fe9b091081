from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Iterable

from regret.core.errors import NotFound
from regret.core.logging import log
from regret.domain import goal_progress
from regret.domain.interfaces.repositories import IGoalRepository
from regret.domain.types import GoalStatus
from regret.models.goal import Chapter, Goal, Lesson

_UPDATABLE_FIELDS = ("title", "description", "target_date", "category", "status")


def build_chapters(chapters: Iterable[dict[str, Any]]) -> list[Chapter]:
    """Fresh chapter/lesson rows from request data; ``order`` defaults to the list index."""
    built = []
    for index, data in enumerate(chapters):
        order = data.get("order")
        built.append(
            Chapter(
                title=data["title"],
                order=index if order is None else order,
                position=index,
                lessons=[
                    Lesson(
                        title=lesson["title"],
                        completed=bool(lesson.get("completed", False)),
                        notes=lesson.get("notes"),
                        position=position,
                    )
                    for position, lesson in enumerate(data.get("lessons") or [])
                ],
            )
        )
    return built


class GoalService:
    def __init__(self, repo: IGoalRepository) -> None:
        self._repo = repo

    async def get_goal(self, goal_id: uuid.UUID, owner_id: uuid.UUID) -> Goal:
        goal = await self._repo.get(goal_id, owner_id=owner_id)
        if not goal:
            raise NotFound("Goal not found or unauthorized.")
        return goal

    async def create_goal(self, owner_id: uuid.UUID, data: dict[str, Any]) -> Goal:
        now = datetime.now(timezone.utc)
        goal = Goal(
            owner_id=owner_id,
            title=data["title"],
            description=data.get("description") or "",
            target_date=data["target_date"],
            category=data.get("category") or "General",
            status=GoalStatus.PLANNED.value,
            progress_percentage=0,
            chapters=build_chapters(data.get("chapters") or []),
            created_at=now,
            updated_at=now,
        )
        goal_progress.recompute(goal)
        await self._repo.add(goal)
        await self._repo.commit()

        log.info("goal_created", goal_id=str(goal.id), owner_id=str(owner_id), progress=goal.progress_percentage)
        return goal

    async def list_goals(self, owner_id: uuid.UUID) -> list[Goal]:
        return list(await self._repo.list_for_owner(owner_id))

    async def self_heal(self, goals: Iterable[Goal]) -> list[Goal]:
        """Recompute every goal and persist the ones whose stored values had drifted.

        Returns the repaired goals; an empty list means storage was left untouched.
        """
        healed = [goal for goal in goals if goal_progress.recompute(goal)]
        if not healed:
            return healed

        now = datetime.now(timezone.utc)
        for goal in healed:
            goal.updated_at = now
            log.warning(
                "goal_progress_healed",
                goal_id=str(goal.id),
                progress=goal.progress_percentage,
                status=goal.status,
            )
        await self._repo.commit()
        return healed

    async def update_goal(self, goal_id: uuid.UUID, owner_id: uuid.UUID, patch: dict[str, Any]) -> Goal:
        """Overwrite supplied fields; a supplied chapter list replaces the whole tree."""
        goal = await self.get_goal(goal_id, owner_id)

        for field in _UPDATABLE_FIELDS:
            value = patch.get(field)
            if value is not None and value != "":
                setattr(goal, field, value)

        chapters = patch.get("chapters")
        if chapters is not None:
            goal.chapters = build_chapters(chapters)

        goal_progress.recompute(goal)
        goal.updated_at = datetime.now(timezone.utc)
        await self._repo.commit()

        log.info("goal_updated", goal_id=str(goal.id), owner_id=str(owner_id), progress=goal.progress_percentage)
        return goal

    async def toggle_lesson(
        self,
        goal_id: uuid.UUID,
        chapter_id: uuid.UUID,
        lesson_id: uuid.UUID,
        owner_id: uuid.UUID,
    ) -> Goal:
        goal = await self.get_goal(goal_id, owner_id)
        lesson = goal_progress.toggle_lesson(goal, chapter_id, lesson_id)
        goal.updated_at = datetime.now(timezone.utc)
        await self._repo.commit()

        log.info(
            "lesson_toggled",
            goal_id=str(goal.id),
            lesson_id=str(lesson.id),
            completed=lesson.completed,
            progress=goal.progress_percentage,
            status=goal.status,
        )
        return goal

    async def delete_goal(self, goal_id: uuid.UUID, owner_id: uuid.UUID) -> None:
        # no cascade: linked tasks keep a dangling goal_id
        goal = await self.get_goal(goal_id, owner_id)
        await self._repo.delete(goal)
        await self._repo.commit()
        log.info("goal_deleted", goal_id=str(goal_id), owner_id=str(owner_id))

    async def resync(self, goal_id: uuid.UUID, owner_id: uuid.UUID) -> bool:
        """Recompute one goal and persist it if anything drifted. Raises NotFound."""
        goal = await self.get_goal(goal_id, owner_id)
        if not goal_progress.recompute(goal):
            return False
        goal.updated_at = datetime.now(timezone.utc)
        await self._repo.commit()
        return True
