"""Goal progress rollup.

A goal's percentage is derived from the lessons of all its chapters and its
status follows from the percentage: Completed exactly when every lesson is done.
Everything here is pure and works on any objects shaped like the ORM models.
"""
from __future__ import annotations

import uuid
from typing import Iterable

from regret.domain.lookup import find_by_id
from regret.domain.types import GoalStatus


def count_lessons(chapters: Iterable) -> tuple[int, int]:
    """Return ``(completed, total)`` lesson counts across ``chapters``."""
    total = 0
    completed = 0
    for chapter in chapters:
        for lesson in chapter.lessons:
            total += 1
            if lesson.completed:
                completed += 1
    return completed, total


def percentage(completed: int, total: int) -> int:
    """Round-half-up of ``100 * completed / total``; 0 for an empty goal."""
    if total == 0:
        return 0
    # floor(100c/t + 1/2) in integer arithmetic
    return (200 * completed + total) // (2 * total)


def calculate_progress(goal) -> int:
    return percentage(*count_lessons(goal.chapters))


def derive_status(progress: int, status: str | None) -> str:
    if progress == 100:
        return GoalStatus.COMPLETED.value
    if status == GoalStatus.COMPLETED.value:
        return GoalStatus.IN_PROGRESS.value
    return status or GoalStatus.PLANNED.value


def recompute(goal) -> bool:
    """Bring ``progress_percentage`` and ``status`` in line with the lesson tree.

    Returns True if either field changed, which is the caller's cue to persist.
    """
    progress = calculate_progress(goal)
    status = derive_status(progress, goal.status)

    changed = progress != goal.progress_percentage or status != goal.status
    goal.progress_percentage = progress
    goal.status = status
    return changed


def toggle_lesson(goal, chapter_id: uuid.UUID | str, lesson_id: uuid.UUID | str):
    """Flip one lesson's completion and recompute the goal. Returns the lesson."""
    chapter = find_by_id(goal.chapters, chapter_id, what="Chapter")
    lesson = find_by_id(chapter.lessons, lesson_id, what="Lesson")
    lesson.completed = not lesson.completed
    recompute(goal)
    return lesson
