from __future__ import annotations

import uuid
from dataclasses import dataclass

from regret.core.errors import InvalidRequest
from regret.domain.lookup import find_by_id
from regret.domain.types import ToggleType


@dataclass(frozen=True)
class ToggleRequest:
    type: str | None
    sub_task_id: uuid.UUID | None = None


def toggle_main(task) -> bool:
    """Flip the task and force every sub-task to the new value."""
    new_value = not task.completed
    task.completed = new_value
    for sub_task in task.sub_tasks:
        sub_task.completed = new_value
    return True


def toggle_sub(task, sub_task_id: uuid.UUID | str) -> bool:
    """Flip one sub-task and re-derive the task from all of them.

    Returns True if the task's own completion flipped as a result.
    """
    sub_task = find_by_id(task.sub_tasks, sub_task_id, what="Sub-task")
    sub_task.completed = not sub_task.completed

    all_done = all(st.completed for st in task.sub_tasks)
    changed = all_done != bool(task.completed)
    task.completed = all_done
    return changed


def apply_toggle(task, request: ToggleRequest) -> bool:
    if request.type == ToggleType.MAIN.value:
        return toggle_main(task)
    if request.type == ToggleType.SUB.value and request.sub_task_id is not None:
        return toggle_sub(task, request.sub_task_id)
    raise InvalidRequest("Invalid completion type or missing subTaskId.")
