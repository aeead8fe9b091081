from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends

from regret.api.deps import get_current_user_id
from regret.application.services.task_service import TaskService
from regret.core.logging import log
from regret.core.response import msg
from regret.domain.task_completion import ToggleRequest
from regret.infrastructure.di import get_task_service
from regret.schemas.base import MessageOut
from regret.schemas.tasks import TaskCreateIn, TaskOut, ToggleCompletionIn

router = APIRouter(prefix="/tasks")


@router.post("", response_model=TaskOut, status_code=201)
async def create_task(
    body: TaskCreateIn,
    user_id: uuid.UUID = Depends(get_current_user_id),
    task_service: TaskService = Depends(get_task_service),
):
    return await task_service.create_task(user_id, body.model_dump())


@router.get("", response_model=list[TaskOut])
async def list_tasks(
    user_id: uuid.UUID = Depends(get_current_user_id),
    task_service: TaskService = Depends(get_task_service),
):
    tasks = await task_service.list_tasks(user_id)
    log.info("tasks_list", count=len(tasks))
    return tasks


@router.patch("/{task_id}/complete", response_model=TaskOut)
async def toggle_completion(
    task_id: uuid.UUID,
    body: ToggleCompletionIn,
    user_id: uuid.UUID = Depends(get_current_user_id),
    task_service: TaskService = Depends(get_task_service),
):
    request = ToggleRequest(type=body.type, sub_task_id=body.sub_task_id)
    return await task_service.toggle_completion(task_id, user_id, request)


@router.delete("/{task_id}", response_model=MessageOut)
async def delete_task(
    task_id: uuid.UUID,
    user_id: uuid.UUID = Depends(get_current_user_id),
    task_service: TaskService = Depends(get_task_service),
):
    await task_service.delete_task(task_id, user_id)
    return msg("Task deleted successfully.")
