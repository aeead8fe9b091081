from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends

from regret.api.deps import get_current_user_id
from regret.application.services.goal_service import GoalService
from regret.core.logging import log
from regret.core.response import msg
from regret.infrastructure.di import get_goal_service
from regret.schemas.base import MessageOut
from regret.schemas.goals import GoalCreateIn, GoalOut, GoalUpdateIn

router = APIRouter(prefix="/goals")


@router.post("", response_model=GoalOut, status_code=201)
async def create_goal(
    body: GoalCreateIn,
    user_id: uuid.UUID = Depends(get_current_user_id),
    goal_service: GoalService = Depends(get_goal_service),
):
    return await goal_service.create_goal(user_id, body.model_dump())


@router.get("", response_model=list[GoalOut])
async def list_goals(
    user_id: uuid.UUID = Depends(get_current_user_id),
    goal_service: GoalService = Depends(get_goal_service),
):
    goals = await goal_service.list_goals(user_id)
    healed = await goal_service.self_heal(goals)
    log.info("goals_list", count=len(goals), healed=len(healed))
    return goals


@router.put("/{goal_id}", response_model=GoalOut)
async def update_goal(
    goal_id: uuid.UUID,
    body: GoalUpdateIn,
    user_id: uuid.UUID = Depends(get_current_user_id),
    goal_service: GoalService = Depends(get_goal_service),
):
    return await goal_service.update_goal(goal_id, user_id, body.model_dump(exclude_unset=True))


@router.patch("/{goal_id}/lesson/{chapter_id}/{lesson_id}/complete", response_model=GoalOut)
async def toggle_lesson(
    goal_id: uuid.UUID,
    chapter_id: uuid.UUID,
    lesson_id: uuid.UUID,
    user_id: uuid.UUID = Depends(get_current_user_id),
    goal_service: GoalService = Depends(get_goal_service),
):
    return await goal_service.toggle_lesson(goal_id, chapter_id, lesson_id, user_id)


@router.delete("/{goal_id}", response_model=MessageOut)
async def delete_goal(
    goal_id: uuid.UUID,
    user_id: uuid.UUID = Depends(get_current_user_id),
    goal_service: GoalService = Depends(get_goal_service),
):
    await goal_service.delete_goal(goal_id, user_id)
    return msg("Goal deleted successfully.")
