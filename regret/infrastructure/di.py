from __future__ import annotations

import uuid

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from regret.application.services.auth_service import AuthService
from regret.application.services.goal_service import GoalService
from regret.application.services.task_service import TaskService
from regret.core.config import AuthConfig
from regret.db.session import async_session_maker, get_db
from regret.infrastructure.repositories.goal_repository import SQLGoalRepository
from regret.infrastructure.repositories.task_repository import SQLTaskRepository
from regret.infrastructure.repositories.user_repository import SQLUserRepository


def get_auth_config(request: Request) -> AuthConfig:
    return request.app.state.auth_config


def create_goal_service(db: AsyncSession) -> GoalService:
    return GoalService(SQLGoalRepository(db))


async def resync_goal(goal_id: uuid.UUID, owner_id: uuid.UUID) -> bool:
    # own session, so a failing resync cannot disturb the task's session
    async with async_session_maker() as session:
        return await create_goal_service(session).resync(goal_id, owner_id)


def create_task_service(db: AsyncSession) -> TaskService:
    return TaskService(SQLTaskRepository(db), goal_resync=resync_goal)


def create_auth_service(db: AsyncSession, config: AuthConfig) -> AuthService:
    return AuthService(SQLUserRepository(db), config)


def get_goal_service(db: AsyncSession = Depends(get_db)) -> GoalService:
    return create_goal_service(db)


def get_task_service(db: AsyncSession = Depends(get_db)) -> TaskService:
    return create_task_service(db)


def get_auth_service(
    db: AsyncSession = Depends(get_db),
    config: AuthConfig = Depends(get_auth_config),
) -> AuthService:
    return create_auth_service(db, config)
