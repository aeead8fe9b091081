from __future__ import annotations

from fastapi import APIRouter

from regret.api.v1.auth import router as auth_router
from regret.api.v1.goals import router as goals_router
from regret.api.v1.tasks import router as tasks_router

api_router = APIRouter()
api_router.include_router(auth_router, tags=["auth"])
api_router.include_router(goals_router, tags=["goals"])
api_router.include_router(tasks_router, tags=["tasks"])
