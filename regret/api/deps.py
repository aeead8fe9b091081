from __future__ import annotations

import uuid

import structlog
from fastapi import Depends, Request

from regret.application.services.auth_service import AuthService
from regret.core.config import settings
from regret.infrastructure.di import get_auth_service


async def get_current_user_id(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
) -> uuid.UUID:
    """Resolve the caller from the custom token header; AuthError -> 401."""
    token = request.headers.get(settings.AUTH_TOKEN_HEADER)
    user_id = auth_service.verify(token)
    structlog.contextvars.bind_contextvars(user_id=str(user_id))
    return user_id
