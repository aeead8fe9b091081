from __future__ import annotations

from fastapi import APIRouter, Depends

from regret.application.services.auth_service import AuthService
from regret.core.logging import log
from regret.infrastructure.di import get_auth_service
from regret.schemas.auth import AuthOut, CredentialsIn

router = APIRouter(prefix="/auth")


@router.post("/signup", response_model=AuthOut, status_code=201)
async def signup(body: CredentialsIn, auth_service: AuthService = Depends(get_auth_service)):
    result = await auth_service.register(body.username, body.password)
    log.info("user_registered", user_id=str(result.user_id))
    return AuthOut(
        token=result.token,
        user_id=result.user_id,
        username=result.username,
        message="User registered successfully.",
    )


@router.post("/login", response_model=AuthOut)
async def login(body: CredentialsIn, auth_service: AuthService = Depends(get_auth_service)):
    result = await auth_service.login(body.username, body.password)
    log.info("user_logged_in", user_id=str(result.user_id))
    return AuthOut(
        token=result.token,
        user_id=result.user_id,
        username=result.username,
        message="Login successful.",
    )
