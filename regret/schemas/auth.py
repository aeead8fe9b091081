from __future__ import annotations

import uuid

from pydantic import Field

from regret.schemas.base import CamelModel


class CredentialsIn(CamelModel):
    username: str = Field(min_length=1, max_length=150)
    password: str = Field(min_length=1)


class AuthOut(CamelModel):
    token: str
    user_id: uuid.UUID
    username: str
    message: str
