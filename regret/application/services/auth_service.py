from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import IntegrityError

from regret.core.config import AuthConfig
from regret.core.errors import AuthError, Conflict, InvalidCredentials, ValidationError
from regret.domain.interfaces.repositories import IUserRepository
from regret.models.user import User


@dataclass(frozen=True)
class AuthResult:
    user_id: uuid.UUID
    username: str
    token: str


class AuthService:
    """Registration, login and token verification.

    Tokens are HS-signed JWTs whose only claim besides ``exp`` is the user id.
    """

    def __init__(self, repo: IUserRepository, config: AuthConfig) -> None:
        self._repo = repo
        self._config = config

    async def register(self, username: str, password: str) -> AuthResult:
        username = (username or "").strip()
        if not username or not password:
            raise ValidationError("Please provide both username and password.")
        if len(password.encode("utf-8")) > 72:
            raise ValidationError("Password must be at most 72 bytes long.")

        if await self._repo.get_by_username(username):
            raise Conflict("User already exists.")

        password_hash = await run_in_threadpool(self.hash_password, password)
        user = User(username=username, password_hash=password_hash)
        try:
            await self._repo.add(user)
            await self._repo.commit()
        except IntegrityError as exc:
            await self._repo.rollback()
            raise Conflict("User already exists.") from exc

        return AuthResult(user_id=user.id, username=user.username, token=self.issue_token(user.id))

    async def login(self, username: str, password: str) -> AuthResult:
        username = (username or "").strip()
        if not username or not password:
            raise ValidationError("Please provide both username and password.")

        user = await self._repo.get_by_username(username)
        if not user:
            raise InvalidCredentials()
        if not await run_in_threadpool(self.check_password, password, user.password_hash):
            raise InvalidCredentials()

        return AuthResult(user_id=user.id, username=user.username, token=self.issue_token(user.id))

    def verify(self, token: str | None) -> uuid.UUID:
        if not token:
            raise AuthError("No token, authorization denied.")
        try:
            payload = jwt.decode(
                token,
                self._config.secret_key,
                algorithms=[self._config.algorithm],
                options={"require": ["exp", "id"]},
            )
            return uuid.UUID(str(payload["id"]))
        except (jwt.PyJWTError, ValueError) as exc:
            raise AuthError("Token is not valid.") from exc

    def issue_token(self, user_id: uuid.UUID, *, now: datetime | None = None) -> str:
        issued = now or datetime.now(timezone.utc)
        payload = {"id": str(user_id), "exp": issued + timedelta(seconds=self._config.token_ttl_seconds)}
        return jwt.encode(payload, self._config.secret_key, algorithm=self._config.algorithm)

    def hash_password(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._config.bcrypt_rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    @staticmethod
    def check_password(password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            return False
