from __future__ import annotations

import os
import tempfile
import uuid

import pytest
from httpx import ASGITransport, AsyncClient

# IMPORTANT:
# Set env BEFORE importing app (settings are read at import time)
_db_dir = tempfile.mkdtemp(prefix="regret-tests-")
os.environ.setdefault("APP_ENV", "dev")
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{os.path.join(_db_dir, 'test.db')}")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-with-enough-length")
# cheapest cost factor bcrypt allows
os.environ.setdefault("PASSWORD_BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest.fixture(scope="session")
def app():
    from regret.main import app as fastapi_app
    return fastapi_app


@pytest.fixture()
async def db_engine(app):
    from regret.db.init_db import drop_db, init_db
    from regret.db.session import engine

    await init_db(engine)
    yield engine
    await drop_db(engine)
    await engine.dispose()


@pytest.fixture()
async def db_session(db_engine):
    from regret.db.session import async_session_maker

    async with async_session_maker() as session:
        yield session


@pytest.fixture()
async def client(app, db_engine):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture(scope="session")
def auth_paths():
    return {
        "signup": "/api/auth/signup",
        "login": "/api/auth/login",
    }


@pytest.fixture(scope="session")
def goals_path():
    return "/api/goals"


@pytest.fixture(scope="session")
def tasks_path():
    return "/api/tasks"


@pytest.fixture()
def user_password() -> str:
    return "StrongPassw0rd!"


async def signup(client: AsyncClient, *, path: str = "/api/auth/signup", username: str | None = None, password: str = "StrongPassw0rd!"):
    username = username or f"u_{uuid.uuid4().hex[:10]}"
    return await client.post(path, json={"username": username, "password": password})


def auth_header(token: str) -> dict[str, str]:
    return {"x-auth-token": token}


@pytest.fixture()
async def auth_headers(client) -> dict[str, str]:
    r = await signup(client)
    assert r.status_code == 201
    return auth_header(r.json()["token"])


@pytest.fixture()
async def other_auth_headers(client) -> dict[str, str]:
    r = await signup(client)
    assert r.status_code == 201
    return auth_header(r.json()["token"])


def goal_body(**overrides) -> dict:
    body = {
        "title": "Learn game dev",
        "description": "Physics, math, animation",
        "targetDate": "2027-01-31T00:00:00Z",
        "category": "Game Dev",
        "chapters": [
            {"title": "Physics", "lessons": [{"title": "Vectors"}, {"title": "Forces"}]},
            {"title": "Math", "lessons": [{"title": "Matrices"}]},
        ],
    }
    body.update(overrides)
    return body


def task_body(**overrides) -> dict:
    body = {
        "title": "Practice",
        "description": "Daily practice",
        "scheduleDate": "2026-11-01T09:00:00Z",
        "priority": "High",
        "subTasks": [{"title": "Warm up"}, {"title": "Drill"}, {"title": "Review"}],
    }
    body.update(overrides)
    return body
