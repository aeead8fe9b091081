from __future__ import annotations

import uuid
from datetime import datetime, timezone
from pathlib import Path

import pytest
from sqlalchemy import func, select

from regret.db.schema_check import current_revision, ensure_schema_up_to_date, head_revision
from regret.models.goal import Chapter, Goal, Lesson
from regret.models.user import User


async def test_can_create_user_record(db_session):
    user = User(username="db-user", password_hash="hashed-password")
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)

    assert isinstance(user.id, uuid.UUID)

    result = await db_session.execute(select(User).where(User.username == "db-user"))
    stored_user = result.scalar_one()
    assert stored_user.password_hash == "hashed-password"


async def test_goal_tree_is_ordered_and_deleted_with_goal(db_session):
    user = User(username="tree-owner", password_hash="x")
    db_session.add(user)
    await db_session.flush()

    goal = Goal(
        owner_id=user.id,
        title="G",
        target_date=datetime(2027, 1, 1, tzinfo=timezone.utc),
        chapters=[
            Chapter(title="first", order=0, lessons=[Lesson(title="a"), Lesson(title="b")]),
            Chapter(title="second", order=1, lessons=[Lesson(title="c")]),
        ],
    )
    db_session.add(goal)
    await db_session.commit()

    assert goal.status == "Planned"
    assert goal.progress_percentage == 0
    assert [c.title for c in goal.chapters] == ["first", "second"]

    await db_session.delete(goal)
    await db_session.commit()

    assert (await db_session.execute(select(func.count()).select_from(Chapter))).scalar_one() == 0
    assert (await db_session.execute(select(func.count()).select_from(Lesson))).scalar_one() == 0


async def test_schema_gate_rejects_unmigrated_database(db_engine):


    # tables come from create_all in tests, never from alembic
    assert await current_revision(db_engine) is None
    with pytest.raises(RuntimeError, match="alembic upgrade head"):
        await ensure_schema_up_to_date(db_engine)


def test_alembic_head_is_initial_revision():


    ini = Path(__file__).resolve().parent.parent / "alembic.ini"
    assert head_revision(str(ini)) == "0001_init"
