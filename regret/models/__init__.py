from __future__ import annotations

# Import all models so Alembic sees them via Base.metadata
from regret.models.user import User  # noqa: F401
from regret.models.goal import Chapter, Goal, Lesson  # noqa: F401
from regret.models.task import SubTask, Task  # noqa: F401
