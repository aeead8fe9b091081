from __future__ import annotations

from enum import Enum


class GoalStatus(str, Enum):
    PLANNED = "Planned"
    IN_PROGRESS = "InProgress"
    ON_HOLD = "OnHold"
    COMPLETED = "Completed"


class Priority(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class ToggleType(str, Enum):
    MAIN = "main"
    SUB = "sub"
