from __future__ import annotations

import uuid

import pytest

from regret.core.errors import NotFound
from regret.domain import goal_progress
from regret.domain.lookup import find_by_id
from regret.models.goal import Chapter, Goal, Lesson


def make_goal(*chapter_states: list[bool], status: str = "Planned", progress: int = 0) -> Goal:
    chapters = [
        Chapter(
            id=uuid.uuid4(),
            title=f"Chapter {i}",
            order=i,
            lessons=[Lesson(id=uuid.uuid4(), title=f"Lesson {i}.{j}", completed=done) for j, done in enumerate(states)],
        )
        for i, states in enumerate(chapter_states)
    ]
    return Goal(id=uuid.uuid4(), title="G", status=status, progress_percentage=progress, chapters=chapters)


@pytest.mark.parametrize(
    ("completed", "total", "expected"),
    [(0, 0, 0), (0, 3, 0), (1, 3, 33), (2, 3, 67), (1, 2, 50), (1, 8, 13), (3, 8, 38), (3, 3, 100)],
)
def test_percentage_rounds_half_up(completed, total, expected):
    assert goal_progress.percentage(completed, total) == expected


def test_empty_goal_is_zero_and_never_completed():
    goal = make_goal(status="Planned")
    goal_progress.recompute(goal)
    assert goal.progress_percentage == 0
    assert goal.status == "Planned"

    # chapters without lessons are still empty
    goal = make_goal([], [], status="Completed", progress=100)
    assert goal_progress.recompute(goal) is True
    assert goal.progress_percentage == 0
    assert goal.status == "InProgress"


def test_scenario_three_lessons_over_two_chapters():
    goal = make_goal([True, False], [False])
    goal_progress.recompute(goal)
    assert goal.progress_percentage == 33
    assert goal.status == "Planned"

    ch1, ch2 = goal.chapters
    goal_progress.toggle_lesson(goal, ch1.id, ch1.lessons[1].id)
    assert goal.progress_percentage == 67
    goal_progress.toggle_lesson(goal, ch2.id, ch2.lessons[0].id)
    assert goal.progress_percentage == 100
    assert goal.status == "Completed"


def test_dropping_below_100_reopens_goal():
    goal = make_goal([True, True])
    goal_progress.recompute(goal)
    assert goal.status == "Completed"

    chapter = goal.chapters[0]
    goal_progress.toggle_lesson(goal, chapter.id, chapter.lessons[0].id)
    assert goal.progress_percentage == 50
    assert goal.status == "InProgress"


@pytest.mark.parametrize("status", ["OnHold", "Planned", "InProgress"])
def test_user_status_survives_below_100(status):
    goal = make_goal([True, False, False], status=status)
    goal_progress.recompute(goal)
    assert goal.status == status


def test_stale_status_at_100_is_corrected():
    goal = make_goal([True], status="OnHold", progress=100)
    assert goal_progress.recompute(goal) is True
    assert goal.status == "Completed"


def test_recompute_is_idempotent():
    goal = make_goal([True, False], [True])
    assert goal_progress.recompute(goal) is True
    snapshot = (goal.progress_percentage, goal.status)

    assert goal_progress.recompute(goal) is False
    assert goal_progress.recompute(goal) is False
    assert (goal.progress_percentage, goal.status) == snapshot


def test_toggle_twice_restores_lesson_and_progress():
    goal = make_goal([True, False, False], [False])
    goal_progress.recompute(goal)
    before = goal.progress_percentage
    chapter = goal.chapters[1]
    lesson = chapter.lessons[0]

    goal_progress.toggle_lesson(goal, chapter.id, lesson.id)
    assert lesson.completed is True
    assert goal.progress_percentage == before + 25

    goal_progress.toggle_lesson(goal, chapter.id, lesson.id)
    assert lesson.completed is False
    assert goal.progress_percentage == before


def test_toggle_changes_progress_by_one_lesson_share():
    goal = make_goal([False] * 7)
    goal_progress.recompute(goal)
    chapter = goal.chapters[0]
    previous = goal.progress_percentage
    for lesson in chapter.lessons:
        goal_progress.toggle_lesson(goal, chapter.id, lesson.id)
        assert abs(goal.progress_percentage - previous - round(100 / 7)) <= 1
        previous = goal.progress_percentage
    assert goal.progress_percentage == 100


def test_toggle_leaves_other_lesson_fields_alone():
    goal = make_goal([False])
    chapter = goal.chapters[0]
    lesson = chapter.lessons[0]
    lesson.notes = "keep me"

    goal_progress.toggle_lesson(goal, str(chapter.id), str(lesson.id))
    assert lesson.completed is True
    assert lesson.notes == "keep me"
    assert lesson.title == "Lesson 0.0"


def test_toggle_unknown_chapter_or_lesson_raises_not_found():
    goal = make_goal([False])
    chapter = goal.chapters[0]

    with pytest.raises(NotFound, match="Chapter not found"):
        goal_progress.toggle_lesson(goal, uuid.uuid4(), chapter.lessons[0].id)
    with pytest.raises(NotFound, match="Lesson not found"):
        goal_progress.toggle_lesson(goal, chapter.id, uuid.uuid4())
    assert chapter.lessons[0].completed is False


def test_find_by_id_matches_uuid_and_string():
    goal = make_goal([False], [False])
    target = goal.chapters[1]
    assert find_by_id(goal.chapters, target.id) is target
    assert find_by_id(goal.chapters, str(target.id)) is target
    with pytest.raises(NotFound):
        find_by_id([], target.id)
