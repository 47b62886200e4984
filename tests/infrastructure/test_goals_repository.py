"""Tests for the SQLAlchemy goals repository."""

from datetime import datetime, timedelta
from decimal import Decimal

from src.infrastructure.goals_repository import SqlAlchemyGoalsRepository


class _Clock:
    def __init__(self) -> None:
        self.now = datetime(2024, 1, 1)

    def __call__(self) -> datetime:
        self.now += timedelta(minutes=1)
        return self.now


def _values(title: str, category: str = "Both"):
    return {
        "title": title,
        "category": category,
        "goal_type": "custom",
        "priority": "medium",
        "target_amount": Decimal("1000"),
        "current_amount": Decimal("250"),
    }


def test_goals_are_listed_newest_first(db_port) -> None:
    repository = SqlAlchemyGoalsRepository(db_port, clock=_Clock())
    repository.create_goal(_values("first"))
    repository.create_goal(_values("second"))
    repository.create_goal(_values("his", category="His"))

    goals = repository.fetch_goals("Both")

    assert [goal.title for goal in goals] == ["second", "first"]
    assert goals[0].is_completed is False
    assert goals[0].current_amount == Decimal("250")


def test_complete_goal(db_port) -> None:
    repository = SqlAlchemyGoalsRepository(db_port)
    goal = repository.create_goal(_values("car"))
    done_at = datetime(2024, 3, 1)

    completed = repository.complete_goal(goal.id, done_at)

    assert completed.is_completed is True
    assert completed.completed_at == done_at
    assert repository.complete_goal("missing", done_at) is None


def test_update_and_delete_goal(db_port) -> None:
    repository = SqlAlchemyGoalsRepository(db_port)
    goal = repository.create_goal(_values("house"))

    updated = repository.update_goal(goal.id, {"title": "bigger house"})

    assert updated.title == "bigger house"
    assert repository.update_goal("missing", {"title": "x"}) is None
    assert repository.delete_goal(goal.id) is True
    assert repository.fetch_goals() == []


def test_milestones_are_listed_smallest_target_first(db_port) -> None:
    repository = SqlAlchemyGoalsRepository(db_port)
    goal = repository.create_goal(_values("house"))
    other = repository.create_goal(_values("car"))
    repository.create_milestone(
        {"goal_id": goal.id, "title": "half", "target_amount": Decimal("500")}
    )
    repository.create_milestone(
        {"goal_id": goal.id, "title": "first", "target_amount": Decimal("100")}
    )
    repository.create_milestone(
        {"goal_id": other.id, "title": "other", "target_amount": Decimal("1")}
    )

    milestones = repository.fetch_milestones(goal.id)

    assert [item.title for item in milestones] == ["first", "half"]
    assert milestones[0].is_completed is False
    assert milestones[0].target_amount == Decimal("100")


def test_update_and_delete_milestone(db_port) -> None:
    repository = SqlAlchemyGoalsRepository(db_port)
    goal = repository.create_goal(_values("house"))
    milestone = repository.create_milestone(
        {"goal_id": goal.id, "title": "half", "target_amount": Decimal("500")}
    )
    reached_at = datetime(2024, 5, 1)

    updated = repository.update_milestone(
        milestone.id,
        {"is_completed": True, "achieved_at": reached_at},
    )

    assert updated.is_completed is True
    assert updated.achieved_at == reached_at
    assert repository.update_milestone("missing", {"title": "x"}) is None
    assert repository.delete_milestone(milestone.id) is True
    assert repository.delete_milestone(milestone.id) is False


def test_delete_goal_removes_its_milestones(db_port) -> None:
    repository = SqlAlchemyGoalsRepository(db_port)
    goal = repository.create_goal(_values("house"))
    repository.create_milestone(
        {"goal_id": goal.id, "title": "half", "target_amount": Decimal("500")}
    )

    assert repository.delete_goal(goal.id) is True
    assert repository.fetch_milestones(goal.id) == []
