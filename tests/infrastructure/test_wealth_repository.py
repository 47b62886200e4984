"""Tests for the SQLAlchemy wealth repository."""

from datetime import datetime
from decimal import Decimal

from src.infrastructure.wealth_repository import SqlAlchemyWealthRepository


def _values(day: int, category: str = "Both", net_worth: str = "1000"):
    return {
        "date": datetime(2024, 1, day),
        "category": category,
        "net_worth": Decimal(net_worth),
        "investments": Decimal("800"),
        "cash": Decimal("200"),
        "liabilities": Decimal("0"),
        "fire_target": Decimal("1000000"),
        "savings_rate": Decimal("25"),
    }


def test_create_and_fetch_entries_in_date_order(db_port) -> None:
    repository = SqlAlchemyWealthRepository(db_port)
    repository.create_entry(_values(3, net_worth="3000"))
    repository.create_entry(_values(1, net_worth="1000"))
    repository.create_entry(_values(2, category="His"))

    entries = repository.fetch_entries("Both")

    assert [entry.date.day for entry in entries] == [1, 3]
    assert entries[0].net_worth == Decimal("1000")
    assert entries[0].stocks is None
    assert len(repository.fetch_entries()) == 3


def test_fetch_latest_entry(db_port) -> None:
    repository = SqlAlchemyWealthRepository(db_port)
    assert repository.fetch_latest_entry("Her") is None

    repository.create_entry(_values(1, category="Her"))
    latest = repository.create_entry(_values(5, category="Her"))

    assert repository.fetch_latest_entry("Her").id == latest.id


def test_update_and_delete(db_port) -> None:
    repository = SqlAlchemyWealthRepository(db_port)
    entry = repository.create_entry(_values(1))

    updated = repository.update_entry(entry.id, {"cash": Decimal("500")})

    assert updated.cash == Decimal("500")
    assert repository.update_entry("missing", {"cash": Decimal("1")}) is None
    assert repository.update_entry(entry.id, {}).id == entry.id
    assert repository.delete_entry(entry.id) is True
    assert repository.delete_entry(entry.id) is False
    assert repository.fetch_entry(entry.id) is None
