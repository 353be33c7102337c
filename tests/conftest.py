"""Shared pytest fixtures and test helpers for roster tests."""

from __future__ import annotations

from datetime import date

import pytest

from db.member_db import DEFAULT_ROSTER
from models.member import House, Member, Title
from repositories.member_repo import InMemoryMemberRepository


@pytest.fixture
def repo() -> InMemoryMemberRepository:
    """Repository over the built-in 22-member roster."""
    return InMemoryMemberRepository(DEFAULT_ROSTER)


@pytest.fixture
def empty_repo() -> InMemoryMemberRepository:
    return InMemoryMemberRepository([])


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_member(
    member_id: int,
    name: str,
    house: House = House.STARK,
    title: Title = Title.LORD,
    salary: float = 1000.0,
    birthdate: date = date(1980, 1, 1),
) -> Member:
    """Build a Member with sensible defaults for fields a test does not care about."""
    return Member(member_id, name, house, title, salary, birthdate)
