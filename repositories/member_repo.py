"""
repositories/member_repo.py
----------------------------
Read-only query layer over the member roster.
The roster is injected at construction and never modified.
"""

from typing import Iterable, Optional

from models.member import House, Member, Title, house_order, natural_order
from models.salary_stats import SalaryStats
from utils.logger import get_logger

logger = get_logger(__name__)


class EmptyCollectionError(ValueError):
    """Raised when an aggregate has no defined result over an empty roster."""


class InMemoryMemberRepository:
    """
    Answers filter, sort and aggregate queries about a fixed roster.

    Every query is a pure function of the roster: repeated calls
    return equal results. Sorting is stable throughout, so members
    with equal keys keep their roster order.
    """

    def __init__(self, members: Iterable[Member]):
        self._members: tuple[Member, ...] = tuple(members)
        logger.info(f"Member repository ready with {len(self._members)} members")

    # ── LOOKUP ────────────────────────────────────────────

    def find_by_id(self, member_id: int) -> Optional[Member]:
        """Return the first member with the given id, or None."""
        return next((m for m in self._members if m.id == member_id), None)

    def find_by_name(self, name: str) -> Optional[Member]:
        """Return the first member whose name matches exactly, or None."""
        return next((m for m in self._members if m.name == name), None)

    def find_all_by_house(self, house: House) -> list[Member]:
        """All members of a house, in roster order."""
        return [m for m in self._members if m.house == house]

    def get_all(self) -> tuple[Member, ...]:
        return self._members

    # ── FILTER & SORT ─────────────────────────────────────

    def starts_with_s_sorted_by_natural(self) -> list[Member]:
        """Members whose name starts with 'S', sorted by id."""
        return sorted(
            (m for m in self._members if m.name.startswith("S")),
            key=natural_order,
        )

    def lannisters_by_name(self) -> list[Member]:
        """House Lannister, sorted by name."""
        return sorted(
            self.find_all_by_house(House.LANNISTER),
            key=lambda m: m.name,
        )

    def salary_less_than_sorted_by_house(self, max_salary: float) -> list[Member]:
        """Members earning strictly less than `max_salary`, sorted by house."""
        return sorted(
            (m for m in self._members if m.salary < max_salary),
            key=house_order,
        )

    def sort_by_house_then_name_desc(self) -> list[Member]:
        """
        All members sorted by house ascending, then by name descending.

        Only the name key is reversed; houses stay in ascending order.
        Two stable passes, least significant key first.
        """
        by_name_desc = sorted(self._members, key=lambda m: m.name, reverse=True)
        return sorted(by_name_desc, key=house_order)

    def house_by_birthdate(self, house: House) -> list[Member]:
        """Members of a house, oldest first."""
        return sorted(self.find_all_by_house(house), key=lambda m: m.birthdate)

    def kings_by_name_desc(self) -> list[Member]:
        """All kings, sorted by name descending."""
        return sorted(
            (m for m in self._members if m.title == Title.KING),
            key=lambda m: m.name,
            reverse=True,
        )

    def names_sorted_by_house(self, house: House) -> list[str]:
        """Names of a house's members, sorted alphabetically."""
        return sorted(m.name for m in self._members if m.house == house)

    # ── AGGREGATES ────────────────────────────────────────

    def average_salary(self) -> float:
        """
        Mean salary over the whole roster.

        Raises:
            EmptyCollectionError: If the roster is empty.
        """
        self._require_members("average_salary")
        return sum(m.salary for m in self._members) / len(self._members)

    def any_salary_greater_than(self, max_salary: float) -> bool:
        return any(m.salary > max_salary for m in self._members)

    def any_in_house(self, house: House) -> bool:
        return any(m.house == house for m in self._members)

    def count_in_house(self, house: House) -> int:
        return sum(1 for m in self._members if m.house == house)

    def names_joined_by_house(self, house: House) -> str:
        """Sorted names of a house's members as 'A, B, C' ('' if none)."""
        return ", ".join(self.names_sorted_by_house(house))

    def highest_salary(self) -> Member:
        """
        The best-paid member. Ties go to the first in roster order.

        Raises:
            EmptyCollectionError: If the roster is empty.
        """
        self._require_members("highest_salary")
        return max(self._members, key=lambda m: m.salary)

    # ── GROUPING ──────────────────────────────────────────

    def royalty_partition(self) -> dict[bool, list[Member]]:
        """
        Split the roster into royalty (kings and queens) and everyone else.

        Returns:
            {True: [royals...], False: [others...]}; both keys always present.
        """
        partition: dict[bool, list[Member]] = {True: [], False: []}
        for m in self._members:
            partition[m.is_royal()].append(m)
        return partition

    def members_by_house(self) -> dict[House, list[Member]]:
        """
        Group members by house.

        Only houses with at least one member appear, keyed in order
        of first appearance in the roster.
        """
        groups: dict[House, list[Member]] = {}
        for m in self._members:
            groups.setdefault(m.house, []).append(m)
        return groups

    def count_by_house(self) -> dict[House, int]:
        return {house: len(ms) for house, ms in self.members_by_house().items()}

    def house_salary_stats(self) -> dict[House, SalaryStats]:
        """Min, max, average, count and sum of salaries for each house."""
        return {
            house: SalaryStats.of(m.salary for m in ms)
            for house, ms in self.members_by_house().items()
        }

    # ── HELPERS ───────────────────────────────────────────

    def _require_members(self, operation: str) -> None:
        if not self._members:
            logger.error(f"{operation} called on an empty roster")
            raise EmptyCollectionError(f"{operation} is undefined for an empty roster.")
