"""
models/member.py
----------------
Domain model for roster members, their houses and their titles.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class House(Enum):
    """
    The great houses of the realm.

    Houses are ordered by declaration order (see `ordinal`),
    which is also alphabetical.
    """
    ARRYN = "Arryn"
    BARATHEON = "Baratheon"
    BOLTON = "Bolton"
    FREY = "Frey"
    GREYJOY = "Greyjoy"
    LANNISTER = "Lannister"
    MARTELL = "Martell"
    SNOW = "Snow"
    STARK = "Stark"
    TARGARYEN = "Targaryen"
    TULLY = "Tully"
    TYRELL = "Tyrell"

    @property
    def ordinal(self) -> int:
        """Position of this house in declaration order."""
        return _HOUSE_ORDER[self]


_HOUSE_ORDER = {house: i for i, house in enumerate(House)}


class Title(Enum):
    """A member's title. Only kings and queens count as royalty."""
    SIR = "Sir"
    LORD = "Lord"
    LADY = "Lady"
    KING = "King"
    QUEEN = "Queen"
    ARCHMAESTER = "Archmaester"
    PRINCE = "Prince"
    PRINCESS = "Princess"

    @property
    def is_royal(self) -> bool:
        return self in (Title.KING, Title.QUEEN)


@dataclass(frozen=True)
class Member:
    """
    Represents a single member of the roster.

    Attributes:
        id: Unique identifier; also the natural sort order.
        name: Display name (e.g., 'Sansa').
        house: The house the member belongs to.
        title: The member's title.
        salary: Yearly salary in gold dragons (non-negative).
        birthdate: Date of birth.
    """
    id: int
    name: str
    house: House
    title: Title
    salary: float
    birthdate: date

    def is_royal(self) -> bool:
        """Returns True if this member is a king or a queen."""
        return self.title.is_royal

    def __str__(self) -> str:
        return f"#{self.id} {self.title.value} {self.name} of House {self.house.value}"


def natural_order(member: Member) -> int:
    """Sort key for the natural ordering of members (by id)."""
    return member.id


def house_order(member: Member) -> int:
    """Sort key ordering members by their house's declaration order."""
    return member.house.ordinal
