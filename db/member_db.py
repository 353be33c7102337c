"""
db/member_db.py
---------------
Provides the roster of members handed to the query layer.
Uses the built-in roster unless a CSV file is configured, in which case
the file is read with pandas.
"""

import math
from datetime import date
from typing import Optional

import pandas as pd

from config import ROSTER_CSV_PATH
from models.member import House, Member, Title
from utils.logger import get_logger

logger = get_logger(__name__)

ROSTER_COLUMNS = ("id", "name", "house", "title", "salary", "birthdate")

DEFAULT_ROSTER: tuple[Member, ...] = (
    Member(1, "Eddard", House.STARK, Title.LORD, 100000.0, date(1959, 4, 17)),
    Member(2, "Catelyn", House.STARK, Title.LADY, 80000.0, date(1964, 1, 17)),
    Member(3, "Arya", House.STARK, Title.LADY, 50000.0, date(1997, 4, 15)),
    Member(4, "Sansa", House.STARK, Title.LADY, 60000.0, date(1996, 2, 21)),
    Member(5, "Bran", House.STARK, Title.SIR, 10000.0, date(1999, 4, 9)),
    Member(6, "Robb", House.STARK, Title.KING, 100000.0, date(1986, 6, 18)),
    Member(7, "Jon", House.SNOW, Title.KING, 90000.0, date(1986, 12, 26)),
    Member(8, "Jaime", House.LANNISTER, Title.SIR, 120000.0, date(1970, 7, 27)),
    Member(9, "Tyrion", House.LANNISTER, Title.LORD, 70000.0, date(1969, 6, 11)),
    Member(10, "Tywin", House.LANNISTER, Title.LORD, 200000.0, date(1946, 10, 10)),
    Member(11, "Cersei", House.LANNISTER, Title.LADY, 120000.0, date(1973, 10, 3)),
    Member(12, "Daenerys", House.TARGARYEN, Title.QUEEN, 130000.0, date(1987, 5, 1)),
    Member(13, "Viserys", House.TARGARYEN, Title.LORD, 100000.0, date(1983, 11, 17)),
    Member(14, "Robert", House.BARATHEON, Title.KING, 180000.0, date(1964, 1, 14)),
    Member(15, "Joffrey", House.BARATHEON, Title.KING, 100000.0, date(1992, 5, 20)),
    Member(16, "Tommen", House.BARATHEON, Title.KING, 60000.0, date(1997, 9, 7)),
    Member(17, "Stannis", House.BARATHEON, Title.KING, 123456.0, date(1957, 3, 27)),
    Member(18, "Margaery", House.TYRELL, Title.QUEEN, 80000.0, date(1982, 2, 11)),
    Member(19, "Loras", House.TYRELL, Title.SIR, 70000.0, date(1988, 3, 24)),
    Member(20, "Olenna", House.TYRELL, Title.LADY, 130000.0, date(1938, 7, 20)),
    Member(21, "Roose", House.BOLTON, Title.LORD, 100000.0, date(1963, 9, 12)),
    Member(22, "Ramsay", House.BOLTON, Title.PRINCE, 50000.0, date(1985, 5, 13)),
)


def member_from_row(row: dict) -> Member:
    """
    Convert a roster row to a Member domain object.

    House and title are matched by enum name, case-insensitively.

    Raises:
        KeyError: If a column is missing from the row.
        ValueError: If the house or title is unknown, the name is blank,
            the salary is not a finite number, or a value is malformed.
    """
    raw_house, raw_title = str(row["house"]), str(row["title"])
    try:
        house = House[raw_house.strip().upper()]
    except KeyError:
        raise ValueError(f"Unknown house: {raw_house!r}") from None
    try:
        title = Title[raw_title.strip().upper()]
    except KeyError:
        raise ValueError(f"Unknown title: {raw_title!r}") from None

    name = str(row["name"]).strip()
    if not name:
        raise ValueError("Member name is empty")
    salary = float(row["salary"])
    if not math.isfinite(salary):
        raise ValueError(f"Salary is not a finite number: {row['salary']!r}")

    return Member(
        id=int(row["id"]),
        name=name,
        house=house,
        title=title,
        salary=salary,
        birthdate=date.fromisoformat(str(row["birthdate"]).strip()),
    )


def load_members(csv_path: Optional[str] = None) -> tuple[Member, ...]:
    """
    Load the roster.

    Args:
        csv_path: CSV file with columns id,name,house,title,salary,birthdate.
            Falls back to ROSTER_CSV_PATH, then to the built-in roster.

    Returns:
        An immutable tuple of members, in file order.
    """
    path = csv_path or ROSTER_CSV_PATH
    if not path:
        logger.info(f"Using built-in roster ({len(DEFAULT_ROSTER)} members)")
        return DEFAULT_ROSTER

    try:
        # Names like "None" or "NA" are real names, not missing values.
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        missing = [c for c in ROSTER_COLUMNS if c not in df.columns]
        if missing:
            raise KeyError(f"Roster file is missing columns: {', '.join(missing)}")
        members = tuple(member_from_row(row) for row in df.to_dict(orient="records"))
    except (OSError, KeyError, ValueError) as e:
        logger.error(f"Failed to load roster from {path}: {e}")
        raise

    logger.info(f"Loaded {len(members)} members from {path}")
    return members
