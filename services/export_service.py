"""
services/export_service.py
---------------------------
Generates CSV and Excel exports of the roster.
"""

import io

import pandas as pd

from models.member import Member, natural_order
from repositories.member_repo import InMemoryMemberRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class ExportService:
    """Generates downloadable roster reports in CSV and Excel formats."""

    def __init__(self, repo: InMemoryMemberRepository):
        self.repo = repo

    def export_roster_csv(self) -> io.BytesIO:
        """
        Export all members, sorted by id, as a CSV file.

        Returns:
            A BytesIO buffer containing the CSV data.
        """
        data = self._member_rows()
        df = pd.DataFrame(data, columns=["id", "name", "house", "title", "salary", "birthdate"])
        buffer = io.BytesIO()
        df.to_csv(buffer, index=False, encoding="utf-8")
        buffer.seek(0)
        logger.info(f"Exported {len(data)} members as CSV")
        return buffer

    def export_house_stats_excel(self) -> io.BytesIO:
        """
        Export the roster and per-house salary stats as an Excel (.xlsx) file.

        Sheets:
            Members: one row per member, sorted by id.
            House stats: house, count, sum, min, max, average.

        Returns:
            A BytesIO buffer containing the Excel data.
        """
        members_df = pd.DataFrame(
            self._member_rows(),
            columns=["id", "name", "house", "title", "salary", "birthdate"],
        )
        stats = self.repo.house_salary_stats()
        stats_df = pd.DataFrame(
            [
                {
                    "house": house.value,
                    "count": s.count,
                    "sum": s.sum,
                    "min": s.min,
                    "max": s.max,
                    "average": s.average,
                }
                for house, s in sorted(stats.items(), key=lambda item: item[0].ordinal)
            ],
            columns=["house", "count", "sum", "min", "max", "average"],
        )

        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
            members_df.to_excel(writer, sheet_name="Members", index=False)
            stats_df.to_excel(writer, sheet_name="House stats", index=False)

        buffer.seek(0)
        logger.info(f"Exported {len(members_df)} members and {len(stats_df)} houses as Excel")
        return buffer

    def _member_rows(self) -> list[dict]:
        return [self._to_row(m) for m in sorted(self.repo.get_all(), key=natural_order)]

    @staticmethod
    def _to_row(member: Member) -> dict:
        """Flatten a Member to the roster file's column layout."""
        return {
            "id": member.id,
            "name": member.name,
            "house": member.house.name,
            "title": member.title.name,
            "salary": member.salary,
            "birthdate": member.birthdate.isoformat(),
        }
