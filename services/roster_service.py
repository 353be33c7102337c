"""
services/roster_service.py
---------------------------
Builds human-readable roster reports on top of the member repository.
"""

from config import CURRENCY_SYMBOL, SALARY_ALERT_THRESHOLD
from models.member import House
from models.salary_stats import SalaryStats
from repositories.member_repo import InMemoryMemberRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class RosterService:
    """
    Turns query results into text summaries.

    Workflow:
        1. Query the repository.
        2. Format the numbers with the configured currency.
        3. Return a multi-line report string.
    """

    def __init__(self, repo: InMemoryMemberRepository):
        self.repo = repo

    def house_summary(self, house: House) -> str:
        """Member count, names and salary range for one house."""
        count = self.repo.count_in_house(house)
        if count == 0:
            return f"📭 House {house.value} has no members."

        stats = SalaryStats.of(m.salary for m in self.repo.find_all_by_house(house))
        lines = [f"🏰 House {house.value} ({count} members)\n"]
        lines.append(f"  👥 {self.repo.names_joined_by_house(house)}")
        lines.append(f"  🔻 Lowest salary: {stats.min:.2f} {CURRENCY_SYMBOL}")
        lines.append(f"  ➗ Average salary: {stats.average:.2f} {CURRENCY_SYMBOL}")
        lines.append(f"  🔺 Highest salary: {stats.max:.2f} {CURRENCY_SYMBOL}")
        return "\n".join(lines)

    def overview(self) -> str:
        """Roster-wide totals, top earner, per-house counts and royalty split."""
        members = self.repo.get_all()
        if not members:
            return "📭 The roster is empty."

        top = self.repo.highest_salary()
        partition = self.repo.royalty_partition()

        lines = [f"📜 Roster overview ({len(members)} members)\n"]
        lines.append(f"💰 Average salary: {self.repo.average_salary():.2f} {CURRENCY_SYMBOL}")
        lines.append(f"👑 Top earner: {top} ({top.salary:.2f} {CURRENCY_SYMBOL})")
        lines.append(f"🤴 Royalty: {len(partition[True])} | Others: {len(partition[False])}\n")

        lines.append("🏰 Members by house:")
        counts = self.repo.count_by_house()
        for house in sorted(counts, key=lambda h: h.ordinal):
            lines.append(f"  • {house.value}: {counts[house]}")

        if self.repo.any_salary_greater_than(SALARY_ALERT_THRESHOLD):
            lines.append(
                f"\n⚠️ At least one salary exceeds {SALARY_ALERT_THRESHOLD:.2f} {CURRENCY_SYMBOL}"
            )

        logger.info(f"Built overview for {len(members)} members")
        return "\n".join(lines)
