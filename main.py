"""
main.py
-------
Entry point for the roster query layer.

Responsibilities:
    - Load the roster (built-in or from ROSTER_CSV_PATH).
    - Build the member repository around it.
    - Log a roster overview and a summary for every house.
"""

from db.member_db import load_members
from models.member import House
from repositories.member_repo import InMemoryMemberRepository
from services.roster_service import RosterService
from utils.logger import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Load the roster and log its reports."""
    repo = InMemoryMemberRepository(load_members())
    roster_service = RosterService(repo)

    logger.info("\n" + roster_service.overview())
    for house in House:
        if repo.any_in_house(house):
            logger.info("\n" + roster_service.house_summary(house))


if __name__ == "__main__":
    main()
