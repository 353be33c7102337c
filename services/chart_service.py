"""
services/chart_service.py
--------------------------
Generates chart images for salary analysis.
Uses matplotlib to create bar charts and returns them as BytesIO buffers.
"""

import io

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend
import matplotlib.pyplot as plt

from config import CURRENCY_SYMBOL
from repositories.member_repo import InMemoryMemberRepository
from utils.logger import get_logger

logger = get_logger(__name__)

plt.rcParams["figure.facecolor"] = "#1a1a2e"
plt.rcParams["text.color"] = "#e0e0e0"
plt.rcParams["axes.facecolor"] = "#1a1a2e"

_HOUSE_COLORS = [
    "#FF6B6B", "#4ECDC4", "#45B7D1", "#96CEB4",
    "#FFEAA7", "#DDA0DD", "#98D8C8", "#F7DC6F",
    "#BB8FCE", "#85C1E9", "#F1948A", "#82E0AA",
]


class ChartService:
    """Generates visual charts for roster salary data."""

    def __init__(self, repo: InMemoryMemberRepository):
        self.repo = repo

    def house_salary_bar(self) -> io.BytesIO | None:
        """
        Generate a bar chart of the average salary in each house.

        Returns:
            BytesIO buffer with PNG image, or None if the roster is empty.
        """
        stats = self.repo.house_salary_stats()
        if not stats:
            return None

        houses = sorted(stats, key=lambda h: h.ordinal)
        averages = [stats[h].average for h in houses]

        fig, ax = plt.subplots(figsize=(9, 5))

        bars = ax.bar(
            range(len(houses)), averages,
            color=[_HOUSE_COLORS[h.ordinal % len(_HOUSE_COLORS)] for h in houses],
            edgecolor="#1a1a2e",
            linewidth=1.5,
            width=0.6,
            zorder=3,
        )

        for bar, avg in zip(bars, averages):
            ax.text(
                bar.get_x() + bar.get_width() / 2, bar.get_height(),
                f"{avg:,.0f}",
                ha="center", va="bottom",
                color="#e0e0e0", fontsize=9, fontweight="bold",
            )

        ax.set_xticks(range(len(houses)))
        ax.set_xticklabels([h.value for h in houses], fontsize=9, color="#e0e0e0", rotation=30)
        ax.set_ylabel(f"Average salary ({CURRENCY_SYMBOL})", fontsize=11, color="#e0e0e0")
        ax.set_title(
            f"Average salary by house\nRoster average: {self.repo.average_salary():,.2f} {CURRENCY_SYMBOL}",
            fontsize=13, fontweight="bold", pad=15,
        )

        ax.spines["top"].set_visible(False)
        ax.spines["right"].set_visible(False)
        ax.spines["left"].set_color("#444")
        ax.spines["bottom"].set_color("#444")
        ax.tick_params(colors="#e0e0e0")
        ax.grid(axis="y", alpha=0.2, color="#888")
        ax.set_axisbelow(True)

        plt.tight_layout()

        buf = io.BytesIO()
        fig.savefig(buf, format="png", dpi=150, bbox_inches="tight",
                    facecolor=fig.get_facecolor())
        buf.seek(0)
        plt.close(fig)

        logger.info(f"Generated salary bar chart for {len(houses)} houses")
        return buf
