"""
models/salary_stats.py
----------------------
Summary statistics over a group of salaries.
"""

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class SalaryStats:
    """
    Count, sum, min and max of a non-empty group of salaries.

    Attributes:
        count: Number of salaries in the group.
        sum: Total of all salaries.
        min: Lowest salary.
        max: Highest salary.
    """
    count: int
    sum: float
    min: float
    max: float

    @property
    def average(self) -> float:
        return self.sum / self.count

    @classmethod
    def of(cls, salaries: Iterable[float]) -> "SalaryStats":
        """
        Build stats from salaries.

        Raises:
            ValueError: If `salaries` is empty.
        """
        values = list(salaries)
        if not values:
            raise ValueError("SalaryStats requires at least one salary.")
        return cls(
            count=len(values),
            sum=float(sum(values)),
            min=float(min(values)),
            max=float(max(values)),
        )

    def __str__(self) -> str:
        return (
            f"count={self.count} min={self.min:.2f} "
            f"avg={self.average:.2f} max={self.max:.2f}"
        )
