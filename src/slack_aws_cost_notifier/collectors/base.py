"""Base types for cost collectors."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from enum import Enum


class Granularity(str, Enum):
    """Cost Explorer time bucketing. Values are the API tokens."""

    MONTHLY = "MONTHLY"
    DAILY = "DAILY"
    HOURLY = "HOURLY"


@dataclass(frozen=True)
class DateInterval:
    """
    Query window for a billing request.

    ``start`` is inclusive and ``end`` exclusive, matching Cost Explorer's
    TimePeriod semantics.
    """

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start >= self.end:
            raise ValueError(
                f"Interval start {self.start} must be before end {self.end}"
            )

    @property
    def start_str(self) -> str:
        """Start date as YYYY-MM-DD."""
        return self.start.isoformat()

    @property
    def end_str(self) -> str:
        """End date as YYYY-MM-DD."""
        return self.end.isoformat()

    def as_time_period(self) -> dict[str, str]:
        """Return the Cost Explorer ``TimePeriod`` mapping."""
        return {"Start": self.start_str, "End": self.end_str}


@dataclass
class Cost:
    """A single cost figure distilled from a billing report."""

    amount: float
    unit: str = ""


class CostCollector(ABC):
    """Abstract base class for cost collectors."""

    @abstractmethod
    def collect(self, as_of: date | None = None) -> Cost:
        """
        Collect the cost for the window ending at ``as_of``.

        Args:
            as_of: Exclusive end of the query window. Defaults to today (UTC).

        Returns:
            Cost: Distilled amount and currency unit.
        """
        pass

    @property
    @abstractmethod
    def collector_name(self) -> str:
        """Return the name of this collector."""
        pass
