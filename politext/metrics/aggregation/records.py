"""Shared data records for metric aggregation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from politext.corpus.grouping import GroupKey


@dataclass(frozen=True)
class ScoreRecord:
    """Single extracted observation attributed to an author (and week)."""

    author: str
    metric: str
    value: float
    week: Optional[date] = None
    document_id: Optional[str] = None

    @property
    def key(self) -> GroupKey:
        return GroupKey(author=self.author, week=self.week)


@dataclass(frozen=True)
class AggregateRow:
    """Summary statistics of one metric for one group.

    Dispersion fields are None when fewer than two observations exist.
    """

    group: str
    metric: str
    mean: Optional[float]
    sd: Optional[float]
    n: int
    se: Optional[float]
    lower: Optional[float]
    upper: Optional[float]
    week: Optional[date] = None
    error: Optional[str] = None

    @property
    def has_interval(self) -> bool:
        return self.lower is not None and self.upper is not None
