"""Per-group descriptive statistics with normal-approximation intervals."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from politext.errors import UndefinedStatistic

from .records import AggregateRow, ScoreRecord

Z_95 = 1.96


@dataclass(frozen=True)
class AggregationConfig:
    """Options for `aggregate_records`."""

    z: float = Z_95
    by_week: bool = False

    def validate(self) -> None:
        if not np.isfinite(self.z) or self.z <= 0:
            raise ValueError("z must be a finite, strictly positive number.")


def standard_error(sd: float, n: int) -> float:
    """Return SD/√N, refusing samples too small to carry a dispersion estimate."""
    if n < 2:
        raise UndefinedStatistic(f"Standard error needs at least two observations, got {n}.")
    if not math.isfinite(sd):
        raise UndefinedStatistic("Standard deviation is not finite.")
    return sd / math.sqrt(n)


def confidence_interval(mean: float, se: float, z: float = Z_95) -> Tuple[float, float]:
    return mean - z * se, mean + z * se


def _optional(value: Optional[float]) -> Optional[float]:
    return None if value is None or not math.isfinite(value) else float(value)


def summarize_values(values: Sequence[float], z: float = Z_95) -> Tuple[
    Optional[float], Optional[float], int, Optional[float], Optional[float], Optional[float]
]:
    """Return (mean, sd, n, se, lower, upper) for ``values``, ignoring NaN entries."""
    arr = np.asarray(values, dtype=float)
    arr = arr[np.isfinite(arr)]
    n = int(arr.size)
    if n == 0:
        return None, None, 0, None, None, None

    mean = float(arr.mean())
    sd = float(arr.std(ddof=1)) if n > 1 else math.nan
    try:
        se = standard_error(sd, n)
    except UndefinedStatistic:
        return mean, None, n, None, None, None
    lower, upper = confidence_interval(mean, se, z)
    return mean, sd, n, se, lower, upper


def aggregate_records(
    records: Iterable[ScoreRecord],
    config: Optional[AggregationConfig] = None,
) -> List[AggregateRow]:
    """Group records by (metric, author[, week]) and summarise each group."""
    cfg = config or AggregationConfig()
    cfg.validate()

    frame = pd.DataFrame(
        [
            {"metric": record.metric, "author": record.author, "week": record.week, "value": record.value}
            for record in records
        ],
        columns=["metric", "author", "week", "value"],
    )
    if frame.empty:
        return []

    keys = ["metric", "author", "week"] if cfg.by_week else ["metric", "author"]
    rows: List[AggregateRow] = []
    for group_key, group in frame.groupby(keys, sort=True, dropna=False):
        metric, author = group_key[0], group_key[1]
        week = group_key[2] if cfg.by_week else None
        mean, sd, n, se, lower, upper = summarize_values(group["value"].to_numpy(dtype=float), cfg.z)
        rows.append(
            AggregateRow(
                group=str(author),
                metric=str(metric),
                mean=_optional(mean),
                sd=_optional(sd),
                n=n,
                se=_optional(se),
                lower=_optional(lower),
                upper=_optional(upper),
                week=week,
            )
        )
    return rows


__all__ = [
    "AggregationConfig",
    "Z_95",
    "aggregate_records",
    "confidence_interval",
    "standard_error",
    "summarize_values",
]
