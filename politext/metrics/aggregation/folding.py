"""Fold per-metric outcomes into a single long-format summary table."""

from __future__ import annotations

from dataclasses import asdict
from functools import reduce
from typing import Callable, Iterable, List, Optional, Sequence, TypeVar

import pandas as pd

from politext.errors import PolitextError
from politext.metrics.runner import MetricOutcome

from .records import AggregateRow, ScoreRecord
from .summary import AggregationConfig, aggregate_records

ResultT = TypeVar("ResultT")
Extractor = Callable[[ResultT], List[ScoreRecord]]

SUMMARY_COLUMNS = ["group", "week", "metric", "mean", "sd", "n", "se", "lower", "upper", "error"]


def rows_to_frame(rows: Sequence[AggregateRow]) -> pd.DataFrame:
    """Convert aggregate rows to a DataFrame with missing statistics as NaN."""
    frame = pd.DataFrame([asdict(row) for row in rows], columns=SUMMARY_COLUMNS)
    for column in ("mean", "sd", "se", "lower", "upper"):
        frame[column] = pd.to_numeric(frame[column], errors="coerce").astype(float)
    frame["n"] = frame["n"].astype(int)
    return frame


def missing_row(metric: str, error: str) -> AggregateRow:
    return AggregateRow(
        group="",
        metric=metric,
        mean=None,
        sd=None,
        n=0,
        se=None,
        lower=None,
        upper=None,
        error=error,
    )


def summarize_outcome(
    outcome: MetricOutcome,
    extract: Extractor,
    config: Optional[AggregationConfig] = None,
) -> pd.DataFrame:
    """Aggregate a single metric outcome; failures become one NA row."""
    if not outcome.ok:
        return rows_to_frame([missing_row(outcome.metric, outcome.error or "metric failed")])
    try:
        records = extract(outcome.result)
    except PolitextError as exc:
        print(f"[aggregate] {outcome.metric}: {exc}")
        return rows_to_frame([missing_row(outcome.metric, str(exc))])
    if not records:
        print(f"[aggregate] {outcome.metric}: no comparable groups.")
        return rows_to_frame([missing_row(outcome.metric, "no comparable groups")])
    return rows_to_frame(aggregate_records(records, config))


def summarize_outcomes(
    outcomes: Iterable[MetricOutcome],
    extract: Extractor,
    config: Optional[AggregationConfig] = None,
) -> pd.DataFrame:
    """Fold every outcome into one table, producing a fresh frame at each step."""

    def step(table: pd.DataFrame, outcome: MetricOutcome) -> pd.DataFrame:
        summary = summarize_outcome(outcome, extract, config)
        if table.empty:
            return summary
        if summary.empty:
            return table
        return pd.concat([table, summary], ignore_index=True)

    return reduce(step, outcomes, rows_to_frame([]))


def collect_records(outcomes: Iterable[MetricOutcome], extract: Extractor) -> pd.DataFrame:
    """Flatten the extracted records of every successful outcome into one frame."""
    rows: List[dict] = []
    for outcome in outcomes:
        if not outcome.ok:
            continue
        try:
            records = extract(outcome.result)
        except PolitextError:
            continue
        rows.extend(asdict(record) for record in records)
    return pd.DataFrame(rows, columns=["author", "metric", "value", "week", "document_id"])


__all__ = [
    "Extractor",
    "collect_records",
    "SUMMARY_COLUMNS",
    "missing_row",
    "rows_to_frame",
    "summarize_outcome",
    "summarize_outcomes",
]
