"""Aggregation helpers for turning extracted scores into author summaries."""

from .folding import SUMMARY_COLUMNS, collect_records, rows_to_frame, summarize_outcome, summarize_outcomes
from .records import AggregateRow, ScoreRecord
from .summary import AggregationConfig, aggregate_records, confidence_interval, standard_error, summarize_values

__all__ = [
    "AggregateRow",
    "AggregationConfig",
    "SUMMARY_COLUMNS",
    "ScoreRecord",
    "aggregate_records",
    "collect_records",
    "confidence_interval",
    "rows_to_frame",
    "standard_error",
    "summarize_outcome",
    "summarize_outcomes",
    "summarize_values",
]
