"""Metric registry, runners, extractors and aggregation."""

from .readability import READABILITY_REGISTRY, ReadabilityScores, compute_readability
from .similarity import PAIRWISE_REGISTRY, ScoreMatrix, compute_pairwise
from .registry import DEFAULT_PAIRWISE, DEFAULT_READABILITY, available_metrics, default_metrics, metric_kind
from .selection import select_metrics
from .runner import MetricOutcome, run_metrics, run_pairwise_metrics, run_readability_metrics
from .extraction import extract_reference, extract_reference_by_week, tag_document_scores
from .aggregation import AggregateRow, AggregationConfig, ScoreRecord, aggregate_records, summarize_outcomes

__all__ = [
    "AggregateRow",
    "AggregationConfig",
    "DEFAULT_PAIRWISE",
    "DEFAULT_READABILITY",
    "MetricOutcome",
    "PAIRWISE_REGISTRY",
    "READABILITY_REGISTRY",
    "ReadabilityScores",
    "ScoreMatrix",
    "ScoreRecord",
    "aggregate_records",
    "available_metrics",
    "compute_pairwise",
    "compute_readability",
    "default_metrics",
    "extract_reference",
    "extract_reference_by_week",
    "metric_kind",
    "run_metrics",
    "run_pairwise_metrics",
    "run_readability_metrics",
    "select_metrics",
    "summarize_outcomes",
    "tag_document_scores",
]
