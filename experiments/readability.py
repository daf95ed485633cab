from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

import pandas as pd

from politext.datahub import Document
from politext.metrics import MetricOutcome, ReadabilityScores, run_readability_metrics, tag_document_scores
from politext.metrics.aggregation import AggregationConfig, collect_records, summarize_outcomes


@dataclass(frozen=True)
class ReadabilityRun:
    summary: pd.DataFrame
    records: pd.DataFrame
    outcomes: List[MetricOutcome[ReadabilityScores]]


def run_readability(
    documents: Sequence[Document],
    metrics: Sequence[str],
    aggregation: Optional[AggregationConfig] = None,
) -> ReadabilityRun:
    """Score every document with each formula and summarise the scores per author."""
    print(f"[readability] Scoring {len(documents)} documents with {', '.join(metrics)}.")
    outcomes = run_readability_metrics(documents, metrics)
    summary = summarize_outcomes(outcomes, tag_document_scores, aggregation)
    records = collect_records(outcomes, tag_document_scores)
    print(f"[readability] Aggregation complete ({len(summary)} rows).")
    return ReadabilityRun(summary=summary, records=records, outcomes=outcomes)
