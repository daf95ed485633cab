from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import List, Optional, Sequence

import pandas as pd

from politext.corpus import DfmConfig, MONDAY, build_dfm, group_by_author, group_by_author_week
from politext.datahub import Document
from politext.metrics import (
    MetricOutcome,
    ScoreMatrix,
    extract_reference,
    extract_reference_by_week,
    run_pairwise_metrics,
)
from politext.metrics.aggregation import AggregationConfig, collect_records, summarize_outcomes


@dataclass(frozen=True)
class SimilarityRun:
    """Everything a presenter needs from one similarity experiment."""

    reference: str
    summary: pd.DataFrame
    records: pd.DataFrame
    outcomes: List[MetricOutcome[ScoreMatrix]]
    by_week: bool = False


def run_similarity(
    documents: Sequence[Document],
    reference: str,
    metrics: Sequence[str],
    dfm_config: Optional[DfmConfig] = None,
    by_week: bool = False,
    week_start: int = MONDAY,
    aggregation: Optional[AggregationConfig] = None,
) -> SimilarityRun:
    """Compare every author with ``reference`` under each pairwise metric.

    With ``by_week`` each author-week is compared with the reference's text of
    the same week, and the summary averages those weekly scores per author.
    """
    key_fn = group_by_author_week(week_start) if by_week else group_by_author
    dfm = build_dfm(documents, key_fn=key_fn, config=dfm_config)
    print(f"[similarity] Built DFM with {dfm.n_groups} groups × {dfm.n_features} features.")

    outcomes = run_pairwise_metrics(dfm, metrics)
    if by_week:
        extract = partial(extract_reference_by_week, reference_author=reference)
    else:
        extract = partial(extract_reference, reference=reference)

    summary = summarize_outcomes(outcomes, extract, aggregation)
    records = collect_records(outcomes, extract)
    failed = [outcome.metric for outcome in outcomes if not outcome.ok]
    print(
        f"[similarity] Aggregated {len(outcomes) - len(failed)} metrics into {len(summary)} rows"
        + (f" (failed: {', '.join(failed)})." if failed else ".")
    )
    return SimilarityRun(reference=reference, summary=summary, records=records, outcomes=outcomes, by_week=by_week)
