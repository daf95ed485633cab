"""Evaluate a selection of metrics independently of one another."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, Sequence, TypeVar

from tqdm import tqdm

from politext.corpus.dfm import DocumentFeatureMatrix
from politext.datahub.document import Document
from politext.errors import EmptyCorpus

from .readability import ReadabilityScores, compute_readability
from .similarity import ScoreMatrix, compute_pairwise

ResultT = TypeVar("ResultT")


@dataclass(frozen=True)
class MetricOutcome(Generic[ResultT]):
    """Result of one metric evaluation, or the error that prevented it."""

    metric: str
    result: Optional[ResultT] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.result is not None


def run_metrics(
    metrics: Sequence[str],
    compute: Callable[[str], ResultT],
    desc: str = "Metrics",
) -> List[MetricOutcome[ResultT]]:
    """Call ``compute`` once per metric, capturing failures instead of aborting."""
    outcomes: List[MetricOutcome[ResultT]] = []
    for metric in tqdm(metrics, desc=desc, leave=False):
        try:
            result = compute(metric)
        except Exception as exc:
            error = f"{type(exc).__name__}: {exc}"
            print(f"[runner] Skipping metric '{metric}': {error}")
            outcomes.append(MetricOutcome(metric=metric, error=error))
            continue
        outcomes.append(MetricOutcome(metric=metric, result=result))
    return outcomes


def run_pairwise_metrics(dfm: DocumentFeatureMatrix, metrics: Sequence[str]) -> List[MetricOutcome[ScoreMatrix]]:
    if dfm.n_groups == 0:
        raise EmptyCorpus("Document-feature matrix has no groups to compare.")
    return run_metrics(metrics, lambda metric: compute_pairwise(dfm, metric), desc="Pairwise metrics")


def run_readability_metrics(
    documents: Sequence[Document],
    metrics: Sequence[str],
) -> List[MetricOutcome[ReadabilityScores]]:
    if not documents:
        raise EmptyCorpus("Cannot compute readability without documents.")
    return run_metrics(metrics, lambda metric: compute_readability(documents, metric), desc="Readability")


__all__ = ["MetricOutcome", "run_metrics", "run_pairwise_metrics", "run_readability_metrics"]
