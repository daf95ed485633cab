"""Per-document readability formulas backed by textstat."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, Literal, Sequence, Tuple

import pandas as pd
import textstat

from politext.datahub.document import Document
from politext.errors import EmptyCorpus, UnsupportedMetric

ReadabilityMetric = Literal[
    "Flesch.Kincaid",
    "SMOG",
    "Flesch",
    "Dale.Chall",
    "Coleman.Liau",
    "ARI",
    "FOG",
]


@dataclass(frozen=True)
class FormulaSpec:
    name: str
    fn: Callable[[str], float]
    higher_is_harder: bool = True


READABILITY_REGISTRY: Dict[str, FormulaSpec] = {
    "Flesch.Kincaid": FormulaSpec("Flesch.Kincaid", textstat.flesch_kincaid_grade),
    "SMOG": FormulaSpec("SMOG", textstat.smog_index),
    # Reading ease runs the other way round: higher scores are easier text.
    "Flesch": FormulaSpec("Flesch", textstat.flesch_reading_ease, higher_is_harder=False),
    "Dale.Chall": FormulaSpec("Dale.Chall", textstat.dale_chall_readability_score),
    "Coleman.Liau": FormulaSpec("Coleman.Liau", textstat.coleman_liau_index),
    "ARI": FormulaSpec("ARI", textstat.automated_readability_index),
    "FOG": FormulaSpec("FOG", textstat.gunning_fog),
}


@dataclass(frozen=True)
class DocumentScore:
    doc_id: str
    author: str
    timestamp: datetime
    value: float


@dataclass(frozen=True)
class ReadabilityScores:
    """One readability value per document for a single formula."""

    metric: str
    scores: Tuple[DocumentScore, ...]

    def __len__(self) -> int:
        return len(self.scores)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "doc_id": [score.doc_id for score in self.scores],
                "author": [score.author for score in self.scores],
                "timestamp": [score.timestamp for score in self.scores],
                "metric": self.metric,
                "value": [score.value for score in self.scores],
            }
        )


def get_formula_spec(name: str) -> FormulaSpec:
    """Return the FormulaSpec registered under ``name``."""
    try:
        return READABILITY_REGISTRY[name]
    except KeyError as exc:
        raise UnsupportedMetric(name, tuple(READABILITY_REGISTRY)) from exc


def score_text(text: str, metric: str) -> float:
    """Apply one formula to ``text``; blank text has no defined score (NaN)."""
    spec = get_formula_spec(metric)
    if not text or not text.strip():
        return math.nan
    return float(spec.fn(text))


def scale_direction(metric: str) -> str:
    """Describe which end of a formula's scale marks harder text."""
    spec = get_formula_spec(metric)
    return "higher = harder" if spec.higher_is_harder else "higher = easier"


def compute_readability(documents: Sequence[Document], metric: str) -> ReadabilityScores:
    """Score every document with the named readability formula."""
    spec = get_formula_spec(metric)
    if not documents:
        raise EmptyCorpus("Cannot compute readability without documents.")

    scores = tuple(
        DocumentScore(
            doc_id=document.doc_id,
            author=document.author,
            timestamp=document.timestamp,
            value=score_text(document.text, spec.name),
        )
        for document in documents
    )
    return ReadabilityScores(metric=spec.name, scores=scores)


__all__ = [
    "DocumentScore",
    "FormulaSpec",
    "READABILITY_REGISTRY",
    "ReadabilityMetric",
    "ReadabilityScores",
    "compute_readability",
    "get_formula_spec",
    "scale_direction",
    "score_text",
]
