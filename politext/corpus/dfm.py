"""Document-feature matrix construction over grouped documents."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Dict, Literal, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
from scipy import sparse
from sklearn.feature_extraction.text import CountVectorizer
from sklearn.preprocessing import normalize

from politext.datahub.document import Document
from politext.errors import EmptyCorpus

from .grouping import GroupKey, KeyFn, build_group_plan, group_by_author

Weighting = Literal["count", "prop", "boolean"]
WEIGHTINGS: Tuple[Weighting, ...] = ("count", "prop", "boolean")

_URL_PATTERN = re.compile(r"https?://\S+|www\.\S+")
_MENTION_PATTERN = re.compile(r"@\w+")


@dataclass(frozen=True)
class DfmConfig:
    """Tokenisation and weighting options for `build_dfm`."""

    lowercase: bool = True
    remove_stopwords: bool = True
    strip_urls: bool = True
    strip_mentions: bool = False
    min_token_length: int = 2
    weighting: Weighting = "count"

    def validate(self) -> None:
        if self.min_token_length < 1:
            raise ValueError("min_token_length must be at least 1.")
        if self.weighting not in WEIGHTINGS:
            raise ValueError(f"Unknown weighting '{self.weighting}'. Available: {', '.join(WEIGHTINGS)}")

    def preprocessor(self) -> Callable[[str], str]:
        def preprocess(text: str) -> str:
            if self.strip_urls:
                text = _URL_PATTERN.sub(" ", text)
            if self.strip_mentions:
                text = _MENTION_PATTERN.sub(" ", text)
            return text.lower() if self.lowercase else text

        return preprocess


@dataclass(frozen=True)
class DocumentFeatureMatrix:
    """Sparse term matrix with one row per group."""

    matrix: sparse.csr_matrix
    keys: Tuple[GroupKey, ...]
    vocabulary: Tuple[str, ...]
    document_counts: Tuple[int, ...]

    @property
    def n_groups(self) -> int:
        return len(self.keys)

    @property
    def n_features(self) -> int:
        return len(self.vocabulary)

    def index_of(self, key: GroupKey) -> int:
        return self.keys.index(key)

    def row_totals(self) -> np.ndarray:
        return np.asarray(self.matrix.sum(axis=1), dtype=float).ravel()

    def to_frame(self) -> pd.DataFrame:
        """Dense labelled copy; only sensible for small corpora."""
        return pd.DataFrame(
            self.matrix.toarray(),
            index=[key.label for key in self.keys],
            columns=list(self.vocabulary),
        )


def build_dfm(
    documents: Sequence[Document],
    key_fn: KeyFn = group_by_author,
    config: Optional[DfmConfig] = None,
) -> DocumentFeatureMatrix:
    """Tokenise ``documents`` and sum their term counts per group key."""
    if not documents:
        raise EmptyCorpus("Cannot build a document-feature matrix without documents.")

    cfg = config or DfmConfig()
    cfg.validate()

    vectorizer = CountVectorizer(
        preprocessor=cfg.preprocessor(),
        token_pattern=rf"(?u)\b\w{{{cfg.min_token_length},}}\b",
        stop_words="english" if cfg.remove_stopwords else None,
    )
    try:
        counts = vectorizer.fit_transform([document.text for document in documents])
    except ValueError as exc:
        raise EmptyCorpus(f"No usable terms after tokenisation: {exc}") from exc

    plan = build_group_plan(documents, key_fn)
    row_of: Dict[GroupKey, int] = {key: idx for idx, key in enumerate(plan.keys)}
    rows = [row_of[key] for key, members in plan.indices.items() for _ in members]
    cols = [member for members in plan.indices.values() for member in members]
    # Indicator matrix (groups × documents) so grouping is a single sparse product.
    indicator = sparse.csr_matrix(
        (np.ones(len(cols), dtype=float), (rows, cols)),
        shape=(len(plan.keys), len(documents)),
    )
    grouped = sparse.csr_matrix(indicator @ counts.astype(float))

    if cfg.weighting == "prop":
        grouped = sparse.csr_matrix(normalize(grouped, norm="l1", axis=1))
    elif cfg.weighting == "boolean":
        grouped = sparse.csr_matrix((grouped > 0).astype(float))

    return DocumentFeatureMatrix(
        matrix=grouped,
        keys=tuple(plan.keys),
        vocabulary=tuple(vectorizer.get_feature_names_out()),
        document_counts=tuple(len(plan.indices[key]) for key in plan.keys),
    )


__all__ = ["DfmConfig", "DocumentFeatureMatrix", "WEIGHTINGS", "Weighting", "build_dfm"]
