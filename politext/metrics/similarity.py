"""Pairwise similarity and distance measures between grouped documents."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Callable, Dict, Literal, Tuple, Union

import numpy as np
import pandas as pd
from scipy import sparse
from sklearn.metrics import pairwise_distances
from sklearn.metrics.pairwise import cosine_similarity, euclidean_distances, manhattan_distances

from politext.corpus.dfm import DocumentFeatureMatrix
from politext.corpus.grouping import GroupKey
from politext.errors import EmptyCorpus, ReferenceNotFound, UnsupportedMetric

PairwiseKind = Literal["similarity", "distance"]
PairwiseMetric = Literal[
    "correlation",
    "cosine",
    "dice",
    "edice",
    "jaccard",
    "ejaccard",
    "euclidean",
    "manhattan",
]
PairwiseFn = Callable[[sparse.csr_matrix], np.ndarray]


@dataclass(frozen=True)
class PairwiseSpec:
    """A named pairwise measure bound to the function that computes it."""

    name: str
    kind: PairwiseKind
    fn: PairwiseFn

    @property
    def identity(self) -> float:
        """Self-comparison value of the measure."""
        return 1.0 if self.kind == "similarity" else 0.0


@dataclass(frozen=True)
class ScoreMatrix:
    """Square group × group score table produced by one pairwise measure."""

    metric: str
    kind: PairwiseKind
    keys: Tuple[GroupKey, ...]
    values: np.ndarray

    def __post_init__(self) -> None:
        n = len(self.keys)
        if self.values.shape != (n, n):
            raise ValueError(f"Score matrix must be {n}×{n}, got shape {self.values.shape}")

    def index_of(self, key: Union[GroupKey, str]) -> int:
        target = key if isinstance(key, GroupKey) else GroupKey(author=key)
        try:
            return self.keys.index(target)
        except ValueError as exc:
            raise ReferenceNotFound(target) from exc

    def value(self, row: Union[GroupKey, str], column: Union[GroupKey, str]) -> float:
        return float(self.values[self.index_of(row), self.index_of(column)])

    def to_frame(self) -> pd.DataFrame:
        labels = [key.label for key in self.keys]
        return pd.DataFrame(self.values, index=labels, columns=labels)


# ---------------------------------------------------------------------------
# Measure implementations. Each takes the (groups × features) matrix.


def _correlation(features: sparse.csr_matrix) -> np.ndarray:
    dense = features.toarray()
    # Zero-variance rows have no defined correlation; numpy yields NaN for them.
    with warnings.catch_warnings(), np.errstate(divide="ignore", invalid="ignore"):
        warnings.simplefilter("ignore", RuntimeWarning)
        return np.atleast_2d(np.corrcoef(dense))


def _cosine(features: sparse.csr_matrix) -> np.ndarray:
    return cosine_similarity(features)


def _binary_similarity(metric: str) -> PairwiseFn:
    def compute(features: sparse.csr_matrix) -> np.ndarray:
        present = features.toarray() > 0
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", RuntimeWarning)
            return 1.0 - pairwise_distances(present, metric=metric)

    return compute


def _gram(features: sparse.csr_matrix) -> Tuple[np.ndarray, np.ndarray]:
    gram = np.asarray((features @ features.T).toarray(), dtype=float)
    squares = np.diag(gram)
    return gram, squares[:, None] + squares[None, :]


def _extended_dice(features: sparse.csr_matrix) -> np.ndarray:
    gram, total = _gram(features)
    with np.errstate(divide="ignore", invalid="ignore"):
        return 2.0 * gram / total


def _extended_jaccard(features: sparse.csr_matrix) -> np.ndarray:
    gram, total = _gram(features)
    with np.errstate(divide="ignore", invalid="ignore"):
        return gram / (total - gram)


def _euclidean(features: sparse.csr_matrix) -> np.ndarray:
    return euclidean_distances(features)


def _manhattan(features: sparse.csr_matrix) -> np.ndarray:
    return manhattan_distances(features)


PAIRWISE_REGISTRY: Dict[str, PairwiseSpec] = {
    "correlation": PairwiseSpec("correlation", "similarity", _correlation),
    "cosine": PairwiseSpec("cosine", "similarity", _cosine),
    "dice": PairwiseSpec("dice", "similarity", _binary_similarity("dice")),
    "edice": PairwiseSpec("edice", "similarity", _extended_dice),
    "jaccard": PairwiseSpec("jaccard", "similarity", _binary_similarity("jaccard")),
    "ejaccard": PairwiseSpec("ejaccard", "similarity", _extended_jaccard),
    "euclidean": PairwiseSpec("euclidean", "distance", _euclidean),
    "manhattan": PairwiseSpec("manhattan", "distance", _manhattan),
}


def get_pairwise_spec(name: str) -> PairwiseSpec:
    """Return the PairwiseSpec registered under ``name``."""
    try:
        return PAIRWISE_REGISTRY[name]
    except KeyError as exc:
        raise UnsupportedMetric(name, tuple(PAIRWISE_REGISTRY)) from exc


def _mask_empty_groups(values: np.ndarray, totals: np.ndarray) -> np.ndarray:
    empty = totals <= 0
    if not np.any(empty):
        return values
    masked = values.astype(float, copy=True)
    masked[empty, :] = np.nan
    masked[:, empty] = np.nan
    return masked


def compute_pairwise(dfm: DocumentFeatureMatrix, metric: str) -> ScoreMatrix:
    """Score every pair of groups in ``dfm`` with the named measure.

    Similarities involving a group without any terms are undefined and come
    back as NaN rather than 0. Distances stay defined for such groups.
    """
    spec = get_pairwise_spec(metric)
    if dfm.n_groups == 0:
        raise EmptyCorpus("Document-feature matrix has no groups to compare.")

    values = np.asarray(spec.fn(dfm.matrix), dtype=float)
    if spec.kind == "similarity":
        values = _mask_empty_groups(values, dfm.row_totals())
    return ScoreMatrix(metric=spec.name, kind=spec.kind, keys=dfm.keys, values=values)


__all__ = [
    "PAIRWISE_REGISTRY",
    "PairwiseKind",
    "PairwiseMetric",
    "PairwiseSpec",
    "ScoreMatrix",
    "compute_pairwise",
    "get_pairwise_spec",
]
