"""Tests for pairwise similarity and distance measures."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
import math
import sys

import numpy as np
import pytest
from scipy import sparse

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from politext.corpus.dfm import DocumentFeatureMatrix, build_dfm
from politext.corpus.grouping import GroupKey
from politext.datahub.document import Document
from politext.errors import EmptyCorpus, UnsupportedMetric
from politext.metrics.extraction import extract_reference
from politext.metrics.similarity import PAIRWISE_REGISTRY, ScoreMatrix, compute_pairwise, get_pairwise_spec

SIMILARITIES = [name for name, spec in PAIRWISE_REGISTRY.items() if spec.kind == "similarity"]
DISTANCES = [name for name, spec in PAIRWISE_REGISTRY.items() if spec.kind == "distance"]


def _doc(author: str, text: str) -> Document:
    return Document(doc_id=f"{author}-{len(text)}", author=author, text=text, timestamp=datetime(2018, 1, 3))


@pytest.fixture()
def toy_dfm() -> DocumentFeatureMatrix:
    # Vocabulary: brexit, deal, economy, growth, tax
    # pm    -> [0, 0, 1, 1, 1]
    # alice -> [0, 0, 1, 0, 1]
    # bob   -> [1, 1, 0, 0, 0]
    return build_dfm(
        [
            _doc("pm", "tax economy growth"),
            _doc("alice", "tax economy"),
            _doc("bob", "brexit deal"),
        ]
    )


# ---------------------------------------------------------------------------
# Identity and symmetry


@pytest.mark.parametrize("metric", SIMILARITIES)
def test_similarity_diagonal_is_one(toy_dfm: DocumentFeatureMatrix, metric: str) -> None:
    result = compute_pairwise(toy_dfm, metric)
    assert result.kind == "similarity"
    assert np.allclose(np.diag(result.values), 1.0)
    assert np.allclose(result.values, result.values.T)


@pytest.mark.parametrize("metric", DISTANCES)
def test_distance_diagonal_is_zero(toy_dfm: DocumentFeatureMatrix, metric: str) -> None:
    result = compute_pairwise(toy_dfm, metric)
    assert result.kind == "distance"
    assert np.allclose(np.diag(result.values), 0.0)
    assert np.all(result.values >= 0)


def test_spec_identity_values() -> None:
    assert get_pairwise_spec("cosine").identity == 1.0
    assert get_pairwise_spec("manhattan").identity == 0.0


# ---------------------------------------------------------------------------
# Hand-computed values


def test_cosine_ranking_matches_term_frequency_vectors(toy_dfm: DocumentFeatureMatrix) -> None:
    cosine = compute_pairwise(toy_dfm, "cosine")

    assert cosine.value("pm", "alice") == pytest.approx(2 / (math.sqrt(3) * math.sqrt(2)))
    assert cosine.value("pm", "bob") == pytest.approx(0.0)

    records = extract_reference(cosine, "pm")
    ranking = [record.author for record in sorted(records, key=lambda record: record.value, reverse=True)]
    assert ranking == ["alice", "bob"]


def test_overlap_measures_match_hand_computation(toy_dfm: DocumentFeatureMatrix) -> None:
    assert compute_pairwise(toy_dfm, "dice").value("pm", "alice") == pytest.approx(0.8)
    assert compute_pairwise(toy_dfm, "edice").value("pm", "alice") == pytest.approx(0.8)
    assert compute_pairwise(toy_dfm, "jaccard").value("pm", "alice") == pytest.approx(2 / 3)
    assert compute_pairwise(toy_dfm, "ejaccard").value("pm", "alice") == pytest.approx(2 / 3)
    assert compute_pairwise(toy_dfm, "dice").value("pm", "bob") == pytest.approx(0.0)


def test_distances_match_hand_computation(toy_dfm: DocumentFeatureMatrix) -> None:
    assert compute_pairwise(toy_dfm, "euclidean").value("pm", "alice") == pytest.approx(1.0)
    assert compute_pairwise(toy_dfm, "manhattan").value("pm", "bob") == pytest.approx(5.0)


def test_correlation_is_negative_for_disjoint_vocabularies(toy_dfm: DocumentFeatureMatrix) -> None:
    correlation = compute_pairwise(toy_dfm, "correlation")
    assert correlation.value("pm", "bob") < 0
    assert correlation.value("pm", "alice") > 0


# ---------------------------------------------------------------------------
# Determinism, missing values and errors


@pytest.mark.parametrize("metric", list(PAIRWISE_REGISTRY))
def test_pairwise_is_deterministic(toy_dfm: DocumentFeatureMatrix, metric: str) -> None:
    first = compute_pairwise(toy_dfm, metric)
    second = compute_pairwise(toy_dfm, metric)
    assert np.array_equal(first.values, second.values, equal_nan=True)


def test_empty_group_similarity_is_missing_not_zero() -> None:
    dfm = build_dfm([_doc("pm", "tax economy"), _doc("carol", "the and of")])

    cosine = compute_pairwise(dfm, "cosine")
    euclidean = compute_pairwise(dfm, "euclidean")

    assert math.isnan(cosine.value("pm", "carol"))
    assert math.isnan(cosine.value("carol", "carol"))
    assert cosine.value("pm", "pm") == pytest.approx(1.0)
    assert euclidean.value("pm", "carol") == pytest.approx(math.sqrt(2))


def test_unsupported_metric() -> None:
    dfm = build_dfm([_doc("pm", "tax economy")])
    with pytest.raises(UnsupportedMetric):
        compute_pairwise(dfm, "levenshtein")


def test_empty_matrix_raises() -> None:
    empty = DocumentFeatureMatrix(
        matrix=sparse.csr_matrix((0, 0)),
        keys=(),
        vocabulary=(),
        document_counts=(),
    )
    with pytest.raises(EmptyCorpus):
        compute_pairwise(empty, "cosine")


def test_score_matrix_validates_shape_and_labels() -> None:
    with pytest.raises(ValueError):
        ScoreMatrix(metric="cosine", kind="similarity", keys=(GroupKey("pm"),), values=np.zeros((2, 2)))

    matrix = ScoreMatrix(
        metric="cosine",
        kind="similarity",
        keys=(GroupKey("alice"), GroupKey("pm")),
        values=np.array([[1.0, 0.5], [0.5, 1.0]]),
    )
    frame = matrix.to_frame()
    assert list(frame.index) == ["alice", "pm"]
    assert frame.loc["alice", "pm"] == pytest.approx(0.5)
