"""Tests for the similarity and readability run drivers."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
import math
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import politext.metrics.readability as readability_module
from experiments.readability import run_readability
from experiments.similarity import run_similarity
from politext.datahub.document import Document
from politext.metrics.readability import FormulaSpec


def _doc(idx: int, author: str, text: str, day: int) -> Document:
    return Document(doc_id=f"d{idx}", author=author, text=text, timestamp=datetime(2018, 1, day))


def _cabinet() -> list[Document]:
    return [
        _doc(0, "pm", "Strong economy and lower taxes", 2),
        _doc(1, "alice", "Lower taxes build a strong economy", 3),
        _doc(2, "bob", "Brexit talks in Brussels", 4),
    ]


# ---------------------------------------------------------------------------
# Similarity driver


def test_run_similarity_absent_reference_yields_missing_rows() -> None:
    run = run_similarity(_cabinet(), reference="theresa_may", metrics=["cosine", "euclidean"])

    summary = run.summary
    assert list(summary["metric"]) == ["cosine", "euclidean"]
    assert list(summary["n"]) == [0, 0]
    assert summary["mean"].isna().all()
    assert all("theresa_may" in error for error in summary["error"])
    assert run.records.empty


def test_run_similarity_failed_metric_next_to_successful_one() -> None:
    run = run_similarity(_cabinet(), reference="pm", metrics=["cosine", "levenshtein"])

    summary = run.summary
    cosine = summary[summary["metric"] == "cosine"]
    assert sorted(cosine["group"]) == ["alice", "bob"]
    assert cosine["error"].isna().all()

    failed = summary[summary["metric"] == "levenshtein"]
    assert len(failed) == 1
    assert failed.iloc[0]["n"] == 0
    assert math.isnan(failed.iloc[0]["mean"])
    assert failed.iloc[0]["error"].startswith("UnsupportedMetric:")
    assert [outcome.ok for outcome in run.outcomes] == [True, False]


def test_run_similarity_reference_only_corpus() -> None:
    documents = [_doc(0, "pm", "Strong economy and lower taxes", 2)]
    run = run_similarity(documents, reference="pm", metrics=["cosine", "euclidean"])

    assert list(run.summary["metric"]) == ["cosine", "euclidean"]
    assert list(run.summary["error"]) == ["no comparable groups", "no comparable groups"]


def test_run_similarity_by_week_keeps_authors_without_shared_weeks() -> None:
    documents = [
        _doc(0, "pm", "Strong economy and lower taxes", 2),
        _doc(1, "alice", "Lower taxes build a strong economy", 3),
        _doc(2, "bob", "Brexit talks in Brussels", 10),
    ]
    run = run_similarity(documents, reference="pm", metrics=["cosine"], by_week=True)

    summary = run.summary.set_index("group")
    assert set(summary.index) == {"alice", "bob"}
    assert summary.loc["alice", "n"] == 1
    assert summary.loc["bob", "n"] == 0
    assert math.isnan(summary.loc["bob", "mean"])


# ---------------------------------------------------------------------------
# Readability driver


def _word_count(text: str) -> float:
    return float(len(text.split()))


def _missing_resource(text: str) -> float:
    raise LookupError("Resource cmudict not found.")


def test_run_readability_failed_formula_next_to_successful_one(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(readability_module.READABILITY_REGISTRY, "SMOG", FormulaSpec("SMOG", _word_count))
    monkeypatch.setitem(readability_module.READABILITY_REGISTRY, "FOG", FormulaSpec("FOG", _missing_resource))
    documents = [
        _doc(0, "juncker", "Europe must act together", 12),
        _doc(1, "juncker", "The single market is our strength", 13),
        _doc(2, "tusk", "We need unity", 14),
    ]

    run = run_readability(documents, ["SMOG", "FOG"])

    smog = run.summary[run.summary["metric"] == "SMOG"].set_index("group")
    assert smog.loc["juncker", "mean"] == pytest.approx(5.0)
    assert smog.loc["juncker", "n"] == 2
    assert smog.loc["tusk", "n"] == 1
    assert math.isnan(smog.loc["tusk", "sd"])

    fog = run.summary[run.summary["metric"] == "FOG"]
    assert len(fog) == 1
    assert fog.iloc[0]["n"] == 0
    assert fog.iloc[0]["error"] == "LookupError: Resource cmudict not found."
    assert set(run.records["metric"]) == {"SMOG"}
