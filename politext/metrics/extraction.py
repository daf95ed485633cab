"""Turn raw metric results into labelled score records."""

from __future__ import annotations

import math
from typing import List, Union

from politext.corpus.grouping import GroupKey
from politext.errors import ReferenceNotFound

from .aggregation.records import ScoreRecord
from .readability import ReadabilityScores
from .similarity import ScoreMatrix


def extract_reference(matrix: ScoreMatrix, reference: Union[GroupKey, str]) -> List[ScoreRecord]:
    """Return the reference group's row against every other group.

    The self-comparison is dropped, so an N×N matrix yields N−1 records.
    """
    ref_idx = matrix.index_of(reference)
    row = matrix.values[ref_idx]
    records: List[ScoreRecord] = []
    for idx, key in enumerate(matrix.keys):
        if idx == ref_idx:
            continue
        records.append(
            ScoreRecord(author=key.author, metric=matrix.metric, value=float(row[idx]), week=key.week)
        )
    return records


def extract_reference_by_week(matrix: ScoreMatrix, reference_author: str) -> List[ScoreRecord]:
    """Compare each (author, week) group with the reference author's group for that week.

    Weeks in which the reference author did not publish have no comparison;
    they are kept as NaN records so the author still reaches the summary.
    """
    positions = {key: idx for idx, key in enumerate(matrix.keys)}
    if not any(key.author == reference_author for key in matrix.keys):
        raise ReferenceNotFound(reference_author)

    records: List[ScoreRecord] = []
    skipped = 0
    for key, idx in positions.items():
        if key.author == reference_author:
            continue
        if key.week is None:
            raise ValueError("Weekly extraction requires (author, week) group keys.")
        ref_idx = positions.get(GroupKey(author=reference_author, week=key.week))
        if ref_idx is None:
            skipped += 1
            value = math.nan
        else:
            value = float(matrix.values[ref_idx, idx])
        records.append(ScoreRecord(author=key.author, metric=matrix.metric, value=value, week=key.week))

    if skipped:
        print(f"[extract] {matrix.metric}: {skipped} groups fall in weeks without '{reference_author}'.")
    return records


def tag_document_scores(scores: ReadabilityScores) -> List[ScoreRecord]:
    """Return the full per-document vector tagged with each document's author."""
    return [
        ScoreRecord(
            author=score.author,
            metric=scores.metric,
            value=float(score.value),
            document_id=score.doc_id,
        )
        for score in scores.scores
    ]


__all__ = ["extract_reference", "extract_reference_by_week", "tag_document_scores"]
