"""End-to-end tests for the Typer commands."""

from __future__ import annotations

from pathlib import Path
import sys

import pandas as pd
import pytest
from typer.testing import CliRunner

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from main import app

runner = CliRunner()


@pytest.fixture()
def tweets_csv(tmp_path: Path) -> Path:
    rows = [
        {"screen_name": "pm", "text": "Strong economy and lower taxes", "created_at": "2018-01-02 09:00"},
        {"screen_name": "pm", "text": "Investing in schools and hospitals", "created_at": "2018-01-09 09:00"},
        {"screen_name": "chancellor", "text": "Lower taxes build a strong economy", "created_at": "2018-01-03 10:00"},
        {"screen_name": "chancellor", "text": "Budget investing in hospitals", "created_at": "2018-01-10 10:00"},
        {"screen_name": "foreign_sec", "text": "Brexit talks in Brussels", "created_at": "2018-01-04 11:00"},
    ]
    path = tmp_path / "tweets.csv"
    pd.DataFrame(rows).to_csv(path, index=False)
    return path


@pytest.fixture()
def speeches_csv(tmp_path: Path) -> Path:
    rows = [
        {"speaker": "juncker", "text": "Europe must act together. We will deliver.", "date": "2018-09-12"},
        {"speaker": "juncker", "text": "The single market is our strength.", "date": "2018-10-01"},
        {"speaker": "tusk", "text": "We need unity. Unity needs trust.", "date": "2018-09-20"},
    ]
    path = tmp_path / "speeches.csv"
    pd.DataFrame(rows).to_csv(path, index=False)
    return path


def test_similarity_command_prints_summary(tweets_csv: Path) -> None:
    result = runner.invoke(
        app,
        ["similarity", "--path", str(tweets_csv), "--reference", "pm", "--metric", "cosine", "--no-show"],
    )
    assert result.exit_code == 0, result.output
    assert "chancellor" in result.output
    assert "foreign_sec" in result.output
    assert "cosine" in result.output


def test_similarity_command_by_week(tweets_csv: Path) -> None:
    result = runner.invoke(
        app,
        [
            "similarity",
            "--path",
            str(tweets_csv),
            "--reference",
            "pm",
            "--metric",
            "cosine",
            "--metric",
            "euclidean",
            "--by-week",
            "--no-show",
        ],
    )
    assert result.exit_code == 0, result.output
    assert "chancellor" in result.output


def test_similarity_command_rejects_unknown_metric(tweets_csv: Path) -> None:
    result = runner.invoke(
        app,
        ["similarity", "--path", str(tweets_csv), "--reference", "pm", "--metric", "levenshtein", "--no-show"],
    )
    assert result.exit_code != 0


def test_readability_command(speeches_csv: Path) -> None:
    result = runner.invoke(
        app,
        ["readability", "--path", str(speeches_csv), "--metric", "Flesch", "--no-show"],
    )
    assert result.exit_code == 0, result.output
    assert "juncker" in result.output
    assert "Flesch" in result.output
