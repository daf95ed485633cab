"""Static configuration for the tweet and speech corpora."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Literal, Optional, TypedDict

DatasetId = Literal["cabinet_tweets", "eu_speeches"]


class DatasetConfig(TypedDict):
    file_name: str
    author_column: str
    text_column: str
    timestamp_column: str
    reference_author: Optional[str]
    url: Optional[str]


# Default directory used by the Typer CLI; callers may override it.
DEFAULT_RAW_ROOT = Path("data/raw")

# ---------------------------------------------------------------------------
# Dataset-specific configuration payloads. No canonical mirror is bundled, so
# `url` stays empty until passed on the command line.

CABINET_TWEETS: DatasetConfig = {
    "file_name": "cabinet_tweets.csv",
    "author_column": "screen_name",
    "text_column": "text",
    "timestamp_column": "created_at",
    "reference_author": "theresa_may",
    "url": None,
}

EU_SPEECHES: DatasetConfig = {
    "file_name": "eu_speeches.csv",
    "author_column": "speaker",
    "text_column": "text",
    "timestamp_column": "date",
    "reference_author": None,
    "url": None,
}

DATASETS: Dict[DatasetId, DatasetConfig] = {
    "cabinet_tweets": CABINET_TWEETS,
    "eu_speeches": EU_SPEECHES,
}


def get_dataset_config(dataset_id: str) -> DatasetConfig:
    """Return the configuration registered under ``dataset_id``."""
    try:
        return DATASETS[dataset_id]  # type: ignore[index]
    except KeyError as exc:
        raise ValueError(f"Unknown dataset '{dataset_id}'. Available: {list(DATASETS)}") from exc


__all__ = [
    "CABINET_TWEETS",
    "DATASETS",
    "DEFAULT_RAW_ROOT",
    "DatasetConfig",
    "DatasetId",
    "EU_SPEECHES",
    "get_dataset_config",
]
