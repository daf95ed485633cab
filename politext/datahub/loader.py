from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Optional

import pandas as pd

from .config import DEFAULT_RAW_ROOT, DatasetConfig, get_dataset_config
from .document import Document


def read_documents(path: Path, config: DatasetConfig) -> Iterator[Document]:
    """Yield Documents from a CSV file laid out as described by ``config``."""
    if not path.exists():
        raise FileNotFoundError(
            f"Missing corpus file {path}. Run `python main.py download` to fetch it first."
        )

    frame = pd.read_csv(path)
    columns = [config["author_column"], config["text_column"], config["timestamp_column"]]
    missing: List[str] = [column for column in columns if column not in frame.columns]
    if missing:
        raise ValueError(f"{path.name} is missing required columns: {', '.join(missing)}")

    frame = frame[columns].rename(
        columns={
            config["author_column"]: "author",
            config["text_column"]: "text",
            config["timestamp_column"]: "timestamp",
        }
    )
    frame = frame.dropna(subset=["author", "text"])
    frame = frame[frame["text"].astype(str).str.strip() != ""]

    timestamps = pd.to_datetime(frame["timestamp"], errors="coerce")
    invalid = int(timestamps.isna().sum())
    if invalid:
        raise ValueError(f"{path.name} contains {invalid} rows with unparseable timestamps.")

    stem = path.stem
    for position, (row, timestamp) in enumerate(zip(frame.itertuples(index=False), timestamps)):
        yield Document(
            doc_id=f"{stem}-{position}",
            author=str(row.author),
            text=str(row.text),
            timestamp=timestamp.to_pydatetime(),
        )


def load_documents(
    dataset_id: str,
    root: Path = DEFAULT_RAW_ROOT,
    path: Optional[Path] = None,
) -> List[Document]:
    """Load every document of a registered dataset, optionally from an explicit file."""
    config = get_dataset_config(dataset_id)
    source = path or root / config["file_name"]
    documents = list(read_documents(source, config))
    authors = {document.author for document in documents}
    print(f"[datahub] Loaded {len(documents)} documents by {len(authors)} authors from {source}")
    return documents
