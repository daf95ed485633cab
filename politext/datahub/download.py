from __future__ import annotations

from pathlib import Path
from typing import Optional

from .config import DEFAULT_RAW_ROOT, get_dataset_config
from .io import download_stream, metadata_path, needs_download, read_metadata, sha256sum, write_metadata


def download_dataset(
    dataset_id: str,
    raw_root: Path = DEFAULT_RAW_ROOT,
    url: Optional[str] = None,
    force: bool = False,
) -> Path:
    """Fetch the raw CSV for ``dataset_id`` into ``raw_root`` and return its path.

    The checksum of each download is recorded in a sidecar metadata file; a
    local copy that no longer matches it is fetched again.
    """
    config = get_dataset_config(dataset_id)
    source = url or config["url"]
    target = raw_root / config["file_name"]
    meta_path = metadata_path(target)
    meta = read_metadata(meta_path)

    if not needs_download(target, expected_sha=meta.get("sha256"), force=force):
        print(f"[datahub] {dataset_id} already present at {target}; skipping download.")
        return target
    if not source:
        raise ValueError(f"No download URL known for '{dataset_id}'. Pass one with --url.")

    print(f"[datahub] Downloading {dataset_id} from {source}")
    download_stream(source, target)
    updated = dict(meta)
    updated.update({"sha256": sha256sum(target), "url": source})
    write_metadata(meta_path, updated)
    print(f"[datahub] Saved {dataset_id} → {target}")
    return target
