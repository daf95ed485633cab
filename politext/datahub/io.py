"""Helpers for fetching raw corpus files and tracking their checksums."""

from __future__ import annotations

import hashlib
import json
import os
import tempfile
from pathlib import Path
from typing import Any, Mapping, Optional

import requests

METADATA_SUFFIX = ".meta.json"


def sha256sum(path: Path) -> str:
    """Compute the SHA256 checksum for a file."""
    digest = hashlib.sha256()
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(1024 * 1024), b""):
            digest.update(chunk)
    return digest.hexdigest()


def metadata_path(target: Path) -> Path:
    return target.with_name(target.name + METADATA_SUFFIX)


def read_metadata(path: Path) -> Mapping[str, Any]:
    """Load metadata JSON attached to a raw file, returning an empty mapping on failure."""
    if not path.exists():
        return {}
    try:
        return json.loads(path.read_text())
    except json.JSONDecodeError:
        return {}


def write_metadata(path: Path, payload: Mapping[str, Any]) -> None:
    """Persist metadata next to the raw file to skip redundant downloads."""
    path.write_text(json.dumps(payload, indent=2, sort_keys=True))


def needs_download(target: Path, expected_sha: Optional[str] = None, force: bool = False) -> bool:
    """Determine whether the raw file must be (re-)downloaded."""
    if force or not target.exists():
        return True
    if not expected_sha:
        return False
    return sha256sum(target) != expected_sha


def download_stream(url: str, dest: Path, timeout: int = 60) -> None:
    """Stream a remote file to disk atomically; a failed transfer leaves nothing behind."""
    dest.parent.mkdir(parents=True, exist_ok=True)
    with requests.get(url, stream=True, timeout=timeout) as response:
        response.raise_for_status()
        with tempfile.NamedTemporaryFile(delete=False, dir=dest.parent) as tmp:
            try:
                for chunk in response.iter_content(chunk_size=8192):
                    if chunk:
                        tmp.write(chunk)
            except BaseException:
                tmp.close()
                Path(tmp.name).unlink(missing_ok=True)
                raise
    os.replace(tmp.name, dest)


__all__ = [
    "METADATA_SUFFIX",
    "download_stream",
    "metadata_path",
    "needs_download",
    "read_metadata",
    "sha256sum",
    "write_metadata",
]
