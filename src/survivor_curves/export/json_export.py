"""JSON export for survivor-curve datasets.

The artifact is a single object keyed by table year (as a string), each
value holding ``female`` and ``male`` arrays of survivor fractions in
ascending age order. Files are replaced atomically, so an interrupted write
leaves the previous artifact in place.
"""
from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

import structlog

from survivor_curves.models import YearlyDataset

logger = structlog.get_logger(__name__)

DEFAULT_INDENT = 4


def atomic_write(path: Path | str, text: str) -> Path:
    """Write text next to ``path`` in a temp file, fsync, then rename over it."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    tmp_fd, tmp_path = tempfile.mkstemp(prefix=target.name + ".", dir=str(target.parent))
    try:
        with os.fdopen(tmp_fd, "w", encoding="utf-8") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, target)
        return target
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)


def write_dataset(dataset: YearlyDataset, out_file: Path | str, indent: int = DEFAULT_INDENT) -> Path:
    """Serialize the dataset as pretty-printed JSON.

    Args:
        dataset: Curves keyed by year
        out_file: Destination path
        indent: JSON indentation width

    Returns:
        Path to the written file
    """
    text = json.dumps(dataset.to_json_dict(), indent=indent)
    path = atomic_write(out_file, text + "\n")
    logger.info("lifetable.export.written", path=str(path), years=len(dataset))
    return path


def load_dataset(in_file: Path | str) -> YearlyDataset:
    """Read a dataset written by write_dataset.

    Raises:
        ValueError: If the file is not valid JSON, an entry is not a male/female
            curve pair, or a curve violates its invariants
    """
    data = json.loads(Path(in_file).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object keyed by year in {in_file}")
    return YearlyDataset.from_json_dict(data)
