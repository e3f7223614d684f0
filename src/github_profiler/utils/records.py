"""Readers for raw record files produced by the fetching layer.

A missing file is not an error: it means that kind of record was never
fetched, and the engine degrades to null metrics for it. A file that exists
but cannot be parsed is an upstream contract violation and raises
RecordLoadError.
"""

import json
import logging
from pathlib import Path
from typing import Any

from github_profiler.exceptions import RecordLoadError

logger = logging.getLogger(__name__)


def read_jsonl(path: Path) -> list[dict[str, Any]]:
    """Read a JSON Lines file into a list of dicts.

    Blank lines are ignored. Returns an empty list if the file is missing.
    """
    if not path.exists():
        logger.debug("No %s found", path)
        return []

    records: list[dict[str, Any]] = []
    with open(path, encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError as e:
                raise RecordLoadError(
                    f"Invalid JSON in {path} at line {line_no}: {e.msg}",
                    path=str(path),
                    line=line_no,
                ) from e
            if not isinstance(record, dict):
                raise RecordLoadError(
                    f"Expected a JSON object in {path} at line {line_no}",
                    path=str(path),
                    line=line_no,
                )
            records.append(record)

    logger.debug("Read %d records from %s", len(records), path)
    return records


def read_optional_json(path: Path) -> dict[str, Any] | None:
    """Read a JSON object file, or None if the file is missing."""
    if not path.exists():
        logger.debug("No %s found", path)
        return None

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise RecordLoadError(f"Invalid JSON in {path}: {e.msg}", path=str(path)) from e

    if not isinstance(data, dict):
        raise RecordLoadError(f"Expected a JSON object in {path}", path=str(path))
    return data


def read_optional_text(path: Path) -> str | None:
    """Read a text file, or None if the file is missing.

    An existing empty file returns "" so callers can tell "absent" from
    "present but blank".
    """
    if not path.exists():
        return None
    return path.read_text(encoding="utf-8")
