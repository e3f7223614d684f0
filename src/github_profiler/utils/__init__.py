"""Utility modules for GitHub Profiler."""

from github_profiler.utils.dates import LenientDatetime, parse_date, parse_datetime
from github_profiler.utils.records import read_jsonl, read_optional_json, read_optional_text

__all__ = [
    "LenientDatetime",
    "parse_datetime",
    "parse_date",
    "read_jsonl",
    "read_optional_json",
    "read_optional_text",
]
