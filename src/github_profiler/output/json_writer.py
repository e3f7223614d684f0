"""JSON output writer for profile reports."""

import json
from datetime import date, datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from github_profiler.models.profile import AnalysisResult

PROFILE_FILENAME = "profile.json"
TOP_REPOS_FILENAME = "top_repos.json"


def serialize_for_json(obj: Any) -> Any:
    """Convert objects to JSON-serializable format."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    elif isinstance(obj, (datetime, date)):
        return obj.isoformat()
    elif isinstance(obj, dict):
        return {k: serialize_for_json(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [serialize_for_json(item) for item in obj]
    return obj


def build_profile_report(result: AnalysisResult) -> dict[str, Any]:
    """Profile document written to profile.json."""
    return serialize_for_json(result.profile)


def build_top_repos_report(result: AnalysisResult) -> list[dict[str, Any]]:
    """Ranked repository list written to top_repos.json."""
    return serialize_for_json(result.top_repos)


def write_json_report(report: dict[str, Any] | list[Any], output_path: Path) -> Path:
    """Write a report to a JSON file, creating parent directories as needed.

    Args:
        report: JSON-serializable report
        output_path: Output file path

    Returns:
        Path to written file
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(report, f, indent=2, ensure_ascii=False, default=str)

    return output_path


def write_analysis(result: AnalysisResult, out_dir: Path) -> tuple[Path, Path]:
    """Write profile.json and top_repos.json into ``out_dir``.

    Returns:
        Paths of the profile and top-repos files
    """
    profile_path = write_json_report(build_profile_report(result), out_dir / PROFILE_FILENAME)
    top_repos_path = write_json_report(build_top_repos_report(result), out_dir / TOP_REPOS_FILENAME)
    return profile_path, top_repos_path
