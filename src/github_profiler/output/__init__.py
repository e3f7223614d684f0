"""Output handlers for GitHub Profiler."""

from github_profiler.output.console import Console
from github_profiler.output.json_writer import write_analysis, write_json_report

__all__ = [
    "write_analysis",
    "write_json_report",
    "Console",
]
