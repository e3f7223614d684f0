"""Services that connect raw record files to the profile engine."""

from github_profiler.services.report import (
    ReportArtifacts,
    analyze_raw_records,
    generate_report,
    load_raw_records,
)

__all__ = [
    "analyze_raw_records",
    "generate_report",
    "load_raw_records",
    "ReportArtifacts",
]
