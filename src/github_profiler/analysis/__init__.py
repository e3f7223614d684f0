"""Metric computations. Every function here is pure: no I/O, no hidden state."""

from github_profiler.analysis.collaboration import (
    compute_community_engagement,
    compute_external_pr_accept_rate,
    compute_uni_index,
    compute_uoi,
)
from github_profiler.analysis.consistency import compute_readme_consistency
from github_profiler.analysis.delivery import (
    compute_contribution_momentum,
    compute_fork_destiny,
    compute_grit_factor,
)
from github_profiler.analysis.keywords import KEYWORDS_VERSION
from github_profiler.analysis.ranking import (
    build_summary_evidence,
    compute_data_coverage,
    compute_top_repos,
)
from github_profiler.analysis.readme import analyze_profile_readme, strip_markdown_formatting
from github_profiler.analysis.tags import compute_profile_tags
from github_profiler.analysis.temporal import (
    build_timezone,
    compute_core_hours,
    compute_hours_histogram,
    compute_night_ratio,
    format_hour,
    format_offset,
    parse_timezone_offset,
)
from github_profiler.analysis.weights import (
    compute_focus_ratio,
    compute_language_weights,
    compute_topic_weights,
)

__all__ = [
    # Weights
    "compute_language_weights",
    "compute_topic_weights",
    "compute_focus_ratio",
    # Temporal
    "parse_timezone_offset",
    "build_timezone",
    "format_offset",
    "format_hour",
    "compute_hours_histogram",
    "compute_core_hours",
    "compute_night_ratio",
    # Collaboration
    "compute_uoi",
    "compute_external_pr_accept_rate",
    "compute_uni_index",
    "compute_community_engagement",
    # Delivery
    "compute_grit_factor",
    "compute_fork_destiny",
    "compute_contribution_momentum",
    # README
    "analyze_profile_readme",
    "strip_markdown_formatting",
    "compute_readme_consistency",
    "KEYWORDS_VERSION",
    # Tags
    "compute_profile_tags",
    # Ranking and coverage
    "compute_top_repos",
    "build_summary_evidence",
    "compute_data_coverage",
]
