"""GitHub Profiler - Developer profile metrics from public GitHub activity.

Turns normalized activity records (repositories, pull requests, commits,
the contribution calendar, user info and the profile README) into a
structured profile:
- Language and topic focus
- Active hours and night ratio
- Collaboration orientation (UOI, accept rate, Uni Index, talk vs code)
- Delivery signals (Grit Factor, Fork Destiny, Contribution Momentum)
- Profile README style and consistency with measured skills

Example usage:
    ```python
    from github_profiler import analyze_all

    result = analyze_all("octocat", repos=repos, prs=prs, commits=commits)
    print(result.profile.skills)
    ```
"""

from importlib.metadata import PackageNotFoundError, version

from github_profiler.config import Config, MetricThresholds
from github_profiler.engine import AnalysisInput, ProfileEngine, analyze_all
from github_profiler.exceptions import (
    AnalysisError,
    ConfigurationError,
    GitHubProfilerError,
    RecordLoadError,
)
from github_profiler.models import (
    AnalysisResult,
    Commit,
    ContributionCalendar,
    ContributionsSummary,
    Profile,
    PullRequest,
    RatioMetric,
    Repository,
    TopRepo,
    UserInfo,
)

try:
    __version__ = version("github-profiler")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"

__all__ = [
    # Engine
    "ProfileEngine",
    "AnalysisInput",
    "analyze_all",
    # Configuration
    "Config",
    "MetricThresholds",
    # Exceptions
    "GitHubProfilerError",
    "RecordLoadError",
    "AnalysisError",
    "ConfigurationError",
    # Models - Input
    "Repository",
    "PullRequest",
    "Commit",
    "ContributionCalendar",
    "ContributionsSummary",
    "UserInfo",
    # Models - Output
    "Profile",
    "RatioMetric",
    "TopRepo",
    "AnalysisResult",
]
