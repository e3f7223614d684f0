"""Data models for GitHub Profiler."""

from github_profiler.models.activity import (
    AssociatedPullRequest,
    Commit,
    EmailInfo,
    PullRequest,
    RepositoryRef,
    parse_email_info,
)
from github_profiler.models.contribution import (
    ContributionCalendar,
    ContributionDay,
    ContributionsSummary,
    ContributionWeek,
)
from github_profiler.models.profile import (
    AnalysisResult,
    CommunityEngagement,
    ConsistencySignals,
    ContributionMomentum,
    CoreHoursWindow,
    DataCoverage,
    ForkDestiny,
    GritFactor,
    LanguageWeight,
    Profile,
    RatioMetric,
    ReadmeAnalysis,
    SummaryEvidence,
    TimezoneInfo,
    TopicWeight,
    TopRepo,
    UniIndex,
)
from github_profiler.models.repository import Repository
from github_profiler.models.user import Organization, UserInfo

__all__ = [
    # Input records
    "Repository",
    "PullRequest",
    "Commit",
    "AssociatedPullRequest",
    "RepositoryRef",
    "EmailInfo",
    "parse_email_info",
    "ContributionDay",
    "ContributionWeek",
    "ContributionCalendar",
    "ContributionsSummary",
    "UserInfo",
    "Organization",
    # Output
    "RatioMetric",
    "LanguageWeight",
    "TopicWeight",
    "CoreHoursWindow",
    "TimezoneInfo",
    "UniIndex",
    "GritFactor",
    "ForkDestiny",
    "CommunityEngagement",
    "ContributionMomentum",
    "ReadmeAnalysis",
    "ConsistencySignals",
    "SummaryEvidence",
    "DataCoverage",
    "TopRepo",
    "Profile",
    "AnalysisResult",
]
