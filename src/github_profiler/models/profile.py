"""Profile output models.

Everything here is frozen: a Profile is built once per analysis and never
mutated afterwards. Ratio-valued metrics carry the denominator they were
computed from so that "not measured" (value None) is never confused with
"measured zero".
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from github_profiler.models.contribution import ContributionsSummary
from github_profiler.models.user import Organization


class FrozenModel(BaseModel):
    """Base class for immutable output models."""

    model_config = ConfigDict(frozen=True)


class RatioMetric(FrozenModel):
    """A ratio together with the sample size it was computed over."""

    value: float | None = None
    sample_size: int = 0

    @model_validator(mode="after")
    def _check_value(self) -> "RatioMetric":
        if self.sample_size < 0:
            raise ValueError("sample_size must be non-negative")
        if self.sample_size == 0 and self.value is not None:
            raise ValueError("a ratio with no samples must have value None")
        if self.value is not None and not 0.0 <= self.value <= 1.0:
            raise ValueError(f"ratio value out of range: {self.value}")
        return self

    @computed_field
    @property
    def present(self) -> bool:
        """Whether there was enough data to measure this ratio."""
        return self.value is not None

    @classmethod
    def of(cls, numerator: float, denominator: float, sample_size: int | None = None) -> "RatioMetric":
        """Build from a numerator/denominator pair; a zero denominator yields no value."""
        size = int(denominator) if sample_size is None else sample_size
        if denominator == 0:
            return cls(value=None, sample_size=size)
        return cls(value=numerator / denominator, sample_size=size)


class LanguageWeight(FrozenModel):
    lang: str
    weight: float


class TopicWeight(FrozenModel):
    topic: str
    weight: float
    count: int


class CoreHoursWindow(FrozenModel):
    start: str  # "HH:00"
    end: str  # "HH:00"


class TimezoneInfo(FrozenModel):
    """Timezone used for local-time metrics (auto-detected / override / used)."""

    auto: str | None = "+00:00"
    override: str | None = None
    used: str | None = "+00:00"


class UniIndex(RatioMetric):
    """Creator (1.0) to collaborator (0.0) spectrum score.

    ``sample_size`` counts raw commits and PRs, while the value is computed
    from weighted activity points. Commits outside owned repositories count
    toward the sample but earn no points, so a non-zero sample can still
    leave ``owned_points + external_points`` at 0 and the value at None.
    """

    include_org_repos: bool = True
    owned_points: int = 0
    external_points: int = 0


class GritFactor(RatioMetric):
    """Share of original repositories that reached long-term or gem status."""

    long_term_count: int = 0
    gem_count: int = 0
    churn_count: int = 0

    @model_validator(mode="after")
    def _check_counts(self) -> "GritFactor":
        if self.long_term_count + self.gem_count + self.churn_count != self.sample_size:
            raise ValueError("grit classification counts must sum to sample_size")
        return self


class ForkDestiny(FrozenModel):
    """Classification of owned forks into contributor / variant / noise."""

    total_forks: int = 0
    contributor_forks: int = 0
    variant_forks: int = 0
    noise_forks: int = 0
    total_fork_stars: int = 0
    variant_fork_stars: int = 0

    @model_validator(mode="after")
    def _check_counts(self) -> "ForkDestiny":
        if self.contributor_forks + self.variant_forks + self.noise_forks != self.total_forks:
            raise ValueError("fork classification counts must sum to total_forks")
        return self


class CommunityEngagement(RatioMetric):
    """Talk events over talk plus code events."""

    talk_events: int = 0
    code_events: int = 0


MomentumStatus = Literal["accelerating", "cooling_down", "steady", "ghost", "unknown"]


class ContributionMomentum(FrozenModel):
    value: float | None = None
    recent_quarter_total: int = 0
    year_total: int = 0
    baseline_quarter: float = 0.0
    status: MomentumStatus = "unknown"


ReadmeStyle = Literal["none", "empty", "one_liner", "short_bio", "visual_dashboard", "mixed"]


class ReadmeAnalysis(FrozenModel):
    """Style classification and extracted text of a profile README."""

    style: ReadmeStyle
    markdown: str | None = None
    plain_text: str | None = None
    text_excerpt: str | None = None
    image_alt_texts: tuple[str, ...] = ()
    image_count: int = 0
    text_line_count: int = 0


ConsistencyLevel = Literal["strong", "partial", "poor", "unknown"]


class ConsistencySignals(FrozenModel):
    """Self-description claims cross-checked against measured activity."""

    readme_languages: tuple[str, ...] = ()
    metric_languages: tuple[str, ...] = ()
    language_overlap: tuple[str, ...] = ()
    readme_language_supported_ratio: float | None = None
    readme_vs_skills_consistency: ConsistencyLevel = "unknown"
    owned_repos_mentioned: tuple[str, ...] = ()
    owned_repos_found_in_data: tuple[str, ...] = ()
    owned_repos_missing_in_data: tuple[str, ...] = ()
    readme_topics: tuple[str, ...] = ()
    metric_topics: tuple[str, ...] = ()
    topic_overlap: tuple[str, ...] = ()


ProfileTag = Literal[
    "hard_forker",
    "variant_leader",
    "fork_cleaner",
    "silent_maker",
    "vocal_contributor",
    "talker",
]


class SummaryEvidence(FrozenModel):
    sample_prs: tuple[str, ...] = ()
    sample_repos: tuple[str, ...] = ()


class PrsTimeRange(FrozenModel):
    first: datetime | None = None
    last: datetime | None = None


class ReposTimeRange(FrozenModel):
    first_created_at: datetime | None = None
    last_pushed_at: datetime | None = None


class DataCoverage(FrozenModel):
    """What input was actually available, independent of metric filtering."""

    repos_total: int = 0
    prs_total: int = 0
    commits_total: int = 0
    prs_time_range: PrsTimeRange = Field(default_factory=PrsTimeRange)
    repos_time_range: ReposTimeRange = Field(default_factory=ReposTimeRange)


class TopRepo(FrozenModel):
    repo: str
    lang: str | None = None
    stars: int = 0
    score: float = 0.0
    is_fork: bool = False
    last_push: datetime | None = None
    description: str | None = None


class Profile(FrozenModel):
    """Aggregate developer profile."""

    login: str

    # Passed through from user info
    name: str | None = None
    bio: str | None = None
    company: str | None = None
    location: str | None = None
    website_url: str | None = None
    twitter_username: str | None = None
    followers: int = 0
    following: int = 0
    organizations: tuple[Organization, ...] = ()

    timezone: TimezoneInfo = Field(default_factory=TimezoneInfo)
    skills: tuple[LanguageWeight, ...] = ()
    topics: tuple[TopicWeight, ...] = ()
    core_hours: tuple[CoreHoursWindow, ...] = ()
    hours_histogram: tuple[int | None, ...] = Field(default=(None,) * 24, min_length=24, max_length=24)
    night_ratio: RatioMetric = Field(default_factory=RatioMetric)
    focus_ratio: RatioMetric = Field(default_factory=RatioMetric)
    uoi: RatioMetric = Field(default_factory=RatioMetric)
    external_pr_accept_rate: RatioMetric = Field(default_factory=RatioMetric)
    uni_index: UniIndex = Field(default_factory=UniIndex)
    grit_factor: GritFactor = Field(default_factory=GritFactor)
    fork_destiny: ForkDestiny = Field(default_factory=ForkDestiny)
    community_engagement: CommunityEngagement = Field(default_factory=CommunityEngagement)
    contribution_momentum: ContributionMomentum = Field(default_factory=ContributionMomentum)
    tags: tuple[ProfileTag, ...] = ()
    readme: ReadmeAnalysis = Field(default_factory=lambda: ReadmeAnalysis(style="none"))
    consistency: ConsistencySignals = Field(default_factory=ConsistencySignals)
    summary_evidence: SummaryEvidence = Field(default_factory=SummaryEvidence)
    data_coverage: DataCoverage = Field(default_factory=DataCoverage)
    contributions: ContributionsSummary | None = None


class AnalysisResult(FrozenModel):
    """Profile plus the ranked repository list exported next to it."""

    profile: Profile
    top_repos: tuple[TopRepo, ...] = ()
