"""Profile Engine - composes every metric into one Profile."""

import logging
from datetime import datetime, timezone

from pydantic import BaseModel, Field

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
from github_profiler.analysis.ranking import (
    build_summary_evidence,
    compute_data_coverage,
    compute_top_repos,
)
from github_profiler.analysis.readme import analyze_profile_readme
from github_profiler.analysis.tags import compute_profile_tags
from github_profiler.analysis.temporal import (
    build_timezone,
    compute_core_hours,
    compute_hours_histogram,
    compute_night_ratio,
    parse_timezone_offset,
)
from github_profiler.analysis.weights import (
    compute_focus_ratio,
    compute_language_weights,
    compute_topic_weights,
)
from github_profiler.config import Config
from github_profiler.models.activity import Commit, PullRequest
from github_profiler.models.contribution import ContributionsSummary
from github_profiler.models.profile import AnalysisResult, Profile
from github_profiler.models.repository import Repository
from github_profiler.models.user import UserInfo

logger = logging.getLogger(__name__)


class AnalysisInput(BaseModel):
    """Normalized records for one subject. Any of them may be empty or missing."""

    login: str
    repos: list[Repository] = Field(default_factory=list)
    prs: list[PullRequest] = Field(default_factory=list)
    commits: list[Commit] = Field(default_factory=list)
    contributions: ContributionsSummary | None = None
    user_info: UserInfo | None = None
    readme_markdown: str | None = None


class ProfileEngine:
    """Builds a Profile from normalized activity records.

    Example usage:
        ```python
        from github_profiler import AnalysisInput, Config, ProfileEngine

        engine = ProfileEngine(Config(tz_override="Asia/Shanghai"))
        result = engine.analyze(AnalysisInput(login="octocat", repos=repos, prs=prs))
        print(result.profile.uoi.value)
        ```

    Args:
        config: Timezone override, org-repo ownership flag and metric
            thresholds. Defaults to ``Config()``.
    """

    def __init__(self, config: Config | None = None):
        self._config = config or Config()

    @property
    def config(self) -> Config:
        return self._config

    def analyze(self, inputs: AnalysisInput, now: datetime | None = None) -> AnalysisResult:
        """Compute every metric for one subject.

        Args:
            inputs: Normalized records
            now: Reference time for timezone resolution and repository
                recency. Defaults to the current time; pass it explicitly for
                reproducible output.

        Returns:
            AnalysisResult with the Profile and the ranked repository list
        """
        now = now or datetime.now(timezone.utc)
        config = self._config
        thresholds = config.thresholds
        login = inputs.login
        logger.info(
            "Analyzing %s (%d repos, %d PRs, %d commits)",
            login,
            len(inputs.repos),
            len(inputs.prs),
            len(inputs.commits),
        )

        # The offset is the only state shared between components
        tz_offset = parse_timezone_offset(config.tz_override, now=now)
        logger.debug("Timezone %r resolved to %d minutes", config.tz_override, tz_offset)

        skills = compute_language_weights(inputs.repos)
        topics = compute_topic_weights(inputs.repos)
        focus = compute_focus_ratio(inputs.repos)
        logger.debug("Weights: %d languages, %d topics", len(skills), len(topics))

        histogram = compute_hours_histogram((pr.created_at for pr in inputs.prs), tz_offset)
        core_hours = compute_core_hours(histogram, thresholds)
        night = compute_night_ratio(inputs.commits, tz_offset, thresholds)

        uoi = compute_uoi(inputs.prs, login)
        accept_rate = compute_external_pr_accept_rate(inputs.prs, login)
        uni_index = compute_uni_index(
            inputs.commits,
            inputs.prs,
            login,
            user_info=inputs.user_info,
            include_org_repos=config.include_org_repos,
        )
        community = compute_community_engagement(inputs.contributions)
        logger.debug(
            "Collaboration: uoi=%s accept=%s uni=%s talk=%s",
            uoi.value,
            accept_rate.value,
            uni_index.value,
            community.value,
        )

        grit = compute_grit_factor(inputs.repos, login, thresholds)
        fork_destiny = compute_fork_destiny(inputs.repos, inputs.commits, login, thresholds)
        momentum = compute_contribution_momentum(inputs.contributions, thresholds)
        logger.debug(
            "Delivery: grit=%s forks=%d momentum=%s",
            grit.value,
            fork_destiny.total_forks,
            momentum.status,
        )

        readme = analyze_profile_readme(inputs.readme_markdown, thresholds)
        consistency = compute_readme_consistency(readme, skills, login, inputs.repos, thresholds)
        tags = compute_profile_tags(fork_destiny, community, thresholds)

        user = inputs.user_info
        profile = Profile(
            login=login,
            name=user.name if user else None,
            bio=user.bio if user else None,
            company=user.company if user else None,
            location=user.location if user else None,
            website_url=user.website_url if user else None,
            twitter_username=user.twitter_username if user else None,
            followers=user.followers if user else 0,
            following=user.following if user else 0,
            organizations=tuple(user.organizations) if user else (),
            timezone=build_timezone(config.tz_override, tz_offset),
            skills=tuple(skills),
            topics=tuple(topics),
            core_hours=tuple(core_hours),
            hours_histogram=tuple(histogram),
            night_ratio=night,
            focus_ratio=focus,
            uoi=uoi,
            external_pr_accept_rate=accept_rate,
            uni_index=uni_index,
            grit_factor=grit,
            fork_destiny=fork_destiny,
            community_engagement=community,
            contribution_momentum=momentum,
            tags=tuple(tags),
            readme=readme,
            consistency=consistency,
            summary_evidence=build_summary_evidence(inputs.repos, inputs.prs, thresholds),
            data_coverage=compute_data_coverage(inputs.repos, inputs.prs, inputs.commits),
            contributions=inputs.contributions,
        )

        top_repos = compute_top_repos(inputs.repos, now, thresholds)
        logger.info("Analysis complete for %s (tags: %s)", login, ", ".join(tags) or "none")
        return AnalysisResult(profile=profile, top_repos=tuple(top_repos))


def analyze_all(
    login: str,
    repos: list[Repository] | None = None,
    prs: list[PullRequest] | None = None,
    commits: list[Commit] | None = None,
    contributions: ContributionsSummary | None = None,
    user_info: UserInfo | None = None,
    readme_markdown: str | None = None,
    config: Config | None = None,
    now: datetime | None = None,
) -> AnalysisResult:
    """Functional shortcut for ``ProfileEngine(config).analyze(...)``."""
    inputs = AnalysisInput(
        login=login,
        repos=repos or [],
        prs=prs or [],
        commits=commits or [],
        contributions=contributions,
        user_info=user_info,
        readme_markdown=readme_markdown,
    )
    return ProfileEngine(config).analyze(inputs, now=now)
