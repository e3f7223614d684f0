"""Top repositories, evidence samples and input coverage metadata."""

from collections.abc import Sequence
from datetime import datetime, timedelta, timezone

from github_profiler.config import DEFAULT_THRESHOLDS, MetricThresholds
from github_profiler.models.activity import Commit, PullRequest
from github_profiler.models.profile import (
    DataCoverage,
    PrsTimeRange,
    ReposTimeRange,
    SummaryEvidence,
    TopRepo,
)
from github_profiler.models.repository import Repository


def score_repo(
    repo: Repository,
    now: datetime,
    thresholds: MetricThresholds = DEFAULT_THRESHOLDS,
) -> float:
    """stars ** 0.6, boosted when the repository was pushed to within the last year."""
    score = max(repo.stargazer_count, 0) ** thresholds.top_repo_star_exponent
    if repo.pushed_at is not None:
        if now - repo.pushed_at <= timedelta(days=thresholds.top_repo_recency_days):
            score *= thresholds.top_repo_recency_factor
    return score


def compute_top_repos(
    repos: Sequence[Repository],
    now: datetime | None = None,
    thresholds: MetricThresholds = DEFAULT_THRESHOLDS,
) -> list[TopRepo]:
    """Rank repositories by score, highest first. Equal scores keep input order."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    ranked = [
        TopRepo(
            repo=repo.full_name,
            lang=repo.primary_language,
            stars=repo.stargazer_count,
            score=score_repo(repo, now, thresholds),
            is_fork=repo.is_fork,
            last_push=repo.pushed_at,
            description=repo.description,
        )
        for repo in repos
    ]
    return sorted(ranked, key=lambda r: r.score, reverse=True)


def build_summary_evidence(
    repos: Sequence[Repository],
    prs: Sequence[PullRequest],
    thresholds: MetricThresholds = DEFAULT_THRESHOLDS,
) -> SummaryEvidence:
    """First few PR URLs and repository URLs, in input order."""
    size = thresholds.evidence_sample_size
    return SummaryEvidence(
        sample_prs=tuple(pr.url for pr in prs[:size] if pr.url),
        sample_repos=tuple(repo.html_url for repo in repos[:size]),
    )


def compute_data_coverage(
    repos: Sequence[Repository],
    prs: Sequence[PullRequest],
    commits: Sequence[Commit],
) -> DataCoverage:
    """Counts and time ranges of the raw input, independent of any metric's filtering."""
    pr_created = [pr.created_at for pr in prs if pr.created_at is not None]
    repo_created = [repo.created_at for repo in repos if repo.created_at is not None]
    repo_pushed = [repo.pushed_at for repo in repos if repo.pushed_at is not None]

    return DataCoverage(
        repos_total=len(repos),
        prs_total=len(prs),
        commits_total=len(commits),
        prs_time_range=PrsTimeRange(
            first=min(pr_created, default=None),
            last=max(pr_created, default=None),
        ),
        repos_time_range=ReposTimeRange(
            first_created_at=min(repo_created, default=None),
            last_pushed_at=max(repo_pushed, default=None),
        ),
    )
