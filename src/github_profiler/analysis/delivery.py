"""Delivery metrics: Grit Factor, Fork Destiny and Contribution Momentum."""

import logging
from collections.abc import Sequence
from enum import Enum

from github_profiler.config import DEFAULT_THRESHOLDS, MetricThresholds
from github_profiler.models.activity import Commit
from github_profiler.models.contribution import ContributionsSummary
from github_profiler.models.profile import ContributionMomentum, ForkDestiny, GritFactor
from github_profiler.models.repository import Repository

logger = logging.getLogger(__name__)


class RepoOutcome(str, Enum):
    """Grit Factor classification of an original repository."""

    LONG_TERM = "long_term"
    GEM = "gem"
    CHURN = "churn"


class ForkOutcome(str, Enum):
    """Fork Destiny classification of an owned fork."""

    CONTRIBUTOR = "contributor"
    VARIANT = "variant"
    NOISE = "noise"


def lifespan_days(repo: Repository) -> float:
    """Days between creation and last push, clamped at zero.

    Missing timestamps count as a zero lifespan.
    """
    if repo.created_at is None or repo.pushed_at is None:
        return 0.0
    seconds = (repo.pushed_at - repo.created_at).total_seconds()
    return max(seconds / 86400, 0.0)


def classify_original(
    repo: Repository,
    thresholds: MetricThresholds = DEFAULT_THRESHOLDS,
) -> RepoOutcome:
    if lifespan_days(repo) >= thresholds.grit_long_term_days:
        return RepoOutcome.LONG_TERM
    if repo.stargazer_count >= thresholds.grit_gem_min_stars:
        return RepoOutcome.GEM
    return RepoOutcome.CHURN


def compute_grit_factor(
    repos: Sequence[Repository],
    login: str,
    thresholds: MetricThresholds = DEFAULT_THRESHOLDS,
) -> GritFactor:
    """Share of original (owned, non-fork) repositories that are long-term or gems."""
    counts = {outcome: 0 for outcome in RepoOutcome}
    originals = [r for r in repos if r.is_owned_by(login) and not r.is_fork]
    for repo in originals:
        counts[classify_original(repo, thresholds)] += 1

    total = len(originals)
    good = counts[RepoOutcome.LONG_TERM] + counts[RepoOutcome.GEM]
    return GritFactor(
        value=good / total if total else None,
        sample_size=total,
        long_term_count=counts[RepoOutcome.LONG_TERM],
        gem_count=counts[RepoOutcome.GEM],
        churn_count=counts[RepoOutcome.CHURN],
    )


def classify_fork(
    fork: Repository,
    fork_commits: Sequence[Commit],
    login: str,
    thresholds: MetricThresholds = DEFAULT_THRESHOLDS,
) -> ForkOutcome:
    """Classify a single owned fork from the PRs linked to its commits.

    Only cross-repository PRs whose base repository belongs to someone else
    are considered. Any merged one makes the fork a contributor fork.
    """
    lower = login.lower()
    max_base_stars = 0

    for commit in fork_commits:
        for pr in commit.associated_pull_requests:
            base = pr.base_repository
            if not pr.is_cross_repository or base is None or base.owner.lower() == lower:
                continue
            if pr.merged:
                return ForkOutcome.CONTRIBUTOR
            max_base_stars = max(max_base_stars, base.stargazer_count)

    if fork.stargazer_count >= thresholds.variant_min_stars:
        return ForkOutcome.VARIANT
    if max_base_stars > 0 and fork.stargazer_count / max_base_stars >= thresholds.variant_min_star_ratio:
        return ForkOutcome.VARIANT
    return ForkOutcome.NOISE


def compute_fork_destiny(
    repos: Sequence[Repository],
    commits: Sequence[Commit],
    login: str,
    thresholds: MetricThresholds = DEFAULT_THRESHOLDS,
) -> ForkDestiny:
    """Classify owned forks into contributor / variant / noise.

    This is a lower bound: only PRs linked to the fetched commit history are visible.
    """
    forks = [r for r in repos if r.is_fork and r.is_owned_by(login)]
    if not forks:
        return ForkDestiny()

    commits_by_repo: dict[str, list[Commit]] = {}
    for commit in commits:
        commits_by_repo.setdefault(commit.repo_full_name.lower(), []).append(commit)

    counts = {outcome: 0 for outcome in ForkOutcome}
    total_stars = 0
    variant_stars = 0
    for fork in forks:
        outcome = classify_fork(
            fork, commits_by_repo.get(fork.full_name.lower(), []), login, thresholds
        )
        counts[outcome] += 1
        total_stars += fork.stargazer_count
        if outcome is ForkOutcome.VARIANT:
            variant_stars += fork.stargazer_count

    logger.debug("Fork destiny for %d forks: %s", len(forks), counts)
    return ForkDestiny(
        total_forks=len(forks),
        contributor_forks=counts[ForkOutcome.CONTRIBUTOR],
        variant_forks=counts[ForkOutcome.VARIANT],
        noise_forks=counts[ForkOutcome.NOISE],
        total_fork_stars=total_stars,
        variant_fork_stars=variant_stars,
    )


def compute_contribution_momentum(
    contributions: ContributionsSummary | None,
    thresholds: MetricThresholds = DEFAULT_THRESHOLDS,
) -> ContributionMomentum:
    """Recent-quarter activity relative to the trailing year's quarterly baseline.

    The recent quarter is the last 12 weekly buckets (all of them if fewer
    exist); the baseline is a quarter of the whole calendar's total.
    """
    calendar = contributions.calendar if contributions is not None else None
    if calendar is None or not calendar.weeks:
        return ContributionMomentum(status="unknown")

    week_totals = [week.total for week in calendar.weeks]
    year_total = sum(week_totals)
    recent = sum(week_totals[-thresholds.momentum_recent_weeks :])
    baseline = year_total / 4

    if year_total == 0:
        return ContributionMomentum(
            value=None,
            recent_quarter_total=recent,
            year_total=0,
            baseline_quarter=0.0,
            status="ghost",
        )

    value = recent / baseline
    if value > thresholds.momentum_accelerating:
        status = "accelerating"
    elif value < thresholds.momentum_ghost:
        status = "ghost"
    elif value < thresholds.momentum_cooling:
        status = "cooling_down"
    else:
        # momentum_steady_low..momentum_steady_high is the steady band proper;
        # the transitional bands around it also report steady.
        status = "steady"

    return ContributionMomentum(
        value=value,
        recent_quarter_total=recent,
        year_total=year_total,
        baseline_quarter=baseline,
        status=status,
    )
