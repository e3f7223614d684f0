"""Tests for Grit Factor, Fork Destiny and Contribution Momentum."""

from datetime import datetime, timedelta, timezone

import pytest

from github_profiler.analysis.delivery import (
    ForkOutcome,
    RepoOutcome,
    classify_original,
    compute_contribution_momentum,
    compute_fork_destiny,
    compute_grit_factor,
    lifespan_days,
)
from github_profiler.config import MetricThresholds

CREATED = datetime(2023, 1, 1, tzinfo=timezone.utc)


def aged(make_repo, days, **kwargs):
    return make_repo(created_at=CREATED, pushed_at=CREATED + timedelta(days=days), **kwargs)


class TestGritFactor:
    """Tests for compute_grit_factor."""

    def test_classification(self, make_repo):
        """Test long-term, gem and churn outcomes."""
        assert classify_original(aged(make_repo, 90)) is RepoOutcome.LONG_TERM
        assert classify_original(aged(make_repo, 10, stargazer_count=5)) is RepoOutcome.GEM
        assert classify_original(aged(make_repo, 89, stargazer_count=4)) is RepoOutcome.CHURN

    def test_value_and_counts(self, make_repo):
        """Test that counts sum to the sample and forks are ignored."""
        repos = [
            aged(make_repo, 400, name="a"),
            aged(make_repo, 3, name="b", stargazer_count=12),
            aged(make_repo, 3, name="c"),
            aged(make_repo, 3, name="d"),
            aged(make_repo, 400, name="fork", is_fork=True),
            aged(make_repo, 400, name="theirs", owner="bob"),
        ]

        grit = compute_grit_factor(repos, "alice")

        assert grit.value == 0.5
        assert grit.sample_size == 4
        assert (grit.long_term_count, grit.gem_count, grit.churn_count) == (1, 1, 2)
        assert grit.long_term_count + grit.gem_count + grit.churn_count == grit.sample_size

    def test_inconsistent_timestamps_clamped(self, make_repo):
        """Test that a push before creation counts as zero lifespan."""
        repo = aged(make_repo, -30)

        assert lifespan_days(repo) == 0.0
        assert lifespan_days(make_repo()) == 0.0

    def test_no_originals(self, make_repo):
        """Test that no originals yields a null value."""
        grit = compute_grit_factor([make_repo(is_fork=True)], "alice")

        assert grit.value is None
        assert grit.sample_size == 0

    def test_custom_thresholds(self, make_repo):
        """Test that thresholds are configurable."""
        thresholds = MetricThresholds(grit_long_term_days=30)

        grit = compute_grit_factor([aged(make_repo, 45)], "alice", thresholds)

        assert grit.long_term_count == 1


class TestForkDestiny:
    """Tests for compute_fork_destiny."""

    def test_contributor_fork(self, make_repo, make_commit, make_fork_pr):
        """Test that a merged upstream PR from the fork makes it a contributor."""
        fork = make_repo("lib", is_fork=True)
        commits = [
            make_commit(name="lib", associated_pull_requests=[make_fork_pr(merged=True)])
        ]

        destiny = compute_fork_destiny([fork], commits, "alice")

        assert destiny.total_forks == 1
        assert destiny.contributor_forks == 1

    def test_variant_by_own_stars(self, make_repo):
        """Test that a fork with 50+ stars is a variant."""
        fork = make_repo("lib", is_fork=True, stargazer_count=50)

        destiny = compute_fork_destiny([fork], [], "alice")

        assert destiny.variant_forks == 1
        assert destiny.variant_fork_stars == 50
        assert destiny.total_fork_stars == 50

    def test_variant_by_star_ratio(self, make_repo, make_commit, make_fork_pr):
        """Test that stars relative to the targeted base decide variant status."""
        fork = make_repo("lib", is_fork=True, stargazer_count=30)
        commits = [
            make_commit(name="LIB", associated_pull_requests=[make_fork_pr(base_stars=100)])
        ]

        destiny = compute_fork_destiny([fork], commits, "alice")

        assert destiny.variant_forks == 1

    def test_noise_fork(self, make_repo, make_commit, make_fork_pr):
        """Test that an unmerged PR against a popular base leaves the fork as noise."""
        fork = make_repo("lib", is_fork=True, stargazer_count=2)
        commits = [
            make_commit(name="lib", associated_pull_requests=[make_fork_pr(base_stars=1000)])
        ]

        destiny = compute_fork_destiny([fork], commits, "alice")

        assert destiny.noise_forks == 1

    def test_ignores_prs_to_self(self, make_repo, make_commit, make_fork_pr):
        """Test that merged PRs back into the subject's own repos do not count."""
        fork = make_repo("lib", is_fork=True)
        commits = [
            make_commit(
                name="lib",
                associated_pull_requests=[make_fork_pr(base_owner="alice", merged=True)],
            )
        ]

        destiny = compute_fork_destiny([fork], commits, "alice")

        assert destiny.contributor_forks == 0
        assert destiny.noise_forks == 1

    def test_counts_sum_to_total(self, make_repo):
        """Test that only owned forks are classified."""
        repos = [
            make_repo("a", is_fork=True),
            make_repo("b", is_fork=True, stargazer_count=80),
            make_repo("c"),
            make_repo("d", owner="bob", is_fork=True),
        ]

        destiny = compute_fork_destiny(repos, [], "alice")

        assert destiny.total_forks == 2
        assert (
            destiny.contributor_forks + destiny.variant_forks + destiny.noise_forks
            == destiny.total_forks
        )

    def test_outcome_values(self):
        """Test enum values used in logs and exports."""
        assert ForkOutcome.CONTRIBUTOR.value == "contributor"
        assert RepoOutcome.GEM.value == "gem"


class TestContributionMomentum:
    """Tests for compute_contribution_momentum."""

    @pytest.mark.parametrize(
        "recent_weekly,expected",
        [
            (30, "accelerating"),
            (10, "steady"),
            (7, "steady"),
            (3, "cooling_down"),
            (0, "ghost"),
        ],
    )
    def test_status(self, make_contributions, recent_weekly, expected):
        """Test status bands against a flat 40-week history."""
        weeks = [10] * 40 + [recent_weekly] * 12

        momentum = compute_contribution_momentum(make_contributions(weeks))

        assert momentum.status == expected

    def test_value(self, make_contributions):
        """Test recent quarter over a quarter of the year."""
        momentum = compute_contribution_momentum(make_contributions([1] * 52))

        assert momentum.year_total == 52
        assert momentum.recent_quarter_total == 12
        assert momentum.baseline_quarter == 13.0
        assert momentum.value == pytest.approx(12 / 13)
        assert momentum.status == "steady"

    def test_fewer_than_twelve_weeks(self, make_contributions):
        """Test that all weeks form the recent quarter when fewer exist."""
        momentum = compute_contribution_momentum(make_contributions([2, 2, 2]))

        assert momentum.recent_quarter_total == 6
        assert momentum.value == 4.0
        assert momentum.status == "accelerating"

    def test_zero_year(self, make_contributions):
        """Test that an all-zero calendar is a ghost with no value."""
        momentum = compute_contribution_momentum(make_contributions([0] * 52))

        assert momentum.status == "ghost"
        assert momentum.value is None

    def test_missing_calendar(self, make_contributions):
        """Test unknown status without calendar data."""
        assert compute_contribution_momentum(None).status == "unknown"
        assert compute_contribution_momentum(make_contributions()).status == "unknown"
        assert compute_contribution_momentum(make_contributions([])).value is None
