"""Tests for UOI, accept rate, Uni Index and community engagement."""

import math

from github_profiler.analysis.collaboration import (
    compute_community_engagement,
    compute_external_pr_accept_rate,
    compute_uni_index,
    compute_uoi,
    owned_accounts,
)
from github_profiler.models.user import Organization, UserInfo


class TestUpstreamOrientation:
    """Tests for compute_uoi and compute_external_pr_accept_rate."""

    def test_example(self, make_pr):
        """Test one self PR and two external PRs, one of them merged."""
        prs = [
            make_pr(owner="alice"),
            make_pr(owner="upstream", merged=True),
            make_pr(owner="other"),
        ]

        uoi = compute_uoi(prs, "alice")
        accept = compute_external_pr_accept_rate(prs, "alice")

        assert math.isclose(uoi.value, 2 / 3)
        assert uoi.sample_size == 3
        assert accept.value == 0.5
        assert accept.sample_size == 2

    def test_login_is_case_insensitive(self, make_pr):
        """Test that owner comparison ignores case."""
        prs = [make_pr(owner="Alice"), make_pr(owner="ALICE")]

        assert compute_uoi(prs, "alice").value == 0.0
        assert compute_external_pr_accept_rate(prs, "alice").value is None

    def test_no_prs(self):
        """Test that an empty PR list yields null ratios."""
        uoi = compute_uoi([], "alice")
        accept = compute_external_pr_accept_rate([], "alice")

        assert uoi.value is None and uoi.sample_size == 0
        assert accept.value is None and accept.sample_size == 0


class TestUniIndex:
    """Tests for compute_uni_index."""

    def test_owned_and_external_points(self, make_commit, make_pr):
        """Test commit points plus PR points with a merge bonus."""
        commits = [make_commit(), make_commit(), make_commit(is_own_repo=False, owner="x")]
        prs = [
            make_pr(owner="alice", merged=True),  # owned: 2
            make_pr(owner="upstream", merged=True),  # external: 2
            make_pr(owner="upstream"),  # external: 1
        ]

        uni = compute_uni_index(commits, prs, "alice")

        # owned = 2 commits + 2, external = 3
        assert math.isclose(uni.value, 4 / 7)
        assert uni.sample_size == 6
        assert uni.owned_points == 4
        assert uni.external_points == 3

    def test_org_repos_count_as_owned(self, make_pr):
        """Test that organization PRs move to the owned side when enabled."""
        user = UserInfo(login="alice", organizations=[Organization(login="Acme")])
        prs = [make_pr(owner="acme")]

        with_orgs = compute_uni_index([], prs, "alice", user_info=user, include_org_repos=True)
        without = compute_uni_index([], prs, "alice", user_info=user, include_org_repos=False)

        assert with_orgs.value == 1.0
        assert without.value == 0.0
        assert without.include_org_repos is False

    def test_no_activity(self):
        """Test that no commits and no PRs yield a null value."""
        uni = compute_uni_index([], [], "alice")

        assert uni.value is None
        assert uni.sample_size == 0

    def test_only_foreign_commits(self, make_commit):
        """Test commits outside own repos score nothing on either side."""
        uni = compute_uni_index([make_commit(is_own_repo=False)], [], "alice")

        assert uni.value is None
        assert uni.sample_size == 1
        assert uni.owned_points + uni.external_points == 0
        assert not uni.present

    def test_owned_accounts(self):
        """Test owned account set with and without organizations."""
        user = UserInfo(login="alice", organizations=[Organization(login="Acme")])

        assert owned_accounts("Alice", user, True) == {"alice", "acme"}
        assert owned_accounts("Alice", user, False) == {"alice"}
        assert owned_accounts("Alice", None, True) == {"alice"}


class TestCommunityEngagement:
    """Tests for compute_community_engagement."""

    def test_talk_over_total(self, make_contributions):
        """Test issues and reviews against commits, PRs and repositories."""
        contributions = make_contributions(
            total_issue_contributions=3,
            total_pull_request_review_contributions=7,
            total_commit_contributions=20,
            total_pull_request_contributions=8,
            total_repository_contributions=2,
        )

        engagement = compute_community_engagement(contributions)

        assert engagement.value == 0.25
        assert engagement.sample_size == 40
        assert engagement.talk_events == 10
        assert engagement.code_events == 30

    def test_no_events(self, make_contributions):
        """Test that zero events yield a null value."""
        engagement = compute_community_engagement(make_contributions())

        assert engagement.value is None
        assert engagement.sample_size == 0

    def test_missing_summary(self):
        """Test that a missing summary yields a null value."""
        assert compute_community_engagement(None).value is None
