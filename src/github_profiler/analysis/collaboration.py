"""Collaboration metrics: upstream orientation, external accept rate, Uni Index, talk vs code."""

import logging
from collections.abc import Sequence

from github_profiler.models.activity import Commit, PullRequest
from github_profiler.models.contribution import ContributionsSummary
from github_profiler.models.profile import CommunityEngagement, RatioMetric, UniIndex
from github_profiler.models.user import UserInfo

logger = logging.getLogger(__name__)


def compute_uoi(prs: Sequence[PullRequest], login: str) -> RatioMetric:
    """Upstream Orientation Index: share of PRs targeting repositories the subject does not own.

    Ownership is a case-insensitive comparison of the target owner with ``login``.
    """
    external = sum(1 for pr in prs if not pr.targets_owner(login))
    return RatioMetric.of(external, len(prs))


def compute_external_pr_accept_rate(prs: Sequence[PullRequest], login: str) -> RatioMetric:
    """Share of external PRs that were merged. The sample size is the external PR count."""
    external = [pr for pr in prs if not pr.targets_owner(login)]
    merged = sum(1 for pr in external if pr.is_merged)
    return RatioMetric.of(merged, len(external))


def owned_accounts(login: str, user_info: UserInfo | None, include_org_repos: bool) -> set[str]:
    """Lowercased logins whose repositories count as the subject's own."""
    owners = {login.lower()}
    if include_org_repos and user_info is not None:
        owners.update(org.login.lower() for org in user_info.organizations if org.login)
    return owners


def compute_uni_index(
    commits: Sequence[Commit],
    prs: Sequence[PullRequest],
    login: str,
    user_info: UserInfo | None = None,
    include_org_repos: bool = True,
) -> UniIndex:
    """Creator/collaborator spectrum score.

    Owned side: one point per commit in the subject's own repositories, plus
    one point per PR targeting an owned repository (two if merged). External
    side: the same PR scoring for PRs targeting anyone else. The value is
    owned / (owned + external); the sample size counts raw commits and PRs.
    """
    owners = owned_accounts(login, user_info, include_org_repos)

    owned = sum(1 for commit in commits if commit.is_own_repo)
    external = 0
    for pr in prs:
        points = 2 if pr.is_merged else 1
        if pr.repo_owner.lower() in owners:
            owned += points
        else:
            external += points

    total = owned + external
    logger.debug("Uni Index activity: owned=%d external=%d", owned, external)
    return UniIndex(
        value=owned / total if total else None,
        sample_size=len(commits) + len(prs),
        include_org_repos=include_org_repos,
        owned_points=owned,
        external_points=external,
    )


def compute_community_engagement(contributions: ContributionsSummary | None) -> CommunityEngagement:
    """Talk (issues opened + reviews given) over talk plus code (commits + PRs + repos created)."""
    if contributions is None:
        return CommunityEngagement()

    talk = (
        contributions.total_issue_contributions
        + contributions.total_pull_request_review_contributions
    )
    code = (
        contributions.total_commit_contributions
        + contributions.total_pull_request_contributions
        + contributions.total_repository_contributions
    )
    total = talk + code
    return CommunityEngagement(
        value=talk / total if total else None,
        sample_size=total,
        talk_events=talk,
        code_events=code,
    )
