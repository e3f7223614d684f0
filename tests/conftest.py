"""Pytest configuration and fixtures."""

import json
from datetime import date, datetime, timedelta, timezone

import pytest

from github_profiler.config import Config, set_config
from github_profiler.models.activity import (
    AssociatedPullRequest,
    Commit,
    PullRequest,
    RepositoryRef,
)
from github_profiler.models.contribution import (
    ContributionCalendar,
    ContributionDay,
    ContributionsSummary,
    ContributionWeek,
)
from github_profiler.models.repository import Repository

LOGIN = "alice"
NOW = datetime(2024, 6, 1, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def reset_globals(monkeypatch):
    """Reset global config and profiler environment before each test."""
    for name in (
        "GITHUB_PROFILER_TZ",
        "GITHUB_PROFILER_INCLUDE_ORG_REPOS",
        "GITHUB_PROFILER_OUTPUT_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration writing under a temporary directory."""
    config = Config(output_dir=str(tmp_path / "out"))
    set_config(config)
    return config


@pytest.fixture
def now():
    """Fixed reference time for reproducible analyses."""
    return NOW


@pytest.fixture
def make_repo():
    """Factory for Repository records owned by ``alice`` unless told otherwise."""

    def _make(name="repo", owner=LOGIN, **kwargs):
        return Repository(name=name, owner=owner, **kwargs)

    return _make


@pytest.fixture
def make_pr():
    """Factory for PullRequest records."""

    def _make(owner="upstream", name="project", merged=False, created_at=None, **kwargs):
        created_at = created_at or datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)
        return PullRequest(
            repo_name=name,
            repo_owner=owner,
            url=f"https://github.com/{owner}/{name}/pull/1",
            created_at=created_at,
            merged_at=created_at + timedelta(days=1) if merged else None,
            **kwargs,
        )

    return _make


@pytest.fixture
def make_commit():
    """Factory for Commit records."""

    def _make(authored_at=None, owner=LOGIN, name="repo", is_own_repo=True, **kwargs):
        return Commit(
            repo_name=name,
            repo_owner=owner,
            is_own_repo=is_own_repo,
            authored_at=authored_at or datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc),
            **kwargs,
        )

    return _make


@pytest.fixture
def make_fork_pr():
    """Factory for a cross-repository PR opened from a fork."""

    def _make(base_owner="upstream", base_name="project", base_stars=0, merged=False):
        return AssociatedPullRequest(
            url=f"https://github.com/{base_owner}/{base_name}/pull/7",
            is_cross_repository=True,
            merged=merged,
            base_repository=RepositoryRef(
                name=base_name, owner=base_owner, stargazer_count=base_stars
            ),
        )

    return _make


@pytest.fixture
def make_contributions():
    """Factory for a ContributionsSummary built from weekly totals.

    Each week's total is placed on its first day; the other six days are zero.
    """

    def _make(week_totals=None, **counts):
        calendar = None
        if week_totals is not None:
            start = date(2023, 6, 4)
            weeks = []
            for i, total in enumerate(week_totals):
                first = start + timedelta(weeks=i)
                weeks.append(
                    ContributionWeek(
                        days=[
                            ContributionDay(
                                date=first + timedelta(days=d),
                                count=total if d == 0 else 0,
                            )
                            for d in range(7)
                        ]
                    )
                )
            calendar = ContributionCalendar(
                total_contributions=sum(week_totals),
                weeks=weeks,
            )
        return ContributionsSummary(calendar=calendar, **counts)

    return _make


@pytest.fixture
def raw_dir(tmp_path):
    """Raw record directory populated like the fetching layer leaves it."""
    raw = tmp_path / "raw"
    raw.mkdir()

    repos = [
        {
            "name": "toolkit",
            "owner": {"login": LOGIN},
            "isFork": False,
            "primaryLanguage": {"name": "Python"},
            "languages": {"edges": [{"size": 9000, "node": {"name": "Python"}}]},
            "repositoryTopics": {"nodes": [{"topic": {"name": "django"}}]},
            "stargazerCount": 120,
            "createdAt": "2022-01-01T00:00:00Z",
            "pushedAt": "2024-05-01T00:00:00Z",
            "description": "Handy tools",
        },
        {
            "name": "fork-of-lib",
            "owner": {"login": LOGIN},
            "isFork": True,
            "primaryLanguage": {"name": "Go"},
            "stargazerCount": 0,
            "createdAt": "2023-01-01T00:00:00Z",
            "pushedAt": "2023-01-05T00:00:00Z",
        },
    ]
    prs = [
        {
            "url": "https://github.com/upstream/lib/pull/3",
            "createdAt": "2024-02-01T10:15:00Z",
            "mergedAt": "2024-02-02T09:00:00Z",
            "isCrossRepository": True,
            "repository": {"name": "lib", "owner": {"login": "upstream"}},
        },
        {
            "url": "https://github.com/alice/toolkit/pull/1",
            "createdAt": "2024-03-01T10:45:00Z",
            "repository": {"name": "toolkit", "owner": {"login": LOGIN}},
        },
    ]
    commits = [
        {
            "repository": {"name": "fork-of-lib", "owner": {"login": LOGIN}},
            "isOwnRepo": True,
            "authoredDate": "2023-01-02T23:30:00Z",
            "author": {"email": "alice@cs.example.edu", "user": {"login": LOGIN}},
            "associatedPullRequests": {
                "nodes": [
                    {
                        "url": "https://github.com/upstream/lib/pull/3",
                        "isCrossRepository": True,
                        "merged": True,
                        "baseRepository": {
                            "name": "lib",
                            "owner": {"login": "upstream"},
                            "stargazerCount": 900,
                        },
                    }
                ]
            },
        },
    ]
    contributions = {
        "totalCommitContributions": 40,
        "totalIssueContributions": 2,
        "totalPullRequestContributions": 6,
        "totalPullRequestReviewContributions": 1,
        "totalRepositoryContributions": 1,
    }
    user_info = {
        "login": LOGIN,
        "name": "Alice",
        "bio": "Builds tools",
        "followers": {"totalCount": 12},
        "following": 3,
        "organizations": {"nodes": [{"login": "acme"}]},
    }

    (raw / "repos.jsonl").write_text("\n".join(json.dumps(r) for r in repos) + "\n")
    (raw / "prs.jsonl").write_text("\n".join(json.dumps(p) for p in prs) + "\n")
    (raw / "commits.jsonl").write_text("\n".join(json.dumps(c) for c in commits) + "\n")
    (raw / "contributions.json").write_text(json.dumps(contributions))
    (raw / "user_info.json").write_text(json.dumps(user_info))
    (raw / "profile_readme.md").write_text(
        "# Hi, I'm Alice\n"
        "I write Python and Go, mostly with Django.\n"
        "See https://github.com/alice/toolkit and https://github.com/alice/gone.\n"
    )
    return raw
