"""Contribution calendar and summary models."""

from collections.abc import Iterator
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict

from github_profiler.utils.dates import parse_date


class ContributionDay(BaseModel):
    """Single day in contribution calendar."""

    model_config = ConfigDict(frozen=True)

    date: date
    count: int = 0

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "ContributionDay | None":
        """Create from GraphQL response, or None if the date is unusable."""
        day = parse_date(data.get("date"))
        if day is None:
            return None
        return cls(date=day, count=data.get("contributionCount") or 0)


class ContributionWeek(BaseModel):
    """Week of contributions."""

    model_config = ConfigDict(frozen=True)

    days: tuple[ContributionDay, ...] = ()

    @property
    def total(self) -> int:
        return sum(day.count for day in self.days)

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "ContributionWeek":
        """Create from GraphQL response."""
        days = [
            day
            for day in (ContributionDay.from_graphql(d) for d in data.get("contributionDays") or [])
            if day is not None
        ]
        return cls(days=days)


class ContributionCalendar(BaseModel):
    """Full contribution calendar (the green squares mosaic)."""

    model_config = ConfigDict(frozen=True)

    total_contributions: int = 0
    weeks: tuple[ContributionWeek, ...] = ()

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "ContributionCalendar":
        """Create from GraphQL response."""
        weeks = [ContributionWeek.from_graphql(week) for week in data.get("weeks") or []]
        return cls(
            total_contributions=data.get("totalContributions") or 0,
            weeks=weeks,
        )

    def iter_days(self) -> Iterator[ContributionDay]:
        """Iterate over all days chronologically."""
        for week in self.weeks:
            yield from week.days

    def get_busiest_day(self) -> ContributionDay | None:
        """Find the day with most contributions."""
        busiest = None
        for day in self.iter_days():
            if busiest is None or day.count > busiest.count:
                busiest = day
        return busiest

    def get_streak(self) -> int:
        """Calculate current contribution streak (consecutive days with contributions)."""
        streak = 0
        for day in reversed(list(self.iter_days())):
            if day.count > 0:
                streak += 1
            else:
                # Stop at first day without contributions
                break
        return streak

    def get_longest_streak(self) -> int:
        """Calculate longest contribution streak."""
        longest = 0
        current = 0
        for day in self.iter_days():
            if day.count > 0:
                current += 1
                longest = max(longest, current)
            else:
                current = 0
        return longest


class ContributionsSummary(BaseModel):
    """Aggregate contribution counts plus the daily calendar."""

    model_config = ConfigDict(frozen=True)

    total_commit_contributions: int = 0
    total_issue_contributions: int = 0
    total_pull_request_contributions: int = 0
    total_pull_request_review_contributions: int = 0
    total_repository_contributions: int = 0
    calendar: ContributionCalendar | None = None

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "ContributionsSummary":
        """Create from GraphQL contributionsCollection response."""
        calendar_data = data.get("contributionCalendar")
        return cls(
            total_commit_contributions=data.get("totalCommitContributions") or 0,
            total_issue_contributions=data.get("totalIssueContributions") or 0,
            total_pull_request_contributions=data.get("totalPullRequestContributions") or 0,
            total_pull_request_review_contributions=(
                data.get("totalPullRequestReviewContributions") or 0
            ),
            total_repository_contributions=data.get("totalRepositoryContributions") or 0,
            calendar=ContributionCalendar.from_graphql(calendar_data) if calendar_data else None,
        )
