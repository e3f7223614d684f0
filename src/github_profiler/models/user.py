"""User info models."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class Organization(BaseModel):
    """GitHub organization the user belongs to."""

    model_config = ConfigDict(frozen=True)

    login: str
    name: str | None = None
    description: str | None = None
    website_url: str | None = None

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "Organization":
        """Create from GitHub GraphQL organization node."""
        return cls(
            login=data.get("login", ""),
            name=data.get("name"),
            description=data.get("description"),
            website_url=data.get("websiteUrl"),
        )


class UserInfo(BaseModel):
    """Self-reported profile fields of a GitHub user."""

    login: str
    name: str | None = None
    bio: str | None = None
    company: str | None = None
    location: str | None = None
    website_url: str | None = None
    twitter_username: str | None = None
    followers: int = 0
    following: int = 0
    organizations: tuple[Organization, ...] = ()

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "UserInfo":
        """Create from GitHub GraphQL user node.

        Follower counts may be given either as plain integers or as
        ``{"totalCount": n}`` connections.
        """
        orgs = data.get("organizations") or []
        if isinstance(orgs, dict):
            orgs = orgs.get("nodes") or []

        return cls(
            login=data.get("login", ""),
            name=data.get("name"),
            bio=data.get("bio"),
            company=data.get("company"),
            location=data.get("location"),
            website_url=data.get("websiteUrl"),
            twitter_username=data.get("twitterUsername"),
            followers=_count(data.get("followers")),
            following=_count(data.get("following")),
            organizations=[Organization.from_graphql(o) for o in orgs if o],
        )


def _count(value: Any) -> int:
    if isinstance(value, dict):
        return value.get("totalCount") or 0
    return value or 0
