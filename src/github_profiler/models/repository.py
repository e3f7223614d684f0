"""Repository data models."""

from typing import Any

from pydantic import BaseModel, Field

from github_profiler.utils.dates import LenientDatetime


class Repository(BaseModel):
    """GitHub repository data."""

    name: str
    owner: str
    description: str | None = None
    is_fork: bool = False
    is_archived: bool = False
    primary_language: str | None = None
    languages: dict[str, int] = Field(default_factory=dict)  # language -> bytes
    topics: list[str] = Field(default_factory=list)
    stargazer_count: int = 0
    fork_count: int = 0
    watcher_count: int = 0
    license_spdx_id: str | None = None
    created_at: LenientDatetime = None
    pushed_at: LenientDatetime = None

    @property
    def full_name(self) -> str:
        """Repository name with owner (owner/name)."""
        return f"{self.owner}/{self.name}"

    @property
    def html_url(self) -> str:
        """Public web URL of the repository."""
        return f"https://github.com/{self.owner}/{self.name}"

    def is_owned_by(self, login: str) -> bool:
        """Case-insensitive ownership check."""
        return self.owner.lower() == login.lower()

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "Repository":
        """Create from GitHub GraphQL repository node."""
        primary = data.get("primaryLanguage") or {}
        watchers = data.get("watchers") or {}
        license_info = data.get("licenseInfo") or {}

        languages: dict[str, int] = {}
        for edge in (data.get("languages") or {}).get("edges") or []:
            lang = (edge.get("node") or {}).get("name")
            if lang:
                languages[lang] = languages.get(lang, 0) + (edge.get("size") or 0)

        topics = [
            node["topic"]["name"]
            for node in (data.get("repositoryTopics") or {}).get("nodes") or []
            if (node.get("topic") or {}).get("name")
        ]

        return cls(
            name=data.get("name", ""),
            owner=(data.get("owner") or {}).get("login", ""),
            description=data.get("description"),
            is_fork=data.get("isFork", False),
            is_archived=data.get("isArchived", False),
            primary_language=primary.get("name"),
            languages=languages,
            topics=topics,
            stargazer_count=data.get("stargazerCount") or 0,
            fork_count=data.get("forkCount") or 0,
            watcher_count=watchers.get("totalCount") or 0,
            license_spdx_id=license_info.get("spdxId"),
            created_at=data.get("createdAt"),
            pushed_at=data.get("pushedAt"),
        )
