"""Pull request and commit data models."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from github_profiler.utils.dates import LenientDatetime

EmailTld = Literal[".edu", ".gov", ".org", "other"]


class EmailInfo(BaseModel):
    """Resolved domain and TLD class of a commit author's email."""

    domain: str | None = None
    tld: EmailTld = "other"


def parse_email_info(email: str | None) -> EmailInfo:
    """Resolve the domain and TLD class of an email address.

    Malformed addresses (no "@" or nothing after it) resolve to no domain.
    """
    if not email:
        return EmailInfo()

    at = email.rfind("@")
    if at == -1 or at == len(email) - 1:
        return EmailInfo()

    domain = email[at + 1 :].lower()
    tld: EmailTld = "other"
    for suffix in (".edu", ".gov", ".org"):
        if domain.endswith(suffix):
            tld = suffix  # type: ignore[assignment]
            break

    return EmailInfo(domain=domain, tld=tld)


class PullRequest(BaseModel):
    """Pull request authored by the subject."""

    repo_name: str
    repo_owner: str
    url: str = ""
    created_at: LenientDatetime = None
    merged_at: LenientDatetime = None
    closed_at: LenientDatetime = None
    is_cross_repository: bool = False
    additions: int = 0
    deletions: int = 0
    changed_files: int = 0

    @property
    def is_merged(self) -> bool:
        return self.merged_at is not None

    def targets_owner(self, login: str) -> bool:
        """Whether the PR's target repository belongs to ``login``."""
        return self.repo_owner.lower() == login.lower()

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "PullRequest":
        """Create from GitHub GraphQL pull request node."""
        repository = data.get("repository") or {}
        return cls(
            repo_name=repository.get("name", ""),
            repo_owner=(repository.get("owner") or {}).get("login", ""),
            url=data.get("url", ""),
            created_at=data.get("createdAt"),
            merged_at=data.get("mergedAt"),
            closed_at=data.get("closedAt"),
            is_cross_repository=data.get("isCrossRepository", False),
            additions=data.get("additions") or 0,
            deletions=data.get("deletions") or 0,
            changed_files=data.get("changedFiles") or 0,
        )


class RepositoryRef(BaseModel):
    """Minimal repository reference attached to an associated PR."""

    name: str
    owner: str
    stargazer_count: int = 0

    @classmethod
    def from_graphql(cls, data: dict[str, Any] | None) -> "RepositoryRef | None":
        if not data:
            return None
        return cls(
            name=data.get("name", ""),
            owner=(data.get("owner") or {}).get("login", ""),
            stargazer_count=data.get("stargazerCount") or 0,
        )


class AssociatedPullRequest(BaseModel):
    """A pull request linked to a commit."""

    url: str = ""
    is_cross_repository: bool = False
    merged: bool = False
    merged_at: LenientDatetime = None
    base_repository: RepositoryRef | None = None
    head_repository: RepositoryRef | None = None

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "AssociatedPullRequest":
        return cls(
            url=data.get("url", ""),
            is_cross_repository=data.get("isCrossRepository", False),
            merged=data.get("merged", False) or data.get("mergedAt") is not None,
            merged_at=data.get("mergedAt"),
            base_repository=RepositoryRef.from_graphql(data.get("baseRepository")),
            head_repository=RepositoryRef.from_graphql(data.get("headRepository")),
        )


class Commit(BaseModel):
    """Commit authored by the subject."""

    repo_name: str
    repo_owner: str
    is_own_repo: bool = False
    authored_at: LenientDatetime = None
    committed_at: LenientDatetime = None
    is_merge: bool = False
    additions: int = 0
    deletions: int = 0
    author_login: str | None = None
    author_email: str | None = None
    email_domain: str | None = None
    email_tld: EmailTld = "other"
    associated_pull_requests: list[AssociatedPullRequest] = Field(default_factory=list)

    @property
    def repo_full_name(self) -> str:
        return f"{self.repo_owner}/{self.repo_name}"

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "Commit":
        """Create from a commit record (GraphQL commit node plus repository context)."""
        repository = data.get("repository") or {}
        author = data.get("author") or {}
        email = author.get("email")
        email_info = parse_email_info(email)

        parents = data.get("parents") or {}
        if "isMerge" in data:
            is_merge = bool(data["isMerge"])
        else:
            is_merge = (parents.get("totalCount") or 0) > 1

        prs = [
            AssociatedPullRequest.from_graphql(node)
            for node in (data.get("associatedPullRequests") or {}).get("nodes") or []
            if node
        ]

        return cls(
            repo_name=repository.get("name", ""),
            repo_owner=(repository.get("owner") or {}).get("login", ""),
            is_own_repo=data.get("isOwnRepo", False),
            authored_at=data.get("authoredDate"),
            committed_at=data.get("committedDate"),
            is_merge=is_merge,
            additions=data.get("additions") or 0,
            deletions=data.get("deletions") or 0,
            author_login=(author.get("user") or {}).get("login"),
            author_email=email,
            email_domain=data.get("emailDomain") or email_info.domain,
            email_tld=data.get("emailTld") or email_info.tld,
            associated_pull_requests=prs,
        )
