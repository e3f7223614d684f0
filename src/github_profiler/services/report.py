"""Report service: load raw records, run the engine, write the report files."""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, TypeVar

from pydantic import ValidationError

from github_profiler.config import Config, get_config
from github_profiler.engine import AnalysisInput, ProfileEngine
from github_profiler.exceptions import AnalysisError, GitHubProfilerError, RecordLoadError
from github_profiler.models.activity import Commit, PullRequest
from github_profiler.models.contribution import ContributionsSummary
from github_profiler.models.profile import AnalysisResult
from github_profiler.models.repository import Repository
from github_profiler.models.user import UserInfo
from github_profiler.output.json_writer import write_analysis
from github_profiler.utils.records import read_jsonl, read_optional_json, read_optional_text

logger = logging.getLogger(__name__)

REPOS_FILE = "repos.jsonl"
PRS_FILE = "prs.jsonl"
COMMITS_FILE = "commits.jsonl"
CONTRIBUTIONS_FILE = "contributions.json"
USER_INFO_FILE = "user_info.json"
README_FILE = "profile_readme.md"

T = TypeVar("T")


@dataclass
class ReportArtifacts:
    """Result of a report run and where it was written."""

    result: AnalysisResult
    profile_path: Path
    top_repos_path: Path


def _parse_records(
    path: Path, records: list[dict[str, Any]], parse: Callable[[dict[str, Any]], T]
) -> list[T]:
    parsed = []
    for index, record in enumerate(records, start=1):
        try:
            parsed.append(parse(record))
        except (ValidationError, AttributeError, TypeError) as e:
            raise RecordLoadError(
                f"Invalid record in {path} (record {index}): {e}",
                path=str(path),
                line=index,
            ) from e
    return parsed


def _parse_object(
    path: Path, data: dict[str, Any] | None, parse: Callable[[dict[str, Any]], T]
) -> T | None:
    if data is None:
        return None
    try:
        return parse(data)
    except (ValidationError, AttributeError, TypeError) as e:
        raise RecordLoadError(f"Invalid record in {path}: {e}", path=str(path)) from e


def load_raw_records(login: str, raw_dir: Path) -> AnalysisInput:
    """Load everything the fetching layer left in ``raw_dir``.

    Missing files are treated as "not fetched" and produce empty inputs.

    Raises:
        RecordLoadError: If a file exists but cannot be parsed
    """
    logger.info("Reading raw data for %s from %s", login, raw_dir)

    repos = _parse_records(
        raw_dir / REPOS_FILE, read_jsonl(raw_dir / REPOS_FILE), Repository.from_graphql
    )
    prs = _parse_records(raw_dir / PRS_FILE, read_jsonl(raw_dir / PRS_FILE), PullRequest.from_graphql)
    commits = _parse_records(
        raw_dir / COMMITS_FILE, read_jsonl(raw_dir / COMMITS_FILE), Commit.from_graphql
    )
    contributions = _parse_object(
        raw_dir / CONTRIBUTIONS_FILE,
        read_optional_json(raw_dir / CONTRIBUTIONS_FILE),
        ContributionsSummary.from_graphql,
    )
    user_info = _parse_object(
        raw_dir / USER_INFO_FILE,
        read_optional_json(raw_dir / USER_INFO_FILE),
        UserInfo.from_graphql,
    )
    readme = read_optional_text(raw_dir / README_FILE)

    logger.info(
        "Loaded %d repositories, %d pull requests, %d commits",
        len(repos),
        len(prs),
        len(commits),
    )
    if readme is None:
        logger.info("Profile README: not found")
    elif not readme.strip():
        logger.info("Profile README: file exists but is empty")
    if user_info is None:
        logger.info("User info: not found")
    if not repos and not prs:
        logger.warning("No raw data found in %s; was the fetch step run?", raw_dir)

    return AnalysisInput(
        login=login,
        repos=repos,
        prs=prs,
        commits=commits,
        contributions=contributions,
        user_info=user_info,
        readme_markdown=readme,
    )


def analyze_raw_records(
    login: str,
    raw_dir: Path,
    config: Config | None = None,
    now: datetime | None = None,
) -> AnalysisResult:
    """Load the raw records in ``raw_dir`` and build the profile without writing anything.

    Raises:
        RecordLoadError: If a raw file is malformed
        AnalysisError: If the engine fails unexpectedly
    """
    config = config or get_config()
    inputs = load_raw_records(login, raw_dir)

    try:
        return ProfileEngine(config).analyze(inputs, now=now)
    except GitHubProfilerError:
        raise
    except Exception as e:
        raise AnalysisError(f"Failed to analyze data for {login}: {e}", login=login) from e


def generate_report(
    login: str,
    raw_dir: Path | None = None,
    out_dir: Path | None = None,
    config: Config | None = None,
    now: datetime | None = None,
) -> ReportArtifacts:
    """Build the profile for ``login`` and write profile.json and top_repos.json.

    Args:
        login: GitHub login of the subject
        raw_dir: Directory with raw records (default: ``<out_dir>/raw``)
        out_dir: Report directory (default: ``<config.output_dir>/<login>``)
        config: Engine configuration (default: global config)
        now: Reference time passed through to the engine

    Returns:
        ReportArtifacts with the analysis result and written file paths

    Raises:
        RecordLoadError: If a raw file is malformed
        AnalysisError: If the engine or the writer fails
    """
    config = config or get_config()
    out_dir = out_dir or Path(config.output_dir) / login
    raw_dir = raw_dir or out_dir / "raw"

    result = analyze_raw_records(login, raw_dir, config=config, now=now)

    try:
        profile_path, top_repos_path = write_analysis(result, out_dir)
    except OSError as e:
        raise AnalysisError(f"Failed to write report files: {e}", login=login) from e

    logger.info("Wrote %s and %s", profile_path, top_repos_path)
    return ReportArtifacts(result=result, profile_path=profile_path, top_repos_path=top_repos_path)
