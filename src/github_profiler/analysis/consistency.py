"""Cross-check a profile README's claims against measured activity."""

import logging
import re
from collections.abc import Sequence

from github_profiler.analysis.keywords import extract_languages, extract_topics
from github_profiler.config import DEFAULT_THRESHOLDS, MetricThresholds
from github_profiler.models.profile import (
    ConsistencyLevel,
    ConsistencySignals,
    LanguageWeight,
    ReadmeAnalysis,
)
from github_profiler.models.repository import Repository

logger = logging.getLogger(__name__)


def readme_haystack(readme: ReadmeAnalysis) -> str:
    """Text that claims are extracted from.

    Plain text plus image alt texts (badges often name a language only in their
    alt text). Raw markdown is used only when neither is available.
    """
    texts = []
    if readme.plain_text:
        texts.append(readme.plain_text)
    if readme.image_alt_texts:
        texts.append(" ".join(readme.image_alt_texts))
    if not texts and readme.markdown:
        texts.append(readme.markdown)
    return "\n".join(texts)


def extract_owned_repo_mentions(markdown: str | None, login: str) -> list[str]:
    """Links to repositories in the subject's own namespace, as lowercase ``login/repo``.

    Order of first appearance is kept and duplicates are dropped.
    """
    if not markdown or not login:
        return []

    owner = login.lower()
    pattern = re.compile(rf"https://github\.com/{re.escape(owner)}/([A-Za-z0-9_.-]+)", re.IGNORECASE)

    mentions: dict[str, None] = {}
    for match in pattern.finditer(markdown):
        name = match.group(1).lower().rstrip(".")
        if name.endswith(".git"):
            name = name[: -len(".git")]
        if name:
            mentions[f"{owner}/{name}"] = None
    return list(mentions)


def consistency_level(
    supported_ratio: float | None,
    thresholds: MetricThresholds = DEFAULT_THRESHOLDS,
) -> ConsistencyLevel:
    if supported_ratio is None:
        return "unknown"
    if supported_ratio >= thresholds.consistency_strong:
        return "strong"
    if supported_ratio >= thresholds.consistency_partial:
        return "partial"
    return "poor"


def compute_readme_consistency(
    readme: ReadmeAnalysis,
    skills: Sequence[LanguageWeight],
    login: str,
    repos: Sequence[Repository],
    thresholds: MetricThresholds = DEFAULT_THRESHOLDS,
) -> ConsistencySignals:
    """Compare languages, topics and repository links claimed in the README with the data.

    A README that asserts no language yields consistency "unknown" with a
    null supported ratio.
    """
    haystack = readme_haystack(readme)
    readme_languages = extract_languages(haystack) if haystack else []
    metric_languages = [skill.lang for skill in skills]
    measured = {lang.lower() for lang in metric_languages}
    language_overlap = [lang for lang in readme_languages if lang.lower() in measured]

    supported_ratio = (
        len(language_overlap) / len(readme_languages) if readme_languages else None
    )

    owner = login.lower()
    mentioned = extract_owned_repo_mentions(readme.markdown, login)
    in_data = {f"{owner}/{repo.name.lower()}" for repo in repos if repo.is_owned_by(login)}
    found = [full for full in mentioned if full in in_data]
    missing = [full for full in mentioned if full not in in_data]

    readme_topics = extract_topics(haystack) if haystack else []
    repo_topics = {topic.lower() for repo in repos for topic in repo.topics}
    metric_topics = sorted(repo_topics)
    topic_overlap = [topic for topic in readme_topics if topic in repo_topics]

    level = consistency_level(supported_ratio, thresholds)
    logger.debug(
        "README consistency: %d languages asserted, %d supported -> %s",
        len(readme_languages),
        len(language_overlap),
        level,
    )
    return ConsistencySignals(
        readme_languages=tuple(readme_languages),
        metric_languages=tuple(metric_languages),
        language_overlap=tuple(language_overlap),
        readme_language_supported_ratio=supported_ratio,
        readme_vs_skills_consistency=level,
        owned_repos_mentioned=tuple(mentioned),
        owned_repos_found_in_data=tuple(found),
        owned_repos_missing_in_data=tuple(missing),
        readme_topics=tuple(readme_topics),
        metric_topics=tuple(metric_topics),
        topic_overlap=tuple(topic_overlap),
    )
