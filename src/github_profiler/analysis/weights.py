"""Language and topic weights, and focus ratio."""

import logging
import math
from collections.abc import Iterable

from github_profiler.models.profile import LanguageWeight, RatioMetric, TopicWeight
from github_profiler.models.repository import Repository

logger = logging.getLogger(__name__)


def repo_weight(repo: Repository) -> float:
    """Star-based relevance of a repository: log(1 + stars), at least 1 for unstarred repos."""
    w = math.log1p(max(repo.stargazer_count, 0))
    return w if w > 0 else 1.0


def compute_language_weights(repos: Iterable[Repository]) -> list[LanguageWeight]:
    """Compute the star-weighted language distribution.

    Each repository's weight is split across its languages by byte share.
    Repositories without byte-level data attribute their whole weight to the
    primary language; repositories with neither are skipped.

    Returns:
        Language weights summing to 1.0, sorted by descending weight, or an
        empty list if no repository has language data.
    """
    totals: dict[str, float] = {}

    for repo in repos:
        w = repo_weight(repo)
        byte_total = sum(size for size in repo.languages.values() if size > 0)

        if byte_total > 0:
            for lang, size in repo.languages.items():
                if size > 0:
                    totals[lang] = totals.get(lang, 0.0) + w * size / byte_total
        elif repo.primary_language:
            totals[repo.primary_language] = totals.get(repo.primary_language, 0.0) + w

    grand_total = sum(totals.values())
    if grand_total <= 0:
        return []

    weights = [
        LanguageWeight(lang=lang, weight=value / grand_total) for lang, value in totals.items()
    ]
    return sorted(weights, key=lambda x: x.weight, reverse=True)


def compute_topic_weights(repos: Iterable[Repository]) -> list[TopicWeight]:
    """Compute the star-weighted topic distribution.

    Unlike languages, a repository's weight is attributed in full to every
    topic it declares.
    """
    totals: dict[str, float] = {}
    counts: dict[str, int] = {}

    for repo in repos:
        if not repo.topics:
            continue
        w = repo_weight(repo)
        for topic in dict.fromkeys(repo.topics):
            totals[topic] = totals.get(topic, 0.0) + w
            counts[topic] = counts.get(topic, 0) + 1

    grand_total = sum(totals.values())
    if grand_total <= 0:
        return []

    weights = [
        TopicWeight(topic=topic, weight=value / grand_total, count=counts[topic])
        for topic, value in totals.items()
    ]
    return sorted(weights, key=lambda x: x.weight, reverse=True)


def compute_focus_ratio(repos: Iterable[Repository]) -> RatioMetric:
    """Share of total code bytes held by the single most-used language.

    No star weighting. The sample size is the total byte count.
    """
    bytes_by_lang: dict[str, int] = {}
    for repo in repos:
        for lang, size in repo.languages.items():
            if size > 0:
                bytes_by_lang[lang] = bytes_by_lang.get(lang, 0) + size

    total = sum(bytes_by_lang.values())
    if total == 0:
        logger.debug("No language byte data; focus ratio unavailable")
        return RatioMetric()

    return RatioMetric.of(max(bytes_by_lang.values()), total)
