"""Profile README style classification and plain-text extraction."""

import logging
import re

from github_profiler.config import DEFAULT_THRESHOLDS, MetricThresholds
from github_profiler.models.profile import ReadmeAnalysis, ReadmeStyle

logger = logging.getLogger(__name__)

_MD_IMAGE_RE = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")
_HTML_IMG_RE = re.compile(r"<img\b[^>]*>", re.IGNORECASE)
_HTML_ALT_RE = re.compile(r"""alt=["']([^"']+)["']""", re.IGNORECASE)

_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
_INLINE_CODE_RE = re.compile(r"`([^`]+)`")
_LINE_MARKER_RE = re.compile(r"^(\s*[*\-+>]|#{1,6})\s+")
_HTML_TAG_RE = re.compile(r"<[^>]+>")
_NEWLINE_RE = re.compile(r"\r?\n")


def strip_markdown_formatting(line: str) -> str:
    """Strip markdown syntax from a single line, keeping the readable text.

    Images are dropped, links keep their text, inline code keeps its content,
    heading/list/quote markers and HTML tags are removed.
    """
    result = _MD_IMAGE_RE.sub(" ", line)
    result = _LINK_RE.sub(r"\1", result)
    result = _INLINE_CODE_RE.sub(r"\1", result)
    result = _LINE_MARKER_RE.sub("", result)
    result = _HTML_TAG_RE.sub(" ", result)
    return result


def extract_images(markdown: str) -> tuple[int, list[str]]:
    """Count markdown and HTML images and collect their non-blank alt texts."""
    count = 0
    alt_texts: list[str] = []

    for match in _MD_IMAGE_RE.finditer(markdown):
        count += 1
        alt = match.group(1).strip()
        if alt:
            alt_texts.append(alt)

    for match in _HTML_IMG_RE.finditer(markdown):
        count += 1
        alt_match = _HTML_ALT_RE.search(match.group(0))
        if alt_match and alt_match.group(1).strip():
            alt_texts.append(alt_match.group(1).strip())

    return count, alt_texts


def classify_style(
    line_count: int,
    char_count: int,
    image_count: int,
    thresholds: MetricThresholds = DEFAULT_THRESHOLDS,
) -> ReadmeStyle:
    """Pick a README style. Rules are checked in order; the first match wins."""
    if line_count <= 1 and char_count <= thresholds.one_liner_max_chars and image_count == 0:
        return "one_liner"
    if image_count > 0 and image_count >= line_count:
        return "visual_dashboard"
    if line_count >= 2 and char_count >= thresholds.short_bio_min_chars and image_count == 0:
        return "short_bio"
    return "mixed"


def analyze_profile_readme(
    markdown: str | None,
    thresholds: MetricThresholds = DEFAULT_THRESHOLDS,
) -> ReadmeAnalysis:
    """Classify a profile README and extract its plain text.

    Args:
        markdown: Raw README markdown, or None if the user has no profile README

    Returns:
        ReadmeAnalysis with style "none" for a missing README and "empty" for
        a blank one.
    """
    if markdown is None:
        return ReadmeAnalysis(style="none")

    if not markdown.strip():
        return ReadmeAnalysis(style="empty", markdown="", plain_text="")

    image_count, alt_texts = extract_images(markdown)

    text_lines = []
    for line in _NEWLINE_RE.split(markdown):
        stripped = strip_markdown_formatting(line).strip()
        if stripped:
            text_lines.append(stripped)

    char_count = sum(len(line) for line in text_lines)
    style = classify_style(len(text_lines), char_count, image_count, thresholds)
    plain_text = "\n".join(text_lines) if text_lines else None

    logger.debug(
        "README: %d text lines, %d chars, %d images -> %s",
        len(text_lines),
        char_count,
        image_count,
        style,
    )
    return ReadmeAnalysis(
        style=style,
        markdown=markdown,
        plain_text=plain_text,
        text_excerpt=plain_text[: thresholds.excerpt_chars] if plain_text else None,
        image_alt_texts=tuple(alt_texts),
        image_count=image_count,
        text_line_count=len(text_lines),
    )
