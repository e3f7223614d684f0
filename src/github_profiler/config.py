"""Configuration management for GitHub Profiler."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from github_profiler.exceptions import ConfigurationError


@dataclass(frozen=True)
class MetricThresholds:
    """Policy constants used by the metric classifiers.

    These are tuning knobs, not derived statistics. Changing one changes the
    classification outcome without touching the classification logic.
    """

    # Grit Factor
    grit_long_term_days: int = 90
    grit_gem_min_stars: int = 5

    # Fork Destiny
    variant_min_stars: int = 50
    variant_min_star_ratio: float = 0.3

    # Tags
    fork_cleaner_min_forks: int = 3
    fork_cleaner_min_noise_ratio: float = 0.8
    tag_min_sample: int = 10
    silent_maker_max_talk: float = 0.2
    talker_min_talk: float = 0.6

    # Contribution Momentum
    momentum_recent_weeks: int = 12
    momentum_accelerating: float = 1.5
    momentum_ghost: float = 0.1
    momentum_cooling: float = 0.5
    momentum_steady_low: float = 0.8
    momentum_steady_high: float = 1.2

    # Temporal
    night_hours: frozenset[int] = frozenset({22, 23, 0, 1, 2, 3, 4})
    core_hours_windows: int = 2

    # Evidence and self-introduction
    evidence_sample_size: int = 5
    one_liner_max_chars: int = 140
    short_bio_min_chars: int = 80
    excerpt_chars: int = 400

    # Consistency levels
    consistency_strong: float = 0.8
    consistency_partial: float = 0.4

    # Top repositories
    top_repo_recency_days: int = 365
    top_repo_recency_factor: float = 1.3
    top_repo_star_exponent: float = 0.6


DEFAULT_THRESHOLDS = MetricThresholds()

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(name: str, value: str | None, default: bool) -> bool:
    if value is None or value.strip() == "":
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean for {name}: {value!r}")


@dataclass
class Config:
    """Application configuration."""

    tz_override: str | None = None
    include_org_repos: bool = True  # count organization repos as "owned" in the Uni Index
    output_dir: str = "out"
    thresholds: MetricThresholds = field(default_factory=MetricThresholds)

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        # override=False ensures environment variables take precedence over .env
        load_dotenv(override=False)

        return cls(
            tz_override=os.getenv("GITHUB_PROFILER_TZ") or None,
            include_org_repos=_parse_bool(
                "GITHUB_PROFILER_INCLUDE_ORG_REPOS",
                os.getenv("GITHUB_PROFILER_INCLUDE_ORG_REPOS"),
                default=True,
            ),
            output_dir=os.getenv("GITHUB_PROFILER_OUTPUT_DIR", "out"),
        )


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def set_config(config: Config | None) -> None:
    """Set the global configuration instance (useful for testing)."""
    global _config
    _config = config
