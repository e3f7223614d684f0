"""Archetype tags derived from fork behaviour and talk/code balance."""

from github_profiler.config import DEFAULT_THRESHOLDS, MetricThresholds
from github_profiler.models.profile import CommunityEngagement, ForkDestiny, ProfileTag


def compute_profile_tags(
    fork_destiny: ForkDestiny,
    community: CommunityEngagement,
    thresholds: MetricThresholds = DEFAULT_THRESHOLDS,
) -> list[ProfileTag]:
    """Map Fork Destiny and Community Engagement onto archetype labels.

    Fork tags can co-occur. At most one talk/code tag is emitted, and only
    once the engagement sample reaches ``thresholds.tag_min_sample``.
    """
    tags: list[ProfileTag] = []

    if fork_destiny.contributor_forks > 0:
        tags.append("hard_forker")
    if fork_destiny.variant_forks > 0:
        tags.append("variant_leader")

    total = fork_destiny.total_forks
    if (
        total >= thresholds.fork_cleaner_min_forks
        and fork_destiny.contributor_forks == 0
        and fork_destiny.variant_forks == 0
        and fork_destiny.noise_forks / total >= thresholds.fork_cleaner_min_noise_ratio
    ):
        tags.append("fork_cleaner")

    talk = community.value
    if talk is not None and community.sample_size >= thresholds.tag_min_sample:
        if talk <= thresholds.silent_maker_max_talk:
            tags.append("silent_maker")
        elif talk >= thresholds.talker_min_talk:
            tags.append("talker")
        else:
            tags.append("vocal_contributor")

    return tags
