"""Timezone resolution, activity-by-hour histogram, core hours and night ratio."""

import logging
import re
from collections.abc import Iterable
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from github_profiler.config import DEFAULT_THRESHOLDS, MetricThresholds
from github_profiler.models.activity import Commit
from github_profiler.models.profile import CoreHoursWindow, RatioMetric, TimezoneInfo

logger = logging.getLogger(__name__)

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):(\d{2})$")

# Real-world UTC offsets span -12:00 to +14:00.
_MAX_OFFSET_MINUTES = 14 * 60

HOURS_PER_DAY = 24


def parse_timezone_offset(tz: str | None, now: datetime | None = None) -> int:
    """Resolve a timezone override to a UTC offset in minutes.

    Accepts explicit offsets ("+08:00", "-05:30") and IANA zone names
    ("Asia/Shanghai"). A named zone's offset is the one in effect at ``now``
    (defaults to the current time), so daylight saving is taken into account.
    Missing or unrecognized values resolve to 0 (UTC).

    Examples:
        parse_timezone_offset("+09:30")        # 570
        parse_timezone_offset("Asia/Shanghai") # 480
        parse_timezone_offset(None)            # 0
    """
    if not tz:
        return 0

    tz = tz.strip()
    match = _OFFSET_RE.match(tz)
    if match:
        sign = -1 if match.group(1) == "-" else 1
        hours, minutes = int(match.group(2)), int(match.group(3))
        offset = sign * (hours * 60 + minutes)
        if minutes >= 60 or abs(offset) > _MAX_OFFSET_MINUTES:
            logger.warning("Timezone offset %s out of range, falling back to UTC", tz)
            return 0
        return offset

    try:
        zone = ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        logger.warning("Unrecognized timezone %r, falling back to UTC", tz)
        return 0

    reference = now or datetime.now(timezone.utc)
    if reference.tzinfo is None:
        reference = reference.replace(tzinfo=timezone.utc)
    delta = reference.astimezone(zone).utcoffset() or timedelta(0)
    return int(delta.total_seconds() // 60)


def format_offset(minutes: int) -> str:
    """Format a minute offset as "+HH:MM" / "-HH:MM"."""
    sign = "-" if minutes < 0 else "+"
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{mins:02d}"


def format_hour(hour: int) -> str:
    """Format an hour (0-23) as "HH:00"."""
    return f"{hour:02d}:00"


def build_timezone(tz_override: str | None, tz_offset_minutes: int) -> TimezoneInfo:
    """Describe the timezone used for local-time metrics.

    Automatic detection is not implemented, so ``auto`` is always UTC.
    """
    override = tz_override or None
    used = tz_offset_minutes if override else 0
    return TimezoneInfo(auto="+00:00", override=override, used=format_offset(used))


def local_hour(ts: datetime, tz_offset_minutes: int) -> int:
    """Hour of day of ``ts`` shifted by a fixed UTC offset."""
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    utc = ts.astimezone(timezone.utc)
    return (utc + timedelta(minutes=tz_offset_minutes)).hour


def compute_hours_histogram(
    timestamps: Iterable[datetime | None],
    tz_offset_minutes: int,
) -> list[int | None]:
    """Bucket timestamps into 24 local-hour bins.

    A bin stays None until at least one event lands in it, so "never
    observed" is distinguishable from a count. Missing timestamps are skipped.
    """
    buckets: list[int | None] = [None] * HOURS_PER_DAY
    for ts in timestamps:
        if ts is None:
            continue
        idx = local_hour(ts, tz_offset_minutes)
        buckets[idx] = (buckets[idx] or 0) + 1
    return buckets


def compute_core_hours(
    histogram: list[int | None],
    thresholds: MetricThresholds = DEFAULT_THRESHOLDS,
) -> list[CoreHoursWindow]:
    """Pick the busiest rolling two-hour windows.

    Every window (h, h+1) is scored by the sum of its two bins and the top
    windows are returned by descending score; ties keep start-hour order.
    An all-empty histogram yields no windows.
    """
    total = sum(v or 0 for v in histogram)
    if total == 0:
        return []

    windows = []
    for h in range(HOURS_PER_DAY):
        nxt = (h + 1) % HOURS_PER_DAY
        windows.append((h, nxt, (histogram[h] or 0) + (histogram[nxt] or 0)))

    # sorted() is stable, so equal scores stay in start-hour order
    ranked = sorted(windows, key=lambda w: w[2], reverse=True)
    return [
        CoreHoursWindow(start=format_hour(start), end=format_hour(end))
        for start, end, _ in ranked[: thresholds.core_hours_windows]
    ]


def compute_night_ratio(
    commits: Iterable[Commit],
    tz_offset_minutes: int,
    thresholds: MetricThresholds = DEFAULT_THRESHOLDS,
) -> RatioMetric:
    """Share of non-merge commits authored during local night hours.

    Merge commits and commits without a usable author timestamp are
    excluded from the sample.
    """
    night = 0
    total = 0
    for commit in commits:
        if commit.is_merge or commit.authored_at is None:
            continue
        total += 1
        if local_hour(commit.authored_at, tz_offset_minutes) in thresholds.night_hours:
            night += 1

    return RatioMetric.of(night, total)
