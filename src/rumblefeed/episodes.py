"""Conversion of raw playlist entries into episodes."""

import logging
from collections.abc import Iterable
from datetime import datetime

from .locator import episode_url
from .media import estimate_size, select_thumbnail
from .models import Episode, EpisodeStatus, Feed, Provider, RawEntry, Sorting
from .utils import first_non_empty, from_unix, parse_upload_date

logger = logging.getLogger(__name__)


def published_at(entry: RawEntry | None) -> datetime | None:
    """Resolve the publish date of an entry.

    The primary timestamp wins over the release timestamp, which wins over the
    upload date. Timestamps are Unix seconds, the upload date resolves to
    midnight UTC.

    Args:
        entry: The raw entry

    Returns:
        Aware UTC datetime, or None if no source is usable

    """
    if entry is None:
        return None

    # out of range timestamps resolve to None and fall through
    for timestamp in (entry.timestamp, entry.release_timestamp):
        if timestamp > 0:
            resolved = from_unix(timestamp)
            if resolved is not None:
                return resolved

    return parse_upload_date(entry.upload_date)


def resolve_video_url(entry: RawEntry, provider: Provider) -> str:
    return first_non_empty(entry.webpage_url, entry.url) or episode_url(provider, entry.id)


def convert_entry(entry: RawEntry | None, feed: Feed, now: datetime) -> Episode | None:
    """Convert a raw entry into an episode.

    Args:
        entry: The raw entry
        feed: The feed being built, for provider, format and quality
        now: Publish date to use when the entry carries none

    Returns:
        The new episode, or None if the entry has no ID

    """
    if entry is None or not entry.id:
        return None

    return Episode(
        id=entry.id,
        title=entry.title,
        description=entry.description,
        duration=entry.duration,
        pub_date=published_at(entry) or now,
        thumbnail=select_thumbnail(entry.thumbnails, feed.quality),
        video_url=resolve_video_url(entry, feed.provider),
        size=estimate_size(entry.duration, feed.format, feed.quality),
        status=EpisodeStatus.NEW,
    )


def convert_entries(entries: Iterable[RawEntry | None], feed: Feed, now: datetime) -> list[Episode]:
    """Convert entries in fetch order until the feed's page size is reached.

    Entries without an ID are skipped and do not count towards the page size.
    Entries past the page size are never converted.
    """
    episodes: list[Episode] = []
    if feed.page_size <= 0:
        return episodes

    for index, entry in enumerate(entries):
        episode = convert_entry(entry, feed, now)
        if episode is None:
            logger.debug("Skipping entry %s without ID", index)
            continue

        episodes.append(episode)
        if len(episodes) >= feed.page_size:
            break

    return episodes


def sort_episodes(episodes: Iterable[Episode], sorting: Sorting | str) -> list[Episode]:
    """Sort episodes by publish date, keeping fetch order for equal dates."""
    return sorted(episodes, key=lambda episode: episode.pub_date, reverse=sorting == Sorting.DESC)
