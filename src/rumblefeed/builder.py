"""Feed builder turning raw playlist metadata into a feed."""

import logging
from collections.abc import Callable
from datetime import datetime

from .downloader import MetadataDownloader
from .episodes import convert_entries, sort_episodes
from .exceptions import MetadataFetchError
from .locator import parse_url
from .models import Config, Feed, Locator
from .normalizer import normalize_metadata
from .utils import utc_now


class FeedBuilder:
    """Builds feeds from a metadata downloader."""

    def __init__(
        self,
        downloader: MetadataDownloader,
        *,
        resolver: Callable[[str], Locator] = parse_url,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the builder.

        Args:
            downloader: Downloader used to fetch playlist metadata
            resolver: Resolves a feed URL into a provider identity
            clock: Returns the current time as an aware UTC datetime

        """
        if downloader is None:
            raise ValueError("downloader is required")

        self.logger = logging.getLogger(__name__)
        self.downloader = downloader
        self.resolver = resolver
        self.clock = clock

    def build(self, config: Config, timeout: float | None = None) -> Feed:
        """Build a feed for the configured URL.

        Args:
            config: Feed configuration
            timeout: Deadline in seconds for the metadata fetch, None waits indefinitely

        Returns:
            The new feed, owned by the caller

        Raises:
            LocatorError: If the URL cannot be resolved
            MetadataFetchError: If the playlist metadata cannot be loaded

        """
        locator = self.resolver(config.url)
        self.logger.info("Building %s feed for %s %s", locator.provider.value, locator.link_type.value, locator.item_id)

        try:
            playlist = self.downloader.playlist_entries(config.url, config.page_size, timeout=timeout)
        except Exception as e:
            self.logger.error("Failed to load metadata for %s: %s", config.url, e)
            raise MetadataFetchError(config.url) from e

        now = self.clock()
        feed = Feed(
            item_id=locator.item_id,
            provider=locator.provider,
            link_type=locator.link_type,
            format=config.format,
            quality=config.quality,
            page_size=config.page_size,
            playlist_sort=config.playlist_sort,
            cover_art_quality=config.cover_art_quality,
            updated_at=now,
        )

        metadata = normalize_metadata(playlist, locator, config)
        feed.title = metadata.title
        feed.description = metadata.description
        feed.author = metadata.author
        feed.item_url = metadata.item_url
        feed.cover_art = metadata.cover_art

        episodes = convert_entries(playlist.entries, feed, now)
        feed.episodes = sort_episodes(episodes, feed.playlist_sort)
        self.logger.info("Kept %s of %s fetched entries for %s", len(feed.episodes), len(playlist.entries), feed.title)

        if feed.pub_date is None and feed.episodes:
            feed.pub_date = feed.episodes[0].pub_date

        return feed
