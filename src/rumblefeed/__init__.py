"""Normalize Rumble channel and playlist metadata into podcast feeds."""

from .builder import FeedBuilder
from .downloader import MetadataDownloader, YtdlpDownloader
from .episodes import convert_entries, convert_entry, published_at, resolve_video_url, sort_episodes
from .exceptions import (
    ConfigError,
    DownloaderError,
    LocatorError,
    MetadataFetchError,
    RumbleFeedError,
)
from .locator import episode_url, parse_url, provider_display_name
from .media import bytes_per_second, estimate_size, select_thumbnail
from .models import (
    Config,
    Episode,
    EpisodeStatus,
    Feed,
    Format,
    LinkType,
    Locator,
    Provider,
    Quality,
    RawEntry,
    RawPlaylist,
    Sorting,
    Thumbnail,
)
from .normalizer import FeedMetadata, normalize_metadata

__all__ = [
    # Main classes
    "FeedBuilder",
    "MetadataDownloader",
    "YtdlpDownloader",
    # Exceptions
    "RumbleFeedError",
    "ConfigError",
    "DownloaderError",
    "LocatorError",
    "MetadataFetchError",
    # Models
    "Config",
    "Episode",
    "EpisodeStatus",
    "Feed",
    "FeedMetadata",
    "Format",
    "LinkType",
    "Locator",
    "Provider",
    "Quality",
    "RawEntry",
    "RawPlaylist",
    "Sorting",
    "Thumbnail",
    # Pipeline steps
    "convert_entries",
    "convert_entry",
    "normalize_metadata",
    "published_at",
    "resolve_video_url",
    "sort_episodes",
    # Media helpers
    "bytes_per_second",
    "estimate_size",
    "select_thumbnail",
    # Locator helpers
    "episode_url",
    "parse_url",
    "provider_display_name",
]
