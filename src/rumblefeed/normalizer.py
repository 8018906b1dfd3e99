"""Feed-level metadata fallback chains."""

from dataclasses import dataclass

from .locator import provider_display_name
from .media import select_thumbnail
from .models import Config, Locator, Provider, RawPlaylist
from .utils import first_non_empty


@dataclass
class FeedMetadata:
    """Resolved feed-level fields."""

    title: str
    description: str
    author: str
    item_url: str
    cover_art: str


def resolve_title(playlist: RawPlaylist, locator: Locator) -> str:
    return first_non_empty(playlist.title, locator.item_id)


def resolve_description(playlist: RawPlaylist, provider: Provider, title: str) -> str:
    return first_non_empty(playlist.description, f"{provider_display_name(provider)} feed for {title}")


def resolve_author(playlist: RawPlaylist, title: str) -> str:
    return first_non_empty(playlist.channel, title)


def resolve_item_url(playlist: RawPlaylist, url: str) -> str:
    return first_non_empty(playlist.channel_url, playlist.webpage_url, url)


def normalize_metadata(playlist: RawPlaylist, locator: Locator, config: Config) -> FeedMetadata:
    """Resolve title, description, author, item URL and cover art.

    Args:
        playlist: Raw playlist metadata
        locator: Provider identity of the feed URL
        config: Feed configuration

    Returns:
        FeedMetadata with every field set to its first available candidate

    """
    title = resolve_title(playlist, locator)
    return FeedMetadata(
        title=title,
        description=resolve_description(playlist, locator.provider, title),
        author=resolve_author(playlist, title),
        item_url=resolve_item_url(playlist, config.url),
        cover_art=select_thumbnail(playlist.thumbnails, config.cover_art_quality),
    )
