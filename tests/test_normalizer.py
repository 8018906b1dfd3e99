"""Tests for feed-level metadata fallback chains."""

from rumblefeed import Config, FeedMetadata, LinkType, Locator, Provider, Quality, RawPlaylist, Thumbnail, normalize_metadata
from rumblefeed.normalizer import resolve_author, resolve_description, resolve_item_url, resolve_title

LOCATOR = Locator(item_id="example", provider=Provider.RUMBLE, link_type=LinkType.CHANNEL)
URL = "https://rumble.com/c/example"


def test_resolve_title() -> None:
    assert resolve_title(RawPlaylist(title="Channel title"), LOCATOR) == "Channel title"
    assert resolve_title(RawPlaylist(), LOCATOR) == "example"


def test_resolve_description() -> None:
    assert resolve_description(RawPlaylist(description="About"), Provider.RUMBLE, "T") == "About"
    assert resolve_description(RawPlaylist(), Provider.RUMBLE, "T") == "Rumble feed for T"


def test_resolve_author() -> None:
    assert resolve_author(RawPlaylist(channel="Someone"), "T") == "Someone"
    assert resolve_author(RawPlaylist(), "T") == "T"


def test_resolve_item_url_chain() -> None:
    full = RawPlaylist(channel_url="https://rumble.com/c/chan", webpage_url="https://rumble.com/playlists/p")
    assert resolve_item_url(full, URL) == "https://rumble.com/c/chan"
    assert resolve_item_url(RawPlaylist(webpage_url="https://rumble.com/playlists/p"), URL) == "https://rumble.com/playlists/p"
    assert resolve_item_url(RawPlaylist(), URL) == URL


def test_normalize_metadata_full() -> None:
    playlist = RawPlaylist(
        title="Channel title",
        description="Channel description",
        channel="Channel author",
        channel_url=URL,
        thumbnails=[Thumbnail(url="low"), Thumbnail(url="high")],
    )

    metadata = normalize_metadata(playlist, LOCATOR, Config(url=URL, cover_art_quality=Quality.LOW))

    assert metadata == FeedMetadata(
        title="Channel title",
        description="Channel description",
        author="Channel author",
        item_url=URL,
        cover_art="low",
    )


def test_normalize_metadata_terminal_fallbacks() -> None:
    metadata = normalize_metadata(RawPlaylist(), LOCATOR, Config(url=URL))

    assert metadata.title == "example"
    assert metadata.description == "Rumble feed for example"
    assert metadata.author == "example"
    assert metadata.item_url == URL
    assert metadata.cover_art == ""


def test_normalize_metadata_description_uses_resolved_title() -> None:
    metadata = normalize_metadata(RawPlaylist(title="Shows"), LOCATOR, Config(url=URL))
    assert metadata.description == "Rumble feed for Shows"
    assert metadata.author == "Shows"
