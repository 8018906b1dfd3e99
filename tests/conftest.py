from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from rumblefeed import FeedBuilder, RawEntry, RawPlaylist, Thumbnail
from rumblefeed.downloader import MetadataDownloader

PUB_TIME = datetime.fromtimestamp(1700000000, tz=timezone.utc)
NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class FakeDownloader(MetadataDownloader):
    def __init__(self, playlist: RawPlaylist | None = None, error: Exception | None = None) -> None:
        self.playlist = playlist or RawPlaylist()
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def playlist_entries(self, url: str, page_size: int, timeout: float | None = None) -> RawPlaylist:
        self.calls.append({"url": url, "page_size": page_size, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.playlist


def make_entry(entry_id: str, offset: timedelta = timedelta(0), **kwargs: Any) -> RawEntry:
    fields: dict[str, Any] = {
        "title": f"Episode {entry_id}",
        "duration": 60,
        "timestamp": int((PUB_TIME + offset).timestamp()),
        "webpage_url": f"https://rumble.com/v{entry_id}",
        "thumbnails": [Thumbnail(url=f"https://image/{entry_id}.jpg")],
    }
    fields.update(kwargs)
    return RawEntry(id=entry_id, **fields)


@pytest.fixture()
def playlist() -> RawPlaylist:
    return RawPlaylist(
        title="Channel title",
        description="Channel description",
        channel="Channel author",
        channel_url="https://rumble.com/c/example",
        thumbnails=[Thumbnail(url="https://image/low.jpg"), Thumbnail(url="https://image/high.jpg")],
        entries=[
            make_entry("abc123", title="First", duration=120),
            make_entry("def456", timedelta(hours=1), title="Second"),
        ],
    )


@pytest.fixture()
def fake_downloader(playlist: RawPlaylist) -> FakeDownloader:
    return FakeDownloader(playlist)


@pytest.fixture()
def clock() -> Callable[[], datetime]:
    return lambda: NOW


@pytest.fixture()
def builder(fake_downloader: FakeDownloader, clock: Callable[[], datetime]) -> FeedBuilder:
    return FeedBuilder(fake_downloader, clock=clock)
