"""Data models for rumblefeed."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from .exceptions import ConfigError


class Format(str, Enum):
    """Media kind delivered by a feed."""

    AUDIO = "audio"
    VIDEO = "video"


class Quality(str, Enum):
    """Two-level quality used for thumbnails and bitrate estimates."""

    HIGH = "high"
    LOW = "low"


class Sorting(str, Enum):
    """Episode ordering direction."""

    ASC = "asc"
    DESC = "desc"


class Provider(str, Enum):
    """Supported video platforms."""

    RUMBLE = "rumble"


class LinkType(str, Enum):
    """Kind of resource a feed URL points to."""

    CHANNEL = "channel"
    USER = "user"
    PLAYLIST = "playlist"


class EpisodeStatus(str, Enum):
    """Lifecycle status of an episode."""

    NEW = "new"


def _coerce(enum_cls: type[Enum], value: Any, field_name: str) -> Any:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError as e:
        choices = ", ".join(member.value for member in enum_cls)
        raise ConfigError(field_name, f"{value!r} is not one of {choices}") from e


@dataclass
class Config:
    """Feed configuration supplied by the caller."""

    url: str
    page_size: int = 50
    format: Format = Format.VIDEO
    quality: Quality = Quality.HIGH
    playlist_sort: Sorting = Sorting.ASC
    cover_art_quality: Quality = Quality.HIGH
    extras: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate values and coerce strings into enumerations."""
        if not self.url:
            raise ConfigError("url", "must not be empty")
        if self.page_size < 0:
            raise ConfigError("page_size", f"must not be negative, got {self.page_size}")
        self.format = _coerce(Format, self.format, "format")
        self.quality = _coerce(Quality, self.quality, "quality")
        self.playlist_sort = _coerce(Sorting, self.playlist_sort, "playlist_sort")
        self.cover_art_quality = _coerce(Quality, self.cover_art_quality, "cover_art_quality")


@dataclass
class Thumbnail:
    """A single thumbnail candidate."""

    url: str
    width: int | None = None
    height: int | None = None

    @classmethod
    def from_info(cls, info: dict[str, Any]) -> "Thumbnail":
        return cls(url=info.get("url") or "", width=info.get("width"), height=info.get("height"))


def _thumbnails_from_info(info: dict[str, Any]) -> list[Thumbnail]:
    """Extract thumbnails ordered from lowest to highest quality.

    yt-dlp already sorts ``thumbnails`` by preference, worst first. Flat
    playlist entries often carry a single ``thumbnail`` string instead.
    """
    thumbnails = [Thumbnail.from_info(t) for t in info.get("thumbnails") or [] if isinstance(t, dict) and t.get("url")]
    if not thumbnails and info.get("thumbnail"):
        thumbnails = [Thumbnail(url=info["thumbnail"])]
    return thumbnails


def _int_or_zero(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError, OverflowError):
        return 0


@dataclass
class RawEntry:
    """A playlist entry as returned by the metadata downloader."""

    id: str
    title: str = ""
    description: str = ""
    duration: int = 0
    timestamp: int = 0
    release_timestamp: int = 0
    upload_date: str = ""
    webpage_url: str = ""
    url: str = ""
    thumbnails: list[Thumbnail] = field(default_factory=list)

    @classmethod
    def from_info(cls, info: dict[str, Any]) -> "RawEntry":
        """Build an entry from a yt-dlp entry dictionary."""
        return cls(
            id=str(info.get("id") or ""),
            title=info.get("title") or "",
            description=info.get("description") or "",
            duration=_int_or_zero(info.get("duration")),
            timestamp=_int_or_zero(info.get("timestamp")),
            release_timestamp=_int_or_zero(info.get("release_timestamp")),
            upload_date=info.get("upload_date") or "",
            webpage_url=info.get("webpage_url") or "",
            url=info.get("url") or "",
            thumbnails=_thumbnails_from_info(info),
        )


@dataclass
class RawPlaylist:
    """Channel or playlist metadata as returned by the metadata downloader."""

    title: str = ""
    description: str = ""
    channel: str = ""
    channel_url: str = ""
    webpage_url: str = ""
    thumbnails: list[Thumbnail] = field(default_factory=list)
    entries: list[RawEntry | None] = field(default_factory=list)

    @classmethod
    def from_info(cls, info: dict[str, Any]) -> "RawPlaylist":
        """Build a playlist from a yt-dlp info dictionary.

        Entries that are not dictionaries (yt-dlp yields ``None`` for
        unavailable videos) are kept as ``None`` so the converter can skip them.
        """
        entries: list[RawEntry | None] = []
        for entry in info.get("entries") or []:
            entries.append(RawEntry.from_info(entry) if isinstance(entry, dict) else None)

        return cls(
            title=info.get("title") or "",
            description=info.get("description") or "",
            channel=info.get("channel") or "",
            channel_url=info.get("channel_url") or "",
            webpage_url=info.get("webpage_url") or "",
            thumbnails=_thumbnails_from_info(info),
            entries=entries,
        )


@dataclass
class Locator:
    """Provider identity resolved from a feed URL."""

    item_id: str
    provider: Provider
    link_type: LinkType


@dataclass
class Episode:
    """A playable item of a feed."""

    id: str
    title: str
    description: str
    duration: int
    pub_date: datetime
    thumbnail: str
    video_url: str
    size: int
    status: EpisodeStatus = EpisodeStatus.NEW


@dataclass
class Feed:
    """Provider-agnostic representation of a channel or playlist."""

    item_id: str
    provider: Provider
    link_type: LinkType
    format: Format
    quality: Quality
    page_size: int
    playlist_sort: Sorting
    cover_art_quality: Quality
    updated_at: datetime
    title: str = ""
    description: str = ""
    author: str = ""
    item_url: str = ""
    cover_art: str = ""
    pub_date: datetime | None = None
    episodes: list[Episode] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation of the feed."""
        return _to_json_value(self.__dict__)


def _to_json_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Episode):
        return _to_json_value(value.__dict__)
    if isinstance(value, dict):
        return {key: _to_json_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_to_json_value(item) for item in value]
    return value
