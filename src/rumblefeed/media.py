"""Thumbnail selection and file size estimation."""

from collections.abc import Sequence

from .models import Format, Quality, Thumbnail

HIGH_VIDEO_BYTES_PER_SECOND = 350000
LOW_VIDEO_BYTES_PER_SECOND = 100000
HIGH_AUDIO_BYTES_PER_SECOND = 128000 // 8
LOW_AUDIO_BYTES_PER_SECOND = 48000 // 8


def select_thumbnail(thumbnails: Sequence[Thumbnail], quality: Quality | str | None) -> str:
    """Pick a thumbnail URL for the requested quality.

    Thumbnails are ordered from lowest to highest quality. Only an explicit
    ``low`` request returns the first one; every other value returns the last.

    Args:
        thumbnails: Thumbnail candidates, lowest quality first
        quality: Requested quality

    Returns:
        The selected URL, or an empty string if there are no thumbnails

    """
    if not thumbnails:
        return ""

    if quality == Quality.LOW:
        return thumbnails[0].url

    return thumbnails[-1].url


def bytes_per_second(format: Format | str, quality: Quality | str) -> int:
    """Return the assumed bitrate in bytes per second."""
    if format == Format.AUDIO:
        if quality == Quality.HIGH:
            return HIGH_AUDIO_BYTES_PER_SECOND
        return LOW_AUDIO_BYTES_PER_SECOND

    if quality == Quality.HIGH:
        return HIGH_VIDEO_BYTES_PER_SECOND
    return LOW_VIDEO_BYTES_PER_SECOND


def estimate_size(duration: int, format: Format | str, quality: Quality | str) -> int:
    """Estimate the byte size of an episode from its duration.

    This is an approximation for feed metadata, not an exact content length.

    Args:
        duration: Duration in seconds
        format: Media format of the feed
        quality: Media quality of the feed

    Returns:
        Estimated size in bytes

    """
    return duration * bytes_per_second(format, quality)
