"""Metadata downloaders that fetch raw playlist information."""

import concurrent.futures
import logging
from abc import ABC, abstractmethod
from typing import Any

import yt_dlp

from .exceptions import DownloaderError
from .models import RawPlaylist

DEFAULT_TIMEOUT = 30


class MetadataDownloader(ABC):
    """Base class for playlist metadata downloaders."""

    @abstractmethod
    def playlist_entries(self, url: str, page_size: int, timeout: float | None = None) -> RawPlaylist:
        """Fetch playlist metadata and up to ``page_size`` entries.

        Args:
            url: The channel, user or playlist URL
            page_size: Maximum number of entries to fetch
            timeout: Deadline in seconds for the whole fetch, None waits indefinitely

        Returns:
            The raw playlist metadata

        """
        ...


class YtdlpDownloader(MetadataDownloader):
    """Metadata downloader backed by yt-dlp."""

    def __init__(self, proxy: str | None = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        """Initialize the downloader.

        Args:
            proxy: Proxy URL (e.g. "http://proxy.example.com:8080" or "socks5://proxy.example.com:1080")
            timeout: Socket timeout in seconds for each network operation

        """
        self.logger = logging.getLogger(__name__)
        self.proxy = proxy
        self.timeout = timeout

    def _options(self, page_size: int, timeout: float | None) -> dict[str, Any]:
        socket_timeout = self.timeout if timeout is None else min(self.timeout, timeout)
        ydl_opts: dict[str, Any] = {
            "extract_flat": "in_playlist",
            "skip_download": True,
            "quiet": True,
            "no_warnings": True,
            "socket_timeout": socket_timeout,
        }
        if page_size > 0:
            ydl_opts["playlistend"] = page_size
        if self.proxy:
            ydl_opts["proxy"] = self.proxy
        return ydl_opts

    def _extract(self, url: str, ydl_opts: dict[str, Any]) -> dict[str, Any] | None:
        with yt_dlp.YoutubeDL(ydl_opts) as ydl:
            info = ydl.extract_info(url, download=False)
            return ydl.sanitize_info(info)

    def playlist_entries(self, url: str, page_size: int, timeout: float | None = None) -> RawPlaylist:
        """Fetch playlist metadata with yt-dlp in flat playlist mode.

        The extraction runs on a worker thread so the deadline bounds the
        whole fetch, not single socket operations. A timed out worker is
        abandoned and finishes on its own once its socket timeout expires.

        Raises:
            DownloaderError: If yt-dlp fails, times out or returns no metadata

        """
        self.logger.debug("Fetching up to %s entries from %s", page_size, url)
        executor = concurrent.futures.ThreadPoolExecutor(max_workers=1)
        try:
            future = executor.submit(self._extract, url, self._options(page_size, timeout))
            info = future.result(timeout=timeout)
        except concurrent.futures.TimeoutError as e:
            raise DownloaderError(url, f"timed out after {timeout} seconds") from e
        except yt_dlp.utils.DownloadError as e:
            raise DownloaderError(url, f"yt-dlp failed: {str(e)}") from e
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        if not info:
            raise DownloaderError(url, "yt-dlp returned no metadata")

        playlist = RawPlaylist.from_info(info)
        self.logger.debug("Fetched %s entries for %s", len(playlist.entries), url)
        return playlist
