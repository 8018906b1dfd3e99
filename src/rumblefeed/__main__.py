import argparse
import json
import logging
import sys
from dataclasses import dataclass

from rumblefeed import Config, FeedBuilder, RumbleFeedError, YtdlpDownloader
from rumblefeed.downloader import DEFAULT_TIMEOUT

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s]%(message)s")


@dataclass
class BuildRequest:
    """Configuration for a feed build request."""

    url: str = ""
    page_size: int = 50
    format: str = "video"
    quality: str = "high"
    sort: str = "asc"
    cover_art_quality: str = "high"
    proxy: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    verbose: bool = False


def main() -> None:
    """Parse command line arguments and print the feed built for a Rumble URL."""
    parser = argparse.ArgumentParser(description="Build a podcast feed model from a Rumble channel or playlist.")
    parser.add_argument(
        "--url",
        "-u",
        type=str,
        required=True,
        help="Insert rumble url (e.g. https://rumble.com/c/example)",
    )
    parser.add_argument("--page-size", "-n", type=int, default=50, help="Maximum number of episodes")
    parser.add_argument("--format", choices=["audio", "video"], default="video", help="Media format of the feed")
    parser.add_argument("--quality", choices=["high", "low"], default="high", help="Media and thumbnail quality")
    parser.add_argument("--sort", choices=["asc", "desc"], default="asc", help="Episode order by publish date")
    parser.add_argument("--cover-art-quality", choices=["high", "low"], default="high", help="Cover art quality")
    parser.add_argument(
        "--proxy",
        "-p",
        type=str,
        default=None,
        help='Proxy URL (e.g. "http://proxy.example.com:8080" or "socks5://proxy.example.com:1080")',
    )
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT, help="Deadline in seconds for fetching metadata")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    exit_code = _process_request(
        BuildRequest(
            url=args.url,
            page_size=args.page_size,
            format=args.format,
            quality=args.quality,
            sort=args.sort,
            cover_art_quality=args.cover_art_quality,
            proxy=args.proxy,
            timeout=args.timeout,
            verbose=args.verbose,
        )
    )
    sys.exit(exit_code)


def _process_request(request: BuildRequest, builder: FeedBuilder | None = None) -> int:
    """Build the requested feed and print it as JSON.

    Args:
        request: The build request configuration
        builder: Feed builder to use, defaults to one backed by yt-dlp

    Returns:
        Process exit code

    """
    logger = logging.getLogger("rumblefeed")
    if request.verbose:
        logger.setLevel(logging.DEBUG)

    try:
        config = Config(
            url=request.url,
            page_size=request.page_size,
            format=request.format,
            quality=request.quality,
            playlist_sort=request.sort,
            cover_art_quality=request.cover_art_quality,
        )
        if builder is None:
            builder = FeedBuilder(YtdlpDownloader(proxy=request.proxy, timeout=request.timeout))
        feed = builder.build(config, timeout=request.timeout)
    except RumbleFeedError as e:
        logger.error("%s", e)
        return 1

    print(json.dumps(feed.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    main()
