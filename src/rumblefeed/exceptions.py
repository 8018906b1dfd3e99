"""Custom exceptions for rumblefeed."""


class RumbleFeedError(Exception):
    """Base exception for all rumblefeed errors."""

    pass


class LocatorError(RumbleFeedError):
    """Exception raised when a feed URL cannot be resolved to a provider identity."""

    def __init__(self, url: str, message: str | None = None) -> None:
        """Initialize the exception.

        Args:
            url: The URL that could not be resolved
            message: Additional error message

        """
        self.url = url
        msg = f"Could not parse feed URL: {url}"
        if message:
            msg = f"{msg} - {message}"
        super().__init__(msg)


class DownloaderError(RumbleFeedError):
    """Exception raised by a metadata downloader when a fetch fails."""

    def __init__(self, url: str, message: str | None = None) -> None:
        """Initialize the exception.

        Args:
            url: The URL whose metadata could not be fetched
            message: Additional error message

        """
        self.url = url
        msg = f"Failed to fetch metadata: {url}"
        if message:
            msg = f"{msg} - {message}"
        super().__init__(msg)


class MetadataFetchError(RumbleFeedError):
    """Exception raised when playlist metadata cannot be fetched.

    The underlying error is chained and available as ``__cause__``.
    """

    def __init__(self, url: str, message: str | None = None) -> None:
        """Initialize the exception.

        Args:
            url: The URL whose metadata could not be loaded
            message: Additional error message

        """
        self.url = url
        super().__init__(message or "failed to load rumble metadata")


class ConfigError(RumbleFeedError, ValueError):
    """Exception raised when a feed configuration value is invalid."""

    def __init__(self, field: str, message: str) -> None:
        """Initialize the exception.

        Args:
            field: The name of the offending configuration field
            message: Description of the problem

        """
        self.field = field
        super().__init__(f"Invalid config value for {field}: {message}")
