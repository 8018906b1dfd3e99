"""Resolve feed URLs into provider identities."""

from urllib.parse import urlparse

from .exceptions import LocatorError
from .models import LinkType, Locator, Provider

RUMBLE_HOST = "rumble.com"

PROVIDER_NAMES: dict[Provider, str] = {
    Provider.RUMBLE: "Rumble",
}

EPISODE_URL_TEMPLATES: dict[Provider, str] = {
    Provider.RUMBLE: "https://rumble.com/{id}",
}

RUMBLE_PATH_PREFIXES: dict[str, LinkType] = {
    "c": LinkType.CHANNEL,
    "user": LinkType.USER,
    "playlists": LinkType.PLAYLIST,
}


def provider_display_name(provider: Provider | str) -> str:
    """Return the human-readable name of a provider."""
    return PROVIDER_NAMES[Provider(provider)]


def episode_url(provider: Provider | str, episode_id: str) -> str:
    """Build the canonical watch URL of an episode."""
    return EPISODE_URL_TEMPLATES[Provider(provider)].format(id=episode_id)


def parse_url(url: str) -> Locator:
    """Parse a Rumble channel, user or playlist URL.

    Args:
        url: The feed URL

    Returns:
        Locator with item ID, provider and link type

    Raises:
        LocatorError: If the URL is not a supported Rumble URL

    """
    parsed = urlparse(url)
    if parsed.scheme not in {"http", "https"} or not parsed.hostname:
        raise LocatorError(url, "expected an http(s) URL")

    host = parsed.hostname.lower()
    if host != RUMBLE_HOST and not host.endswith("." + RUMBLE_HOST):
        raise LocatorError(url, f"unsupported host {host}")

    parts = [part for part in parsed.path.split("/") if part]
    if len(parts) < 2:
        raise LocatorError(url, "expected /c/<name>, /user/<name> or /playlists/<id>")

    link_type = RUMBLE_PATH_PREFIXES.get(parts[0].lower())
    if link_type is None:
        raise LocatorError(url, f"unsupported link type {parts[0]}")

    return Locator(item_id=parts[1], provider=Provider.RUMBLE, link_type=link_type)
