"""View and delete URL composition."""

from typing import Optional, Tuple
from urllib.parse import urlsplit

from .models import ResultUrls


def compose_urls(
    server_base: str,
    paste_id: str,
    random_key: str,
    delete_token: Optional[str],
    burn_after_reading: bool,
) -> ResultUrls:
    """
    Build the URLs shown to the user.

    The random key goes into the fragment, which browsers never send to the
    server.

    Args:
        server_base: Server URL as returned by `ServerConfig.base_url`
        paste_id: Paste id issued by the server
        random_key: Base64 random key
        delete_token: Delete token issued by the server
        burn_after_reading: Whether the paste is destroyed on first read

    Returns:
        ResultUrls; `delete_url` is None for burn-after-reading pastes or
        when the server issued no delete token
    """
    view_url = f"{server_base}?{paste_id}#{random_key}"

    delete_url = None
    if not burn_after_reading and delete_token is not None:
        delete_url = f"{server_base}?pasteid={paste_id}&deletetoken={delete_token}"

    return ResultUrls(view_url=view_url, delete_url=delete_url)


def parse_paste_url(url: str) -> Tuple[str, str, str]:
    """
    Split a view URL into its parts.

    Args:
        url: URL of the form `<server_base>?<paste_id>#<random_key>`

    Returns:
        Tuple of (server_base, paste_id, random_key)

    Raises:
        ValueError: If the URL has no paste id or no key
    """
    parts = urlsplit(url)

    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ValueError(f"Invalid paste URL: {url}")

    if not parts.query:
        raise ValueError("Missing paste id")

    if not parts.fragment:
        raise ValueError("Missing key fragment")

    server_base = f"{parts.scheme}://{parts.netloc}{parts.path or '/'}"
    return server_base, parts.query, parts.fragment
