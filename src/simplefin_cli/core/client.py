"""
HTTP client for the SimpleFIN aggregation endpoint.
"""

import logging
from typing import Optional

import httpx

from simplefin_cli.core.exceptions import HTTPStatusError, TransportError

logger = logging.getLogger(__name__)

PROXY_SCHEMES = ("http", "https", "socks5", "socks5h")


def build_accounts_url(base_url: str) -> str:
    """Append the /accounts resource to an access URL."""
    return base_url.rstrip("/") + "/accounts"


def parse_proxy_url(proxy_url: str) -> httpx.URL:
    """
    Validate a proxy URL.

    Args:
        proxy_url: Proxy URL such as "http://127.0.0.1:3128"

    Returns:
        Parsed URL

    Raises:
        TransportError: If the URL cannot be parsed, has no host, or uses an
            unsupported scheme
    """
    try:
        url = httpx.URL(proxy_url)
    except httpx.InvalidURL as e:
        raise TransportError(f"invalid proxy URL: {e}", url=proxy_url) from e

    if url.scheme not in PROXY_SCHEMES or not url.host:
        raise TransportError(
            f"invalid proxy URL: {proxy_url!r} (expected {', '.join(PROXY_SCHEMES)} "
            "scheme and a host)",
            url=proxy_url,
        )
    return url


class SimpleFinClient:
    """Fetches the /accounts document from a SimpleFIN access URL."""

    def __init__(
        self,
        base_url: str,
        proxy: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: SimpleFIN access URL (credentials may be embedded)
            proxy: Optional HTTP(S) or SOCKS proxy URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used in tests

        Raises:
            TransportError: If the proxy URL is invalid
        """
        self.accounts_url = build_accounts_url(base_url)
        self.proxy = parse_proxy_url(proxy) if proxy else None
        self.timeout = timeout
        self.transport = transport

    def fetch_accounts(self) -> bytes:
        """
        GET the /accounts resource.

        Returns:
            Raw response body

        Raises:
            TransportError: On connection failure or an unusable URL
            HTTPStatusError: If the response status is not 200
        """
        logger.debug("GET %s", self.accounts_url)

        try:
            with httpx.Client(
                proxy=self.proxy,
                timeout=self.timeout,
                transport=self.transport,
            ) as client:
                response = client.get(self.accounts_url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(
                f"error making GET request to {self.accounts_url}: {e}",
                url=self.accounts_url,
            ) from e

        logger.debug("Response status %d", response.status_code)
        if response.status_code != httpx.codes.OK:
            raise HTTPStatusError(response.status_code, self.accounts_url)

        return response.content
