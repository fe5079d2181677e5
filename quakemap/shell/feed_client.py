"""USGS Feed Client - Imperative Shell.

This module fetches the GeoJSON feed over HTTP(S), or reads a saved copy
from a file:// URL. All I/O is contained here; parsing is in the core module.
"""

import json
import logging
from typing import Any
from urllib.parse import urlparse
from urllib.request import url2pathname

import requests

from quakemap.core.formatter import (
    ERROR_DECODE,
    ERROR_FILE,
    ERROR_HTTP,
    ERROR_NETWORK,
)


logger = logging.getLogger(__name__)


# Default timeout for feed requests (seconds)
DEFAULT_TIMEOUT = 30


class FeedError(Exception):
    """The feed could not be fetched or decoded.

    Attributes:
        kind: Failure kind (network, http, file or decode)
        status_code: HTTP status for http failures
    """

    def __init__(self, message: str, kind: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code


class FeedClient:
    """Client for fetching earthquake feeds.

    This is part of the imperative shell - it handles HTTP and file I/O.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize feed client.

        Args:
            timeout: Request timeout in seconds
            session: Optional requests session to reuse
        """
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch(self, url: str) -> Any:
        """Fetch and decode a GeoJSON feed.

        This method performs I/O. Exactly one attempt is made.

        Args:
            url: http(s):// feed URL or file:// path

        Returns:
            Decoded JSON document

        Raises:
            FeedError: If the feed cannot be fetched or is not valid JSON
        """
        if urlparse(url).scheme == "file":
            return self._read_file(url)
        return self._get(url)

    def _get(self, url: str) -> Any:
        logger.info("Fetching earthquake feed from %s", url)

        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise FeedError(
                f"HTTP error! Status: {status}",
                kind=ERROR_HTTP,
                status_code=status,
            ) from e
        except requests.RequestException as e:
            raise FeedError(str(e) or type(e).__name__, kind=ERROR_NETWORK) from e

        try:
            data = response.json()
        except ValueError as e:
            raise FeedError(f"Invalid JSON in feed response: {e}", kind=ERROR_DECODE) from e

        self._log_count(data)
        return data

    def _read_file(self, url: str) -> Any:
        path = url2pathname(urlparse(url).path)
        logger.info("Reading earthquake feed from %s", path)

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise FeedError(f"Cannot read {path}: {e.strerror or e}", kind=ERROR_FILE) from e
        except ValueError as e:
            raise FeedError(f"Invalid JSON in {path}: {e}", kind=ERROR_DECODE) from e

        self._log_count(data)
        return data

    def _log_count(self, data: Any) -> None:
        if isinstance(data, dict):
            count = (data.get("metadata") or {}).get("count")
            if count is not None:
                logger.info("Feed reports %d earthquakes", count)
