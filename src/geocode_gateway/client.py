"""
HTTP client for the upstream geocoding provider, built on requests.
"""

import logging
from typing import Optional

import requests

from .base import UpstreamClient, UpstreamResponse
from .errors import UpstreamUnavailableError

logger = logging.getLogger(__name__)


class HttpUpstreamClient(UpstreamClient):
    """
    Single-attempt provider client.

    Each call issues its own `requests.get`; no session or other mutable
    state is shared, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        user_agent: Optional[str] = None,
    ):
        """
        Args:
            timeout: HTTP request timeout in seconds (connect and read)
            user_agent: Value for the User-Agent header, if any
        """
        if timeout <= 0:
            raise ValueError("timeout must be > 0")
        self.timeout = timeout
        self.headers = {"Accept": "application/json"}
        if user_agent:
            self.headers["User-Agent"] = user_agent

    def fetch(self, url: str) -> UpstreamResponse:
        logger.debug(f"GET {url}")
        try:
            response = requests.get(url, headers=self.headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"Geocoding service unreachable: {e}")
            raise UpstreamUnavailableError(url, e) from e

        logger.debug(f"Upstream status: {response.status_code} ({len(response.content)} bytes)")
        return UpstreamResponse(status_code=response.status_code, body=response.text)
