"""Thin HTTP client shared by all fetchers.

Each call is a single request/response cycle: no retry, no response cache.
"""

from typing import Any, Dict, Optional

import requests

from start_deck import PROJECT_NAME, __version__


class HTTPClient:
    """GET-only client on top of a requests session."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        user_agent: str = f"{PROJECT_NAME}/{__version__} (Start page dashboard)",
    ):
        self.session = session or requests.Session()
        self.timeout = timeout
        self.headers = {"User-Agent": user_agent}

    def get(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        response_type: str = "json",
    ) -> Any:
        """Fetch a URL.

        Args:
            url: Endpoint URL
            params: Query parameters
            headers: Extra request headers
            response_type: "json" or "text"

        Returns:
            Decoded JSON payload or response text

        Raises:
            requests.exceptions.RequestException on network failure or
            non-success status, ValueError if the body is not valid JSON
        """
        if response_type not in ("json", "text"):
            raise ValueError(f"Unsupported response_type: {response_type}")

        merged_headers = dict(self.headers)
        if headers:
            merged_headers.update(headers)

        print(f"📡 Fetching: {url}")
        response = self.session.get(url, params=params, headers=merged_headers, timeout=self.timeout)
        response.raise_for_status()

        if response_type == "text":
            return response.text
        return response.json()

    def close(self):
        self.session.close()
