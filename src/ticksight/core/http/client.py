"""
HTTP Client Utilities
=====================

Provides the HTTP client used to talk to the sightings service.

Features:
- Shared requests session with a fixed User-Agent
- Configurable timeout
- Optional transport-level retry (off by default)
"""

from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ticksight.core.logger import get_logger

logger = get_logger(__name__)


class APIClient:
    """
    HTTP client with timeout and optional retry support.

    Args:
        base_url: Base URL for API requests.
        timeout: Request timeout in seconds (default: 30).
        max_retries: Transport retries for 5xx/429 responses (default: 0).
        user_agent: User-Agent header value.

    Example:
        >>> client = APIClient(base_url="https://dev-task.elancoapps.com")
        >>> data = client.get("/sightings")
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 30,
        max_retries: int = 0,
        user_agent: str = "ticksight/0.1",
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent

        self.session = requests.Session()
        if max_retries > 0:
            retry_strategy = Retry(
                total=max_retries,
                backoff_factor=1,
                status_forcelist=[429, 500, 502, 503, 504],
                allowed_methods=["GET"],
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            self.session.mount("http://", adapter)
            self.session.mount("https://", adapter)
        self.session.headers.update({"User-Agent": user_agent})

    def url_for(self, endpoint: str) -> str:
        """Join an endpoint onto the base URL."""
        return f"{self.base_url}{endpoint}" if self.base_url else endpoint

    def get(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        **kwargs,
    ) -> Any:
        """
        Make a GET request.

        Args:
            endpoint: API endpoint (appended to base_url).
            params: Query parameters.
            **kwargs: Additional arguments passed to requests.

        Returns:
            Decoded JSON body (any JSON type).

        Raises:
            requests.RequestException: On request failure or non-success status.
            ValueError: If the body is not valid JSON.
        """
        url = self.url_for(endpoint)
        logger.debug(f"GET {url}")

        response = self.session.get(
            url,
            params=params,
            timeout=self.timeout,
            **kwargs,
        )
        response.raise_for_status()
        return response.json()

    def post(
        self,
        endpoint: str,
        json_data: Optional[Dict[str, Any]] = None,
        **kwargs,
    ) -> Optional[Any]:
        """
        Make a POST request with a JSON body.

        Args:
            endpoint: API endpoint.
            json_data: JSON body.
            **kwargs: Additional arguments passed to requests.

        Returns:
            Decoded JSON body, or None when the response has no JSON body.

        Raises:
            requests.RequestException: On request failure or non-success status.
        """
        url = self.url_for(endpoint)
        logger.debug(f"POST {url}")

        response = self.session.post(
            url,
            json=json_data,
            timeout=self.timeout,
            **kwargs,
        )
        response.raise_for_status()
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            logger.debug(f"Non-JSON response body from {url}")
            return None

    def close(self) -> None:
        """Close the HTTP session."""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
