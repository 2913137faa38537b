"""HTTP provider for TRON node endpoints.

This module provides the endpoint object held by the client context for
its full node and solidity node, together with the reachability check used
by the client's connectivity probes.
"""

# Standard library imports
from typing import Any, Dict, Optional
from urllib.parse import urljoin

# Third-party library imports
import httpx

# Internal imports
from tron_context.logging_config import get_logger
from tron_context.utils.error_handling import (
    InvalidProviderType,
    InvalidProviderURL,
    ProviderRequestError
)
from tron_context.utils.validation import has_properties, is_valid_url

# Get logger
logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30.0  # seconds
DEFAULT_STATUS_PAGE = "/"


class HttpProvider:
    """An HTTP(S) endpoint of a TRON node."""

    def __init__(
        self,
        host: str,
        timeout: float = DEFAULT_TIMEOUT,
        user: Optional[str] = None,
        password: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        status_page: str = DEFAULT_STATUS_PAGE
    ):
        """Initialize the provider.

        Args:
            host: Absolute URL of the node
            timeout: Request timeout in seconds
            user: Optional basic auth user
            password: Optional basic auth password
            headers: Extra headers sent with every request
            status_page: Path requested by ``is_connected``

        Raises:
            InvalidProviderType: If host is not a string
            InvalidProviderURL: If host is not an absolute URL
        """
        if not isinstance(host, str):
            raise InvalidProviderType(details={"host": repr(host)})
        if not is_valid_url(host):
            raise InvalidProviderURL(details={"host": host})

        # Kept verbatim; request paths are joined onto it
        self.host = host
        self.timeout = timeout
        self.user = user
        self.password = password
        self.headers = dict(headers or {})
        self.status_page = status_page

        # Shared HTTP client, created on first request
        self._http_client: Optional[httpx.AsyncClient] = None

    @property
    def auth(self) -> Optional[tuple]:
        if self.user and self.password:
            return (self.user, self.password)
        return None

    def set_status_page(self, status_page: str = DEFAULT_STATUS_PAGE) -> None:
        self.status_page = status_page

    def set_headers(self, headers: Dict[str, str]) -> None:
        """Merge headers into the ones sent with every request."""
        self.headers.update(headers)
        if self._http_client is not None:
            self._http_client.headers.update(headers)

    def _get_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self.timeout,
                auth=self.auth,
                headers={"Content-Type": "application/json", **self.headers},
                limits=httpx.Limits(max_keepalive_connections=10, max_connections=20)
            )
        return self._http_client

    def _url(self, path: str) -> str:
        base = self.host if self.host.endswith("/") else self.host + "/"
        return urljoin(base, path.lstrip("/"))

    async def request(self, url: str, payload: Optional[Dict[str, Any]] = None,
                      method: str = "get") -> Any:
        """Make a request to the node and decode the JSON response.

        Args:
            url: Path relative to the host
            payload: JSON body for POST requests, query parameters otherwise
            method: HTTP method

        Returns:
            The decoded JSON response

        Raises:
            ProviderRequestError: If the request fails, the node answers with
                an error status, or the body is not JSON
        """
        endpoint = self._url(url)
        method = method.lower()
        client = self._get_client()

        try:
            if method == "get":
                response = await client.get(endpoint, params=payload)
            else:
                response = await client.request(method.upper(), endpoint, json=payload)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise ProviderRequestError(
                f"Node responded with HTTP {e.response.status_code}",
                status_code=e.response.status_code,
                endpoint=endpoint
            ) from e
        except httpx.HTTPError as e:
            raise ProviderRequestError(
                f"Request to node failed: {str(e) or type(e).__name__}",
                endpoint=endpoint
            ) from e
        except ValueError as e:
            raise ProviderRequestError(
                "Node returned a response that is not JSON",
                endpoint=endpoint
            ) from e

    async def is_connected(self, status_page: Optional[str] = None) -> bool:
        """Check whether the node answers with a block on its status page.

        Never raises; every failure is reported as False.
        """
        page = status_page or self.status_page
        try:
            data = await self.request(page)
        except ProviderRequestError as e:
            logger.debug(f"Provider {self.host} is not connected: {e.message}")
            return False
        return has_properties(data, "blockID", "block_header")

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> "HttpProvider":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"HttpProvider(host={self.host!r})"
