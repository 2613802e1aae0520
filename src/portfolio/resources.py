from __future__ import annotations

from typing import Any, Optional, Protocol

import httpx


class PortfolioError(RuntimeError):
    """Base error for the portfolio page."""


class ResourceError(PortfolioError):
    """The resource could not be fetched (network failure, timeout)."""


class ResourceApiError(ResourceError):
    """The server answered with a non-200 status."""


class ResourcePayloadError(ResourceError):
    """The response body is not valid JSON."""


class ResourceFetcher(Protocol):
    async def fetch_json(self, path: str) -> Any:
        ...


class HttpResourceClient:
    """
    Minimal async client for the page's static JSON data files.

    Notes
    - Paths are resolved against `base_url` (e.g. "data/projects.json").
    - One request per call, no retry: a failed load stays failed until the
      page is reloaded.
    - Shape validation is left to the caller; this only guarantees JSON.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 15.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        if not base_url:
            raise ValueError("base_url is required")
        self._base_url = base_url
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpResourceClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    # --------------- Public API ---------------
    async def fetch_json(self, path: str) -> Any:
        """
        GET `path` and return the decoded JSON body.

        Raises ResourceError on transport failures, ResourceApiError on a
        non-200 status and ResourcePayloadError when the body is not JSON.
        """
        try:
            resp = await self._client.get(path)
        except (httpx.TimeoutException, httpx.TransportError) as exc:
            raise ResourceError(f"Failed to fetch {path}") from exc

        if resp.status_code != 200:
            raise ResourceApiError(f"HTTP {resp.status_code} for {path}: {resp.text[:200]}")
        try:
            return resp.json()
        except ValueError as exc:  # JSON decode error
            raise ResourcePayloadError(f"Response for {path} is not JSON") from exc


__all__ = [
    "HttpResourceClient",
    "PortfolioError",
    "ResourceApiError",
    "ResourceError",
    "ResourceFetcher",
    "ResourcePayloadError",
]
