"""Production HttpClient backed by httpx."""

import logging

import httpx

from running_actions.gateway.http.abc import HttpClient

logger = logging.getLogger(__name__)

GITHUB_API_BASE = "https://api.github.com"

DEFAULT_HEADERS = {
    "Accept": "application/vnd.github+json",
    "X-GitHub-Api-Version": "2022-11-28",
    "User-Agent": "running-actions",
}


class RealHttpClient(HttpClient):
    """HttpClient issuing unauthenticated requests through a shared httpx.Client."""

    def __init__(self, *, base_url: str = GITHUB_API_BASE, timeout: float = 30.0) -> None:
        self._client = httpx.Client(base_url=base_url, headers=DEFAULT_HEADERS, timeout=timeout)

    def get(self, endpoint: str) -> httpx.Response:
        logger.debug("GET %s", endpoint)
        response = self._client.get(endpoint)
        logger.debug("GET %s -> %d", endpoint, response.status_code)
        return response

    def close(self) -> None:
        self._client.close()
