"""Fake HttpClient for testing."""

from dataclasses import dataclass
from typing import Any

import httpx

from running_actions.gateway.http.abc import HttpClient
from running_actions.gateway.http.real import GITHUB_API_BASE


@dataclass(frozen=True)
class FakeHttpRequest:
    """A request recorded by FakeHttpClient."""

    method: str
    endpoint: str


class FakeHttpClient(HttpClient):
    """In-memory HttpClient returning pre-configured responses.

    Responses are queued per endpoint. Each request consumes the next queued
    response; once a single response remains it is returned for every further
    request. Requests to unconfigured endpoints get a 404.
    """

    def __init__(self) -> None:
        self._responses: dict[str, list[httpx.Response]] = {}
        self.requests: list[FakeHttpRequest] = []
        self.closed = False

    def set_response(
        self,
        endpoint: str,
        *,
        response: Any = None,
        status_code: int = 200,
        text: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Queue a response for endpoint.

        Args:
            endpoint: Endpoint path, as passed to get()
            response: JSON-serializable body (ignored when text is given)
            status_code: HTTP status code
            text: Raw body, for non-JSON responses
            headers: Response headers
        """
        request = httpx.Request("GET", f"{GITHUB_API_BASE}/{endpoint}")
        if text is not None:
            built = httpx.Response(status_code, text=text, headers=headers, request=request)
        elif response is not None:
            built = httpx.Response(status_code, json=response, headers=headers, request=request)
        else:
            built = httpx.Response(status_code, headers=headers, request=request)
        self._responses.setdefault(endpoint, []).append(built)

    def get(self, endpoint: str) -> httpx.Response:
        self.requests.append(FakeHttpRequest(method="GET", endpoint=endpoint))
        queued = self._responses.get(endpoint)
        if not queued:
            request = httpx.Request("GET", f"{GITHUB_API_BASE}/{endpoint}")
            return httpx.Response(404, json={"message": "Not Found"}, request=request)
        if len(queued) > 1:
            return queued.pop(0)
        return queued[0]

    def close(self) -> None:
        self.closed = True

    def requested_endpoints(self) -> list[str]:
        return [request.endpoint for request in self.requests]
