"""Errors raised by GitHub API calls."""

from dataclasses import dataclass, field
from typing import Any

import httpx


@dataclass(frozen=True)
class RequestInfo:
    """Description of the request that produced an error response."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ResponseInfo:
    """Metadata captured from a failed response."""

    url: str
    status: int
    headers: dict[str, str]
    data: Any


class RequestError(Exception):
    """Non-2xx response from the GitHub API."""

    def __init__(
        self,
        message: str,
        *,
        status: int,
        response: ResponseInfo,
        request: RequestInfo,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.response = response
        self.request = request


class ResponseShapeError(ValueError):
    """Response body did not match the expected schema."""


class PollLimitExceeded(Exception):
    """Workflow runs were still pending after the maximum number of polls."""

    def __init__(self, *, polls: int, pending: int) -> None:
        super().__init__(f"{pending} workflow run(s) still pending after {polls} polls")
        self.polls = polls
        self.pending = pending


def _read_body(response: httpx.Response) -> Any:
    # httpx caches the body after the first read, so each attempt sees the full content
    try:
        return response.json()
    except ValueError:
        pass
    try:
        return response.text
    except (UnicodeDecodeError, LookupError):
        return {}


def create_request_error(response: httpx.Response) -> RequestError:
    """Build a RequestError from a failed response.

    The body is parsed as JSON when possible, falling back to plain text and
    finally to an empty dict. The error message is the body's ``message``
    field when present, otherwise the HTTP reason phrase.

    Args:
        response: The failed (non-2xx) response

    Returns:
        RequestError describing the failure. The caller is responsible for
        raising it.
    """
    headers = {key: value for key, value in response.headers.items()}
    data = _read_body(response)

    if isinstance(data, dict) and "message" in data:
        message = str(data["message"])
    else:
        message = response.reason_phrase

    url = str(response.url)
    return RequestError(
        message,
        status=response.status_code,
        response=ResponseInfo(
            url=url,
            status=response.status_code,
            headers=headers,
            data=data or {},
        ),
        request=RequestInfo(method="GET", url=url),
    )
