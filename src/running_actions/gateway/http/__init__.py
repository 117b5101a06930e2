"""HTTP gateway for GitHub REST API calls."""

from running_actions.gateway.http.abc import HttpClient
from running_actions.gateway.http.fake import FakeHttpClient
from running_actions.gateway.http.real import RealHttpClient

__all__ = [
    "HttpClient",
    "FakeHttpClient",
    "RealHttpClient",
]
