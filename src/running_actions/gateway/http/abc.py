"""Abstract base class for HTTP operations."""

from abc import ABC, abstractmethod

import httpx


class HttpClient(ABC):
    """Abstract interface for GET requests against the GitHub REST API.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def get(self, endpoint: str) -> httpx.Response:
        """Issue a GET request.

        Args:
            endpoint: Path relative to the API base (e.g., "repos/acme/widgets/actions/runs")

        Returns:
            The response, whatever its status code. Callers check
            ``response.is_success`` themselves.

        Raises:
            httpx.HTTPError: If the request could not be completed (network failure)
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """Release any underlying connections."""
        ...
