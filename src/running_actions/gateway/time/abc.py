"""Abstract base class for time operations."""

from abc import ABC, abstractmethod
from datetime import datetime


class Time(ABC):
    """Abstract interface for time operations, so polling can be tested without waiting."""

    @abstractmethod
    def sleep(self, seconds: float) -> None:
        """Block for the given number of seconds."""
        ...

    @abstractmethod
    def now(self) -> datetime:
        """Return the current local time."""
        ...
