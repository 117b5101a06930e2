"""Abstract base class for live-updating terminal output."""

from abc import ABC, abstractmethod


class LiveDisplay(ABC):
    """A region of the terminal that is redrawn in place.

    Lifecycle: start() once, update() any number of times, stop() once.
    """

    @abstractmethod
    def start(self) -> None:
        """Begin rendering."""
        ...

    @abstractmethod
    def update(self, message: str) -> None:
        """Replace the displayed message."""
        ...

    @abstractmethod
    def stop(self) -> None:
        """Stop rendering and release the terminal region. Safe to call when not started."""
        ...
