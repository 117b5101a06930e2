"""Abstract base class for interactive prompts."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


class Prompter(ABC):
    """Abstract interface for asking the operator questions.

    Every method returns None when the operator cancels (Ctrl-C or end of input).
    """

    @abstractmethod
    def text(self, message: str) -> str | None:
        """Ask for a non-empty line of text.

        Args:
            message: Prompt shown to the operator

        Returns:
            The entered text, or None if cancelled
        """
        ...

    @abstractmethod
    def select(self, message: str, options: Sequence[tuple[str, T]]) -> T | None:
        """Ask the operator to pick exactly one option.

        Args:
            message: Prompt shown to the operator
            options: (label, value) pairs in display order

        Returns:
            The value of the chosen option, or None if cancelled
        """
        ...
