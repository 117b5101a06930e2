"""Fake Prompter for testing."""

from collections.abc import Sequence
from typing import TypeVar

from running_actions.gateway.prompt.abc import Prompter

T = TypeVar("T")


class FakePrompter(Prompter):
    """Prompter answering from pre-configured state.

    All state is provided via constructor. A None answer simulates the
    operator cancelling the prompt.

    Args:
        text_answer: Returned from text()
        select_label: Label of the option to choose in select(); None cancels
    """

    def __init__(
        self,
        *,
        text_answer: str | None = None,
        select_label: str | None = None,
    ) -> None:
        self._text_answer = text_answer
        self._select_label = select_label
        self.text_prompts: list[str] = []
        self.select_prompts: list[tuple[str, list[str]]] = []

    def text(self, message: str) -> str | None:
        self.text_prompts.append(message)
        return self._text_answer

    def select(self, message: str, options: Sequence[tuple[str, T]]) -> T | None:
        self.select_prompts.append((message, [label for label, _ in options]))
        if self._select_label is None:
            return None
        for label, value in options:
            if label == self._select_label:
                return value
        msg = f"FakePrompter: no option labelled {self._select_label!r}"
        raise AssertionError(msg)
