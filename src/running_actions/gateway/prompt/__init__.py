"""Prompt gateway for interactive operator input."""

from running_actions.gateway.prompt.abc import Prompter
from running_actions.gateway.prompt.fake import FakePrompter
from running_actions.gateway.prompt.real import RealPrompter

__all__ = [
    "Prompter",
    "FakePrompter",
    "RealPrompter",
]
