"""Time gateway for sleeping and reading the clock."""

from running_actions.gateway.time.abc import Time
from running_actions.gateway.time.fake import FakeTime
from running_actions.gateway.time.real import RealTime

__all__ = [
    "Time",
    "FakeTime",
    "RealTime",
]
