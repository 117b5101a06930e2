"""Live display gateway for real-time output."""

from running_actions.gateway.live_display.abc import LiveDisplay
from running_actions.gateway.live_display.fake import FakeLiveDisplay
from running_actions.gateway.live_display.real import RealLiveDisplay

__all__ = [
    "LiveDisplay",
    "FakeLiveDisplay",
    "RealLiveDisplay",
]
