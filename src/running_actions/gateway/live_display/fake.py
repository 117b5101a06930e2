"""Fake LiveDisplay for testing."""

from running_actions.gateway.live_display.abc import LiveDisplay


class FakeLiveDisplay(LiveDisplay):
    """Records every update instead of drawing to the terminal."""

    def __init__(self) -> None:
        self.updates: list[str] = []
        self.is_active = False

    def start(self) -> None:
        self.is_active = True

    def update(self, message: str) -> None:
        self.updates.append(message)

    def stop(self) -> None:
        self.is_active = False
