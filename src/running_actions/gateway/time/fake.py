"""Fake Time implementation for testing."""

from datetime import datetime, timedelta

from running_actions.gateway.time.abc import Time


class FakeTime(Time):
    """Time that never blocks.

    sleep() records the requested duration and advances the fake clock.
    """

    def __init__(self, *, current_time: datetime | None = None) -> None:
        if current_time is None:
            current_time = datetime(2024, 1, 15, 14, 30)
        self._current_time = current_time
        self.sleep_calls: list[float] = []

    def sleep(self, seconds: float) -> None:
        self.sleep_calls.append(seconds)
        self._current_time += timedelta(seconds=seconds)

    def now(self) -> datetime:
        return self._current_time
