"""Production Time implementation."""

import time
from datetime import datetime

from running_actions.gateway.time.abc import Time


class RealTime(Time):
    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)

    def now(self) -> datetime:
        return datetime.now()
