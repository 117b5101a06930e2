"""Rich-backed LiveDisplay showing a spinner next to a status message."""

from rich.console import Console
from rich.live import Live
from rich.spinner import Spinner

from running_actions.gateway.live_display.abc import LiveDisplay


class RealLiveDisplay(LiveDisplay):
    def __init__(self) -> None:
        self._console = Console(stderr=True)
        self._spinner = Spinner("dots", text="")
        self._live: Live | None = None

    def start(self) -> None:
        if self._live is not None:
            return
        self._live = Live(
            self._spinner, console=self._console, transient=True, refresh_per_second=10
        )
        self._live.start()

    def update(self, message: str) -> None:
        self._spinner.update(text=message)
        if self._live is not None:
            self._live.refresh()

    def stop(self) -> None:
        if self._live is None:
            return
        self._live.stop()
        self._live = None
