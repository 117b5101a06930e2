"""Application context with dependency injection."""

from dataclasses import dataclass

from running_actions.gateway.http.abc import HttpClient
from running_actions.gateway.http.fake import FakeHttpClient
from running_actions.gateway.http.real import RealHttpClient
from running_actions.gateway.live_display.abc import LiveDisplay
from running_actions.gateway.live_display.fake import FakeLiveDisplay
from running_actions.gateway.live_display.real import RealLiveDisplay
from running_actions.gateway.prompt.abc import Prompter
from running_actions.gateway.prompt.fake import FakePrompter
from running_actions.gateway.prompt.real import RealPrompter
from running_actions.gateway.time.abc import Time
from running_actions.gateway.time.fake import FakeTime
from running_actions.gateway.time.real import RealTime


@dataclass(frozen=True)
class RunningActionsContext:
    """Immutable context holding every dependency a session needs.

    Created once at CLI entry and threaded through the session, so tests can
    substitute fakes for each gateway.
    """

    http: HttpClient
    time: Time
    live_display: LiveDisplay
    prompter: Prompter

    @staticmethod
    def for_test(
        http: HttpClient | None = None,
        time: Time | None = None,
        live_display: LiveDisplay | None = None,
        prompter: Prompter | None = None,
    ) -> "RunningActionsContext":
        """Create a context with fakes for any dependency not provided.

        Example:
            >>> http = FakeHttpClient()
            >>> ctx = RunningActionsContext.for_test(http=http)
        """
        return RunningActionsContext(
            http=http if http is not None else FakeHttpClient(),
            time=time if time is not None else FakeTime(),
            live_display=live_display if live_display is not None else FakeLiveDisplay(),
            prompter=prompter if prompter is not None else FakePrompter(),
        )


def create_context() -> RunningActionsContext:
    """Create production context with real implementations."""
    return RunningActionsContext(
        http=RealHttpClient(),
        time=RealTime(),
        live_display=RealLiveDisplay(),
        prompter=RealPrompter(),
    )
