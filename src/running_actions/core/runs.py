"""Fetching workflow runs, polling until none are pending."""

import logging

from running_actions.core.context import RunningActionsContext
from running_actions.github.errors import PollLimitExceeded, create_request_error
from running_actions.github.parsing import parse_runs_response
from running_actions.github.types import ALL_WORKFLOWS, RepoRef, RunCollection

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 5.0


def runs_endpoint(repo: RepoRef, workflow_id: int) -> str:
    """Return the runs listing endpoint, scoped to one workflow unless workflow_id is -1."""
    if workflow_id == ALL_WORKFLOWS.id:
        return f"repos/{repo.full_name}/actions/runs"
    return f"repos/{repo.full_name}/actions/workflows/{workflow_id}/runs"


def _pending_message(pending: int, checked_at: str) -> str:
    noun = "run" if pending == 1 else "runs"
    return f"Waiting for {pending} pending workflow {noun} (last checked {checked_at})..."


def fetch_workflow_runs(
    ctx: RunningActionsContext,
    *,
    workflow_id: int,
    repo: RepoRef,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
    max_polls: int | None = None,
) -> RunCollection:
    """Fetch workflow runs, re-polling while any run is queued or in progress.

    HTTP failures are not retried; only pending runs cause another request.
    Polling is unbounded unless max_polls is given.

    Args:
        ctx: Context providing HTTP, time and live display gateways
        workflow_id: Workflow to list runs for, or -1 for all workflows
        repo: Repository to query
        poll_interval: Seconds to wait between polls
        max_polls: Maximum number of requests, or None for no limit

    Returns:
        The first RunCollection with no queued or in-progress runs

    Raises:
        RequestError: If the API returns a non-2xx response
        ResponseShapeError: If the response body is malformed
        PollLimitExceeded: If runs are still pending after max_polls requests
    """
    endpoint = runs_endpoint(repo, workflow_id)
    polls = 0
    try:
        while True:
            response = ctx.http.get(endpoint)
            polls += 1
            if not response.is_success:
                raise create_request_error(response)

            collection = parse_runs_response(response.json())
            pending = len(collection.pending_runs)
            logger.debug("Poll %d of %s: %d pending run(s)", polls, endpoint, pending)
            if pending == 0:
                return collection

            if max_polls is not None and polls >= max_polls:
                raise PollLimitExceeded(polls=polls, pending=pending)

            ctx.live_display.start()
            ctx.live_display.update(_pending_message(pending, ctx.time.now().strftime("%H:%M:%S")))
            ctx.time.sleep(poll_interval)
    finally:
        ctx.live_display.stop()
