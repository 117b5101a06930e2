"""Interactive session: pick a repository and workflow, wait for runs, show them.

The session walks a fixed sequence of steps:

    acquire URL -> validate -> list workflows -> select workflow -> fetch runs -> render

Prompts may be cancelled at any point, and any step doing I/O may fail. The
session never exits the process itself; it returns a SessionResult and the
CLI decides how to report it.
"""

import logging
from dataclasses import dataclass

import httpx

from running_actions.core.context import RunningActionsContext
from running_actions.core.render import render_flat, render_grouped
from running_actions.core.runs import DEFAULT_POLL_INTERVAL, fetch_workflow_runs
from running_actions.github.errors import (
    PollLimitExceeded,
    RequestError,
    create_request_error,
)
from running_actions.github.parsing import InvalidRepoUrl, parse_repo_url, parse_workflows_response
from running_actions.github.types import ALL_WORKFLOWS, RepoRef, RunCollection, Workflow
from running_actions.output import user_output

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApiFailure:
    """Non-2xx response from the GitHub API. Implements NonIdealState."""

    status: int
    api_message: str
    repo: RepoRef

    @property
    def error_type(self) -> str:
        return "api-error"

    @property
    def message(self) -> str:
        if self.status == 404:
            return f"Repository not found: {self.repo}"
        if self.status == 403:
            return "API rate limit exceeded. Try again later."
        if self.status == 401:
            return "Authentication required."
        return f"API error {self.status}: {self.api_message}"


@dataclass(frozen=True)
class GenericFailure:
    """Any other failure that carries a message. Implements NonIdealState."""

    detail: str

    @property
    def error_type(self) -> str:
        return "error"

    @property
    def message(self) -> str:
        return self.detail


@dataclass(frozen=True)
class UnknownFailure:
    """Failure with nothing useful to report. Implements NonIdealState."""

    @property
    def error_type(self) -> str:
        return "unknown-error"

    @property
    def message(self) -> str:
        return "An unknown error occurred."


SessionFailure = InvalidRepoUrl | ApiFailure | GenericFailure | UnknownFailure


@dataclass(frozen=True)
class SessionCompleted:
    """Session ran to the end (possibly with nothing to show)."""


@dataclass(frozen=True)
class SessionCancelled:
    """Operator cancelled a prompt."""


@dataclass(frozen=True)
class SessionFailed:
    """Session stopped on an error."""

    failure: SessionFailure


SessionResult = SessionCompleted | SessionCancelled | SessionFailed


def classify_exception(error: Exception) -> GenericFailure | UnknownFailure:
    """Classify an exception that is not an API error."""
    detail = str(error)
    if not detail:
        return UnknownFailure()
    return GenericFailure(detail=detail)


def _list_workflows(ctx: RunningActionsContext, repo: RepoRef) -> list[Workflow]:
    response = ctx.http.get(f"repos/{repo.full_name}/actions/workflows")
    if not response.is_success:
        raise create_request_error(response)
    return parse_workflows_response(response.json())


def _render_runs(repo: RepoRef, workflow: Workflow, collection: RunCollection) -> None:
    user_output(f"Found {collection.total_count} workflow runs on {repo}:\n")
    if workflow == ALL_WORKFLOWS:
        lines = render_grouped(collection.workflow_runs)
    else:
        lines = render_flat(collection.workflow_runs)
    for line in lines:
        user_output(line)


def _run_steps(
    ctx: RunningActionsContext,
    repo: RepoRef,
    *,
    poll_interval: float,
    max_polls: int | None,
) -> SessionResult:
    workflows = _list_workflows(ctx, repo)
    if not workflows:
        user_output(f"No workflows found on {repo}.")
        return SessionCompleted()

    options = [(ALL_WORKFLOWS.name, ALL_WORKFLOWS)]
    options.extend((workflow.name, workflow) for workflow in workflows)
    selected = ctx.prompter.select("Select workflow", options)
    if selected is None:
        return SessionCancelled()
    logger.debug("Selected workflow %s (id=%d)", selected.name, selected.id)

    collection = fetch_workflow_runs(
        ctx,
        workflow_id=selected.id,
        repo=repo,
        poll_interval=poll_interval,
        max_polls=max_polls,
    )
    if collection.is_empty:
        user_output(f"No workflow runs found on {repo}.")
        return SessionCompleted()

    _render_runs(repo, selected, collection)
    return SessionCompleted()


def run_session(
    ctx: RunningActionsContext,
    *,
    repo_url: str | None,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
    max_polls: int | None = None,
) -> SessionResult:
    """Run one interactive session.

    Args:
        ctx: Context providing HTTP, prompt, time and display gateways
        repo_url: Repository URL from the environment or command line. When
            None the operator is prompted for it.
        poll_interval: Seconds between polls while runs are pending
        max_polls: Optional cap on the number of runs requests

    Returns:
        SessionCompleted, SessionCancelled, or SessionFailed describing the error
    """
    if repo_url is None:
        repo_url = ctx.prompter.text("Enter your repository URL to get running actions")
        if repo_url is None:
            return SessionCancelled()

    repo = parse_repo_url(repo_url)
    if isinstance(repo, InvalidRepoUrl):
        return SessionFailed(repo)
    logger.debug("Using repository %s", repo)

    try:
        return _run_steps(ctx, repo, poll_interval=poll_interval, max_polls=max_polls)
    except RequestError as e:
        logger.debug("API request failed: %s %s", e.status, e.response.url)
        return SessionFailed(ApiFailure(status=e.status, api_message=e.message, repo=repo))
    except (httpx.HTTPError, PollLimitExceeded, ValueError) as e:
        return SessionFailed(classify_exception(e))
