"""Parsing utilities for GitHub URLs and Actions API responses.

Responses are validated at the boundary: anything that does not match the
expected shape raises ResponseShapeError instead of leaking loosely-typed
JSON into the rest of the tool.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from running_actions.github.errors import ResponseShapeError
from running_actions.github.types import RepoRef, RunCollection, Workflow, WorkflowRun

GITHUB_URL_PREFIX = "https://github.com/"


@dataclass(frozen=True)
class InvalidRepoUrl:
    """Validation failure for a repository URL. Implements NonIdealState."""

    raw_url: str
    reason: str

    @property
    def error_type(self) -> str:
        return "invalid-repo-url"

    @property
    def message(self) -> str:
        return (
            f"Invalid repository URL: {self.reason}\n"
            f"  Actual value: {self.raw_url!r}\n"
            f"  Expected: {GITHUB_URL_PREFIX}<owner>/<repo>"
        )


def parse_repo_url(url: str) -> RepoRef | InvalidRepoUrl:
    """Derive the owner/repo pair from a GitHub repository URL.

    A trailing slash and a ``.git`` suffix are tolerated.

    Example:
        >>> parse_repo_url("https://github.com/acme/widgets")
        RepoRef(owner='acme', repo='widgets')
    """
    text = url.strip()
    if not text:
        return InvalidRepoUrl(raw_url=url, reason="URL is required")
    if not text.startswith(GITHUB_URL_PREFIX):
        return InvalidRepoUrl(raw_url=url, reason=f"URL must start with {GITHUB_URL_PREFIX}")

    path = text.removeprefix(GITHUB_URL_PREFIX).rstrip("/").removesuffix(".git")
    parts = path.split("/")
    if len(parts) != 2 or not all(parts):
        return InvalidRepoUrl(raw_url=url, reason="URL must name exactly one owner/repo pair")

    return RepoRef(owner=parts[0], repo=parts[1])


def _require(data: dict[str, Any], key: str, expected: type, context: str) -> Any:
    if key not in data:
        msg = f"{context}: missing field {key!r}"
        raise ResponseShapeError(msg)
    value = data[key]
    # bool is a subclass of int and never a valid id or count
    if not isinstance(value, expected) or (isinstance(value, bool) and expected is int):
        msg = f"{context}: field {key!r} has unexpected type {type(value).__name__}"
        raise ResponseShapeError(msg)
    return value


def _optional_str(data: dict[str, Any], key: str, context: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        msg = f"{context}: field {key!r} has unexpected type {type(value).__name__}"
        raise ResponseShapeError(msg)
    return value


def _parse_timestamp(value: str, context: str) -> datetime:
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as e:
        msg = f"{context}: invalid timestamp {value!r}"
        raise ResponseShapeError(msg) from e


def parse_workflows_response(data: Any) -> list[Workflow]:
    """Parse the body of ``GET /repos/{owner}/{repo}/actions/workflows``."""
    if not isinstance(data, dict):
        msg = "workflows response: expected a JSON object"
        raise ResponseShapeError(msg)

    items = _require(data, "workflows", list, "workflows response")
    workflows = []
    for item in items:
        if not isinstance(item, dict):
            msg = "workflows response: expected each workflow to be an object"
            raise ResponseShapeError(msg)
        workflows.append(
            Workflow(
                id=_require(item, "id", int, "workflow"),
                name=_require(item, "name", str, "workflow"),
            )
        )
    return workflows


def parse_workflow_run(data: Any) -> WorkflowRun:
    """Parse a single entry of the ``workflow_runs`` array."""
    if not isinstance(data, dict):
        msg = "workflow run: expected a JSON object"
        raise ResponseShapeError(msg)

    context = "workflow run"
    return WorkflowRun(
        name=_require(data, "name", str, context),
        status=_optional_str(data, "status", context),
        conclusion=_optional_str(data, "conclusion", context),
        head_branch=_optional_str(data, "head_branch", context),
        head_sha=_require(data, "head_sha", str, context),
        created_at=_parse_timestamp(_require(data, "created_at", str, context), context),
        html_url=_require(data, "html_url", str, context),
        run_number=_require(data, "run_number", int, context),
    )


def parse_runs_response(data: Any) -> RunCollection:
    """Parse the body of a workflow runs listing into a RunCollection."""
    if not isinstance(data, dict):
        msg = "runs response: expected a JSON object"
        raise ResponseShapeError(msg)

    total_count = _require(data, "total_count", int, "runs response")
    runs = _require(data, "workflow_runs", list, "runs response")
    return RunCollection(
        total_count=total_count,
        workflow_runs=tuple(parse_workflow_run(run) for run in runs),
    )
