"""Type definitions for GitHub Actions data."""

from dataclasses import dataclass
from datetime import datetime

# Runs in these states are still expected to change (lowercase, as reported by the REST API)
PENDING_STATUSES = frozenset({"in_progress", "queued"})


@dataclass(frozen=True)
class RepoRef:
    """Owner/repo pair identifying a GitHub repository."""

    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    def __str__(self) -> str:
        return self.full_name


@dataclass(frozen=True)
class Workflow:
    """A workflow registered on a repository."""

    id: int
    name: str


# Selecting this workflow means "no filter"
ALL_WORKFLOWS = Workflow(id=-1, name="All Workflows")


@dataclass(frozen=True)
class WorkflowRun:
    """Snapshot of one execution of a workflow."""

    name: str
    status: str | None
    conclusion: str | None  # None until the run completes
    head_branch: str | None
    head_sha: str
    created_at: datetime
    html_url: str
    run_number: int

    @property
    def is_pending(self) -> bool:
        return self.status in PENDING_STATUSES

    @property
    def short_sha(self) -> str:
        return self.head_sha[:7]


@dataclass(frozen=True)
class RunCollection:
    """Result of a single runs listing request."""

    total_count: int
    workflow_runs: tuple[WorkflowRun, ...]

    @property
    def pending_runs(self) -> list[WorkflowRun]:
        return [run for run in self.workflow_runs if run.is_pending]

    @property
    def is_empty(self) -> bool:
        return len(self.workflow_runs) == 0
