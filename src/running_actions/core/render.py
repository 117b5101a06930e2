"""Rendering workflow runs as flat lists or grouped by workflow."""

from collections.abc import Sequence
from datetime import datetime

import click

from running_actions.core.status import format_run_status
from running_actions.github.types import WorkflowRun


def format_timestamp(value: datetime) -> str:
    """Format a timestamp in the local timezone, e.g. "2024-01-15 14:30:05"."""
    return value.astimezone().strftime("%Y-%m-%d %H:%M:%S")


def group_runs_by_workflow(runs: Sequence[WorkflowRun]) -> dict[str, list[WorkflowRun]]:
    """Group runs by workflow name, keeping groups in first-seen order."""
    groups: dict[str, list[WorkflowRun]] = {}
    for run in runs:
        groups.setdefault(run.name, []).append(run)
    return groups


def _run_details(run: WorkflowRun, indent: str) -> list[str]:
    return [
        f"{indent}Status: {format_run_status(run.status, run.conclusion)}",
        f"{indent}Branch: {run.head_branch or '-'}",
        f"{indent}Commit: {run.short_sha}",
        f"{indent}Started: {format_timestamp(run.created_at)}",
        f"{indent}URL: {run.html_url}",
    ]


def render_flat(runs: Sequence[WorkflowRun]) -> list[str]:
    """Render runs as an enumerated list."""
    lines: list[str] = []
    for idx, run in enumerate(runs, 1):
        lines.append(click.style(f"{idx}. {run.name} #{run.run_number}", bold=True))
        lines.extend(_run_details(run, indent="   "))
        lines.append("")
    return lines


def render_grouped(runs: Sequence[WorkflowRun]) -> list[str]:
    """Render runs as one labelled block per workflow."""
    lines: list[str] = []
    for name, group in group_runs_by_workflow(runs).items():
        noun = "run" if len(group) == 1 else "runs"
        lines.append(click.style(f"▸ {name} ({len(group)} {noun})", bold=True))
        for idx, run in enumerate(group, 1):
            lines.append(f"  ├─ {idx}. #{run.run_number}")
            lines.extend(_run_details(run, indent="  │    "))
        lines.append("")
    return lines
