"""Styled labels for workflow run status."""

import click


def format_run_status(status: str | None, conclusion: str | None) -> str:
    """Map a run's status and conclusion to a styled, human-readable label.

    The conclusion is only consulted for completed runs.
    """
    if status == "completed":
        if conclusion == "success":
            return click.style("Completed Successfully", fg="green")
        if conclusion == "failure":
            return click.style("Failed", fg="red")
        return click.style("Canceled/Other", fg="yellow")
    if status == "in_progress":
        return click.style("In Progress", fg="blue")
    if status == "queued":
        return click.style("Queued", fg="cyan")
    return click.style("Unknown", fg="bright_black")
