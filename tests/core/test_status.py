"""Tests for workflow run status labels."""

import click
import pytest

from running_actions.core.status import format_run_status


@pytest.mark.parametrize(
    ("status", "conclusion", "expected"),
    [
        ("completed", "success", "Completed Successfully"),
        ("completed", "failure", "Failed"),
        ("completed", "cancelled", "Canceled/Other"),
        ("completed", "skipped", "Canceled/Other"),
        ("completed", None, "Canceled/Other"),
        ("in_progress", None, "In Progress"),
        ("queued", None, "Queued"),
        ("waiting", None, "Unknown"),
        (None, None, "Unknown"),
    ],
)
def test_format_run_status_labels(
    status: str | None, conclusion: str | None, expected: str
) -> None:
    assert click.unstyle(format_run_status(status, conclusion)) == expected


def test_conclusion_ignored_unless_completed() -> None:
    """A stale conclusion on a running job does not change the label."""
    assert click.unstyle(format_run_status("in_progress", "failure")) == "In Progress"


def test_labels_are_styled() -> None:
    assert format_run_status("completed", "failure") == click.style("Failed", fg="red")
    assert format_run_status("completed", "success") == click.style(
        "Completed Successfully", fg="green"
    )
