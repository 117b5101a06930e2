"""Tests for flat and grouped run rendering."""

import click

from running_actions.core.render import (
    format_timestamp,
    group_runs_by_workflow,
    render_flat,
    render_grouped,
)
from running_actions.github.parsing import parse_runs_response
from tests.github_payloads import run_json, runs_json


def _runs(*runs: dict) -> tuple:
    return parse_runs_response(runs_json(*runs)).workflow_runs


def _plain(lines: list[str]) -> str:
    return click.unstyle("\n".join(lines))


def test_group_runs_preserves_first_seen_order() -> None:
    runs = _runs(
        run_json(name="Deploy", run_number=1),
        run_json(name="CI", run_number=2),
        run_json(name="Deploy", run_number=3),
    )

    groups = group_runs_by_workflow(runs)

    assert list(groups) == ["Deploy", "CI"]
    assert [run.run_number for run in groups["Deploy"]] == [1, 3]


def test_render_flat_enumerates_runs() -> None:
    runs = _runs(
        run_json(name="CI", run_number=41, conclusion="failure", head_branch="feature"),
        run_json(name="CI", run_number=40),
    )

    output = _plain(render_flat(runs))

    assert "1. CI #41" in output
    assert "2. CI #40" in output
    assert "Status: Failed" in output
    assert "Status: Completed Successfully" in output
    assert "Branch: feature" in output
    assert "Commit: abc1234" in output
    assert "Commit: abc1234d" not in output
    assert f"Started: {format_timestamp(runs[0].created_at)}" in output
    assert "URL: https://github.com/acme/widgets/actions/runs/1041" in output


def test_render_flat_shows_placeholder_for_missing_branch() -> None:
    runs = _runs(run_json(head_branch=None))

    assert "Branch: -" in _plain(render_flat(runs))


def test_render_grouped_headers_show_run_counts() -> None:
    runs = _runs(
        run_json(name="CI", run_number=1),
        run_json(name="Deploy", run_number=7, status="completed", conclusion="cancelled"),
        run_json(name="CI", run_number=2),
    )

    output = _plain(render_grouped(runs))

    assert "▸ CI (2 runs)" in output
    assert "▸ Deploy (1 run)" in output
    assert output.index("CI (2 runs)") < output.index("Deploy (1 run)")
    assert "Status: Canceled/Other" in output


def test_format_timestamp() -> None:
    runs = _runs(run_json(created_at="2024-01-15T14:30:05Z"))
    expected = runs[0].created_at.astimezone().strftime("%Y-%m-%d %H:%M:%S")

    assert format_timestamp(runs[0].created_at) == expected
