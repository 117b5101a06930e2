"""Tests for repository URL and Actions response parsing."""

from datetime import UTC, datetime

import pytest

from running_actions.github.errors import ResponseShapeError
from running_actions.github.parsing import (
    InvalidRepoUrl,
    parse_repo_url,
    parse_runs_response,
    parse_workflows_response,
)
from running_actions.github.types import RepoRef, Workflow
from tests.github_payloads import run_json, runs_json, workflow_json, workflows_json


@pytest.mark.parametrize(
    "url",
    [
        "https://github.com/acme/widgets",
        "https://github.com/acme/widgets/",
        "https://github.com/acme/widgets.git",
        "  https://github.com/acme/widgets  ",
    ],
)
def test_parse_repo_url_accepts_repository_urls(url: str) -> None:
    assert parse_repo_url(url) == RepoRef(owner="acme", repo="widgets")


@pytest.mark.parametrize(
    "url",
    [
        "",
        "acme/widgets",
        "http://github.com/acme/widgets",
        "https://gitlab.com/acme/widgets",
        "https://github.com/acme",
        "https://github.com/acme/widgets/actions",
        "https://github.com//widgets",
    ],
)
def test_parse_repo_url_rejects_invalid_urls(url: str) -> None:
    result = parse_repo_url(url)

    assert isinstance(result, InvalidRepoUrl)
    assert result.error_type == "invalid-repo-url"
    assert "Invalid repository URL" in result.message


def test_repo_ref_full_name() -> None:
    repo = RepoRef(owner="acme", repo="widgets")

    assert repo.full_name == "acme/widgets"
    assert str(repo) == "acme/widgets"


def test_parse_workflows_response_keeps_listing_order() -> None:
    data = workflows_json(workflow_json(7, "Deploy"), workflow_json(3, "CI"))

    assert parse_workflows_response(data) == [
        Workflow(id=7, name="Deploy"),
        Workflow(id=3, name="CI"),
    ]


def test_parse_workflows_response_empty() -> None:
    assert parse_workflows_response(workflows_json()) == []


def test_parse_workflows_response_missing_key() -> None:
    with pytest.raises(ResponseShapeError, match="missing field 'workflows'"):
        parse_workflows_response({"total_count": 0})


def test_parse_workflows_response_rejects_non_object() -> None:
    with pytest.raises(ResponseShapeError):
        parse_workflows_response([])


def test_parse_workflows_response_rejects_bad_id() -> None:
    with pytest.raises(ResponseShapeError, match="'id'"):
        parse_workflows_response({"workflows": [{"id": "1", "name": "CI"}]})


def test_parse_runs_response() -> None:
    data = runs_json(
        run_json(name="CI", status="completed", conclusion="failure", run_number=12),
        run_json(name="Deploy", status="queued", conclusion=None, run_number=3),
        total_count=40,
    )

    collection = parse_runs_response(data)

    assert collection.total_count == 40
    assert [run.name for run in collection.workflow_runs] == ["CI", "Deploy"]
    first = collection.workflow_runs[0]
    assert first.conclusion == "failure"
    assert first.run_number == 12
    assert first.short_sha == "abc1234"
    assert first.created_at == datetime(2024, 1, 15, 14, 30, tzinfo=UTC)
    assert [run.name for run in collection.pending_runs] == ["Deploy"]


def test_parse_runs_response_allows_null_branch_and_conclusion() -> None:
    data = runs_json(run_json(status="in_progress", conclusion=None, head_branch=None))

    run = parse_runs_response(data).workflow_runs[0]

    assert run.head_branch is None
    assert run.conclusion is None
    assert run.is_pending


def test_parse_runs_response_rejects_bool_count() -> None:
    with pytest.raises(ResponseShapeError, match="'total_count'"):
        parse_runs_response({"total_count": True, "workflow_runs": []})


def test_parse_runs_response_rejects_bad_timestamp() -> None:
    data = runs_json(run_json(created_at="yesterday"))

    with pytest.raises(ResponseShapeError, match="invalid timestamp"):
        parse_runs_response(data)


def test_parse_runs_response_rejects_missing_sha() -> None:
    run = run_json()
    del run["head_sha"]

    with pytest.raises(ResponseShapeError, match="'head_sha'"):
        parse_runs_response(runs_json(run))
