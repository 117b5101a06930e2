import logging

import click

from running_actions.core.context import RunningActionsContext, create_context
from running_actions.core.runs import DEFAULT_POLL_INTERVAL
from running_actions.core.session import (
    SessionCancelled,
    SessionCompleted,
    SessionFailed,
    SessionResult,
    classify_exception,
    run_session,
)
from running_actions.output import user_output

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

logger = logging.getLogger(__name__)


def _report(result: SessionResult) -> None:
    """Print the outcome of a session and exit with the matching status code."""
    if isinstance(result, SessionCompleted):
        user_output(click.style("Thank you for using running-actions!", fg="green"))
        return
    if isinstance(result, SessionCancelled):
        user_output(click.style("Operation cancelled.", fg="yellow"))
        return
    if isinstance(result, SessionFailed):
        logger.debug("Session failed: %s", result.failure.error_type)
        user_output(click.style("\n✗ Error: ", fg="red") + result.failure.message + "\n")
        raise SystemExit(1)


@click.command("running-actions", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="running-actions")
@click.option(
    "--repo-url",
    envvar="REPO_URL",
    help="Repository URL, e.g. https://github.com/owner/repo. Prompted for when omitted.",
)
@click.option(
    "--interval",
    type=click.FloatRange(min=0.0),
    default=DEFAULT_POLL_INTERVAL,
    show_default=True,
    help="Seconds to wait between polls while runs are queued or in progress.",
)
@click.option(
    "--max-polls",
    type=click.IntRange(min=1),
    default=None,
    help="Give up after this many polls. Polls until no run is pending when omitted.",
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context,
    repo_url: str | None,
    interval: float,
    max_polls: int | None,
    debug: bool,
) -> None:
    """Show GitHub Actions workflow runs, waiting for pending runs to finish.

    Examples:

        running-actions

        running-actions --repo-url https://github.com/owner/repo

        REPO_URL=https://github.com/owner/repo running-actions --interval 10
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()
    app: RunningActionsContext = ctx.obj

    user_output(click.style("Running GitHub Actions CLI...", bold=True))
    try:
        result = run_session(app, repo_url=repo_url, poll_interval=interval, max_polls=max_polls)
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        result = SessionFailed(classify_exception(e))
    finally:
        app.http.close()

    _report(result)


def main() -> None:
    """CLI entry point used by the `running-actions` console script."""
    cli()
