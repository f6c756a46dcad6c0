"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
from pathlib import Path

import structlog
import typer
from dotenv import load_dotenv
from typer import Option
from typing_extensions import Annotated

from github_template_sync.configuration.loader import load_sync_config
from github_template_sync.configuration.settings import get_settings
from github_template_sync.synchronize.driver import run_sync_workflow
from github_template_sync.synchronize.models import SyncState
from github_template_sync.synchronize.results import SyncRunResult
from github_template_sync.utils.constants import DEFAULT_CONFIG_PATH
from github_template_sync.utils.logging import configure_logging

load_dotenv()

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

typer_app = typer.Typer(pretty_exceptions_show_locals=False, help="Propagate template files into many GitHub repositories.")


def echo_summary(run_result: SyncRunResult) -> None:
    """Print a one-line summary per repository followed by totals."""
    typer.echo("")
    typer.echo("=" * 70)
    typer.echo("SYNC SUMMARY")
    typer.echo("=" * 70)
    typer.echo(f"Template files: {run_result.template_file_count}")
    for result in run_result.results:
        line = f"  {result.repo}: {result.outcome.value}"
        if result.files_diff is not None and result.has_changes:
            line += f" ({len(result.files_diff.new_files)} new, {len(result.files_diff.changed_files)} changed)"
        if result.pull_request_number is not None:
            line += f" -> PR #{result.pull_request_number}"
        typer.echo(line)
    typer.echo("")
    typer.echo(f"Created: {len(run_result.with_outcome(SyncState.CREATED))}")
    typer.echo(f"Updated: {len(run_result.with_outcome(SyncState.UPDATED))}")
    typer.echo(f"Planned: {len(run_result.with_outcome(SyncState.PLANNED))}")
    typer.echo(f"Unchanged: {len(run_result.with_outcome(SyncState.SKIPPED_NO_CHANGE))}")


@typer_app.callback()
def main_callback() -> None:
    """Propagate template files into many GitHub repositories."""


@typer_app.command(name="sync")
def sync_cli(
    config_path: Annotated[Path, Option("--config", "-c", envvar="SYNC_CONFIG", help="Path to the sync configuration YAML file.")] = Path(
        DEFAULT_CONFIG_PATH
    ),
    dry_run: Annotated[bool, Option("--dry-run", help="Only report which files would change in each repository.")] = False,
    debug: Annotated[bool | None, Option("--debug/--no-debug", envvar="DEBUG", help="Enable debug logging.")] = None,
    clones_dir: Annotated[Path | None, Option(envvar="CLONES_DIR", help="Directory that receives one clone per repository.")] = None,
    github_url: Annotated[str | None, Option(envvar="GITHUB_URL", help="GitHub web URL used for clone URLs.")] = None,
    github_api_url: Annotated[str | None, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = None,
    github_token: Annotated[str | None, Option(envvar="GH_TOKEN", help="GitHub token used for clones, pushes, and API calls.")] = None,
) -> None:
    """Open or update a sync pull request in every configured repository that differs from the template."""
    settings = get_settings()
    configure_logging(debug=settings.DEBUG if debug is None else debug)

    config = load_sync_config(config_path)
    typer.echo(f"Syncing {len(config.repos)} repositories in {config.org} from {config.files_dir}")
    if dry_run:
        typer.echo("Dry run enabled - no branches will be pushed and no pull requests opened")

    try:
        run_result = asyncio.run(
            run_sync_workflow(
                config,
                clones_dir=clones_dir or settings.CLONES_DIR,
                github_token=github_token or settings.GH_TOKEN,
                github_url=github_url or settings.GITHUB_URL,
                github_api_url=github_api_url or settings.GITHUB_API_URL,
                dry_run=dry_run,
            )
        )
    except Exception:
        logger.exception("Sync aborted")
        raise

    echo_summary(run_result)


if __name__ == "__main__":
    typer_app()
