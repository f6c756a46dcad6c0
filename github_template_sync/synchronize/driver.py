"""Orchestrates the synchronization of the template across all configured repositories."""

import time
from pathlib import Path

import jinja2
import structlog

from github_template_sync.configuration.exceptions import ConfigError
from github_template_sync.filesystem.discovery import enumerate_files
from github_template_sync.github.abc import PullRequestHostBase
from github_template_sync.github.adapter import GitHubKitAdapter
from github_template_sync.schemas.sync_config import SyncConfig
from github_template_sync.synchronize.repository import sync_repository
from github_template_sync.synchronize.results import SyncRunResult
from github_template_sync.utils.constants import DEFAULT_GITHUB_API_URL, DEFAULT_GITHUB_URL, PROJECT_URL
from github_template_sync.utils.github import build_clone_url, build_repository_url
from github_template_sync.utils.templates import render_template_string
from github_template_sync.vcs.abc import VersionControlBase
from github_template_sync.vcs.git import GitPythonVersionControl

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def render_pull_request_bodies(config: SyncConfig, github_url: str) -> dict[str, str]:
    """Render the pull request body for every configured repository.

    Rendering happens before any repository is touched, so a broken template
    aborts the run up front.

    Raises:
        ConfigError: If the body template cannot be parsed or refers to an unknown variable.
    """
    if config.source_repo:
        source_url = build_repository_url(github_url, config.org, config.source_repo)
    else:
        source_url = PROJECT_URL
    bodies: dict[str, str] = {}
    for repo in config.repos:
        context = {
            "org": config.org,
            "repo": repo,
            "pr_title": config.pr_title,
            "branch_name": config.branch_name,
            "source_url": source_url,
        }
        try:
            bodies[repo] = render_template_string(config.pr_body, context)
        except jinja2.TemplateError as exc:
            raise ConfigError(f"Invalid pr_body template: {exc}") from exc
    return bodies


async def run_sync_workflow(
    config: SyncConfig,
    clones_dir: Path,
    github_token: str | None = None,
    github_url: str = DEFAULT_GITHUB_URL,
    github_api_url: str = DEFAULT_GITHUB_API_URL,
    dry_run: bool = False,
    version_control: VersionControlBase | None = None,
    pull_request_host: PullRequestHostBase | None = None,
    clone_urls: dict[str, str] | None = None,
) -> SyncRunResult:
    """Run the sync workflow: reconcile every configured repository with the template, in order.

    Repositories are processed one at a time. The first failure aborts the
    whole run; repositories after the failing one are not processed.

    Args:
        config: The sync configuration.
        clones_dir: Directory that receives one clone per repository.
        github_token: Token for authenticated clones, pushes, and API calls.
        github_url: GitHub web URL used to build clone URLs.
        github_api_url: GitHub REST API URL.
        dry_run: Only report which files would change.
        version_control: Version control collaborator, GitPython by default.
        pull_request_host: Pull request hosting collaborator, githubkit by default.
        clone_urls: Explicit clone URL per repository, overriding the URL built from ``github_url``.

    Returns:
        Per-repository results in processing order.
    """
    if version_control is None:
        version_control = GitPythonVersionControl()
    if pull_request_host is None:
        pull_request_host = GitHubKitAdapter.create(owner=config.org, github_token=github_token, github_api_url=github_api_url)
    clone_urls = clone_urls or {}

    pull_request_bodies = render_pull_request_bodies(config, github_url)

    template_files = enumerate_files(config.files_dir)
    logger.info("Enumerated template files", files_dir=config.files_dir, file_count=len(template_files))

    run_result = SyncRunResult(template_file_count=len(template_files))
    start_time = time.time()
    for repo in config.repos:
        repo_start_time = time.time()
        clone_url = clone_urls.get(repo) or build_clone_url(github_url, config.org, repo, login=config.author_login, token=github_token)
        logger.info("Processing repository", repo=repo, org=config.org)
        result = await sync_repository(
            repo,
            config,
            template_files,
            version_control,
            pull_request_host,
            clone_url=clone_url,
            clone_dir=clones_dir / repo,
            pull_request_body=pull_request_bodies[repo],
            dry_run=dry_run,
        )
        run_result.results.append(result)
        logger.info(
            "Processed repository",
            repo=repo,
            outcome=result.outcome.value,
            pull_request_number=result.pull_request_number,
            duration=round(time.time() - repo_start_time, 2),
        )

    logger.info(
        "Processed all repositories",
        repo_count=len(run_result.results),
        duration=round(time.time() - start_time, 2),
    )
    return run_result
