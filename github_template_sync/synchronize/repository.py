"""Reconciles a single repository with the template file set."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence

import structlog
from structlog.contextvars import bound_contextvars

from github_template_sync.filesystem.diff import compute_files_diff
from github_template_sync.filesystem.materialize import materialize_files
from github_template_sync.github.abc import PullRequestHostBase
from github_template_sync.schemas.sync_config import SyncConfig
from github_template_sync.synchronize.models import SyncState
from github_template_sync.synchronize.pull_requests import find_pull_request_number
from github_template_sync.synchronize.results import RepositorySyncResult
from github_template_sync.utils.github import noreply_email_for_login
from github_template_sync.vcs.abc import VersionControlBase

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def sync_repository(
    repo: str,
    config: SyncConfig,
    template_files: Sequence[Path],
    version_control: VersionControlBase,
    pull_request_host: PullRequestHostBase,
    clone_url: str,
    clone_dir: Path,
    pull_request_body: str,
    dry_run: bool = False,
) -> RepositorySyncResult:
    """Bring one repository in line with the template through its sync pull request.

    The repository is cloned and diffed against the template. When nothing
    differs the repository is skipped without any branch work or network
    push, which makes repeated runs free of side effects. Otherwise the sync
    branch is force-reset from the default branch head, the template files are
    written, and a single commit is pushed. A new pull request is opened when
    none from the configured author with the configured title is open;
    otherwise the branch is force-pushed so the existing pull request carries
    the new commit.

    Any failure is logged with the last state reached and re-raised.

    Args:
        repo: Name of the target repository.
        config: The sync configuration.
        template_files: Enumerated template files.
        version_control: Collaborator used to clone, commit, and push.
        pull_request_host: Collaborator used to find and open pull requests.
        clone_url: URL the repository is cloned from.
        clone_dir: Directory the repository is cloned into.
        pull_request_body: Rendered body for a newly opened pull request.
        dry_run: Stop after the diff and report the planned changes.

    Returns:
        The states the repository went through and what was changed.
    """
    result = RepositorySyncResult(repo)
    with bound_contextvars(repo=repo):
        try:
            await _run_repository_sync(
                result,
                config,
                template_files,
                version_control,
                pull_request_host,
                clone_url,
                clone_dir,
                pull_request_body,
                dry_run,
            )
        except Exception as exc:
            logger.error(
                "Repository sync failed",
                repo=repo,
                last_state=result.last_state.value if result.last_state else None,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise
    return result


async def _run_repository_sync(
    result: RepositorySyncResult,
    config: SyncConfig,
    template_files: Sequence[Path],
    version_control: VersionControlBase,
    pull_request_host: PullRequestHostBase,
    clone_url: str,
    clone_dir: Path,
    pull_request_body: str,
    dry_run: bool,
) -> None:
    repo = result.repo
    checkout = version_control.clone(clone_url, clone_dir)
    base_branch = checkout.active_branch
    result.advance(SyncState.CLONED)
    logger.info("Cloned repository", clone_dir=str(clone_dir), default_branch=base_branch)

    files_diff = compute_files_diff(template_files, checkout.working_dir, config.strip_prefix)
    result.files_diff = files_diff
    result.advance(SyncState.DIFFED)

    if files_diff.is_empty:
        result.advance(SyncState.SKIPPED_NO_CHANGE)
        logger.info("No changes for repository", unchanged_file_count=len(files_diff.unchanged_files))
        return

    logger.info(
        "Repository differs from template",
        new_files=files_diff.new_files,
        changed_files=files_diff.changed_files,
    )
    if dry_run:
        result.advance(SyncState.PLANNED)
        logger.info("Dry run enabled, leaving repository untouched")
        return

    checkout.checkout_branch(config.branch_name, create=True, force=True)
    result.advance(SyncState.BRANCH_PREPARED)

    materialize_files(config.files_dir, checkout.working_dir, files_diff.new_files, files_diff.changed_files)
    result.advance(SyncState.MATERIALIZED)

    pull_request_number = await find_pull_request_number(pull_request_host, repo, config.pr_title, config.author_login)

    checkout.stage_all(files_diff.files_to_apply)
    result.commit_sha = checkout.commit(
        config.pr_title,
        author_name=config.author_login,
        author_email=noreply_email_for_login(config.author_login),
        timestamp=datetime.now(timezone.utc),
    )
    result.advance(SyncState.COMMITTED)

    if pull_request_number is None:
        checkout.push(config.branch_name, force=False, set_upstream=True)
        result.pull_request_number = await pull_request_host.create_pull_request(
            repo,
            title=config.pr_title,
            body=pull_request_body,
            head=config.branch_name,
            base=base_branch,
        )
        result.advance(SyncState.CREATED)
        logger.info("Opened sync pull request", number=result.pull_request_number, branch=config.branch_name, base=base_branch)
    else:
        checkout.push(config.branch_name, force=True, set_upstream=True)
        result.pull_request_number = pull_request_number
        result.advance(SyncState.UPDATED)
        logger.info("Updated sync pull request", number=pull_request_number, branch=config.branch_name)
