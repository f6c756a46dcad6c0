"""Integration tests that sync real git repositories on the local filesystem."""

from pathlib import Path

import pytest
from git import Repo

from github_template_sync.github.models import PullRequestSummary
from github_template_sync.schemas.sync_config import SyncConfig
from github_template_sync.synchronize.driver import run_sync_workflow
from github_template_sync.synchronize.models import SyncState
from github_template_sync.synchronize.results import SyncRunResult
from tests.fakes import InMemoryPullRequestHost
from tests.utils import create_remote_repository, remote_branch_sha, requires_git, write_files

from .conftest import ORG, TARGET_REPO

pytestmark = [pytest.mark.integration, requires_git]

BRANCH = "chore/sync-with-template"


def make_config(templates: Path) -> SyncConfig:
    """Build the configuration that syncs the template into the target repository."""
    return SyncConfig(
        pr_title="chore: sync shared files",
        files_dir=str(templates),
        author_login="sync-bot",
        org=ORG,
        repos=(TARGET_REPO,),
    )


async def sync(templates: Path, mirrors: Path, tmp_path: Path, host: InMemoryPullRequestHost) -> SyncRunResult:
    """Run the workflow against the local mirrors."""
    return await run_sync_workflow(
        make_config(templates),
        clones_dir=tmp_path / "clones",
        github_url=mirrors.as_uri(),
        pull_request_host=host,
    )


def merge_sync_branch(target_remote: Path) -> None:
    """Fast-forward the default branch to the sync branch, as merging the pull request would."""
    remote = Repo(target_remote)
    remote.git.update_ref("refs/heads/main", remote.commit(BRANCH).hexsha)


@pytest.mark.asyncio
async def test_sync_opens_pull_request_with_single_commit(tmp_path: Path, templates: Path, mirrors: Path, target_remote: Path) -> None:
    """Test that a differing target gets one commit touching exactly the new and changed files, and one pull request."""
    host = InMemoryPullRequestHost()
    main_sha = remote_branch_sha(target_remote, "main")

    run_result = await sync(templates, mirrors, tmp_path, host)

    result = run_result.results[0]
    assert result.outcome == SyncState.CREATED
    assert result.states == [
        SyncState.CLONED,
        SyncState.DIFFED,
        SyncState.BRANCH_PREPARED,
        SyncState.MATERIALIZED,
        SyncState.COMMITTED,
        SyncState.CREATED,
    ]
    assert len(host.created) == 1
    created = host.created[0]
    assert (created["repo"], created["title"], created["head"], created["base"]) == (TARGET_REPO, "chore: sync shared files", BRANCH, "main")
    assert created["body"].startswith("Automatically created by https://")

    sync_sha = remote_branch_sha(target_remote, BRANCH)
    assert sync_sha == result.commit_sha
    commit = Repo(target_remote).commit(sync_sha)
    assert [parent.hexsha for parent in commit.parents] == [main_sha]
    assert sorted(commit.stats.files) == ["A", "B"]
    assert commit.author.name == "sync-bot"
    assert commit.author.email == "sync-bot@users.noreply.github.com"
    assert commit.tree["B"].data_stream.read() == b"new b\n"
    assert commit.tree["README.md"].data_stream.read() == b"readme\n"
    assert remote_branch_sha(target_remote, "main") == main_sha


@pytest.mark.asyncio
async def test_sync_is_idempotent_once_merged(tmp_path: Path, templates: Path, mirrors: Path, target_remote: Path) -> None:
    """Test that a second run against an already-synced default branch has no side effects."""
    host = InMemoryPullRequestHost()
    await sync(templates, mirrors, tmp_path, host)
    merge_sync_branch(target_remote)
    branch_sha = remote_branch_sha(target_remote, BRANCH)

    run_result = await sync(templates, mirrors, tmp_path, host)

    result = run_result.results[0]
    assert result.outcome == SyncState.SKIPPED_NO_CHANGE
    assert result.commit_sha is None
    assert len(host.created) == 1
    assert host.list_calls == [TARGET_REPO]
    assert remote_branch_sha(target_remote, BRANCH) == branch_sha


@pytest.mark.asyncio
async def test_sync_force_updates_existing_pull_request(tmp_path: Path, templates: Path, mirrors: Path, target_remote: Path) -> None:
    """Test that a template change while the pull request is open replaces the branch history without a new pull request."""
    host = InMemoryPullRequestHost()
    await sync(templates, mirrors, tmp_path, host)
    first_sha = remote_branch_sha(target_remote, BRANCH)
    (templates / "B").write_bytes(b"newer b\n")

    run_result = await sync(templates, mirrors, tmp_path, host)

    result = run_result.results[0]
    assert result.outcome == SyncState.UPDATED
    assert result.pull_request_number == 101
    assert len(host.created) == 1
    second_sha = remote_branch_sha(target_remote, BRANCH)
    assert second_sha not in (None, first_sha)
    commit = Repo(target_remote).commit(second_sha)
    assert [parent.hexsha for parent in commit.parents] == [remote_branch_sha(target_remote, "main")]
    assert commit.tree["B"].data_stream.read() == b"newer b\n"


@pytest.mark.asyncio
async def test_sync_pull_request_from_other_author_is_not_reused(tmp_path: Path, templates: Path, mirrors: Path, target_remote: Path) -> None:
    """Test that an open pull request with the same title from someone else does not count as the sync pull request."""
    host = InMemoryPullRequestHost(
        pull_requests={TARGET_REPO: [PullRequestSummary(number=7, title="chore: sync shared files", author_login="someone-else")]}
    )

    run_result = await sync(templates, mirrors, tmp_path, host)

    assert run_result.results[0].outcome == SyncState.CREATED
    assert run_result.results[0].pull_request_number == 101


@pytest.mark.asyncio
async def test_dry_run_leaves_remote_untouched(tmp_path: Path, templates: Path, mirrors: Path, target_remote: Path) -> None:
    """Test that a dry run reports the planned files without pushing or opening pull requests."""
    host = InMemoryPullRequestHost()

    run_result = await run_sync_workflow(
        make_config(templates),
        clones_dir=tmp_path / "clones",
        github_url=mirrors.as_uri(),
        pull_request_host=host,
        dry_run=True,
    )

    result = run_result.results[0]
    assert result.outcome == SyncState.PLANNED
    assert result.files_diff is not None
    assert result.files_diff.new_files == ["A"]
    assert result.files_diff.changed_files == ["B"]
    assert remote_branch_sha(target_remote, BRANCH) is None
    assert host.created == []
    assert host.list_calls == []


@pytest.mark.asyncio
async def test_sync_commits_template_files_ignored_by_target(tmp_path: Path, mirrors: Path) -> None:
    """Test that a template file matched by the target's .gitignore is still committed, and a rerun after merge is a no-op."""
    remote_path = create_remote_repository(mirrors / ORG / "ignoring.git", {".gitignore": b"*.cfg\n"})
    templates = tmp_path / "cfg-templates"
    write_files(templates, {"build.cfg": b"[build]\n"})
    config = SyncConfig(pr_title="chore: sync shared files", files_dir=str(templates), author_login="sync-bot", org=ORG, repos=("ignoring",))
    host = InMemoryPullRequestHost()

    run_result = await run_sync_workflow(config, clones_dir=tmp_path / "clones", github_url=mirrors.as_uri(), pull_request_host=host)

    assert run_result.results[0].outcome == SyncState.CREATED
    commit = Repo(remote_path).commit(remote_branch_sha(remote_path, BRANCH))
    assert sorted(commit.stats.files) == ["build.cfg"]

    merge_sync_branch(remote_path)
    rerun_result = await run_sync_workflow(config, clones_dir=tmp_path / "clones", github_url=mirrors.as_uri(), pull_request_host=host)

    assert rerun_result.results[0].outcome == SyncState.SKIPPED_NO_CHANGE
    assert len(host.created) == 1
