"""Version control collaborator implemented with GitPython."""

import shutil
from datetime import datetime
from typing import Sequence
from pathlib import Path

import structlog
from git import Actor, Repo
from git.exc import GitError

from github_template_sync.utils.github import redact_clone_url
from github_template_sync.vcs.abc import LocalCheckoutBase, VersionControlBase
from github_template_sync.vcs.exceptions import VcsError

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class GitPythonCheckout(LocalCheckoutBase):
    """Local checkout backed by a GitPython ``Repo``."""

    def __init__(self, repo: Repo) -> None:
        """Initialize the checkout with an already-opened repository."""
        self.repo = repo

    @property
    def working_dir(self) -> Path:
        """Root directory of the working tree."""
        return Path(self.repo.working_tree_dir or self.repo.git_dir)

    @property
    def active_branch(self) -> str:
        """Name of the branch currently checked out."""
        try:
            return self.repo.active_branch.name
        except (GitError, TypeError) as exc:
            # TypeError is raised by GitPython when HEAD is detached.
            raise VcsError("active_branch", str(exc)) from exc

    def checkout_branch(self, name: str, create: bool = True, force: bool = True) -> None:
        """Check out a branch, optionally force-creating it from the current head."""
        args: list[str] = []
        if force:
            args.append("--force")
        if create:
            args.extend(["-B" if force else "-b", name])
        else:
            args.append(name)
        try:
            self.repo.git.checkout(*args)
        except GitError as exc:
            raise VcsError("checkout", str(exc)) from exc
        logger.info("Checked out branch", branch=name, create=create, force=force, working_dir=str(self.working_dir))

    def stage_all(self, paths: Sequence[str] = ()) -> None:
        """Stage every change in the working tree, force-adding ``paths`` even when .gitignore matches them."""
        try:
            self.repo.git.add(all=True)
            if paths:
                self.repo.git.add("--force", "--", *paths)
        except GitError as exc:
            raise VcsError("stage", str(exc)) from exc

    def commit(self, message: str, author_name: str, author_email: str, timestamp: datetime) -> str:
        """Commit the staged changes with the given identity as both author and committer."""
        if self.repo.head.is_valid() and not self.repo.index.diff("HEAD"):
            raise VcsError("commit", f"nothing staged in {self.working_dir}")
        actor = Actor(author_name, author_email)
        try:
            commit = self.repo.index.commit(
                message,
                author=actor,
                committer=actor,
                author_date=timestamp,
                commit_date=timestamp,
            )
        except (GitError, ValueError) as exc:
            raise VcsError("commit", str(exc)) from exc
        logger.info("Created commit", sha=commit.hexsha, author=author_name, message=message)
        return commit.hexsha

    def push(self, branch: str, force: bool = False, set_upstream: bool = True) -> None:
        """Push a branch to origin."""
        args: list[str] = []
        if set_upstream:
            args.append("--set-upstream")
        if force:
            args.append("--force")
        args.extend(["origin", branch])
        try:
            self.repo.git.push(*args)
        except GitError as exc:
            raise VcsError("push", str(exc)) from exc
        logger.info("Pushed branch", branch=branch, force=force)


class GitPythonVersionControl(VersionControlBase):
    """Clones repositories with GitPython."""

    def clone(self, url: str, destination: Path) -> GitPythonCheckout:
        """Clone a repository into a fresh destination directory.

        A directory left at the destination by a previous run is removed first
        so the clone always starts from the remote default branch head.
        """
        safe_url = redact_clone_url(url)
        if destination.exists():
            logger.warning("Removing existing clone directory", destination=str(destination))
            shutil.rmtree(destination)
        destination.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Cloning repository", url=safe_url, destination=str(destination))
        try:
            repo = Repo.clone_from(url, destination)
        except GitError as exc:
            # Git echoes the URL in its error output; keep credentials out of the message.
            raise VcsError("clone", str(exc).replace(url, safe_url)) from exc
        return GitPythonCheckout(repo)
