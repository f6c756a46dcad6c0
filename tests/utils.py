"""Utility functions shared by unit and integration tests."""

import shutil
from pathlib import Path

import pytest
from git import Actor, Repo

SEED_ACTOR = Actor("Seed Author", "seed@example.com")

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git executable not available")


def write_files(root: Path, files: dict[str, bytes]) -> None:
    """Write a mapping of relative paths to content below a root directory."""
    for relative_path, content in files.items():
        path = root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)


def read_tree(root: Path) -> dict[str, bytes]:
    """Read every regular file below a root directory, skipping the .git directory."""
    tree: dict[str, bytes] = {}
    for path in sorted(root.rglob("*")):
        relative = path.relative_to(root)
        if relative.parts and relative.parts[0] == ".git":
            continue
        if path.is_file():
            tree[relative.as_posix()] = path.read_bytes()
    return tree


def create_remote_repository(remote_path: Path, files: dict[str, bytes], branch: str = "main") -> Path:
    """Create a bare repository whose default branch holds a single commit with the given files.

    Args:
        remote_path: Location of the bare repository.
        files: Relative paths and content of the initial commit.
        branch: Name of the default branch.

    Returns:
        The path of the bare repository.
    """
    seed_path = remote_path.parent / f"{remote_path.name}-seed"
    seed = Repo.init(seed_path)
    write_files(seed_path, files)
    seed.git.add(all=True)
    seed.index.commit("Initial commit", author=SEED_ACTOR, committer=SEED_ACTOR)
    seed.git.branch("-M", branch)

    remote = Repo.init(remote_path, bare=True)
    remote.git.symbolic_ref("HEAD", f"refs/heads/{branch}")
    seed.create_remote("origin", str(remote_path))
    seed.git.push("origin", branch)
    shutil.rmtree(seed_path)
    return remote_path


def remote_branch_sha(remote_path: Path, branch: str) -> str | None:
    """Return the commit a branch of a bare repository points at, or None if the branch does not exist."""
    remote = Repo(remote_path)
    for head in remote.heads:
        if head.name == branch:
            return head.commit.hexsha
    return None
