"""Pytest configuration for integration tests."""

from pathlib import Path

import pytest

from tests.utils import create_remote_repository, write_files

ORG = "acme"
TARGET_REPO = "target"


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep settings from the developer's environment and .env file out of integration runs."""
    for name in ("GH_TOKEN", "GITHUB_URL", "GITHUB_API_URL", "CLONES_DIR", "DEBUG", "SYNC_CONFIG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def templates(tmp_path: Path) -> Path:
    """Template directory: A is new to the target, B differs, C is identical."""
    root = tmp_path / "templates"
    write_files(root, {"A": b"a\n", "B": b"new b\n", "C": b"c\n"})
    return root


@pytest.fixture
def mirrors(tmp_path: Path) -> Path:
    """Directory standing in for the GitHub web URL, holding one bare repository per organization repository."""
    root = tmp_path / "mirrors"
    create_remote_repository(root / ORG / f"{TARGET_REPO}.git", {"B": b"old b\n", "C": b"c\n", "README.md": b"readme\n"})
    return root


@pytest.fixture
def target_remote(mirrors: Path) -> Path:
    """Bare repository of the sync target."""
    return mirrors / ORG / f"{TARGET_REPO}.git"
