"""Base ABCs for version control collaborators."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Sequence


class LocalCheckoutBase(ABC):
    """A local working tree of a cloned repository."""

    @property
    @abstractmethod
    def working_dir(self) -> Path:
        """Root directory of the working tree."""
        pass

    @property
    @abstractmethod
    def active_branch(self) -> str:
        """Name of the branch currently checked out."""
        pass

    @abstractmethod
    def checkout_branch(self, name: str, create: bool = True, force: bool = True) -> None:
        """Check out a branch, optionally creating it from the current head.

        With ``create`` and ``force`` both set, an existing branch of the same
        name is reset to the current head and local changes are discarded.
        """
        pass

    @abstractmethod
    def stage_all(self, paths: Sequence[str] = ()) -> None:
        """Stage every change in the working tree.

        ``paths`` are staged even when an ignore rule of the checkout matches them.
        """
        pass

    @abstractmethod
    def commit(self, message: str, author_name: str, author_email: str, timestamp: datetime) -> str:
        """Commit the staged changes and return the new commit SHA."""
        pass

    @abstractmethod
    def push(self, branch: str, force: bool = False, set_upstream: bool = True) -> None:
        """Push a branch to the origin remote."""
        pass


class VersionControlBase(ABC):
    """Factory for local checkouts."""

    @abstractmethod
    def clone(self, url: str, destination: Path) -> LocalCheckoutBase:
        """Clone a repository at its default branch head into a destination directory."""
        pass
