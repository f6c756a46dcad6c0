"""Base ABC for pull request hosting clients."""

from abc import ABC, abstractmethod

from .models import PullRequestSummary


class PullRequestHostBase(ABC):
    """Base ABC for pull request hosting clients."""

    @abstractmethod
    async def list_open_pull_requests(self, repo: str) -> list[PullRequestSummary]:
        """List every open pull request of a repository, in provider order."""
        pass

    @abstractmethod
    async def create_pull_request(self, repo: str, title: str, body: str, head: str, base: str) -> int:
        """Open a pull request and return its number."""
        pass
