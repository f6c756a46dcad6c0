"""GitHub client adapter for the githubkit library."""

from functools import wraps
from typing import Any, Awaitable, Callable, Self, TypeVar

import structlog
from githubkit import Response
from githubkit.exception import GitHubException, RequestFailed
from githubkit.versions.latest.models import PullRequest, PullRequestSimple

from .abc import PullRequestHostBase
from .client import GitHubClient, get_github_client
from .exceptions import HostingAPIError
from .models import PullRequestSummary

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def _describe_request_failure(exc: RequestFailed) -> str:
    """Build a readable message from a failed GitHub response, including validation errors."""
    try:
        error_data = exc.response.json()
    except ValueError:
        error_data = {}
    if not isinstance(error_data, dict):
        error_data = {}
    message = error_data.get("message", str(exc))
    errors = error_data.get("errors", [])
    if errors:
        return f"{message} | errors: {errors}"
    return str(message)


def handle_github_errors(func: F) -> F:
    """Decorator translating githubkit failures into HostingAPIError, logging the details first."""

    @wraps(func)
    async def wrapper(self: "GitHubKitAdapter", repo: str, *args: Any, **kwargs: Any) -> Any:
        try:
            return await func(self, repo, *args, **kwargs)
        except RequestFailed as exc:
            status_code = exc.response.status_code
            message = _describe_request_failure(exc)
            logger.error(
                "GitHub request failed",
                function=func.__name__,
                owner=self.owner,
                repo=repo,
                status_code=status_code,
                message=message,
                url=getattr(exc.response, "url", None),
            )
            raise HostingAPIError(func.__name__, f"{self.owner}/{repo}", message, status_code=status_code) from exc
        except GitHubException as exc:
            logger.error("GitHub request error", function=func.__name__, owner=self.owner, repo=repo, error=str(exc))
            raise HostingAPIError(func.__name__, f"{self.owner}/{repo}", str(exc)) from exc

    return wrapper  # type: ignore


class GitHubKitAdapter(PullRequestHostBase):
    """GitHub client adapter for the githubkit library, bound to one repository owner."""

    def __init__(self, client: GitHubClient, owner: str) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client
        self.owner = owner

    @classmethod
    def create(cls, owner: str, github_token: str | None, github_api_url: str) -> Self:
        """Create a new GitHub client adapter.

        Args:
            owner: Organization or user that owns the target repositories
            github_token: Token used for authentication, anonymous when None
            github_api_url: GitHub API URL

        Returns:
            Configured GitHubKitAdapter instance
        """
        logger.info(
            "Creating client for GitHub instance",
            github_api_url=github_api_url,
            owner=owner,
            authenticated=bool(github_token),
        )
        return cls(get_github_client(github_token, github_api_url), owner)

    @handle_github_errors
    async def list_open_pull_requests(self, repo: str, per_page: int = 100) -> list[PullRequestSummary]:
        """List all open pull requests for a repository, handling pagination."""
        all_pull_requests: list[PullRequestSummary] = []
        page: int = 1
        while True:
            response: Response[list[PullRequestSimple]] = await self.client.rest.pulls.async_list(
                owner=self.owner,
                repo=repo,
                state="open",
                per_page=per_page,
                page=page,
            )
            pull_requests: list[PullRequestSimple] = response.parsed_data
            if not pull_requests:
                break
            all_pull_requests.extend(
                PullRequestSummary(
                    number=pr.number,
                    title=pr.title,
                    author_login=pr.user.login if pr.user is not None else None,
                )
                for pr in pull_requests
            )
            if len(pull_requests) < per_page:
                break
            page += 1
        logger.debug("Listed open pull requests", owner=self.owner, repo=repo, count=len(all_pull_requests))
        return all_pull_requests

    @handle_github_errors
    async def create_pull_request(self, repo: str, title: str, body: str, head: str, base: str) -> int:
        """Create a pull request for a repository."""
        response: Response[PullRequest] = await self.client.rest.pulls.async_create(
            owner=self.owner,
            repo=repo,
            title=title,
            head=head,
            base=base,
            body=body,
        )
        pull_request = response.parsed_data
        logger.info("Created pull request", owner=self.owner, repo=repo, number=pull_request.number, url=pull_request.html_url)
        return pull_request.number
