"""Contains logic for locating the sync pull request of a repository."""

import structlog

from github_template_sync.github.abc import PullRequestHostBase
from github_template_sync.github.models import PullRequestSummary

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def select_pull_request(pull_requests: list[PullRequestSummary], title: str, author_login: str) -> PullRequestSummary | None:
    """Return the first pull request opened by ``author_login`` with exactly ``title``.

    The author must match the login exactly, bot accounts included. When
    several pull requests match, the first one in provider order wins.
    """
    for pr in pull_requests:
        if pr.author_login != author_login:
            continue
        if pr.title != title:
            continue
        return pr
    return None


async def find_pull_request_number(host: PullRequestHostBase, repo: str, title: str, author_login: str) -> int | None:
    """Find the number of the open sync pull request of a repository.

    Returns None when no open pull request matches. Errors from the hosting
    provider propagate to the caller.
    """
    pull_requests = await host.list_open_pull_requests(repo)
    match = select_pull_request(pull_requests, title, author_login)
    if match is None:
        logger.info("No existing sync pull request found", repo=repo, title=title, author_login=author_login, open_count=len(pull_requests))
        return None
    logger.info("Found existing sync pull request", repo=repo, number=match.number, title=title, author_login=author_login)
    return match.number
