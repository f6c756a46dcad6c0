"""Sets up the githubkit client."""

from typing import TypeAlias

from githubkit import GitHub
from githubkit.auth import TokenAuthStrategy, UnauthAuthStrategy

GitHubClient: TypeAlias = GitHub[TokenAuthStrategy] | GitHub[UnauthAuthStrategy]


def get_github_client(github_token: str | None, github_api_url: str) -> GitHubClient:
    """Returns a GitHub client, authenticated with the token when one is provided.

    Without a token the client is anonymous, which is enough to list pull
    requests of public repositories but not to create them.
    Supports custom base URL for GitHub Enterprise Server (GHES).
    """
    # Disable HTTP caching to always get fresh data
    if github_token:
        return GitHub(auth=TokenAuthStrategy(github_token), base_url=github_api_url, http_cache=False)
    return GitHub(auth=UnauthAuthStrategy(), base_url=github_api_url, http_cache=False)
