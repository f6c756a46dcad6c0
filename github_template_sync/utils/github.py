"""Contains utility functions for GitHub interactions."""

from urllib.parse import quote, urlsplit, urlunsplit

from github_template_sync.utils.constants import NOREPLY_EMAIL_DOMAIN


def noreply_email_for_login(login: str) -> str:
    """Synthesize the GitHub no-reply email address for a user login."""
    return f"{login}@{NOREPLY_EMAIL_DOMAIN}"


def build_clone_url(github_url: str, org: str, repo: str, login: str | None = None, token: str | None = None) -> str:
    """Build the HTTPS clone URL of a repository, embedding credentials when a token is provided.

    Without a token the URL is anonymous, which only works for public
    repositories.
    """
    parts = urlsplit(github_url.rstrip("/"))
    # file:// URLs have no host; they point at local mirrors of the organization.
    if not parts.scheme or (not parts.netloc and parts.scheme != "file"):
        raise ValueError(f"GitHub URL must be an absolute URL such as 'https://github.com', got {github_url!r}")
    netloc = parts.netloc
    if token and parts.scheme != "file":
        user = quote(login or "x-access-token", safe="")
        netloc = f"{user}:{quote(token, safe='')}@{netloc}"
    path = f"{parts.path}/{org}/{repo}.git"
    return urlunsplit((parts.scheme, netloc, path, "", ""))


def redact_clone_url(url: str) -> str:
    """Remove any embedded credentials from a clone URL so it can be logged."""
    parts = urlsplit(url)
    if "@" not in parts.netloc:
        return url
    host = parts.netloc.rsplit("@", 1)[1]
    return urlunsplit((parts.scheme, f"***@{host}", parts.path, parts.query, parts.fragment))


def build_repository_url(github_url: str, org: str, repo: str) -> str:
    """Build the web URL of a repository."""
    return f"{github_url.rstrip('/')}/{org}/{repo}"
