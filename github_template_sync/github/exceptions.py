"""Contains exceptions raised by pull request hosting operations."""


class HostingAPIError(Exception):
    """Raised when listing or creating pull requests fails at the hosting provider."""

    def __init__(self, operation: str, repo: str, message: str, status_code: int | None = None) -> None:
        """Initializes the exception with the failed operation, repository, and HTTP status code if known."""
        detail = f"Hosting API operation '{operation}' failed for repository '{repo}'"
        if status_code is not None:
            detail += f" with status {status_code}"
        super().__init__(f"{detail}: {message}")
        self.operation = operation
        self.repo = repo
        self.status_code = status_code
