"""Contains exceptions raised by version control operations."""


class VcsError(Exception):
    """Raised when a clone, checkout, stage, commit, or push operation fails."""

    def __init__(self, operation: str, message: str) -> None:
        """Initializes the exception with the name of the failed operation."""
        super().__init__(f"Version control operation '{operation}' failed: {message}")
        self.operation = operation
