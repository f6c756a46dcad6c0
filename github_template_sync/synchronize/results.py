"""Contains results of application execution."""

from github_template_sync.filesystem.models import FilesDiff
from github_template_sync.synchronize.models import TERMINAL_STATES, SyncState


class RepositorySyncResult:
    """Contains results of reconciling one repository with the template."""

    def __init__(self, repo: str) -> None:
        """Initialize an empty result for a repository."""
        self.repo = repo
        self.states: list[SyncState] = []
        self.files_diff: FilesDiff | None = None
        self.pull_request_number: int | None = None
        self.commit_sha: str | None = None

    def advance(self, state: SyncState) -> None:
        """Record that the repository reached a new state."""
        self.states.append(state)

    @property
    def last_state(self) -> SyncState | None:
        """The most recent state reached, if any."""
        return self.states[-1] if self.states else None

    @property
    def outcome(self) -> SyncState:
        """The terminal state of the repository."""
        state = self.last_state
        if state not in TERMINAL_STATES:
            raise RuntimeError(f"Repository {self.repo} has not finished synchronizing (last state: {state})")
        return state  # type: ignore[return-value]

    @property
    def has_changes(self) -> bool:
        """Whether the repository differed from the template."""
        return self.files_diff is not None and not self.files_diff.is_empty


class SyncRunResult:
    """Contains results of the sync workflow for all configured repositories."""

    def __init__(self, results: list[RepositorySyncResult] | None = None, template_file_count: int = 0) -> None:
        """Initialize the run result with per-repository results in processing order."""
        self.results = results or []
        self.template_file_count = template_file_count

    def with_outcome(self, outcome: SyncState) -> list[RepositorySyncResult]:
        """Return the repositories that finished with a given outcome."""
        return [result for result in self.results if result.outcome == outcome]
