"""Models for synchronization state."""

from enum import Enum


class SyncState(str, Enum):
    """States a repository passes through while it is reconciled with the template."""

    CLONED = "cloned"
    DIFFED = "diffed"
    SKIPPED_NO_CHANGE = "skipped_no_change"
    PLANNED = "planned"
    BRANCH_PREPARED = "branch_prepared"
    MATERIALIZED = "materialized"
    COMMITTED = "committed"
    CREATED = "created"
    UPDATED = "updated"


TERMINAL_STATES = frozenset({SyncState.SKIPPED_NO_CHANGE, SyncState.PLANNED, SyncState.CREATED, SyncState.UPDATED})
"""States after which no further work is done for a repository."""
