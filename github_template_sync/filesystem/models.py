"""Data models describing how a template file set differs from a target checkout."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FilesDiff:
    """Classification of template files relative to a target checkout.

    Paths are relative to the checkout root and use forward slashes. Each
    template file lands in exactly one of the three lists.
    """

    new_files: list[str] = field(default_factory=list)
    """Template files that are absent from the checkout."""

    changed_files: list[str] = field(default_factory=list)
    """Template files present in the checkout with different content."""

    unchanged_files: list[str] = field(default_factory=list)
    """Template files whose content already matches the checkout."""

    @property
    def is_empty(self) -> bool:
        """Whether the checkout already matches the template."""
        return not self.new_files and not self.changed_files

    @property
    def files_to_apply(self) -> list[str]:
        """All files that have to be written into the checkout."""
        return [*self.new_files, *self.changed_files]
