"""Pydantic schema for the sync configuration YAML file."""

from pathlib import PurePosixPath

from pydantic import BaseModel, ConfigDict, Field, field_validator

from github_template_sync.utils.constants import DEFAULT_BRANCH_NAME, DEFAULT_PR_BODY_TEMPLATE


class SyncConfig(BaseModel):
    """Pydantic model for the sync configuration.

    The model is frozen: it is loaded once and only read for the rest of the run.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    pr_title: str = Field(min_length=1)
    files_dir: str = Field(min_length=1)
    author_login: str = Field(min_length=1)
    org: str = Field(min_length=1)
    repos: tuple[str, ...] = Field(min_length=1)
    branch_name: str = Field(default=DEFAULT_BRANCH_NAME, min_length=1)
    pr_body: str = DEFAULT_PR_BODY_TEMPLATE
    source_repo: str | None = None

    @field_validator("pr_title", "author_login", "org", "branch_name")
    @classmethod
    def strip_surrounding_whitespace(cls, value: str) -> str:
        """Reject values that are blank once surrounding whitespace is removed."""
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("files_dir")
    @classmethod
    def normalize_files_dir(cls, value: str) -> str:
        """Use forward slashes and drop redundant separators and leading './' segments."""
        normalized = PurePosixPath(value.replace("\\", "/")).as_posix()
        if not normalized.strip() or normalized == ".":
            raise ValueError("must name a directory other than the current one")
        return normalized

    @field_validator("repos")
    @classmethod
    def validate_repos(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """Require bare repository names that appear only once."""
        seen: set[str] = set()
        duplicates: list[str] = []
        for repo in value:
            if not repo or not repo.strip():
                raise ValueError("repository names must not be blank")
            if "/" in repo:
                raise ValueError(f"repository {repo!r} must be a bare name; the owner is configured with 'org'")
            if repo in seen:
                duplicates.append(repo)
            seen.add(repo)
        if duplicates:
            raise ValueError(f"duplicate repositories: {', '.join(duplicates)}")
        return value

    @property
    def strip_prefix(self) -> str:
        """Prefix removed from template file paths to obtain their location inside a target repository."""
        if self.files_dir.endswith("/"):
            return self.files_dir
        return f"{self.files_dir}/"
