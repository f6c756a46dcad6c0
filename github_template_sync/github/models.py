"""Provider-neutral views of pull request data."""

from pydantic import BaseModel, ConfigDict


class PullRequestSummary(BaseModel):
    """The fields of an open pull request needed to find the sync pull request."""

    model_config = ConfigDict(frozen=True)

    number: int
    title: str
    author_login: str | None = None
