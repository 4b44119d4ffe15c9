"""Pydantic models for GitHub issue and pull request data shown in chat.

These models keep only the fields the chat responses render.
API Reference: https://docs.github.com/en/rest/issues
"""

from typing import Literal

from pydantic import BaseModel, Field


class IssueSummary(BaseModel):
    """One line of an issue listing.

    Pull requests are filtered out before summaries are built, so ``state``
    only ever holds the two issue states.
    """

    number: int = Field(..., description="Issue number within the repository")
    url: str = Field(..., description="Browser URL of the issue (html_url)")
    state: Literal["open", "closed"] = Field(..., description="Current issue state")
    title: str = Field(..., description="Short description/title of the issue")
    author: str | None = Field(None, description="Login of the issue creator")

    @property
    def is_open(self) -> bool:
        return self.state == "open"


class IssueDetail(IssueSummary):
    """Issue with the extra fields shown by the single-issue view."""

    body: str | None = Field(
        None, description="Detailed description of the issue in markdown"
    )
    comments: int = Field(0, description="Number of comments on the issue")
    labels: list[str] = Field(
        default_factory=list, description="Names of labels attached to the issue"
    )


class PullRequestSummary(BaseModel):
    """One line of a pull request listing.

    API Reference: https://docs.github.com/en/rest/pulls/pulls
    """

    number: int = Field(..., description="Pull request number within the repository")
    url: str = Field(..., description="Browser URL of the pull request (html_url)")
    state: Literal["open", "closed"] = Field(..., description="Current API state")
    title: str = Field(..., description="Title of the pull request")
    author: str | None = Field(None, description="Login of the pull request author")
    draft: bool = Field(False, description="Whether the pull request is a draft")
    merged: bool = Field(False, description="Whether a closed pull request was merged")

    @property
    def is_open(self) -> bool:
        return self.state == "open"


class PullRequestDetail(PullRequestSummary):
    """Pull request with the extra fields shown by the single view."""

    body: str | None = Field(None, description="Pull request description in markdown")
    comments: int = Field(0, description="Number of conversation comments")
    additions: int = Field(0, description="Lines added across the diff")
    deletions: int = Field(0, description="Lines removed across the diff")
