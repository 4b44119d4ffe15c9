"""Interfaces of the services the command handlers talk to.

The handlers depend only on these protocols. Production wiring passes the
Slack sender and GitHub issue source from this package; OAuth linking and
subscription storage are provided by the hosting application.
"""

from typing import Any, Literal, Protocol

from pydantic import BaseModel, Field

from .github_client.models import (
    IssueDetail,
    IssueSummary,
    PullRequestDetail,
    PullRequestSummary,
)

DeliveryMode = Literal["webhook", "polling"]


class SlashCommandEvent(BaseModel):
    """A slash command invocation received from the chat platform."""

    channel_id: str = Field(..., description="Channel the command was sent in")
    space_id: str = Field("", description="Workspace/space containing the channel")
    user_id: str = Field("", description="Chat user who issued the command")
    args: list[str] = Field(
        default_factory=list, description="Whitespace-split command arguments"
    )


class SubscribeRequest(BaseModel):
    """Parameters for creating a channel subscription."""

    user_id: str
    space_id: str
    channel_id: str
    repo_identifier: str = Field(..., description="Repository in owner/name form")
    event_types: str = Field(..., description="Canonical comma-joined event types")


class SubscribeResult(BaseModel):
    """Outcome reported by the subscription service."""

    success: bool
    requires_installation: bool = False
    delivery_mode: DeliveryMode | None = None
    repo_full_name: str | None = Field(
        None, description="Canonical owner/name as stored by the service"
    )
    event_types: str | None = None
    install_url: str | None = Field(
        None, description="GitHub App installation URL for the repository owner"
    )
    error: str | None = None


class ChannelSubscription(BaseModel):
    """A repository subscription stored for a channel."""

    repo: str = Field(..., description="Canonical owner/name as stored")
    event_types: str
    delivery_mode: str


class MessageSender(Protocol):
    async def send_message(self, channel_id: str, message: str) -> Any: ...


class IssueSource(Protocol):
    """Read access to the issues and pull requests of a repository."""

    async def list_issues(
        self, repo: str, count: int, filters: dict[str, str] | None = None
    ) -> list[IssueSummary]: ...

    async def get_issue(self, repo: str, issue_number: int) -> IssueDetail: ...

    async def list_pull_requests(
        self, repo: str, count: int, filters: dict[str, str] | None = None
    ) -> list[PullRequestSummary]: ...

    async def get_pull_request(self, repo: str, pr_number: int) -> PullRequestDetail: ...


class OAuthService(Protocol):
    async def is_linked(self, user_id: str) -> bool: ...

    async def get_authorization_url(
        self,
        user_id: str,
        channel_id: str,
        space_id: str,
        action: str,
        data: dict[str, Any],
    ) -> str: ...


class SubscriptionService(Protocol):
    async def create_subscription(self, request: SubscribeRequest) -> SubscribeResult: ...

    async def unsubscribe(
        self, channel_id: str, space_id: str, repo_full_name: str
    ) -> bool: ...

    async def get_channel_subscriptions(
        self, channel_id: str, space_id: str
    ) -> list[ChannelSubscription]: ...
