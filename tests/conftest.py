"""Test configuration and fixtures."""

from collections.abc import Callable
from unittest.mock import AsyncMock

import pytest

from gh_bot.github_client.models import (
    IssueDetail,
    IssueSummary,
    PullRequestDetail,
    PullRequestSummary,
)
from gh_bot.services import (
    ChannelSubscription,
    SlashCommandEvent,
    SubscribeRequest,
    SubscribeResult,
)


class InMemorySubscriptionService:
    """Case-sensitive subscription store standing in for the real service."""

    def __init__(self, delivery_mode: str = "polling") -> None:
        self.delivery_mode = delivery_mode
        self.subscriptions: dict[tuple[str, str], list[ChannelSubscription]] = {}
        self.create_calls: list[SubscribeRequest] = []
        self.unsubscribe_calls: list[tuple[str, str, str]] = []

    async def create_subscription(self, request: SubscribeRequest) -> SubscribeResult:
        self.create_calls.append(request)
        key = (request.channel_id, request.space_id)
        self.subscriptions.setdefault(key, []).append(
            ChannelSubscription(
                repo=request.repo_identifier,
                event_types=request.event_types,
                delivery_mode=self.delivery_mode,
            )
        )
        return SubscribeResult(
            success=True,
            delivery_mode=self.delivery_mode,
            repo_full_name=request.repo_identifier,
            event_types=request.event_types,
            install_url="https://github.com/apps/test-bot/installations/new",
        )

    async def unsubscribe(
        self, channel_id: str, space_id: str, repo_full_name: str
    ) -> bool:
        self.unsubscribe_calls.append((channel_id, space_id, repo_full_name))
        current = self.subscriptions.get((channel_id, space_id), [])
        remaining = [sub for sub in current if sub.repo != repo_full_name]
        self.subscriptions[(channel_id, space_id)] = remaining
        return len(remaining) < len(current)

    async def get_channel_subscriptions(
        self, channel_id: str, space_id: str
    ) -> list[ChannelSubscription]:
        return list(self.subscriptions.get((channel_id, space_id), []))


@pytest.fixture
def sender() -> AsyncMock:
    """Message sender recording every reply."""
    mock_sender = AsyncMock()
    mock_sender.send_message = AsyncMock(return_value=True)
    return mock_sender


@pytest.fixture
def oauth_service() -> AsyncMock:
    """OAuth service for a user with a linked GitHub account."""
    service = AsyncMock()
    service.is_linked = AsyncMock(return_value=True)
    service.get_authorization_url = AsyncMock(
        return_value="https://auth.example.com/oauth?state=abc"
    )
    return service


@pytest.fixture
def subscription_service() -> InMemorySubscriptionService:
    return InMemorySubscriptionService()


@pytest.fixture
def make_event() -> Callable[..., SlashCommandEvent]:
    """Factory for events in the test channel."""

    def _make_event(*args: str) -> SlashCommandEvent:
        return SlashCommandEvent(
            channel_id="test-channel",
            space_id="test-space",
            user_id="test-user",
            args=list(args),
        )

    return _make_event


@pytest.fixture
def make_issue() -> Callable[..., IssueSummary]:
    """Factory for issue summaries in owner/repo."""

    def _make_issue(
        number: int, state: str = "open", author: str | None = "user1"
    ) -> IssueSummary:
        return IssueSummary(
            number=number,
            url=f"https://github.com/owner/repo/issues/{number}",
            state=state,
            title=f"Issue title {number}",
            author=author,
        )

    return _make_issue


@pytest.fixture
def sample_issue_detail() -> IssueDetail:
    return IssueDetail(
        number=123,
        url="https://github.com/owner/repo/issues/123",
        state="open",
        title="Bug: App crashes on startup",
        author="user1",
        body="The app crashes immediately when launched on macOS. " * 5,
        comments=4,
        labels=["bug", "priority-high"],
    )


@pytest.fixture
def make_pull_request() -> Callable[..., PullRequestSummary]:
    """Factory for pull request summaries in owner/repo."""

    def _make_pull_request(
        number: int,
        state: str = "open",
        author: str | None = "user1",
        merged: bool = False,
        draft: bool = False,
    ) -> PullRequestSummary:
        return PullRequestSummary(
            number=number,
            url=f"https://github.com/owner/repo/pull/{number}",
            state=state,
            title=f"PR title {number}",
            author=author,
            merged=merged,
            draft=draft,
        )

    return _make_pull_request


@pytest.fixture
def sample_pull_request_detail() -> PullRequestDetail:
    return PullRequestDetail(
        number=456,
        url="https://github.com/owner/repo/pull/456",
        state="closed",
        title="Add dark mode support",
        author="user2",
        merged=True,
        body="This change adds a dark theme and a toggle in the settings page. " * 4,
        comments=7,
        additions=120,
        deletions=15,
    )


@pytest.fixture
def sent_messages(sender: AsyncMock) -> Callable[[], list[str]]:
    """Return the text of every message sent through the sender fixture."""

    def _sent_messages() -> list[str]:
        return [call.args[1] for call in sender.send_message.call_args_list]

    return _sent_messages
