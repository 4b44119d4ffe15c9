"""Dispatch of slash commands to their handlers."""

import logging

from .handlers.issues import handle_gh_issue, handle_gh_issues
from .handlers.pull_requests import handle_gh_pr, handle_gh_prs
from .handlers.subscription import handle_github_subscription
from .services import (
    IssueSource,
    MessageSender,
    OAuthService,
    SlashCommandEvent,
    SubscriptionService,
)

logger = logging.getLogger(__name__)

COMMANDS: tuple[tuple[str, str], ...] = (
    ("help", "Get help with bot commands"),
    ("github", "Manage GitHub subscriptions (subscribe, unsubscribe, status)"),
    (
        "gh_issues",
        "List recent issues (usage: /gh_issues owner/repo [count] "
        "[--state=open|closed|all] [--creator=username])",
    ),
    (
        "gh_issue",
        "Show or list issues (usage: /gh_issue owner/repo #123 or "
        "/gh_issue list owner/repo)",
    ),
    (
        "gh_prs",
        "List recent pull requests (usage: /gh_prs owner/repo [count] "
        "[--state=open|closed|merged|all] [--author=username])",
    ),
    (
        "gh_pr",
        "Show or list pull requests (usage: /gh_pr owner/repo #123 or "
        "/gh_pr list owner/repo)",
    ),
)


def split_command_text(text: str) -> list[str]:
    """Split the free text after a slash command into arguments."""
    return text.split()


def format_help() -> str:
    lines = [f"• `/{name}` - {description}" for name, description in COMMANDS]
    return "**Available commands:**\n" + "\n".join(lines)


class CommandDispatcher:
    """Routes slash commands to handlers with their collaborators."""

    def __init__(
        self,
        sender: MessageSender,
        issue_source: IssueSource,
        subscription_service: SubscriptionService | None = None,
        oauth_service: OAuthService | None = None,
    ) -> None:
        self.sender = sender
        self.issue_source = issue_source
        self.subscription_service = subscription_service
        self.oauth_service = oauth_service

    async def dispatch(self, command: str, event: SlashCommandEvent) -> None:
        """Handle one slash command; exactly one message is sent."""
        name = command.lstrip("/").lower()
        logger.debug("Dispatching /%s with args %s", name, event.args)

        if name == "gh_issues":
            await handle_gh_issues(self.sender, event, self.issue_source)
        elif name == "gh_issue":
            await handle_gh_issue(self.sender, event, self.issue_source)
        elif name == "gh_prs":
            await handle_gh_prs(self.sender, event, self.issue_source)
        elif name == "gh_pr":
            await handle_gh_pr(self.sender, event, self.issue_source)
        elif name == "github":
            if self.subscription_service is None or self.oauth_service is None:
                await self.sender.send_message(
                    event.channel_id, "❌ Subscriptions are not enabled for this bot"
                )
                return
            await handle_github_subscription(
                self.sender, event, self.subscription_service, self.oauth_service
            )
        elif name == "help":
            await self.sender.send_message(event.channel_id, format_help())
        else:
            await self.sender.send_message(
                event.channel_id,
                f"❌ Unknown command: `/{name}`. Try `/help`",
            )
