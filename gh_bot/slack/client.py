"""Slack transport for command replies."""

import logging
import re
from typing import Any, Optional

from slack_sdk.errors import SlackApiError
from slack_sdk.web.async_client import AsyncWebClient

from ..bot import split_command_text
from ..services import SlashCommandEvent
from .config import SlackConfig

logger = logging.getLogger(__name__)

_LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)\s]+)\)")
_BOLD_PATTERN = re.compile(r"\*\*(.+?)\*\*")


def to_mrkdwn(message: str) -> str:
    """Convert the markdown used by the formatters to Slack mrkdwn.

    Only links and bold text need rewriting; bullets and code spans are
    already compatible.
    """
    converted = _LINK_PATTERN.sub(r"<\2|\1>", message)
    return _BOLD_PATTERN.sub(r"*\1*", converted)


def event_from_slash_payload(payload: dict[str, Any]) -> SlashCommandEvent:
    """Build a SlashCommandEvent from a Slack slash command request body."""
    return SlashCommandEvent(
        channel_id=payload["channel_id"],
        space_id=payload.get("team_id", ""),
        user_id=payload.get("user_id", ""),
        args=split_command_text(payload.get("text", "")),
    )


class SlackMessageSender:
    """Sends command replies to Slack channels."""

    def __init__(self, config: Optional[SlackConfig] = None) -> None:
        """Initialize Slack sender with configuration."""
        self.config = config or SlackConfig()
        self._client: Optional[AsyncWebClient] = None

    @property
    def client(self) -> AsyncWebClient:
        """Get or create Slack AsyncWebClient instance for the bot token."""
        if self._client is None:
            self.config.validate()
            self._client = AsyncWebClient(token=self.config.bot_token)
        return self._client

    async def send_message(self, channel_id: str, message: str) -> bool:
        """
        Post a reply to a channel.

        Args:
            channel_id: Slack channel ID the command came from
            message: Markdown message produced by the formatters

        Returns:
            True if successful, False otherwise
        """
        try:
            response = await self.client.chat_postMessage(
                channel=channel_id,
                text=to_mrkdwn(message),
                mrkdwn=True,
                unfurl_links=self.config.unfurl_links,
            )
            return bool(response["ok"])

        except SlackApiError as e:
            logger.error(f"Error posting message to Slack: {e}")

        return False
