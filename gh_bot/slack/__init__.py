"""Slack integration module for command replies."""

from .client import SlackMessageSender, event_from_slash_payload, to_mrkdwn
from .config import SlackConfig

__all__ = ["SlackConfig", "SlackMessageSender", "event_from_slash_payload", "to_mrkdwn"]
