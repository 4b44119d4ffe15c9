"""Parsing of ``/github`` subscription commands into intents."""

from collections.abc import Sequence
from typing import Literal

from pydantic import BaseModel, Field

from .args import (
    INVALID_REPO_FORMAT,
    is_valid_repo_identifier,
    strip_markdown,
    tokenize,
)
from .errors import UsageError, ValidationError
from .event_types import ALLOWED_EVENT_TYPES, parse_event_types

SubscriptionAction = Literal["subscribe", "unsubscribe", "status"]
SUBSCRIPTION_ACTIONS: tuple[str, ...] = ("subscribe", "unsubscribe", "status")

_EVENTS_HINT = ",".join((*ALLOWED_EVENT_TYPES, "all"))

GITHUB_USAGE = (
    "**Usage:**\n"
    f"• `/github subscribe owner/repo [--events {_EVENTS_HINT}]` - Subscribe to GitHub events\n"
    "• `/github unsubscribe owner/repo` - Unsubscribe from a repository\n"
    "• `/github status` - Show current subscriptions"
)
SUBSCRIBE_USAGE = f"❌ Usage: `/github subscribe owner/repo [--events {_EVENTS_HINT}]`"
UNSUBSCRIBE_USAGE = "❌ Usage: `/github unsubscribe owner/repo`"


class SubscriptionIntent(BaseModel):
    """What a single ``/github`` invocation asks for."""

    action: SubscriptionAction
    repo_identifier: str | None = Field(
        None, description="Repository as typed, in owner/name form"
    )
    event_types: str | None = Field(
        None, description="Canonical comma-joined event types (subscribe only)"
    )


def unknown_action_message(action: str) -> str:
    actions = "\n".join(f"• `{name}`" for name in SUBSCRIPTION_ACTIONS)
    return f"❌ Unknown action: `{action}`\n\n**Available actions:**\n{actions}"


def _require_repo(repo_arg: str | None, usage: str) -> str:
    if not repo_arg:
        raise UsageError(usage)
    repo = strip_markdown(repo_arg)
    if not is_valid_repo_identifier(repo):
        raise ValidationError(INVALID_REPO_FORMAT)
    return repo


def parse_subscription_command(args: Sequence[str]) -> SubscriptionIntent:
    """Turn ``/github`` arguments into a validated SubscriptionIntent.

    All shape checks happen here so that handlers can fail before talking
    to any external service.

    Raises:
        UsageError: Missing action, missing repository or unknown action
        ValidationError: Malformed repository or invalid event types
    """
    positionals = tokenize(args).positionals
    if not positionals:
        raise UsageError(GITHUB_USAGE)

    action = positionals[0].lower()
    repo_arg = positionals[1] if len(positionals) > 1 else None

    if action == "subscribe":
        repo = _require_repo(repo_arg, SUBSCRIBE_USAGE)
        return SubscriptionIntent(
            action="subscribe",
            repo_identifier=repo,
            event_types=parse_event_types(args),
        )
    if action == "unsubscribe":
        repo = _require_repo(repo_arg, UNSUBSCRIBE_USAGE)
        return SubscriptionIntent(action="unsubscribe", repo_identifier=repo)
    if action == "status":
        return SubscriptionIntent(action="status")

    raise UsageError(unknown_action_message(positionals[0]))
