"""Markdown formatting of subscription responses."""

from collections.abc import Sequence

from ..commands.event_types import format_event_types
from ..services import ChannelSubscription, SubscribeResult

POLLING_INTERVAL_MINUTES = 5


def format_auth_prompt(auth_url: str) -> str:
    return (
        "🔐 **GitHub Account Required**\n\n"
        "To subscribe to repositories, you need to connect your GitHub account.\n\n"
        f"[Connect GitHub Account]({auth_url})"
    )


def format_installation_required(result: SubscribeResult) -> str:
    message = (
        "🔒 **GitHub App Installation Required**\n\n"
        "This private repository requires the GitHub App to be installed.\n\n"
        f"{result.error or ''}"
    )
    if result.install_url:
        message += f"\n\n[Install GitHub App]({result.install_url})"
    return message


def format_delivery_info(result: SubscribeResult) -> str:
    if result.delivery_mode == "webhook":
        return "⚡ Real-time webhook delivery enabled!"
    message = f"⏱️ Events are checked every {POLLING_INTERVAL_MINUTES} minutes (polling mode)"
    if result.install_url:
        message += (
            "\n\n💡 **Want real-time notifications?** Install the GitHub App:\n"
            f"   [Install GitHub App]({result.install_url})"
        )
    return message


def format_subscription_success(
    result: SubscribeResult, repo: str, event_types: str
) -> str:
    """Confirmation for a created subscription.

    Prefers the canonical repository name and event types reported by the
    service over the requested ones.
    """
    repo = result.repo_full_name or repo
    events = format_event_types(result.event_types or event_types)
    return (
        f"✅ **Subscribed to [{repo}](https://github.com/{repo})**\n\n"
        f"📡 Event types: **{events}**\n\n"
        f"{format_delivery_info(result)}"
    )


def delivery_mode_glyph(delivery_mode: str) -> str:
    return "⚡" if delivery_mode == "webhook" else "⏱️"


def format_subscription_status(subscriptions: Sequence[ChannelSubscription]) -> str:
    if not subscriptions:
        return (
            "📭 **No subscriptions**\n\n"
            "Use `/github subscribe owner/repo` to get started"
        )

    repo_list = "\n".join(
        f"{delivery_mode_glyph(sub.delivery_mode)} {sub.repo} "
        f"({format_event_types(sub.event_types)})"
        for sub in subscriptions
    )
    return (
        f"📬 **Subscribed Repositories ({len(subscriptions)}):**\n\n{repo_list}\n\n"
        f"⚡ Real-time  ⏱️ Polling ({POLLING_INTERVAL_MINUTES} min)"
    )
