"""Handler for ``/github subscribe|unsubscribe|status``."""

import logging

from ..commands.errors import CommandError, external_error_message
from ..commands.subscription import SubscriptionIntent, parse_subscription_command
from ..formatters.subscriptions import (
    format_auth_prompt,
    format_installation_required,
    format_subscription_status,
    format_subscription_success,
)
from ..services import (
    MessageSender,
    OAuthService,
    SlashCommandEvent,
    SubscribeRequest,
    SubscriptionService,
)

logger = logging.getLogger(__name__)


async def handle_github_subscription(
    sender: MessageSender,
    event: SlashCommandEvent,
    subscription_service: SubscriptionService,
    oauth_service: OAuthService,
) -> None:
    """Route a ``/github`` command to its flow and send one reply.

    Argument problems are reported before any service is called. Failures
    raised by the services are relayed as a single error message.
    """
    try:
        intent = parse_subscription_command(event.args)
    except CommandError as e:
        await sender.send_message(event.channel_id, e.message)
        return

    try:
        if intent.action == "subscribe":
            message = await _subscribe(intent, event, subscription_service, oauth_service)
        elif intent.action == "unsubscribe":
            message = await _unsubscribe(intent, event, subscription_service)
        else:
            message = await _status(event, subscription_service)
    except Exception as e:
        logger.exception(
            "GitHub %s failed in channel %s", intent.action, event.channel_id
        )
        message = external_error_message(e)

    await sender.send_message(event.channel_id, message)


async def _subscribe(
    intent: SubscriptionIntent,
    event: SlashCommandEvent,
    subscription_service: SubscriptionService,
    oauth_service: OAuthService,
) -> str:
    repo = intent.repo_identifier or ""
    event_types = intent.event_types or ""

    if not await oauth_service.is_linked(event.user_id):
        auth_url = await oauth_service.get_authorization_url(
            event.user_id,
            event.channel_id,
            event.space_id,
            "subscribe",
            {"repo": repo, "event_types": event_types},
        )
        return format_auth_prompt(auth_url)

    result = await subscription_service.create_subscription(
        SubscribeRequest(
            user_id=event.user_id,
            space_id=event.space_id,
            channel_id=event.channel_id,
            repo_identifier=repo,
            event_types=event_types,
        )
    )

    if not result.success and result.requires_installation:
        return format_installation_required(result)
    if not result.success:
        return f"❌ {result.error or 'Failed to create subscription'}"

    logger.info(
        "Channel %s subscribed to %s (%s)",
        event.channel_id,
        result.repo_full_name or repo,
        result.delivery_mode,
    )
    return format_subscription_success(result, repo, event_types)


async def _unsubscribe(
    intent: SubscriptionIntent,
    event: SlashCommandEvent,
    subscription_service: SubscriptionService,
) -> str:
    repo = intent.repo_identifier or ""

    subscriptions = await subscription_service.get_channel_subscriptions(
        event.channel_id, event.space_id
    )
    if not subscriptions:
        return "❌ This channel has no subscriptions"

    # The store is case-sensitive; always remove by the stored name.
    match = next(
        (sub for sub in subscriptions if sub.repo.lower() == repo.lower()), None
    )
    if match is None:
        return (
            f"❌ Not subscribed to **{repo}**\n\n"
            "Use `/github status` to see your subscriptions"
        )

    if not await subscription_service.unsubscribe(
        event.channel_id, event.space_id, match.repo
    ):
        return f"❌ Failed to unsubscribe from **{repo}**"

    logger.info("Channel %s unsubscribed from %s", event.channel_id, match.repo)
    return f"✅ **Unsubscribed from {match.repo}**"


async def _status(
    event: SlashCommandEvent, subscription_service: SubscriptionService
) -> str:
    subscriptions = await subscription_service.get_channel_subscriptions(
        event.channel_id, event.space_id
    )
    return format_subscription_status(subscriptions)
