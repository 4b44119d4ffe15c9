"""Handlers for the ``/gh_prs`` and ``/gh_pr`` commands."""

import logging

from ..commands.args import (
    parse_item_number,
    parse_pull_request_command,
    parse_repo_identifier,
    strip_markdown,
    tokenize,
    without_flag,
)
from ..commands.errors import CommandError, UsageError, external_error_message
from ..commands.filters import validate_count, validate_pull_request_filters
from ..formatters.pull_requests import (
    format_pull_request_detail,
    format_pull_request_list,
)
from ..services import IssueSource, MessageSender, SlashCommandEvent
from .issues import FULL_FLAG, LIST_SUBCOMMAND

logger = logging.getLogger(__name__)

PULL_REQUEST_USAGE = (
    "❌ Usage: `/gh_pr owner/repo #123 [--full]` or "
    "`/gh_pr list owner/repo [count]`"
)


async def handle_gh_prs(
    sender: MessageSender, event: SlashCommandEvent, issue_source: IssueSource
) -> None:
    """List recent pull requests: ``owner/repo [count] [--state=...] [--author=...]``."""
    try:
        command = parse_pull_request_command(event.args)
        parse_repo_identifier(command.repo)
    except CommandError as e:
        await sender.send_message(event.channel_id, e.message)
        return

    problem = validate_count(command.count) or validate_pull_request_filters(
        command.filters
    )
    if problem:
        await sender.send_message(event.channel_id, problem)
        return

    try:
        prs = await issue_source.list_pull_requests(
            command.repo, command.count, command.filters or None
        )
    except Exception as e:
        logger.exception("Failed to list pull requests for %s", command.repo)
        await sender.send_message(event.channel_id, external_error_message(e))
        return

    await sender.send_message(
        event.channel_id, format_pull_request_list(prs, command.repo)
    )


async def handle_gh_pr(
    sender: MessageSender, event: SlashCommandEvent, issue_source: IssueSource
) -> None:
    """Show one pull request (``owner/repo #123 [--full]``) or delegate ``list``."""
    tokens = tokenize(event.args, boolean_flags=[FULL_FLAG])
    positionals = tokens.positionals

    if positionals and positionals[0].lower() == LIST_SUBCOMMAND:
        remaining = without_flag(event.args, FULL_FLAG)
        remaining.remove(positionals[0])
        await handle_gh_prs(
            sender, event.model_copy(update={"args": remaining}), issue_source
        )
        return

    try:
        if len(positionals) < 2:
            raise UsageError(PULL_REQUEST_USAGE)
        repo = strip_markdown(positionals[0])
        parse_repo_identifier(repo)
        pr_number = parse_item_number(positionals[1], "pull request")
    except CommandError as e:
        await sender.send_message(event.channel_id, e.message)
        return

    try:
        pr = await issue_source.get_pull_request(repo, pr_number)
    except Exception as e:
        logger.exception("Failed to fetch pull request #%s in %s", pr_number, repo)
        await sender.send_message(event.channel_id, external_error_message(e))
        return

    message = format_pull_request_detail(pr, repo, full=tokens.has_flag(FULL_FLAG))
    await sender.send_message(event.channel_id, message)
