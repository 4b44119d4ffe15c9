"""Handlers for the ``/gh_issues`` and ``/gh_issue`` commands."""

import logging

from ..commands.args import (
    parse_issue_command,
    parse_item_number,
    parse_repo_identifier,
    strip_markdown,
    tokenize,
    without_flag,
)
from ..commands.errors import CommandError, UsageError, external_error_message
from ..commands.filters import validate_count, validate_issue_filters
from ..formatters.issues import format_issue_detail, format_issue_list
from ..services import IssueSource, MessageSender, SlashCommandEvent

logger = logging.getLogger(__name__)

ISSUE_USAGE = (
    "❌ Usage: `/gh_issue owner/repo #123 [--full]` or "
    "`/gh_issue list owner/repo [count]`"
)
LIST_SUBCOMMAND = "list"
FULL_FLAG = "full"


async def handle_gh_issues(
    sender: MessageSender, event: SlashCommandEvent, issue_source: IssueSource
) -> None:
    """List recent issues: ``owner/repo [count] [--state=...] [--creator=...]``.

    Every argument is validated before the issue source is called, and
    exactly one message is sent back to the channel.
    """
    try:
        command = parse_issue_command(event.args)
        parse_repo_identifier(command.repo)
    except CommandError as e:
        await sender.send_message(event.channel_id, e.message)
        return

    problem = validate_count(command.count) or validate_issue_filters(command.filters)
    if problem:
        await sender.send_message(event.channel_id, problem)
        return

    try:
        issues = await issue_source.list_issues(
            command.repo, command.count, command.filters or None
        )
    except Exception as e:
        logger.exception("Failed to list issues for %s", command.repo)
        await sender.send_message(event.channel_id, external_error_message(e))
        return

    await sender.send_message(event.channel_id, format_issue_list(issues, command.repo))


async def handle_gh_issue(
    sender: MessageSender, event: SlashCommandEvent, issue_source: IssueSource
) -> None:
    """Show one issue (``owner/repo #123 [--full]``) or delegate ``list``."""
    tokens = tokenize(event.args, boolean_flags=[FULL_FLAG])
    positionals = tokens.positionals

    if positionals and positionals[0].lower() == LIST_SUBCOMMAND:
        # --full means nothing to a listing and must not swallow the repo token
        remaining = without_flag(event.args, FULL_FLAG)
        remaining.remove(positionals[0])
        await handle_gh_issues(
            sender, event.model_copy(update={"args": remaining}), issue_source
        )
        return

    try:
        if len(positionals) < 2:
            raise UsageError(ISSUE_USAGE)
        repo = strip_markdown(positionals[0])
        parse_repo_identifier(repo)
        issue_number = parse_item_number(positionals[1], "issue")
    except CommandError as e:
        await sender.send_message(event.channel_id, e.message)
        return

    try:
        issue = await issue_source.get_issue(repo, issue_number)
    except Exception as e:
        logger.exception("Failed to fetch issue #%s in %s", issue_number, repo)
        await sender.send_message(event.channel_id, external_error_message(e))
        return

    message = format_issue_detail(issue, repo, full=tokens.has_flag(FULL_FLAG))
    await sender.send_message(event.channel_id, message)
