"""Main CLI entry point.

Runs the slash command handlers against GitHub from a terminal, printing
the reply a channel would receive.
"""

import asyncio
import logging

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markdown import Markdown
from rich.table import Table

from ..bot import COMMANDS
from ..github_client.client import GitHubClient, GitHubIssueSource
from ..handlers.issues import handle_gh_issue, handle_gh_issues
from ..handlers.pull_requests import handle_gh_pr, handle_gh_prs
from ..services import SlashCommandEvent
from .options import (
    COMMAND_ARGS_ARGUMENT,
    PASSTHROUGH_SETTINGS,
    TOKEN_OPTION,
    VERBOSE_OPTION,
)

load_dotenv()

app = typer.Typer(
    name="gh-bot",
    help="GitHub chat-bot commands",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()

CLI_CHANNEL = "cli"


class ConsoleSender:
    """Prints replies instead of posting them to a channel."""

    def __init__(self, output: Console) -> None:
        self.output = output
        self.messages: list[str] = []

    async def send_message(self, channel_id: str, message: str) -> None:
        self.messages.append(message)
        self.output.print(Markdown(message))

    @property
    def failed(self) -> bool:
        return any(message.startswith("❌") for message in self.messages)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _issue_source(token: str | None) -> GitHubIssueSource:
    try:
        return GitHubIssueSource(GitHubClient(token=token))
    except ValueError as e:
        console.print(f"❌ {e}")
        raise typer.Exit(1)


@app.command(context_settings=PASSTHROUGH_SETTINGS)
def issues(
    args: list[str] | None = COMMAND_ARGS_ARGUMENT,
    token: str | None = TOKEN_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """List recent issues, like /gh_issues.

    Examples:
        gh-bot issues facebook/react
        gh-bot issues facebook/react 10 --state=open --creator=octocat
    """
    _configure_logging(verbose)
    sender = ConsoleSender(console)
    event = SlashCommandEvent(channel_id=CLI_CHANNEL, args=args or [])
    asyncio.run(handle_gh_issues(sender, event, _issue_source(token)))
    if sender.failed:
        raise typer.Exit(1)


@app.command(context_settings=PASSTHROUGH_SETTINGS)
def issue(
    args: list[str] | None = COMMAND_ARGS_ARGUMENT,
    token: str | None = TOKEN_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Show one issue, like /gh_issue.

    Examples:
        gh-bot issue facebook/react 123 --full
        gh-bot issue list facebook/react 5
    """
    _configure_logging(verbose)
    sender = ConsoleSender(console)
    event = SlashCommandEvent(channel_id=CLI_CHANNEL, args=args or [])
    asyncio.run(handle_gh_issue(sender, event, _issue_source(token)))
    if sender.failed:
        raise typer.Exit(1)


@app.command(context_settings=PASSTHROUGH_SETTINGS)
def prs(
    args: list[str] | None = COMMAND_ARGS_ARGUMENT,
    token: str | None = TOKEN_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """List recent pull requests, like /gh_prs.

    Examples:
        gh-bot prs facebook/react
        gh-bot prs facebook/react 10 --state=merged --author=octocat
    """
    _configure_logging(verbose)
    sender = ConsoleSender(console)
    event = SlashCommandEvent(channel_id=CLI_CHANNEL, args=args or [])
    asyncio.run(handle_gh_prs(sender, event, _issue_source(token)))
    if sender.failed:
        raise typer.Exit(1)


@app.command(context_settings=PASSTHROUGH_SETTINGS)
def pr(
    args: list[str] | None = COMMAND_ARGS_ARGUMENT,
    token: str | None = TOKEN_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Show one pull request, like /gh_pr.

    Examples:
        gh-bot pr facebook/react 123 --full
        gh-bot pr list facebook/react 5
    """
    _configure_logging(verbose)
    sender = ConsoleSender(console)
    event = SlashCommandEvent(channel_id=CLI_CHANNEL, args=args or [])
    asyncio.run(handle_gh_pr(sender, event, _issue_source(token)))
    if sender.failed:
        raise typer.Exit(1)


@app.command()
def commands() -> None:
    """List the slash commands the bot registers."""
    table = Table(title="Slash Commands")
    table.add_column("Command", style="cyan")
    table.add_column("Description", style="green")
    for name, description in COMMANDS:
        table.add_row(f"/{name}", description)
    console.print(table)


@app.command()
def version() -> None:
    """Show version information."""
    from gh_bot import __version__

    console.print(f"GitHub Chat Bot v{__version__}")


if __name__ == "__main__":
    app()
