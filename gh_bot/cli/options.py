"""Shared CLI option definitions."""

import typer

TOKEN_OPTION = typer.Option(
    None, "--token", "-t", help="GitHub API token (defaults to GITHUB_TOKEN env var)"
)

VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", help="Log handler activity to stderr"
)

COMMAND_ARGS_ARGUMENT = typer.Argument(
    None, help="Command arguments exactly as typed after the slash command"
)

PASSTHROUGH_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "allow_extra_args": True,
    "ignore_unknown_options": True,
}
