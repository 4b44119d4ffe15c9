"""Tokenizing and parsing of slash command arguments.

Slash commands arrive as a flat list of whitespace-separated tokens. The
grammar understood here is deliberately small:

- ``--name=value`` and ``--name value`` set a flag
- ``--name`` with nothing usable after it sets an empty flag (or ``"true"``
  for flags declared as boolean)
- every other token is positional, in order
"""

import re
from collections.abc import Iterable, Sequence

from pydantic import BaseModel, Field

from .errors import UsageError, ValidationError

DEFAULT_ISSUE_COUNT = 5
ISSUE_FILTER_NAMES = frozenset({"state", "creator"})
PULL_REQUEST_FILTER_NAMES = frozenset({"state", "author"})

ISSUES_USAGE = (
    "❌ Usage: `/gh_issues owner/repo [count] [--state=open|closed|all] "
    "[--creator=username]`\n\nExample: `/gh_issues facebook/react 5`"
)
PULL_REQUESTS_USAGE = (
    "❌ Usage: `/gh_prs owner/repo [count] [--state=open|closed|merged|all] "
    "[--author=username]`\n\nExample: `/gh_prs facebook/react 5`"
)
INVALID_REPO_FORMAT = "❌ Invalid format. Use: `owner/repo` (e.g., `facebook/react`)"

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


class TokenizedArgs(BaseModel):
    """Positional tokens and flags split out of a raw argument list."""

    positionals: list[str] = Field(default_factory=list)
    flags: dict[str, str] = Field(default_factory=dict)

    def has_flag(self, name: str) -> bool:
        return name in self.flags


class ParsedIssueCommand(BaseModel):
    """Arguments of an issue listing command."""

    repo: str = Field(..., min_length=1, description="Repository as typed: owner/name")
    count: int | None = Field(
        DEFAULT_ISSUE_COUNT,
        description="Requested number of issues; None when the token was not an integer",
    )
    filters: dict[str, str] = Field(
        default_factory=dict, description="Filters keyed by filter name"
    )


def strip_markdown(text: str) -> str:
    """Remove emphasis markers chat clients wrap around pasted tokens."""
    cleaned = text.strip()
    for marker in ("**", "__", "~~", "`", "*"):
        cleaned = cleaned.replace(marker, "")
    return cleaned.strip("_").strip()


def tokenize(
    args: Sequence[str], boolean_flags: Iterable[str] = ()
) -> TokenizedArgs:
    """Split raw arguments into positionals and flags.

    Flag names are lowercased. When a flag is repeated the first occurrence
    wins.

    Args:
        args: Raw argument tokens in the order they were typed
        boolean_flags: Flag names that never consume a following value

    Returns:
        TokenizedArgs with positionals in order and flags by name
    """
    booleans = frozenset(boolean_flags)
    result = TokenizedArgs()

    index = 0
    while index < len(args):
        token = args[index]
        if token.startswith("--") and len(token) > 2:
            name, separator, value = token[2:].partition("=")
            name = name.lower()
            if separator:
                flag_value = value
            elif name in booleans:
                flag_value = "true"
            elif index + 1 < len(args) and not args[index + 1].startswith("--"):
                flag_value = args[index + 1]
                index += 1
            else:
                flag_value = ""
            result.flags.setdefault(name, flag_value)
        else:
            result.positionals.append(token)
        index += 1

    return result


def without_flag(args: Sequence[str], name: str) -> list[str]:
    """Drop every ``--name`` / ``--name=value`` token, keeping the rest in order.

    Only suitable for boolean flags, which never consume the following token.
    """
    name = name.lower()
    return [
        arg
        for arg in args
        if not (arg.startswith("--") and arg[2:].partition("=")[0].lower() == name)
    ]


def parse_count(token: str | None) -> int | None:
    """Parse the count token; absent means default, malformed means None."""
    if token is None:
        return DEFAULT_ISSUE_COUNT
    cleaned = strip_markdown(token)
    if not _INTEGER_PATTERN.fullmatch(cleaned):
        return None
    return int(cleaned)


def parse_issue_command(
    args: Sequence[str],
    filter_names: frozenset[str] = ISSUE_FILTER_NAMES,
    usage: str = ISSUES_USAGE,
) -> ParsedIssueCommand:
    """Parse ``owner/repo [count] [--state=...] [--creator=...]``.

    Count bounds are not checked here; callers validate them so that a
    malformed count is reported rather than silently defaulted.

    Args:
        args: Raw argument tokens
        filter_names: Flags kept as filters; any other flag is ignored
        usage: Message raised when the repository is missing

    Raises:
        UsageError: If no repository token was given
    """
    tokens = tokenize(args)
    if not tokens.positionals:
        raise UsageError(usage)

    repo = strip_markdown(tokens.positionals[0])
    if not repo:
        raise UsageError(usage)

    count_token = tokens.positionals[1] if len(tokens.positionals) > 1 else None
    filters = {
        name: value
        for name, value in tokens.flags.items()
        if name in filter_names
    }

    return ParsedIssueCommand(repo=repo, count=parse_count(count_token), filters=filters)


def parse_pull_request_command(args: Sequence[str]) -> ParsedIssueCommand:
    """Parse ``owner/repo [count] [--state=...] [--author=...]``."""
    return parse_issue_command(
        args, filter_names=PULL_REQUEST_FILTER_NAMES, usage=PULL_REQUESTS_USAGE
    )


def parse_item_number(token: str, kind: str = "issue") -> int:
    """Parse an issue or pull request number, with or without a leading ``#``.

    Raises:
        ValidationError: If the token is not a plain number
    """
    cleaned = strip_markdown(token).lstrip("#")
    if not cleaned.isdigit():
        raise ValidationError(f"❌ Invalid {kind} number: `{token}`")
    return int(cleaned)


def is_valid_repo_identifier(repo: str) -> bool:
    """Check ``owner/name`` shape: one separator, both halves non-empty."""
    owner, separator, name = repo.partition("/")
    return bool(separator) and bool(owner) and bool(name) and "/" not in name


def parse_repo_identifier(repo: str) -> tuple[str, str]:
    """Split ``owner/name`` into its parts.

    Raises:
        ValidationError: If the identifier is not exactly ``owner/name``
    """
    if not is_valid_repo_identifier(repo):
        raise ValidationError(INVALID_REPO_FORMAT)
    owner, _, name = repo.partition("/")
    return owner, name
