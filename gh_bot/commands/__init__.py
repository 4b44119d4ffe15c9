"""Argument parsing and validation shared by the command handlers."""

from .args import (
    DEFAULT_ISSUE_COUNT,
    ParsedIssueCommand,
    TokenizedArgs,
    parse_issue_command,
    parse_item_number,
    parse_pull_request_command,
    parse_repo_identifier,
    strip_markdown,
    tokenize,
    without_flag,
)
from .errors import (
    CommandError,
    InvalidEventTypeError,
    UsageError,
    ValidationError,
    external_error_message,
)
from .event_types import (
    ALLOWED_EVENT_TYPES,
    DEFAULT_EVENT_TYPES,
    format_event_types,
    parse_event_types,
)
from .filters import (
    validate_count,
    validate_issue_filters,
    validate_pull_request_filters,
)
from .subscription import SubscriptionIntent, parse_subscription_command

__all__ = [
    "ALLOWED_EVENT_TYPES",
    "DEFAULT_EVENT_TYPES",
    "DEFAULT_ISSUE_COUNT",
    "CommandError",
    "InvalidEventTypeError",
    "ParsedIssueCommand",
    "SubscriptionIntent",
    "TokenizedArgs",
    "UsageError",
    "ValidationError",
    "external_error_message",
    "format_event_types",
    "parse_event_types",
    "parse_issue_command",
    "parse_item_number",
    "parse_pull_request_command",
    "parse_repo_identifier",
    "parse_subscription_command",
    "strip_markdown",
    "tokenize",
    "validate_count",
    "validate_issue_filters",
    "validate_pull_request_filters",
    "without_flag",
]
