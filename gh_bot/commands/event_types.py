"""Event types a channel can subscribe to, and parsing of ``--events``."""

from collections.abc import Sequence

from .args import tokenize
from .errors import InvalidEventTypeError

ALLOWED_EVENT_TYPES: tuple[str, ...] = (
    "pr",
    "issues",
    "commits",
    "releases",
    "ci",
    "comments",
    "reviews",
    "branches",
    "review_comments",
    "stars",
    "forks",
)
ALL_EVENT_TYPES_TOKEN = "all"
DEFAULT_EVENT_TYPES = "pr,issues,commits,releases"
EVENTS_FLAG = "events"

_ALLOWED_SET = frozenset(ALLOWED_EVENT_TYPES)
_ALL_EVENT_TYPES = ",".join(ALLOWED_EVENT_TYPES)


def parse_event_types(args: Sequence[str]) -> str:
    """Resolve the ``--events`` flag into a canonical event type string.

    Accepts ``--events=pr,issues`` and ``--events pr,issues``. Tokens are
    trimmed and lowercased; ``all`` anywhere selects every event type.
    Duplicates are dropped and the result follows vocabulary order, so any
    ordering of the same tokens yields the same string.

    Args:
        args: Raw command arguments

    Returns:
        Comma-joined event types, or DEFAULT_EVENT_TYPES when the flag is
        absent or empty

    Raises:
        InvalidEventTypeError: Listing every token outside the vocabulary
    """
    raw_value = tokenize(args).flags.get(EVENTS_FLAG, "")
    tokens = [
        token.strip().lower() for token in raw_value.split(",") if token.strip()
    ]
    if not tokens:
        return DEFAULT_EVENT_TYPES

    if ALL_EVENT_TYPES_TOKEN in tokens:
        return _ALL_EVENT_TYPES

    invalid_tokens = [
        token for token in dict.fromkeys(tokens) if token not in _ALLOWED_SET
    ]
    if invalid_tokens:
        quoted = ", ".join(f"'{token}'" for token in invalid_tokens)
        raise InvalidEventTypeError(
            invalid_tokens,
            f"❌ Invalid event type(s): {quoted}\n\n"
            f"Valid options: {', '.join(ALLOWED_EVENT_TYPES)}, {ALL_EVENT_TYPES_TOKEN}",
        )

    selected = set(tokens)
    return ",".join(event for event in ALLOWED_EVENT_TYPES if event in selected)


def format_event_types(event_types: str) -> str:
    """Format a stored event type string for display: ``pr, issues``."""
    return ", ".join(token.strip() for token in event_types.split(","))
