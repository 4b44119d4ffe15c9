"""Validation of listing filters and the requested count."""

ALLOWED_STATES = ("open", "closed", "all")
ALLOWED_PULL_REQUEST_STATES = ("open", "closed", "merged", "all")
MIN_ISSUE_COUNT = 1
MAX_ISSUE_COUNT = 50

COUNT_ERROR = f"❌ Count must be a number between {MIN_ISSUE_COUNT} and {MAX_ISSUE_COUNT}"


def _state_error(state: str | None, allowed: tuple[str, ...]) -> str | None:
    if state is not None and state.lower() not in allowed:
        return f"❌ Invalid state '{state}'. Use one of: {', '.join(allowed)}"
    return None


def _username_error(value: str | None, flag: str) -> str | None:
    if value is not None and not value.strip():
        return (
            f"❌ {flag.capitalize()} filter requires a GitHub username "
            f"(e.g., `--{flag}=octocat`)"
        )
    return None


def validate_issue_filters(filters: dict[str, str]) -> str | None:
    """Return the first filter error, or None when all filters are valid.

    ``state`` is checked before ``creator``; only one error is reported.
    """
    return _state_error(filters.get("state"), ALLOWED_STATES) or _username_error(
        filters.get("creator"), "creator"
    )


def validate_pull_request_filters(filters: dict[str, str]) -> str | None:
    """Same as validate_issue_filters, for ``state`` (merged allowed) and ``author``."""
    return _state_error(
        filters.get("state"), ALLOWED_PULL_REQUEST_STATES
    ) or _username_error(filters.get("author"), "author")


def validate_count(count: int | None) -> str | None:
    """Return COUNT_ERROR unless count is an integer within bounds."""
    if count is None or not MIN_ISSUE_COUNT <= count <= MAX_ISSUE_COUNT:
        return COUNT_ERROR
    return None
