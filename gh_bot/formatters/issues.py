"""Markdown formatting of issues for chat responses."""

from collections.abc import Sequence

from ..github_client.models import IssueDetail, IssueSummary

UNKNOWN_AUTHOR = "Unknown"
DESCRIPTION_PREVIEW_LENGTH = 100


def truncate_text(text: str | None, max_length: int) -> str:
    """Truncate text to max_length characters, adding an ellipsis if cut."""
    if not text or not text.strip():
        return ""

    trimmed = text.strip()
    if len(trimmed) <= max_length:
        return trimmed
    return trimmed[:max_length] + "..."


def issue_status(issue: IssueSummary) -> str:
    return "🟢 Open" if issue.is_open else "✅ Closed"


def format_issue_line(issue: IssueSummary) -> str:
    link = f"[#{issue.number}]({issue.url})"
    author = issue.author or UNKNOWN_AUTHOR
    return f"• {link} {issue_status(issue)} - **{issue.title}** by {author}"


def format_issue_list(issues: Sequence[IssueSummary], repo: str) -> str:
    """Format a listing of issues, one line per issue.

    Inputs are assumed to be real issues; pull requests must already have
    been dropped by the issue source.
    """
    if not issues:
        return f"No issues found for **{repo}**"

    issue_lines = "\n".join(format_issue_line(issue) for issue in issues)
    return (
        f"**Recent Issues - {repo}**\n"
        f"Showing {len(issues)} most recent issues:\n\n"
        f"{issue_lines}"
    )


def format_issue_detail(issue: IssueDetail, repo: str, full: bool = False) -> str:
    """Format a single issue; the body is shortened unless ``full`` is set."""
    description = (
        (issue.body or "").strip()
        if full
        else truncate_text(issue.body, DESCRIPTION_PREVIEW_LENGTH)
    )
    labels = ", ".join(issue.labels)

    lines = [f"**Issue #{issue.number}**", f"**{repo}**", "", f"**{issue.title}**", ""]
    if description:
        lines.extend([description, ""])
    lines.extend(
        [
            f"📊 Status: {issue_status(issue)}",
            f"👤 Author: {issue.author or UNKNOWN_AUTHOR}",
            f"💬 Comments: {issue.comments}",
        ]
    )
    if labels:
        lines.append(f"🏷️ Labels: {labels}")
    lines.append(f"🔗 {issue.url}")

    return "\n".join(lines)
