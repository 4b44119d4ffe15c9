"""Markdown formatting of pull requests for chat responses."""

from collections.abc import Sequence

from ..github_client.models import PullRequestDetail, PullRequestSummary
from .issues import DESCRIPTION_PREVIEW_LENGTH, UNKNOWN_AUTHOR, truncate_text


def pull_request_status(pr: PullRequestSummary) -> str:
    """Status label; draft only applies while the pull request is open."""
    if pr.is_open:
        return "📝 Draft" if pr.draft else "🟢 Open"
    return "✅ Merged" if pr.merged else "❌ Closed"


def format_pull_request_line(pr: PullRequestSummary) -> str:
    link = f"[#{pr.number}]({pr.url})"
    author = pr.author or UNKNOWN_AUTHOR
    return f"• {link} {pull_request_status(pr)} - **{pr.title}** by {author}"


def format_pull_request_list(prs: Sequence[PullRequestSummary], repo: str) -> str:
    if not prs:
        return f"No pull requests found for **{repo}**"

    pr_lines = "\n".join(format_pull_request_line(pr) for pr in prs)
    return (
        f"**Recent Pull Requests - {repo}**\n"
        f"Showing {len(prs)} most recent PRs:\n\n"
        f"{pr_lines}"
    )


def format_pull_request_detail(
    pr: PullRequestDetail, repo: str, full: bool = False
) -> str:
    """Format a single pull request; the body is shortened unless ``full`` is set."""
    description = (
        (pr.body or "").strip()
        if full
        else truncate_text(pr.body, DESCRIPTION_PREVIEW_LENGTH)
    )

    lines = [f"**Pull Request #{pr.number}**", f"**{repo}**", "", f"**{pr.title}**", ""]
    if description:
        lines.extend([description, ""])
    lines.extend(
        [
            f"📊 Status: {pull_request_status(pr)}",
            f"👤 Author: {pr.author or UNKNOWN_AUTHOR}",
            f"📝 Changes: +{pr.additions} -{pr.deletions}",
            f"💬 Comments: {pr.comments}",
            f"🔗 {pr.url}",
        ]
    )

    return "\n".join(lines)
