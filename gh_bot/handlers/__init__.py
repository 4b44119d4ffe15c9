"""Slash command handlers."""

from .issues import handle_gh_issue, handle_gh_issues
from .pull_requests import handle_gh_pr, handle_gh_prs
from .subscription import handle_github_subscription

__all__ = [
    "handle_gh_issue",
    "handle_gh_issues",
    "handle_gh_pr",
    "handle_gh_prs",
    "handle_github_subscription",
]
