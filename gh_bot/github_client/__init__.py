"""GitHub client package for API interaction."""

from .client import GitHubClient, GitHubIssueSource
from .models import IssueDetail, IssueSummary, PullRequestDetail, PullRequestSummary

__all__ = [
    "GitHubClient",
    "GitHubIssueSource",
    "IssueDetail",
    "IssueSummary",
    "PullRequestDetail",
    "PullRequestSummary",
]
