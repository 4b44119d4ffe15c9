"""GitHub API client using PyGitHub."""

import asyncio
import logging
import os

from github import Auth, Github
from github.GithubException import UnknownObjectException
from github.Issue import Issue
from github.PullRequest import PullRequest
from github.Repository import Repository

from ..commands.args import DEFAULT_ISSUE_COUNT, parse_repo_identifier
from .models import (
    IssueDetail,
    IssueSummary,
    PullRequestDetail,
    PullRequestSummary,
)

logger = logging.getLogger(__name__)

# Listings skip items client-side (pull requests among issues, filters on
# pull requests); stop scanning after this many items even if fewer than
# `count` matches were found.
MAX_SCANNED_ITEMS = 1000
PAGE_SIZE = 100


class GitHubClient:
    """Synchronous GitHub API client for issue and pull request queries."""

    def __init__(self, token: str | None = None):
        """Initialize GitHub client with authentication.

        Args:
            token: GitHub personal access token. If None, reads from
                GITHUB_TOKEN env var.
        """
        self.token = token or os.getenv("GITHUB_TOKEN")
        if not self.token:
            raise ValueError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable."
            )

        self.github = Github(auth=Auth.Token(self.token), per_page=PAGE_SIZE)

    def _convert_summary(self, github_issue: Issue) -> IssueSummary:
        """Convert PyGitHub issue to a listing summary."""
        return IssueSummary(
            number=github_issue.number,
            url=github_issue.html_url,
            state=github_issue.state,
            title=github_issue.title,
            author=github_issue.user.login if github_issue.user else None,
        )

    def _convert_detail(self, github_issue: Issue) -> IssueDetail:
        """Convert PyGitHub issue to the single-issue view model."""
        return IssueDetail(
            **self._convert_summary(github_issue).model_dump(),
            body=github_issue.body,
            comments=github_issue.comments or 0,
            labels=[label.name for label in github_issue.labels],
        )

    def get_repository(self, repo: str) -> Repository:
        """Get repository object for an ``owner/name`` identifier."""
        owner, name = parse_repo_identifier(repo)
        try:
            return self.github.get_repo(f"{owner}/{name}")
        except UnknownObjectException:
            raise ValueError(f"Repository {repo} not found")

    def list_issues(
        self,
        repo: str,
        count: int = DEFAULT_ISSUE_COUNT,
        filters: dict[str, str] | None = None,
    ) -> list[IssueSummary]:
        """List the most recently created issues of a repository.

        Pull requests returned by the issues endpoint are skipped.

        Args:
            repo: Repository in owner/name form
            count: Maximum number of issues to return
            filters: Optional ``state`` (open, closed, all; default all) and
                ``creator`` (GitHub login)

        Returns:
            Up to ``count`` IssueSummary objects, newest first
        """
        filters = filters or {}
        repository = self.get_repository(repo)

        query: dict[str, str] = {
            "state": filters.get("state", "all").lower(),
            "sort": "created",
            "direction": "desc",
        }
        if filters.get("creator"):
            query["creator"] = filters["creator"].strip()

        logger.debug("Listing issues for %s with %s", repo, query)

        issues: list[IssueSummary] = []
        for scanned, github_issue in enumerate(repository.get_issues(**query)):
            if scanned >= MAX_SCANNED_ITEMS or len(issues) >= count:
                break
            if github_issue.pull_request is not None:
                continue
            issues.append(self._convert_summary(github_issue))

        return issues

    def get_issue(self, repo: str, issue_number: int) -> IssueDetail:
        """Get a specific issue with its details."""
        repository = self.get_repository(repo)
        try:
            github_issue = repository.get_issue(issue_number)
        except UnknownObjectException:
            raise ValueError(f"Issue #{issue_number} not found in {repo}")

        return self._convert_detail(github_issue)

    def _convert_pull_request_summary(
        self, github_pr: PullRequest
    ) -> PullRequestSummary:
        """Convert PyGitHub pull request to a listing summary.

        Listed pull requests are incomplete objects; ``merged_at`` is read
        instead of ``merged`` so no extra request is made per item.
        """
        return PullRequestSummary(
            number=github_pr.number,
            url=github_pr.html_url,
            state=github_pr.state,
            title=github_pr.title,
            author=github_pr.user.login if github_pr.user else None,
            draft=bool(github_pr.draft),
            merged=github_pr.merged_at is not None,
        )

    def _convert_pull_request_detail(
        self, github_pr: PullRequest
    ) -> PullRequestDetail:
        """Convert PyGitHub pull request to the single view model."""
        return PullRequestDetail(
            **self._convert_pull_request_summary(github_pr).model_dump(exclude={"merged"}),
            merged=bool(github_pr.merged),
            body=github_pr.body,
            comments=github_pr.comments or 0,
            additions=github_pr.additions or 0,
            deletions=github_pr.deletions or 0,
        )

    def list_pull_requests(
        self,
        repo: str,
        count: int = DEFAULT_ISSUE_COUNT,
        filters: dict[str, str] | None = None,
    ) -> list[PullRequestSummary]:
        """List the most recently created pull requests of a repository.

        Args:
            repo: Repository in owner/name form
            count: Maximum number of pull requests to return
            filters: Optional ``state`` (open, closed, merged, all; default
                all) and ``author`` (GitHub login, case-insensitive)

        Returns:
            Up to ``count`` PullRequestSummary objects, newest first
        """
        filters = filters or {}
        repository = self.get_repository(repo)

        state = filters.get("state", "all").lower()
        author = filters.get("author", "").strip().lower()
        # The API has no merged state; merged pull requests are closed ones.
        api_state = "closed" if state == "merged" else state

        logger.debug("Listing pull requests for %s with state=%s", repo, api_state)

        pull_requests: list[PullRequestSummary] = []
        pulls = repository.get_pulls(state=api_state, sort="created", direction="desc")
        for scanned, github_pr in enumerate(pulls):
            if scanned >= MAX_SCANNED_ITEMS or len(pull_requests) >= count:
                break
            summary = self._convert_pull_request_summary(github_pr)
            if state == "merged" and not summary.merged:
                continue
            if author and (summary.author or "").lower() != author:
                continue
            pull_requests.append(summary)

        return pull_requests

    def get_pull_request(self, repo: str, pr_number: int) -> PullRequestDetail:
        """Get a specific pull request with its details."""
        repository = self.get_repository(repo)
        try:
            github_pr = repository.get_pull(pr_number)
        except UnknownObjectException:
            raise ValueError(f"Pull request #{pr_number} not found in {repo}")

        return self._convert_pull_request_detail(github_pr)


class GitHubIssueSource:
    """Async issue and pull request source backed by GitHubClient.

    PyGitHub is blocking, so calls run in a worker thread.
    """

    def __init__(self, client: GitHubClient | None = None) -> None:
        self._client = client

    @property
    def client(self) -> GitHubClient:
        """Get or create the GitHubClient instance."""
        if self._client is None:
            self._client = GitHubClient()
        return self._client

    async def list_issues(
        self, repo: str, count: int, filters: dict[str, str] | None = None
    ) -> list[IssueSummary]:
        return await asyncio.to_thread(self.client.list_issues, repo, count, filters)

    async def get_issue(self, repo: str, issue_number: int) -> IssueDetail:
        return await asyncio.to_thread(self.client.get_issue, repo, issue_number)

    async def list_pull_requests(
        self, repo: str, count: int, filters: dict[str, str] | None = None
    ) -> list[PullRequestSummary]:
        return await asyncio.to_thread(
            self.client.list_pull_requests, repo, count, filters
        )

    async def get_pull_request(self, repo: str, pr_number: int) -> PullRequestDetail:
        return await asyncio.to_thread(self.client.get_pull_request, repo, pr_number)
