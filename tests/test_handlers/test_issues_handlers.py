"""Tests for the /gh_issues and /gh_issue handlers."""

from unittest.mock import AsyncMock

import pytest

from gh_bot.commands.args import INVALID_REPO_FORMAT, ISSUES_USAGE
from gh_bot.commands.filters import COUNT_ERROR
from gh_bot.handlers.issues import ISSUE_USAGE, handle_gh_issue, handle_gh_issues


@pytest.fixture
def issue_source() -> AsyncMock:
    source = AsyncMock()
    source.list_issues = AsyncMock(return_value=[])
    source.get_issue = AsyncMock()
    return source


class TestHandleGhIssues:
    """Test /gh_issues."""

    @pytest.mark.asyncio
    async def test_missing_repo_sends_usage(
        self, sender, issue_source, make_event, sent_messages
    ) -> None:
        """Test usage message and no external call."""
        await handle_gh_issues(sender, make_event(), issue_source)

        assert sent_messages() == [ISSUES_USAGE]
        issue_source.list_issues.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("count", ["0", "51", "100", "-2", "invalid"])
    async def test_count_out_of_bounds(
        self, count, sender, issue_source, make_event, sent_messages
    ) -> None:
        """Test rejected counts."""
        await handle_gh_issues(sender, make_event("owner/repo", count), issue_source)

        assert sent_messages() == [COUNT_ERROR]
        issue_source.list_issues.assert_not_called()

    @pytest.mark.asyncio
    async def test_malformed_repo(
        self, sender, issue_source, make_event, sent_messages
    ) -> None:
        await handle_gh_issues(sender, make_event("reactfacebook"), issue_source)

        assert sent_messages() == [INVALID_REPO_FORMAT]
        issue_source.list_issues.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_state_filter(
        self, sender, issue_source, make_event, sent_messages
    ) -> None:
        await handle_gh_issues(
            sender, make_event("owner/repo", "--state=merged"), issue_source
        )

        messages = sent_messages()
        assert len(messages) == 1
        assert "Invalid state 'merged'" in messages[0]
        issue_source.list_issues.assert_not_called()

    @pytest.mark.asyncio
    async def test_default_count_and_filters_passed(
        self, sender, issue_source, make_event
    ) -> None:
        """Test arguments forwarded to the issue source."""
        await handle_gh_issues(sender, make_event("owner/repo"), issue_source)
        issue_source.list_issues.assert_awaited_once_with("owner/repo", 5, None)

        issue_source.list_issues.reset_mock()
        await handle_gh_issues(
            sender,
            make_event("owner/repo", "20", "--state", "open", "--creator=octocat"),
            issue_source,
        )
        issue_source.list_issues.assert_awaited_once_with(
            "owner/repo", 20, {"state": "open", "creator": "octocat"}
        )

    @pytest.mark.asyncio
    async def test_lists_open_and_closed_issues(
        self, sender, issue_source, make_event, make_issue, sent_messages
    ) -> None:
        """Test the full reply for three open and two closed issues."""
        issue_source.list_issues.return_value = [
            make_issue(50, "open", "user1"),
            make_issue(49, "closed", "user2"),
            make_issue(48, "open", "user3"),
            make_issue(47, "closed", None),
            make_issue(46, "open", "user5"),
        ]

        await handle_gh_issues(sender, make_event("owner/repo", "5"), issue_source)

        messages = sent_messages()
        assert len(messages) == 1
        message = messages[0]
        assert "**Recent Issues - owner/repo**" in message
        assert "Showing 5 most recent issues:" in message

        issue_lines = [line for line in message.splitlines() if line.startswith("• ")]
        assert len(issue_lines) == 5
        assert "[#50](https://github.com/owner/repo/issues/50) 🟢 Open" in issue_lines[0]
        assert "[#49](https://github.com/owner/repo/issues/49) ✅ Closed" in issue_lines[1]
        assert "🟢 Open" in issue_lines[2]
        assert issue_lines[3].endswith("by Unknown")
        assert "🟢 Open" in issue_lines[4]
        assert "/pull/" not in message

    @pytest.mark.asyncio
    async def test_no_issues(
        self, sender, issue_source, make_event, sent_messages
    ) -> None:
        await handle_gh_issues(sender, make_event("owner/repo"), issue_source)
        assert sent_messages() == ["No issues found for **owner/repo**"]

    @pytest.mark.asyncio
    async def test_external_failure_relayed(
        self, sender, issue_source, make_event, sent_messages
    ) -> None:
        """Test that a client failure becomes one error message."""
        issue_source.list_issues.side_effect = ValueError("Repository owner/repo not found")

        await handle_gh_issues(sender, make_event("owner/repo"), issue_source)

        assert sent_messages() == ["❌ Error: Repository owner/repo not found"]

    @pytest.mark.asyncio
    async def test_external_failure_without_message(
        self, sender, issue_source, make_event, sent_messages
    ) -> None:
        issue_source.list_issues.side_effect = RuntimeError()

        await handle_gh_issues(sender, make_event("owner/repo"), issue_source)

        assert sent_messages() == ["❌ Error: Unknown error"]


class TestHandleGhIssue:
    """Test /gh_issue."""

    @pytest.mark.asyncio
    async def test_missing_arguments(
        self, sender, issue_source, make_event, sent_messages
    ) -> None:
        await handle_gh_issue(sender, make_event("owner/repo"), issue_source)

        assert sent_messages() == [ISSUE_USAGE]
        issue_source.get_issue.assert_not_called()

    @pytest.mark.asyncio
    async def test_invalid_issue_number(
        self, sender, issue_source, make_event, sent_messages
    ) -> None:
        await handle_gh_issue(sender, make_event("owner/repo", "#abc"), issue_source)

        assert sent_messages() == ["❌ Invalid issue number: `#abc`"]
        issue_source.get_issue.assert_not_called()

    @pytest.mark.asyncio
    async def test_shows_truncated_issue(
        self, sender, issue_source, make_event, sample_issue_detail, sent_messages
    ) -> None:
        """Test hash-prefixed numbers and truncated description."""
        issue_source.get_issue.return_value = sample_issue_detail

        await handle_gh_issue(sender, make_event("owner/repo", "#123"), issue_source)

        issue_source.get_issue.assert_awaited_once_with("owner/repo", 123)
        message = sent_messages()[0]
        assert message.startswith("**Issue #123**")
        assert "..." in message
        assert "🏷️ Labels: bug, priority-high" in message

    @pytest.mark.asyncio
    async def test_full_flag_shows_whole_body(
        self, sender, issue_source, make_event, sample_issue_detail, sent_messages
    ) -> None:
        issue_source.get_issue.return_value = sample_issue_detail

        await handle_gh_issue(
            sender, make_event("owner/repo", "123", "--full"), issue_source
        )

        message = sent_messages()[0]
        assert sample_issue_detail.body.strip() in message
        assert "..." not in message

    @pytest.mark.asyncio
    async def test_list_delegates_to_gh_issues(
        self, sender, issue_source, make_event, make_issue, sent_messages
    ) -> None:
        issue_source.list_issues.return_value = [make_issue(1)]

        await handle_gh_issue(
            sender, make_event("list", "owner/repo", "3"), issue_source
        )

        issue_source.list_issues.assert_awaited_once_with("owner/repo", 3, None)
        assert "**Recent Issues - owner/repo**" in sent_messages()[0]

    @pytest.mark.asyncio
    async def test_list_with_leading_full_flag(
        self, sender, issue_source, make_event, make_issue, sent_messages
    ) -> None:
        """Test that --full does not take the repository as its value."""
        issue_source.list_issues.return_value = [make_issue(1)]

        await handle_gh_issue(
            sender, make_event("--full", "list", "owner/repo", "5"), issue_source
        )

        issue_source.list_issues.assert_awaited_once_with("owner/repo", 5, None)
        assert "**Recent Issues - owner/repo**" in sent_messages()[0]

    @pytest.mark.asyncio
    async def test_list_with_trailing_full_flag(
        self, sender, issue_source, make_event
    ) -> None:
        await handle_gh_issue(
            sender, make_event("list", "owner/repo", "--full", "--state=open"), issue_source
        )

        issue_source.list_issues.assert_awaited_once_with(
            "owner/repo", 5, {"state": "open"}
        )

    @pytest.mark.asyncio
    async def test_external_failure_relayed(
        self, sender, issue_source, make_event, sent_messages
    ) -> None:
        issue_source.get_issue.side_effect = ValueError("Issue #9 not found in owner/repo")

        await handle_gh_issue(sender, make_event("owner/repo", "9"), issue_source)

        assert sent_messages() == ["❌ Error: Issue #9 not found in owner/repo"]
