"""Chat message formatters."""

from .issues import format_issue_detail, format_issue_list, truncate_text
from .pull_requests import format_pull_request_detail, format_pull_request_list
from .subscriptions import format_subscription_status, format_subscription_success

__all__ = [
    "format_issue_detail",
    "format_issue_list",
    "format_pull_request_detail",
    "format_pull_request_list",
    "format_subscription_status",
    "format_subscription_success",
    "truncate_text",
]
