"""GitHub chat-bot commands for issue and pull request queries and repository subscriptions."""

__version__ = "0.1.0"
