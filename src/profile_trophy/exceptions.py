"""Custom exception hierarchy for Profile Trophy."""

from __future__ import annotations

from datetime import datetime


class ProfileTrophyError(Exception):
    """Base exception for Profile Trophy."""


class GitHubAPIError(ProfileTrophyError):
    """Error from the GitHub API."""

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        rate_limit_remaining: int | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.rate_limit_remaining = rate_limit_remaining


class RateLimitExhaustedError(GitHubAPIError):
    """GitHub API rate limit exhausted."""

    def __init__(self, reset_at: datetime | None = None, rate_limit_remaining: int = 0):
        self.reset_at = reset_at
        if reset_at is not None:
            message = f"Rate limit exhausted. Resets at {reset_at.isoformat()}"
        else:
            message = "Rate limit exhausted."
        super().__init__(
            message,
            status_code=403,
            rate_limit_remaining=rate_limit_remaining,
        )


class UserNotFoundError(GitHubAPIError):
    """GitHub user not found."""

    def __init__(self, login: str):
        self.login = login
        super().__init__(f"User not found: {login}", status_code=404)


class ConfigError(ProfileTrophyError):
    """Error with configuration."""
