"""Async GitHub GraphQL client for fetching raw profile statistics."""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from typing import Any

import httpx

from profile_trophy.config import ProfileTrophyConfig, load_config
from profile_trophy.exceptions import GitHubAPIError, RateLimitExhaustedError, UserNotFoundError
from profile_trophy.metrics import aggregate_metrics
from profile_trophy.models import RawUserStats, RepositoryStats, UserMetrics

logger = logging.getLogger(__name__)

_USER_AGENT = "profile-trophy"

_ACTIVITY_QUERY = """
query($login: String!) {
  user(login: $login) {
    createdAt
    contributionsCollection {
      totalCommitContributions
      restrictedContributionsCount
      totalPullRequestReviewContributions
    }
    organizations(first: 1) { totalCount }
    followers(first: 1) { totalCount }
  }
}
""".strip()

_ISSUE_QUERY = """
query($login: String!) {
  user(login: $login) {
    openIssues: issues(states: OPEN) { totalCount }
    closedIssues: issues(states: CLOSED) { totalCount }
  }
}
""".strip()

_PULL_REQUEST_QUERY = """
query($login: String!) {
  user(login: $login) {
    pullRequests(first: 1) { totalCount }
  }
}
""".strip()

_REPOSITORY_QUERY = """
query($login: String!, $repoLimit: Int!, $langLimit: Int!) {
  user(login: $login) {
    repositories(first: $repoLimit, ownerAffiliations: OWNER,
                 orderBy: {direction: DESC, field: STARGAZERS}) {
      totalCount
      nodes {
        languages(first: $langLimit, orderBy: {direction: DESC, field: SIZE}) {
          nodes { name }
        }
        stargazers { totalCount }
        createdAt
      }
    }
  }
}
""".strip()


def _is_rate_limited(body: dict[str, Any]) -> bool:
    """Detect rate-limit signals in a GraphQL response body."""
    message = body.get("message")
    if isinstance(message, str) and "rate limit" in message.lower():
        return True
    for error in body.get("errors") or []:
        if not isinstance(error, dict):
            continue
        if "RATE_LIMIT" in str(error.get("type", "")).upper():
            return True
        if "rate limit" in str(error.get("message", "")).lower():
            return True
    return False


def _total(node: dict[str, Any] | None) -> int:
    if not node:
        return 0
    return int(node.get("totalCount") or 0)


class GitHubClient:
    """Async GitHub API client for fetching per-user trophy statistics."""

    def __init__(
        self,
        token: str = "",
        config: ProfileTrophyConfig | None = None,
    ) -> None:
        self._config = config if config is not None else load_config()
        headers = {
            "User-Agent": _USER_AGENT,
            "Accept": "application/json",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.AsyncClient(
            headers=headers,
            timeout=self._config.fetch.timeout_seconds,
        )

    async def __aenter__(self) -> GitHubClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self._client.aclose()

    async def _query_user(self, query: str, variables: dict[str, object]) -> dict[str, Any]:
        """Execute a GraphQL query and return its ``user`` object.

        Raises:
            RateLimitExhaustedError: On 429, or a rate-limit message or error.
            UserNotFoundError: If the ``user`` field is null or missing.
            GitHubAPIError: For any other non-200 response.
        """
        response = await self._client.post(
            self._config.fetch.api_url,
            json={"query": query, "variables": variables},
        )
        try:
            body: Any = response.json() if response.content else {}
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if response.status_code == 429 or _is_rate_limited(body):
            reset_header = response.headers.get("X-RateLimit-Reset")
            reset_at = (
                datetime.fromtimestamp(int(reset_header), tz=UTC)
                if reset_header and reset_header.isdigit()
                else None
            )
            raise RateLimitExhaustedError(reset_at=reset_at)

        if response.status_code != 200:
            remaining = response.headers.get("X-RateLimit-Remaining")
            raise GitHubAPIError(
                message=f"GitHub API returned {response.status_code}",
                status_code=response.status_code,
                rate_limit_remaining=int(remaining) if remaining else None,
            )

        data = body.get("data") or {}
        user = data.get("user")
        if user is None:
            raise UserNotFoundError(login=str(variables.get("login", "unknown")))
        return user  # type: ignore[no-any-return]

    async def fetch_raw_stats(self, login: str) -> RawUserStats:
        """Fetch activity, issues, pull requests and repositories concurrently."""
        fetch = self._config.fetch
        activity, issues, pulls, repos = await asyncio.gather(
            self._query_user(_ACTIVITY_QUERY, {"login": login}),
            self._query_user(_ISSUE_QUERY, {"login": login}),
            self._query_user(_PULL_REQUEST_QUERY, {"login": login}),
            self._query_user(
                _REPOSITORY_QUERY,
                {
                    "login": login,
                    "repoLimit": fetch.repository_limit,
                    "langLimit": fetch.languages_per_repository,
                },
            ),
        )

        contributions = activity.get("contributionsCollection") or {}
        repo_connection = repos.get("repositories") or {}
        repositories: list[RepositoryStats] = []
        for node in repo_connection.get("nodes") or []:
            if node is None:
                continue
            language_nodes = (node.get("languages") or {}).get("nodes") or []
            repositories.append(
                RepositoryStats(
                    stargazer_count=_total(node.get("stargazers")),
                    languages=[lang["name"] for lang in language_nodes if lang],
                    created_at=node.get("createdAt"),
                )
            )

        stats = RawUserStats(
            login=login,
            created_at=activity.get("createdAt"),
            total_commit_contributions=int(contributions.get("totalCommitContributions") or 0),
            restricted_contributions_count=int(
                contributions.get("restrictedContributionsCount") or 0
            ),
            total_pull_request_review_contributions=int(
                contributions.get("totalPullRequestReviewContributions") or 0
            ),
            total_organizations=_total(activity.get("organizations")),
            total_followers=_total(activity.get("followers")),
            open_issues=_total(issues.get("openIssues")),
            closed_issues=_total(issues.get("closedIssues")),
            total_pull_requests=_total(pulls.get("pullRequests")),
            total_repositories=_total(repo_connection),
            repositories=repositories,
        )
        logger.info(
            "Fetched stats for %s: %d repositories", login, len(stats.repositories)
        )
        return stats

    async def fetch_user_metrics(self, login: str) -> UserMetrics:
        """Fetch raw statistics for *login* and aggregate them."""
        stats = await self.fetch_raw_stats(login)
        return aggregate_metrics(stats)

    async def fetch_viewer_login(self) -> str:
        """Return the login that owns the configured token."""
        response = await self._client.post(
            self._config.fetch.api_url,
            json={"query": "query { viewer { login } }"},
        )
        if response.status_code != 200:
            raise GitHubAPIError(
                message=f"GitHub API returned {response.status_code}",
                status_code=response.status_code,
            )
        body = response.json()
        viewer = (body.get("data") or {}).get("viewer") if isinstance(body, dict) else None
        if not viewer:
            raise GitHubAPIError("Token does not resolve to a user", status_code=401)
        return str(viewer["login"])
