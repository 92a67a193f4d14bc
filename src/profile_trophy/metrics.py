"""Normalize raw provider statistics into a :class:`UserMetrics` record."""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta

from profile_trophy.models import RawUserStats, UserMetrics

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

OG_ACCOUNT_YEAR = 2008
ANCIENT_ACCOUNT_YEAR = 2010
JOINED_2020_YEAR = 2020


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO-8601 / RFC 3339 timestamp, returning None when unusable."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def _timestamp_or_epoch(value: str | None) -> datetime:
    parsed = parse_timestamp(value)
    if parsed is None:
        logger.debug("Unparseable timestamp %r, using epoch", value)
        return EPOCH
    return parsed


def earliest_activity(stats: RawUserStats) -> datetime:
    """Earliest of the account creation time and every repository's creation time.

    Ties keep the first candidate seen, account first, then repositories in
    fetch order. A missing account date counts as the epoch; repository
    dates that cannot be parsed are skipped.
    """
    earliest = _timestamp_or_epoch(stats.created_at)
    for repo in stats.repositories:
        created = parse_timestamp(repo.created_at)
        if created is None:
            continue
        if created < earliest:
            earliest = created
    return earliest


def account_duration(earliest: datetime, now: datetime) -> tuple[int, int]:
    """Return ``(duration_year, duration_days)`` for the span since *earliest*.

    ``duration_year`` is the calendar year of the elapsed span laid over the
    epoch, minus 1970. ``duration_days`` counts whole hundreds of days.
    """
    elapsed = max(now - earliest, timedelta(0))
    duration_year = (EPOCH + elapsed).year - 1970
    duration_days = elapsed.days // 100
    return duration_year, duration_days


def aggregate_metrics(stats: RawUserStats, now: datetime | None = None) -> UserMetrics:
    """Build the immutable metrics record for one user."""
    if now is None:
        now = datetime.now(UTC)

    total_stargazers = 0
    languages: set[str] = set()
    for repo in stats.repositories:
        total_stargazers += repo.stargazer_count
        languages.update(repo.languages)

    earliest = earliest_activity(stats)
    duration_year, duration_days = account_duration(earliest, now)
    earliest_year = earliest.year

    return UserMetrics(
        total_commits=stats.restricted_contributions_count + stats.total_commit_contributions,
        total_followers=stats.total_followers,
        total_issues=stats.open_issues + stats.closed_issues,
        total_organizations=stats.total_organizations,
        total_pull_requests=stats.total_pull_requests,
        total_reviews=stats.total_pull_request_review_contributions,
        total_stargazers=total_stargazers,
        total_repositories=stats.total_repositories,
        language_count=len(languages),
        duration_year=duration_year,
        duration_days=duration_days,
        ancient_account=int(earliest_year <= ANCIENT_ACCOUNT_YEAR),
        joined_2020=int(earliest_year == JOINED_2020_YEAR),
        og_account=int(earliest_year <= OG_ACCOUNT_YEAR),
    )
