"""Shared test fixtures for Profile Trophy tests."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from profile_trophy.models import RawUserStats, RepositoryStats, UserMetrics


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 6, 1, tzinfo=UTC)


@pytest.fixture
def sample_metrics() -> UserMetrics:
    return UserMetrics(
        total_commits=1500,
        total_stargazers=250,
        total_followers=5,
        total_issues=0,
        total_pull_requests=0,
        total_repositories=2,
        total_reviews=0,
        language_count=1,
        duration_year=1,
        duration_days=0,
    )


@pytest.fixture
def all_super_metrics() -> UserMetrics:
    return UserMetrics(
        total_commits=1000,
        total_stargazers=200,
        total_followers=200,
        total_issues=200,
        total_pull_requests=200,
        total_repositories=40,
        total_reviews=45,
    )


@pytest.fixture
def empty_metrics() -> UserMetrics:
    return UserMetrics()


@pytest.fixture
def sample_raw_stats() -> RawUserStats:
    return RawUserStats(
        login="octocat",
        created_at="2015-03-01T00:00:00Z",
        total_commit_contributions=900,
        restricted_contributions_count=100,
        total_pull_request_review_contributions=12,
        total_organizations=4,
        total_followers=30,
        open_issues=3,
        closed_issues=17,
        total_pull_requests=55,
        total_repositories=12,
        repositories=[
            RepositoryStats(
                stargazer_count=120,
                languages=["Python", "Rust"],
                created_at="2016-01-01T00:00:00Z",
            ),
            RepositoryStats(
                stargazer_count=30,
                languages=["Python"],
                created_at="2009-05-01T00:00:00Z",
            ),
            RepositoryStats(
                stargazer_count=0,
                languages=["Go", "Rust"],
                created_at="2019-09-09T00:00:00Z",
            ),
        ],
    )
