"""Static catalog of trophy archetypes and their threshold tables."""

from __future__ import annotations

from typing import Any

from profile_trophy.models import RankThreshold, RankTier, TrophyArchetype


def _table(*rows: tuple[RankTier, str, int]) -> tuple[RankThreshold, ...]:
    return tuple(
        RankThreshold(tier=tier, message=message, required_score=required_score)
        for tier, message, required_score in rows
    )


def _secret(message: str, required_score: int) -> tuple[RankThreshold, ...]:
    return _table((RankTier.SECRET, message, required_score))


_CATALOG_RECORDS: list[dict[str, Any]] = [
    {
        "title": "Stars",
        "aliases": {"Star", "Stars"},
        "metric": "total_stargazers",
        "thresholds": _table(
            (RankTier.SSS, "Super Stargazer", 2000),
            (RankTier.SS, "High Stargazer", 700),
            (RankTier.S, "Stargazer", 200),
            (RankTier.AAA, "Super Star", 100),
            (RankTier.AA, "High Star", 50),
            (RankTier.A, "You are a Star", 30),
            (RankTier.B, "Middle Star", 10),
            (RankTier.C, "First Star", 1),
        ),
    },
    {
        "title": "Commits",
        "aliases": {"Commit", "Commits"},
        "metric": "total_commits",
        "thresholds": _table(
            (RankTier.SSS, "God Committer", 4000),
            (RankTier.SS, "Deep Committer", 2000),
            (RankTier.S, "Super Committer", 1000),
            (RankTier.AAA, "Ultra Committer", 500),
            (RankTier.AA, "Hyper Committer", 200),
            (RankTier.A, "High Committer", 100),
            (RankTier.B, "Middle Committer", 10),
            (RankTier.C, "First Commit", 1),
        ),
    },
    {
        "title": "Followers",
        "aliases": {"Follower", "Followers"},
        "metric": "total_followers",
        "thresholds": _table(
            (RankTier.SSS, "Super Celebrity", 1000),
            (RankTier.SS, "Ultra Celebrity", 400),
            (RankTier.S, "Hyper Celebrity", 200),
            (RankTier.AAA, "Famous User", 100),
            (RankTier.AA, "Active User", 50),
            (RankTier.A, "Dynamic User", 20),
            (RankTier.B, "Many Friends", 10),
            (RankTier.C, "First Friend", 1),
        ),
    },
    {
        "title": "Issues",
        "aliases": {"Issue", "Issues"},
        "metric": "total_issues",
        "thresholds": _table(
            (RankTier.SSS, "God Issuer", 1000),
            (RankTier.SS, "Deep Issuer", 500),
            (RankTier.S, "Super Issuer", 200),
            (RankTier.AAA, "Ultra Issuer", 100),
            (RankTier.AA, "Hyper Issuer", 50),
            (RankTier.A, "High Issuer", 20),
            (RankTier.B, "Middle Issuer", 10),
            (RankTier.C, "First Issue", 1),
        ),
    },
    {
        "title": "PullRequest",
        "aliases": {"PR", "PullRequest", "Pulls", "Puller"},
        "metric": "total_pull_requests",
        "thresholds": _table(
            (RankTier.SSS, "God Puller", 1000),
            (RankTier.SS, "Deep Puller", 500),
            (RankTier.S, "Super Puller", 200),
            (RankTier.AAA, "Ultra Puller", 100),
            (RankTier.AA, "Hyper Puller", 50),
            (RankTier.A, "High Puller", 20),
            (RankTier.B, "Middle Puller", 10),
            (RankTier.C, "First Pull", 1),
        ),
    },
    {
        "title": "Repositories",
        "aliases": {"Repo", "Repository", "Repositories"},
        "metric": "total_repositories",
        "thresholds": _table(
            (RankTier.SSS, "God Repo Creator", 50),
            (RankTier.SS, "Deep Repo Creator", 45),
            (RankTier.S, "Super Repo Creator", 40),
            (RankTier.AAA, "Ultra Repo Creator", 35),
            (RankTier.AA, "Hyper Repo Creator", 30),
            (RankTier.A, "High Repo Creator", 20),
            (RankTier.B, "Middle Repo Creator", 10),
            (RankTier.C, "First Repository", 1),
        ),
    },
    {
        "title": "Reviews",
        "aliases": {"Review", "Reviews"},
        "metric": "total_reviews",
        "thresholds": _table(
            (RankTier.SSS, "God Reviewer", 70),
            (RankTier.SS, "Deep Reviewer", 57),
            (RankTier.S, "Super Reviewer", 45),
            (RankTier.AAA, "Ultra Reviewer", 30),
            (RankTier.AA, "Hyper Reviewer", 20),
            (RankTier.A, "Active Reviewer", 8),
            (RankTier.B, "Intermediate Reviewer", 3),
            (RankTier.C, "New Reviewer", 1),
        ),
    },
    {
        # Score is derived from the primary trophies, see TrophySetBuilder.
        "title": "AllSuperRank",
        "hidden": True,
        "thresholds": _secret("S Rank Hacker", 1),
        "bottom_override": "All S Rank",
    },
    {
        "title": "MultiLanguage",
        "aliases": {"MultipleLang", "MultiLanguage"},
        "hidden": True,
        "metric": "language_count",
        "thresholds": _secret("Rainbow Lang User", 10),
    },
    {
        "title": "LongTimeUser",
        "hidden": True,
        "metric": "duration_year",
        "thresholds": _secret("Village Elder", 10),
    },
    {
        "title": "AncientUser",
        "hidden": True,
        "metric": "ancient_account",
        "thresholds": _secret("Ancient User", 1),
        "bottom_override": "Before 2010",
    },
    {
        "title": "OGUser",
        "hidden": True,
        "metric": "og_account",
        "thresholds": _secret("OG User", 1),
        "bottom_override": "Joined 2008",
    },
    {
        "title": "Joined2020",
        "hidden": True,
        "metric": "joined_2020",
        "thresholds": _secret("Everything started...", 1),
        "bottom_override": "Joined 2020",
    },
    {
        "title": "Organizations",
        "aliases": {"Organizations", "Orgs", "Teams"},
        "hidden": True,
        "metric": "total_organizations",
        "thresholds": _secret("Jack of all Trades", 3),
    },
    {
        "title": "Experience",
        "aliases": {"Experience", "Duration", "Since"},
        "metric": "duration_days",
        "thresholds": _table(
            (RankTier.SSS, "Seasoned Veteran", 70),
            (RankTier.SS, "Grandmaster", 55),
            (RankTier.S, "Master Dev", 40),
            (RankTier.AAA, "Expert Dev", 28),
            (RankTier.AA, "Experienced Dev", 18),
            (RankTier.A, "Intermediate Dev", 11),
            (RankTier.B, "Junior Dev", 6),
            (RankTier.C, "Newbie", 2),
        ),
    },
]

TROPHY_CATALOG: tuple[TrophyArchetype, ...] = tuple(
    TrophyArchetype(**record) for record in _CATALOG_RECORDS
)

ALL_SUPER_RANK_TITLE = "AllSuperRank"

PRIMARY_TROPHIES: frozenset[str] = frozenset({
    "Stars",
    "Commits",
    "Followers",
    "Issues",
    "PullRequest",
    "Repositories",
    "Reviews",
})

_BY_TITLE: dict[str, TrophyArchetype] = {
    archetype.title: archetype for archetype in TROPHY_CATALOG
}


def get_archetype(title: str) -> TrophyArchetype:
    """Look up a catalog archetype by its title.

    Raises:
        KeyError: If no archetype carries *title*.
    """
    return _BY_TITLE[title]

