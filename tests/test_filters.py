"""Tests for the trophy filter pipeline."""

from __future__ import annotations

from profile_trophy.catalog import get_archetype
from profile_trophy.filters import (
    apply_filters,
    filter_by_exclusion_titles,
    filter_by_ranks,
    filter_by_titles,
    filter_hidden,
    sort_by_rank,
)
from profile_trophy.models import RankTier, TrophyInstance, UserMetrics
from profile_trophy.options import TrophyOptions
from profile_trophy.ranking import evaluate_trophy
from profile_trophy.trophies import build_trophies


def _trophy(title: str, score: int) -> TrophyInstance:
    return evaluate_trophy(get_archetype(title), score)


def _titles(trophies: list[TrophyInstance]) -> list[str]:
    return [t.title for t in trophies]


class TestFilterHidden:
    def test_drops_locked_hidden(self) -> None:
        trophies = [_trophy("MultiLanguage", 3), _trophy("Stars", 0)]
        assert _titles(filter_hidden(trophies)) == ["Stars"]

    def test_keeps_unlocked_hidden(self) -> None:
        trophies = [_trophy("MultiLanguage", 10)]
        assert _titles(filter_hidden(trophies)) == ["MultiLanguage"]

    def test_does_not_mutate_input(self) -> None:
        trophies = [_trophy("MultiLanguage", 3)]
        filter_hidden(trophies)
        assert len(trophies) == 1


class TestFilterByTitles:
    def test_matches_aliases(self) -> None:
        trophies = [_trophy("PullRequest", 5), _trophy("Stars", 5), _trophy("Issues", 5)]
        assert _titles(filter_by_titles(trophies, ["PR", "Star"])) == ["PullRequest", "Stars"]

    def test_case_sensitive(self) -> None:
        trophies = [_trophy("Stars", 5)]
        assert filter_by_titles(trophies, ["stars"]) == []


class TestFilterByExclusionTitles:
    def test_excludes_by_title(self) -> None:
        trophies = [_trophy("Stars", 5), _trophy("Issues", 5)]
        assert _titles(filter_by_exclusion_titles(trophies, ["-Stars"])) == ["Issues"]

    def test_alias_does_not_exclude(self) -> None:
        trophies = [_trophy("Stars", 5)]
        assert _titles(filter_by_exclusion_titles(trophies, ["-Star"])) == ["Stars"]

    def test_bare_entries_ignored(self) -> None:
        trophies = [_trophy("Stars", 5)]
        assert _titles(filter_by_exclusion_titles(trophies, ["Stars"])) == ["Stars"]


class TestFilterByRanks:
    def _mixed(self) -> list[TrophyInstance]:
        return [
            _trophy("Commits", 1500),   # S
            _trophy("Stars", 30),       # A
            _trophy("Followers", 5),    # C
            _trophy("Issues", 0),       # ?
        ]

    def test_inclusion(self) -> None:
        assert _titles(filter_by_ranks(self._mixed(), ["S", "C"])) == ["Commits", "Followers"]

    def test_exclusion(self) -> None:
        assert _titles(filter_by_ranks(self._mixed(), ["-S", "-A"])) == ["Followers", "Issues"]

    def test_mixed_list_only_applies_exclusions(self) -> None:
        # Bare "C" is neither an exclusion nor applied as an inclusion.
        result = filter_by_ranks(self._mixed(), ["-S", "C"])
        assert _titles(result) == ["Stars", "Followers", "Issues"]

    def test_unknown_tier_name(self) -> None:
        assert _titles(filter_by_ranks(self._mixed(), ["-?"])) == [
            "Commits", "Stars", "Followers",
        ]

    def test_secret_tier_name(self) -> None:
        trophies = [_trophy("OGUser", 1), _trophy("Stars", 5)]
        assert _titles(filter_by_ranks(trophies, ["SECRET"])) == ["OGUser"]


class TestSortByRank:
    def test_prestige_order_and_stability(self) -> None:
        trophies = [
            _trophy("Issues", 0),
            _trophy("Followers", 5),
            _trophy("Stars", 250),
            _trophy("Repositories", 2),
            _trophy("Commits", 1500),
            _trophy("OGUser", 1),
        ]
        assert _titles(sort_by_rank(trophies)) == [
            "OGUser", "Stars", "Commits", "Followers", "Repositories", "Issues",
        ]


class TestApplyFilters:
    def test_default_options(self, sample_metrics: UserMetrics) -> None:
        result = apply_filters(build_trophies(sample_metrics), TrophyOptions())
        assert _titles(result) == [
            "Stars",
            "Commits",
            "Followers",
            "Repositories",
            "Issues",
            "PullRequest",
            "Reviews",
            "Experience",
        ]
        assert all(not t.hidden for t in result)

    def test_include_and_exclude_titles(self, sample_metrics: UserMetrics) -> None:
        options = TrophyOptions(titles=["Star", "Commit", "Follower", "-Commits"])
        result = apply_filters(build_trophies(sample_metrics), options)
        assert _titles(result) == ["Stars", "Followers"]

    def test_exclusion_only_titles(self, sample_metrics: UserMetrics) -> None:
        options = TrophyOptions(titles=["-Issues", "-Reviews"])
        result = apply_filters(build_trophies(sample_metrics), options)
        assert "Issues" not in _titles(result)
        assert "Reviews" not in _titles(result)
        assert "Stars" in _titles(result)

    def test_hidden_locked_not_resurrected_by_title(self, sample_metrics: UserMetrics) -> None:
        options = TrophyOptions(titles=["MultiLanguage", "OGUser"])
        assert apply_filters(build_trophies(sample_metrics), options) == []

    def test_rank_exclusion(self, sample_metrics: UserMetrics) -> None:
        options = TrophyOptions(ranks=["-S", "-A"])
        result = apply_filters(build_trophies(sample_metrics), options)
        assert all(t.tier not in (RankTier.S, RankTier.A) for t in result)
        assert "Followers" in _titles(result)

    def test_rank_inclusion(self, sample_metrics: UserMetrics) -> None:
        options = TrophyOptions(ranks=["S"])
        result = apply_filters(build_trophies(sample_metrics), options)
        assert _titles(result) == ["Stars", "Commits"]

    def test_idempotent(self, sample_metrics: UserMetrics) -> None:
        options = TrophyOptions(titles=["-Issues"], ranks=["-?"])
        once = apply_filters(build_trophies(sample_metrics), options)
        twice = apply_filters(once, options)
        assert once == twice
