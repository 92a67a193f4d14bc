"""Tests for rank evaluation."""

from __future__ import annotations

import pytest

from profile_trophy.catalog import get_archetype
from profile_trophy.models import RankThreshold, RankTier
from profile_trophy.ranking import (
    abridge_score,
    evaluate_rank,
    evaluate_trophy,
    next_rank_progress,
    select_threshold,
    sort_thresholds,
)


def _t(tier: RankTier, score: int, message: str = "") -> RankThreshold:
    return RankThreshold(tier=tier, message=message or tier.value, required_score=score)


COMMITS = get_archetype("Commits").thresholds


class TestAbridgeScore:
    @pytest.mark.parametrize(
        ("score", "expected"),
        [
            (0, "0pt"),
            (5, "5pt"),
            (-5, "-5pt"),
            (999, "999pt"),
            (1000, "1.0kpt"),
            (1500, "1.5kpt"),
            (-2500, "-2.5kpt"),
            (-999, "-999pt"),
        ],
    )
    def test_formats(self, score: int, expected: str) -> None:
        assert abridge_score(score) == expected


class TestSelectThreshold:
    def test_input_order_does_not_matter(self) -> None:
        shuffled = [_t(RankTier.C, 1), _t(RankTier.S, 100), _t(RankTier.A, 10)]
        assert [t.tier for t in sort_thresholds(shuffled)] == [
            RankTier.S, RankTier.A, RankTier.C,
        ]
        matched = select_threshold(50, shuffled)
        assert matched is not None
        assert matched.tier == RankTier.A

    def test_none_when_below_lowest(self) -> None:
        assert select_threshold(0, COMMITS) is None

    def test_exact_boundary_qualifies(self) -> None:
        matched = select_threshold(1000, COMMITS)
        assert matched is not None
        assert matched.tier == RankTier.S


class TestEvaluateRank:
    def test_below_lowest_is_unknown(self) -> None:
        result = evaluate_rank(0, COMMITS)
        assert result.tier == RankTier.UNKNOWN
        assert result.top_message == "Unknown"
        assert result.bottom_message == "0pt"
        assert result.progress == 0.0
        assert result.matched is None

    def test_override_replaces_score_text(self) -> None:
        result = evaluate_rank(0, COMMITS, override_text="Joined 2008")
        assert result.tier == RankTier.UNKNOWN
        assert result.bottom_message == "Joined 2008"

    def test_matched_message(self) -> None:
        result = evaluate_rank(1500, COMMITS)
        assert result.tier == RankTier.S
        assert result.top_message == "Super Committer"
        assert result.bottom_message == "1.5kpt"

    def test_top_tier(self) -> None:
        result = evaluate_rank(10_000, COMMITS)
        assert result.tier == RankTier.SSS
        assert result.top_message == "God Committer"
        assert result.progress == 1.0


class TestNextRankProgress:
    def test_unknown_is_zero(self) -> None:
        assert next_rank_progress(0, None, COMMITS) == 0.0

    def test_halfway(self) -> None:
        matched = select_threshold(1500, COMMITS)
        assert next_rank_progress(1500, matched, COMMITS) == pytest.approx(0.5)

    def test_fraction_from_lowest_tier(self) -> None:
        matched = select_threshold(5, COMMITS)
        assert matched is not None and matched.tier == RankTier.C
        assert next_rank_progress(5, matched, COMMITS) == pytest.approx(4 / 9)

    def test_secret_is_complete(self) -> None:
        table = (_t(RankTier.SECRET, 1),)
        assert next_rank_progress(1, table[0], table) == 1.0

    def test_sss_is_complete(self) -> None:
        matched = select_threshold(4000, COMMITS)
        assert next_rank_progress(4000, matched, COMMITS) == 1.0

    def test_missing_next_tier_is_complete(self) -> None:
        table = (_t(RankTier.C, 1), _t(RankTier.A, 10))
        matched = select_threshold(12, table)
        assert matched is not None and matched.tier == RankTier.A
        assert next_rank_progress(12, matched, table) == 1.0

    def test_non_positive_distance_is_complete(self) -> None:
        table = (_t(RankTier.B, 10), _t(RankTier.A, 10))
        assert next_rank_progress(12, table[0], table) == 1.0

    def test_progress_is_clamped(self) -> None:
        table = (_t(RankTier.B, 10), _t(RankTier.A, 20))
        assert next_rank_progress(50, table[0], table) == 1.0
        assert next_rank_progress(0, table[0], table) == 0.0


class TestEvaluateTrophy:
    def test_hidden_override_trophy(self) -> None:
        trophy = evaluate_trophy(get_archetype("AncientUser"), 1)
        assert trophy.tier == RankTier.SECRET
        assert trophy.top_message == "Ancient User"
        assert trophy.bottom_message == "Before 2010"
        assert trophy.progress == 1.0

    def test_records_score(self) -> None:
        trophy = evaluate_trophy(get_archetype("Stars"), 250)
        assert trophy.score == 250
        assert trophy.progress == pytest.approx(0.1)
