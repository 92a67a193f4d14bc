"""Rank evaluation: pick the best tier an archetype's score has earned."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from profile_trophy.models import (
    RANK_ORDER,
    RankThreshold,
    RankTier,
    TrophyArchetype,
    TrophyInstance,
)

UNKNOWN_MESSAGE = "Unknown"


def abridge_score(score: int) -> str:
    """Render a raw score compactly, e.g. ``5pt`` or ``-2.5kpt``."""
    magnitude = abs(score)
    if magnitude < 1:
        return "0pt"
    if magnitude > 999:
        return f"{score / 1000:.1f}kpt"
    return f"{score}pt"


def sort_thresholds(thresholds: Iterable[RankThreshold]) -> list[RankThreshold]:
    """Order thresholds from the most to the least prestigious tier."""
    return sorted(thresholds, key=lambda threshold: threshold.tier.prestige)


def select_threshold(
    score: int, thresholds: Iterable[RankThreshold]
) -> RankThreshold | None:
    """Return the most prestigious threshold met by *score*, if any."""
    for threshold in sort_thresholds(thresholds):
        if score >= threshold.required_score:
            return threshold
    return None


def next_rank_progress(
    score: int,
    matched: RankThreshold | None,
    thresholds: Iterable[RankThreshold],
) -> float:
    """Fraction of the way from the matched tier to the one above it.

    Unknown tiers report 0.0. Secret and SSS are terminal and report 1.0,
    as does any tier whose successor is missing from the table or sits at
    the same or a lower required score.
    """
    if matched is None:
        return 0.0

    tier = matched.tier
    if tier is RankTier.UNKNOWN:
        return 0.0
    if tier.prestige == 0 or tier is RankTier.SSS:
        return 1.0

    next_tier = RANK_ORDER[tier.prestige - 1]
    next_threshold = next(
        (threshold for threshold in thresholds if threshold.tier == next_tier),
        None,
    )
    if next_threshold is None:
        return 1.0

    distance = next_threshold.required_score - matched.required_score
    if distance <= 0:
        return 1.0

    progress = (score - matched.required_score) / distance
    return min(1.0, max(0.0, progress))


class RankResult(BaseModel):
    """Outcome of evaluating one score against one threshold table."""
    model_config = ConfigDict(frozen=True)

    tier: RankTier
    top_message: str
    bottom_message: str
    progress: float
    matched: RankThreshold | None = None


def evaluate_rank(
    score: int,
    thresholds: Iterable[RankThreshold],
    override_text: str | None = None,
) -> RankResult:
    """Evaluate *score* against a threshold table.

    Thresholds are considered from the most prestigious tier down,
    whatever order they are supplied in. When none is met the tier is
    Unknown and the top message reads ``Unknown``. The bottom message is
    *override_text* when given, otherwise the abridged score.
    """
    table = tuple(thresholds)
    matched = select_threshold(score, table)

    if matched is None:
        tier = RankTier.UNKNOWN
        top_message = UNKNOWN_MESSAGE
    else:
        tier = matched.tier
        top_message = matched.message

    return RankResult(
        tier=tier,
        top_message=top_message,
        bottom_message=override_text if override_text is not None else abridge_score(score),
        progress=next_rank_progress(score, matched, table),
        matched=matched,
    )


def evaluate_trophy(archetype: TrophyArchetype, score: int) -> TrophyInstance:
    """Build the :class:`TrophyInstance` for *archetype* at *score*."""
    result = evaluate_rank(score, archetype.thresholds, archetype.bottom_override)
    return TrophyInstance(
        archetype=archetype,
        tier=result.tier,
        top_message=result.top_message,
        bottom_message=result.bottom_message,
        score=score,
        progress=result.progress,
        matched_threshold=result.matched,
    )
