"""Build the full trophy set for a metrics record."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from profile_trophy.catalog import ALL_SUPER_RANK_TITLE, PRIMARY_TROPHIES, TROPHY_CATALOG
from profile_trophy.models import TrophyArchetype, TrophyInstance, UserMetrics
from profile_trophy.ranking import evaluate_trophy

logger = logging.getLogger(__name__)


def is_all_super_rank(primary: Sequence[TrophyInstance]) -> bool:
    """True when every primary trophy holds an S-family tier."""
    return all(trophy.tier.letter == "S" for trophy in primary)


class TrophySetBuilder:
    """Evaluate every catalog archetype against a user's metrics."""

    def __init__(
        self,
        catalog: Sequence[TrophyArchetype] = TROPHY_CATALOG,
        primary_titles: frozenset[str] = PRIMARY_TROPHIES,
    ) -> None:
        self.catalog = tuple(catalog)
        self.primary_titles = primary_titles

    def build(self, metrics: UserMetrics) -> list[TrophyInstance]:
        """Return one instance per archetype, in catalog declaration order.

        The all-super-rank trophy is scored only once every primary trophy
        has been resolved.
        """
        resolved: dict[str, TrophyInstance] = {}
        for archetype in self.catalog:
            if archetype.title in self.primary_titles:
                resolved[archetype.title] = self._evaluate(archetype, metrics)

        primary = [resolved[title] for title in resolved]
        super_rank_score = 1 if primary and is_all_super_rank(primary) else 0

        for archetype in self.catalog:
            if archetype.title in resolved:
                continue
            if archetype.title == ALL_SUPER_RANK_TITLE:
                resolved[archetype.title] = evaluate_trophy(archetype, super_rank_score)
            else:
                resolved[archetype.title] = self._evaluate(archetype, metrics)

        trophies = [resolved[archetype.title] for archetype in self.catalog]
        logger.debug(
            "Built %d trophies (%d ranked)",
            len(trophies),
            sum(1 for t in trophies if t.matched_threshold is not None),
        )
        return trophies

    @staticmethod
    def _evaluate(archetype: TrophyArchetype, metrics: UserMetrics) -> TrophyInstance:
        score = int(getattr(metrics, archetype.metric)) if archetype.metric else 0
        return evaluate_trophy(archetype, score)


def build_trophies(metrics: UserMetrics) -> list[TrophyInstance]:
    """Build the trophy set from the default catalog."""
    return TrophySetBuilder().build(metrics)
