"""Filtering and ordering applied to a built trophy set.

Each stage is a pure function from one ordered sequence of trophies to a
new one. :func:`apply_filters` runs them in the only order that gives the
documented results: hidden suppression, title inclusion, title exclusion,
rank filtering, then a stable sort by rank.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TypeVar

from profile_trophy.models import RankTier, TrophyInstance
from profile_trophy.options import EXCLUDE_PREFIX, TrophyOptions

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=TrophyInstance)


def filter_hidden(trophies: Iterable[T]) -> list[T]:
    """Drop hidden trophies that have not been unlocked."""
    return [t for t in trophies if not t.hidden or t.tier is not RankTier.UNKNOWN]


def filter_by_titles(trophies: Iterable[T], titles: Iterable[str]) -> list[T]:
    """Keep trophies answering to at least one of *titles* (matched on aliases)."""
    wanted = set(titles)
    return [t for t in trophies if not t.archetype.aliases.isdisjoint(wanted)]


def filter_by_exclusion_titles(trophies: Iterable[T], titles: Iterable[str]) -> list[T]:
    """Drop trophies whose title (not alias) is one of the ``-``-prefixed *titles*."""
    excluded = {
        title.removeprefix(EXCLUDE_PREFIX)
        for title in titles
        if title.startswith(EXCLUDE_PREFIX)
    }
    if not excluded:
        return list(trophies)
    return [t for t in trophies if t.title not in excluded]


def filter_by_ranks(trophies: Iterable[T], ranks: Sequence[str]) -> list[T]:
    """Keep or drop trophies by tier name.

    A single ``-``-prefixed entry turns the whole list into an exclusion
    list: only the prefixed entries are applied and bare entries are
    ignored. Otherwise the list is an inclusion list.
    """
    if any(rank.startswith(EXCLUDE_PREFIX) for rank in ranks):
        excluded = {
            rank.removeprefix(EXCLUDE_PREFIX)
            for rank in ranks
            if rank.startswith(EXCLUDE_PREFIX)
        }
        return [t for t in trophies if t.tier.value not in excluded]

    included = set(ranks)
    return [t for t in trophies if t.tier.value in included]


def sort_by_rank(trophies: Iterable[T]) -> list[T]:
    """Most prestigious first; ties keep their incoming order."""
    return sorted(trophies, key=lambda t: t.tier.prestige)


def apply_filters(trophies: Sequence[T], options: TrophyOptions) -> list[T]:
    """Run the full filter pipeline described in the module docstring."""
    result = filter_hidden(trophies)

    if options.titles:
        include = options.include_titles
        if include:
            result = filter_by_titles(result, include)
        result = filter_by_exclusion_titles(result, options.titles)

    if options.ranks:
        result = filter_by_ranks(result, options.ranks)

    result = sort_by_rank(result)
    logger.debug("Filtered %d trophies down to %d", len(trophies), len(result))
    return result
