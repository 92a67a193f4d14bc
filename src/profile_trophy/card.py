"""End-to-end trophy card pipeline."""

from __future__ import annotations

import logging
import os

from profile_trophy.config import LayoutConfig, ProfileTrophyConfig, load_config
from profile_trophy.filters import apply_filters
from profile_trophy.layout import place_trophies
from profile_trophy.models import TrophyCard, UserMetrics
from profile_trophy.options import TrophyOptions
from profile_trophy.trophies import TrophySetBuilder

logger = logging.getLogger(__name__)


def build_card(
    metrics: UserMetrics,
    options: TrophyOptions | None = None,
    layout: LayoutConfig | None = None,
) -> TrophyCard:
    """Turn a metrics record into laid-out trophies.

    Pure and deterministic: build every trophy, filter and order them, then
    place the survivors on the grid.
    """
    if layout is None:
        layout = LayoutConfig()
    if options is None:
        options = TrophyOptions.from_layout(layout)

    trophies = TrophySetBuilder().build(metrics)
    selected = apply_filters(trophies, options)
    return place_trophies(selected, options, layout)


async def fetch_trophy_card(
    login: str | None = None,
    options: TrophyOptions | None = None,
    config: ProfileTrophyConfig | None = None,
    token: str | None = None,
) -> TrophyCard:
    """Convenience function: fetch a user's statistics and build their card.

    Parameters
    ----------
    login:
        GitHub username. When *None*, the owner of *token* is used.
    options:
        Filtering and layout options; configured defaults when *None*.
    config:
        Optional configuration; loaded from the usual sources when *None*.
    token:
        GitHub token; falls back to the ``GITHUB_TOKEN`` env var.
    """
    from profile_trophy.github_client import GitHubClient

    if config is None:
        config = load_config()

    if token is None:
        token = os.environ.get("GITHUB_TOKEN", "")

    async with GitHubClient(token=token, config=config) as client:
        if login is None:
            login = await client.fetch_viewer_login()
            logger.info("Using token owner %s", login)
        metrics = await client.fetch_user_metrics(login)

    return build_card(metrics, options, config.layout)
