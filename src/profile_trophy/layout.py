"""Grid layout: canvas size and panel origins for an ordered trophy list."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from pydantic import BaseModel

from profile_trophy.config import LayoutConfig
from profile_trophy.models import PlacedTrophy, TrophyCard, TrophyInstance
from profile_trophy.options import AUTO_COLUMNS, TrophyOptions

logger = logging.getLogger(__name__)


class GridLayout(BaseModel):
    """Resolved grid geometry."""
    width: int
    height: int
    columns: int
    rows: int
    positions: list[tuple[int, int]] = []


def resolve_columns(count: int, requested: int, default: int) -> int:
    if requested == AUTO_COLUMNS:
        return max(count, 1)
    if requested <= 0:
        return max(default, 1)
    return requested


def resolve_rows(count: int, columns: int, max_rows: int) -> int:
    if count == 0:
        return 1
    rows = math.ceil(count / columns)
    return max(min(rows, max_rows), 1)


def compute_layout(
    count: int,
    options: TrophyOptions,
    layout: LayoutConfig | None = None,
) -> GridLayout:
    """Compute canvas dimensions and the origin of every visible panel.

    Only the first ``columns * rows`` indices receive a position; anything
    past the last row is left out rather than wrapped.
    """
    default_columns = layout.max_columns if layout is not None else LayoutConfig().max_columns
    columns = resolve_columns(count, options.columns, default_columns)
    rows = resolve_rows(count, columns, options.rows)

    panel = options.panel_size
    width = panel * columns + options.margin_width * (columns - 1)
    height = panel * rows + options.margin_height * (rows - 1)

    positions: list[tuple[int, int]] = []
    for index in range(min(count, columns * rows)):
        col = index % columns
        row = index // columns
        positions.append(
            ((panel + options.margin_width) * col, (panel + options.margin_height) * row)
        )

    return GridLayout(
        width=width, height=height, columns=columns, rows=rows, positions=positions
    )


def place_trophies(
    trophies: Sequence[TrophyInstance],
    options: TrophyOptions,
    layout: LayoutConfig | None = None,
) -> TrophyCard:
    """Lay out an already filtered and ordered trophy sequence."""
    grid = compute_layout(len(trophies), options, layout)
    placed = [
        PlacedTrophy(**dict(trophy), x=x, y=y)
        for trophy, (x, y) in zip(trophies, grid.positions, strict=False)
    ]
    if len(placed) < len(trophies):
        logger.debug(
            "Omitted %d trophies beyond row %d", len(trophies) - len(placed), grid.rows
        )
    return TrophyCard(
        width=grid.width,
        height=grid.height,
        columns=grid.columns,
        rows=grid.rows,
        panel_size=options.panel_size,
        no_background=options.no_background,
        no_frame=options.no_frame,
        trophies=placed,
    )
