"""Request options for trophy selection and layout."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

import httpx
from pydantic import BaseModel

from profile_trophy.config import LayoutConfig

AUTO_COLUMNS = -1
EXCLUDE_PREFIX = "-"
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class TrophyOptions(BaseModel):
    """Options bundle consumed by the filter pipeline and layout engine.

    ``no_background`` and ``no_frame`` are carried through untouched for
    the renderer.
    """
    titles: list[str] = []
    ranks: list[str] = []
    columns: int = 8
    rows: int = 3
    panel_size: int = 110
    margin_width: int = 0
    margin_height: int = 0
    no_background: bool = False
    no_frame: bool = False

    @classmethod
    def from_layout(cls, layout: LayoutConfig, **overrides: object) -> TrophyOptions:
        """Build options seeded from configured layout defaults."""
        values: dict[str, object] = {
            "columns": layout.max_columns,
            "rows": layout.max_rows,
            "panel_size": layout.panel_size,
            "margin_width": layout.margin_width,
            "margin_height": layout.margin_height,
            "no_background": layout.no_background,
            "no_frame": layout.no_frame,
        }
        values.update(overrides)
        return cls(**values)  # type: ignore[arg-type]

    @classmethod
    def from_query(
        cls,
        query: str | Mapping[str, str | Sequence[str]] | httpx.QueryParams | None,
        layout: LayoutConfig | None = None,
    ) -> TrophyOptions:
        """Normalize raw query parameters into options.

        Malformed values never raise: they fall back to the layout defaults.
        """
        if layout is None:
            layout = LayoutConfig()
        params = httpx.QueryParams(query or "")

        columns = parse_int(params.get("column"), layout.max_columns)
        if columns != AUTO_COLUMNS and columns < 1:
            columns = layout.max_columns

        return cls(
            titles=split_csv(params.get_list("title")),
            ranks=split_csv(params.get_list("rank")),
            columns=columns,
            rows=max(parse_int(params.get("row"), layout.max_rows), 1),
            panel_size=layout.panel_size,
            margin_width=parse_int(params.get("margin-w"), layout.margin_width),
            margin_height=parse_int(params.get("margin-h"), layout.margin_height),
            no_background=parse_bool(params.get("no-bg"), layout.no_background),
            no_frame=parse_bool(params.get("no-frame"), layout.no_frame),
        )

    @property
    def include_titles(self) -> list[str]:
        return [title for title in self.titles if not title.startswith(EXCLUDE_PREFIX)]

    @property
    def exclude_titles(self) -> list[str]:
        return [
            title.removeprefix(EXCLUDE_PREFIX)
            for title in self.titles
            if title.startswith(EXCLUDE_PREFIX)
        ]


def parse_int(value: str | None, default: int) -> int:
    """Parse a plain ASCII 32-bit integer, falling back to *default*.

    An optional sign is allowed. Whitespace, underscores and non-ASCII
    digits are rejected, as are values outside the 32-bit range.
    """
    if value is None:
        return default
    digits = value[1:] if value.startswith(("+", "-")) else value
    if not (digits.isascii() and digits.isdigit()):
        return default
    number = int(value)
    if not INT32_MIN <= number <= INT32_MAX:
        return default
    return number


def parse_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value == "true"


def split_csv(values: Iterable[str]) -> list[str]:
    """Flatten comma-separated values, trimming blanks and keeping order."""
    items: list[str] = []
    for value in values:
        for item in value.split(","):
            item = item.strip()
            if item:
                items.append(item)
    return items


def query_username(
    query: str | Mapping[str, str | Sequence[str]] | httpx.QueryParams | None,
) -> str | None:
    """Return the ``username`` parameter, if present."""
    return httpx.QueryParams(query or "").get("username")
