"""Output formatting for trophy cards."""

from __future__ import annotations

import click

from profile_trophy.models import PlacedTrophy, RankTier, TrophyCard

_TIER_COLORS: dict[str, str] = {
    "S": "yellow",
    "A": "green",
    "B": "blue",
    "C": "white",
    "?": "bright_black",
}


def _tier_color(tier: RankTier) -> str:
    if tier is RankTier.SECRET:
        return "magenta"
    return _TIER_COLORS.get(tier.letter, "white")


def _tier_label(tier: RankTier) -> str:
    return "UNKNOWN" if tier is RankTier.UNKNOWN else tier.value


def format_cli_output(card: TrophyCard, verbose: bool = False) -> str:
    """Format a trophy card for terminal display with color."""
    if not card.trophies:
        return "No trophies to show."

    lines: list[str] = []
    for trophy in card.trophies:
        tier_styled = click.style(
            f"{_tier_label(trophy.tier):>7}", fg=_tier_color(trophy.tier), bold=True
        )
        lines.append(
            f"{tier_styled}  {trophy.title}: {trophy.top_message} ({trophy.bottom_message})"
        )

    if verbose:
        lines.append("")
        lines.append(
            f"Canvas: {card.width}x{card.height} | "
            f"Grid: {card.columns} columns x {card.rows} rows | "
            f"Panel: {card.panel_size}"
        )
        lines.append("")
        lines.append("Progress to next rank:")
        for trophy in card.trophies:
            lines.append(
                f"  {trophy.title}: {trophy.progress * 100:.0f}% at ({trophy.x}, {trophy.y})"
            )

    return "\n".join(lines)


def format_json(card: TrophyCard) -> str:
    """Format a trophy card as JSON."""
    return card.model_dump_json(indent=2)


def _markdown_row(trophy: PlacedTrophy) -> str:
    return (
        f"| {trophy.title} | {_tier_label(trophy.tier)} | {trophy.top_message}"
        f" | {trophy.bottom_message} | {trophy.progress * 100:.0f}% |"
    )


def format_markdown(card: TrophyCard) -> str:
    """Format a trophy card as a Markdown table."""
    if not card.trophies:
        return "_No trophies earned yet._\n"

    lines: list[str] = [
        "| Trophy | Rank | Title | Score | Next Rank |",
        "|--------|------|-------|-------|-----------|",
    ]
    lines.extend(_markdown_row(trophy) for trophy in card.trophies)
    lines.append("")
    return "\n".join(lines)
