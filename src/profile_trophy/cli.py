"""Click-based CLI for Profile Trophy."""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from profile_trophy.card import build_card, fetch_trophy_card
from profile_trophy.config import LayoutConfig, load_config
from profile_trophy.exceptions import (
    ProfileTrophyError,
    RateLimitExhaustedError,
    UserNotFoundError,
)
from profile_trophy.formatter import format_cli_output, format_json, format_markdown
from profile_trophy.models import TrophyCard, UserMetrics
from profile_trophy.options import TrophyOptions


def _card_options(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the filtering, layout and output options shared by commands."""
    decorators = [
        click.option("--title", "titles", multiple=True,
                     help="Trophy name to include, or -Name to exclude (repeatable, comma lists)"),
        click.option("--rank", "ranks", multiple=True,
                     help="Rank to include, or -RANK to exclude (repeatable, comma lists)"),
        click.option("--column", default=None, help="Max columns, -1 for a single row"),
        click.option("--row", default=None, help="Max rows"),
        click.option("--margin-w", "margin_w", default=None, help="Horizontal margin"),
        click.option("--margin-h", "margin_h", default=None, help="Vertical margin"),
        click.option("--no-bg", is_flag=True, default=False, help="Transparent background"),
        click.option("--no-frame", is_flag=True, default=False, help="Hide panel frames"),
        click.option("--config", "config_path", default=None, help="Config file path"),
        click.option("--verbose", "-v", is_flag=True, help="Show detailed output"),
        click.option("--json", "output_json", is_flag=True, help="Output as JSON"),
        click.option("--markdown", "output_markdown", is_flag=True, help="Output as Markdown"),
    ]
    for decorator in reversed(decorators):
        fn = decorator(fn)
    return fn


def _build_options(layout: LayoutConfig, params: dict[str, Any]) -> TrophyOptions:
    query: dict[str, str | list[str]] = {
        "title": list(params["titles"]),
        "rank": list(params["ranks"]),
    }
    for name, key in (
        ("column", "column"),
        ("row", "row"),
        ("margin_w", "margin-w"),
        ("margin_h", "margin-h"),
    ):
        if params[name] is not None:
            query[key] = str(params[name])
    if params["no_bg"]:
        query["no-bg"] = "true"
    if params["no_frame"]:
        query["no-frame"] = "true"
    return TrophyOptions.from_query(query, layout)


def _echo_card(card: TrophyCard, params: dict[str, Any]) -> None:
    if params["output_json"]:
        click.echo(format_json(card))
    elif params["output_markdown"]:
        click.echo(format_markdown(card))
    else:
        click.echo(format_cli_output(card, verbose=params["verbose"]))


@click.group()
@click.version_option(package_name="profile-trophy")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool) -> None:
    """Profile Trophy - rank GitHub activity into trophies."""
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s: %(name)s: %(message)s",
        )


@main.command()
@click.argument("username", required=False)
@click.option("--token", envvar="GITHUB_TOKEN", help="GitHub token")
@_card_options
def show(username: str | None, token: str | None, **params: Any) -> None:
    """Fetch a GitHub user's statistics and show their trophies.

    Without USERNAME the owner of the token is used.
    """
    if not token:
        click.echo("Error: GitHub token required. Set GITHUB_TOKEN or use --token.", err=True)
        sys.exit(1)

    try:
        config = load_config(params["config_path"])
        options = _build_options(config.layout, params)
        card = asyncio.run(
            fetch_trophy_card(login=username, options=options, config=config, token=token)
        )
    except UserNotFoundError as exc:
        click.echo(f"Error: user not found: {exc.login}", err=True)
        sys.exit(1)
    except RateLimitExhaustedError as exc:
        click.echo(f"Error: {exc} Try again later.", err=True)
        sys.exit(1)
    except ProfileTrophyError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    _echo_card(card, params)


@main.command()
@click.argument("metrics_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@_card_options
def evaluate(metrics_file: Path, **params: Any) -> None:
    """Show trophies for a metrics record stored as JSON."""
    try:
        config = load_config(params["config_path"])
    except ProfileTrophyError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    try:
        metrics = UserMetrics.model_validate_json(metrics_file.read_text())
    except ValidationError as exc:
        click.echo(f"Error: invalid metrics file {metrics_file}: {exc}", err=True)
        sys.exit(1)

    options = _build_options(config.layout, params)
    card = build_card(metrics, options, config.layout)
    _echo_card(card, params)
