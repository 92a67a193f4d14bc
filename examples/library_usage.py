"""Example: Build a GitHub user's trophy card with Profile Trophy."""

from __future__ import annotations

import asyncio
import os

from profile_trophy import TrophyOptions, fetch_trophy_card


async def main() -> None:
    options = TrophyOptions.from_query("title=Stars,Commits,-Reviews&column=-1")
    card = await fetch_trophy_card(
        login="octocat",
        options=options,
        token=os.environ["GITHUB_TOKEN"],
    )
    print(f"Canvas: {card.width}x{card.height}")

    if not card.trophies:
        print("No trophies earned yet")
    for trophy in card.trophies:
        print(f"{trophy.tier:>7} {trophy.title}: {trophy.top_message} ({trophy.bottom_message})")


if __name__ == "__main__":
    asyncio.run(main())
