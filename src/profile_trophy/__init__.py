"""Profile Trophy - GitHub activity trophies."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from profile_trophy.card import build_card, fetch_trophy_card
from profile_trophy.config import ProfileTrophyConfig
from profile_trophy.exceptions import ProfileTrophyError
from profile_trophy.models import PlacedTrophy, RankTier, TrophyCard, TrophyInstance, UserMetrics
from profile_trophy.options import TrophyOptions

try:
    __version__ = version("profile-trophy")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "PlacedTrophy",
    "ProfileTrophyConfig",
    "ProfileTrophyError",
    "RankTier",
    "TrophyCard",
    "TrophyInstance",
    "TrophyOptions",
    "UserMetrics",
    "__version__",
    "build_card",
    "fetch_trophy_card",
]
