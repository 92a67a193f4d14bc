"""Data models for Profile Trophy."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class RankTier(StrEnum):
    """Earned rank levels, declared from most to least prestigious."""
    SECRET = "SECRET"
    SSS = "SSS"
    SS = "SS"
    S = "S"
    AAA = "AAA"
    AA = "AA"
    A = "A"
    B = "B"
    C = "C"
    UNKNOWN = "?"

    @property
    def prestige(self) -> int:
        """Position in the canonical order; 0 is the most prestigious."""
        return _PRESTIGE[self]

    @property
    def letter(self) -> str:
        """Single-letter family shown on the trophy icon."""
        if self is RankTier.SECRET:
            return "S"
        if self is RankTier.UNKNOWN:
            return "?"
        return self.value[0]


RANK_ORDER: tuple[RankTier, ...] = tuple(RankTier)
_PRESTIGE: dict[RankTier, int] = {tier: index for index, tier in enumerate(RANK_ORDER)}


class RankThreshold(BaseModel):
    """A single row of an archetype's threshold table."""
    model_config = ConfigDict(frozen=True)

    tier: RankTier
    message: str
    required_score: int


class TrophyArchetype(BaseModel):
    """Static catalog entry describing one kind of trophy."""
    model_config = ConfigDict(frozen=True)

    title: str
    aliases: frozenset[str] = frozenset()
    hidden: bool = False
    thresholds: tuple[RankThreshold, ...] = ()
    bottom_override: str | None = None
    metric: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _alias_includes_title(cls, data: Any) -> Any:
        if isinstance(data, dict) and "title" in data:
            data = dict(data)
            data["aliases"] = frozenset(data.get("aliases", ())) | {data["title"]}
        return data


class TrophyInstance(BaseModel):
    """An archetype evaluated against one user's metrics."""
    model_config = ConfigDict(frozen=True)

    archetype: TrophyArchetype = Field(exclude=True)
    tier: RankTier = RankTier.UNKNOWN
    top_message: str = "Unknown"
    bottom_message: str = "0pt"
    score: int = 0
    progress: float = 0.0
    matched_threshold: RankThreshold | None = Field(default=None, exclude=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def title(self) -> str:
        return self.archetype.title

    @property
    def hidden(self) -> bool:
        return self.archetype.hidden


class PlacedTrophy(TrophyInstance):
    """A trophy instance with its panel origin on the grid."""
    x: int = 0
    y: int = 0


class UserMetrics(BaseModel):
    """Normalized per-user counters consumed by the trophy builder."""
    model_config = ConfigDict(frozen=True)

    total_commits: int = 0
    total_followers: int = 0
    total_issues: int = 0
    total_organizations: int = 0
    total_pull_requests: int = 0
    total_reviews: int = 0
    total_stargazers: int = 0
    total_repositories: int = 0
    language_count: int = 0
    duration_year: int = 0
    duration_days: int = 0
    ancient_account: int = 0
    joined_2020: int = 0
    og_account: int = 0


class RepositoryStats(BaseModel):
    """Per-repository figures reported by the data provider."""
    stargazer_count: int = 0
    languages: list[str] = []
    created_at: str | None = None


class RawUserStats(BaseModel):
    """Raw per-user statistics as fetched from the data provider."""
    login: str = ""
    created_at: str | None = None
    total_commit_contributions: int = 0
    restricted_contributions_count: int = 0
    total_pull_request_review_contributions: int = 0
    total_organizations: int = 0
    total_followers: int = 0
    open_issues: int = 0
    closed_issues: int = 0
    total_pull_requests: int = 0
    total_repositories: int = 0
    repositories: list[RepositoryStats] = []


class TrophyCard(BaseModel):
    """Laid-out trophies ready to hand to a renderer."""
    width: int
    height: int
    columns: int
    rows: int
    panel_size: int
    no_background: bool = False
    no_frame: bool = False
    trophies: list[PlacedTrophy] = []
