"""
Configurable league formats.

This module defines the numbers and label tables a league format is made of:
how many regular matches a fixture has, when a fixture is decided early,
how many points a battle win is worth and which fixtures are playoffs.
"""

import math
import re
from dataclasses import dataclass, field, fields
from typing import Dict, FrozenSet, Mapping, Optional


_LABEL_NOISE = re.compile(r"[\s'’_\-]+")


def normalize_label(label: Optional[str]) -> str:
    """Lowercase a match type label and strip whitespace, apostrophes and separators."""
    if not label:
        return ""
    return _LABEL_NOISE.sub("", str(label)).lower()


DEFAULT_MATCH_TYPE_RANKS = {
    "Men's Doubles": 1,
    "Women's Doubles": 2,
    "Men's Singles": 3,
    "Women's Singles": 4,
    "Men's Doubles (2)": 5,
    "Mixed Doubles": 6,
}

UNKNOWN_MATCH_TYPE_RANK = 999


@dataclass(frozen=True)
class LeagueFormat:
    """Defines how fixtures are decided and standings are scored in a league."""

    # Fixture shape
    regular_match_count: int = 6
    decisive_regular_wins: int = 4
    default_games_count: int = 3

    # Standings
    battle_win_points: int = 3
    battle_loss_points: int = 0

    # Player names are revealed this long before the scheduled start
    reveal_lead_minutes: int = 55

    playoff_fixture_types: FrozenSet[str] = frozenset(
        {"playoff", "Qualifier", "Qualifier 1", "Qualifier 2", "Eliminator", "Final"}
    )
    tiebreak_aliases: FrozenSet[str] = frozenset({"dreambreaker", "gamebreaker"})
    match_type_ranks: Mapping[str, int] = field(
        default_factory=lambda: dict(DEFAULT_MATCH_TYPE_RANKS)
    )

    def __post_init__(self):
        if self.regular_match_count < 1:
            raise ValueError("regular_match_count must be >= 1")
        if not 0 < self.decisive_regular_wins <= self.regular_match_count:
            raise ValueError(
                "decisive_regular_wins must be between 1 and regular_match_count"
            )
        if self.default_games_count < 1:
            raise ValueError("default_games_count must be >= 1")
        if self.reveal_lead_minutes < 0:
            raise ValueError("reveal_lead_minutes must be >= 0")

    def matches_to_win(self, total_matches: int) -> int:
        """Match wins a side needs to take a fixture of `total_matches` matches."""
        return math.ceil(total_matches / 2)

    def is_playoff(self, fixture_type: Optional[str]) -> bool:
        return bool(fixture_type) and fixture_type in self.playoff_fixture_types

    def is_tiebreak(self, match_type: Optional[str], label: Optional[str]) -> bool:
        """Whether either the type tag or the display label names the deciding match."""
        return (
            normalize_label(match_type) in self.tiebreak_aliases
            or normalize_label(label) in self.tiebreak_aliases
        )

    def match_type_rank(self, label: Optional[str]) -> int:
        return self._rank_table.get(normalize_label(label), UNKNOWN_MATCH_TYPE_RANK)

    @property
    def _rank_table(self) -> Dict[str, int]:
        return {normalize_label(k): v for k, v in self.match_type_ranks.items()}

    @classmethod
    def from_dict(
        cls, values: Mapping, base: Optional["LeagueFormat"] = None
    ) -> "LeagueFormat":
        """Build a format from a settings mapping, starting from `base` (or the defaults)."""
        known = {f.name for f in fields(cls)}
        unknown = set(values) - known
        if unknown:
            raise ValueError(f"Unknown league format settings: {sorted(unknown)}")

        current = {f.name: getattr(base or STANDARD_FORMAT, f.name) for f in fields(cls)}
        for name, value in values.items():
            if name in ("playoff_fixture_types", "tiebreak_aliases"):
                value = frozenset(value)
            if name == "tiebreak_aliases":
                value = frozenset(normalize_label(v) for v in value)
            if name == "match_type_ranks":
                value = dict(value)
            current[name] = value
        return cls(**current)


STANDARD_FORMAT = LeagueFormat()
