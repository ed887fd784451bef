"""
League structures for representing matches, fixtures and standings.

This module provides a simple, clean way to represent a league snapshot with:
- Teams
- Matches between two sides, each scored as best-of-N games
- Fixtures grouping the matches two teams play on one date and court
- Standings accumulated per team
"""

import datetime
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, List, Optional, Tuple


class MatchStatus(Enum):
    """Lifecycle of a single match."""

    SCHEDULED = "scheduled"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    LIVE = "live"


class MatchKind(Enum):
    """Regular matches count toward games and points, the tiebreak only decides fixtures."""

    REGULAR = "regular"
    TIEBREAK = "tiebreak"


class Winner(Enum):
    SIDE1 = "side1"
    SIDE2 = "side2"
    NONE = "none"


class FixtureStatus(Enum):
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


@dataclass(frozen=True)
class Team:
    """A team registered in a tournament."""

    id: str
    name: str
    logo: Optional[str] = None
    tournament_id: Optional[str] = None


@dataclass(frozen=True)
class Match:
    """One scheduled contest between two sides within a tournament.

    Scores are stored per side as a mapping from game index (1..games_count)
    to points. A missing index means the game has not been played.
    """

    id: str
    tournament_id: Optional[str] = None
    team1_id: Optional[str] = None
    team2_id: Optional[str] = None
    team1_name: str = ""
    team2_name: str = ""
    match_type: Optional[str] = None
    match_type_label: Optional[str] = None
    kind: MatchKind = MatchKind.REGULAR
    games_count: int = 3
    team1_scores: Dict[int, int] = field(default_factory=dict)
    team2_scores: Dict[int, int] = field(default_factory=dict)
    status: MatchStatus = MatchStatus.SCHEDULED
    date: Optional[datetime.date] = None
    time: Optional[str] = None
    fixture_group_id: Optional[str] = None
    court: Optional[str] = None
    match_order: Optional[int] = None
    sequence: Optional[int] = None
    match_number: Optional[int] = None
    fixture_type: Optional[str] = None
    playoff_stage: Optional[str] = None
    playoff_number: Optional[int] = None
    playoff_name: Optional[str] = None
    team1_players: Tuple[str, ...] = ()
    team2_players: Tuple[str, ...] = ()

    @property
    def is_tiebreak(self) -> bool:
        return self.kind is MatchKind.TIEBREAK

    @property
    def is_completed(self) -> bool:
        return self.status is MatchStatus.COMPLETED

    @property
    def display_label(self) -> str:
        return self.match_type_label or self.match_type or ""

    @property
    def display_order(self) -> int:
        """First of match_order, sequence, match_number that is set, else 0."""
        for value in (self.match_order, self.sequence, self.match_number):
            if value is not None:
                return value
        return 0

    @property
    def side_key(self) -> Tuple[str, str]:
        """Identity of the two sides, preferring team IDs over display names."""
        return (self.team1_id or self.team1_name, self.team2_id or self.team2_name)

    def line_up(self, side1: bool = True) -> str:
        """Players of one side joined for display, falling back to the team name."""
        players = self.team1_players if side1 else self.team2_players
        if players:
            return " & ".join(players)
        return (self.team1_name if side1 else self.team2_name) or "TBD"

    def game_scores(self, game: int) -> Tuple[int, int]:
        """Return (side1, side2) points for a game, 0 for games not played."""
        return (self.team1_scores.get(game, 0), self.team2_scores.get(game, 0))

    def flipped(self) -> "Match":
        """Return the same match seen from the other side."""
        return replace(
            self,
            team1_id=self.team2_id,
            team2_id=self.team1_id,
            team1_name=self.team2_name,
            team2_name=self.team1_name,
            team1_scores=dict(self.team2_scores),
            team2_scores=dict(self.team1_scores),
            team1_players=self.team2_players,
            team2_players=self.team1_players,
        )


@dataclass(frozen=True)
class Fixture:
    """The matches between one pair of teams on one date and court.

    `matches` is the surviving match set after the early-decision rule;
    tiebreak matches dropped by that rule are kept in `excluded_matches`.
    """

    id: str
    team1_id: Optional[str]
    team2_id: Optional[str]
    team1_name: str
    team2_name: str
    date: Optional[datetime.date] = None
    time: Optional[str] = None
    court: Optional[str] = None
    matches: List[Match] = field(default_factory=list)
    excluded_matches: List[Match] = field(default_factory=list)
    status: FixtureStatus = FixtureStatus.SCHEDULED
    effectively_completed: bool = False
    side1_regular_wins: int = 0
    side2_regular_wins: int = 0
    fixture_type: Optional[str] = None
    playoff_stage: Optional[str] = None
    playoff_number: Optional[int] = None
    playoff_name: Optional[str] = None

    @property
    def completed_count(self) -> int:
        return sum(1 for m in self.matches if m.is_completed)

    def is_playoff(self, fmt) -> bool:
        return fmt.is_playoff(self.fixture_type)


@dataclass(frozen=True)
class TeamStanding:
    """Accumulated league result for one team across its non-playoff fixtures."""

    team_id: str
    team_name: str = ""
    battle_wins: int = 0
    battle_losses: int = 0
    points: int = 0
    game_wins: int = 0
    game_losses: int = 0
    points_won: int = 0
    points_lost: int = 0
    fixtures_played: int = 0

    @property
    def games_difference(self) -> int:
        return self.game_wins - self.game_losses

    @property
    def points_difference(self) -> int:
        return self.points_won - self.points_lost
