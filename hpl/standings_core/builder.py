"""
Builder for creating league snapshots with a fluent API.

This module provides a builder class for creating standings_core structures
without a match store. It is mainly used by tests and seeders:

    snapshot = (
        LeagueBuilder()
        .team("Smashers")
        .team("Dinkers")
        .fixture("Smashers", "Dinkers", date="2025-03-01")
        .results("111122")
        .tiebreak((11, 9))
        .build()
    )
"""

import datetime
from typing import Dict, List, Optional, Tuple, Union

from hpl.standings_core.engine import LeagueSnapshot
from hpl.standings_core.records import classify_match_kind
from hpl.standings_core.scoring import LeagueFormat, STANDARD_FORMAT
from hpl.standings_core.structure import Match, MatchStatus, Team
from hpl.standings_core.timeutils import normalize_time, parse_date

REGULAR_MATCH_LABELS = [
    "Men's Doubles",
    "Women's Doubles",
    "Men's Singles",
    "Women's Singles",
    "Men's Doubles (2)",
    "Mixed Doubles",
]
TIEBREAK_LABEL = "Game Breaker"

# Every result string match is won 2-1 in games
SIDE1_WIN_GAMES = ((11, 5), (9, 11), (11, 7))
SIDE2_WIN_GAMES = ((5, 11), (11, 9), (7, 11))

GameScore = Tuple[int, int]


class LeagueBuilder:
    """Builder for creating league snapshots easily."""

    def __init__(
        self, tournament_id: str = "league", fmt: LeagueFormat = STANDARD_FORMAT
    ):
        self.tournament_id = tournament_id
        self.fmt = fmt
        self.teams: List[Team] = []
        self.matches: List[Match] = []
        self.name_to_id: Dict[str, str] = {}
        self._fixture: Optional[dict] = None
        self._next_fixture = 1

    def team(
        self, name: str, team_id: Optional[str] = None, logo: Optional[str] = None
    ) -> "LeagueBuilder":
        """Add a team. IDs default to t1, t2, ... in insertion order."""
        if name in self.name_to_id:
            raise ValueError(f"Team already exists: {name}")
        team_id = team_id or f"t{len(self.teams) + 1}"
        self.teams.append(
            Team(id=team_id, name=name, logo=logo, tournament_id=self.tournament_id)
        )
        self.name_to_id[name] = team_id
        return self

    def fixture(
        self,
        team1: str,
        team2: str,
        date: Union[str, datetime.date, None] = "2025-01-04",
        time: Optional[str] = "18:00",
        court: Optional[str] = "Court 1",
        fixture_type: Optional[str] = None,
        group_id: Optional[str] = None,
    ) -> "LeagueBuilder":
        """Start a fixture between two named teams; following matches belong to it."""
        for name in (team1, team2):
            if name not in self.name_to_id:
                raise ValueError(f"Team not found: {name}")

        self._fixture = {
            "id": group_id or f"fx{self._next_fixture}",
            "team1": team1,
            "team2": team2,
            "date": parse_date(date),
            "time": normalize_time(time),
            "court": court,
            "fixture_type": fixture_type,
            "count": 0,
        }
        self._next_fixture += 1
        return self

    def match(
        self,
        label: str,
        *games: GameScore,
        status: Optional[MatchStatus] = None,
        games_count: Optional[int] = None,
        match_type: Optional[str] = None,
        **overrides,
    ) -> "LeagueBuilder":
        """Add a match to the current fixture with (side1, side2) scores per game.

        Status defaults to completed when scores are given, scheduled otherwise.
        """
        if self._fixture is None:
            raise ValueError("No fixture started; call fixture() first")

        fx = self._fixture
        fx["count"] += 1
        if status is None:
            status = MatchStatus.COMPLETED if games else MatchStatus.SCHEDULED

        fields = dict(
            id=f"{fx['id']}-m{fx['count']}",
            tournament_id=self.tournament_id,
            team1_id=self.name_to_id[fx["team1"]],
            team2_id=self.name_to_id[fx["team2"]],
            team1_name=fx["team1"],
            team2_name=fx["team2"],
            match_type=match_type,
            match_type_label=label,
            kind=classify_match_kind(match_type, label, self.fmt),
            games_count=games_count or self.fmt.default_games_count,
            team1_scores={i: s1 for i, (s1, _) in enumerate(games, start=1)},
            team2_scores={i: s2 for i, (_, s2) in enumerate(games, start=1)},
            status=status,
            date=fx["date"],
            time=fx["time"],
            fixture_group_id=fx["id"],
            court=fx["court"],
            sequence=fx["count"],
            fixture_type=fx["fixture_type"],
        )
        fields.update(overrides)
        self.matches.append(Match(**fields))
        return self

    def results(self, winners: str) -> "LeagueBuilder":
        """Add regular matches from a result string, one character per match.

        "1" is a 2-1 win for side 1, "2" a 2-1 win for side 2 and "-" a match
        not played yet. Spaces are ignored. Labels follow the standard
        fixture order.
        """
        codes = winners.replace(" ", "")
        if len(codes) > len(REGULAR_MATCH_LABELS):
            raise ValueError(f"At most {len(REGULAR_MATCH_LABELS)} regular matches")
        for label, code in zip(REGULAR_MATCH_LABELS, codes):
            if code == "1":
                self.match(label, *SIDE1_WIN_GAMES)
            elif code == "2":
                self.match(label, *SIDE2_WIN_GAMES)
            elif code == "-":
                self.match(label)
            else:
                raise ValueError(f"Invalid result code: {code!r}")
        return self

    def tiebreak(
        self,
        *games: GameScore,
        status: Optional[MatchStatus] = None,
        label: str = TIEBREAK_LABEL,
    ) -> "LeagueBuilder":
        """Add the tiebreak match to the current fixture (scheduled when no scores given)."""
        return self.match(label, *games, status=status, games_count=max(1, len(games)))

    def build(self) -> LeagueSnapshot:
        return LeagueSnapshot(
            teams=list(self.teams), matches=list(self.matches), fmt=self.fmt
        )
