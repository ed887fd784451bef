"""
Fluent assertion interface for testing league standings and fixtures.

This module provides a clean, fluent way to assert computed standings and
fixture decisions for testing purposes:

    assert_league(snapshot).team("Smashers").assert_().position(1).points(3)
    assert_league(snapshot).fixture("fx1").status(FixtureStatus.COMPLETED)
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from hpl.standings_core.engine import LeagueSnapshot
from hpl.standings_core.standings import rank_standings
from hpl.standings_core.structure import Fixture, FixtureStatus, TeamStanding


# Use the built-in AssertionError for proper test framework integration


@dataclass
class LeagueAssertion:
    """Fluent entry point holding the standings and fixtures computed once."""

    snapshot: LeagueSnapshot
    _ranked: Optional[List[Tuple[int, TeamStanding]]] = None
    _fixtures: Optional[Dict[str, Fixture]] = None

    def __post_init__(self):
        if self._ranked is None:
            self._ranked = rank_standings(self.snapshot.standings())
        if self._fixtures is None:
            self._fixtures = {f.id: f for f in self.snapshot.fixtures()}

    def _team_id(self, name: str) -> str:
        for team in self.snapshot.teams:
            if team.name == name:
                return team.id
        raise AssertionError(f"Team '{name}' not found in league")

    def team(self, name: str) -> "TeamAssertion":
        return TeamAssertion(self, name, self._team_id(name))

    def fixture(self, fixture_id: str) -> "FixtureAssertion":
        if fixture_id not in self._fixtures:
            raise AssertionError(f"Fixture '{fixture_id}' not found")
        return FixtureAssertion(self._fixtures[fixture_id])

    def order(self, *names: str) -> "LeagueAssertion":
        """Assert the complete standings order by team name."""
        actual = [standing.team_name for _, standing in self._ranked]
        if actual != list(names):
            raise AssertionError(f"Expected standings order {list(names)}, got {actual}")
        return self


@dataclass
class TeamAssertion:
    league: LeagueAssertion
    name: str
    team_id: str

    def assert_(self) -> "TeamResultAssertion":
        """Start a chain of assertions for this team."""
        for position, standing in self.league._ranked:
            if standing.team_id == self.team_id:
                return TeamResultAssertion(self.name, position, standing)
        raise AssertionError(f"{self.name} missing from standings")


@dataclass
class TeamResultAssertion:
    """Fluent interface for asserting one team's standing."""

    name: str
    actual_position: int
    standing: TeamStanding

    def _check(self, label: str, expected, actual) -> "TeamResultAssertion":
        if expected != actual:
            raise AssertionError(f"{self.name} expected {expected} {label}, got {actual}")
        return self

    def position(self, expected: int) -> "TeamResultAssertion":
        return self._check("position", expected, self.actual_position)

    def points(self, expected: int) -> "TeamResultAssertion":
        return self._check("points", expected, self.standing.points)

    def battle_wins(self, expected: int) -> "TeamResultAssertion":
        return self._check("battle wins", expected, self.standing.battle_wins)

    def battle_losses(self, expected: int) -> "TeamResultAssertion":
        return self._check("battle losses", expected, self.standing.battle_losses)

    def game_wins(self, expected: int) -> "TeamResultAssertion":
        return self._check("game wins", expected, self.standing.game_wins)

    def game_losses(self, expected: int) -> "TeamResultAssertion":
        return self._check("game losses", expected, self.standing.game_losses)

    def points_won(self, expected: int) -> "TeamResultAssertion":
        return self._check("points won", expected, self.standing.points_won)

    def points_lost(self, expected: int) -> "TeamResultAssertion":
        return self._check("points lost", expected, self.standing.points_lost)

    def games_difference(self, expected: int) -> "TeamResultAssertion":
        return self._check("games difference", expected, self.standing.games_difference)

    def points_difference(self, expected: int) -> "TeamResultAssertion":
        return self._check(
            "points difference", expected, self.standing.points_difference
        )

    def fixtures_played(self, expected: int) -> "TeamResultAssertion":
        return self._check("fixtures played", expected, self.standing.fixtures_played)

    def all_zero(self) -> "TeamResultAssertion":
        """Assert the team has not scored anything yet."""
        return (
            self.points(0)
            .battle_wins(0)
            .battle_losses(0)
            .game_wins(0)
            .game_losses(0)
            .points_won(0)
            .points_lost(0)
        )


@dataclass
class FixtureAssertion:
    """Fluent interface for asserting a fixture's decision."""

    fixture: Fixture

    def status(self, expected: FixtureStatus) -> "FixtureAssertion":
        if self.fixture.status is not expected:
            raise AssertionError(
                f"Fixture {self.fixture.id} expected {expected.value}, "
                f"got {self.fixture.status.value}"
            )
        return self

    def effectively_completed(self, expected: bool = True) -> "FixtureAssertion":
        if self.fixture.effectively_completed != expected:
            raise AssertionError(
                f"Fixture {self.fixture.id} effectively_completed expected {expected}"
            )
        return self

    def match_count(self, expected: int) -> "FixtureAssertion":
        actual = len(self.fixture.matches)
        if actual != expected:
            raise AssertionError(
                f"Fixture {self.fixture.id} expected {expected} matches, got {actual}"
            )
        return self

    def excluded(self, expected: int) -> "FixtureAssertion":
        actual = len(self.fixture.excluded_matches)
        if actual != expected:
            raise AssertionError(
                f"Fixture {self.fixture.id} expected {expected} excluded matches, got {actual}"
            )
        return self


def assert_league(snapshot: LeagueSnapshot) -> LeagueAssertion:
    """Start fluent assertions on a league snapshot."""
    return LeagueAssertion(snapshot)
