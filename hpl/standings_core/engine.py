"""
Entry points for computing fixtures, standings and match order from a snapshot.

All functions are pure: they take the current list of matches (and teams)
and recompute everything from scratch, so the same snapshot always gives the
same result.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Sequence

from hpl.standings_core.decision import resolve_fixture
from hpl.standings_core.grouping import group_matches
from hpl.standings_core.ordering import order_fixtures, order_matches
from hpl.standings_core.reveal import should_show_player_names
from hpl.standings_core.scoring import LeagueFormat, STANDARD_FORMAT
from hpl.standings_core.standings import aggregate_standings, sort_standings
from hpl.standings_core.structure import Fixture, Match, Team, TeamStanding

__all__ = [
    "LeagueSnapshot",
    "build_fixture",
    "build_team_lookup",
    "compute_fixtures",
    "compute_standings",
    "order_matches",
    "should_show_player_names",
]


def build_team_lookup(teams: Iterable[Team]) -> Mapping[str, Team]:
    """Read-only team ID to Team mapping, built once per snapshot."""
    return MappingProxyType({team.id: team for team in teams})


def build_fixture(
    key: str, matches: Sequence[Match], fmt: LeagueFormat = STANDARD_FORMAT
) -> Fixture:
    """Build a decided fixture from the (already grouped) matches of one group."""
    decision = resolve_fixture(matches, fmt)
    first = matches[0]
    return Fixture(
        id=key,
        team1_id=first.team1_id,
        team2_id=first.team2_id,
        team1_name=first.team1_name,
        team2_name=first.team2_name,
        date=first.date,
        time=first.time,
        court=first.court,
        matches=order_matches(decision.matches, fmt),
        excluded_matches=order_matches(decision.excluded, fmt),
        status=decision.status,
        effectively_completed=decision.effectively_completed,
        side1_regular_wins=decision.side1_wins,
        side2_regular_wins=decision.side2_wins,
        fixture_type=first.fixture_type,
        playoff_stage=first.playoff_stage,
        playoff_number=first.playoff_number,
        playoff_name=first.playoff_name,
    )


def compute_fixtures(
    matches: Iterable[Match], fmt: LeagueFormat = STANDARD_FORMAT
) -> List[Fixture]:
    """Group matches into fixtures, decide each one and sort them for the schedule.

    Matches are put in display order before grouping, so the first match of
    each fixture (which sets its teams, date and time) does not depend on the
    order the store returned them in.
    """
    groups = group_matches(order_matches(matches, fmt))
    return order_fixtures(build_fixture(key, group, fmt) for key, group in groups.items())


def compute_standings(
    matches: Iterable[Match],
    teams: Sequence[Team],
    fmt: LeagueFormat = STANDARD_FORMAT,
) -> List[TeamStanding]:
    """Sorted league standings for `teams` from the current match snapshot."""
    fixtures = compute_fixtures(matches, fmt)
    return sort_standings(aggregate_standings(fixtures, teams, fmt))


@dataclass(frozen=True)
class LeagueSnapshot:
    """The teams and matches of one tournament at one point in time."""

    teams: List[Team] = field(default_factory=list)
    matches: List[Match] = field(default_factory=list)
    fmt: LeagueFormat = STANDARD_FORMAT

    def fixtures(self) -> List[Fixture]:
        return compute_fixtures(self.matches, self.fmt)

    def league_fixtures(self) -> List[Fixture]:
        return [f for f in self.fixtures() if not f.is_playoff(self.fmt)]

    def playoff_fixtures(self) -> List[Fixture]:
        return [f for f in self.fixtures() if f.is_playoff(self.fmt)]

    def standings(self) -> List[TeamStanding]:
        return compute_standings(self.matches, self.teams, self.fmt)

    def ordered_matches(self) -> List[Match]:
        return order_matches(self.matches, self.fmt)

    def fixture(self, fixture_id: str) -> Optional[Fixture]:
        return next((f for f in self.fixtures() if f.id == fixture_id), None)
