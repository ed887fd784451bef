"""
League standings from decided fixtures.

Each fixture is first reduced to a `FixtureResult` holding both sides'
tallies and the fixture winner, then the results are folded into one
`TeamStanding` per team.

Rules:
- Playoff fixtures never count toward league standings.
- Only fixtures that are completed or in progress count; in-progress
  fixtures contribute their completed matches so far.
- Tiebreak matches never add to game or point tallies, but their winner does
  count toward winning the fixture.
- A side wins the fixture once its match wins reach a majority of the
  fixture's current matches, side 1 checked first. A completed fixture
  where neither side reached the majority goes to the side with strictly
  more match wins.
"""

from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Sequence, Tuple

from hpl.standings_core.outcome import resolve_match
from hpl.standings_core.scoring import LeagueFormat, STANDARD_FORMAT
from hpl.standings_core.structure import (
    Fixture,
    FixtureStatus,
    Team,
    TeamStanding,
    Winner,
)

COUNTED_STATUSES = (FixtureStatus.COMPLETED, FixtureStatus.IN_PROGRESS)


@dataclass(frozen=True)
class FixtureResult:
    """Tallies of one fixture for both sides."""

    side1_games: int = 0
    side2_games: int = 0
    side1_points: int = 0
    side2_points: int = 0
    side1_match_wins: int = 0
    side2_match_wins: int = 0
    winner: Winner = Winner.NONE

    @property
    def decided(self) -> bool:
        return self.winner is not Winner.NONE


def fixture_result(fixture: Fixture, fmt: LeagueFormat = STANDARD_FORMAT) -> FixtureResult:
    """Reduce a fixture's completed matches to tallies and a winner."""
    games = [0, 0]
    points = [0, 0]
    match_wins = [0, 0]

    for match in fixture.matches:
        if not match.is_completed:
            continue
        outcome = resolve_match(match)
        if not match.is_tiebreak:
            games[0] += outcome.side1_games
            games[1] += outcome.side2_games
            points[0] += outcome.side1_points
            points[1] += outcome.side2_points
        if outcome.winner is Winner.SIDE1:
            match_wins[0] += 1
        elif outcome.winner is Winner.SIDE2:
            match_wins[1] += 1

    # The tiebreak may have been excluded, so this is taken from the current matches
    needed = fmt.matches_to_win(len(fixture.matches))
    side1_reached = match_wins[0] >= needed
    side2_reached = match_wins[1] >= needed

    # Side 1 is checked first, so it takes an even split where both reach the majority
    winner = Winner.NONE
    if side1_reached:
        winner = Winner.SIDE1
    elif side2_reached:
        winner = Winner.SIDE2
    elif fixture.status is FixtureStatus.COMPLETED:
        if match_wins[0] > match_wins[1]:
            winner = Winner.SIDE1
        elif match_wins[1] > match_wins[0]:
            winner = Winner.SIDE2

    return FixtureResult(
        side1_games=games[0],
        side2_games=games[1],
        side1_points=points[0],
        side2_points=points[1],
        side1_match_wins=match_wins[0],
        side2_match_wins=match_wins[1],
        winner=winner,
    )


def counts_for_standings(fixture: Fixture, fmt: LeagueFormat = STANDARD_FORMAT) -> bool:
    return not fixture.is_playoff(fmt) and fixture.status in COUNTED_STATUSES


def _apply(
    standing: TeamStanding,
    result: FixtureResult,
    side1: bool,
    fmt: LeagueFormat,
) -> TeamStanding:
    if side1:
        won_games, lost_games = result.side1_games, result.side2_games
        won_points, lost_points = result.side1_points, result.side2_points
        own, other = Winner.SIDE1, Winner.SIDE2
    else:
        won_games, lost_games = result.side2_games, result.side1_games
        won_points, lost_points = result.side2_points, result.side1_points
        own, other = Winner.SIDE2, Winner.SIDE1

    battle_wins = standing.battle_wins
    battle_losses = standing.battle_losses
    points = standing.points
    if result.winner is own:
        battle_wins += 1
        points += fmt.battle_win_points
    elif result.winner is other:
        battle_losses += 1
        points += fmt.battle_loss_points

    return replace(
        standing,
        battle_wins=battle_wins,
        battle_losses=battle_losses,
        points=points,
        game_wins=standing.game_wins + won_games,
        game_losses=standing.game_losses + lost_games,
        points_won=standing.points_won + won_points,
        points_lost=standing.points_lost + lost_points,
        fixtures_played=standing.fixtures_played + 1,
    )


def aggregate_standings(
    fixtures: Iterable[Fixture],
    teams: Sequence[Team],
    fmt: LeagueFormat = STANDARD_FORMAT,
) -> List[TeamStanding]:
    """Fold fixtures into one standing per team, in the order teams are given.

    Teams without any counted fixture get an all-zero standing.
    """
    standings: Dict[str, TeamStanding] = {
        team.id: TeamStanding(team_id=team.id, team_name=team.name) for team in teams
    }

    for fixture in fixtures:
        if not counts_for_standings(fixture, fmt):
            continue
        result = fixture_result(fixture, fmt)
        for team_id, side1 in ((fixture.team1_id, True), (fixture.team2_id, False)):
            if team_id in standings:
                standings[team_id] = _apply(standings[team_id], result, side1, fmt)

    return [standings[team.id] for team in teams if team.id in standings]


def standing_sort_key(standing: TeamStanding) -> Tuple[int, int, int, int]:
    return (
        -standing.points,
        -standing.battle_wins,
        -standing.games_difference,
        -standing.points_difference,
    )


def sort_standings(standings: Iterable[TeamStanding]) -> List[TeamStanding]:
    """Order by points, battle wins, games difference, then points difference.

    The sort is stable: teams equal on all four keys keep their input order.
    """
    return sorted(standings, key=standing_sort_key)


def rank_standings(standings: Iterable[TeamStanding]) -> List[Tuple[int, TeamStanding]]:
    """Sort and number standings from 1; teams equal on every key share a position."""
    ranked = []
    previous_key = None
    position = 0
    for index, standing in enumerate(sort_standings(standings), start=1):
        key = standing_sort_key(standing)
        if key != previous_key:
            position = index
            previous_key = key
        ranked.append((position, standing))
    return ranked
