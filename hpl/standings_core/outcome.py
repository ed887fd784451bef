"""
Outcome of a single match from its per-game scores.
"""

from dataclasses import dataclass

from hpl.standings_core.structure import Match, Winner


@dataclass(frozen=True)
class MatchOutcome:
    """Game and point tallies of one match, seen from side 1 and side 2."""

    side1_games: int
    side2_games: int
    side1_points: int
    side2_points: int
    winner: Winner

    def games_for(self, side1: bool) -> tuple:
        """Return (won, lost) games for the given side."""
        if side1:
            return (self.side1_games, self.side2_games)
        return (self.side2_games, self.side1_games)

    def points_for(self, side1: bool) -> tuple:
        """Return (won, lost) points for the given side."""
        if side1:
            return (self.side1_points, self.side2_points)
        return (self.side2_points, self.side1_points)


def resolve_match(match: Match) -> MatchOutcome:
    """Tally games 1..games_count and pick the side with strictly more game wins.

    Missing scores count as 0 and an equal score wins the game for nobody.
    Equal game wins give Winner.NONE; this cannot happen with the usual
    odd number of games but partial or even-length scorecards can produce it.
    """
    side1_games = side2_games = 0
    side1_points = side2_points = 0

    for game in range(1, match.games_count + 1):
        s1, s2 = match.game_scores(game)
        side1_points += s1
        side2_points += s2
        if s1 > s2:
            side1_games += 1
        elif s2 > s1:
            side2_games += 1

    if side1_games > side2_games:
        winner = Winner.SIDE1
    elif side2_games > side1_games:
        winner = Winner.SIDE2
    else:
        winner = Winner.NONE

    return MatchOutcome(side1_games, side2_games, side1_points, side2_points, winner)
