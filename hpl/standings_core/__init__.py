"""
Pure standings and fixture computation for league snapshots.

Nothing in this package touches the match store or the database; every
function takes a snapshot of matches and teams and returns a fresh result.
"""

from hpl.standings_core.engine import (
    LeagueSnapshot,
    build_team_lookup,
    compute_fixtures,
    compute_standings,
    order_matches,
    should_show_player_names,
)
from hpl.standings_core.scoring import LeagueFormat, STANDARD_FORMAT
from hpl.standings_core.structure import (
    Fixture,
    FixtureStatus,
    Match,
    MatchKind,
    MatchStatus,
    Team,
    TeamStanding,
    Winner,
)

__all__ = [
    "Fixture",
    "FixtureStatus",
    "LeagueFormat",
    "LeagueSnapshot",
    "Match",
    "MatchKind",
    "MatchStatus",
    "STANDARD_FORMAT",
    "Team",
    "TeamStanding",
    "Winner",
    "build_team_lookup",
    "compute_fixtures",
    "compute_standings",
    "order_matches",
    "should_show_player_names",
]
