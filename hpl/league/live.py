"""
Live recomputation of standings as match snapshots arrive.

Each tournament has a generation counter. Every snapshot bumps it before the
(pure) recomputation runs outside the lock; when the computation finishes
the result is published only if no newer snapshot arrived in the meantime.
Stale results are dropped, so subscribers never see standings go backwards.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

from hpl.league.conf import league_format
from hpl.standings_core.engine import compute_fixtures
from hpl.standings_core.ordering import order_matches
from hpl.standings_core.scoring import LeagueFormat
from hpl.standings_core.standings import aggregate_standings, sort_standings
from hpl.standings_core.structure import Fixture, Match, Team, TeamStanding

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StandingsUpdate:
    """Everything the live screens show for one tournament snapshot."""

    tournament_id: Optional[str]
    generation: int
    fixtures: List[Fixture] = field(default_factory=list)
    standings: List[TeamStanding] = field(default_factory=list)
    matches: List[Match] = field(default_factory=list)


UpdateCallback = Callable[[StandingsUpdate], None]
FormatProvider = Callable[[Optional[str]], LeagueFormat]


def compute_update(
    tournament_id: Optional[str],
    generation: int,
    matches: Sequence[Match],
    teams: Sequence[Team],
    fmt: LeagueFormat,
) -> StandingsUpdate:
    fixtures = compute_fixtures(matches, fmt)
    return StandingsUpdate(
        tournament_id=tournament_id,
        generation=generation,
        fixtures=fixtures,
        standings=sort_standings(aggregate_standings(fixtures, teams, fmt)),
        matches=order_matches(matches, fmt),
    )


class LiveStandings:
    """Recomputes and publishes standings for any number of tournaments."""

    def __init__(
        self,
        fmt_provider: Optional[FormatProvider] = None,
        compute: Callable[..., StandingsUpdate] = compute_update,
    ):
        self.fmt_provider = fmt_provider or league_format
        self.compute = compute
        self._lock = threading.Lock()
        self._generations: Dict[Optional[str], int] = {}
        self._latest: Dict[Optional[str], StandingsUpdate] = {}
        self._subscribers: List[UpdateCallback] = []

    def on_snapshot(
        self,
        tournament_id: Optional[str],
        matches: Sequence[Match],
        teams: Sequence[Team],
    ) -> Optional[StandingsUpdate]:
        """Recompute for a new snapshot; returns None if a newer one overtook it."""
        with self._lock:
            generation = self._generations.get(tournament_id, 0) + 1
            self._generations[tournament_id] = generation

        fmt = self.fmt_provider(tournament_id)
        update = self.compute(tournament_id, generation, list(matches), list(teams), fmt)

        with self._lock:
            if self._generations[tournament_id] != generation:
                logger.debug(
                    "Dropping standings for %s generation %d, superseded by %d",
                    tournament_id,
                    generation,
                    self._generations[tournament_id],
                )
                return None
            self._latest[tournament_id] = update
            subscribers = list(self._subscribers)

        for callback in subscribers:
            try:
                callback(update)
            except Exception:
                logger.exception("Standings subscriber failed for %s", tournament_id)
        return update

    def latest(self, tournament_id: Optional[str]) -> Optional[StandingsUpdate]:
        with self._lock:
            return self._latest.get(tournament_id)

    def subscribe(self, callback: UpdateCallback) -> Callable[[], None]:
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe():
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def attach(self, store, tournament_id: Optional[str]) -> Callable[[], None]:
        """Follow one tournament of a SnapshotStore; returns the store unsubscribe."""

        def on_matches(matches: List[Match]) -> None:
            self.on_snapshot(tournament_id, matches, store.list_teams(tournament_id))

        return store.subscribe(tournament_id, on_matches)
