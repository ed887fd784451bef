"""
In-memory match and team store with change subscriptions.

The store holds raw documents normalized into `Match` and `Team` values and
notifies subscribers with the full list of a tournament's matches whenever
any of them changes, the way the hosted document store pushes snapshots to
the live screens.
"""

import json
import logging
import threading
from collections import defaultdict
from pathlib import Path
from typing import IO, Any, Callable, Dict, Iterable, List, Mapping, Optional, Union

from hpl.standings_core.ordering import order_matches
from hpl.standings_core.records import (
    match_from_record,
    match_to_record,
    team_from_record,
    team_to_record,
)
from hpl.standings_core.scoring import LeagueFormat, STANDARD_FORMAT
from hpl.standings_core.structure import Match, Team

logger = logging.getLogger(__name__)

SnapshotCallback = Callable[[List[Match]], None]


class SnapshotStore:
    """Matches and teams keyed by ID, with per-tournament change callbacks."""

    def __init__(self, fmt: LeagueFormat = STANDARD_FORMAT):
        self.fmt = fmt
        self._matches: Dict[str, Match] = {}
        self._teams: Dict[str, Team] = {}
        self._subscribers: Dict[Optional[str], List[SnapshotCallback]] = defaultdict(list)
        self._lock = threading.RLock()

    # Reading

    def list_matches(self, tournament_id: Optional[str]) -> List[Match]:
        with self._lock:
            return [m for m in self._matches.values() if m.tournament_id == tournament_id]

    def list_teams(self, tournament_id: Optional[str]) -> List[Team]:
        with self._lock:
            return [t for t in self._teams.values() if t.tournament_id == tournament_id]

    def tournaments(self) -> List[str]:
        """IDs of every tournament with at least one team or match."""
        with self._lock:
            ids = {m.tournament_id for m in self._matches.values()}
            ids.update(t.tournament_id for t in self._teams.values())
        return sorted(i for i in ids if i is not None)

    # Subscriptions

    def subscribe(
        self, tournament_id: Optional[str], callback: SnapshotCallback
    ) -> Callable[[], None]:
        """Call `callback` with the tournament's matches now and after every change.

        Returns a function that cancels the subscription.
        """
        with self._lock:
            self._subscribers[tournament_id].append(callback)
        callback(self.list_matches(tournament_id))

        def unsubscribe():
            with self._lock:
                callbacks = self._subscribers.get(tournament_id, [])
                if callback in callbacks:
                    callbacks.remove(callback)

        return unsubscribe

    def _notify(self, tournament_id: Optional[str]) -> None:
        with self._lock:
            callbacks = list(self._subscribers.get(tournament_id, []))
            matches = self.list_matches(tournament_id)
        for callback in callbacks:
            callback(list(matches))

    # Writing

    def upsert_match(self, record: Mapping[str, Any]) -> Match:
        """Insert or replace a match document.

        Raises:
            ValueError: if the document has no ID
        """
        return self._put_match(match_from_record(record, self.fmt))

    def _put_match(self, match: Match) -> Match:
        with self._lock:
            previous = self._matches.get(match.id)
            self._matches[match.id] = match
        if previous is not None and previous.tournament_id != match.tournament_id:
            self._notify(previous.tournament_id)
        self._notify(match.tournament_id)
        return match

    def delete_match(self, match_id: str) -> Optional[Match]:
        with self._lock:
            match = self._matches.pop(match_id, None)
        if match is not None:
            self._notify(match.tournament_id)
        return match

    def upsert_team(self, record: Mapping[str, Any]) -> Team:
        """Insert or replace a team document.

        Team changes also notify subscribers, since standings list every team.

        Raises:
            ValueError: if the document has no ID
        """
        return self._put_team(team_from_record(record))

    def _put_team(self, team: Team) -> Team:
        with self._lock:
            self._teams[team.id] = team
        self._notify(team.tournament_id)
        return team

    def load(
        self,
        teams: Iterable[Mapping[str, Any]] = (),
        matches: Iterable[Mapping[str, Any]] = (),
    ) -> int:
        """Bulk-load documents, skipping malformed ones. Returns the number skipped.

        Errors raised by subscribers propagate.
        """
        skipped = 0
        for record in teams:
            try:
                team = team_from_record(record)
            except (TypeError, ValueError, AttributeError) as e:
                logger.warning("Skipping team record %r: %s", record, e)
                skipped += 1
            else:
                self._put_team(team)
        for record in matches:
            try:
                match = match_from_record(record, self.fmt)
            except (TypeError, ValueError, AttributeError) as e:
                logger.warning("Skipping match record %r: %s", record, e)
                skipped += 1
            else:
                self._put_match(match)
        return skipped

    # Import and export

    @classmethod
    def from_json(
        cls, source: Union[str, Path, IO[str]], fmt: LeagueFormat = STANDARD_FORMAT
    ) -> "SnapshotStore":
        """Load an exported snapshot: {"teams": [...], "matches": [...]}.

        Raises:
            OSError: if the file cannot be read
            ValueError: if it is not a JSON snapshot
        """
        if isinstance(source, (str, Path)):
            with open(source, "r", encoding="utf-8") as f:
                data = json.load(f)
        else:
            data = json.load(source)
        if not isinstance(data, dict):
            raise ValueError("Snapshot must be a JSON object with teams and matches")

        store = cls(fmt)
        skipped = store.load(data.get("teams") or [], data.get("matches") or [])
        logger.info(
            "Loaded %d teams and %d matches (%d skipped)",
            len(store._teams),
            len(store._matches),
            skipped,
        )
        return store

    def to_json(self, tournament_id: Optional[str] = None) -> Dict[str, list]:
        """Export the store (or one tournament) in the from_json layout."""
        with self._lock:
            teams = list(self._teams.values())
            matches = list(self._matches.values())
        if tournament_id is not None:
            teams = [t for t in teams if t.tournament_id == tournament_id]
            matches = [m for m in matches if m.tournament_id == tournament_id]
        return {
            "teams": [team_to_record(t) for t in teams],
            "matches": [match_to_record(m) for m in order_matches(matches, self.fmt)],
        }

    def dump(self, target: Union[str, Path], tournament_id: Optional[str] = None) -> None:
        with open(target, "w", encoding="utf-8") as f:
            json.dump(self.to_json(tournament_id), f, indent=2)
