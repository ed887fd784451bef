"""
Shared handling for commands that read an exported league snapshot.
"""

from typing import Tuple

from django.core.exceptions import ImproperlyConfigured
from django.core.management.base import BaseCommand, CommandError

from hpl.league.conf import league_format
from hpl.league.store import SnapshotStore
from hpl.standings_core.engine import LeagueSnapshot


class SnapshotCommand(BaseCommand):
    """Base command taking a snapshot file and an optional tournament ID."""

    def add_arguments(self, parser):
        parser.add_argument("snapshot", type=str, help="Path to a JSON league snapshot")
        parser.add_argument(
            "--tournament",
            type=str,
            help="Tournament ID (default: the only tournament in the snapshot)",
        )

    def load_snapshot(self, options) -> Tuple[str, LeagueSnapshot]:
        """Read the snapshot file and pick the tournament to work on.

        Raises:
            CommandError: if the file cannot be read or the tournament is unknown
        """
        path = options["snapshot"]
        try:
            store = SnapshotStore.from_json(path)
        except OSError as e:
            raise CommandError(f"Error reading snapshot {path}: {e}")
        except ValueError as e:
            raise CommandError(f"Invalid snapshot {path}: {e}")

        tournaments = store.tournaments()
        tournament_id = options.get("tournament")
        if tournament_id is None:
            if len(tournaments) != 1:
                raise CommandError(
                    "Pass --tournament, the snapshot holds: "
                    + (", ".join(tournaments) or "no tournaments")
                )
            tournament_id = tournaments[0]
        elif tournament_id not in tournaments:
            raise CommandError(f"Tournament not found in snapshot: {tournament_id}")

        try:
            fmt = league_format(tournament_id)
        except ImproperlyConfigured as e:
            raise CommandError(str(e))

        return tournament_id, LeagueSnapshot(
            teams=store.list_teams(tournament_id),
            matches=store.list_matches(tournament_id),
            fmt=fmt,
        )
