"""
Management command to print one day's matches of a league snapshot.

Player line-ups are masked until shortly before each match starts, the same
way the public schedule screens do it.
"""

import datetime

from django.core.management.base import CommandError
from django.utils import timezone

from hpl.league.management.base import SnapshotCommand
from hpl.standings_core.ordering import closest_match_date, matches_on, order_matches
from hpl.standings_core.outcome import resolve_match
from hpl.standings_core.reveal import displayed_line_up
from hpl.standings_core.structure import MatchStatus
from hpl.standings_core.timeutils import parse_date


class Command(SnapshotCommand):
    help = "Print the matches of one day in schedule order, hiding line-ups until reveal"

    def add_arguments(self, parser):
        super().add_arguments(parser)
        parser.add_argument(
            "--date",
            type=str,
            help="Match day, YYYY-MM-DD (default: the match day closest to today)",
        )
        parser.add_argument(
            "--now",
            type=str,
            help="Local time to reveal line-ups against, YYYY-MM-DDTHH:MM (default: now)",
        )

    def handle(self, *args, **options):
        tournament_id, snapshot = self.load_snapshot(options)
        now = self._now(options["now"])

        if options["date"]:
            day = parse_date(options["date"])
            if day is None:
                raise CommandError(f"Invalid date: {options['date']}")
        else:
            day = closest_match_date(snapshot.matches, now.date())
            if day is None:
                self.stdout.write(self.style.WARNING("No dated matches in snapshot"))
                return

        fixtures_by_match = {
            match.id: fixture
            for fixture in snapshot.fixtures()
            for match in fixture.matches + fixture.excluded_matches
        }
        matches = order_matches(matches_on(snapshot.matches, day), snapshot.fmt)

        self.stdout.write(
            self.style.MIGRATE_HEADING(f"{tournament_id}: {day.isoformat()}")
        )
        if not matches:
            self.stdout.write("No matches on this day")
            return

        hidden = f"revealed {snapshot.fmt.reveal_lead_minutes} min before start"
        for match in matches:
            fixture = fixtures_by_match.get(match.id)
            side1 = displayed_line_up(match, True, fixture, now, snapshot.fmt) or hidden
            side2 = displayed_line_up(match, False, fixture, now, snapshot.fmt) or hidden
            self.stdout.write(
                f"{match.time or '--:--'}  {match.court or '-':<8} "
                f"{match.display_label:<20} {side1} vs {side2}{self._result(match)}"
            )

    @staticmethod
    def _now(value) -> datetime.datetime:
        """Naive local wall-clock time, matching how match times are stored."""
        if value:
            try:
                now = datetime.datetime.fromisoformat(value)
            except ValueError:
                raise CommandError(f"Invalid time: {value}")
            if timezone.is_aware(now):
                now = timezone.localtime(now).replace(tzinfo=None)
            return now
        return timezone.localtime().replace(tzinfo=None)

    @staticmethod
    def _result(match) -> str:
        if match.status is MatchStatus.SCHEDULED:
            return ""
        outcome = resolve_match(match)
        return f"  [{match.status.value} {outcome.side1_games}-{outcome.side2_games}]"
