"""
Management command to print the standings table of a league snapshot.
"""

from hpl.league.management.base import SnapshotCommand
from hpl.standings_core.standings import rank_standings

HEADER = (
    f"{'Pos':>3}  {'Team':<28} {'P':>2} {'W':>2} {'L':>2} {'Pts':>3}"
    f" {'GW':>3} {'GL':>3} {'GD':>4} {'PW':>4} {'PL':>4} {'PD':>5}"
)


class Command(SnapshotCommand):
    help = "Print the standings table (and optionally fixtures) of a league snapshot"

    def add_arguments(self, parser):
        super().add_arguments(parser)
        parser.add_argument(
            "--fixtures",
            action="store_true",
            help="Also list every fixture with its status",
        )

    def handle(self, *args, **options):
        tournament_id, snapshot = self.load_snapshot(options)

        self.stdout.write(self.style.MIGRATE_HEADING(f"Standings: {tournament_id}"))
        self.stdout.write(HEADER)
        for position, s in rank_standings(snapshot.standings()):
            self.stdout.write(
                f"{position:>3}  {s.team_name[:28]:<28} {s.fixtures_played:>2}"
                f" {s.battle_wins:>2} {s.battle_losses:>2} {s.points:>3}"
                f" {s.game_wins:>3} {s.game_losses:>3} {s.games_difference:>+4}"
                f" {s.points_won:>4} {s.points_lost:>4} {s.points_difference:>+5}"
            )

        if options["fixtures"]:
            self.stdout.write("")
            self.stdout.write(self.style.MIGRATE_HEADING("Fixtures"))
            for fixture in snapshot.fixtures():
                self.stdout.write(self._fixture_line(fixture, snapshot.fmt))

    def _fixture_line(self, fixture, fmt) -> str:
        day = fixture.date.isoformat() if fixture.date else "TBD"
        line = (
            f"{day} {fixture.time or '--:--'}  {fixture.team1_name} "
            f"{fixture.side1_regular_wins}-{fixture.side2_regular_wins} "
            f"{fixture.team2_name}  [{fixture.status.value}]"
        )
        if fixture.is_playoff(fmt):
            line += f" {fixture.fixture_type}"
        return line
