"""
Management command to write a seeded league season to a JSON snapshot.

The snapshot uses the match store document layout, so it can be fed to
show_standings and show_schedule or loaded into a SnapshotStore.
"""

import json

from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone
from faker import Faker

from hpl.league.seeders import SnapshotSeeder
from hpl.standings_core.timeutils import parse_date


class Command(BaseCommand):
    help = "Write a seeded round-robin league snapshot to a JSON file"

    def add_arguments(self, parser):
        parser.add_argument("output", type=str, help="Path of the JSON file to write")
        parser.add_argument(
            "--teams",
            type=int,
            default=6,
            help="Number of teams (default: 6)",
        )
        parser.add_argument(
            "--tournament",
            type=str,
            default="hpl-season",
            help="Tournament ID (default: hpl-season)",
        )
        parser.add_argument(
            "--seed",
            type=int,
            help="Random seed for repeatable snapshots",
        )
        parser.add_argument(
            "--completion",
            type=float,
            default=0.5,
            help="Share of fixtures already played, 0 to 1 (default: 0.5)",
        )
        parser.add_argument(
            "--start-date",
            type=str,
            help="Date of the first round, YYYY-MM-DD (default: today)",
        )
        parser.add_argument(
            "--playoffs",
            action="store_true",
            help="Add scheduled playoff fixtures after the league rounds",
        )
        parser.add_argument(
            "--locale",
            type=str,
            default="en_US",
            help="Faker locale for team and player names (default: en_US)",
        )

    def handle(self, *args, **options):
        fake = Faker(options["locale"])
        if options["seed"] is not None:
            fake.seed_instance(options["seed"])

        start_date = timezone.localdate()
        if options["start_date"]:
            start_date = parse_date(options["start_date"])
            if start_date is None:
                raise CommandError(f"Invalid start date: {options['start_date']}")

        seeder = SnapshotSeeder(fake)
        try:
            snapshot = seeder.seed(
                teams=options["teams"],
                tournament_id=options["tournament"],
                start_date=start_date,
                completion=options["completion"],
                playoffs=options["playoffs"],
            )
        except ValueError as e:
            raise CommandError(str(e))

        try:
            with open(options["output"], "w", encoding="utf-8") as f:
                json.dump(snapshot, f, indent=2)
        except OSError as e:
            raise CommandError(f"Error writing snapshot: {e}")

        self.stdout.write(
            self.style.SUCCESS(
                f"✓ Wrote {len(snapshot['teams'])} teams and "
                f"{len(snapshot['matches'])} matches to {options['output']}"
            )
        )
