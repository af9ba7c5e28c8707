# bookings/management/commands/check_booking_conflicts.py
from django.core.management.base import BaseCommand, CommandError

from bookings.services.conflicts import find_overlapping_pairs


class Command(BaseCommand):
    help = "Audit active bookings for vehicles booked twice over the same time."

    def add_arguments(self, parser):
        parser.add_argument(
            "--strict",
            action="store_true",
            help="Exit with an error if any overlapping pair is found.",
        )

    def handle(self, *args, **options):
        self.stdout.write("Scanning active bookings for overlaps...")

        result = find_overlapping_pairs()

        if not result["pairs"]:
            self.stdout.write(self.style.SUCCESS("No overlapping bookings."))
            return

        self.stdout.write(self.style.WARNING(f"Overlapping pairs: {result['pairs']}"))
        for s in result["samples"]:
            self.stdout.write(
                f"- vehicle={s['vehicle']} bookings={s['first']},{s['second']} window={s['window']}"
            )

        if options["strict"]:
            raise CommandError(f"{result['pairs']} overlapping booking pair(s) found")
