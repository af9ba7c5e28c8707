# bookings/management/commands/advance_bookings.py
from django.core.management.base import BaseCommand

from bookings.tasks import advance_booking_lifecycle


class Command(BaseCommand):
    help = "Move bookings along their lifecycle: confirmed -> in-progress -> completed."

    def handle(self, *args, **options):
        result = advance_booking_lifecycle()
        self.stdout.write(self.style.SUCCESS(
            f"Done: {result['started']} started, {result['completed']} completed."
        ))
