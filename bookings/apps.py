import os
from django.apps import AppConfig
from django.conf import settings


class BookingsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "bookings"
    verbose_name = "Bookings"

    def ready(self):
        # 1) lifecycle signal receivers (logging)
        from . import signals  # noqa

        # 2) lifecycle scheduler, main runserver process only
        if settings.BOOKING_SCHEDULER_ENABLED and os.environ.get("RUN_MAIN") == "true":
            from . import scheduler
            scheduler.start()
