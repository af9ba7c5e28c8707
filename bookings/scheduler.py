from apscheduler.schedulers.background import BackgroundScheduler
from django.conf import settings

from .tasks import advance_booking_lifecycle


def start():
    scheduler = BackgroundScheduler()
    scheduler.add_job(
        advance_booking_lifecycle,
        'interval',
        minutes=settings.BOOKING_LIFECYCLE_INTERVAL_MINUTES,
        id='advance_booking_lifecycle',
        replace_existing=True,
    )
    scheduler.start()
    return scheduler
