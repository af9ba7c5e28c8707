from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator, MinValueValidator, RegexValidator
from django.db import models

from vehicles.models import Vehicle

from .services.intervals import Interval

pincode_validator = RegexValidator(r"^\d{6}$", "Pincode must be exactly 6 digits")


class BookingStatus(models.TextChoices):
    CONFIRMED   = "confirmed",   "Confirmed"
    IN_PROGRESS = "in-progress", "In progress"
    COMPLETED   = "completed",   "Completed"
    CANCELLED   = "cancelled",   "Cancelled"


# statuses that occupy the vehicle
ACTIVE_STATUSES = (BookingStatus.CONFIRMED, BookingStatus.IN_PROGRESS)


class BookingQuerySet(models.QuerySet):
    def active(self):
        return self.filter(status__in=ACTIVE_STATUSES)

    def for_vehicle(self, vehicle):
        return self.filter(vehicle=vehicle)

    def overlapping(self, vehicle, start, end, *, exclude_id=None):
        """
        Active bookings of *vehicle* whose window intersects [start, end).
        Half-open on both sides: back-to-back windows do not match.
        """
        qs = self.for_vehicle(vehicle).active().filter(
            start_time__lt=end,
            end_time__gt=start,
        )
        if exclude_id is not None:
            qs = qs.exclude(pk=exclude_id)
        return qs.order_by("start_time", "id")


class Booking(models.Model):
    vehicle = models.ForeignKey(
        Vehicle,
        on_delete=models.PROTECT,
        related_name="bookings",
        verbose_name="vehicle",
    )
    customer_id = models.CharField("customer", max_length=50, db_index=True)
    from_pincode = models.CharField("from pincode", max_length=6, validators=[pincode_validator])
    to_pincode = models.CharField("to pincode", max_length=6, validators=[pincode_validator])

    start_time = models.DateTimeField("start")
    end_time = models.DateTimeField("end")
    estimated_ride_duration_hours = models.PositiveSmallIntegerField(
        "estimated duration (h)",
        validators=[MinValueValidator(1), MaxValueValidator(24)],
    )

    status = models.CharField(
        "status",
        max_length=20,
        choices=BookingStatus.choices,
        default=BookingStatus.CONFIRMED,
        db_index=True,
    )
    total_cost = models.DecimalField(
        "total cost",
        max_digits=14,
        decimal_places=2,
        default=0,
        validators=[MinValueValidator(0)],
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = BookingQuerySet.as_manager()

    class Meta:
        verbose_name = "booking"
        verbose_name_plural = "bookings"
        indexes = [
            models.Index(fields=["vehicle", "start_time", "end_time"], name="booking_vehicle_window_idx"),
            models.Index(fields=["customer_id", "-created_at"], name="booking_customer_recent_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_time__gt=models.F("start_time")),
                name="booking_end_after_start",
            ),
        ]

    @classmethod
    def from_db(cls, db, field_names, values):
        instance = super().from_db(db, field_names, values)
        instance._loaded_vehicle_id = instance.__dict__.get("vehicle_id")
        return instance

    def save(self, *args, **kwargs):
        # the vehicle is fixed once the booking exists
        loaded = getattr(self, "_loaded_vehicle_id", None)
        if loaded is not None and self.vehicle_id != loaded:
            raise ValidationError("The vehicle of an existing booking cannot be changed.")
        super().save(*args, **kwargs)
        self._loaded_vehicle_id = self.vehicle_id

    def __str__(self):
        return f"{self.vehicle_id} {self.start_time:%Y-%m-%d %H:%M} ~ {self.end_time:%H:%M} [{self.status}]"

    @property
    def window(self):
        return Interval(self.start_time, self.end_time)

    @property
    def is_active(self):
        return self.status in ACTIVE_STATUSES

    @property
    def actual_duration_hours(self):
        if self.start_time and self.end_time:
            return (self.end_time - self.start_time).total_seconds() / 3600
        return self.estimated_ride_duration_hours

    def overlaps_with(self, start, end):
        return self.window.overlaps(Interval(start, end))

    def to_dict(self, vehicle_summary=True):
        data = {
            "id": self.pk,
            "vehicleId": self.vehicle_id,
            "customerId": self.customer_id,
            "fromPincode": self.from_pincode,
            "toPincode": self.to_pincode,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "estimatedRideDurationHours": self.estimated_ride_duration_hours,
            "status": self.status,
            "totalCost": self.total_cost,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
        if vehicle_summary:
            data["vehicle"] = self.vehicle.to_summary()
        return data
