from django.core.validators import MaxValueValidator, MinLengthValidator, MinValueValidator
from django.db import models


class VehicleStatus(models.TextChoices):
    ACTIVE      = "active",      "Active"
    MAINTENANCE = "maintenance", "Maintenance"
    RETIRED     = "retired",     "Retired"


# capacity band -> label, checked in ascending order
VEHICLE_TYPE_BANDS = (
    (1000, "Small"),
    (5000, "Medium"),
    (15000, "Large"),
)


class VehicleQuerySet(models.QuerySet):
    def active(self):
        return self.filter(status=VehicleStatus.ACTIVE)

    def active_by_min_capacity(self, capacity_kg):
        """
        Booking candidates: active vehicles that can carry *capacity_kg*,
        smallest first. Ties keep insertion order (pk).
        """
        return (
            self.active()
            .filter(capacity_kg__gte=capacity_kg)
            .order_by("capacity_kg", "id")
        )


class Vehicle(models.Model):
    name = models.CharField(
        "name",
        max_length=100,
        validators=[MinLengthValidator(2)],
    )
    capacity_kg = models.PositiveIntegerField(
        "capacity (kg)",
        validators=[MinValueValidator(1), MaxValueValidator(50000)],
    )
    tyres = models.PositiveSmallIntegerField(
        "tyres",
        validators=[MinValueValidator(2), MaxValueValidator(18)],
    )
    status = models.CharField(
        "status",
        max_length=20,
        choices=VehicleStatus.choices,
        default=VehicleStatus.ACTIVE,
        db_index=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = VehicleQuerySet.as_manager()

    class Meta:
        verbose_name = "vehicle"
        verbose_name_plural = "vehicles"
        indexes = [
            models.Index(fields=["capacity_kg", "status"], name="vehicle_capacity_status_idx"),
            models.Index(fields=["name"], name="vehicle_name_idx"),
        ]

    def __str__(self):
        return f"{self.name} ({self.capacity_kg} kg)"

    @property
    def vehicle_type(self):
        for upper, label in VEHICLE_TYPE_BANDS:
            if self.capacity_kg <= upper:
                return label
        return "Heavy Duty"

    @property
    def is_bookable(self):
        return self.status == VehicleStatus.ACTIVE

    def can_handle_capacity(self, required_kg):
        return self.is_bookable and self.capacity_kg >= required_kg

    def to_dict(self):
        return {
            "id": self.pk,
            "name": self.name,
            "capacityKg": self.capacity_kg,
            "tyres": self.tyres,
            "status": self.status,
            "vehicleType": self.vehicle_type,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    def to_summary(self):
        return {
            "id": self.pk,
            "name": self.name,
            "capacityKg": self.capacity_kg,
            "tyres": self.tyres,
            "status": self.status,
        }
