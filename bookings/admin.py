from django.contrib import admin, messages
from rangefilter.filters import DateTimeRangeFilter

from .exceptions import BookingError
from .models import Booking
from .services.admission import cancel_booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "id", "vehicle", "customer_id",
        "from_pincode", "to_pincode",
        "start_time", "end_time",
        "status", "total_cost",
    )
    list_select_related = ("vehicle",)
    list_per_page = 20

    list_filter = (
        "status",
        "vehicle",
        ("start_time", DateTimeRangeFilter),
    )
    search_fields = ("customer_id", "vehicle__name", "from_pincode", "to_pincode")

    # admission derives these; editing them here would skip the conflict check
    readonly_fields = (
        "vehicle", "start_time", "end_time",
        "estimated_ride_duration_hours", "total_cost",
        "created_at", "updated_at",
    )

    def has_add_permission(self, request):
        return False

    @admin.action(description="Cancel selected bookings")
    def cancel_selected(self, request, queryset):
        cancelled = 0
        for booking in queryset:
            try:
                cancel_booking(booking.pk)
                cancelled += 1
            except BookingError as e:
                self.message_user(request, f"Booking {booking.pk}: {e.message}", level=messages.WARNING)
        self.message_user(request, f"{cancelled} booking(s) cancelled.")

    actions = ("cancel_selected",)
