from django.contrib import admin

from .models import Vehicle, VehicleStatus


@admin.register(Vehicle)
class VehicleAdmin(admin.ModelAdmin):
    list_display = ("name", "capacity_kg", "tyres", "status", "vehicle_type", "created_at")
    list_filter = ("status",)
    search_fields = ("name",)
    ordering = ("capacity_kg", "id")
    list_per_page = 50

    @admin.display(description="type")
    def vehicle_type(self, obj):
        return obj.vehicle_type

    # vehicles are retired, never deleted
    def has_delete_permission(self, request, obj=None):
        return False

    @admin.action(description="Send selected vehicles to maintenance")
    def to_maintenance(self, request, queryset):
        updated = queryset.exclude(status=VehicleStatus.RETIRED).update(status=VehicleStatus.MAINTENANCE)
        self.message_user(request, f"{updated} vehicle(s) moved to maintenance.")

    @admin.action(description="Reactivate selected vehicles")
    def to_active(self, request, queryset):
        updated = queryset.exclude(status=VehicleStatus.RETIRED).update(status=VehicleStatus.ACTIVE)
        self.message_user(request, f"{updated} vehicle(s) reactivated.")

    actions = ("to_maintenance", "to_active")
